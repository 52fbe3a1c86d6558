"""
Chart color themes and styling constants.
"""

from dataclasses import dataclass


@dataclass
class ChartTheme:
    """Base chart theme configuration."""

    # Canvas
    background: str
    figure_background: str

    # Candle bodies
    candle_up: str      # Fill when close >= open
    candle_down: str    # Fill when close < open

    # OHLC bars and volume bars
    bar_up: str
    bar_down: str
    volume_alpha: float

    # Wicks, candle borders
    line_color: str
    line_width: float

    # Moving average curve
    ma_color: str
    ma_width: float

    # Grid
    grid_color: str
    grid_alpha: float
    grid_style: str

    # Text
    text_color: str
    title_color: str
    label_size: int
    title_size: int

    # Axes
    axis_color: str
    spine_width: float


# Light theme - matches the classic plotter colors
LightTheme = ChartTheme(
    background="#FFFFFF",
    figure_background="#FFFFFF",

    candle_up="#80C080",    # Eye is more sensitive to green
    candle_down="#FF8080",

    bar_up="#008000",
    bar_down="#C40000",
    volume_alpha=1.0,

    line_color="#000000",
    line_width=1.0,

    ma_color="#1565C0",     # Blue 800
    ma_width=2.0,

    grid_color="#E0E0E0",
    grid_alpha=0.5,
    grid_style="-",

    text_color="#424242",
    title_color="#212121",
    label_size=9,
    title_size=12,

    axis_color="#BDBDBD",
    spine_width=0.5,
)


# Dark theme
DarkTheme = ChartTheme(
    # Canvas - pure black for OLED
    background="#000000",
    figure_background="#000000",

    candle_up="#00C853",    # Material Green A400
    candle_down="#FF1744",  # Material Red A400

    bar_up="#00C853",
    bar_down="#FF1744",
    volume_alpha=0.5,

    line_color="#AAAAAA",
    line_width=1.0,

    ma_color="#F0F0F0",
    ma_width=2.0,

    # Grid - subtle
    grid_color="#333333",
    grid_alpha=0.3,
    grid_style=":",

    text_color="#AAAAAA",
    title_color="#FFFFFF",
    label_size=9,
    title_size=12,

    axis_color="#444444",
    spine_width=0.5,
)


THEMES = {
    "light": LightTheme,
    "dark": DarkTheme,
}


def get_theme(name: str = "light") -> ChartTheme:
    """Get theme by name."""
    return THEMES.get(name.lower(), LightTheme)
