"""
Chart generator for financial price charts.

Draws a price panel (candlesticks, OHLC bars or candlesticks with a moving
average) above a volume panel. The panels are laid out with a Table so
their data areas line up even when the tick labels differ in width.
Uses matplotlib with Agg backend for headless rendering.
"""

import io
import base64
import logging
from pathlib import Path
from typing import Optional, Sequence

import matplotlib
matplotlib.use('Agg')  # Headless backend

import matplotlib.pyplot as plt
import matplotlib.dates as mdates
from matplotlib.figure import Figure
from matplotlib.ticker import FuncFormatter

from .candlesticks import Candlesticks, CandlesticksWithMovingAverage
from .ohlcbars import OHLCBars
from .plotter import BarPlotter
from .themes import ChartTheme, get_theme
from .tohlcv import TOHLCV
from .vbars import VBars
from ..align import align_axes, unite_axis_ranges
from ..table import Table

logger = logging.getLogger(__name__)


STYLES = ("candlesticks", "ohlc", "ma")

# Price panel gets 2/3 of the height, volume 1/3
PANEL_HEIGHTS = (2, 1)


class ChartGenerator:
    """
    Generates price charts as PNG images.

    Usage:
        generator = ChartGenerator(style="ohlc")
        png = generator.render(bars, symbol="AAPL")
    """

    def __init__(
        self,
        theme: str = "light",
        width: int = 900,
        height: int = 600,
        dpi: int = 100,
        style: str = "candlesticks",
        candle_width: float = 0.6,
        ma_window: int = 5,
    ):
        if style not in STYLES:
            raise ValueError(f"Unknown chart style {style!r}, expected one of {STYLES}")
        self.theme = get_theme(theme)
        self.width = width
        self.height = height
        self.dpi = dpi
        self.style = style
        self.candle_width = candle_width
        self.ma_window = ma_window

    def figure(
        self,
        bars: Sequence[TOHLCV],
        symbol: Optional[str] = None,
        show_volume: bool = True,
    ) -> Figure:
        """
        Build the chart figure.

        The caller owns the figure and should plt.close() it when done.
        """
        if not bars:
            raise ValueError("No data to chart")

        fig = plt.figure(
            figsize=(self.width / self.dpi, self.height / self.dpi),
            dpi=self.dpi,
            facecolor=self.theme.background,
        )

        # Positions are placeholders until align_axes() runs
        ax_price = fig.add_axes((0.1, 0.1, 0.8, 0.8))
        self._style_axis(ax_price)
        self._price_plotter(bars).plot(ax_price)

        axes_grid = [[ax_price]]
        row_heights = [1]

        if show_volume:
            ax_vol = fig.add_axes((0.1, 0.1, 0.8, 0.8))
            self._style_axis(ax_vol)
            VBars(
                bars,
                color_up=self.theme.bar_up,
                color_down=self.theme.bar_down,
                bar_width=self.candle_width,
                alpha=self.theme.volume_alpha,
            ).plot(ax_vol)
            ax_vol.yaxis.set_major_formatter(
                FuncFormatter(lambda x, p: self._format_volume(x))
            )
            ax_vol.set_ylabel("Volume", color=self.theme.text_color, fontsize=self.theme.label_size)

            unite_axis_ranges([ax_price, ax_vol], axis="x")
            ax_price.tick_params(axis='x', labelbottom=False)
            self._format_dates(ax_vol)
            axes_grid.append([ax_vol])
            row_heights = list(PANEL_HEIGHTS)
        else:
            self._format_dates(ax_price)

        # Y-axis formatting (price)
        ax_price.yaxis.set_major_formatter(
            FuncFormatter(lambda x, p: f"${x:,.2f}" if x >= 1 else f"${x:.4f}")
        )
        ax_price.set_ylabel("Price", color=self.theme.text_color, fontsize=self.theme.label_size)

        title = self._build_title(symbol, bars)
        ax_price.set_title(
            title,
            color=self.theme.title_color,
            fontsize=self.theme.title_size,
            fontweight='bold',
            loc='left',
        )

        pad = 0.1 * self.dpi  # 0.1 inch
        table = Table(
            row_heights=row_heights,
            col_widths=[1],
            pad_top=pad,
            pad_bottom=pad,
            pad_left=pad,
            pad_right=pad,
            pad_y=pad,
        )
        align_axes(fig, table, axes_grid)
        return fig

    def render(
        self,
        bars: Sequence[TOHLCV],
        symbol: Optional[str] = None,
        show_volume: bool = True,
    ) -> bytes:
        """Render the chart and return the PNG bytes."""
        fig = self.figure(bars, symbol=symbol, show_volume=show_volume)
        buf = io.BytesIO()
        try:
            fig.savefig(
                buf,
                format='png',
                dpi=self.dpi,
                facecolor=self.theme.background,
                edgecolor='none',
            )
        finally:
            plt.close(fig)

        data = buf.getvalue()
        logger.debug(f"Rendered {self.style} chart for {symbol or 'data'}: {len(data)} bytes")
        return data

    def generate(
        self,
        bars: Sequence[TOHLCV],
        symbol: Optional[str] = None,
        show_volume: bool = True,
    ) -> str:
        """Render the chart and return it as base64-encoded PNG."""
        png = self.render(bars, symbol=symbol, show_volume=show_volume)
        return base64.b64encode(png).decode('utf-8')

    def save(
        self,
        path,
        bars: Sequence[TOHLCV],
        symbol: Optional[str] = None,
        show_volume: bool = True,
    ) -> Path:
        """Render the chart into a PNG file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(self.render(bars, symbol=symbol, show_volume=show_volume))
        logger.info(f"Saved chart to {path}")
        return path

    def _price_plotter(self, bars: Sequence[TOHLCV]) -> BarPlotter:
        """Build the plotter for the configured style."""
        theme = self.theme
        if self.style == "ohlc":
            return OHLCBars(
                bars,
                color_up=theme.bar_up,
                color_down=theme.bar_down,
                line_width=theme.line_width,
                tick_width=self.candle_width / 2,
            )

        candle_style = dict(
            color_up=theme.candle_up,
            color_down=theme.candle_down,
            line_color=theme.line_color,
            line_width=theme.line_width,
            candle_width=self.candle_width,
        )
        if self.style == "ma":
            return CandlesticksWithMovingAverage.from_bars(
                bars,
                self.ma_window,
                ma_color=theme.ma_color,
                ma_width=theme.ma_width,
                **candle_style,
            )
        return Candlesticks(bars, **candle_style)

    def _style_axis(self, ax):
        """Apply theme styling to an axis."""
        ax.set_facecolor(self.theme.figure_background)

        # Spine styling
        for spine in ax.spines.values():
            spine.set_color(self.theme.axis_color)
            spine.set_linewidth(self.theme.spine_width)

        ax.grid(
            True,
            color=self.theme.grid_color,
            alpha=self.theme.grid_alpha,
            linestyle=self.theme.grid_style,
            linewidth=0.5,
        )
        ax.tick_params(
            colors=self.theme.text_color,
            labelsize=self.theme.label_size,
        )

    def _format_dates(self, ax):
        """Configure date tick labels on the bottom panel."""
        locator = mdates.AutoDateLocator()
        ax.xaxis.set_major_locator(locator)
        ax.xaxis.set_major_formatter(mdates.ConciseDateFormatter(locator))
        ax.tick_params(
            axis='x',
            colors=self.theme.text_color,
            labelsize=self.theme.label_size,
            rotation=0,
        )

    def _format_volume(self, x: float) -> str:
        """Format volume numbers with K/M/B suffixes."""
        if x >= 1_000_000_000:
            return f'{x/1_000_000_000:.1f}B'
        elif x >= 1_000_000:
            return f'{x/1_000_000:.1f}M'
        elif x >= 1_000:
            return f'{x/1_000:.0f}K'
        return str(int(x))

    def _build_title(self, symbol: Optional[str], bars: Sequence[TOHLCV]) -> str:
        """Build chart title string."""
        parts = [symbol.upper() if symbol else "Candlesticks and Volume Bars"]

        last = bars[-1].close
        parts.append(f"${last:,.2f}" if last >= 1 else f"${last:.4f}")

        first = bars[0].open
        if first:
            change_percent = (last - first) / first * 100
            sign = "+" if change_percent >= 0 else ""
            indicator = "▲" if change_percent >= 0 else "▼"
            parts.append(f"{indicator} {sign}{change_percent:.2f}%")

        return " · ".join(parts)
