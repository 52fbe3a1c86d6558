"""
Candlestick plotters.
"""

import math
from typing import Iterable

from matplotlib.axes import Axes
from matplotlib.collections import LineCollection, PolyCollection

from .plotter import BarPlotter, bar_spacing
from .tohlcv import TOHLCVLike, copy_tohlcvmas, copy_tohlcvs, with_moving_average


# Candle body width relative to the spacing between bars
DEFAULT_CANDLE_WIDTH = 0.6

DEFAULT_COLOR_UP = "#80C080"  # eye is more sensitive to green
DEFAULT_COLOR_DOWN = "#FF8080"


class Candlesticks(BarPlotter):
    """
    Draws time, open, high, low, close tuples as candlesticks.

    Attributes:
        color_up: Body fill where close >= open
        color_down: Body fill where close < open
        line_color: Wick and border color when fixed_line_color is set
        line_width: Wick and border width in points
        candle_width: Body width as a fraction of the bar spacing
        fixed_line_color: If False, wicks and borders take the body's fill color
    """

    _copy = staticmethod(copy_tohlcvs)

    def __init__(
        self,
        data: Iterable[TOHLCVLike],
        color_up: str = DEFAULT_COLOR_UP,
        color_down: str = DEFAULT_COLOR_DOWN,
        line_color: str = "#000000",
        line_width: float = 1.0,
        candle_width: float = DEFAULT_CANDLE_WIDTH,
        fixed_line_color: bool = True,
    ):
        self.bars = self._copy(data)
        self.color_up = color_up
        self.color_down = color_down
        self.line_color = line_color
        self.line_width = line_width
        self.candle_width = candle_width
        self.fixed_line_color = fixed_line_color

    def plot(self, ax: Axes) -> list:
        if not self.bars:
            return []

        xs = self.xs()
        half = self.candle_width * bar_spacing(xs) / 2

        wicks, wick_colors = [], []
        bodies, fills, borders = [], [], []
        for x, bar in zip(xs, self.bars):
            fill = self.color(bar, self.color_up, self.color_down)
            line = self.line_color if self.fixed_line_color else fill
            top = max(bar.open, bar.close)
            bottom = min(bar.open, bar.close)

            wicks.append([(x, bar.high), (x, top)])
            wicks.append([(x, bar.low), (x, bottom)])
            wick_colors.extend([line, line])

            bodies.append([(x - half, top), (x + half, top), (x + half, bottom), (x - half, bottom)])
            fills.append(fill)
            borders.append(line)

        wick_lines = LineCollection(wicks, colors=wick_colors, linewidths=self.line_width, zorder=2)
        body_polys = PolyCollection(
            bodies,
            facecolors=fills,
            edgecolors=borders,
            linewidths=self.line_width,
            zorder=3,
        )
        ax.add_collection(wick_lines, autolim=True)
        ax.add_collection(body_polys, autolim=True)
        ax.xaxis_date()
        ax.autoscale_view()
        return [wick_lines, body_polys]


class CandlesticksWithMovingAverage(Candlesticks):
    """
    Candlesticks with a moving average curve on top.

    The curve skips the first window - 1 bars, whose average is undefined.
    """

    _copy = staticmethod(copy_tohlcvmas)

    def __init__(
        self,
        data: Iterable[TOHLCVLike],
        window: int,
        ma_color: str = "#1565C0",
        ma_width: float = 2.0,
        **kwargs,
    ):
        super().__init__(data, **kwargs)
        self.window = window
        self.ma_color = ma_color
        self.ma_width = ma_width

    @classmethod
    def from_bars(cls, bars: Iterable[TOHLCVLike], window: int, **kwargs) -> "CandlesticksWithMovingAverage":
        """Compute the moving average of the closes and build the plotter."""
        return cls(with_moving_average(bars, window), window, **kwargs)

    def ma_points(self) -> tuple[list[float], list[float]]:
        """X and Y values of the moving average curve"""
        xs, ys = [], []
        for i, (x, bar) in enumerate(zip(self.xs(), self.bars)):
            if i < self.window - 1 or math.isnan(bar.ma):
                continue
            xs.append(float(x))
            ys.append(bar.ma)
        return xs, ys

    def plot(self, ax: Axes) -> list:
        artists = super().plot(ax)
        xs, ys = self.ma_points()
        if xs:
            artists.extend(ax.plot(xs, ys, color=self.ma_color, linewidth=self.ma_width, zorder=4))
        return artists
