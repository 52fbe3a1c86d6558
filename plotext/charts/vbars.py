"""
Volume bar plotter.
"""

import math
from typing import Iterable

from matplotlib.axes import Axes

from .ohlcbars import DEFAULT_COLOR_DOWN, DEFAULT_COLOR_UP
from .plotter import BarPlotter, DataRange, bar_spacing
from .tohlcv import TOHLCVLike, copy_tohlcvs


# Bar width relative to the spacing between bars
DEFAULT_BAR_WIDTH = 0.6


class VBars(BarPlotter):
    """Draws the volume of each bar, colored by the bar's direction."""

    def __init__(
        self,
        data: Iterable[TOHLCVLike],
        color_up: str = DEFAULT_COLOR_UP,
        color_down: str = DEFAULT_COLOR_DOWN,
        bar_width: float = DEFAULT_BAR_WIDTH,
        alpha: float = 1.0,
    ):
        self.bars = copy_tohlcvs(data)
        self.color_up = color_up
        self.color_down = color_down
        self.bar_width = bar_width
        self.alpha = alpha

    def data_range(self) -> DataRange:
        xmin = math.inf
        xmax = ymax = -math.inf
        for x, bar in zip(self.xs(), self.bars):
            xmin = min(xmin, x)
            xmax = max(xmax, x)
            ymax = max(ymax, bar.volume)
        return xmin, xmax, 0.0, ymax

    def plot(self, ax: Axes) -> list:
        if not self.bars:
            return []

        xs = self.xs()
        colors = [self.color(bar, self.color_up, self.color_down) for bar in self.bars]
        container = ax.bar(
            xs,
            [bar.volume for bar in self.bars],
            width=self.bar_width * bar_spacing(xs),
            color=colors,
            alpha=self.alpha,
            align="center",
        )
        ax.xaxis_date()
        return list(container)
