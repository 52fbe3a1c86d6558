"""
OHLC bar plotter.
"""

from typing import Iterable

from matplotlib.axes import Axes
from matplotlib.collections import LineCollection

from .plotter import BarPlotter, bar_spacing
from .tohlcv import TOHLCVLike, copy_tohlcvs


# Length of the open and close ticks relative to the bar spacing
DEFAULT_TICK_WIDTH = 0.3

DEFAULT_COLOR_UP = "#008000"
DEFAULT_COLOR_DOWN = "#C40000"


class OHLCBars(BarPlotter):
    """
    Draws time, open, high, low, close tuples as OHLC bars.

    Each bar is a vertical line from low to high with the open as a tick
    to the left and the close as a tick to the right.
    """

    def __init__(
        self,
        data: Iterable[TOHLCVLike],
        color_up: str = DEFAULT_COLOR_UP,
        color_down: str = DEFAULT_COLOR_DOWN,
        line_width: float = 1.0,
        tick_width: float = DEFAULT_TICK_WIDTH,
    ):
        self.bars = copy_tohlcvs(data)
        self.color_up = color_up
        self.color_down = color_down
        self.line_width = line_width
        self.tick_width = tick_width

    def plot(self, ax: Axes) -> list:
        if not self.bars:
            return []

        xs = self.xs()
        tick = self.tick_width * bar_spacing(xs)

        segments, colors = [], []
        for x, bar in zip(xs, self.bars):
            color = self.color(bar, self.color_up, self.color_down)
            segments.append([(x, bar.low), (x, bar.high)])
            segments.append([(x - tick, bar.open), (x, bar.open)])
            segments.append([(x, bar.close), (x + tick, bar.close)])
            colors.extend([color] * 3)

        lines = LineCollection(segments, colors=colors, linewidths=self.line_width)
        ax.add_collection(lines, autolim=True)
        ax.xaxis_date()
        ax.autoscale_view()
        return [lines]
