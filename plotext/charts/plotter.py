"""
Base class for the financial plotters.

A plotter owns a validated copy of its data and knows how to draw it on
a matplotlib Axes. X values are matplotlib date numbers.
"""

import math
from abc import ABC, abstractmethod
from typing import Sequence

import matplotlib.dates as mdates
import numpy as np
from matplotlib.axes import Axes


DataRange = tuple[float, float, float, float]


def bar_spacing(xs: Sequence[float]) -> float:
    """
    Smallest distance between neighboring x values.

    Falls back to 1 (one day in date numbers) with fewer than two bars.
    """
    if len(xs) < 2:
        return 1.0
    return float(np.min(np.diff(np.sort(np.asarray(xs, dtype=float)))))


class Plotter(ABC):
    """
    Something that can be drawn on an Axes.

    Subclasses must implement:
    - plot()
    - data_range()
    """

    @abstractmethod
    def plot(self, ax: Axes):
        """Draw onto ax"""
        pass

    @abstractmethod
    def data_range(self) -> DataRange:
        """Return (xmin, xmax, ymin, ymax); infinities when there's no data"""
        pass


class BarPlotter(Plotter):
    """Plotter over a list of bars with a timestamp per bar."""

    bars: list

    def xs(self) -> np.ndarray:
        """Bar timestamps as date numbers"""
        return np.asarray(mdates.date2num([bar.timestamp for bar in self.bars]), dtype=float)

    def data_range(self) -> DataRange:
        xmin = ymin = math.inf
        xmax = ymax = -math.inf
        for x, bar in zip(self.xs(), self.bars):
            xmin = min(xmin, x)
            xmax = max(xmax, x)
            ymin = min(ymin, bar.low)
            ymax = max(ymax, bar.high)
        return xmin, xmax, ymin, ymax

    def color(self, bar, up: str, down: str) -> str:
        return up if bar.is_up else down
