"""
Financial chart plotters for matplotlib.

Candlesticks, OHLC bars, volume bars and moving averages, plus a chart
generator that stacks a price panel above an aligned volume panel.
"""

from .candlesticks import Candlesticks, CandlesticksWithMovingAverage
from .generator import ChartGenerator
from .ohlcbars import OHLCBars
from .plotter import BarPlotter, Plotter, bar_spacing
from .themes import ChartTheme, DarkTheme, LightTheme, get_theme
from .tohlcv import (
    TOHLCV,
    TOHLCVMA,
    check_floats,
    copy_tohlcvmas,
    copy_tohlcvs,
    moving_average,
    with_moving_average,
)
from .vbars import VBars

__all__ = [
    "BarPlotter",
    "Candlesticks",
    "CandlesticksWithMovingAverage",
    "ChartGenerator",
    "ChartTheme",
    "DarkTheme",
    "LightTheme",
    "OHLCBars",
    "Plotter",
    "TOHLCV",
    "TOHLCVMA",
    "VBars",
    "bar_spacing",
    "check_floats",
    "copy_tohlcvmas",
    "copy_tohlcvs",
    "get_theme",
    "moving_average",
    "with_moving_average",
]
