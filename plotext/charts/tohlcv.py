"""
Time, open, high, low, close, volume records for the financial plotters.
"""

import math
from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, Sequence, Union

import numpy as np

from ..errors import DataError


@dataclass(frozen=True)
class TOHLCV:
    """Single OHLCV bar"""
    timestamp: datetime
    open: float
    high: float
    low: float
    close: float
    volume: float

    @property
    def is_up(self) -> bool:
        """True when the bar closed at or above its open"""
        return self.close >= self.open


@dataclass(frozen=True)
class TOHLCVMA(TOHLCV):
    """OHLCV bar with a moving average value (NaN while undefined)"""
    ma: float = math.nan


TOHLCVLike = Union[TOHLCV, Sequence]


def check_floats(*values: float):
    """Raise DataError if any value is NaN or infinite."""
    for v in values:
        if math.isnan(v):
            raise DataError("NaN data point")
        if math.isinf(v):
            raise DataError("infinite data point")


def copy_tohlcvs(data: Iterable[TOHLCVLike]) -> list[TOHLCV]:
    """
    Copy bars into a validated list.

    Accepts TOHLCV records or (timestamp, open, high, low, close, volume)
    tuples.

    Raises:
        DataError: If a price or volume is NaN or infinite
    """
    bars = []
    for item in data:
        if isinstance(item, TOHLCV):
            t, o, h, l, c, v = (
                item.timestamp, item.open, item.high, item.low, item.close, item.volume
            )
        else:
            t, o, h, l, c, v = item
        o, h, l, c, v = float(o), float(h), float(l), float(c), float(v)
        check_floats(o, h, l, c, v)
        bars.append(TOHLCV(t, o, h, l, c, v))
    return bars


def copy_tohlcvmas(data: Iterable[TOHLCVLike]) -> list[TOHLCVMA]:
    """
    Copy bars with moving average into a validated list.

    Accepts TOHLCVMA records or 7-tuples. The moving average itself may
    be NaN; the OHLCV values may not.
    """
    bars = []
    for item in data:
        if isinstance(item, TOHLCVMA):
            t, o, h, l, c, v, ma = (
                item.timestamp, item.open, item.high, item.low,
                item.close, item.volume, item.ma,
            )
        else:
            t, o, h, l, c, v, ma = item
        o, h, l, c, v = float(o), float(h), float(l), float(c), float(v)
        check_floats(o, h, l, c, v)
        bars.append(TOHLCVMA(t, o, h, l, c, v, float(ma)))
    return bars


def moving_average(values: Sequence[float], window: int) -> np.ndarray:
    """
    Simple moving average.

    The first window - 1 entries are NaN since there's not enough
    history to average over.
    """
    if window < 1:
        raise ValueError(f"window must be at least 1, got {window}")

    values = np.asarray(values, dtype=float)
    result = np.full(len(values), np.nan)
    if len(values) < window:
        return result

    cumsum = np.cumsum(np.insert(values, 0, 0.0))
    result[window - 1:] = (cumsum[window:] - cumsum[:-window]) / window
    return result


def with_moving_average(bars: Iterable[TOHLCVLike], window: int) -> list[TOHLCVMA]:
    """Attach the moving average of the closes to each bar."""
    bars = copy_tohlcvs(bars)
    ma = moving_average([bar.close for bar in bars], window)
    return [
        TOHLCVMA(bar.timestamp, bar.open, bar.high, bar.low, bar.close, bar.volume, float(m))
        for bar, m in zip(bars, ma)
    ]
