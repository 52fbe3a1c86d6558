"""
Artificial TOHLCV data for examples and tests.
"""

from datetime import datetime, timedelta
from zoneinfo import ZoneInfo

import numpy as np

from .charts.tohlcv import TOHLCV


START_TIME = datetime(2000, 1, 2, 3, 4, 5, tzinfo=ZoneInfo("America/New_York"))


def _fractal_walk(m: int, rng: np.random.Generator) -> np.ndarray:
    """
    Midpoint-displacement style random walk around 100.

    Each pass blends linearly between random steps k samples apart,
    halving k until it reaches 1, so coarse moves get finer detail
    layered on top.
    """
    fract = np.full(m, 100.0)
    stat1 = stat2 = 0.0
    k = m
    while k > 0:
        j = 0
        for i in range(m):
            if j == 0:
                j = k
                stat2 = stat1
                stat1 = 10.0 * (k / m + 0.02) * (2.0 * rng.random() - 1.0)
            fract[i] += (k - j) / k * stat1 + j / k * stat2
            j -= 1
        k //= 2
    return fract


def create_tohlcv_example_data(n: int, seed: int = 1) -> list[TOHLCV]:
    """
    Generate n one-minute bars of fake market data.

    The same seed always gives the same bars.
    """
    rng = np.random.default_rng(seed)
    fract = _fractal_walk(4 * n, rng)

    bars = []
    for i in range(n):
        quad = fract[4 * i:4 * i + 4]
        o = float(quad[0])
        h = float(quad.max())
        l = float(quad.min())
        c = float(quad[3])
        bars.append(TOHLCV(
            timestamp=START_TIME + timedelta(minutes=i),
            open=o,
            high=h,
            low=l,
            close=c,
            volume=(h - l + abs(c - o)) * 100,  # just a fake volume
        ))
    return bars
