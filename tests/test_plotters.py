"""
Tests for the financial plotters.
"""

import dataclasses
import math

import numpy as np
import pytest
import matplotlib.dates as mdates
from matplotlib.colors import to_rgba

from plotext.charts import (
    Candlesticks,
    CandlesticksWithMovingAverage,
    OHLCBars,
    VBars,
    bar_spacing,
    with_moving_average,
)


def _x(bar):
    return mdates.date2num(bar.timestamp)


class TestBarSpacing:
    """Tests for bar_spacing()"""

    def test_smallest_gap(self):
        """Test that the smallest distance wins"""
        assert bar_spacing([0.0, 2.0, 2.5, 5.0]) == pytest.approx(0.5)

    def test_unsorted(self):
        """Test that order doesn't matter"""
        assert bar_spacing([5.0, 0.0, 2.0]) == pytest.approx(2.0)

    def test_single_bar(self):
        """Test the fallback of one day"""
        assert bar_spacing([10.0]) == 1.0
        assert bar_spacing([]) == 1.0


class TestCandlesticks:
    """Tests for Candlesticks"""

    def test_data_range(self, sample_bars):
        """Test range covers timestamps and low/high"""
        xmin, xmax, ymin, ymax = Candlesticks(sample_bars).data_range()

        assert xmin == pytest.approx(_x(sample_bars[0]))
        assert xmax == pytest.approx(_x(sample_bars[-1]))
        assert ymin == 8.0
        assert ymax == 12.0

    def test_empty_data(self, ax):
        """Test that no data gives an infinite range and draws nothing"""
        sticks = Candlesticks([])
        xmin, xmax, ymin, ymax = sticks.data_range()

        assert math.isinf(xmin) and xmin > 0
        assert math.isinf(xmax) and xmax < 0
        assert sticks.plot(ax) == []

    def test_body_colors(self, ax, sample_bars):
        """Test that bodies are filled by direction"""
        sticks = Candlesticks(sample_bars, color_up="green", color_down="red")
        wicks, bodies = sticks.plot(ax)

        fills = bodies.get_facecolors()
        assert tuple(fills[0]) == to_rgba("green")
        assert tuple(fills[1]) == to_rgba("red")
        assert tuple(fills[2]) == to_rgba("green")

    def test_fixed_line_color(self, ax, sample_bars):
        """Test that wicks use line_color by default"""
        wicks, bodies = Candlesticks(sample_bars, line_color="blue").plot(ax)

        assert all(tuple(c) == to_rgba("blue") for c in wicks.get_colors())
        assert all(tuple(c) == to_rgba("blue") for c in bodies.get_edgecolors())

    def test_line_color_follows_fill(self, ax, sample_bars):
        """Test that wicks take the fill color when not fixed"""
        sticks = Candlesticks(sample_bars, color_up="green", color_down="red", fixed_line_color=False)
        wicks, bodies = sticks.plot(ax)

        colors = wicks.get_colors()
        # Two wicks per candle
        assert tuple(colors[0]) == to_rgba("green")
        assert tuple(colors[2]) == to_rgba("red")
        assert tuple(colors[3]) == to_rgba("red")

    def test_wick_and_body_geometry(self, ax, sample_bars):
        """Test wick ends and body width"""
        wicks, bodies = Candlesticks(sample_bars, candle_width=0.5).plot(ax)

        top, bottom = wicks.get_segments()[2], wicks.get_segments()[3]
        assert top[0][1] == 11.5 and top[1][1] == 11.0    # high to open
        assert bottom[0][1] == 8.0 and bottom[1][1] == 8.5  # low to close

        body = bodies.get_paths()[0].vertices
        width = body[:, 0].max() - body[:, 0].min()
        assert width == pytest.approx(0.5)  # bars are one day apart
        assert body[:, 1].max() == 11.0
        assert body[:, 1].min() == 10.0

    def test_axes_cover_data(self, ax, sample_bars):
        """Test that autoscaling covers every candle"""
        Candlesticks(sample_bars).plot(ax)
        lo, hi = ax.get_ylim()
        assert lo <= 8.0 and hi >= 12.0

        left, right = ax.get_xlim()
        assert left < _x(sample_bars[0]) and right > _x(sample_bars[-1])


class TestCandlesticksWithMovingAverage:
    """Tests for CandlesticksWithMovingAverage"""

    def test_ma_skips_window(self, example_bars):
        """Test that the curve starts at the window's last bar"""
        sticks = CandlesticksWithMovingAverage.from_bars(example_bars, 5)
        xs, ys = sticks.ma_points()

        assert len(xs) == len(example_bars) - 4
        assert xs[0] == pytest.approx(_x(example_bars[4]))
        expected = np.mean([bar.close for bar in example_bars[:5]])
        assert ys[0] == pytest.approx(expected)

    def test_nan_points_skipped(self, sample_bars):
        """Test that NaN averages beyond the window are left out"""
        bars = with_moving_average(sample_bars, 1)
        bars[1] = dataclasses.replace(bars[1], ma=math.nan)
        xs, _ = CandlesticksWithMovingAverage(bars, 1).ma_points()

        assert len(xs) == 2

    def test_plot_adds_curve(self, ax, example_bars):
        """Test that plotting draws candles and the curve"""
        sticks = CandlesticksWithMovingAverage.from_bars(example_bars, 5, ma_color="orange")
        artists = sticks.plot(ax)

        assert len(artists) == 3
        line = artists[-1]
        assert line.get_color() == "orange"
        assert len(line.get_xdata()) == len(example_bars) - 4

    def test_window_longer_than_data(self, ax, sample_bars):
        """Test that no curve is drawn without enough bars"""
        artists = CandlesticksWithMovingAverage.from_bars(sample_bars, 10).plot(ax)
        assert len(artists) == 2


class TestOHLCBars:
    """Tests for OHLCBars"""

    def test_three_segments_per_bar(self, ax, sample_bars):
        """Test the high-low bar and open/close ticks"""
        (lines,) = OHLCBars(sample_bars, tick_width=0.25).plot(ax)
        segments = lines.get_segments()

        assert len(segments) == 9
        x = _x(sample_bars[0])
        hl, open_tick, close_tick = segments[:3]
        assert hl[0][1] == 9.0 and hl[1][1] == 12.0
        assert open_tick[0][0] == pytest.approx(x - 0.25) and open_tick[0][1] == 10.0
        assert close_tick[1][0] == pytest.approx(x + 0.25) and close_tick[1][1] == 11.0

    def test_colors(self, ax, sample_bars):
        """Test that every part of a bar takes its direction's color"""
        (lines,) = OHLCBars(sample_bars, color_up="green", color_down="red").plot(ax)
        colors = [tuple(c) for c in lines.get_colors()]

        assert colors[:3] == [to_rgba("green")] * 3
        assert colors[3:6] == [to_rgba("red")] * 3

    def test_data_range(self, sample_bars):
        """Test that the range uses lows and highs"""
        _, _, ymin, ymax = OHLCBars(sample_bars).data_range()
        assert (ymin, ymax) == (8.0, 12.0)


class TestVBars:
    """Tests for VBars"""

    def test_data_range_starts_at_zero(self, sample_bars):
        """Test that the volume range always includes zero"""
        xmin, xmax, ymin, ymax = VBars(sample_bars).data_range()

        assert ymin == 0.0
        assert ymax == 2500.0
        assert xmax - xmin == pytest.approx(2.0)

    def test_bars(self, ax, sample_bars):
        """Test bar heights, widths and colors"""
        rects = VBars(sample_bars, color_up="green", color_down="red", bar_width=0.5).plot(ax)

        assert [r.get_height() for r in rects] == [1000.0, 2500.0, 1500.0]
        assert rects[0].get_width() == pytest.approx(0.5)
        assert rects[0].get_facecolor() == to_rgba("green")
        assert rects[1].get_facecolor() == to_rgba("red")

    def test_empty(self, ax):
        """Test that nothing is drawn without data"""
        assert VBars([]).plot(ax) == []
