"""
Tests for the example data generator.
"""

from datetime import timedelta

import pytest

from plotext.exampledata import START_TIME, create_tohlcv_example_data


class TestExampleData:
    """Tests for create_tohlcv_example_data()"""

    def test_length(self):
        """Test that n bars are generated"""
        assert len(create_tohlcv_example_data(20)) == 20

    def test_no_bars(self):
        """Test that zero bars is an empty list"""
        assert create_tohlcv_example_data(0) == []

    def test_deterministic(self):
        """Test that the same seed gives the same bars"""
        assert create_tohlcv_example_data(30) == create_tohlcv_example_data(30)

    def test_seed_changes_data(self):
        """Test that different seeds give different bars"""
        assert create_tohlcv_example_data(30, seed=1) != create_tohlcv_example_data(30, seed=2)

    def test_ohlc_consistent(self, example_bars):
        """Test that open and close lie between low and high"""
        for bar in example_bars:
            assert bar.low <= bar.open <= bar.high
            assert bar.low <= bar.close <= bar.high

    def test_fake_volume(self, example_bars):
        """Test volume derived from the bar's range and body"""
        for bar in example_bars:
            expected = (bar.high - bar.low + abs(bar.close - bar.open)) * 100
            assert bar.volume == pytest.approx(expected)
            assert bar.volume >= 0

    def test_one_minute_apart(self, example_bars):
        """Test timestamps start at the fixed time and step by a minute"""
        assert example_bars[0].timestamp == START_TIME
        for prev, bar in zip(example_bars, example_bars[1:]):
            assert bar.timestamp - prev.timestamp == timedelta(minutes=1)

    def test_prices_near_hundred(self, example_bars):
        """Test that the walk stays in a plausible band around 100"""
        for bar in example_bars:
            assert 50 < bar.low <= bar.high < 150
