"""
Pytest fixtures for plotext tests.
"""

import shutil
from datetime import datetime, timedelta
from pathlib import Path

import matplotlib
matplotlib.use("Agg")

import pytest
import matplotlib.pyplot as plt
from matplotlib.transforms import Bbox

from plotext import Table, crop
from plotext.charts import TOHLCV
from plotext.exampledata import create_tohlcv_example_data
from plotext.testing import golden_path

# RMS difference allowed between a render and its golden
GOLDEN_TOL = 1.0


@pytest.fixture
def reference_table():
    """Table with uneven weights and padding on every side"""
    #    2     3    1
    # +----+------+--+
    # |    |      |  | 3
    # +----+------+--+
    # |    |      |  | 1
    # +----+------+--+
    # |    |      |  | 2
    # +----+------+--+
    # +----+------+--+ 0.5
    return Table(
        col_widths=[2, 3, 1],
        row_heights=[3, 1, 2, 0.5],
        pad_top=1,
        pad_bottom=2,
        pad_right=3,
        pad_left=4,
        pad_x=5,
        pad_y=6,
    )


@pytest.fixture
def reference_canvas():
    """150 x 175 canvas at the origin"""
    return Bbox.from_bounds(0, 0, 150, 175)


@pytest.fixture
def inset():
    """Factory for measure functions with fixed margins"""
    def make(left=0.0, right=0.0, bottom=0.0, top=0.0):
        def measure(outer):
            return crop(outer, left, -right, bottom, -top)
        return measure
    return make


@pytest.fixture
def sample_bars():
    """Two up bars around one down bar, one day apart"""
    start = datetime(2024, 1, 2)
    return [
        TOHLCV(start, 10.0, 12.0, 9.0, 11.0, 1000.0),
        TOHLCV(start + timedelta(days=1), 11.0, 11.5, 8.0, 8.5, 2500.0),
        TOHLCV(start + timedelta(days=2), 8.5, 10.0, 8.5, 10.0, 1500.0),
    ]


@pytest.fixture
def example_bars():
    """Sixty bars of generated example data"""
    return create_tohlcv_example_data(60)


@pytest.fixture
def ax():
    """Fresh axes on a headless figure, closed after the test"""
    fig, axes = plt.subplots(figsize=(4, 3), dpi=100)
    yield axes
    plt.close(fig)


TESTDATA = Path(__file__).parent / "testdata"


def pytest_addoption(parser):
    parser.addoption(
        "--update-goldens",
        action="store_true",
        default=False,
        help="Rewrite the golden images in tests/testdata from this run",
    )


@pytest.fixture
def check_golden(request):
    """
    Compare a rendered image with tests/testdata/<name>_golden.png.

    With --update-goldens the rendered image becomes the new golden.
    """
    update = request.config.getoption("--update-goldens")

    def check(path, tol=GOLDEN_TOL):
        stored = TESTDATA / golden_path(path).name
        if update:
            TESTDATA.mkdir(exist_ok=True)
            shutil.copy(path, stored)
        if not stored.exists():
            pytest.skip(f"{stored.name} not found, run pytest --update-goldens to create it")

        shutil.copy(stored, golden_path(path))
        return compare_with_golden(path, tol=tol)

    return check
