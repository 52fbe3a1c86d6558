"""
plotext - financial chart primitives and aligned panel layouts for matplotlib.
"""

from .align import align_axes, axes_margins, axes_measure, unite_axis_ranges
from .errors import DataError, PlotextError, TableError, TableShapeError
from .table import Measure, Spacing, Table, crop

__version__ = "0.1.0"

__all__ = [
    "DataError",
    "Measure",
    "PlotextError",
    "Spacing",
    "Table",
    "TableError",
    "TableShapeError",
    "align_axes",
    "axes_margins",
    "axes_measure",
    "crop",
    "unite_axis_ranges",
]
