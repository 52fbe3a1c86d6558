"""
Exceptions raised by plotext.
"""


class PlotextError(Exception):
    """Base exception for plotext errors"""
    pass


class TableError(PlotextError, ValueError):
    """Raised when a table is configured with unusable weights"""
    pass


class TableShapeError(TableError):
    """Raised when a plot grid doesn't match the table's rows and columns"""
    pass


class DataError(PlotextError, ValueError):
    """Raised when chart data contains NaN or infinite values"""
    pass
