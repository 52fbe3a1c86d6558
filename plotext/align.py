"""
matplotlib glue for Table layouts.

Turns matplotlib Axes into measure functions for Table.align() and moves
the axes onto the aligned cells afterwards.
"""

import logging
from typing import Iterable, Optional, Sequence

from matplotlib.axes import Axes
from matplotlib.figure import Figure
from matplotlib.transforms import Bbox

from .table import Measure, Table, crop

logger = logging.getLogger(__name__)


def axes_margins(ax: Axes, renderer=None) -> tuple[float, float, float, float]:
    """
    Measure the room an Axes needs around its data area.

    Returns:
        (left, right, bottom, top) in display units, never negative
    """
    if renderer is None:
        renderer = ax.figure.canvas.get_renderer()

    data = ax.get_window_extent(renderer)
    tight = ax.get_tightbbox(renderer)
    if tight is None:
        return 0.0, 0.0, 0.0, 0.0

    return (
        max(data.xmin - tight.xmin, 0.0),
        max(tight.xmax - data.xmax, 0.0),
        max(data.ymin - tight.ymin, 0.0),
        max(tight.ymax - data.ymax, 0.0),
    )


def axes_measure(ax: Axes, renderer=None) -> Measure:
    """
    Build a measure function for Table.align() from an Axes.

    Margins are taken once, from the axes as currently configured, so set
    limits, labels and titles before calling this.
    """
    left, right, bottom, top = axes_margins(ax, renderer)

    def measure(outer: Bbox) -> Bbox:
        return crop(outer, left, -right, bottom, -top)

    return measure


def align_axes(
    fig: Figure,
    table: Table,
    axes_grid: Sequence[Sequence[Optional[Axes]]],
) -> list[list[Bbox]]:
    """
    Lay out axes on a figure so their data areas line up.

    Args:
        fig: Figure holding the axes
        table: Row and column weights and padding, in display units
        axes_grid: Row-major grid of axes, None for empty cells

    Returns:
        Row-major grid of outer cell rectangles in display units
    """
    renderer = fig.canvas.get_renderer()
    measures = [
        [axes_measure(ax, renderer) if ax is not None else None for ax in row]
        for row in axes_grid
    ]

    canvas = Bbox.from_bounds(0, 0, fig.bbox.width, fig.bbox.height)
    cells = table.align(measures, canvas)

    to_figure = fig.transFigure.inverted()
    for ax_row, measure_row, cell_row in zip(axes_grid, measures, cells):
        for ax, measure, cell in zip(ax_row, measure_row, cell_row):
            if ax is None:
                continue
            ax.set_position(measure(cell).transformed(to_figure))

    logger.debug(f"Aligned {table.rows}x{table.cols} axes grid on {canvas.width:.0f}x{canvas.height:.0f} figure")
    return cells


def unite_axis_ranges(axes: Iterable[Axes], axis: str = "x") -> Optional[tuple[float, float]]:
    """
    Set one axis of all given axes to the union of their ranges.

    Args:
        axes: Axes to unite
        axis: "x" or "y"

    Returns:
        The shared (min, max), or None if no axes were given
    """
    if axis not in ("x", "y"):
        raise ValueError(f"axis must be 'x' or 'y', not {axis!r}")

    axes = list(axes)
    if not axes:
        return None

    limits = [ax.get_xlim() if axis == "x" else ax.get_ylim() for ax in axes]
    lo = min(min(lim) for lim in limits)
    hi = max(max(lim) for lim in limits)

    # Inverted axes stay inverted
    for ax in axes:
        if axis == "x":
            ax.set_xlim((hi, lo) if ax.xaxis_inverted() else (lo, hi))
        else:
            ax.set_ylim((hi, lo) if ax.yaxis_inverted() else (lo, hi))

    return lo, hi
