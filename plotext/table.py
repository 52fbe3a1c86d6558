"""
Table layout for multi-panel figures.

A Table splits a canvas into cells whose rows and columns can have
different relative sizes. Table.align() goes one step further: it sizes
the cells so that the data areas of the plots inside them line up, even
when their tick labels need different amounts of room.

Coordinates follow matplotlib's display space: X grows to the right,
Y grows upward. Column 0 is the leftmost column and row 0 is the top row.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from matplotlib.transforms import Bbox

from .errors import TableError, TableShapeError

logger = logging.getLogger(__name__)


# Given the outer rectangle of a cell, return the rectangle the plot
# draws its data into.
Measure = Callable[[Bbox], Bbox]


def crop(rect: Bbox, left: float, right: float, bottom: float, top: float) -> Bbox:
    """
    Return a new Bbox with the given lengths added to rect's edges.

    left and right are added to xmin and xmax, bottom and top to ymin
    and ymax. Shrinking the right side therefore takes a negative value.
    """
    return Bbox.from_extents(
        rect.xmin + left,
        rect.ymin + bottom,
        rect.xmax + right,
        rect.ymax + top,
    )


@dataclass
class Spacing:
    """Largest margins seen along one row or column"""
    neg: float = 0.0  # left for columns, bottom for rows
    pos: float = 0.0  # right for columns, top for rows


@dataclass(frozen=True)
class Table:
    """
    Grid of cells with relative row heights and column widths.

    Example: row_heights=(2, 1) gives the first row 2/3 and the second
    row 1/3 of the height left over after padding.

    Attributes:
        row_heights: Relative height of each row, top to bottom
        col_widths: Relative width of each column, left to right
        pad_top, pad_bottom, pad_left, pad_right: Padding around the table
        pad_x: Padding between adjacent columns
        pad_y: Padding between adjacent rows
    """
    row_heights: Sequence[float]
    col_widths: Sequence[float]
    pad_top: float = 0.0
    pad_bottom: float = 0.0
    pad_left: float = 0.0
    pad_right: float = 0.0
    pad_x: float = 0.0
    pad_y: float = 0.0

    def __post_init__(self):
        # Freeze the weights so callers can't resize the table later
        object.__setattr__(self, "row_heights", tuple(float(h) for h in self.row_heights))
        object.__setattr__(self, "col_widths", tuple(float(w) for w in self.col_widths))

        if not self.row_heights or not self.col_widths:
            raise TableError("table needs at least one row and one column")
        if any(h <= 0 for h in self.row_heights):
            raise TableError(f"row heights must be positive: {self.row_heights}")
        if any(w <= 0 for w in self.col_widths):
            raise TableError(f"column widths must be positive: {self.col_widths}")

    @property
    def rows(self) -> int:
        return len(self.row_heights)

    @property
    def cols(self) -> int:
        return len(self.col_widths)

    def at(self, canvas: Bbox, x: int, y: int) -> Bbox:
        """
        Return the cell of canvas at column x, row y.

        The cell's size is proportional to its weights, net of the outer
        and inter-cell padding. Cells tile the padded canvas without gaps.
        """
        if not 0 <= x < self.cols:
            raise IndexError(f"column {x} out of range for table with {self.cols} columns")
        if not 0 <= y < self.rows:
            raise IndexError(f"row {y} out of range for table with {self.rows} rows")

        sum_col_widths = sum(self.col_widths)
        sum_col_widths_left = sum(self.col_widths[:x])
        sum_row_heights = sum(self.row_heights)
        sum_row_heights_above = sum(self.row_heights[:y])

        height_per_unit = (
            canvas.height - self.pad_top - self.pad_bottom - (self.rows - 1) * self.pad_y
        ) / sum_row_heights
        width_per_unit = (
            canvas.width - self.pad_left - self.pad_right - (self.cols - 1) * self.pad_x
        ) / sum_col_widths

        ymax = canvas.ymax - self.pad_top - y * self.pad_y - sum_row_heights_above * height_per_unit
        ymin = ymax - self.row_heights[y] * height_per_unit

        xmin = canvas.xmin + self.pad_left + x * self.pad_x + sum_col_widths_left * width_per_unit
        xmax = xmin + self.col_widths[x] * width_per_unit

        return Bbox.from_extents(xmin, ymin, xmax, ymax)

    def align(
        self,
        plots: Sequence[Sequence[Optional[Measure]]],
        canvas: Bbox,
    ) -> list[list[Bbox]]:
        """
        Compute cells whose data areas line up across rows and columns.

        Args:
            plots: Row-major grid of measure functions, None for empty cells
            canvas: Rectangle to lay the table out in

        Returns:
            Row-major grid of outer cell rectangles, one per slot

        Raises:
            TableShapeError: If the grid doesn't match the table's shape
        """
        if len(plots) != self.rows:
            raise TableShapeError(
                f"plots rows ({len(plots)}) != table rows ({self.rows})"
            )

        cells = []
        for j, row in enumerate(plots):
            if len(row) != self.cols:
                raise TableShapeError(
                    f"plots row {j} columns ({len(row)}) != table columns ({self.cols})"
                )
            cells.append([self.at(canvas, i, j) for i in range(self.cols)])

        x_spacing = [Spacing() for _ in range(self.cols)]
        y_spacing = [Spacing() for _ in range(self.rows)]

        # Largest margins between outer cell and data area per column and row
        for j, row in enumerate(plots):
            for i, measure in enumerate(row):
                if measure is None:
                    continue
                c = cells[j][i]
                data = measure(c)
                x_spacing[i].neg = max(data.xmin - c.xmin, x_spacing[i].neg)
                x_spacing[i].pos = max(c.xmax - data.xmax, x_spacing[i].pos)
                y_spacing[j].neg = max(data.ymin - c.ymin, y_spacing[j].neg)
                y_spacing[j].pos = max(c.ymax - data.ymax, y_spacing[j].pos)

        x_total_space = self.pad_left + self.pad_right + (self.cols - 1) * self.pad_x
        x_total_space += sum(s.neg + s.pos for s in x_spacing)
        y_total_space = self.pad_top + self.pad_bottom + (self.rows - 1) * self.pad_y
        y_total_space += sum(s.neg + s.pos for s in y_spacing)

        width_per_unit = (canvas.width - x_total_space) / sum(self.col_widths)
        height_per_unit = (canvas.height - y_total_space) / sum(self.row_heights)
        logger.debug(
            f"Aligning {self.rows}x{self.cols} table: "
            f"{width_per_unit:.2f} wide, {height_per_unit:.2f} high per unit"
        )

        aligned = [[None] * self.cols for _ in range(self.rows)]
        move_vertical = [0.0] * self.cols

        # Bottom row first so vertical offsets build up from the canvas bottom
        for j in range(self.rows - 1, -1, -1):
            move_horizontal = 0.0
            for i, measure in enumerate(plots[j]):
                c = cells[j][i]
                xs, ys = x_spacing[i], y_spacing[j]

                if measure is None:
                    width = c.width - xs.neg - xs.pos
                    height = c.height - ys.neg - ys.pos
                else:
                    # Give the data area the same offsets as the widest
                    # margins in its column and row
                    data = measure(c)
                    c = crop(
                        c,
                        xs.neg - (data.xmin - c.xmin),
                        c.xmax - data.xmax - xs.pos,
                        ys.neg - (data.ymin - c.ymin),
                        c.ymax - data.ymax - ys.pos,
                    )
                    data = measure(c)
                    width = data.width
                    height = data.height

                dx = width_per_unit * self.col_widths[i] - width
                dy = height_per_unit * self.row_heights[j] - height
                aligned[j][i] = crop(
                    c,
                    move_horizontal,
                    move_horizontal + dx,
                    move_vertical[i],
                    move_vertical[i] + dy,
                )
                move_horizontal += dx
                move_vertical[i] += dy

        return aligned
