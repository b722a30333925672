"""Grid coordinate system mapping column/row boxes to page points."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .config import DOT_SPACING, PAGE_HEIGHT, PAGE_WIDTH

_EPSILON = 1e-6


@dataclass(frozen=True)
class Rect:
    """Rectangle in page points; ``y`` is the top edge, origin bottom-left."""

    x: float
    y: float
    width: float
    height: float

    @property
    def top(self) -> float:
        return self.y

    @property
    def bottom(self) -> float:
        return self.y - self.height

    @property
    def right(self) -> float:
        return self.x + self.width


@dataclass(frozen=True)
class GridCell:
    """A box-aligned region of the grid."""

    col: float
    row: float
    width_boxes: float
    height_boxes: float

    @property
    def right_col(self) -> float:
        return self.col + self.width_boxes

    @property
    def bottom_row(self) -> float:
        return self.row + self.height_boxes


@dataclass(frozen=True)
class GridSpan:
    """One partition of a row or column span."""

    start: int
    size: int


def _require_positive(value: float, *, name: str) -> None:
    if value <= 0:
        msg = f"{name} must be > 0, got {value}."
        raise ValueError(msg)


def _require_non_negative(value: float, *, name: str) -> None:
    if value < 0:
        msg = f"{name} must be >= 0, got {value}."
        raise ValueError(msg)


@dataclass(frozen=True)
class GridSystem:
    """Converts grid boxes (top-left origin) into page points (bottom-left origin)."""

    columns: int
    rows: int
    box_size: float
    page_width: float
    page_height: float

    def __post_init__(self) -> None:
        _require_positive(self.columns, name="columns")
        _require_positive(self.rows, name="rows")
        _require_positive(self.box_size, name="box_size")
        for label, page_size, boxes in (
            ("page_width", self.page_width, self.columns),
            ("page_height", self.page_height, self.rows),
        ):
            spare = page_size - boxes * self.box_size
            if spare < -_EPSILON or spare >= self.box_size - _EPSILON:
                msg = (
                    f"{label} {page_size} does not fit {boxes} boxes of {self.box_size}pt; "
                    "the page must hold the grid with less than one box to spare."
                )
                raise ValueError(msg)

    @classmethod
    def for_page(
        cls,
        page_width: float = PAGE_WIDTH,
        page_height: float = PAGE_HEIGHT,
        box_size: float = DOT_SPACING,
    ) -> GridSystem:
        """Fit as many whole boxes as the page allows."""
        _require_positive(box_size, name="box_size")
        return cls(
            columns=math.floor(page_width / box_size),
            rows=math.floor(page_height / box_size),
            box_size=box_size,
            page_width=page_width,
            page_height=page_height,
        )

    @classmethod
    def exact(cls, columns: int, rows: int, box_size: float = DOT_SPACING) -> GridSystem:
        """Build a grid whose page is exactly ``columns x rows`` boxes."""
        return cls(
            columns=columns,
            rows=rows,
            box_size=box_size,
            page_width=columns * box_size,
            page_height=rows * box_size,
        )

    @property
    def full_page(self) -> GridCell:
        return GridCell(col=0, row=0, width_boxes=self.columns, height_boxes=self.rows)

    def x(self, col: float) -> float:
        if not -_EPSILON <= col <= self.columns + _EPSILON:
            msg = f"column {col} is outside the grid (0-{self.columns})."
            raise ValueError(msg)
        return col * self.box_size

    def y(self, row: float) -> float:
        if not -_EPSILON <= row <= self.rows + _EPSILON:
            msg = f"row {row} is outside the grid (0-{self.rows})."
            raise ValueError(msg)
        return self.page_height - (row * self.box_size)

    def width(self, boxes: float) -> float:
        _require_positive(boxes, name="width")
        return boxes * self.box_size

    def height(self, boxes: float) -> float:
        _require_positive(boxes, name="height")
        return boxes * self.box_size

    def bottom(self, row: float, height_boxes: float) -> float:
        return self.y(row) - self.height(height_boxes)

    def rect(self, col: float, row: float, width_boxes: float, height_boxes: float) -> Rect:
        return Rect(
            x=self.x(col),
            y=self.y(row),
            width=self.width(width_boxes),
            height=self.height(height_boxes),
        )

    def cell_rect(self, cell: GridCell) -> Rect:
        return self.rect(cell.col, cell.row, cell.width_boxes, cell.height_boxes)

    def inset(self, rect: Rect, padding: float) -> Rect:
        """Shrink ``rect`` by ``padding`` points on every side."""
        _require_non_negative(padding, name="padding")
        return Rect(
            x=rect.x + padding,
            y=rect.y - padding,
            width=max(0.0, rect.width - 2 * padding),
            height=max(0.0, rect.height - 2 * padding),
        )

    def link_rect(
        self, col: float, row: float, width_boxes: float, height_boxes: float
    ) -> tuple[float, float, float, float]:
        """Return ``(left, bottom, right, top)`` for a link annotation."""
        rect = self.rect(col, row, width_boxes, height_boxes)
        return (rect.x, rect.bottom, rect.right, rect.top)

    def margins(
        self,
        cell: GridCell,
        *,
        left: float | None = None,
        right: float | None = None,
        top: float | None = None,
        bottom: float | None = None,
        all_sides: float = 0,
    ) -> GridCell:
        """Shrink a cell by box margins; explicit sides override ``all_sides``."""
        left = all_sides if left is None else left
        right = all_sides if right is None else right
        top = all_sides if top is None else top
        bottom = all_sides if bottom is None else bottom
        for name, value in (("left", left), ("right", right), ("top", top), ("bottom", bottom)):
            _require_non_negative(value, name=f"{name} margin")

        width_boxes = cell.width_boxes - left - right
        height_boxes = cell.height_boxes - top - bottom
        if width_boxes <= 0 or height_boxes <= 0:
            msg = (
                f"margins leave no room inside a {cell.width_boxes}x{cell.height_boxes} cell."
            )
            raise ValueError(msg)
        return GridCell(
            col=cell.col + left,
            row=cell.row + top,
            width_boxes=width_boxes,
            height_boxes=height_boxes,
        )

    def divide_columns(
        self, col: int, width: int, count: int, gap: int = 0
    ) -> tuple[GridSpan, ...]:
        if col + width > self.columns:
            msg = f"columns {col}-{col + width} extend past the grid ({self.columns})."
            raise ValueError(msg)
        return divide_span(col, width, count, gap)

    def divide_rows(self, row: int, height: int, count: int, gap: int = 0) -> tuple[GridSpan, ...]:
        if row + height > self.rows:
            msg = f"rows {row}-{row + height} extend past the grid ({self.rows})."
            raise ValueError(msg)
        return divide_span(row, height, count, gap)

    def divide_grid(
        self,
        cell: GridCell,
        columns: int,
        rows: int,
        *,
        column_gap: int = 0,
        row_gap: int = 0,
    ) -> tuple[tuple[GridCell, ...], ...]:
        """Split a cell into ``rows`` tuples of ``columns`` cells each."""
        col_spans = self.divide_columns(
            int(cell.col), int(cell.width_boxes), columns, column_gap
        )
        row_spans = self.divide_rows(int(cell.row), int(cell.height_boxes), rows, row_gap)
        return tuple(
            tuple(
                GridCell(
                    col=col_span.start,
                    row=row_span.start,
                    width_boxes=col_span.size,
                    height_boxes=row_span.size,
                )
                for col_span in col_spans
            )
            for row_span in row_spans
        )


def divide_span(start: int, length: int, count: int, gap: int = 0) -> tuple[GridSpan, ...]:
    """Split ``length`` boxes into ``count`` parts separated by ``gap`` boxes.

    Every part gets ``floor(usable / count)`` boxes; the last part absorbs the
    remainder so the parts and gaps always cover the whole span.
    """
    if count < 1:
        msg = f"count must be >= 1, got {count}."
        raise ValueError(msg)
    _require_non_negative(gap, name="gap")
    _require_non_negative(start, name="start")

    usable = length - gap * (count - 1)
    base = math.floor(usable / count)
    if base < 1:
        msg = f"cannot split {length} boxes into {count} parts with gap {gap}."
        raise ValueError(msg)

    spans: list[GridSpan] = []
    cursor = start
    for index in range(count):
        size = base if index < count - 1 else usable - base * (count - 1)
        spans.append(GridSpan(start=cursor, size=size))
        cursor += size + gap
    return tuple(spans)


DEFAULT_GRID = GridSystem.for_page()
