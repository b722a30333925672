"""Basic grid-aligned shapes: boxes, lines and dot grids."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..canvas import Canvas
from ..config import DOT_RADIUS

LINE_ALIGNMENTS = ("top", "center", "bottom")


def require_span(value: float, *, name: str, allow_zero: bool = False) -> None:
    if value < 0 or (value == 0 and not allow_zero):
        bound = ">= 0" if allow_zero else "> 0"
        msg = f"{name} must be {bound}, got {value}."
        raise ValueError(msg)


def require_opacity(value: float) -> None:
    if not 0 <= value <= 1:
        msg = f"opacity must be between 0 and 1, got {value}."
        raise ValueError(msg)


def _is_whole(value: float) -> bool:
    return float(value).is_integer()


@dataclass(frozen=True)
class Box:
    """Rectangle covering whole grid boxes, optionally filled and rounded."""

    canvas: Canvas
    col: float
    row: float
    width: float
    height: float
    stroke: Any = None
    fill: Any = None
    stroke_width: float = 0.5
    radius: float = 0
    opacity: float = 1.0

    def render(self) -> None:
        require_opacity(self.opacity)
        rect = self.canvas.grid.rect(self.col, self.row, self.width, self.height)
        do_stroke = 1 if self.stroke_width > 0 else 0
        do_fill = 1 if self.fill is not None else 0
        with self.canvas.state() as pdf:
            if self.opacity < 1:
                pdf.set_fill_alpha(self.opacity)
                pdf.set_stroke_alpha(self.opacity)
            if do_fill:
                pdf.set_fill_color(self.canvas.color(self.fill, self.canvas.theme.BORDERS))
            if do_stroke:
                pdf.set_stroke_color(self.canvas.color(self.stroke, self.canvas.theme.BORDERS))
                pdf.set_line_width(self.stroke_width)
            if self.radius > 0:
                pdf.round_rect(
                    rect.x,
                    rect.bottom,
                    rect.width,
                    rect.height,
                    self.radius,
                    fill=do_fill,
                    stroke=do_stroke,
                )
            else:
                pdf.rect(
                    rect.x, rect.bottom, rect.width, rect.height, fill=do_fill, stroke=do_stroke
                )


@dataclass(frozen=True)
class GridDots:
    """Dots on every grid intersection inside the region, edges included."""

    canvas: Canvas
    col: float
    row: float
    width: float
    height: float
    color: Any = None
    radius: float = DOT_RADIUS

    def render(self) -> None:
        require_span(self.width, name="width", allow_zero=True)
        require_span(self.height, name="height", allow_zero=True)
        grid = self.canvas.grid
        pdf = self.canvas.pdf
        pdf.set_fill_color(self.canvas.color(self.color, self.canvas.theme.DOT_GRID))
        for row_offset in range(int(self.height) + 1):
            y = grid.y(self.row + row_offset)
            for col_offset in range(int(self.width) + 1):
                pdf.circle(grid.x(self.col + col_offset), y, self.radius, fill=1, stroke=0)


@dataclass(frozen=True)
class EraseDots(GridDots):
    """Cover grid dots with the background color."""

    radius: float = DOT_RADIUS + 0.5

    def render(self) -> None:
        color = self.canvas.color(self.color, self.canvas.theme.BACKGROUND)
        GridDots(
            self.canvas,
            self.col,
            self.row,
            self.width,
            self.height,
            color=color,
            radius=self.radius,
        ).render()


@dataclass(frozen=True)
class HLine:
    """Horizontal rule across ``width`` boxes, aligned inside row ``row``."""

    canvas: Canvas
    col: float
    row: float
    width: float
    color: Any = None
    stroke: float = 0.5
    align: str = "top"

    def render(self) -> None:
        if self.align not in LINE_ALIGNMENTS:
            msg = f"unknown line alignment '{self.align}'. Valid alignments: top, center, bottom."
            raise ValueError(msg)
        require_span(self.width, name="width")
        grid = self.canvas.grid
        line_row = self.row + LINE_ALIGNMENTS.index(self.align) * 0.5
        if _is_whole(line_row) and _is_whole(self.col):
            erase_dots(self.canvas, self.col, line_row, self.width, 0)

        y = grid.y(line_row)
        pdf = self.canvas.pdf
        pdf.set_stroke_color(self.canvas.color(self.color, self.canvas.theme.BORDERS))
        pdf.set_line_width(self.stroke)
        pdf.line(grid.x(self.col), y, grid.x(self.col + self.width), y)


@dataclass(frozen=True)
class VLine:
    """Vertical rule down ``height`` boxes along column ``col``."""

    canvas: Canvas
    col: float
    row: float
    height: float
    color: Any = None
    stroke: float = 0.5

    def render(self) -> None:
        require_span(self.height, name="height")
        grid = self.canvas.grid
        if _is_whole(self.col) and _is_whole(self.row):
            erase_dots(self.canvas, self.col, self.row, 0, self.height)

        x = grid.x(self.col)
        pdf = self.canvas.pdf
        pdf.set_stroke_color(self.canvas.color(self.color, self.canvas.theme.BORDERS))
        pdf.set_line_width(self.stroke)
        pdf.line(x, grid.y(self.row), x, grid.y(self.row + self.height))


def box(
    canvas: Canvas, col: float, row: float, width: float, height: float, **options: Any
) -> None:
    Box(canvas, col, row, width, height, **options).render()


def grid_dots(
    canvas: Canvas, col: float, row: float, width: float, height: float, **options: Any
) -> None:
    GridDots(canvas, col, row, width, height, **options).render()


def erase_dots(
    canvas: Canvas, col: float, row: float, width: float, height: float, **options: Any
) -> None:
    EraseDots(canvas, col, row, width, height, **options).render()


def hline(canvas: Canvas, col: float, row: float, width: float, **options: Any) -> None:
    HLine(canvas, col, row, width, **options).render()


def vline(canvas: Canvas, col: float, row: float, height: float, **options: Any) -> None:
    VLine(canvas, col, row, height, **options).render()
