"""Writing lines and legend-labelled frames."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..canvas import Canvas
from .primitives import grid_dots, require_span

# position -> (edge carrying the legend, legend alignment along that edge)
LEGEND_POSITIONS = {
    "top_left": ("top", "left"),
    "top_center": ("top", "center"),
    "top_right": ("top", "right"),
    "bottom_left": ("bottom", "left"),
    "bottom_center": ("bottom", "center"),
    "bottom_right": ("bottom", "right"),
}


@dataclass(frozen=True)
class RuledLines:
    """One writing line under each row, with the dot grid redrawn on top."""

    canvas: Canvas
    col: float
    row: float
    width: float
    height: float
    color: Any = None
    stroke: float = 0.5
    dash: tuple[float, ...] | None = None
    redraw_dots: bool = True

    def render(self) -> None:
        require_span(self.width, name="width")
        require_span(self.height, name="height")
        grid = self.canvas.grid
        left = grid.x(self.col)
        right = grid.x(self.col + self.width)

        with self.canvas.state() as pdf:
            pdf.set_stroke_color(self.canvas.color(self.color, self.canvas.theme.BORDERS))
            pdf.set_line_width(self.stroke)
            pdf.set_dash(self.dash)
            for line_index in range(int(self.height)):
                y = grid.y(self.row + line_index + 1)
                pdf.line(left, y, right, y)

        if self.redraw_dots:
            grid_dots(self.canvas, self.col, self.row, self.width, self.height)


@dataclass(frozen=True)
class Fieldset:
    """Frame inset from its boxes with a gap in the border for a legend."""

    canvas: Canvas
    col: float
    row: float
    width: float
    height: float
    legend: str = ""
    position: str = "top_left"
    inset_boxes: float = 0.5
    font_size: float = 12
    legend_padding: float = 5
    border_color: Any = None
    text_color: Any = None

    def render(self) -> None:
        if not self.legend:
            msg = "fieldset legend cannot be empty."
            raise ValueError(msg)
        if self.position not in LEGEND_POSITIONS:
            valid = ", ".join(LEGEND_POSITIONS)
            msg = f"unknown legend position '{self.position}'. Valid positions: {valid}."
            raise ValueError(msg)

        grid = self.canvas.grid
        theme = self.canvas.theme
        pdf = self.canvas.pdf
        box = grid.rect(self.col, self.row, self.width, self.height)
        border = grid.inset(box, self.inset_boxes * grid.box_size)
        edge, align = LEGEND_POSITIONS[self.position]

        font = theme.FONT_BOLD
        legend_width = pdf.string_width(self.legend, font, self.font_size)
        legend_total = legend_width + self.legend_padding * 2
        if align == "left":
            gap_start = box.x + grid.box_size
        elif align == "center":
            gap_start = box.x + box.width / 2 - legend_total / 2
        else:
            gap_start = box.right - grid.box_size - legend_total
        gap_end = gap_start + legend_total

        pdf.set_stroke_color(self.canvas.color(self.border_color, theme.BORDERS))
        pdf.set_line_width(0.5)
        left, right, top, bottom = border.x, border.right, border.top, border.bottom
        for legend_edge, y in (("top", top), ("bottom", bottom)):
            if legend_edge == edge:
                pdf.line(left, y, gap_start, y)
                pdf.line(gap_end, y, right, y)
            else:
                pdf.line(left, y, right, y)
        pdf.line(left, top, left, bottom)
        pdf.line(right, top, right, bottom)

        legend_y = top if edge == "top" else bottom
        pdf.set_font(font, self.font_size)
        pdf.set_fill_color(self.canvas.color(self.text_color, theme.TEXT_PRIMARY))
        baseline = legend_y - self.font_size * 0.35
        pdf.draw_string(gap_start + self.legend_padding, baseline, self.legend)


def ruled_lines(
    canvas: Canvas, col: float, row: float, width: float, height: float, **options: Any
) -> None:
    RuledLines(canvas, col, row, width, height, **options).render()


def fieldset(
    canvas: Canvas, col: float, row: float, width: float, height: float, **options: Any
) -> None:
    Fieldset(canvas, col, row, width, height, **options).render()
