"""Text placed in grid boxes, plus heading shortcuts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..canvas import Canvas

TEXT_ALIGNMENTS = ("left", "center", "right")
H1_FONT_SIZE = 12
H2_FONT_SIZE = 18


def text_baseline(top: float, bottom: float, font_size: float) -> float:
    """Baseline that visually centers a single line between ``top`` and ``bottom``."""
    band_height = top - bottom
    return bottom + ((band_height - font_size) / 2) + (font_size * 0.2)


@dataclass(frozen=True)
class Text:
    """One line of text in a box of ``width`` x ``height`` grid boxes.

    ``pt_x``/``pt_y``/``pt_width``/``pt_height`` override the grid-derived box
    in points when a caller needs sub-grid placement. A non-zero ``rotation``
    turns the text around the center of its box.
    """

    canvas: Canvas
    col: float
    row: float
    content: str
    size: float = 10
    width: float | None = None
    height: float = 1
    color: Any = None
    style: str = "normal"
    align: str = "left"
    rotation: float = 0
    pt_x: float | None = None
    pt_y: float | None = None
    pt_width: float | None = None
    pt_height: float | None = None

    def render(self) -> None:
        if self.align not in TEXT_ALIGNMENTS:
            msg = f"unknown text alignment '{self.align}'. Valid alignments: left, center, right."
            raise ValueError(msg)
        if self.size <= 0:
            msg = f"font size must be > 0, got {self.size}."
            raise ValueError(msg)

        grid = self.canvas.grid
        left = grid.x(self.col) if self.pt_x is None else self.pt_x
        top = grid.y(self.row) if self.pt_y is None else self.pt_y
        width_boxes = grid.columns - self.col if self.width is None else self.width
        box_width = grid.width(width_boxes) if self.pt_width is None else self.pt_width
        box_height = grid.height(self.height) if self.pt_height is None else self.pt_height

        pdf = self.canvas.pdf
        pdf.set_font(self.canvas.font(self.style), self.size)
        pdf.set_fill_color(self.canvas.color(self.color, self.canvas.theme.TEXT_PRIMARY))

        if self.rotation:
            with self.canvas.state():
                pdf.translate(left + box_width / 2, top - box_height / 2)
                pdf.rotate(self.rotation)
                # Box axes swap once the text is turned a quarter.
                if abs(self.rotation) % 180 == 90:
                    run, across = box_height, box_width
                else:
                    run, across = box_width, box_height
                baseline = text_baseline(across / 2, -across / 2, self.size)
                self._draw_aligned(-run / 2, run, baseline)
            return

        baseline = text_baseline(top, top - box_height, self.size)
        self._draw_aligned(left, box_width, baseline)

    def _draw_aligned(self, left: float, box_width: float, baseline: float) -> None:
        pdf = self.canvas.pdf
        if self.align == "center":
            pdf.draw_centred_string(left + box_width / 2, baseline, self.content)
        elif self.align == "right":
            pdf.draw_right_string(left + box_width, baseline, self.content)
        else:
            pdf.draw_string(left, baseline, self.content)


def text(canvas: Canvas, col: float, row: float, content: str, **options: Any) -> None:
    Text(canvas, col, row, content, **options).render()


@dataclass(frozen=True)
class H1:
    """Section heading, one box tall."""

    canvas: Canvas
    col: float
    row: float
    content: str
    color: Any = None
    style: str = "bold"
    align: str = "left"
    width: float | None = None

    def render(self) -> None:
        text(
            self.canvas,
            self.col,
            self.row,
            self.content,
            size=H1_FONT_SIZE,
            height=1,
            color=self.color,
            style=self.style,
            align=self.align,
            width=self.width,
        )


@dataclass(frozen=True)
class H2(H1):
    """Page title, two boxes tall."""

    def render(self) -> None:
        text(
            self.canvas,
            self.col,
            self.row,
            self.content,
            size=H2_FONT_SIZE,
            height=2,
            color=self.color,
            style=self.style,
            align=self.align,
            width=self.width,
        )


def h1(canvas: Canvas, col: float, row: float, content: str, **options: Any) -> None:
    H1(canvas, col, row, content, **options).render()


def h2(canvas: Canvas, col: float, row: float, content: str, **options: Any) -> None:
    H2(canvas, col, row, content, **options).render()
