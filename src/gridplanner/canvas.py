"""Drawing surface shared by verbs: backend, grid and theme."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any

from reportlab.lib import colors

from .config import Theme
from .context import RenderContext
from .drawing import DrawingPrimitives
from .grid import GridSystem, Rect
from .theme_profiles import parse_color


@dataclass(frozen=True)
class Canvas:
    """Everything a verb needs to draw on one page.

    The theme travels with the canvas so that separate documents can render
    with separate themes.
    """

    pdf: DrawingPrimitives
    grid: GridSystem
    theme: type = Theme
    context: RenderContext | None = None

    def with_context(self, context: RenderContext | None) -> Canvas:
        return Canvas(pdf=self.pdf, grid=self.grid, theme=self.theme, context=context)

    def color(self, value: Any, default: colors.Color) -> colors.Color:
        """Resolve an optional color option against a theme default."""
        if value is None:
            return default
        return parse_color(value)

    def font(self, style: str) -> str:
        if style == "bold":
            return self.theme.FONT_BOLD
        if style == "normal":
            return self.theme.FONT_REGULAR
        msg = f"unknown text style '{style}'. Valid styles: bold, normal."
        raise ValueError(msg)

    def link(
        self, col: float, row: float, width_boxes: float, height_boxes: float, destination: str
    ) -> None:
        self.pdf.link_rect(destination, self.grid.link_rect(col, row, width_boxes, height_boxes))

    def fill_rect(self, rect: Rect, color: colors.Color) -> None:
        self.pdf.set_fill_color(color)
        self.pdf.rect(rect.x, rect.bottom, rect.width, rect.height, fill=1, stroke=0)

    @contextmanager
    def state(self) -> Iterator[DrawingPrimitives]:
        """Save backend graphics state for the duration of the block."""
        self.pdf.save_state()
        try:
            yield self.pdf
        finally:
            self.pdf.restore_state()
