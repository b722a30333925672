"""Shared page rendering: background, dot grid, layout lifecycle."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from .canvas import Canvas
from .components.primitives import grid_dots
from .context import RenderContext
from .grid import GridCell, Rect
from .layouts import Layout, apply_layout
from .verbs import VerbNamespace, VerbRegistry

DOT_GRID_FORM = "dot_grid"


@dataclass(frozen=True)
class PageRender:
    """One page being drawn: its canvas, bound verbs and content callback."""

    canvas: Canvas
    verbs: VerbNamespace
    draw: Callable[[PageRender, GridCell], None]

    @property
    def context(self) -> RenderContext:
        if self.canvas.context is None:
            msg = "page canvas has no render context."
            raise ValueError(msg)
        return self.canvas.context

    def render(self, content_area: GridCell) -> None:
        self.draw(self, content_area)


def define_dot_grid_form(canvas: Canvas, name: str = DOT_GRID_FORM) -> str:
    """Record the full-page dot grid once so pages can reuse it."""
    grid = canvas.grid
    canvas.pdf.begin_form(name)
    grid_dots(canvas, 0, 0, grid.columns, grid.rows)
    canvas.pdf.end_form()
    return name


def render_page(
    canvas: Canvas,
    *,
    context: RenderContext,
    layout: Layout,
    draw: Callable[[PageRender, GridCell], None],
    registry: VerbRegistry,
    dot_grid_form: str | None = None,
    outline_title: str | None = None,
) -> GridCell:
    """Render one page and advance the PDF cursor; return its content area."""
    page_canvas = canvas.with_context(context)
    grid = page_canvas.grid
    pdf = page_canvas.pdf

    page_canvas.fill_rect(
        Rect(x=0, y=grid.page_height, width=grid.page_width, height=grid.page_height),
        page_canvas.theme.BACKGROUND,
    )
    if dot_grid_form is not None:
        pdf.do_form(dot_grid_form)
    else:
        grid_dots(page_canvas, 0, 0, grid.columns, grid.rows)

    pdf.bookmark_page(context.destination)
    if outline_title:
        pdf.add_outline_entry(outline_title, context.destination, level=0)

    page = PageRender(canvas=page_canvas, verbs=registry.bind(page_canvas), draw=draw)
    content_area = apply_layout(layout, page)
    pdf.show_page()
    return content_area
