"""Page layouts: chrome around a content area, plus the layout factory."""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any, ClassVar, Protocol

from .canvas import Canvas
from .components.navigation import NavigationTab, resolve_tabs
from .context import RenderContext
from .grid import DEFAULT_GRID, GridCell, GridSystem
from .verbs import VerbNamespace, check_options

LEFT_NAVIGATION = ("weeks", "months", "none")

ContentArea = GridCell


class Page(Protocol):
    """What a layout needs from the page it wraps."""

    canvas: Canvas
    verbs: VerbNamespace

    @property
    def context(self) -> RenderContext: ...

    def render(self, content_area: GridCell) -> None: ...


class Layout(Protocol):
    name: ClassVar[str]

    @property
    def content_area(self) -> GridCell: ...

    def render_before(self, page: Page) -> None: ...

    def render_after(self, page: Page) -> None: ...


def apply_layout(layout: Layout, page: Page) -> GridCell:
    """Run the layout lifecycle around one page and return its content area."""
    layout.render_before(page)
    content_area = layout.content_area
    page.render(content_area)
    layout.render_after(page)
    return content_area


@dataclass(frozen=True)
class FullPageLayout:
    """No chrome; content spans the grid minus an even margin."""

    name: ClassVar[str] = "full_page"

    grid: GridSystem
    margin: int = 0

    def __post_init__(self) -> None:
        if self.margin < 0:
            msg = f"margin must be >= 0, got {self.margin}."
            raise ValueError(msg)
        if 2 * self.margin >= min(self.grid.columns, self.grid.rows):
            msg = (
                f"margin {self.margin} leaves no content area on a "
                f"{self.grid.columns}x{self.grid.rows} grid."
            )
            raise ValueError(msg)

    @property
    def content_area(self) -> GridCell:
        return GridCell(
            col=self.margin,
            row=self.margin,
            width_boxes=self.grid.columns - 2 * self.margin,
            height_boxes=self.grid.rows - 2 * self.margin,
        )

    def render_before(self, page: Page) -> None:
        pass

    def render_after(self, page: Page) -> None:
        pass


@dataclass(frozen=True)
class SidebarLayout:
    """Navigation sidebars on both edges with content between them.

    The left column lists weeks (or months) of the year; the right column
    holds rotated tabs. ``current_week``, ``current_month`` and
    ``highlight_tab`` mark entries as current in addition to whatever the
    page's own key matches.
    """

    name: ClassVar[str] = "standard_with_sidebars"

    grid: GridSystem
    left_width_boxes: int = 2
    right_width_boxes: int = 1
    left_nav: str = "weeks"
    current_week: int | None = None
    current_month: int | None = None
    highlight_tab: str | None = None
    year: int | None = None
    total_weeks: int | None = None
    tabs: tuple[NavigationTab, ...] = ()

    def __post_init__(self) -> None:
        if self.left_width_boxes < 0 or self.right_width_boxes < 0:
            msg = "sidebar widths must be >= 0."
            raise ValueError(msg)
        if self.left_width_boxes + self.right_width_boxes >= self.grid.columns:
            msg = (
                f"sidebar widths {self.left_width_boxes} + {self.right_width_boxes} leave no "
                f"content columns on a {self.grid.columns}-column grid."
            )
            raise ValueError(msg)
        if self.left_nav not in LEFT_NAVIGATION:
            valid = ", ".join(LEFT_NAVIGATION)
            msg = f"unknown left navigation '{self.left_nav}'. Valid options: {valid}."
            raise ValueError(msg)
        if self.left_nav != "none" and self.left_width_boxes < 1:
            msg = f"left navigation '{self.left_nav}' needs a left sidebar of at least 1 box."
            raise ValueError(msg)
        object.__setattr__(self, "tabs", tuple(self.tabs))

    @property
    def content_area(self) -> GridCell:
        return GridCell(
            col=self.left_width_boxes,
            row=0,
            width_boxes=self.grid.columns - self.left_width_boxes - self.right_width_boxes,
            height_boxes=self.grid.rows,
        )

    def render_before(self, page: Page) -> None:
        context = page.context
        year = self.year if self.year is not None else context.year
        if self.left_nav == "weeks":
            page.verbs.week_sidebar(
                year,
                total_weeks=self.total_weeks or context.total_weeks,
                current_week=self.current_week,
                width=self.left_width_boxes,
            )
        elif self.left_nav == "months":
            page.verbs.month_sidebar(
                year, current_month=self.current_month, width=self.left_width_boxes
            )

        if self.right_width_boxes and self.tabs:
            page.verbs.right_sidebar(
                resolve_tabs(self.tabs, context, self.highlight_tab),
                col=self.grid.columns - self.right_width_boxes,
            )

    def render_after(self, page: Page) -> None:
        pass


def _daily_with_sidebars(grid: GridSystem, **options: Any) -> SidebarLayout:
    return SidebarLayout(grid, **{"left_nav": "months", **options})


@dataclass
class LayoutFactory:
    """Named layout builders; ``create`` fails for unknown names or options."""

    _builders: dict[str, Callable[..., Layout]] = field(default_factory=dict)
    _options: dict[str, tuple[str, ...]] = field(default_factory=dict)

    def register(
        self,
        name: str,
        builder: Callable[..., Layout],
        *,
        options: Sequence[str] | None = None,
    ) -> None:
        key = name.strip()
        if not key:
            msg = "layout name cannot be empty."
            raise ValueError(msg)
        if key in self._builders:
            msg = f"layout '{key}' is already registered."
            raise ValueError(msg)
        self._builders[key] = builder
        if options is not None:
            self._options[key] = tuple(options)

    def create(self, name: str, grid: GridSystem | None = None, **options: Any) -> Layout:
        if name not in self._builders:
            valid = ", ".join(self.available_layouts())
            msg = f"unknown layout '{name}'. Valid layouts: {valid}."
            raise ValueError(msg)
        if name in self._options:
            check_options(f"layout '{name}'", options, self._options[name])
        return self._builders[name](grid or DEFAULT_GRID, **options)

    def available_layouts(self) -> tuple[str, ...]:
        return tuple(sorted(self._builders))


def _layout_options(layout_cls: type) -> tuple[str, ...]:
    return tuple(item.name for item in dataclasses.fields(layout_cls) if item.name != "grid")


def default_layout_factory() -> LayoutFactory:
    factory = LayoutFactory()
    factory.register(FullPageLayout.name, FullPageLayout, options=_layout_options(FullPageLayout))
    factory.register(SidebarLayout.name, SidebarLayout, options=_layout_options(SidebarLayout))
    factory.register(
        "daily_with_sidebars", _daily_with_sidebars, options=_layout_options(SidebarLayout)
    )
    return factory


_DEFAULT_FACTORY = default_layout_factory()


def create_layout(name: str, grid: GridSystem | None = None, **options: Any) -> Layout:
    """Create a built-in layout by name."""
    return _DEFAULT_FACTORY.create(name, grid, **options)
