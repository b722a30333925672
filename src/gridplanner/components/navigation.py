"""Navigation chrome: link boxes, week/month sidebars and tab strips."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date
from typing import Any

from ..canvas import Canvas
from ..config import (
    LINK_FILL_OPACITY,
    MONTH_ABBREVIATIONS,
    SIDEBAR_FONT_SIZE,
    SIDEBAR_START_ROW,
    WEEK_SIDEBAR_WIDTH,
)
from ..context import RenderContext, canonical_key
from ..dates import total_weeks as year_total_weeks
from ..dates import week_to_month_map
from ..destinations import day_destination, parse_day_destination, week_destination
from ..grid import Rect
from .text import Text, text_baseline

SIDEBAR_START_COL = 0.25
SIDEBAR_PADDING_BOXES = 0.3
MONTH_ROWS = 4
MONTH_FONT_SIZE = 7
TAB_FONT_SIZE = 8
TAB_GAP_PT = 4
TAB_PADDING_PT = 6
TAB_START_OFFSET_PT = 14
CORNER_RADIUS = 2


@dataclass(frozen=True)
class NavigationTab:
    """A sidebar tab; several destinations make the tab cycle through them."""

    label: str
    destinations: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.label.strip():
            msg = "tab label cannot be empty."
            raise ValueError(msg)
        if isinstance(self.destinations, str):
            object.__setattr__(self, "destinations", (self.destinations,))
        if not self.destinations:
            msg = f"tab '{self.label}' needs at least one destination."
            raise ValueError(msg)
        object.__setattr__(
            self, "destinations", tuple(canonical_key(item) for item in self.destinations)
        )


@dataclass(frozen=True)
class ResolvedTab:
    """A tab with its link target and highlight state for one page."""

    label: str
    destination: str
    current: bool = False
    linked: bool = True


def resolve_tab(
    tab: NavigationTab,
    context: RenderContext | None = None,
    highlight_tab: str | None = None,
) -> ResolvedTab:
    """Pick the link target and highlight state of ``tab`` on the current page.

    When the current page (or, failing that, ``highlight_tab``) is one of the
    tab's destinations, the tab is current and links to the next destination,
    wrapping around; a single-destination tab has nowhere else to go and is
    left unlinked. Otherwise the tab links to its first destination.
    """
    cycle = tab.destinations
    active_index = None
    if context is not None:
        active_index = next(
            (index for index, item in enumerate(cycle) if context.is_current_page(item)), None
        )
    if active_index is None and highlight_tab is not None:
        highlight = canonical_key(highlight_tab)
        active_index = next(
            (index for index, item in enumerate(cycle) if item == highlight), None
        )

    if active_index is None:
        return ResolvedTab(label=tab.label, destination=cycle[0], current=False)
    return ResolvedTab(
        label=tab.label,
        destination=cycle[(active_index + 1) % len(cycle)],
        current=True,
        linked=len(cycle) > 1,
    )


def resolve_tabs(
    tabs: Sequence[NavigationTab],
    context: RenderContext | None = None,
    highlight_tab: str | None = None,
) -> tuple[ResolvedTab, ...]:
    return tuple(resolve_tab(tab, context, highlight_tab) for tab in tabs)


def _is_self_link(canvas: Canvas, destination: str) -> bool:
    return canvas.context is not None and canvas.context.is_current_page(destination)


def _draw_entry_background(canvas: Canvas, rect: Rect, current: bool) -> None:
    pdf = canvas.pdf
    border_color = canvas.theme.BORDERS
    with canvas.state():
        if current:
            pdf.set_stroke_color(border_color)
            pdf.set_line_width(0.5)
            pdf.round_rect(
                rect.x, rect.bottom, rect.width, rect.height, CORNER_RADIUS, fill=0, stroke=1
            )
        else:
            pdf.set_fill_alpha(LINK_FILL_OPACITY)
            pdf.set_fill_color(border_color)
            pdf.round_rect(
                rect.x, rect.bottom, rect.width, rect.height, CORNER_RADIUS, fill=1, stroke=0
            )


@dataclass(frozen=True)
class LinkBox:
    """Labelled box linking to ``destination``.

    Current boxes are stroked with bold text and carry no link; other boxes
    get a faint fill, grey text and a link annotation.
    """

    canvas: Canvas
    col: float
    row: float
    width: float
    height: float
    label: str
    destination: str
    current: bool = False
    linked: bool | None = None
    rotation: float = 0
    font_size: float = TAB_FONT_SIZE
    inset: float = 2
    color: Any = None
    pt_x: float | None = None
    pt_y: float | None = None
    pt_width: float | None = None
    pt_height: float | None = None

    def render(self) -> None:
        grid = self.canvas.grid
        theme = self.canvas.theme
        left = grid.x(self.col) if self.pt_x is None else self.pt_x
        top = grid.y(self.row) if self.pt_y is None else self.pt_y
        box_width = grid.width(self.width) if self.pt_width is None else self.pt_width
        box_height = grid.height(self.height) if self.pt_height is None else self.pt_height

        background = Rect(
            x=left + self.inset,
            y=top - self.inset,
            width=max(0.0, box_width - 2 * self.inset),
            height=max(0.0, box_height - 2 * self.inset),
        )
        _draw_entry_background(self.canvas, background, self.current)

        default_color = theme.TEXT_PRIMARY if self.current else theme.TEXT_SECONDARY
        Text(
            self.canvas,
            self.col,
            self.row,
            self.label,
            size=self.font_size,
            color=self.canvas.color(self.color, default_color),
            style="bold" if self.current else "normal",
            align="center",
            rotation=self.rotation,
            pt_x=left,
            pt_y=top,
            pt_width=box_width,
            pt_height=box_height,
        ).render()

        should_link = not self.current if self.linked is None else self.linked
        if should_link and not _is_self_link(self.canvas, self.destination):
            self.canvas.pdf.link_rect(
                self.destination, (left, top - box_height, left + box_width, top)
            )


def link_box(
    canvas: Canvas,
    col: float,
    row: float,
    width: float,
    height: float,
    label: str,
    destination: str,
    **options: Any,
) -> None:
    LinkBox(canvas, col, row, width, height, label, destination, **options).render()


def _sidebar_entry(
    canvas: Canvas,
    cell: Rect,
    label: str,
    destination: str,
    *,
    current: bool,
    font_size: float,
) -> None:
    grid = canvas.grid
    theme = canvas.theme
    pdf = canvas.pdf
    gap_vertical = 2
    gap_right = grid.box_size * 0.25 + 2
    background = Rect(
        x=cell.x,
        y=cell.y - gap_vertical / 2,
        width=cell.width - gap_right,
        height=cell.height - gap_vertical,
    )
    _draw_entry_background(canvas, background, current)

    text_left = cell.x + grid.box_size * SIDEBAR_PADDING_BOXES - 5
    text_width = cell.width - grid.box_size * SIDEBAR_PADDING_BOXES * 2
    font = theme.FONT_BOLD if current else theme.FONT_REGULAR
    pdf.set_font(font, font_size)
    pdf.set_fill_color(theme.TEXT_PRIMARY if current else theme.TEXT_SECONDARY)
    pdf.draw_right_string(
        text_left + text_width, text_baseline(cell.top, cell.bottom, font_size), label
    )

    if not current:
        pdf.link_rect(destination, (cell.x, cell.bottom, cell.right, cell.top))


@dataclass(frozen=True)
class WeekSidebar:
    """One entry per week down the left edge; months marked on their first week."""

    canvas: Canvas
    year: int
    total_weeks: int | None = None
    current_week: int | None = None
    col: float = SIDEBAR_START_COL
    start_row: float = SIDEBAR_START_ROW
    width: float = WEEK_SIDEBAR_WIDTH
    font_size: float = SIDEBAR_FONT_SIZE

    def render(self) -> None:
        weeks = year_total_weeks(self.year) if self.total_weeks is None else self.total_weeks
        month_markers = week_to_month_map(self.year, chars=1)
        for week_num in range(1, weeks + 1):
            destination = week_destination(week_num)
            week_text = f"w{week_num:02d}"
            marker = month_markers.get(week_num)
            label = f"{marker} {week_text}" if marker else week_text
            cell = self.canvas.grid.rect(self.col, self.start_row + week_num - 1, self.width, 1)
            _sidebar_entry(
                self.canvas,
                cell,
                label,
                destination,
                current=self.is_current(week_num),
                font_size=self.font_size,
            )

    def is_current(self, week_num: int) -> bool:
        if self.current_week == week_num:
            return True
        return _is_self_link(self.canvas, week_destination(week_num))


def week_sidebar(canvas: Canvas, year: int, **options: Any) -> None:
    WeekSidebar(canvas, year, **options).render()


@dataclass(frozen=True)
class MonthSidebar:
    """Twelve month entries down the left edge, each linking to the month's first day."""

    canvas: Canvas
    year: int
    current_month: int | None = None
    col: float = SIDEBAR_START_COL
    start_row: float = SIDEBAR_START_ROW
    width: float = WEEK_SIDEBAR_WIDTH
    font_size: float = MONTH_FONT_SIZE

    def render(self) -> None:
        for month in range(1, 13):
            row = self.start_row + (month - 1) * MONTH_ROWS
            cell = self.canvas.grid.rect(self.col, row, self.width, MONTH_ROWS)
            _sidebar_entry(
                self.canvas,
                cell,
                MONTH_ABBREVIATIONS[month - 1],
                day_destination(date(self.year, month, 1)),
                current=self.is_current(month),
                font_size=self.font_size,
            )

    def is_current(self, month: int) -> bool:
        if self.current_month == month:
            return True
        if self.canvas.context is None:
            return False
        page_date = parse_day_destination(self.canvas.context.page_key)
        return page_date is not None and (page_date.year, page_date.month) == (self.year, month)


def month_sidebar(canvas: Canvas, year: int, **options: Any) -> None:
    MonthSidebar(canvas, year, **options).render()


@dataclass(frozen=True)
class RightSidebar:
    """Rotated tabs stacked from the top of the rightmost column."""

    canvas: Canvas
    tabs: tuple[ResolvedTab, ...]
    col: float | None = None
    font_size: float = TAB_FONT_SIZE

    def render(self) -> None:
        grid = self.canvas.grid
        col = grid.columns - 1 if self.col is None else self.col
        left = grid.x(col)
        current_y = grid.y(0) - TAB_START_OFFSET_PT
        for tab in self.tabs:
            text_width = self.canvas.pdf.string_width(
                tab.label, self.canvas.theme.FONT_REGULAR, self.font_size
            )
            tab_height = text_width + TAB_PADDING_PT * 2
            if current_y - tab_height < 0:
                msg = f"tab '{tab.label}' does not fit in the right sidebar."
                raise ValueError(msg)
            LinkBox(
                self.canvas,
                col,
                0,
                1,
                1,
                tab.label,
                tab.destination,
                current=tab.current,
                linked=tab.linked,
                rotation=-90,
                font_size=self.font_size,
                pt_x=left,
                pt_y=current_y,
                pt_width=grid.box_size,
                pt_height=tab_height,
            ).render()
            current_y -= tab_height + TAB_GAP_PT


def right_sidebar(canvas: Canvas, tabs: Sequence[ResolvedTab], **options: Any) -> None:
    RightSidebar(canvas, tuple(tabs), **options).render()
