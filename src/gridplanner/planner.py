"""Planner document generation."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, timedelta
from pathlib import Path
from typing import Any

from .canvas import Canvas
from .components import NavigationTab, build_verb_registry
from .config import DEFAULT_FILENAME_TEMPLATE, WEEKDAY_LABELS, Theme
from .context import PageSet, RenderContext
from .dates import (
    SEASONS,
    WeekRange,
    total_weeks,
    validate_year,
    week_range,
    weeks_in_year,
)
from .destinations import DOT_GRID, SEASONAL, week_destination
from .drawing import DrawingPrimitives, RecordingPrimitives, create_reportlab_primitives
from .events import CalendarEvent, EventSource, safe_events_for_date
from .grid import DEFAULT_GRID, GridCell, GridSystem
from .layouts import FullPageLayout, Layout, SidebarLayout
from .rendering import PageRender, define_dot_grid_form, render_page
from .theme_profiles import parse_color
from .verbs import VerbRegistry

DEFAULT_YEAR = 2026
INDEX_PAGES = PageSet(name="index", count=2, label_pattern="Index %page of %total")
DAY_ROWS = 7
WEEK_HEADER_ROWS = 3
MAX_EVENTS_PER_DAY = 3

# Seasons listed per column of the seasonal overview.
SEASON_COLUMNS = (SEASONS[:2], SEASONS[2:])

PLANNER_TABS = (
    NavigationTab("Year", (SEASONAL,)),
    NavigationTab("Index", INDEX_PAGES.destinations()),
    NavigationTab("Dots", (DOT_GRID,)),
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlannerPage:
    """A page of the planner in document order."""

    key: str
    title: str
    layout: Layout
    draw: Callable[[PageRender, GridCell], None]
    week_num: int | None = None
    page_set_index: int | None = None


def planner_page_keys(year: int) -> tuple[str, ...]:
    """Return every page destination in document order."""
    validate_year(year)
    keys = [SEASONAL, *INDEX_PAGES.destinations()]
    keys.extend(week_destination(week.week_number) for week in weeks_in_year(year))
    keys.append(DOT_GRID)
    return tuple(keys)


def expected_page_count(year: int) -> int:
    """Return the page count: seasonal overview, index pages, weeks, dot grid."""
    return len(planner_page_keys(year))


def _draw_seasonal(year: int) -> Callable[[PageRender, GridCell], None]:
    def draw(page: PageRender, area: GridCell) -> None:
        verbs = page.verbs
        grid = page.canvas.grid
        verbs.h1(area.col, 0, f"Year {year}", width=area.width_boxes, align="center")
        spans = grid.divide_columns(int(area.col), int(area.width_boxes), len(SEASON_COLUMNS), 1)
        for span, seasons in zip(spans, SEASON_COLUMNS):
            row = 1
            for season in seasons:
                verbs.fieldset(
                    span.start, row, span.size, season.height_boxes, legend=season.name
                )
                for index, month in enumerate(season.months):
                    verbs.mini_month(
                        span.start + 1, row + 1 + index * 9, span.size - 2, year, month
                    )
                row += season.height_boxes

    return draw


def _draw_index(page: PageRender, area: GridCell) -> None:
    verbs = page.verbs
    page_set = page.context.page_set
    label = page_set.label if page_set is not None else "Index"
    verbs.h1(area.col + 1, 1, "Index")
    verbs.text(area.col + 1, 1, label, width=area.width_boxes - 2, align="right", size=8)
    verbs.ruled_lines(area.col + 1, 3, area.width_boxes - 2, area.height_boxes - 5)


def _event_color(event: CalendarEvent, default: Any) -> Any:
    if event.color is None:
        return default
    try:
        return parse_color(event.color)
    except ValueError:
        logger.warning(
            "Ignoring color %r of event %r on %s",
            event.color,
            event.summary,
            event.date.isoformat(),
        )
        return default


def _trailing_days(year: int, week: WeekRange) -> tuple[date, ...]:
    """Days of ``year`` after the last week page ends (December 31 in some leap years)."""
    if week.week_number != total_weeks(year):
        return ()
    day = week.end_date + timedelta(days=1)
    days = []
    while day.year == year:
        days.append(day)
        day += timedelta(days=1)
    return tuple(days)


def _draw_week(
    year: int, week_num: int, events: EventSource | None
) -> Callable[[PageRender, GridCell], None]:
    week = week_range(year, week_num)
    trailing_days = _trailing_days(year, week)

    def draw_day(page: PageRender, area: GridCell, row: int, day: date, rows: int) -> int:
        verbs = page.verbs
        verbs.hline(area.col, row, area.width_boxes)
        day_label = f"{WEEKDAY_LABELS[day.weekday()]} {day:%m/%d}"
        verbs.text(area.col + 1, row, day_label, size=9, style="bold")
        limit = min(MAX_EVENTS_PER_DAY, rows - 1)
        day_events = safe_events_for_date(events, day, limit) if limit > 0 else ()
        for event_index, event in enumerate(day_events):
            verbs.text(
                area.col + 1,
                row + 1 + event_index,
                event.label,
                size=8,
                width=area.width_boxes - 2,
                color=_event_color(event, page.canvas.theme.TEXT_SECONDARY),
            )
        return row + 1 + len(day_events)

    def draw(page: PageRender, area: GridCell) -> None:
        verbs = page.verbs
        theme = page.canvas.theme
        start, end = week.start_date, week.end_date
        verbs.h1(area.col + 1, 1, f"Week {week_num}")
        verbs.text(
            area.col + 1,
            1,
            f"{start:%b %d, %Y} - {end:%b %d, %Y}",
            width=area.width_boxes - 2,
            align="right",
            size=8,
            color=theme.TEXT_SECONDARY,
        )
        for offset, day in enumerate(week.days()):
            row = WEEK_HEADER_ROWS + offset * DAY_ROWS
            lines_row = draw_day(page, area, row, day, DAY_ROWS)
            verbs.ruled_lines(area.col, lines_row, area.width_boxes, row + DAY_ROWS - lines_row)
        row = WEEK_HEADER_ROWS + 7 * DAY_ROWS
        for day in trailing_days:
            remaining = int(area.row + area.height_boxes) - row
            if remaining < 1:
                break
            row = draw_day(page, area, row, day, remaining)

    return draw


def _draw_dot_grid(page: PageRender, area: GridCell) -> None:
    _ = (page, area)


def plan_pages(
    year: int,
    *,
    grid: GridSystem = DEFAULT_GRID,
    events: EventSource | None = None,
) -> tuple[PlannerPage, ...]:
    """Return the planner's pages, each paired with its layout and content."""
    validate_year(year)
    pages = [
        PlannerPage(
            key=SEASONAL,
            title=f"Year {year}",
            layout=SidebarLayout(grid, tabs=PLANNER_TABS),
            draw=_draw_seasonal(year),
        )
    ]
    for index, destination in enumerate(INDEX_PAGES.destinations()):
        pages.append(
            PlannerPage(
                key=destination,
                title=INDEX_PAGES[index].label,
                layout=SidebarLayout(grid, tabs=PLANNER_TABS),
                draw=_draw_index,
                page_set_index=index,
            )
        )
    for week in weeks_in_year(year):
        pages.append(
            PlannerPage(
                key=week_destination(week.week_number),
                title=f"Week {week.week_number}",
                layout=SidebarLayout(grid, current_week=week.week_number, tabs=PLANNER_TABS),
                draw=_draw_week(year, week.week_number, events),
                week_num=week.week_number,
            )
        )
    pages.append(
        PlannerPage(
            key=DOT_GRID,
            title="Dot Grid",
            layout=FullPageLayout(grid),
            draw=_draw_dot_grid,
        )
    )
    return tuple(pages)


def render_planner(
    pdf: DrawingPrimitives,
    year: int,
    *,
    grid: GridSystem = DEFAULT_GRID,
    theme: type = Theme,
    events: EventSource | None = None,
    registry: VerbRegistry | None = None,
) -> int:
    """Draw every planner page onto ``pdf`` and return the number of pages."""
    pages = plan_pages(year, grid=grid, events=events)
    registry = registry or build_verb_registry()
    canvas = Canvas(pdf=pdf, grid=grid, theme=theme)
    week_count = sum(1 for page in pages if page.week_num is not None)
    dot_grid_form = define_dot_grid_form(canvas)

    for page_number, page in enumerate(pages, start=1):
        week = week_range(year, page.week_num) if page.week_num is not None else None
        context = RenderContext(
            page_key=page.key,
            page_number=page_number,
            year=year,
            week_num=page.week_num,
            week_start=week.start_date if week else None,
            week_end=week.end_date if week else None,
            total_weeks=week_count,
            total_pages=len(pages),
            page_set=(
                INDEX_PAGES[page.page_set_index] if page.page_set_index is not None else None
            ),
        )
        render_page(
            canvas,
            context=context,
            layout=page.layout,
            draw=page.draw,
            registry=registry,
            dot_grid_form=dot_grid_form,
            outline_title=page.title,
        )
        logger.debug("Rendered page %d/%d (%s)", page_number, len(pages), page.key)
    return len(pages)


def count_planner_pages(
    year: int,
    *,
    grid: GridSystem = DEFAULT_GRID,
    events: EventSource | None = None,
) -> int:
    """Render the planner without writing a file and return its page count."""
    pdf = RecordingPrimitives()
    render_planner(pdf, year, grid=grid, events=events)
    return pdf.pages


def generate_planner(
    year: int = DEFAULT_YEAR,
    output_path: str | Path | None = None,
    *,
    grid: GridSystem = DEFAULT_GRID,
    theme: type = Theme,
    events: EventSource | None = None,
    registry: VerbRegistry | None = None,
) -> Path:
    """Generate a planner PDF and return the output path."""
    validate_year(year)
    destination = Path(output_path or DEFAULT_FILENAME_TEMPLATE.format(year=year))
    destination.parent.mkdir(parents=True, exist_ok=True)

    pdf = create_reportlab_primitives(
        str(destination),
        pagesize=(grid.page_width, grid.page_height),
    )
    pdf.set_title(f"Planner {year}")
    page_count = render_planner(
        pdf, year, grid=grid, theme=theme, events=events, registry=registry
    )
    pdf.save()
    logger.info("Wrote %d-page planner to %s", page_count, destination)
    return destination
