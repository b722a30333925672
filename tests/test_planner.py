"""Tests for planner generation."""

from __future__ import annotations

import re
import tempfile
import unittest
from datetime import date
from pathlib import Path

from gridplanner.drawing import RecordingPrimitives
from gridplanner.events import CalendarEvent, EventStore
from gridplanner.grid import DEFAULT_GRID, GridSystem
from gridplanner.layouts import FullPageLayout, SidebarLayout
from gridplanner.planner import (
    count_planner_pages,
    expected_page_count,
    generate_planner,
    plan_pages,
    planner_page_keys,
    render_planner,
)
from gridplanner.rendering import DOT_GRID_FORM
from gridplanner.theme_profiles import resolve_theme

_PDF_PAGE_PATTERN = re.compile(rb"/Type\s*/Page\b")
_PDF_LINK_PATTERN = re.compile(rb"/Subtype /Link")


class _BrokenSource:
    def events_for_date(self, day: date, limit: int = 3) -> list[CalendarEvent]:
        raise TimeoutError("calendar feed timed out")


class PlannerPagesTests(unittest.TestCase):
    def test_page_keys_in_document_order(self) -> None:
        keys = planner_page_keys(2025)
        self.assertEqual(keys[:4], ("seasonal", "index_1", "index_2", "week_1"))
        self.assertEqual(keys[-2:], ("week_53", "dots"))
        self.assertEqual(len(keys), len(set(keys)))
        self.assertEqual(expected_page_count(2025), 57)

    def test_pages_pair_keys_with_layouts(self) -> None:
        pages = plan_pages(2025)
        self.assertEqual(tuple(page.key for page in pages), planner_page_keys(2025))
        self.assertIsInstance(pages[0].layout, SidebarLayout)
        self.assertIsInstance(pages[-1].layout, FullPageLayout)
        self.assertEqual(pages[3].week_num, 1)
        self.assertEqual(pages[3].layout.current_week, 1)
        self.assertEqual(pages[2].page_set_index, 1)

    def test_invalid_years_are_rejected(self) -> None:
        with self.assertRaises(ValueError):
            plan_pages(0)
        with self.assertRaises(TypeError):
            planner_page_keys("2025")  # type: ignore[arg-type]


class RenderPlannerTests(unittest.TestCase):
    def test_every_page_is_bookmarked_and_shown(self) -> None:
        pdf = RecordingPrimitives()
        page_count = render_planner(pdf, 2025)

        self.assertEqual(page_count, expected_page_count(2025))
        self.assertEqual(pdf.pages, page_count)
        bookmarks = [call.args[0] for call in pdf.calls_named("bookmark_page")]
        self.assertEqual(tuple(bookmarks), planner_page_keys(2025))

    def test_links_only_target_existing_pages(self) -> None:
        pdf = RecordingPrimitives()
        render_planner(pdf, 2025)
        keys = set(planner_page_keys(2025))
        destinations = set(pdf.link_destinations())
        self.assertLessEqual(destinations, keys)
        self.assertIn("week_53", destinations)
        self.assertIn("index_1", destinations)

    def test_dry_run_counts_pages(self) -> None:
        self.assertEqual(count_planner_pages(2026), expected_page_count(2026))
        self.assertEqual(count_planner_pages(2026, grid=GridSystem.exact(43, 55)), 57)

    def test_dot_grid_is_defined_once_and_reused(self) -> None:
        pdf = RecordingPrimitives()
        render_planner(pdf, 2026)
        self.assertEqual(pdf.calls_named("begin_form")[0].args, (DOT_GRID_FORM,))
        self.assertEqual(len(pdf.calls_named("begin_form")), 1)
        self.assertEqual(len(pdf.calls_named("do_form")), expected_page_count(2026))

    def test_week_pages_show_calendar_events(self) -> None:
        events = EventStore(
            [
                CalendarEvent(date(2025, 1, 1), "New Year", icon="*"),
                CalendarEvent(date(2025, 12, 31), "Last day"),
            ]
        )
        pdf = RecordingPrimitives()
        render_planner(pdf, 2025, events=events)
        texts = pdf.texts()
        self.assertIn("* New Year", texts)
        self.assertIn("Last day", texts)
        self.assertIn("Week 1", texts)
        self.assertIn("Wed 01/01", texts)

    def test_failing_calendar_does_not_stop_rendering(self) -> None:
        pdf = RecordingPrimitives()
        with self.assertLogs("gridplanner.events", level="WARNING"):
            page_count = render_planner(pdf, 2025, events=_BrokenSource())
        self.assertEqual(page_count, expected_page_count(2025))

    def test_unparseable_event_color_falls_back_to_theme(self) -> None:
        events = EventStore(
            [
                CalendarEvent(date(2025, 3, 4), "Standup", color="not-a-color"),
                CalendarEvent(date(2025, 3, 5), "Review", color="#336699"),
            ]
        )
        pdf = RecordingPrimitives()
        with self.assertLogs("gridplanner.planner", level="WARNING") as logs:
            page_count = render_planner(pdf, 2025, events=events)

        self.assertEqual(page_count, expected_page_count(2025))
        self.assertIn("Standup", pdf.texts())
        self.assertIn("Review", pdf.texts())
        self.assertIn("not-a-color", logs.output[0])

    def test_last_day_after_week_53_is_drawn(self) -> None:
        events = EventStore([CalendarEvent(date(2012, 12, 31), "Year end")])
        pdf = RecordingPrimitives()
        render_planner(pdf, 2012, events=events)
        texts = pdf.texts()
        self.assertIn("Sun 12/30", texts)
        self.assertIn("Mon 12/31", texts)
        self.assertIn("Year end", texts)
        self.assertLess(texts.index("Sun 12/30"), texts.index("Mon 12/31"))

    def test_no_trailing_day_when_week_53_reaches_next_year(self) -> None:
        pdf = RecordingPrimitives()
        render_planner(pdf, 2025)
        self.assertEqual(pdf.texts().count("Wed 12/31"), 1)

    def test_seasonal_page_lists_every_month(self) -> None:
        pdf = RecordingPrimitives()
        render_planner(pdf, 2025)
        first_page = pdf.calls[: [call.name for call in pdf.calls].index("show_page")]
        texts = [
            call.args[2]
            for call in first_page
            if call.name in ("draw_string", "draw_centred_string", "draw_right_string")
        ]
        self.assertIn("Year 2025", texts)
        for name in ("Winter", "Spring", "Summer", "Fall", "January", "December"):
            self.assertIn(name, texts)

    def test_theme_is_applied_to_page_background(self) -> None:
        theme = resolve_theme(profile="dark")
        pdf = RecordingPrimitives()
        render_planner(pdf, 2025, theme=theme)
        background_fills = [
            call
            for call in pdf.calls_named("rect")
            if call.args[2] == DEFAULT_GRID.page_width and call.kwargs.get("fill") == 1
        ]
        self.assertEqual(len(background_fills), expected_page_count(2025))
        fill_colors = [call.args[0] for call in pdf.calls_named("set_fill_color")]
        self.assertIn(theme.BACKGROUND, fill_colors)


class GeneratePlannerTests(unittest.TestCase):
    def test_generate_planner_rejects_invalid_year(self) -> None:
        with self.assertRaises(ValueError):
            generate_planner(year=0, output_path=Path("unused.pdf"))
        with self.assertRaises(TypeError):
            generate_planner(year="2026", output_path=Path("unused.pdf"))  # type: ignore[arg-type]
        with self.assertRaises(TypeError):
            generate_planner(year=True, output_path=Path("unused.pdf"))  # type: ignore[arg-type]

    def test_generate_planner_writes_linked_pdf(self) -> None:
        with tempfile.TemporaryDirectory() as tmp_dir:
            output_path = Path(tmp_dir) / "out" / "planner.pdf"
            with self.assertLogs("gridplanner.planner", level="INFO"):
                generated_path = generate_planner(year=2026, output_path=output_path)

            self.assertEqual(generated_path, output_path)
            self.assertTrue(output_path.exists())

            data = output_path.read_bytes()
            self.assertTrue(data.startswith(b"%PDF"))
            self.assertEqual(len(_PDF_PAGE_PATTERN.findall(data)), expected_page_count(2026))
            self.assertIn(b"Planner 2026", data)
            self.assertGreater(len(_PDF_LINK_PATTERN.findall(data)), 2000)


if __name__ == "__main__":
    unittest.main()
