"""Tests for calendar events and failure handling."""

from __future__ import annotations

import unittest
from datetime import date

from gridplanner.events import CalendarEvent, EventStore, safe_events_for_date


class _BrokenSource:
    def events_for_date(self, day: date, limit: int = 3) -> list[CalendarEvent]:
        raise ConnectionError("calendar feed unavailable")


class EventStoreTests(unittest.TestCase):
    def setUp(self) -> None:
        self.store = EventStore(
            [
                CalendarEvent(date(2025, 3, 3), "Standup", calendar_name="work"),
                CalendarEvent(date(2025, 3, 3), "Dentist", calendar_name="home", icon="*"),
                CalendarEvent(date(2025, 3, 3), "Review", calendar_name="work"),
                CalendarEvent(date(2025, 3, 3), "Lunch", calendar_name="home"),
                CalendarEvent(date(2025, 3, 5), "Gym", calendar_name="home"),
            ]
        )

    def test_events_for_date_are_sorted_and_limited(self) -> None:
        events = self.store.events_for_date(date(2025, 3, 3))
        self.assertEqual([event.summary for event in events], ["Dentist", "Lunch", "Review"])
        self.assertEqual(events[0].label, "* Dentist")
        self.assertEqual(len(self.store.events_for_date(date(2025, 3, 3), limit=10)), 4)
        self.assertEqual(self.store.events_for_date(date(2025, 3, 4)), ())
        with self.assertRaises(ValueError):
            self.store.events_for_date(date(2025, 3, 3), limit=-1)

    def test_events_for_date_range(self) -> None:
        events = self.store.events_for_date_range(date(2025, 3, 1), date(2025, 3, 31))
        self.assertEqual(list(events), [date(2025, 3, 3), date(2025, 3, 5)])
        self.assertEqual(len(events[date(2025, 3, 3)]), 4)
        with self.assertRaises(ValueError):
            self.store.events_for_date_range(date(2025, 3, 5), date(2025, 3, 1))

    def test_statistics(self) -> None:
        stats = self.store.statistics()
        self.assertEqual(stats["total_events"], 5)
        self.assertEqual(stats["days_with_events"], 2)
        self.assertEqual(stats["calendars"], {"work": 2, "home": 3})
        self.assertEqual(stats["first_date"], date(2025, 3, 3))
        self.assertEqual(stats["last_date"], date(2025, 3, 5))
        self.assertEqual(EventStore().statistics()["first_date"], None)

    def test_empty_summary_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            CalendarEvent(date(2025, 1, 1), "  ")


class SafeEventLookupTests(unittest.TestCase):
    def test_missing_source_yields_no_events(self) -> None:
        self.assertEqual(safe_events_for_date(None, date(2025, 1, 1)), ())

    def test_failing_source_degrades_to_no_events(self) -> None:
        with self.assertLogs("gridplanner.events", level="WARNING") as captured:
            events = safe_events_for_date(_BrokenSource(), date(2025, 1, 1))
        self.assertEqual(events, ())
        self.assertIn("Calendar lookup failed for 2025-01-01", captured.output[0])

    def test_results_are_capped_at_limit(self) -> None:
        store = EventStore(
            CalendarEvent(date(2025, 1, 1), f"Event {index}") for index in range(5)
        )
        self.assertEqual(len(safe_events_for_date(store, date(2025, 1, 1), limit=2)), 2)


if __name__ == "__main__":
    unittest.main()
