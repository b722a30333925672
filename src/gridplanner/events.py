"""Calendar events consumed by planner pages."""

from __future__ import annotations

import logging
from collections import Counter, defaultdict
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Protocol

DEFAULT_EVENT_LIMIT = 3

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CalendarEvent:
    """One event on one day."""

    date: date
    summary: str
    calendar_name: str = ""
    color: str | None = None
    icon: str | None = None
    all_day: bool = True

    def __post_init__(self) -> None:
        if not self.summary.strip():
            msg = "event summary cannot be empty."
            raise ValueError(msg)

    @property
    def label(self) -> str:
        if self.icon:
            return f"{self.icon} {self.summary}"
        return self.summary


class EventSource(Protocol):
    """Anything that can list the events of a day."""

    def events_for_date(
        self, day: date, limit: int = DEFAULT_EVENT_LIMIT
    ) -> Sequence[CalendarEvent]: ...


class EventStore:
    """In-memory events indexed by date."""

    def __init__(self, events: Iterable[CalendarEvent] = ()) -> None:
        self._by_date: dict[date, list[CalendarEvent]] = defaultdict(list)
        for event in events:
            self.add_event(event)

    def add_event(self, event: CalendarEvent) -> None:
        self._by_date[event.date].append(event)

    def __len__(self) -> int:
        return sum(len(events) for events in self._by_date.values())

    def events_for_date(
        self, day: date, limit: int = DEFAULT_EVENT_LIMIT
    ) -> tuple[CalendarEvent, ...]:
        if limit < 0:
            msg = f"limit must be >= 0, got {limit}."
            raise ValueError(msg)
        events = sorted(
            self._by_date.get(day, ()), key=lambda event: (event.calendar_name, event.summary)
        )
        return tuple(events[:limit])

    def events_for_date_range(
        self, start: date, end: date
    ) -> dict[date, tuple[CalendarEvent, ...]]:
        """Return every event from ``start`` to ``end`` inclusive, keyed by day."""
        if end < start:
            msg = f"range end {end.isoformat()} is before start {start.isoformat()}."
            raise ValueError(msg)
        result: dict[date, tuple[CalendarEvent, ...]] = {}
        day = start
        while day <= end:
            events = self._by_date.get(day)
            if events:
                result[day] = self.events_for_date(day, limit=len(events))
            day += timedelta(days=1)
        return result

    def statistics(self) -> dict[str, object]:
        calendars = Counter(
            event.calendar_name for events in self._by_date.values() for event in events
        )
        days = sorted(day for day, events in self._by_date.items() if events)
        return {
            "total_events": sum(calendars.values()),
            "days_with_events": len(days),
            "calendars": dict(calendars),
            "first_date": days[0] if days else None,
            "last_date": days[-1] if days else None,
        }


def safe_events_for_date(
    source: EventSource | None, day: date, limit: int = DEFAULT_EVENT_LIMIT
) -> tuple[CalendarEvent, ...]:
    """Ask ``source`` for a day's events; failures degrade to no events."""
    if source is None:
        return ()
    try:
        return tuple(source.events_for_date(day, limit))[:limit]
    except Exception:  # noqa: BLE001
        logger.warning(
            "Calendar lookup failed for %s; rendering without events",
            day.isoformat(),
            exc_info=True,
        )
        return ()
