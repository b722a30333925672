"""Monday-based week numbering and calendar grouping for planner years."""

from __future__ import annotations

import calendar
from collections.abc import Iterator
from dataclasses import dataclass
from datetime import date, timedelta

from .config import MONTH_ABBREVIATIONS

MAX_WEEKS = 53
MINI_MONTH_HEIGHT = 8
SEASON_GAP = 1


@dataclass(frozen=True)
class WeekRange:
    """One numbered week of a planner year."""

    week_number: int
    year: int
    start_date: date
    end_date: date

    def days(self) -> tuple[date, ...]:
        return tuple(self.start_date + timedelta(days=offset) for offset in range(7))

    def __contains__(self, day: object) -> bool:
        return isinstance(day, date) and self.start_date <= day <= self.end_date


@dataclass(frozen=True)
class Season:
    """A named group of months on the seasonal overview."""

    name: str
    months: tuple[int, ...]

    @property
    def height_boxes(self) -> int:
        return calculate_season_height(len(self.months))


SEASONS = (
    Season(name="Winter", months=(1, 2)),
    Season(name="Spring", months=(3, 4, 5, 6)),
    Season(name="Summer", months=(7, 8)),
    Season(name="Fall", months=(9, 10, 11, 12)),
)


def validate_year(year: int) -> None:
    if isinstance(year, bool) or not isinstance(year, int):
        msg = "year must be an integer."
        raise TypeError(msg)
    if not 1 <= year <= 9998:
        msg = "year must be between 1 and 9998."
        raise ValueError(msg)


def _validate_month(month: int) -> None:
    if not 1 <= month <= 12:
        msg = f"month must be between 1 and 12, got {month}."
        raise ValueError(msg)


def year_start_monday(year: int) -> date:
    """Return the Monday on or before January 1."""
    validate_year(year)
    first_day = date(year, 1, 1)
    return first_day - timedelta(days=first_day.weekday())


def _raw_week_number(year: int, day: date) -> int:
    return (day - year_start_monday(year)).days // 7 + 1


def total_weeks(year: int) -> int:
    """Return the number of weeks in ``year``: the week covering December 31.

    When December 31 is a Monday (leap years starting on a Sunday, such as 2012
    and 2040) that day already opens week 1 of the next year, so the count stays
    at 53 and ``week_number_for_date`` rejects it. Planner documents draw such a
    day below the last week's days instead.
    """
    return min(_raw_week_number(year, date(year, 12, 31)), MAX_WEEKS)


def _validate_week(year: int, week_num: int) -> None:
    weeks = total_weeks(year)
    if isinstance(week_num, bool) or not isinstance(week_num, int):
        msg = "week number must be an integer."
        raise TypeError(msg)
    if not 1 <= week_num <= weeks:
        msg = f"week {week_num} is out of range for {year} (1-{weeks})."
        raise ValueError(msg)


def week_start(year: int, week_num: int) -> date:
    _validate_week(year, week_num)
    return year_start_monday(year) + timedelta(days=(week_num - 1) * 7)


def week_end(year: int, week_num: int) -> date:
    return week_start(year, week_num) + timedelta(days=6)


def week_range(year: int, week_num: int) -> WeekRange:
    start = week_start(year, week_num)
    return WeekRange(
        week_number=week_num,
        year=year,
        start_date=start,
        end_date=start + timedelta(days=6),
    )


def weeks_in_year(year: int) -> Iterator[WeekRange]:
    for week_num in range(1, total_weeks(year) + 1):
        yield week_range(year, week_num)


def week_number_for_date(year: int, day: date) -> int:
    """Return the planner week of ``year`` that contains ``day``."""
    week_num = _raw_week_number(year, day)
    if not 1 <= week_num <= total_weeks(year):
        msg = f"{day.isoformat()} is outside the weeks of {year}."
        raise ValueError(msg)
    return week_num


def find_week_number(year: int, day: date) -> int | None:
    """Like ``week_number_for_date`` but returns None outside the year."""
    week_num = _raw_week_number(year, day)
    if 1 <= week_num <= total_weeks(year):
        return week_num
    return None


def first_week_of_month(year: int, month: int) -> int:
    """Return the week that contains day 1 of ``month``."""
    _validate_month(month)
    return week_number_for_date(year, date(year, month, 1))


def week_to_month_map(year: int, *, chars: int = 3) -> dict[int, str]:
    """Map each week holding the 1st of a month to that month's abbreviation.

    Week 1 always carries January, even when its Monday falls in December.
    """
    if chars < 1:
        msg = "chars must be >= 1."
        raise ValueError(msg)
    return {
        first_week_of_month(year, month): MONTH_ABBREVIATIONS[month - 1][:chars]
        for month in range(1, 13)
    }


def month_abbrev_for_week(year: int, week_num: int, *, chars: int = 3) -> str | None:
    _validate_week(year, week_num)
    return week_to_month_map(year, chars=chars).get(week_num)


def month_for_week(year: int, week_num: int) -> int:
    """Return the month a week belongs to, judged by its first day inside ``year``."""
    start = week_start(year, week_num)
    if start.year < year:
        return 1
    return start.month


def days_in_month(year: int, month: int) -> int:
    validate_year(year)
    _validate_month(month)
    return calendar.monthrange(year, month)[1]


def month_weeks(year: int, month: int) -> list[list[int]]:
    """Return the month grid in Monday-first format; 0 marks days outside the month."""
    validate_year(year)
    _validate_month(month)
    return calendar.Calendar(firstweekday=calendar.MONDAY).monthdayscalendar(year, month)


def season_for_month(month: int) -> Season:
    _validate_month(month)
    return next(season for season in SEASONS if month in season.months)


def calculate_season_height(month_count: int) -> int:
    """Return the rows a season needs: one mini month plus a gap per month."""
    if month_count < 1:
        msg = f"month_count must be >= 1, got {month_count}."
        raise ValueError(msg)
    return month_count * MINI_MONTH_HEIGHT + month_count * SEASON_GAP
