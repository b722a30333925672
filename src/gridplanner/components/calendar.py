"""Compact month calendar linked to weekly pages."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any

from ..canvas import Canvas
from ..config import MONTH_NAMES, WEEKDAY_INITIALS
from ..dates import MINI_MONTH_HEIGHT, find_week_number, month_weeks
from ..destinations import week_destination
from .text import h1, text_baseline

DAY_FONT_SIZE = 7
WEEKEND_OPACITY = 0.1


@dataclass(frozen=True)
class MiniMonth:
    """Month title, weekday initials and a day grid, eight boxes tall.

    Each day links to the weekly page that contains it.
    """

    canvas: Canvas
    col: float
    row: float
    width: float
    year: int
    month: int
    align: str = "center"
    show_weekend_bg: bool = True
    show_links: bool = True

    height_boxes = MINI_MONTH_HEIGHT

    def render(self) -> None:
        weeks = month_weeks(self.year, self.month)
        title = MONTH_NAMES[self.month - 1]
        h1(self.canvas, self.col, self.row, title, width=self.width, align=self.align)
        self._draw_weekday_headers()
        for week_index, week in enumerate(weeks):
            for day_index, day in enumerate(week):
                if day:
                    self._draw_day(self.row + 2 + week_index, day_index, day)

    @property
    def column_width(self) -> float:
        return self.canvas.grid.width(self.width) / 7

    def _column_x(self, day_index: int) -> float:
        return self.canvas.grid.x(self.col) + day_index * self.column_width

    def _draw_weekday_headers(self) -> None:
        grid = self.canvas.grid
        pdf = self.canvas.pdf
        top = grid.y(self.row + 1)
        baseline = text_baseline(top, top - grid.box_size, DAY_FONT_SIZE)
        pdf.set_font(self.canvas.theme.FONT_REGULAR, DAY_FONT_SIZE)
        pdf.set_fill_color(self.canvas.theme.TEXT_PRIMARY)
        for day_index, label in enumerate(WEEKDAY_INITIALS):
            pdf.draw_centred_string(
                self._column_x(day_index) + self.column_width / 2, baseline, label
            )

    def _draw_day(self, cal_row: int, day_index: int, day: int) -> None:
        grid = self.canvas.grid
        pdf = self.canvas.pdf
        theme = self.canvas.theme
        cell_x = self._column_x(day_index)
        top = grid.y(cal_row)
        bottom = top - grid.box_size

        if self.show_weekend_bg and day_index >= 5:
            with self.canvas.state():
                pdf.set_fill_alpha(WEEKEND_OPACITY)
                pdf.set_fill_color(theme.WEEKEND_BG)
                pdf.rect(cell_x, bottom, self.column_width, grid.box_size, fill=1, stroke=0)

        pdf.set_font(theme.FONT_REGULAR, DAY_FONT_SIZE)
        pdf.set_fill_color(theme.TEXT_PRIMARY)
        pdf.draw_centred_string(
            cell_x + self.column_width / 2,
            text_baseline(top, bottom, DAY_FONT_SIZE),
            str(day),
        )

        if not self.show_links:
            return
        week_num = find_week_number(self.year, date(self.year, self.month, day))
        if week_num is not None:
            pdf.link_rect(
                week_destination(week_num),
                (cell_x, bottom, cell_x + self.column_width, top),
            )


def mini_month(
    canvas: Canvas,
    col: float,
    row: float,
    width: float,
    year: int,
    month: int,
    **options: Any,
) -> None:
    MiniMonth(canvas, col, row, width, year, month, **options).render()
