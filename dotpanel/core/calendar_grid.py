"""
Month grid generation for the calendar popup.

A grid is a list of weeks, Sunday first. The first week is always the
weekday header, the following weeks hold the days of the displayed month,
padded with blank cells so that every week has exactly seven cells.
"""

import calendar
import datetime
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from dotpanel.core.errors import CalendarGridError

WEEKDAY_HEADERS: Tuple[str, ...] = ("S", "M", "T", "W", "T", "F", "S")
DAYS_PER_WEEK = 7
SATURDAY = 6
BLANK_LABEL = "  "


@dataclass(frozen=True)
class CalendarCell:
    label: str
    is_today: bool = False

    @property
    def is_blank(self) -> bool:
        return not self.label.strip()


Week = Tuple[CalendarCell, ...]
BLANK_CELL = CalendarCell(BLANK_LABEL)


def is_leap_year(year: int) -> bool:
    return calendar.isleap(year)


def days_in_month(month: int, year: int) -> int:
    """Number of days in ``month`` of ``year`` (proleptic Gregorian)."""
    _check_month(month)
    if month == 2 and is_leap_year(year):
        return 29
    return calendar.mdays[month]


def day_of_week(day: int, month: int, year: int) -> int:
    """
    Weekday index of a date, 0 for Sunday through 6 for Saturday.

    Works for any integer year, unlike ``datetime.date`` which stops at
    year 9999.
    """
    _check_month(month)
    offsets = (0, 3, 2, 5, 0, 3, 5, 1, 4, 6, 2, 4)
    if month < 3:
        year -= 1
    return (
        year + year // 4 - year // 100 + year // 400 + offsets[month - 1] + day
    ) % 7


def format_day(day: int) -> str:
    """Two character label for a day number: 0-9 are zero padded."""
    if 0 <= day <= 9:
        return f"0{day}"
    return str(day)


def today_in_period(today: datetime.date, month: int, year: int) -> Optional[int]:
    """Day of month to highlight, or None when ``today`` is outside the period."""
    if today.month == month and today.year == year:
        return today.day
    return None


def _check_month(month: int) -> None:
    if not isinstance(month, int) or not 1 <= month <= 12:
        raise CalendarGridError(f"Month must be between 1 and 12, got {month!r}")


@dataclass(frozen=True)
class CalendarGrid:
    month: int
    year: int
    weeks: Tuple[Week, ...]

    @classmethod
    def build(
        cls, month: int, year: int, today_day: Optional[int] = None
    ) -> "CalendarGrid":
        _check_month(month)
        header: Week = tuple(CalendarCell(letter) for letter in WEEKDAY_HEADERS)
        weeks: List[List[CalendarCell]] = [list(header), []]
        weeks[-1].extend([BLANK_CELL] * day_of_week(1, month, year))
        for day in range(1, days_in_month(month, year) + 1):
            weeks[-1].append(CalendarCell(format_day(day), day == today_day))
            if day_of_week(day, month, year) == SATURDAY:
                weeks.append([])
        if not weeks[-1]:
            weeks.pop()
        last = weeks[-1]
        last.extend([BLANK_CELL] * (DAYS_PER_WEEK - len(last)))
        return cls(month, year, tuple(tuple(week) for week in weeks))

    @property
    def header(self) -> Week:
        return self.weeks[0]

    @property
    def data_weeks(self) -> Tuple[Week, ...]:
        return self.weeks[1:]

    def day_cells(self) -> List[CalendarCell]:
        return [cell for week in self.data_weeks for cell in week if not cell.is_blank]

    @property
    def today(self) -> Optional[CalendarCell]:
        return next((cell for week in self.weeks for cell in week if cell.is_today), None)

    def __iter__(self) -> Iterator[Week]:
        return iter(self.weeks)

    def __len__(self) -> int:
        return len(self.weeks)

    def __getitem__(self, index):
        return self.weeks[index]


def build(month: int, year: int, today_day: Optional[int] = None) -> CalendarGrid:
    return CalendarGrid.build(month, year, today_day)
