import calendar
import datetime

import pytest

from dotpanel.core.calendar_grid import (
    BLANK_LABEL,
    CalendarGrid,
    build,
    day_of_week,
    days_in_month,
    format_day,
    is_leap_year,
    today_in_period,
)
from dotpanel.core.errors import CalendarGridError

PERIODS = [(month, year) for year in (1900, 2000, 2021, 2023, 2024) for month in range(1, 13)]


@pytest.mark.parametrize("month, year", PERIODS)
def test_every_data_week_has_seven_cells(month, year):
    grid = build(month, year)
    assert all(len(week) == 7 for week in grid)
    assert sum(len(week) for week in grid[1:]) == 7 * len(grid[1:])


@pytest.mark.parametrize("month, year", PERIODS)
def test_day_cells_match_days_in_month(month, year):
    grid = build(month, year)
    assert len(grid.day_cells()) == calendar.monthrange(year, month)[1]


@pytest.mark.parametrize("month, year", PERIODS)
def test_labels_are_contiguous_and_zero_padded(month, year):
    grid = build(month, year)
    labels = [cell.label for cell in grid.day_cells()]
    expected = [f"{day:02d}" for day in range(1, days_in_month(month, year) + 1)]
    assert labels == expected


@pytest.mark.parametrize("month, year", PERIODS)
def test_first_day_lands_in_its_weekday_column(month, year):
    grid = build(month, year)
    first_week = grid.data_weeks[0]
    column = [cell.label for cell in first_week].index("01")
    assert column == (calendar.weekday(year, month, 1) + 1) % 7
    assert all(cell.label == BLANK_LABEL for cell in first_week[:column])


@pytest.mark.parametrize("month, year", PERIODS)
def test_no_trailing_empty_week(month, year):
    grid = build(month, year)
    assert not all(cell.is_blank for cell in grid.data_weeks[-1])


def test_header_row():
    grid = build(3, 2024, today_day=3)
    assert [cell.label for cell in grid.header] == ["S", "M", "T", "W", "T", "F", "S"]
    assert not any(cell.is_today for cell in grid.header)


def test_leap_february_ends_on_29():
    grid = build(2, 2024)
    assert days_in_month(2, 2024) == 29
    last_real = [cell for cell in grid[-1] if not cell.is_blank][-1]
    assert last_real.label == "29"
    assert grid.day_cells()[-1] is last_real


def test_last_day_of_month_is_not_dropped():
    grid = build(1, 2021)
    assert grid.day_cells()[-1].label == "31"


def test_january_2021_starts_on_friday():
    grid = build(1, 2021)
    first_week = grid[1]
    assert [cell.label for cell in first_week[:6]] == [BLANK_LABEL] * 5 + ["01"]
    assert first_week[6].label == "02"


def test_month_starting_on_saturday_wraps_after_first_day():
    # 1 June 2024 is a Saturday
    grid = build(6, 2024)
    assert [cell.label for cell in grid[1]] == [BLANK_LABEL] * 6 + ["01"]
    assert grid[2][0].label == "02"


def test_month_ending_on_saturday_has_no_extra_week():
    # 31 August 2024 is a Saturday
    grid = build(8, 2024)
    assert grid[-1][6].label == "31"
    assert len(grid.data_weeks) == 5


def test_today_is_marked_once():
    grid = build(2, 2024, today_day=15)
    today_cells = [cell for week in grid for cell in week if cell.is_today]
    assert len(today_cells) == 1
    assert today_cells[0].label == "15"
    assert grid.today is today_cells[0]


@pytest.mark.parametrize("today_day", [None, 0, 30, 31, -1])
def test_today_outside_month_is_not_marked(today_day):
    grid = build(2, 2024, today_day=today_day)
    assert grid.today is None


def test_today_marked_on_last_day():
    grid = build(2, 2023, today_day=28)
    assert grid.today.label == "28"


@pytest.mark.parametrize("month", [0, 13, -1])
def test_invalid_month_is_rejected(month):
    with pytest.raises(CalendarGridError):
        build(month, 2024)


def test_invalid_month_is_a_value_error():
    with pytest.raises(ValueError):
        CalendarGrid.build(14, 2024)


@pytest.mark.parametrize(
    "day, label", [(0, "00"), (5, "05"), (9, "09"), (10, "10"), (15, "15"), (31, "31")]
)
def test_format_day(day, label):
    assert format_day(day) == label


@pytest.mark.parametrize("year, leap", [(1900, False), (2000, True), (2023, False), (2024, True)])
def test_leap_years(year, leap):
    assert is_leap_year(year) is leap
    assert days_in_month(2, year) == (29 if leap else 28)


def test_day_of_week_matches_datetime():
    for year in (1, 1582, 1970, 2021, 2024, 9999):
        for month in range(1, 13):
            expected = (datetime.date(year, month, 1).weekday() + 1) % 7
            assert day_of_week(1, month, year) == expected


def test_years_beyond_datetime_range():
    grid = build(2, 10000)
    assert len(grid.day_cells()) == 29
    assert all(len(week) == 7 for week in grid)


def test_cells_are_immutable():
    grid = build(5, 2024)
    with pytest.raises(AttributeError):
        grid[1][0].label = "99"


def test_today_in_period():
    today = datetime.date(2024, 2, 15)
    assert today_in_period(today, 2, 2024) == 15
    assert today_in_period(today, 3, 2024) is None
    assert today_in_period(today, 2, 2023) is None


def test_month_starting_on_sunday_has_no_padding():
    # 1 September 2024 is a Sunday
    grid = build(9, 2024)
    assert grid[1][0].label == "01"
    assert grid[1][6].label == "07"
