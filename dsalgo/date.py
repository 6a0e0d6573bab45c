"""Calendar dates with day arithmetic on the proleptic Gregorian calendar."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["InvalidDateError", "Date", "is_leap_year", "days_in_month"]

_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


class InvalidDateError(ValueError):
    """Raised for a year, month and day that do not form a date."""


def is_leap_year(year: int) -> bool:
    """Tell whether ``year`` has a 29th of February."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in ``month`` of ``year``."""
    if month == 2 and is_leap_year(year):
        return 29
    return _MONTH_DAYS[month - 1]


def _validate(year: int, month: int, day: int) -> None:
    if year < 0:
        raise InvalidDateError(f"year {year} is negative")
    if not 1 <= month <= 12:
        raise InvalidDateError(f"month {month} is not between 1 and 12")
    if not 1 <= day <= days_in_month(year, month):
        raise InvalidDateError(f"day {day} does not exist in {year}-{month:02d}")


def _days_before_year(year: int) -> int:
    # Years 0 .. year-1; year 0 counts as a leap year.
    return 365 * year + (year + 3) // 4 - (year + 99) // 100 + (year + 399) // 400


def _ordinal(year: int, month: int, day: int) -> int:
    before_month = sum(days_in_month(year, m) for m in range(1, month))
    return _days_before_year(year) + before_month + day


def _from_ordinal(ordinal: int) -> tuple[int, int, int]:
    year = ordinal // 366
    while _days_before_year(year + 1) < ordinal:
        year += 1
    while year > 0 and _days_before_year(year) >= ordinal:
        year -= 1
    day = ordinal - _days_before_year(year)
    month = 1
    while day > days_in_month(year, month):
        day -= days_in_month(year, month)
        month += 1
    return year, month, day


@dataclass(order=True)
class Date:
    """A valid calendar date; defaults to 1 January of year 1."""

    year: int = 1
    month: int = 1
    day: int = 1

    def __post_init__(self) -> None:
        _validate(self.year, self.month, self.day)

    @property
    def leap(self) -> bool:
        """Whether this date's year is a leap year."""
        return is_leap_year(self.year)

    def set_date(self, year: int, month: int, day: int) -> None:
        """Change the date; raises InvalidDateError and leaves it unchanged if invalid."""
        _validate(year, month, day)
        self.year, self.month, self.day = year, month, day

    def days_until(self, year: int, month: int, day: int) -> int:
        """Return the number of days from this date to the given later date."""
        _validate(year, month, day)
        if (year, month, day) < (self.year, self.month, self.day):
            raise ValueError("the target date lies before this date")
        return _ordinal(year, month, day) - _ordinal(self.year, self.month, self.day)

    def add_days(self, days: int) -> None:
        """Move this date ``days`` days forward."""
        if days < 0:
            raise ValueError("days must not be negative")
        ordinal = _ordinal(self.year, self.month, self.day) + days
        self.year, self.month, self.day = _from_ordinal(ordinal)

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"