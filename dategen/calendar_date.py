"""
Calendar date module for the date generator system.

Contains the proleptic Gregorian calendar arithmetic (validation, leap years,
epoch day counts, weekdays) as free functions over a (day, month, year)
triple, and the CalendarDate value type that delegates to them.
"""

from dataclasses import dataclass
from datetime import date
from functools import total_ordering
from typing import Callable, Optional, Tuple

from dategen.models import DateValidationResult


DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December"
)

# Zeller's congruence yields 0 = Saturday
WEEKDAY_NAMES = (
    "Saturday", "Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday"
)


class InvalidArgumentError(ValueError):
    """Exception raised when a date, a date field or a range bound is invalid.

    Attributes:
        field: Name of the offending field (e.g. "month", "min_day")
        value: The rejected value
    """

    def __init__(self, field: str, value, message: str):
        super().__init__(message)
        self.field = field
        self.value = value


def is_integer(value) -> bool:
    """Check that value is an int and not a bool."""
    return isinstance(value, int) and not isinstance(value, bool)


def is_valid_year(year: int) -> bool:
    return is_integer(year) and year >= 1


def is_valid_month(month: int) -> bool:
    return is_integer(month) and 1 <= month <= 12


def _require_year(year: int, field: str = "year") -> None:
    if not is_valid_year(year):
        raise InvalidArgumentError(field, year, f"Invalid year: {year} must be an integer greater than 0")


def _require_month(month: int, field: str = "month") -> None:
    if not is_valid_month(month):
        raise InvalidArgumentError(field, month, f"Invalid month: {month} must be an integer between 1 and 12")


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year.

    A year is a leap year if it is divisible by 4 but not by 100,
    except when it is also divisible by 400.

    Raises:
        InvalidArgumentError: If year is less than 1
    """
    _require_year(year)
    return (year % 4 == 0 and year % 100 != 0) or (year % 400 == 0)


def days_in_month(month: int, year: int) -> int:
    """Return the number of days in a month, 29 for February in leap years.

    Raises:
        InvalidArgumentError: If month or year is invalid
    """
    _require_year(year)
    _require_month(month)
    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month - 1]


def is_valid_day(day: int, month: int, year: int) -> bool:
    """Check if day exists in the given month and year.

    An invalid month or year makes every day invalid.
    """
    if not (is_valid_year(year) and is_valid_month(month)):
        return False
    return is_integer(day) and 1 <= day <= days_in_month(month, year)


def check_date(day: int, month: int, year: int) -> DateValidationResult:
    """Validate a date triple and describe the first failing field.

    Fields are checked in the order year, month, day.

    Args:
        day: Day of the month
        month: Month of the year (1-12)
        year: Year (1 and above)

    Returns:
        DateValidationResult with the outcome
    """
    if not is_valid_year(year):
        return DateValidationResult.failure("year", year, f"year {year} must be an integer greater than 0")
    if not is_valid_month(month):
        return DateValidationResult.failure("month", month, f"month {month} must be an integer between 1 and 12")
    if not is_valid_day(day, month, year):
        limit = days_in_month(month, year)
        return DateValidationResult.failure(
            "day", day, f"day {day} must be an integer between 1 and {limit} for {MONTH_NAMES[month - 1]} {year}"
        )
    return DateValidationResult.success()


def is_valid_date(day: int, month: int, year: int) -> bool:
    return check_date(day, month, year).is_valid


def require_valid_date(day: int, month: int, year: int) -> None:
    """Raise InvalidArgumentError unless (day, month, year) is a valid date."""
    result = check_date(day, month, year)
    if not result.is_valid:
        raise InvalidArgumentError(
            result.field,
            result.value,
            f"Invalid date: {month} {day}, {year} ({result.reason})"
        )


def month_name(month: int) -> str:
    """Return the English name of a month (1 = January)."""
    _require_month(month)
    return MONTH_NAMES[month - 1]


def day_of_week(day: int, month: int, year: int) -> str:
    """Return the weekday name of a date using Zeller's congruence.

    January and February are treated as months 13 and 14 of the
    previous year.

    Raises:
        InvalidArgumentError: If the date is invalid
    """
    require_valid_date(day, month, year)

    m = month
    y = year
    if m < 3:
        m += 12
        y -= 1

    k = y % 100  # year within the century
    j = y // 100  # zero-based century

    h = (day + (13 * (m + 1)) // 5 + k + k // 4 + j // 4 + 5 * j) % 7
    return WEEKDAY_NAMES[h]


def to_days(day: int, month: int, year: int) -> int:
    """Convert a date to the number of days since the epoch.

    January 1 of year 1 is day 1.

    Args:
        day: Day of the month
        month: Month of the year (1-12)
        year: Year (1 and above)

    Returns:
        Epoch day count

    Raises:
        InvalidArgumentError: If the date is invalid
    """
    require_valid_date(day, month, year)

    previous_years = year - 1
    days = previous_years * 365
    # Leap days in the years strictly before this one
    days += previous_years // 4 - previous_years // 100 + previous_years // 400

    for i in range(1, month):
        days += days_in_month(i, year)

    return days + day


def calculate_difference(first: "CalendarDate", second: "CalendarDate") -> int:
    """Return the absolute number of days between two dates."""
    return abs(
        to_days(first.day, first.month, first.year)
        - to_days(second.day, second.month, second.year)
    )


def format_date(day: int, month: int, year: int, end: str = "\n") -> str:
    """Render a date as "<MonthName> <day>, <year>" followed by end.

    Raises:
        InvalidArgumentError: If the date is invalid
    """
    require_valid_date(day, month, year)
    return f"{MONTH_NAMES[month - 1]} {day}, {year}{end}"


def has_leap_year_in_range(min_year: int, max_year: int) -> bool:
    """Check whether at least one leap year lies in [min_year, max_year].

    Only the first multiple of 4 not before min_year is inspected; when it
    is a non-leap century year the next candidate is 4 years later.

    Raises:
        InvalidArgumentError: If either year is invalid or min_year > max_year
    """
    _require_year(min_year, "min_year")
    _require_year(max_year, "max_year")
    if min_year > max_year:
        raise InvalidArgumentError(
            "min_year", min_year, f"Invalid year: {min_year} must be less or equal than {max_year}"
        )

    candidate = min_year + (-min_year) % 4
    if candidate % 100 == 0 and candidate % 400 != 0:
        candidate += 4
    return candidate <= max_year


def _days_table(leap: bool) -> Tuple[int, ...]:
    if leap:
        return DAYS_IN_MONTH[:1] + (29,) + DAYS_IN_MONTH[2:]
    return DAYS_IN_MONTH


def _month_span(min_month: int, max_month: int, leap: bool) -> Tuple[int, ...]:
    _require_month(min_month, "min_month")
    _require_month(max_month, "max_month")
    if min_month > max_month:
        raise InvalidArgumentError(
            "min_month", min_month, f"Invalid month: {min_month} must be less or equal than {max_month}"
        )
    return _days_table(leap)[min_month - 1:max_month]


def min_days_in_months(min_month: int, max_month: int, leap: bool) -> int:
    """Return the shortest month length in [min_month, max_month].

    Args:
        min_month: First month of the span (1-12)
        max_month: Last month of the span (1-12)
        leap: Whether February counts 29 days
    """
    return min(_month_span(min_month, max_month, leap))


def max_days_in_months(min_month: int, max_month: int, leap: bool) -> int:
    """Return the longest month length in [min_month, max_month]."""
    return max(_month_span(min_month, max_month, leap))


@total_ordering
@dataclass(eq=False, frozen=True)
class CalendarDate:
    """A valid proleptic Gregorian date.

    Instances always hold a valid (day, month, year); the constructor and
    update_date raise InvalidArgumentError otherwise, and the fields cannot
    be assigned directly. Dates order by (year, month, day).

    Attributes:
        day: Day of the month
        month: Month of the year (1-12)
        year: Year (1 and above)
    """
    day: int = 1
    month: int = 1
    year: int = 1

    def __post_init__(self):
        require_valid_date(self.day, self.month, self.year)

    @classmethod
    def create(cls, day: int, month: int, year: int) -> "CalendarDate":
        """Create a validated CalendarDate."""
        return cls(day=day, month=month, year=year)

    @classmethod
    def today(cls, clock: Optional[Callable[[], date]] = None) -> "CalendarDate":
        """Create a CalendarDate for the current local date.

        Args:
            clock: Callable returning a datetime.date. Defaults to date.today
        """
        current = (clock or date.today)()
        return cls(day=current.day, month=current.month, year=current.year)

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.day, self.month, self.year)

    def update_date(self, day: int, month: int, year: int) -> None:
        """Replace all three fields after validating the new date.

        Raises:
            InvalidArgumentError: If the new date is invalid. The instance
                keeps its previous value.
        """
        require_valid_date(day, month, year)
        object.__setattr__(self, "day", day)
        object.__setattr__(self, "month", month)
        object.__setattr__(self, "year", year)

    def is_leap_year(self) -> bool:
        return is_leap_year(self.year)

    def days_in_month(self) -> int:
        return days_in_month(self.month, self.year)

    def month_name(self) -> str:
        return month_name(self.month)

    def day_of_week(self) -> str:
        return day_of_week(self.day, self.month, self.year)

    def to_days(self) -> int:
        return to_days(self.day, self.month, self.year)

    def calculate_difference(self, other: "CalendarDate") -> int:
        return calculate_difference(self, other)

    def format(self, end: str = "\n") -> str:
        return format_date(self.day, self.month, self.year, end)

    def _sort_key(self) -> Tuple[int, int, int]:
        return (self.year, self.month, self.day)

    def __eq__(self, other) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self._sort_key() == other._sort_key()

    def __lt__(self, other) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    __hash__ = None  # mutable through update_date

    def __str__(self) -> str:
        return self.format(end="")
