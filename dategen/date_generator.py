"""
Random date generator module for the date generator system.

Handles the adjustable (day, month, year) range, its cross-field
feasibility checks, and drawing random dates inside it.
"""

import dataclasses
import logging
import random
import threading
from dataclasses import dataclass
from typing import List, Optional

from dategen.calendar_date import (
    CalendarDate,
    InvalidArgumentError,
    days_in_month,
    has_leap_year_in_range,
    is_integer,
    is_valid_month,
    is_valid_year,
    max_days_in_months,
    min_days_in_months,
)
from dategen.config import Config


logger = logging.getLogger(__name__)

RANGE_FIELDS = ("min_day", "max_day", "min_month", "max_month", "min_year", "max_year")


@dataclass(frozen=True)
class DateRange:
    """Inclusive bounds for random dates.

    A DateRange can only exist in a feasible state: every bound is valid,
    each min is not above its max, and the day bounds fit the month span
    (February counting 29 days when the year span holds a leap year).

    Attributes:
        min_day: Lowest day of the month (1-31)
        max_day: Highest day of the month (1-31)
        min_month: Lowest month (1-12)
        max_month: Highest month (1-12)
        min_year: Lowest year (1 and above)
        max_year: Highest year
    """
    min_day: int = 1
    max_day: int = 31
    min_month: int = 1
    max_month: int = 12
    min_year: int = 1
    max_year: int = 9999

    def __post_init__(self):
        for name in ("min_day", "max_day"):
            value = getattr(self, name)
            if not is_integer(value) or not 1 <= value <= 31:
                raise InvalidArgumentError(name, value, f"Invalid day: {value} must be an integer between 1 and 31")
        for name in ("min_month", "max_month"):
            value = getattr(self, name)
            if not is_valid_month(value):
                raise InvalidArgumentError(name, value, f"Invalid month: {value} must be an integer between 1 and 12")
        for name in ("min_year", "max_year"):
            value = getattr(self, name)
            if not is_valid_year(value):
                raise InvalidArgumentError(name, value, f"Invalid year: {value} must be an integer greater than 0")

        self._check_order("day", self.min_day, self.max_day)
        self._check_order("month", self.min_month, self.max_month)
        self._check_order("year", self.min_year, self.max_year)

        leap = has_leap_year_in_range(self.min_year, self.max_year)
        shortest = min_days_in_months(self.min_month, self.max_month, leap)
        if self.min_day > shortest:
            raise InvalidArgumentError(
                "min_day",
                self.min_day,
                f"Invalid day: {self.min_day}. min_day must be less or equal than "
                f"min days in months {shortest}"
            )
        longest = max_days_in_months(self.min_month, self.max_month, leap)
        if self.max_day > longest:
            raise InvalidArgumentError(
                "max_day",
                self.max_day,
                f"Invalid day: {self.max_day}. max_day must be less or equal than "
                f"max days in months {longest}"
            )

    @staticmethod
    def _check_order(unit: str, low: int, high: int) -> None:
        if low > high:
            raise InvalidArgumentError(
                f"min_{unit}", low, f"Invalid {unit}: {low} must be less or equal than {high}"
            )

    @classmethod
    def from_config(cls, cfg: Config) -> "DateRange":
        """Build the default range from configuration."""
        return cls(
            min_day=cfg.MIN_DAY,
            max_day=cfg.MAX_DAY,
            min_month=cfg.MIN_MONTH,
            max_month=cfg.MAX_MONTH,
            min_year=cfg.MIN_YEAR,
            max_year=cfg.MAX_YEAR
        )

    def replace(self, **changes) -> "DateRange":
        """Return a new validated range with some bounds changed.

        Raises:
            InvalidArgumentError: If the resulting range is infeasible
        """
        return dataclasses.replace(self, **changes)


class DateGenerator:
    """Generates random CalendarDate values inside an adjustable range.

    The range is held as a single DateRange snapshot which is swapped only
    after a candidate passes validation, so a rejected change never leaves
    partial bounds behind. A lock serializes changes and draws.
    """

    def __init__(
        self,
        date_range: Optional[DateRange] = None,
        rng: Optional[random.Random] = None,
        config: Optional[Config] = None
    ):
        """Initialize DateGenerator.

        Args:
            date_range: Starting range. Defaults to the configured range.
            rng: Random source. Defaults to random.Random(config.RANDOM_SEED).
            config: Configuration object. Uses default if not provided.
        """
        self.config = config or Config()
        self._range = date_range or DateRange.from_config(self.config)
        self._random = rng or random.Random(self.config.RANDOM_SEED)
        self._lock = threading.Lock()

    @property
    def date_range(self) -> DateRange:
        return self._range

    @property
    def min_day(self) -> int:
        return self._range.min_day

    @property
    def max_day(self) -> int:
        return self._range.max_day

    @property
    def min_month(self) -> int:
        return self._range.min_month

    @property
    def max_month(self) -> int:
        return self._range.max_month

    @property
    def min_year(self) -> int:
        return self._range.min_year

    @property
    def max_year(self) -> int:
        return self._range.max_year

    def set_min_day(self, min_day: int) -> None:
        self._update(min_day=min_day)

    def set_max_day(self, max_day: int) -> None:
        self._update(max_day=max_day)

    def set_min_month(self, min_month: int) -> None:
        self._update(min_month=min_month)

    def set_max_month(self, max_month: int) -> None:
        self._update(max_month=max_month)

    def set_min_year(self, min_year: int) -> None:
        self._update(min_year=min_year)

    def set_max_year(self, max_year: int) -> None:
        self._update(max_year=max_year)

    def set_range(self, **bounds) -> None:
        """Change several bounds at once.

        Useful when moving between two feasible ranges would pass through
        an infeasible one if the bounds were changed one at a time.

        Args:
            **bounds: Any of min_day, max_day, min_month, max_month,
                min_year, max_year

        Raises:
            InvalidArgumentError: If the resulting range is infeasible
        """
        unknown = set(bounds) - set(RANGE_FIELDS)
        if unknown:
            name = sorted(unknown)[0]
            raise InvalidArgumentError(name, bounds[name], f"Unknown range bound: {name}")
        self._update(**bounds)

    def _update(self, **changes) -> None:
        with self._lock:
            try:
                candidate = self._range.replace(**changes)
            except InvalidArgumentError as e:
                logger.warning(f"Rejected range change {changes}: {e}")
                if e.field in changes:
                    raise
                # Blame the bound that was being changed
                name = next(iter(changes))
                raise InvalidArgumentError(name, changes[name], f"Invalid {name}: {changes[name]}. {e}") from e
            self._range = candidate
        logger.info(f"Range updated: {changes}")

    def generate_random_date(self) -> CalendarDate:
        """Draw a single random date from the current range."""
        with self._lock:
            return self._draw(self._range)

    def generate_random_dates(self, n: int) -> List[CalendarDate]:
        """Generate a list of n random dates.

        Dates are returned in draw order, not sorted.

        Args:
            n: Number of dates to generate

        Returns:
            List of n CalendarDate objects inside the current range

        Raises:
            InvalidArgumentError: If n is negative
        """
        if not is_integer(n) or n < 0:
            raise InvalidArgumentError("n", n, f"Invalid count: {n} must be a non-negative integer")

        with self._lock:
            snapshot = self._range
            dates = [self._draw(snapshot) for _ in range(n)]
        logger.debug(f"Generated {n} dates in {snapshot}")
        return dates

    def _draw(self, date_range: DateRange) -> CalendarDate:
        # max_day is clamped to the drawn month; when the drawn month cannot
        # reach min_day the year and month are drawn again. Only February of
        # a common year with min_day 29 falls short, and DateRange admits that
        # only when the year span holds a leap year, where every month
        # reaches min_day.
        while True:
            year = self._random.randint(date_range.min_year, date_range.max_year)
            month = self._random.randint(date_range.min_month, date_range.max_month)
            high = min(date_range.max_day, days_in_month(month, year))
            if high >= date_range.min_day:
                day = self._random.randint(date_range.min_day, high)
                return CalendarDate(day=day, month=month, year=year)
