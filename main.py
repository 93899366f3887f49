"""
Demo runner for the date generator system.

Walks through the calendar functions and the random date generator,
printing each result to the console.
"""

import logging
from typing import List, Optional

from dategen.config import Config, config
from dategen.calendar_date import (
    CalendarDate,
    InvalidArgumentError,
    calculate_difference,
    day_of_week,
    days_in_month,
    format_date,
    has_leap_year_in_range,
    is_leap_year,
    is_valid_date,
    is_valid_day,
    is_valid_month,
    is_valid_year,
    max_days_in_months,
    min_days_in_months,
    month_name,
    to_days,
)
from dategen.date_generator import DateGenerator


# Configure logging
log_format = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL, logging.INFO),
    format=log_format,
    handlers=[
        logging.StreamHandler(),  # Console output
        logging.FileHandler(config.LOG_FILE, encoding='utf-8')  # File output
    ]
)
logger = logging.getLogger(__name__)


class DemoRunner:
    """Runs the console walkthrough of the calendar and generator API."""

    def __init__(self, cfg: Optional[Config] = None, generator: Optional[DateGenerator] = None):
        """Initialize DemoRunner with configuration.

        Args:
            cfg: Configuration object. Uses default if not provided.
            generator: Date generator. Built from cfg if not provided.
        """
        self.config = cfg or config
        self.generator = generator or DateGenerator(config=self.config)
        self.errors: List[str] = []

    def _report_error(self, label: str, error: InvalidArgumentError) -> None:
        self.errors.append(str(error))
        logger.warning(f"{label} rejected: {error}")
        print(f"{label}: {error}")

    def show_validation(self) -> None:
        print(f"January 27, 2005 is valid date?: {is_valid_date(27, 1, 2005)}")
        print(f"February 30, 2020 is valid date?: {is_valid_date(30, 2, 2020)}")
        print(f"February is valid month?: {is_valid_month(2)}")
        print(f"13 is valid month?: {is_valid_month(13)}")
        print(f"February 29, 2020 is valid day?: {is_valid_day(29, 2, 2020)}")
        print(f"February 29, 2021 is valid day?: {is_valid_day(29, 2, 2021)}")
        print(f"2005 is valid year?: {is_valid_year(2005)}")
        print(f"0 is valid year?: {is_valid_year(0)}")
        print()
        print(f"2020 is leap year?: {is_leap_year(2020)}")
        print(f"2021 is leap year?: {is_leap_year(2021)}")
        print()

    def show_dates(self) -> CalendarDate:
        """Demonstrate formatting, constructors and update_date.

        Returns:
            The updated date used by the following sections
        """
        print("Print valid date: " + format_date(27, 1, 2005), end="")
        try:
            format_date(30, 2, 2005)
        except InvalidArgumentError as e:
            self._report_error("Print invalid date February 30, 2005", e)
        print()

        current = CalendarDate()
        print("Default date: " + current.format(), end="")
        current = CalendarDate(day=27, month=1, year=2005)
        print("Parameterized date: " + current.format(), end="")
        try:
            CalendarDate(day=30, month=2, year=2020)
        except InvalidArgumentError as e:
            self._report_error("Parameterized invalid date February 30, 2020", e)
        print(f"Today: {CalendarDate.today()}")
        print()

        current.update_date(26, 3, 2025)
        print("Updated date: " + current.format(), end="")
        try:
            current.update_date(30, 2, 2000)
        except InvalidArgumentError as e:
            self._report_error("Try to update date to February 30, 2000", e)
        print()
        return current

    def show_arithmetic(self, current: CalendarDate) -> None:
        print(f"Day of the week of January 27, 2005: {day_of_week(27, 1, 2005)}")
        print(f"Day of the {current} is {current.day_of_week()}")
        print()

        print(f"To days of January 27, 2005: {to_days(27, 1, 2005)}")
        print(f"To days: {current} is {current.to_days()}")
        print()

        new_year = CalendarDate(day=1, month=1, year=2025)
        print(f"Difference between January 1, 2025 and March 26, 2025: "
              f"{calculate_difference(new_year, CalendarDate(day=26, month=3, year=2025))}")
        print(f"Difference between {current} and {new_year} is {current.calculate_difference(new_year)}")
        print()

        print(f"Days in January 2020: {days_in_month(1, 2020)}")
        print(f"Days in {current.month_name()} {current.year}: {current.days_in_month()}")
        print()

        print(f"{current} month is {current.month_name()}")
        print(f"Month 1 is {month_name(1)}")
        print()

        print(f"Is there leap year between 2000 and 2005?: {has_leap_year_in_range(2000, 2005)}")
        print(f"Is there leap year between 1900 and 1903?: {has_leap_year_in_range(1900, 1903)}")
        print()

        print(f"Min days in months between January and March not in a leap year: {min_days_in_months(1, 3, False)}")
        print(f"Min days in months between January and March in a leap year: {min_days_in_months(1, 3, True)}")
        print(f"Max days in months between January and March not in a leap year: {max_days_in_months(1, 3, False)}")
        print(f"Max days in months between January and March in a leap year: {max_days_in_months(1, 3, True)}")
        print()

    def show_generator(self) -> List[CalendarDate]:
        """Generate random dates in the demo range and print them.

        Returns:
            The generated dates, sorted
        """
        self.generator.set_range(
            min_year=self.config.DEMO_MIN_YEAR,
            max_year=self.config.DEMO_MAX_YEAR,
            min_month=1,
            max_month=12,
            min_day=1,
            max_day=31
        )
        try:
            self.generator.set_min_month(13)
        except InvalidArgumentError as e:
            self._report_error("Set min month to 13", e)

        random_dates = self.generator.generate_random_dates(self.config.DEMO_DATE_COUNT)

        print("Unsorted Dates:")
        for dt in random_dates:
            print(dt.format(), end="")
        print()

        random_dates.sort()
        print("Sorted Dates:")
        for dt in random_dates:
            print(dt.format(), end="")
        return random_dates

    def run(self) -> dict:
        """Execute the full walkthrough.

        Returns:
            Dictionary with results:
            - generated: Number of random dates produced
            - rejected: Number of invalid inputs that were rejected
            - first: Earliest generated date, or None
            - last: Latest generated date, or None
        """
        logger.info("Starting date generator demo")
        self.show_validation()
        current = self.show_dates()
        self.show_arithmetic(current)
        dates = self.show_generator()
        logger.info(f"Demo complete: {len(dates)} dates generated, {len(self.errors)} inputs rejected")

        return {
            "generated": len(dates),
            "rejected": len(self.errors),
            "first": str(dates[0]) if dates else None,
            "last": str(dates[-1]) if dates else None
        }


def run() -> dict:
    """Main entry point for the demo.

    Returns:
        Dictionary with demo results
    """
    runner = DemoRunner()
    return runner.run()


if __name__ == "__main__":
    results = run()
    print(f"\nResults: {results}")
