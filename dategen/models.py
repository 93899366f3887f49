"""
Data models for the date generator system.

Contains the dataclass describing the outcome of validating a date.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class DateValidationResult:
    """Result of validating a (day, month, year) triple.

    Attributes:
        is_valid: Whether the date is valid
        field: Name of the first invalid field ("year", "month" or "day")
        value: Value of the first invalid field
        reason: Human readable explanation, empty when valid
    """
    is_valid: bool
    field: Optional[str] = None
    value: Optional[int] = None
    reason: str = ""

    @classmethod
    def success(cls) -> "DateValidationResult":
        return cls(is_valid=True)

    @classmethod
    def failure(cls, field: str, value: int, reason: str) -> "DateValidationResult":
        """Create a failed result for the given field."""
        return cls(is_valid=False, field=field, value=value, reason=reason)
