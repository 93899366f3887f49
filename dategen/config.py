"""
Configuration module for the date generator system.

Contains the default generator range, random seed, demo settings
and logging settings.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Config:
    """Configuration class containing all system parameters."""

    # Default generator range
    MIN_DAY: int = 1
    MAX_DAY: int = 31
    MIN_MONTH: int = 1
    MAX_MONTH: int = 12
    MIN_YEAR: int = 1
    MAX_YEAR: int = 9999

    # Random source; None seeds from the operating system
    RANDOM_SEED: Optional[int] = None

    # Demo Configuration
    DEMO_DATE_COUNT: int = 10
    DEMO_MIN_YEAR: int = 2000
    DEMO_MAX_YEAR: int = 2025

    # Logging Configuration
    LOG_FILE: str = "main.log"
    LOG_LEVEL: str = "INFO"


# Default configuration instance
config = Config()
