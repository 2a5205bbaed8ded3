# config.py
from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from typing import Optional

from roster_manager.exceptions import InvalidArgument

DEFAULT_BASIC_SALARY = 5000
MIN_CAPACITY = 2
MAX_CAPACITY = 5
DEFAULT_CAPACITY = MAX_CAPACITY
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

LOG_LEVEL_ENV = "ROSTER_LOG_LEVEL"
DEFAULT_LOG_LEVEL = logging.WARNING


def validate_capacity(capacity) -> int:
    if isinstance(capacity, bool) or not isinstance(capacity, int):
        raise InvalidArgument(f"Capacity must be an integer, got {capacity!r}")
    if not MIN_CAPACITY <= capacity <= MAX_CAPACITY:
        raise InvalidArgument(
            f"Capacity must be between {MIN_CAPACITY} and {MAX_CAPACITY}, got {capacity}"
        )
    return capacity


def parse_log_level(value: Optional[str], default: int = DEFAULT_LOG_LEVEL) -> int:
    """
    'debug' / 'INFO' / '10' -> logging level.
    Unknown names fall back to the default.
    """
    if not value or not value.strip():
        return default
    value = value.strip()
    if value.isdigit():
        return int(value)
    level = logging.getLevelName(value.upper())
    return level if isinstance(level, int) else default


@dataclass
class Settings:
    capacity: Optional[int] = None     # None: ask at start-up
    log_level: int = DEFAULT_LOG_LEVEL
    gui: bool = False

    def __post_init__(self):
        if self.capacity is not None:
            validate_capacity(self.capacity)

    @staticmethod
    def from_env(capacity: Optional[int] = None, gui: bool = False,
                 verbose: bool = False, environ=None) -> "Settings":
        environ = os.environ if environ is None else environ
        level = logging.DEBUG if verbose else parse_log_level(environ.get(LOG_LEVEL_ENV))
        return Settings(capacity=capacity, log_level=level, gui=gui)
