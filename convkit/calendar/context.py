"""
Calendar context shared by all date utilities.
"""

from dataclasses import dataclass, field
from datetime import tzinfo
from zoneinfo import ZoneInfo

from ..config import get_config_value


# Weekday numbering used throughout the package (Sunday = 1 ... Saturday = 7)
SUNDAY = 1
SATURDAY = 7

FULL_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
FULL_DATE_LENGTH = 19


@dataclass(frozen=True)
class CalendarContext:
    """
    Immutable calendar configuration.

    Fixes the timezone used to extract and rebuild calendar fields, the
    calendar-native first day of the week, and the fixed full-date format.
    Instances are never mutated, so one context can be shared freely
    between threads.
    """
    timezone: tzinfo = field(default_factory=lambda: ZoneInfo("GMT"))
    first_weekday: int = SUNDAY
    date_format: str = FULL_DATE_FORMAT
    date_string_length: int = FULL_DATE_LENGTH

    def __post_init__(self):
        if not SUNDAY <= self.first_weekday <= SATURDAY:
            raise ValueError(f"first_weekday must be within 1..7, got {self.first_weekday}")

    @classmethod
    def for_timezone(cls, name: str) -> "CalendarContext":
        """Create a context pinned to the named IANA timezone."""
        return cls(timezone=ZoneInfo(name))

    @classmethod
    def from_env(cls) -> "CalendarContext":
        """Create a context from the CONVKIT_TIMEZONE environment variable."""
        return cls.for_timezone(get_config_value("timezone", "GMT"))


DEFAULT_CONTEXT = CalendarContext()


def resolve_context(context=None) -> CalendarContext:
    return DEFAULT_CONTEXT if context is None else context
