"""
convkit Python Package

Convenience helpers for application code: calendar arithmetic against a fixed
calendar context, string and encoding shortcuts, colors, fonts, alerts and
asynchronous image loading.
"""

__version__ = "0.1.0"

from .calendar import (
    CalendarContext,
    DEFAULT_CONTEXT,
    parse_full_date,
    format_full_date,
    beginning_of_day,
    next_day_start,
    end_of_day,
    add_days,
    yesterday,
    get_next_sunday,
    is_after,
    is_same_week_as,
)
from .config import Settings, configure_logging
from .errors import (
    ConvKitError,
    ErrorCode,
    DateStringTooShortError,
    ColorValueError,
    ImageLoadError,
)

__all__ = [
    "CalendarContext",
    "DEFAULT_CONTEXT",
    "parse_full_date",
    "format_full_date",
    "beginning_of_day",
    "next_day_start",
    "end_of_day",
    "add_days",
    "yesterday",
    "get_next_sunday",
    "is_after",
    "is_same_week_as",
    "Settings",
    "configure_logging",
    "ConvKitError",
    "ErrorCode",
    "DateStringTooShortError",
    "ColorValueError",
    "ImageLoadError",
]
