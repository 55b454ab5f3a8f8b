"""
Calendar utilities: fixed-format date parsing and formatting, day and week
boundaries, and day offset arithmetic, all computed against one immutable
calendar context (Gregorian calendar, GMT, Sunday-first weeks).
"""

from .context import (
    CalendarContext, DEFAULT_CONTEXT, SUNDAY, SATURDAY,
    FULL_DATE_FORMAT, FULL_DATE_LENGTH
)
from .dates import (
    parse_full_date, format_full_date, format_short_date, weekday_number,
    beginning_of_day, next_day_start, end_of_day, add_days, yesterday,
    get_next_sunday, is_after, is_same_week_as
)

__all__ = [
    # Context
    'CalendarContext', 'DEFAULT_CONTEXT', 'SUNDAY', 'SATURDAY',
    'FULL_DATE_FORMAT', 'FULL_DATE_LENGTH',

    # Date operations
    'parse_full_date', 'format_full_date', 'format_short_date', 'weekday_number',
    'beginning_of_day', 'next_day_start', 'end_of_day', 'add_days', 'yesterday',
    'get_next_sunday', 'is_after', 'is_same_week_as',
]
