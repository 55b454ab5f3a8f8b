"""
Date utilities working against a fixed calendar context.

All functions are pure: they take an aware ``datetime`` (naive values are
read as wall-clock time in the context timezone) and return a new aware
``datetime`` expressed in the context timezone. Day arithmetic is done on
wall-clock fields, so it stays correct for timezones with DST transitions.

Results must stay within the ``datetime`` range: operations that move past
year 9999 (or before year 1) raise ``OverflowError``.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from .context import CalendarContext, SUNDAY, resolve_context
from ..errors import DateStringTooShortError


logger = logging.getLogger(__name__)

ONE_SECOND = timedelta(seconds=1)
DAYS_IN_WEEK = 7


def _localize(instant: datetime, context: CalendarContext) -> datetime:
    """Express ``instant`` in the context timezone."""
    if not isinstance(instant, datetime):
        raise TypeError(f"Expected datetime, got {type(instant).__name__}")
    if instant.tzinfo is None:
        return instant.replace(tzinfo=context.timezone)
    return instant.astimezone(context.timezone)


def _normalize(local: datetime, context: CalendarContext) -> datetime:
    # Round-trip through UTC so the UTC offset is recomputed after wall-clock math
    return local.astimezone(timezone.utc).astimezone(context.timezone)


def parse_full_date(text: str, context: Optional[CalendarContext] = None) -> Optional[datetime]:
    """
    Parse a full date string such as ``2014-11-17 19:39:12``.

    Only the first 19 characters are read; anything after them (fractional
    seconds, timezone suffix) is discarded without validation. The fields
    must be separated by a space, ISO-8601 ``T`` separated strings are
    not accepted.

    Returns:
        The parsed datetime, or None when the text does not match the format.

    Raises:
        DateStringTooShortError: if ``text`` is shorter than 19 characters.
    """
    context = resolve_context(context)
    if not isinstance(text, str):
        raise TypeError(f"Expected str, got {type(text).__name__}")
    if len(text) < context.date_string_length:
        raise DateStringTooShortError(text, context.date_string_length)

    head = text[:context.date_string_length]
    try:
        parsed = datetime.strptime(head, context.date_format)
    except ValueError:
        logger.debug(f"Unable to parse full date: {head!r}")
        return None

    return parsed.replace(tzinfo=context.timezone)


def format_full_date(instant: datetime, context: Optional[CalendarContext] = None) -> str:
    """Format ``instant`` as ``yyyy-MM-dd HH:mm:ss`` in the context timezone."""
    local = _localize(instant, resolve_context(context))
    # strftime("%Y") does not zero-pad years below 1000 on every platform
    return (f"{local.year:04d}-{local.month:02d}-{local.day:02d} "
            f"{local.hour:02d}:{local.minute:02d}:{local.second:02d}")


def format_short_date(instant: datetime, context: Optional[CalendarContext] = None) -> str:
    """Format ``instant`` in the short display style, e.g. ``1/7/24``."""
    local = _localize(instant, resolve_context(context))
    return f"{local.month}/{local.day}/{local.year % 100:02d}"


def weekday_number(instant: datetime, context: Optional[CalendarContext] = None) -> int:
    """Return the weekday of ``instant`` numbered Sunday = 1 ... Saturday = 7."""
    local = _localize(instant, resolve_context(context))
    return local.isoweekday() % 7 + 1


def beginning_of_day(instant: datetime, context: Optional[CalendarContext] = None) -> datetime:
    """Return midnight of the calendar day containing ``instant``."""
    context = resolve_context(context)
    local = _localize(instant, context)
    return _normalize(datetime(local.year, local.month, local.day, tzinfo=context.timezone), context)


def add_days(instant: datetime, days: int, context: Optional[CalendarContext] = None) -> datetime:
    """Add ``days`` calendar days to ``instant`` keeping its time of day."""
    context = resolve_context(context)
    local = _localize(instant, context)
    return _normalize(local + timedelta(days=days), context)


def yesterday(instant: datetime, context: Optional[CalendarContext] = None) -> datetime:
    return add_days(instant, -1, context)


def next_day_start(instant: datetime, context: Optional[CalendarContext] = None) -> datetime:
    """Return midnight of the calendar day after the one containing ``instant``."""
    context = resolve_context(context)
    return add_days(beginning_of_day(instant, context), 1, context)


def end_of_day(instant: datetime, context: Optional[CalendarContext] = None) -> datetime:
    """Return the last second of the calendar day containing ``instant``."""
    context = resolve_context(context)
    return _normalize(next_day_start(instant, context) - ONE_SECOND, context)


def _sunday_of_native_week(instant: datetime, context: CalendarContext) -> datetime:
    """
    Force the weekday of ``instant`` to Sunday inside its calendar-native week.

    With the default Sunday-first week this lands on the Sunday that opens
    the week, i.e. on or before ``instant``.
    """
    local = _localize(instant, context)
    days_into_week = (weekday_number(local, context) - context.first_weekday) % DAYS_IN_WEEK
    sunday_offset = (SUNDAY - context.first_weekday) % DAYS_IN_WEEK
    return add_days(local, sunday_offset - days_into_week, context)


def _advance_to_week_ending_sunday(sunday_end: datetime, context: CalendarContext) -> datetime:
    """
    Move from the Sunday opening the native week to the Sunday closing it.

    The calendar treats Sunday as the first day of the week while the week
    boundary used here is the last day, so a Sunday-first week needs a
    forward jump of one week.
    """
    if context.first_weekday == SUNDAY:
        return add_days(sunday_end, DAYS_IN_WEEK, context)
    return sunday_end


def get_next_sunday(instant: datetime, context: Optional[CalendarContext] = None) -> datetime:
    """
    Return the end (23:59:59) of the Sunday closing the week of ``instant``.

    A Sunday instant maps to the end of that same day.
    """
    context = resolve_context(context)
    if weekday_number(instant, context) == SUNDAY:
        return end_of_day(instant, context)

    sunday = _sunday_of_native_week(instant, context)
    return _advance_to_week_ending_sunday(end_of_day(sunday, context), context)


def is_after(instant: datetime, other: datetime,
             context: Optional[CalendarContext] = None) -> bool:
    """Check if ``instant`` is strictly later than ``other``."""
    context = resolve_context(context)
    return _localize(instant, context) > _localize(other, context)


def is_same_week_as(instant: datetime, test_instant: datetime,
                    context: Optional[CalendarContext] = None) -> bool:
    """
    Check if ``instant`` falls before the end of the week of ``test_instant``.

    This is a directional check: anything earlier than the Sunday closing
    ``test_instant``'s week counts, including instants from earlier weeks.
    """
    context = resolve_context(context)
    return is_after(get_next_sunday(test_instant, context), instant, context)
