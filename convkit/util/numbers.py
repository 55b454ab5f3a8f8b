"""
Numeric helpers for random values, display formatting and text input parsing.
"""

import logging
import math
import random
from typing import Optional


logger = logging.getLogger(__name__)

_random = random.SystemRandom()


def random_int(max_value: int) -> int:
    """Get a uniform random integer in ``[0, max_value)``; 0 yields 0."""
    if max_value < 0:
        raise ValueError("max_value must not be negative")
    if max_value == 0:
        return 0
    return _random.randrange(max_value)


def is_integer(value: float) -> bool:
    """Check if ``value`` has no fractional part."""
    return math.isfinite(value) and value == int(value)


def format_float(value: float) -> str:
    """Format with two decimals, or none when integral, e.g. 1.234 -> '1.23'."""
    if is_integer(value):
        return f"{value:.0f}"
    return f"{value:.2f}"


def parse_float(text: Optional[str]) -> Optional[float]:
    """
    Read a float from user input.

    Surrounding whitespace is ignored. Returns None for empty or
    unparseable text.
    """
    if text is None:
        return None
    text = text.strip()
    if not text:
        return None
    try:
        return float(text)
    except ValueError:
        logger.debug(f"Not a float: {text!r}")
        return None
