"""
String helpers: trimming, searching, number detection, truncation and
encoding shortcuts.
"""

import re
from typing import Optional

from .encoding import encode_base64 as _encode_base64
from .encoding import url_encode_component, QUERY_VALUE_SAFE_CHARACTERS
from .localization import Localizer, get_default_localizer


_NUMBER_PATTERN = re.compile(r'^[+-]?(\d+(\.\d*)?|\.\d+)$')


def trim(text: str) -> str:
    """Get string without whitespace and newlines at the start and the end."""
    return text.strip()


def contains(text: str, substring: str, case_sensitive: bool = True) -> bool:
    """Check if ``text`` contains ``substring``."""
    if case_sensitive:
        return substring in text
    return substring.casefold() in text.casefold()


def replace(text: str, target: str, with_string: str) -> str:
    """Replace every literal occurrence of ``target``."""
    return text.replace(target, with_string)


def _parse_number(text: str) -> Optional[float]:
    if not isinstance(text, str) or not _NUMBER_PATTERN.match(text):
        return None
    return float(text)


def is_number(text: str) -> bool:
    """Check if the string presents a plain decimal number."""
    return _parse_number(text) is not None


def is_positive_number(text: str) -> bool:
    """Check if the string presents a number greater than zero."""
    number = _parse_number(text)
    return number is not None and number > 0


def url_encoded(text: str) -> str:
    """
    Percent-encode ``text`` for use as a query parameter value.

    Reserved characters ``:?&=@+/'`` are always escaped.
    """
    return url_encode_component(text, safe=QUERY_VALUE_SAFE_CHARACTERS)


def localized(key: str, localizer: Optional[Localizer] = None) -> str:
    """Get the localized string for ``key``, or ``key`` when none is known."""
    return (localizer or get_default_localizer()).get(key)


def truncate(text: str, length: int, trailing: Optional[str] = "...") -> str:
    """
    Truncate ``text`` to ``length`` characters and append ``trailing``.

    Strings not longer than ``length`` are returned unchanged. Pass
    ``trailing=None`` to cut without a marker.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if len(text) > length:
        return text[:length] + (trailing or "")
    return text


def encode_base64(text: str) -> str:
    """Encode the UTF-8 bytes of ``text`` with Base64."""
    return _encode_base64(text)
