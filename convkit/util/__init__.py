"""
Utility package providing small helper functions.

This package includes:
- Encoding utilities for percent-encoding, query strings and Base64
- String utilities for trimming, searching, number detection and truncation
- Numeric utilities for random values, formatting and input parsing
- Localization lookup by key
"""

from .encoding import (
    url_encode_component, to_url_string, encode_base64,
    HOST_SAFE_CHARACTERS, QUERY_VALUE_SAFE_CHARACTERS
)
from .strings import (
    trim, contains, replace, is_number, is_positive_number,
    url_encoded, localized, truncate
)
from .numbers import random_int, is_integer, format_float, parse_float
from .localization import Localizer, get_default_localizer, set_default_localizer

__all__ = [
    # Encoding utilities
    'url_encode_component', 'to_url_string', 'encode_base64',
    'HOST_SAFE_CHARACTERS', 'QUERY_VALUE_SAFE_CHARACTERS',

    # String utilities
    'trim', 'contains', 'replace', 'is_number', 'is_positive_number',
    'url_encoded', 'localized', 'truncate',

    # Numeric utilities
    'random_int', 'is_integer', 'format_float', 'parse_float',

    # Localization
    'Localizer', 'get_default_localizer', 'set_default_localizer',
]
