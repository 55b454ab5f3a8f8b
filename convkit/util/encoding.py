"""
Encoding utilities for convkit.
Provides percent-encoding, query string building and Base64 encoding.
"""

import base64
from typing import Mapping, Union
from urllib.parse import quote


# Characters left unescaped in a URL host component, besides the unreserved
# set (letters, digits and "-._~") that quote() never escapes
HOST_SAFE_CHARACTERS = "!$&'()*+,:;=[]"

# Query-allowed characters minus the ones with meaning inside a parameter value
QUERY_VALUE_SAFE_CHARACTERS = "!$()*,;"


def url_encode_component(text: str, safe: str = HOST_SAFE_CHARACTERS) -> str:
    """Percent-encode ``text`` as UTF-8, leaving ``safe`` characters as-is."""
    if not isinstance(text, str):
        raise TypeError(f"Expected str, got {type(text).__name__}")
    return quote(text, safe=safe)


def to_url_string(params: Mapping[str, str], safe: str = HOST_SAFE_CHARACTERS) -> str:
    """
    Build a query string from a mapping of text keys to text values.

    Entries keep the mapping's iteration order and are joined with ``&``.
    Keys and values are encoded with the host-allowed character set, so
    ``&`` and ``=`` inside them are not escaped; use ``url_encoded`` from
    ``convkit.util.strings`` for values that may contain them.
    """
    return "&".join(
        f"{url_encode_component(key, safe)}={url_encode_component(value, safe)}"
        for key, value in params.items()
    )


def encode_base64(data: Union[str, bytes]) -> str:
    """Encode data to base64 string."""
    if isinstance(data, str):
        data = data.encode('utf-8')

    return base64.b64encode(data).decode('ascii')

