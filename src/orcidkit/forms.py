"""``application/x-www-form-urlencoded`` body encoding."""
from __future__ import annotations

from typing import Mapping
from urllib.parse import quote

from orcidkit.errors import EncodingError

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

# quote() never escapes ASCII letters, digits and "_.-~"; "*" is added here.
# "~" is not in the allowed set, so it is escaped by hand below.
_SAFE = "*"


def _escape(value: str) -> str:
    if not isinstance(value, str):
        raise EncodingError(f"form values must be strings, got {type(value).__name__}")
    try:
        encoded = quote(value, safe=_SAFE, encoding="utf-8")
    except UnicodeEncodeError as e:
        raise EncodingError(f"{value!r} cannot be encoded as UTF-8") from e
    return encoded.replace("~", "%7E").replace("%20", "+")


def encode_form(pairs: Mapping[str, str]) -> bytes:
    """Encode ``pairs`` with a stable, sorted ordering.

    >>> encode_form({"b": "x y", "a": "1"})
    b'a=1&b=x+y'

    Raises:
        EncodingError: if a key or value is not a string representable in UTF-8.
    """
    parts = sorted(f"{_escape(key)}={_escape(value)}" for key, value in pairs.items())
    return "&".join(parts).encode("ascii")
