"""Error taxonomy shared by every orcidkit component.

Each public operation raises exactly one ``OrcidError`` subclass. The set is
closed: callers can branch on ``err.kind`` and cover every case.
"""
from __future__ import annotations

from enum import Enum
from typing import Optional

_BODY_EXCERPT_CHARS = 200


class ErrorKind(str, Enum):
    INVALID_IDENTIFIER = "invalid_identifier"
    INVALID_URL = "invalid_url"
    TRANSPORT = "transport"
    HTTP = "http"
    DECODING = "decoding"
    ENCODING = "encoding"


class OrcidError(Exception):
    """Base exception for all orcidkit errors."""

    kind: ErrorKind


class InvalidIdentifierError(OrcidError):
    """Input could not be normalized into a canonical ORCID iD.

    Raised before any network activity. ``original_input`` is exactly what
    the caller passed in, untrimmed.
    """

    kind = ErrorKind.INVALID_IDENTIFIER

    def __init__(self, original_input: str):
        super().__init__(f"Invalid ORCID iD: {original_input!r}")
        self.original_input = original_input


class InvalidURLError(OrcidError):
    """A URL could not be assembled from the configured base."""

    kind = ErrorKind.INVALID_URL

    def __init__(self, detail: str = "could not build a valid URL"):
        super().__init__(f"Invalid URL: {detail}")
        self.detail = detail


class TransportError(OrcidError):
    """Failure below the HTTP layer (connectivity, protocol, cancellation)."""

    kind = ErrorKind.TRANSPORT

    def __init__(self, description: str):
        super().__init__(f"Transport error: {description}")
        self.description = description


class HTTPError(OrcidError):
    """The exchange completed but the status code was outside 200-299."""

    kind = ErrorKind.HTTP

    def __init__(self, status: int, body: Optional[str] = None):
        message = f"HTTP {status}"
        if body:
            excerpt = body[:_BODY_EXCERPT_CHARS]
            if len(body) > _BODY_EXCERPT_CHARS:
                excerpt += "..."
            message = f"{message}: {excerpt}"
        super().__init__(message)
        self.status = status
        self.body = body


class DecodingError(OrcidError):
    """A successful response body did not match the expected shape."""

    kind = ErrorKind.DECODING

    def __init__(self, description: str):
        super().__init__(f"Decoding error: {description}")
        self.description = description


class EncodingError(OrcidError):
    """A request body could not be constructed."""

    kind = ErrorKind.ENCODING

    def __init__(self, description: str):
        super().__init__(f"Encoding error: {description}")
        self.description = description
