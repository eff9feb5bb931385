"""ORCID iD parsing and validation."""
from __future__ import annotations

import re
from dataclasses import dataclass
from urllib.parse import urlsplit

from orcidkit.errors import InvalidIdentifierError

ORCID_HOST = "orcid.org"

_CANONICAL = re.compile(r"[0-9]{4}-[0-9]{4}-[0-9]{4}-[0-9]{3}[0-9X]")


@dataclass(frozen=True)
class OrcidID:
    """A normalized ORCID iD in the canonical ``0000-0000-0000-000X`` form.

    Example:
        OrcidID.parse("https://orcid.org/0000-0002-1825-0097").value
        # -> "0000-0002-1825-0097"
    """

    value: str

    def __post_init__(self) -> None:
        if not self.is_valid_format(self.value):
            raise InvalidIdentifierError(self.value)

    def __str__(self) -> str:
        return self.value

    @property
    def uri(self) -> str:
        return f"https://{ORCID_HOST}/{self.value}"

    @classmethod
    def parse(cls, raw: str) -> "OrcidID":
        """Parse a bare iD or a full profile URL.

        Raises:
            InvalidIdentifierError: carrying ``raw`` exactly as given.
        """
        if not isinstance(raw, str):
            raise InvalidIdentifierError(repr(raw))
        candidate = cls.normalize(raw.strip())
        if not cls.is_valid_format(candidate):
            raise InvalidIdentifierError(raw)
        return cls(candidate)

    @staticmethod
    def normalize(raw: str) -> str:
        """Extract the last path segment when ``raw`` is an orcid.org URL.

        Anything else is returned unchanged.
        """
        try:
            parts = urlsplit(raw)
        except ValueError:
            return raw
        host = parts.hostname or ""
        if ORCID_HOST not in host:
            return raw
        segments = [segment for segment in parts.path.split("/") if segment]
        if segments:
            return segments[-1]
        return raw

    @staticmethod
    def is_valid_format(value: str) -> bool:
        """Check the canonical pattern, including the ``X`` check character."""
        return _CANONICAL.fullmatch(value) is not None


def parse_orcid_id(raw: str) -> OrcidID:
    return OrcidID.parse(raw)
