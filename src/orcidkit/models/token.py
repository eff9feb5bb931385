"""Token response from ``POST /oauth/token``."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from orcidkit.errors import DecodingError
from orcidkit.models.common import expect_object, get_int, get_str


@dataclass(frozen=True)
class OAuthToken:
    access_token: str
    token_type: Optional[str] = None
    refresh_token: Optional[str] = None
    expires_in: Optional[int] = None
    scope: Optional[str] = None
    name: Optional[str] = None
    orcid: Optional[str] = None

    def __repr__(self) -> str:
        # access_token and refresh_token are never rendered.
        return (
            f"OAuthToken(token_type={self.token_type!r}, expires_in={self.expires_in!r}, "
            f"scope={self.scope!r}, name={self.name!r}, orcid={self.orcid!r})"
        )

    @classmethod
    def from_dict(cls, data: Any, path: str = "$") -> "OAuthToken":
        data = expect_object(data, path)
        access_token = get_str(data, "access_token", path)
        if access_token is None:
            raise DecodingError(f"{path}.access_token: required field is missing")
        return cls(
            access_token=access_token,
            token_type=get_str(data, "token_type", path),
            refresh_token=get_str(data, "refresh_token", path),
            expires_in=get_int(data, "expires_in", path),
            scope=get_str(data, "scope", path),
            name=get_str(data, "name", path),
            orcid=get_str(data, "orcid", path),
        )
