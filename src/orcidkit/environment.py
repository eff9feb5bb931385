"""ORCID deployments, endpoint paths and client configuration."""
from __future__ import annotations

from dataclasses import dataclass, field

from orcidkit import __version__
from orcidkit.identifier import OrcidID

# Endpoint path templates, relative to the environment base URLs.
RECORD_PATH = "{orcid}/record"
WORKS_PATH = "{orcid}/works"
OAUTH_AUTHORIZE_PATH = "oauth/authorize"
OAUTH_TOKEN_PATH = "oauth/token"

# Media types
ORCID_JSON = "application/vnd.orcid+json"
PLAIN_JSON = "application/json"

DEFAULT_USER_AGENT = f"orcidkit/{__version__}"


def _join(base: str, path: str) -> str:
    return f"{base.rstrip('/')}/{path.lstrip('/')}"


@dataclass(frozen=True)
class OrcidEnvironment:
    """Base URLs for the public API and the OAuth server."""

    api_base_url: str
    oauth_base_url: str

    @classmethod
    def from_name(cls, name: str) -> "OrcidEnvironment":
        try:
            return _NAMED[name.strip().lower()]
        except KeyError:
            raise ValueError(
                f"Unknown ORCID environment {name!r}; expected one of: "
                + ", ".join(sorted(_NAMED))
            ) from None

    def record_url(self, orcid: OrcidID) -> str:
        return _join(self.api_base_url, RECORD_PATH.format(orcid=orcid.value))

    def works_url(self, orcid: OrcidID) -> str:
        return _join(self.api_base_url, WORKS_PATH.format(orcid=orcid.value))

    def authorize_url_base(self) -> str:
        return _join(self.oauth_base_url, OAUTH_AUTHORIZE_PATH)

    def token_url(self) -> str:
        return _join(self.oauth_base_url, OAUTH_TOKEN_PATH)


PRODUCTION = OrcidEnvironment(
    api_base_url="https://pub.orcid.org/v3.0/",
    oauth_base_url="https://orcid.org/",
)

SANDBOX = OrcidEnvironment(
    api_base_url="https://pub.sandbox.orcid.org/v3.0/",
    oauth_base_url="https://sandbox.orcid.org/",
)

_NAMED = {
    "production": PRODUCTION,
    "sandbox": SANDBOX,
}


@dataclass(frozen=True)
class ClientConfig:
    """Immutable per-client settings."""

    environment: OrcidEnvironment = field(default=PRODUCTION)
    user_agent: str = DEFAULT_USER_AGENT
