"""Configuration helpers for orcidkit."""
from __future__ import annotations

import os
from dataclasses import dataclass, field

from orcidkit.environment import DEFAULT_USER_AGENT, ClientConfig, OrcidEnvironment


def _env(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name, default)
    if value is None or value == "":
        return None
    return value


@dataclass
class Settings:
    environment: OrcidEnvironment
    user_agent: str = DEFAULT_USER_AGENT
    client_id: str | None = None
    client_secret: str | None = None
    redirect_uri: str | None = None
    scopes: list[str] = field(default_factory=lambda: ["/authenticate"])
    log_level: str = "WARNING"
    log_format: str = "text"

    @classmethod
    def from_env(cls) -> "Settings":
        problems: list[str] = []

        api_base = _env("ORCID_API_BASE_URL")
        oauth_base = _env("ORCID_OAUTH_BASE_URL")
        environment_name = _env("ORCID_ENVIRONMENT", "production") or "production"

        if api_base or oauth_base:
            if not (api_base and oauth_base):
                problems.append(
                    "ORCID_API_BASE_URL and ORCID_OAUTH_BASE_URL must be set together"
                )
            environment = OrcidEnvironment(api_base or "", oauth_base or "")
        else:
            try:
                environment = OrcidEnvironment.from_name(environment_name)
            except ValueError as exc:
                problems.append(str(exc))
                environment = OrcidEnvironment.from_name("production")

        log_format = (_env("ORCIDKIT_LOG_FORMAT", "text") or "text").lower()
        if log_format not in ("text", "json"):
            problems.append(f"ORCIDKIT_LOG_FORMAT must be 'text' or 'json', got {log_format!r}")

        scope_text = _env("ORCID_SCOPE", "/authenticate") or "/authenticate"

        if problems:
            raise RuntimeError("Invalid orcidkit configuration: " + "; ".join(problems))

        return cls(
            environment=environment,
            user_agent=_env("ORCID_USER_AGENT", DEFAULT_USER_AGENT) or DEFAULT_USER_AGENT,
            client_id=_env("ORCID_CLIENT_ID"),
            client_secret=_env("ORCID_CLIENT_SECRET"),
            redirect_uri=_env("ORCID_REDIRECT_URI"),
            scopes=scope_text.split(),
            log_level=(_env("ORCIDKIT_LOG_LEVEL", "WARNING") or "WARNING").upper(),
            log_format=log_format,
        )

    def client_config(self) -> ClientConfig:
        return ClientConfig(environment=self.environment, user_agent=self.user_agent)

    def require_oauth(self, *, secret: bool = True) -> None:
        """Raise RuntimeError unless the OAuth client settings are present."""
        missing: list[str] = []
        if not self.client_id:
            missing.append("ORCID_CLIENT_ID")
        if secret and not self.client_secret:
            missing.append("ORCID_CLIENT_SECRET")
        if not self.redirect_uri:
            missing.append("ORCID_REDIRECT_URI")
        if missing:
            raise RuntimeError(
                "Missing required environment variables: " + ", ".join(missing)
            )
