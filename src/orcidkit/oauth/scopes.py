"""ORCID OAuth scopes."""
from __future__ import annotations

from enum import Enum
from typing import Union


class OAuthScope(str, Enum):
    AUTHENTICATE = "/authenticate"
    READ_LIMITED = "/read-limited"
    ACTIVITIES_UPDATE = "/activities/update"
    PERSON_UPDATE = "/person/update"

    @classmethod
    def render(cls, scope: Union["OAuthScope", str]) -> str:
        """Canonical slash-prefixed form: ``"read-limited"`` -> ``"/read-limited"``."""
        if isinstance(scope, OAuthScope):
            return scope.value
        text = str(scope).strip()
        return text if text.startswith("/") else f"/{text}"
