"""Helpers for ORCID's three-legged OAuth flow."""

from orcidkit.oauth.authorize import build_authorize_url
from orcidkit.oauth.scopes import OAuthScope

__all__ = [
    "OAuthScope",
    "build_authorize_url",
]
