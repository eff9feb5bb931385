"""Authorization URL construction for the three-legged OAuth flow."""
from __future__ import annotations

import logging
from typing import Iterable, Optional, Union
from urllib.parse import SplitResult, quote, urlencode, urlsplit, urlunsplit

from orcidkit.environment import OrcidEnvironment
from orcidkit.errors import InvalidURLError
from orcidkit.oauth.scopes import OAuthScope

logger = logging.getLogger(__name__)

# Characters left readable inside query values, e.g. redirect_uri=myapp://callback
_QUERY_SAFE = "/:"


def _split(url: str) -> SplitResult:
    try:
        parts = urlsplit(url)
    except ValueError as e:
        raise InvalidURLError(f"cannot parse {url!r}: {e}") from e
    if not parts.scheme or not parts.netloc:
        raise InvalidURLError(f"{url!r} is not an absolute URL")
    return parts


def build_authorize_url(
    environment: OrcidEnvironment,
    client_id: str,
    redirect_uri: str,
    scopes: Iterable[Union[OAuthScope, str]],
    state: Optional[str] = None,
    show_login: Optional[bool] = None,
    prompt: Optional[str] = None,
) -> str:
    """Build ``{oauth_base}/oauth/authorize?...`` for the given client.

    Query parameters always appear in this order: client_id, response_type,
    scope, redirect_uri, then state, show_login and prompt when supplied.
    ``show_login`` is sent as the literal string "true" or "false".

    Args:
        environment: Deployment whose OAuth base URL is used.
        client_id: Registered ORCID client ID.
        redirect_uri: Redirect URI registered with ORCID.
        scopes: Requested scopes; joined with single spaces.
        state: Optional CSRF state value.
        show_login: Optional flag forcing the ORCID sign-in form.
        prompt: Optional prompt hint (e.g. "login").

    Returns:
        The authorization URL as a string.

    Raises:
        InvalidURLError: if the base URL is not absolute or the assembled URL
            does not parse back to the same components.
    """
    root = _split(environment.oauth_base_url)
    if root.query or root.fragment:
        raise InvalidURLError(
            f"{environment.oauth_base_url!r} must not carry a query or fragment"
        )
    base = _split(environment.authorize_url_base())

    params: list[tuple[str, str]] = [
        ("client_id", client_id),
        ("response_type", "code"),
        ("scope", " ".join(OAuthScope.render(scope) for scope in scopes)),
        ("redirect_uri", redirect_uri),
    ]
    if state is not None:
        params.append(("state", state))
    if show_login is not None:
        params.append(("show_login", "true" if show_login else "false"))
    if prompt is not None:
        params.append(("prompt", prompt))

    query = urlencode(params, quote_via=quote, safe=_QUERY_SAFE)
    url = urlunsplit((base.scheme, base.netloc, base.path, query, ""))

    reparsed = _split(url)
    if (reparsed.scheme, reparsed.netloc, reparsed.path, reparsed.query) != (
        base.scheme,
        base.netloc,
        base.path,
        query,
    ):
        raise InvalidURLError(f"assembled URL {url!r} does not round-trip")

    logger.debug(f"Built authorize URL for client {client_id}")
    return url
