"""Async client for the public ORCID API and its OAuth endpoints."""
from __future__ import annotations

import json
import logging
from typing import Any, Callable, Iterable, Optional, TypeVar, Union

from orcidkit.environment import ORCID_JSON, PLAIN_JSON, ClientConfig
from orcidkit.errors import DecodingError, HTTPError
from orcidkit.forms import FORM_CONTENT_TYPE, encode_form
from orcidkit.identifier import OrcidID
from orcidkit.models import OAuthToken, OrcidRecord, WorksResponse
from orcidkit.oauth import OAuthScope, build_authorize_url
from orcidkit.transport import HTTPLoader, HttpxLoader, Request, Response, perform

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _as_orcid(orcid: Union[OrcidID, str]) -> OrcidID:
    if isinstance(orcid, OrcidID):
        return orcid
    return OrcidID.parse(orcid)


class OrcidClient:
    """Typed access to ORCID public records, works and OAuth.

    The client holds only immutable configuration and a loader, so
    operations may run concurrently on one instance.

    Example:
        async with OrcidClient() as client:
            record = await client.fetch_record("0000-0002-1825-0097")
            print(record.display_name)
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        loader: Optional[HTTPLoader] = None,
    ):
        """Initialize the client.

        Args:
            config: Environment and User-Agent (defaults to production).
            loader: Transport used for every request. Defaults to an
                ``HttpxLoader`` owned, and closed, by this client.
        """
        self.config = config or ClientConfig()
        self._owns_loader = loader is None
        self.loader: HTTPLoader = loader or HttpxLoader()

    async def __aenter__(self) -> "OrcidClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_loader and isinstance(self.loader, HttpxLoader):
            await self.loader.aclose()

    # -- read API -------------------------------------------------------

    async def fetch_record(self, orcid: Union[OrcidID, str]) -> OrcidRecord:
        """Fetch the public record for ``orcid``."""
        orcid_id = _as_orcid(orcid)
        request = self._get(self.config.environment.record_url(orcid_id))
        return await self._execute(request, OrcidRecord.from_dict)

    async def fetch_works(self, orcid: Union[OrcidID, str]) -> WorksResponse:
        """Fetch the public works summary for ``orcid``."""
        orcid_id = _as_orcid(orcid)
        request = self._get(self.config.environment.works_url(orcid_id))
        return await self._execute(request, WorksResponse.from_dict)

    # -- OAuth ----------------------------------------------------------

    def authorize_url(
        self,
        client_id: str,
        redirect_uri: str,
        scopes: Iterable[Union[OAuthScope, str]],
        state: Optional[str] = None,
        show_login: Optional[bool] = None,
        prompt: Optional[str] = None,
    ) -> str:
        return build_authorize_url(
            self.config.environment,
            client_id=client_id,
            redirect_uri=redirect_uri,
            scopes=scopes,
            state=state,
            show_login=show_login,
            prompt=prompt,
        )

    async def exchange_code_for_token(
        self,
        client_id: str,
        client_secret: str,
        code: str,
        redirect_uri: str,
    ) -> OAuthToken:
        """Exchange an authorization code for an access token.

        Sends exactly the five form fields ORCID expects; no refresh or
        storage happens here.
        """
        body = encode_form(
            {
                "client_id": client_id,
                "client_secret": client_secret,
                "grant_type": "authorization_code",
                "code": code,
                "redirect_uri": redirect_uri,
            }
        )
        request = Request(
            method="POST",
            url=self.config.environment.token_url(),
            headers={
                **self._common_headers(),
                "Accept": PLAIN_JSON,
                "Content-Type": FORM_CONTENT_TYPE,
            },
            body=body,
        )
        return await self._execute(request, OAuthToken.from_dict)

    # -- pipeline -------------------------------------------------------

    def _common_headers(self) -> dict[str, str]:
        return {"User-Agent": self.config.user_agent}

    def _get(self, url: str) -> Request:
        return Request(
            method="GET",
            url=url,
            headers={**self._common_headers(), "Accept": ORCID_JSON},
        )

    async def _execute(self, request: Request, decode: Callable[[Any], T]) -> T:
        response = await perform(request, self.loader)
        self._validate(request, response)
        return self._decode(response, decode)

    @staticmethod
    def _validate(request: Request, response: Response) -> None:
        if response.is_success:
            return
        logger.warning(f"{request.method} {request.url} returned HTTP {response.status_code}")
        raise HTTPError(response.status_code, response.text())

    @staticmethod
    def _decode(response: Response, decode: Callable[[Any], T]) -> T:
        try:
            payload = json.loads(response.body)
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise DecodingError(f"response body is not valid JSON: {e}") from e
        except RecursionError as e:
            raise DecodingError("response body is nested too deeply") from e
        return decode(payload)
