"""Pluggable HTTP transport.

The client never talks to the network directly. It hands a ``Request`` to an
``HTTPLoader`` through ``perform()``, which normalizes every failure into a
``TransportError``. Swap the loader to run the whole pipeline offline.
"""
from __future__ import annotations

import asyncio
import inspect
import logging
from dataclasses import dataclass, field
from typing import Awaitable, Callable, Mapping, Optional, Protocol, Union, runtime_checkable

import httpx
import requests

from orcidkit.errors import OrcidError, TransportError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Request:
    method: str
    url: str
    headers: Mapping[str, str] = field(default_factory=dict)
    body: Optional[bytes] = None


@dataclass(frozen=True)
class Response:
    """Status, case-insensitive headers and raw body of one exchange."""

    status_code: int
    headers: httpx.Headers = field(default_factory=httpx.Headers)
    body: bytes = b""

    def __post_init__(self) -> None:
        if not isinstance(self.headers, httpx.Headers):
            object.__setattr__(self, "headers", httpx.Headers(self.headers))

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code <= 299

    def text(self) -> Optional[str]:
        """Body decoded as UTF-8, or None when the bytes are not valid UTF-8."""
        try:
            return self.body.decode("utf-8")
        except UnicodeDecodeError:
            return None


@runtime_checkable
class HTTPLoader(Protocol):
    """Anything that can execute one request and return its response."""

    async def load(self, request: Request) -> Response:
        ...


class HttpxLoader:
    """Network loader backed by ``httpx.AsyncClient``.

    A client passed in is borrowed and left open; one created here is closed
    by ``aclose()``.
    """

    def __init__(self, client: Optional[httpx.AsyncClient] = None, timeout: float = 30.0):
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)

    async def load(self, request: Request) -> Response:
        response = await self._client.request(
            request.method,
            request.url,
            headers=dict(request.headers),
            content=request.body,
        )
        return Response(
            status_code=response.status_code,
            headers=response.headers,
            body=response.content,
        )

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()


class RequestsLoader:
    """Loader backed by a blocking ``requests.Session``.

    Each request runs in a worker thread so the event loop is never blocked.
    """

    def __init__(self, session: Optional[requests.Session] = None, timeout: float = 30.0):
        self._owns_session = session is None
        self.session = session or requests.Session()
        self.timeout = timeout

    def _send(self, request: Request) -> Response:
        response = self.session.request(
            request.method,
            request.url,
            headers=dict(request.headers),
            data=request.body,
            timeout=self.timeout,
        )
        return Response(
            status_code=response.status_code,
            headers=dict(response.headers),
            body=response.content,
        )

    async def load(self, request: Request) -> Response:
        return await asyncio.to_thread(self._send, request)

    async def aclose(self) -> None:
        if self._owns_session:
            self.session.close()


Handler = Callable[[Request], Union[Response, Awaitable[Response]]]


class StubLoader:
    """Offline loader for tests and demos.

    Either replays a fixed ``Response`` or calls ``handler`` (sync or async)
    for each request. Every request seen is appended to ``requests``.

    Example:
        loader = StubLoader(Response(200, body=b"{}"))
        client = OrcidClient(loader=loader)
    """

    def __init__(self, response_or_handler: Union[Response, Handler]):
        self._response_or_handler = response_or_handler
        self.requests: list[Request] = []

    @property
    def last_request(self) -> Optional[Request]:
        return self.requests[-1] if self.requests else None

    async def load(self, request: Request) -> Response:
        self.requests.append(request)
        if isinstance(self._response_or_handler, Response):
            return self._response_or_handler
        result = self._response_or_handler(request)
        if inspect.isawaitable(result):
            result = await result
        return result


def _caller_is_cancelling() -> bool:
    task = asyncio.current_task()
    return task is not None and task.cancelling() > 0


async def perform(request: Request, loader: HTTPLoader) -> Response:
    """Execute ``request`` through ``loader``.

    Returns the response untouched; status codes are not inspected here.

    Raises:
        TransportError: on any loader failure or a non-HTTP result.
        asyncio.CancelledError: when the calling task itself is cancelled.
    """
    logger.debug(f"{request.method} {request.url}")
    try:
        result = await loader.load(request)
    except asyncio.CancelledError:
        if _caller_is_cancelling():
            raise
        logger.warning(f"{request.method} {request.url} cancelled by the transport")
        raise TransportError("request cancelled") from None
    except TransportError:
        raise
    except OrcidError as e:
        raise TransportError(str(e)) from e
    except Exception as e:
        logger.warning(f"{request.method} {request.url} failed: {e!r}")
        raise TransportError(f"{type(e).__name__}: {e}") from e

    if not isinstance(result, Response):
        raise TransportError("non-HTTP response")
    logger.debug(f"{request.method} {request.url} -> {result.status_code}")
    return result
