"""
transport.py — HTTP layer shared by every endpoint.

Wraps an httpx.AsyncClient. Any AsyncClient can be injected (custom
timeouts, proxies, instrumentation, or httpx.MockTransport in tests);
when none is given the transport creates and owns one.

Rate limiting:
  The upstream service answers anonymous traffic with 429 and a
  Set-Cookie header. The first `;` segment of that header becomes the
  session cookie: it is attached to the current request, which is sent
  exactly once more, and to every later request from this transport.
  No other status is retried.

Cancellation:
  Deadlines are the caller's job (asyncio.timeout, wait_for). A cancelled
  request raises asyncio.CancelledError unchanged; only httpx errors are
  wrapped in TransportError.
"""

import logging
import threading
from typing import Any, Optional

import httpx

from gtrends.core.config import settings
from gtrends.core.constants import CONTENT_TYPE_FORM, CONTENT_TYPE_JSON
from gtrends.core.errors import RequestCreationError, RequestFailedError, TransportError

logger = logging.getLogger(__name__)


def session_cookie_from(set_cookie: str) -> str:
    """Return the `name=value` part of a Set-Cookie header value."""
    return set_cookie.split(";", 1)[0].strip()


class Transport:
    """
    Sends GET/POST requests and returns raw body bytes.

    The session cookie is the only mutable state and is guarded by a lock,
    so one Transport can be shared across tasks and threads.

    A 429 that carries no usable Set-Cookie is never resent; it fails at
    once with RequestFailedError, since the retry would be identical.
    """

    def __init__(
        self,
        http_client: Optional[httpx.AsyncClient] = None,
        *,
        user_agent: Optional[str] = None,
        debug: bool = False,
    ) -> None:
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(timeout=settings.request_timeout)
        self.user_agent = user_agent or settings.user_agent
        self.debug = debug

        self._cookie_lock = threading.Lock()
        self._cookie = ""

    # ── Session cookie ────────────────────────────────────────────────────────

    @property
    def cookie(self) -> str:
        with self._cookie_lock:
            return self._cookie

    @cookie.setter
    def cookie(self, value: str) -> None:
        with self._cookie_lock:
            self._cookie = value

    # ── Public verbs ──────────────────────────────────────────────────────────

    async def get(self, url: str, params: Optional[dict[str, str]] = None) -> bytes:
        return await self._request(
            "GET", url, params=params, headers={"Accept": CONTENT_TYPE_JSON}
        )

    async def post(
        self,
        url: str,
        content: str,
        params: Optional[dict[str, str]] = None,
    ) -> bytes:
        if self.debug:
            logger.debug("POST payload: %s", content)
        return await self._request(
            "POST",
            url,
            params=params,
            headers={"Content-Type": CONTENT_TYPE_FORM},
            content=content,
        )

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this transport created it."""
        if self._owns_client:
            await self._client.aclose()

    # ── Internals ─────────────────────────────────────────────────────────────

    async def _request(
        self,
        method: str,
        url: str,
        *,
        headers: dict[str, str],
        params: Optional[dict[str, str]] = None,
        content: Any = None,
    ) -> bytes:
        headers["User-Agent"] = self.user_agent
        request = self._build(method, url, headers, params, content, self.cookie)
        response = await self._send(request)

        if response.status_code == httpx.codes.TOO_MANY_REQUESTS:
            set_cookie = response.headers.get_list("set-cookie")
            cookie = session_cookie_from(set_cookie[0]) if set_cookie else ""
            if cookie:
                logger.info(
                    "Rate limited by %s, retrying once with session cookie",
                    request.url.host,
                )
                self.cookie = cookie
                retry = self._build(method, url, headers, params, content, cookie)
                response = await self._send(retry)

        if response.status_code != httpx.codes.OK:
            raise RequestFailedError(response.status_code, response.reason_phrase)

        return response.content

    def _build(
        self,
        method: str,
        url: str,
        headers: dict[str, str],
        params: Optional[dict[str, str]],
        content: Any,
        cookie: str,
    ) -> httpx.Request:
        try:
            request = self._client.build_request(
                method, url, params=params, headers=headers, content=content
            )
        except httpx.InvalidURL as exc:
            raise RequestCreationError(exc) from exc

        # build_request merges the AsyncClient cookie jar; only the
        # captured session cookie may go out.
        request.headers.pop("Cookie", None)
        if cookie:
            request.headers["Cookie"] = cookie

        if self.debug:
            logger.debug("%s request: %s", method, request.url)
        return request

    async def _send(self, request: httpx.Request) -> httpx.Response:
        try:
            response = await self._client.send(request)
        except httpx.UnsupportedProtocol as exc:
            raise RequestCreationError(exc) from exc
        except httpx.HTTPError as exc:
            raise TransportError(exc) from exc

        if self.debug:
            logger.debug(
                "Response: %s %s: %s",
                response.status_code,
                response.reason_phrase,
                response.text,
            )
        return response
