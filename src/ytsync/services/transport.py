"""
HTTP transport for YouTube Data API requests.

The pagination loop only needs ``await transport.get(url) -> str``; the
``Transport`` protocol captures that so tests and callers can plug in their
own implementation. ``HttpxTransport`` is the default, built on
``httpx.AsyncClient``. Connection pooling, TLS and timeouts belong here;
retries are intentionally absent.
"""

from __future__ import annotations

import logging
import re
from types import TracebackType
from typing import Any, Optional, Protocol

import httpx

from ytsync import __version__
from ytsync.exceptions import QuotaExceededError, TransportError

logger = logging.getLogger(__name__)

_REQUEST_TIMEOUT_SECONDS = 30.0
_QUOTA_REASONS = frozenset({"quotaExceeded", "dailyLimitExceeded"})
_CREDENTIAL_PARAM = re.compile(r"([?&](?:key|access_token))=[^&]*")


def redact_url(url: str) -> str:
    """Replace the credential in a request URL so it can be logged."""
    return _CREDENTIAL_PARAM.sub(r"\1=***", url)


class Transport(Protocol):
    """Anything that can GET a URL and return the response body."""

    async def get(self, url: str) -> str: ...


class HttpxTransport:
    """
    Async ``httpx`` transport.

    Can be used as an async context manager to share one connection pool
    across all pages of a traversal. Outside a context each request opens
    and closes its own client.

    Parameters
    ----------
    timeout : float, optional
        Per-request timeout in seconds (default: 30).
    client : httpx.AsyncClient | None, optional
        Client to use instead of creating one. A supplied client is never
        closed by the transport.

    Examples
    --------
    >>> async with HttpxTransport(timeout=10.0) as transport:
    ...     body = await transport.get(url)
    """

    def __init__(
        self,
        timeout: float = _REQUEST_TIMEOUT_SECONDS,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.timeout = timeout
        self._client = client
        self._owns_client = client is None

    @property
    def headers(self) -> dict[str, str]:
        """Headers sent with every request."""
        return {
            "accept": "application/json",
            "User-Agent": f"ytsync/{__version__}",
        }

    async def __aenter__(self) -> HttpxTransport:
        if self._client is None:
            self._client = httpx.AsyncClient(follow_redirects=True)
        return self

    async def __aexit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None

    async def get(self, url: str) -> str:
        """
        GET ``url`` and return the response body.

        Raises
        ------
        QuotaExceededError
            If the API answers 403 with a quota error reason.
        TransportError
            On connection failures, timeouts and non-2xx responses.
        """
        if self._client is not None:
            return await self._send(self._client, url)
        async with httpx.AsyncClient(follow_redirects=True) as client:
            return await self._send(client, url)

    async def _send(self, client: httpx.AsyncClient, url: str) -> str:
        safe_url = redact_url(url)
        logger.debug("GET %s", safe_url)
        try:
            response = await client.get(url, headers=self.headers, timeout=self.timeout)
        except httpx.HTTPError as e:
            raise TransportError(
                message=f"Request to YouTube API failed: {type(e).__name__}",
                url=safe_url,
                original_error=e,
            ) from e

        if response.is_success:
            return response.text

        reason = _error_reason(response)
        if response.status_code == 403 and reason in _QUOTA_REASONS:
            raise QuotaExceededError(
                message=f"YouTube API quota exceeded ({reason})",
                url=safe_url,
                error_reason=reason,
            )
        raise TransportError(
            message=(
                f"YouTube API returned status {response.status_code}"
                + (f" ({reason})" if reason else "")
            ),
            status_code=response.status_code,
            url=safe_url,
        )


def _error_reason(response: httpx.Response) -> Optional[str]:
    """Extract ``error.errors[0].reason`` from a YouTube error body, if any."""
    try:
        payload: Any = response.json()
    except ValueError:
        return None
    if not isinstance(payload, dict):
        return None
    error = payload.get("error")
    if not isinstance(error, dict):
        return None
    errors = error.get("errors")
    if isinstance(errors, list) and errors and isinstance(errors[0], dict):
        reason = errors[0].get("reason")
        return str(reason) if reason is not None else None
    return None
