"""HTTP transport used by the execution engine.

Architecture:
    The engine only depends on the HTTPTransport protocol: one async GET
    that returns status, headers and the raw body. AiohttpTransport is the
    default implementation; tests and alternative stacks plug in anything
    with the same shape.

Design Decisions:
    - Transports never classify status codes; a 404 or 503 is a normal
      HTTPResponse and the engine decides what it means
    - Network failures (DNS, refused connection, timeout) are the only
      errors a transport raises, always as TransportError
    - The aiohttp session is created lazily so constructing a transport
      outside a running event loop is safe
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol

import aiohttp

from ..core.exceptions import TransportError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HTTPResponse:
    """Status, headers and raw body of one response."""

    status: int
    body: bytes = b""
    headers: Mapping[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    @property
    def text(self) -> str:
        """Body decoded as UTF-8, undecodable bytes replaced."""
        return self.body.decode("utf-8", errors="replace")

    def header(self, name: str) -> str | None:
        """Case-insensitive header lookup."""
        wanted = name.lower()
        for key, value in self.headers.items():
            if key.lower() == wanted:
                return value
        return None


class HTTPTransport(Protocol):
    """Anything able to perform an async GET for the engine."""

    async def get(
        self,
        url: str,
        *,
        headers: Mapping[str, str],
        timeout: float,
    ) -> HTTPResponse:
        """Fetch ``url``.

        Raises:
            TransportError: If no response was received
        """
        ...

    async def close(self) -> None:
        """Release network resources."""
        ...


class AiohttpTransport:
    """HTTPTransport backed by one lazily created aiohttp.ClientSession."""

    def __init__(self, session: aiohttp.ClientSession | None = None) -> None:
        self._session = session
        self._owns_session = session is None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession()
            self._owns_session = True
        return self._session

    async def get(
        self,
        url: str,
        *,
        headers: Mapping[str, str],
        timeout: float,
    ) -> HTTPResponse:
        try:
            async with self.session.get(
                url,
                headers=dict(headers),
                timeout=aiohttp.ClientTimeout(total=timeout),
            ) as response:
                body = await response.read()
                return HTTPResponse(
                    status=response.status,
                    body=body,
                    headers={str(key): str(value) for key, value in response.headers.items()},
                )
        except asyncio.TimeoutError as exc:
            raise TransportError(f"Request timed out after {timeout}s: {url}") from exc
        except aiohttp.ClientError as exc:
            raise TransportError(f"Request failed: {exc}") from exc

    async def close(self) -> None:
        """Close session."""
        if self._owns_session and self._session is not None and not self._session.closed:
            await self._session.close()
            logger.debug("Closed aiohttp session")

    async def __aenter__(self) -> AiohttpTransport:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Context manager exit."""
        await self.close()
