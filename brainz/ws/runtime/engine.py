"""Execution engine: send a RequestDescriptor and decode the outcome.

Architecture:
    execute() reads configuration at call time (base URL, headers,
    timeout, throttle interval), sends the request through an HTTPTransport
    and maps the result:

    2xx           → decoded model, BrowseResult or SearchResult
    404           → NotFoundError
    429 / 503     → RateLimitedError (retry_after from Retry-After)
    other non-2xx → ServerError(status, body)
    no response   → TransportError (raised by the transport)
    bad body      → MalformedResponseError (raised by the decoder)

Design Decisions:
    - No retries for any outcome; backoff is the caller's decision
    - Config injection: an explicit ClientConfig wins, otherwise the
      process-wide default is read on every call
    - Transport injection for testing; the default aiohttp transport is
      created lazily and owned (closed) by the engine
"""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Any

from ..core.config import ClientConfig, get_config
from ..core.enums import RequestMode
from ..core.exceptions import NotFoundError, RateLimitedError, ServerError
from ..core.request import RequestDescriptor
from ..models.base import MusicBrainzModel
from ..models.codec import decode_browse, decode_entity, decode_search
from ..models.results import BrowseResult, SearchResult
from .http import AiohttpTransport, HTTPResponse, HTTPTransport
from .throttle import RequestThrottle

logger = logging.getLogger(__name__)

RATE_LIMIT_STATUSES = frozenset({429, 503})

# Longest body excerpt quoted in error messages
_BODY_EXCERPT = 200

ExecutionResult = MusicBrainzModel | BrowseResult[Any] | SearchResult[Any]


def parse_retry_after(value: str | None) -> float | None:
    """Seconds to wait according to a ``Retry-After`` header.

    Accepts delta-seconds or an HTTP date. Returns None when absent or
    unparseable.
    """
    if not value:
        return None
    stripped = value.strip()
    try:
        return max(0.0, float(stripped))
    except ValueError:
        pass
    try:
        when = parsedate_to_datetime(stripped)
    except (TypeError, ValueError):
        return None
    if when.tzinfo is None:
        when = when.replace(tzinfo=timezone.utc)
    return max(0.0, (when - datetime.now(timezone.utc)).total_seconds())


class ExecutionEngine:
    """Executes request descriptors against the web service.

    Example:
        >>> async with ExecutionEngine() as engine:
        ...     artist = await engine.execute(
        ...         compose(RequestMode.LOOKUP, EntityKind.ARTIST,
        ...                 entity_id="5b11f4ce-a62d-471e-81fc-a69a8278c7da")
        ...     )
    """

    def __init__(
        self,
        transport: HTTPTransport | None = None,
        config: ClientConfig | None = None,
    ) -> None:
        """Initialize the engine.

        Args:
            transport: HTTP transport; an AiohttpTransport is created on
                first use when omitted
            config: Fixed configuration; when omitted the process-wide
                default is read on every request
        """
        self._transport = transport
        self._owns_transport = transport is None
        self._config = config
        self._throttle = RequestThrottle()
        self._closed = False

    @property
    def config(self) -> ClientConfig:
        """Configuration the next request will use."""
        return self._config if self._config is not None else get_config()

    @property
    def transport(self) -> HTTPTransport:
        if self._transport is None:
            self._transport = AiohttpTransport()
        return self._transport

    async def execute(self, descriptor: RequestDescriptor) -> ExecutionResult:
        """Send ``descriptor`` and decode the response.

        Returns:
            Entity model (lookup), BrowseResult (browse) or SearchResult (search)

        Raises:
            TransportError: If no response was received
            NotFoundError: On 404
            RateLimitedError: On 429 or 503
            ServerError: On any other non-2xx status
            MalformedResponseError: If a 2xx body cannot be decoded
        """
        return await self._execute_with(self.transport, descriptor)

    def execute_blocking(self, descriptor: RequestDescriptor) -> ExecutionResult:
        """Run one execution on a fresh event loop.

        Must not be called from inside a running event loop. When the engine
        owns its transport, a dedicated aiohttp session is opened and closed
        for the call, since a session cannot outlive its loop.
        """
        return asyncio.run(self._execute_isolated(descriptor))

    async def _execute_isolated(self, descriptor: RequestDescriptor) -> ExecutionResult:
        if not self._owns_transport:
            return await self.execute(descriptor)
        async with AiohttpTransport() as transport:
            return await self._execute_with(transport, descriptor)

    async def _execute_with(
        self, transport: HTTPTransport, descriptor: RequestDescriptor
    ) -> ExecutionResult:
        config = self.config
        url = descriptor.url(config.base_url)

        auth_includes = descriptor.auth_includes
        if auth_includes and not config.auth_token:
            logger.warning(
                "Sending user-scoped includes without an auth token",
                extra={"includes": [include.value for include in auth_includes]},
            )

        await self._throttle.wait(config.min_request_interval)
        logger.debug(
            "Sending request",
            extra={"mode": descriptor.mode.value, "kind": descriptor.kind.value, "url": url},
        )
        response = await transport.get(url, headers=config.headers(), timeout=config.timeout)
        logger.debug(
            "Received response",
            extra={"status": response.status, "bytes": len(response.body), "url": url},
        )

        self._raise_for_status(descriptor, response)
        return self._decode(descriptor, response)

    @staticmethod
    def _raise_for_status(descriptor: RequestDescriptor, response: HTTPResponse) -> None:
        if response.ok:
            return
        status = response.status
        body = response.text
        excerpt = body[:_BODY_EXCERPT]

        if status == 404:
            raise NotFoundError(f"{descriptor.kind.value} not found: {descriptor.path}", body=body)
        if status in RATE_LIMIT_STATUSES:
            retry_after = parse_retry_after(response.header("Retry-After"))
            logger.debug(
                "Rate limited",
                extra={"status": status, "retry_after": retry_after},
            )
            raise RateLimitedError(
                f"Rate limited by the service (HTTP {status})",
                status_code=status,
                body=body,
                retry_after=retry_after,
            )
        raise ServerError(
            f"HTTP {status} for {descriptor.path}: {excerpt}",
            status_code=status,
            body=body,
        )

    @staticmethod
    def _decode(descriptor: RequestDescriptor, response: HTTPResponse) -> ExecutionResult:
        if descriptor.mode == RequestMode.LOOKUP:
            return decode_entity(descriptor.kind, response.body)
        if descriptor.mode == RequestMode.BROWSE:
            return decode_browse(descriptor.kind, response.body)
        return decode_search(descriptor.kind, response.body)

    async def close(self) -> None:
        """Close the owned transport."""
        if self._closed:
            return
        self._closed = True
        if self._owns_transport and self._transport is not None:
            await self._transport.close()

    async def __aenter__(self) -> ExecutionEngine:
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()
