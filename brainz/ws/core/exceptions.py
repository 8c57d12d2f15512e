"""Custom exception hierarchy."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .enums import EntityKind, Include


class BrainzError(Exception):
    """Base exception for all library errors."""

    pass


class ContractError(BrainzError):
    """A request was built incorrectly.

    Raised while composing a request, before anything is sent. These are
    programming errors on the caller's side and are never corrected silently.
    """

    pass


class InvalidIncludeError(ContractError):
    """Include is not legal for the entity kind it was attached to."""

    def __init__(self, kind: EntityKind, include: Include | str, message: str | None = None) -> None:
        token = getattr(include, "value", include)
        super().__init__(message or f"Include '{token}' is not valid for {kind.value} requests")
        self.kind = kind
        self.include = include


class IncompleteQueryError(ContractError):
    """Search query is malformed (missing connector, unknown field, empty)."""

    pass


class InvalidRequestError(ContractError):
    """Mode, selector or pagination is invalid for the entity kind."""

    pass


class ClientError(BrainzError):
    """Error raised while executing a request."""

    pass


class TransportError(ClientError):
    """Network-layer failure (DNS, connection, timeout)."""

    pass


class MalformedResponseError(ClientError):
    """Successful response whose body does not decode into the expected shape."""

    def __init__(self, message: str, body: str | None = None) -> None:
        super().__init__(message)
        self.body = body


class HTTPStatusError(ClientError):
    """Non-2xx response from the service."""

    def __init__(
        self,
        message: str,
        status_code: int,
        body: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class NotFoundError(HTTPStatusError):
    """Entity does not exist (404)."""

    def __init__(self, message: str, body: str | None = None) -> None:
        super().__init__(message, status_code=404, body=body)


class RateLimitedError(HTTPStatusError):
    """Service refused the request because of rate limiting (429 or 503).

    Kept apart from ServerError so callers can back off. The engine itself
    never retries.
    """

    def __init__(
        self,
        message: str,
        status_code: int = 503,
        body: str | None = None,
        retry_after: float | None = None,
    ) -> None:
        super().__init__(message, status_code=status_code, body=body)
        self.retry_after = retry_after


class ServerError(HTTPStatusError):
    """Any other non-2xx response."""

    pass
