"""Runtime components: execution engine, HTTP transport and throttle."""

from .engine import RATE_LIMIT_STATUSES, ExecutionEngine, ExecutionResult, parse_retry_after
from .http import AiohttpTransport, HTTPResponse, HTTPTransport
from .throttle import RequestThrottle

__all__ = [
    "AiohttpTransport",
    "ExecutionEngine",
    "ExecutionResult",
    "HTTPResponse",
    "HTTPTransport",
    "RATE_LIMIT_STATUSES",
    "RequestThrottle",
    "parse_retry_after",
]
