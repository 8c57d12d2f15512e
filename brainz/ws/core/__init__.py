"""Core components."""

from .config import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT,
    ClientConfig,
    configure,
    format_user_agent,
    get_config,
    reset_config,
    set_auth_token,
    set_base_url,
    set_timeout,
    set_user_agent,
)
from .enums import (
    BrowseBy,
    EntityKind,
    Include,
    Relationship,
    RequestMode,
    SerializationMode,
    Subquery,
    parse_include,
)
from .exceptions import (
    BrainzError,
    ClientError,
    ContractError,
    HTTPStatusError,
    IncompleteQueryError,
    InvalidIncludeError,
    InvalidRequestError,
    MalformedResponseError,
    NotFoundError,
    RateLimitedError,
    ServerError,
    TransportError,
)
from .includes import IncludeSet, render_includes, validate_include
from .pagination import MAX_LIMIT, PaginationCursor
from .request import (
    MBID_PATTERN,
    BrowseFilter,
    RequestBuilder,
    RequestDescriptor,
    compose,
    is_mbid,
)

__all__ = [
    # Config
    "ClientConfig",
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT",
    "configure",
    "format_user_agent",
    "get_config",
    "reset_config",
    "set_auth_token",
    "set_base_url",
    "set_timeout",
    "set_user_agent",
    # Enums
    "BrowseBy",
    "EntityKind",
    "Include",
    "Relationship",
    "RequestMode",
    "SerializationMode",
    "Subquery",
    "parse_include",
    # Exceptions
    "BrainzError",
    "ClientError",
    "ContractError",
    "HTTPStatusError",
    "IncompleteQueryError",
    "InvalidIncludeError",
    "InvalidRequestError",
    "MalformedResponseError",
    "NotFoundError",
    "RateLimitedError",
    "ServerError",
    "TransportError",
    # Includes
    "IncludeSet",
    "render_includes",
    "validate_include",
    # Pagination
    "MAX_LIMIT",
    "PaginationCursor",
    # Requests
    "MBID_PATTERN",
    "BrowseFilter",
    "RequestBuilder",
    "RequestDescriptor",
    "compose",
    "is_mbid",
]
