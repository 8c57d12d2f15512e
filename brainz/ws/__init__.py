"""brainz-ws - typed client for the MusicBrainz web service (WS/2)."""

from .api import MusicBrainzAPI, SyncMusicBrainzAPI
from .capability import (
    LEGAL_BROWSE_BY,
    LEGAL_INCLUDES,
    SUPPORTED_MODES,
    describe_kind,
    legal_browse_by,
    legal_includes,
    supported_modes,
    supports_include,
    supports_mode,
)
from .core import (
    MAX_LIMIT,
    BrainzError,
    BrowseBy,
    BrowseFilter,
    ClientConfig,
    ClientError,
    ContractError,
    EntityKind,
    HTTPStatusError,
    IncludeSet,
    IncompleteQueryError,
    InvalidIncludeError,
    InvalidRequestError,
    MalformedResponseError,
    NotFoundError,
    PaginationCursor,
    RateLimitedError,
    Relationship,
    RequestBuilder,
    RequestDescriptor,
    RequestMode,
    SerializationMode,
    ServerError,
    Subquery,
    TransportError,
    compose,
    configure,
    format_user_agent,
    get_config,
    render_includes,
    reset_config,
    set_auth_token,
    set_base_url,
    set_timeout,
    set_user_agent,
)
from .models import (
    BrowseResult,
    PartialDate,
    SearchResult,
    decode_browse,
    decode_entity,
    decode_search,
    encode,
    encode_browse,
    encode_search,
)
from .runtime import AiohttpTransport, ExecutionEngine, HTTPResponse, HTTPTransport
from .search import SearchQueryBuilder, escape_lucene

__version__ = "0.1.0"

__all__ = [
    # API
    "MusicBrainzAPI",
    "SyncMusicBrainzAPI",
    # Capability
    "LEGAL_BROWSE_BY",
    "LEGAL_INCLUDES",
    "SUPPORTED_MODES",
    "describe_kind",
    "legal_browse_by",
    "legal_includes",
    "supported_modes",
    "supports_include",
    "supports_mode",
    # Configuration
    "ClientConfig",
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
    "Relationship",
    "RequestMode",
    "SerializationMode",
    "Subquery",
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
    # Requests
    "BrowseFilter",
    "IncludeSet",
    "MAX_LIMIT",
    "PaginationCursor",
    "RequestBuilder",
    "RequestDescriptor",
    "compose",
    "render_includes",
    # Search
    "SearchQueryBuilder",
    "escape_lucene",
    # Models
    "BrowseResult",
    "PartialDate",
    "SearchResult",
    "decode_browse",
    "decode_entity",
    "decode_search",
    "encode",
    "encode_browse",
    "encode_search",
    # Runtime
    "AiohttpTransport",
    "ExecutionEngine",
    "HTTPResponse",
    "HTTPTransport",
]
