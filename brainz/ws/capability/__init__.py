"""Capability registry exports."""

from .registry import (
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

__all__ = [
    "LEGAL_BROWSE_BY",
    "LEGAL_INCLUDES",
    "SUPPORTED_MODES",
    "describe_kind",
    "legal_browse_by",
    "legal_includes",
    "supported_modes",
    "supports_include",
    "supports_mode",
]
