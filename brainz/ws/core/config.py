"""Client configuration and the process-wide default.

Architecture:
    ClientConfig is an immutable value. The execution engine takes one at
    construction; when none is given it reads the process-wide default on
    every request, so changes made through ``configure()`` are seen by the
    next call.

    The default lives in a single module cell replaced atomically under a
    lock. Readers get a frozen snapshot and never observe a half-applied
    update. The intended pattern is still "configure once at startup";
    reconfiguring while requests are in flight is safe but each in-flight
    request keeps the snapshot it started with.
"""

from __future__ import annotations

import logging
import os
import threading
from dataclasses import dataclass, replace
from typing import Any, Final

from .enums import SerializationMode

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL: Final[str] = "https://musicbrainz.org/ws/2"
DEFAULT_TIMEOUT: Final[float] = 30.0
APP_NAME: Final[str] = "brainz-ws"
APP_VERSION: Final[str] = "0.1.0"
APP_CONTACT: Final[str] = "https://github.com/brainz-ws/brainz-ws"


def format_user_agent(app_name: str, app_version: str, contact: str = "") -> str:
    """Return ``App/Version ( contact )`` as the service asks clients to send.

    Example:
        >>> format_user_agent("my_app", "1.0", "me@example.com")
        'my_app/1.0 ( me@example.com )'
    """
    stripped = contact.strip()
    if stripped:
        return f"{app_name}/{app_version} ( {stripped} )"
    return f"{app_name}/{app_version}"


@dataclass(frozen=True)
class ClientConfig:
    """Settings read by the execution engine on every request.

    Attributes:
        user_agent: Sent as ``User-Agent``; the service rejects anonymous clients
        base_url: Service root, override to point at a mock server
        timeout: Total request timeout in seconds
        auth_token: Bearer token for user-scoped includes and private collections
        serialization_mode: Default key casing for ``encode()``
        min_request_interval: Seconds between request starts, None disables spacing
    """

    user_agent: str = format_user_agent(APP_NAME, APP_VERSION, APP_CONTACT)
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    auth_token: str | None = None
    serialization_mode: SerializationMode = SerializationMode.MODERN
    min_request_interval: float | None = None

    def __post_init__(self) -> None:
        if not self.user_agent or not self.user_agent.strip():
            raise ValueError("user_agent must be a non-empty string")
        if not self.base_url.startswith(("http://", "https://")):
            raise ValueError(f"base_url must be an http(s) URL, got {self.base_url!r}")
        if self.timeout <= 0:
            raise ValueError("timeout must be positive")
        # Normalise so URL joining never produces a double slash
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))

    @classmethod
    def from_env(cls, **overrides: Any) -> ClientConfig:
        """Build a config from ``MUSICBRAINZ_*`` environment variables.

        Explicit keyword overrides win over the environment.
        """
        values: dict[str, Any] = {}
        user_agent = os.getenv("MUSICBRAINZ_USER_AGENT")
        if user_agent:
            values["user_agent"] = user_agent
        base_url = os.getenv("MUSICBRAINZ_BASE_URL")
        if base_url:
            values["base_url"] = base_url
        timeout = os.getenv("MUSICBRAINZ_TIMEOUT")
        if timeout:
            values["timeout"] = float(timeout)
        token = os.getenv("MUSICBRAINZ_AUTH_TOKEN")
        if token:
            values["auth_token"] = token
        values.update(overrides)
        return cls(**values)

    def headers(self) -> dict[str, str]:
        """Headers attached to every outgoing request."""
        headers = {
            "Accept": "application/json",
            "User-Agent": self.user_agent,
        }
        if self.auth_token:
            headers["Authorization"] = f"Bearer {self.auth_token}"
        return headers


_lock: Final[threading.Lock] = threading.Lock()
_current: ClientConfig = ClientConfig()


def get_config() -> ClientConfig:
    """Snapshot of the process-wide default configuration."""
    with _lock:
        return _current


def configure(**changes: Any) -> ClientConfig:
    """Replace fields of the process-wide configuration.

    Args:
        **changes: Any ClientConfig field

    Returns:
        The new configuration snapshot
    """
    global _current
    with _lock:
        _current = replace(_current, **changes)
        updated = _current
    logger.debug("Client configuration updated", extra={"fields": sorted(changes)})
    return updated


def reset_config() -> ClientConfig:
    """Restore the built-in defaults (mostly useful in tests)."""
    global _current
    with _lock:
        _current = ClientConfig()
        return _current


def set_user_agent(user_agent: str) -> ClientConfig:
    return configure(user_agent=user_agent)


def set_base_url(base_url: str) -> ClientConfig:
    return configure(base_url=base_url)


def set_timeout(timeout: float) -> ClientConfig:
    return configure(timeout=timeout)


def set_auth_token(auth_token: str | None) -> ClientConfig:
    return configure(auth_token=auth_token)
