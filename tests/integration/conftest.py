"""Shared fixtures for integration tests."""

import pytest

from brainz.ws.core import ClientConfig


@pytest.fixture
def live_config() -> ClientConfig:
    """Config for the public service, spaced at one request per second."""
    return ClientConfig.from_env(
        user_agent="brainz-ws-tests/0.1.0 ( https://github.com/brainz-ws/brainz-ws )",
        min_request_interval=1.0,
    )
