"""Unit tests for client configuration."""

import threading

import pytest

from brainz.ws.core import (
    ClientConfig,
    SerializationMode,
    configure,
    format_user_agent,
    get_config,
    reset_config,
    set_auth_token,
    set_base_url,
    set_timeout,
    set_user_agent,
)
from brainz.ws.core.config import DEFAULT_BASE_URL


class TestFormatUserAgent:
    def test_with_contact(self):
        assert format_user_agent("my_app", "1.0", "me@example.com") == "my_app/1.0 ( me@example.com )"

    def test_without_contact(self):
        assert format_user_agent("my_app", "1.0") == "my_app/1.0"
        assert format_user_agent("my_app", "1.0", "   ") == "my_app/1.0"


class TestClientConfig:
    """Test ClientConfig validation and headers."""

    def test_defaults(self):
        config = ClientConfig()
        assert config.base_url == DEFAULT_BASE_URL
        assert config.auth_token is None
        assert config.serialization_mode is SerializationMode.MODERN
        assert config.min_request_interval is None

    def test_trailing_slash_is_stripped(self):
        assert ClientConfig(base_url="http://localhost:5000/ws/2/").base_url == "http://localhost:5000/ws/2"

    @pytest.mark.parametrize(
        "kwargs",
        [{"user_agent": ""}, {"base_url": "ftp://example.com"}, {"timeout": 0}],
    )
    def test_invalid_values(self, kwargs):
        with pytest.raises(ValueError):
            ClientConfig(**kwargs)

    def test_headers_without_token(self):
        headers = ClientConfig(user_agent="app/1.0").headers()
        assert headers == {"Accept": "application/json", "User-Agent": "app/1.0"}

    def test_headers_with_token(self):
        headers = ClientConfig(auth_token="secret").headers()
        assert headers["Authorization"] == "Bearer secret"

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("MUSICBRAINZ_USER_AGENT", "env_app/2.0")
        monkeypatch.setenv("MUSICBRAINZ_BASE_URL", "http://localhost:8080/ws/2")
        monkeypatch.setenv("MUSICBRAINZ_TIMEOUT", "5")
        monkeypatch.setenv("MUSICBRAINZ_AUTH_TOKEN", "token")
        config = ClientConfig.from_env(timeout=7.5)
        assert config.user_agent == "env_app/2.0"
        assert config.base_url == "http://localhost:8080/ws/2"
        assert config.timeout == 7.5
        assert config.auth_token == "token"

    def test_is_frozen(self):
        config = ClientConfig()
        with pytest.raises(AttributeError):
            config.timeout = 1.0  # type: ignore[misc]


class TestProcessWideConfig:
    """Test the module-level configuration cell."""

    def test_setters_replace_snapshot(self):
        before = get_config()
        set_user_agent("my_awesome_app/1.0")
        set_base_url("http://localhost:5000/ws/2")
        set_timeout(3.0)
        set_auth_token("abc")
        after = get_config()
        assert after.user_agent == "my_awesome_app/1.0"
        assert after.base_url == "http://localhost:5000/ws/2"
        assert after.timeout == 3.0
        assert after.auth_token == "abc"
        # Earlier snapshots are never mutated
        assert before.user_agent != "my_awesome_app/1.0"

    def test_configure_returns_new_snapshot(self):
        updated = configure(serialization_mode=SerializationMode.LEGACY)
        assert updated is get_config()
        assert updated.serialization_mode is SerializationMode.LEGACY

    def test_reset(self):
        set_timeout(1.0)
        assert reset_config() == ClientConfig()

    def test_invalid_update_keeps_previous(self):
        set_timeout(4.0)
        with pytest.raises(ValueError):
            set_timeout(-1)
        assert get_config().timeout == 4.0

    def test_concurrent_writers_leave_consistent_snapshot(self):
        def worker(index: int) -> None:
            for _ in range(50):
                configure(user_agent=f"app{index}/1.0", timeout=float(index + 1))

        threads = [threading.Thread(target=worker, args=(index,)) for index in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        config = get_config()
        index = int(config.user_agent.removeprefix("app").split("/")[0])
        assert config.timeout == float(index + 1)
