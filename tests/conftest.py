"""Shared fixtures for the test suite."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from brainz.ws.core.config import reset_config

FIXTURES_DIR = Path(__file__).parent / "fixtures"

NIRVANA_ID = "5b11f4ce-a62d-471e-81fc-a69a8278c7da"


def load_fixture(*parts: str) -> dict[str, Any]:
    """Load a JSON document from tests/fixtures."""
    return json.loads(FIXTURES_DIR.joinpath(*parts).read_text(encoding="utf-8"))


@pytest.fixture(autouse=True)
def _restore_default_config():
    """Keep process-wide configuration changes local to one test."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def nirvana_id() -> str:
    return NIRVANA_ID


@pytest.fixture
def load_json():
    """Loader for JSON documents under tests/fixtures."""
    return load_fixture
