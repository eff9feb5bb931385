"""Shared test fixtures."""
import json
import logging
from pathlib import Path

import pytest

from orcidkit import ClientConfig, OrcidClient, Response, StubLoader

FIXTURES = Path(__file__).parent / "fixtures"


def load_fixture(name: str) -> bytes:
    return (FIXTURES / name).read_bytes()


def json_response(payload, status: int = 200, headers=None) -> Response:
    return Response(
        status_code=status,
        headers=headers or {"Content-Type": "application/vnd.orcid+json"},
        body=json.dumps(payload).encode("utf-8"),
    )


@pytest.fixture
def record_bytes():
    return load_fixture("record.json")


@pytest.fixture
def works_bytes():
    return load_fixture("works.json")


@pytest.fixture
def make_client():
    """Build an OrcidClient whose loader replays ``response``."""

    def _make(response, config=None):
        loader = StubLoader(response)
        return OrcidClient(config or ClientConfig(user_agent="orcidkit-tests/1.0"), loader=loader), loader

    return _make


@pytest.fixture(autouse=True)
def enable_log_capture():
    """Enable log propagation for caplog to capture logs during tests."""
    logger = logging.getLogger("orcidkit")
    original_propagate = logger.propagate
    logger.propagate = True
    yield
    logger.propagate = original_propagate


ORCID_ENV_VARS = [
    "ORCID_ENVIRONMENT",
    "ORCID_API_BASE_URL",
    "ORCID_OAUTH_BASE_URL",
    "ORCID_USER_AGENT",
    "ORCID_CLIENT_ID",
    "ORCID_CLIENT_SECRET",
    "ORCID_REDIRECT_URI",
    "ORCID_SCOPE",
    "ORCIDKIT_LOG_LEVEL",
    "ORCIDKIT_LOG_FORMAT",
]


@pytest.fixture
def clean_env(monkeypatch):
    """Unset every variable Settings.from_env reads."""
    for name in ORCID_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
