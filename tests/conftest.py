"""Shared test fixtures.

Sets environment defaults required by ``Settings`` before the app is
imported, and provides a FastAPI ``TestClient``, Basic-auth headers and mock
Supabase clients for the repository and health check.
"""

import base64
import os
from collections.abc import Generator
from unittest.mock import MagicMock, patch

os.environ.setdefault("SUPABASE_URL", "https://test.supabase.co")
os.environ.setdefault("SUPABASE_KEY", "test-key")
os.environ.setdefault("API_USERNAME", "recruiter")
os.environ.setdefault("API_PASSWORD", "s3cret")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402


def chainable_table_mock() -> MagicMock:
    """Return a mock table that supports fluent chaining."""
    m = MagicMock()
    for method in ("select", "insert", "limit", "eq", "order"):
        getattr(m, method).return_value = m
    return m


@pytest.fixture()
def mock_candidates_table() -> Generator[MagicMock, None, None]:
    """Patch the repository's Supabase client; yields the table mock."""
    mock_client = MagicMock()
    table = chainable_table_mock()
    table.execute.return_value = MagicMock(data=[])
    mock_client.table.return_value = table
    with patch("app.db.candidates.get_supabase", return_value=mock_client):
        yield table


@pytest.fixture()
def mock_supabase_module() -> Generator[MagicMock, None, None]:
    """Patch the Supabase client at module level in the health router."""
    mock_client = MagicMock()
    table = chainable_table_mock()
    table.execute.return_value = MagicMock()  # non-None result
    mock_client.table.return_value = table

    with patch("app.routers.health.get_supabase", return_value=mock_client):
        yield mock_client


@pytest.fixture()
def mock_supabase_disconnected() -> Generator[MagicMock, None, None]:
    """Patch ``get_supabase`` to simulate a disconnected database."""
    with patch(
        "app.routers.health.get_supabase",
        side_effect=Exception("Connection refused"),
    ):
        yield MagicMock()


def _basic_auth(username: str, password: str) -> dict[str, str]:
    token = base64.b64encode(f"{username}:{password}".encode()).decode()
    return {"Authorization": f"Basic {token}"}


@pytest.fixture()
def auth_headers() -> dict[str, str]:
    """Valid Basic credentials for the configured user."""
    return _basic_auth(os.environ["API_USERNAME"], os.environ["API_PASSWORD"])


@pytest.fixture()
def test_client() -> Generator[TestClient, None, None]:
    """Provide a FastAPI TestClient that returns 500s instead of raising."""
    from app.main import app

    with TestClient(app, raise_server_exceptions=False) as client:
        yield client
