"""Shared fixtures: an isolated data root and a fake requests session."""
from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest


@pytest.fixture(autouse=True)
def data_root(tmp_path, monkeypatch):
    """Point the user-data root at a temporary directory for every test."""
    root = tmp_path / "library"
    monkeypatch.setenv("OBJECTLIBRARY_DATA_DIR", str(root))
    return root


@pytest.fixture()
def make_response():
    def _make(status_code=200, content=b""):
        response = MagicMock()
        response.status_code = status_code
        response.content = content
        return response
    return _make


@pytest.fixture()
def session():
    """Patch requests.Session inside the client; yields the fake session."""
    with patch("objectlibrary.services.service_client.requests.Session") as session_cls:
        fake = MagicMock()
        session_cls.return_value = fake
        yield fake
