"""
Shared pytest fixtures for all tests.

Every test gets its own data directory under tmp_path and a mocked Groq
client, so nothing touches the real JSON files or the network.
"""

from pathlib import Path
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from app.chat_proxy.groq_chat_client import GroqChatClient
from app.clinic_services.dependencies import get_chat_client, get_record_store
from app.main import app as fastapi_app
from app.record_store.file_store import RecordStore


@pytest.fixture
def store(tmp_path: Path) -> RecordStore:
    """Record store rooted in a per-test directory."""
    return RecordStore(data_dir=tmp_path)


@pytest.fixture
def queue_file(store: RecordStore) -> Path:
    return store.path_for("queue")


@pytest.fixture
def reports_file(store: RecordStore) -> Path:
    return store.path_for("reports")


@pytest.fixture
def attended_file(store: RecordStore) -> Path:
    return store.path_for("attended")


@pytest.fixture
def mock_chat_client() -> MagicMock:
    """Chat client stand-in; assert on .complete to check Groq was (not) called."""
    return MagicMock(spec=GroqChatClient)


@pytest.fixture
def app(store: RecordStore, mock_chat_client: MagicMock):
    """FastAPI app with the store and chat client overridden."""
    fastapi_app.dependency_overrides[get_record_store] = lambda: store
    fastapi_app.dependency_overrides[get_chat_client] = lambda: mock_chat_client
    yield fastapi_app
    fastapi_app.dependency_overrides.clear()


@pytest.fixture
def client(app) -> TestClient:
    """Create test client."""
    return TestClient(app)
