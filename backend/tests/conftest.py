"""Shared test fixtures and configuration for backend tests."""
import pytest
from fastapi.testclient import TestClient

from datadrop.config import AppConfig, StorageSettings
from datadrop.main import create_app


@pytest.fixture
def server_root(tmp_path):
    """An empty server root; the uploads directory is created on startup."""
    root = tmp_path / "site"
    root.mkdir()
    return root


@pytest.fixture
def app_config(server_root):
    return AppConfig(storage=StorageSettings(root_dir=str(server_root)))


@pytest.fixture
def api_client(app_config):
    """Provide a TestClient with the lifespan running.

    The context manager is required: startup creates the uploads directory.
    """
    with TestClient(create_app(app_config)) as client:
        yield client
