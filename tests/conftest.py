"""Shared fixtures for the message service tests."""

from __future__ import annotations

import os
from pathlib import Path
import sys

# Keep test runs from writing log files into the working tree.
os.environ.setdefault("LOG_FILE", "")

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

import pytest  # noqa: E402
from fastapi import FastAPI  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from message_service.config.settings import Settings  # noqa: E402
from message_service.main import create_app  # noqa: E402


@pytest.fixture
def test_settings() -> Settings:
    return Settings(log_file=None, debug=False)


@pytest.fixture
def app(test_settings: Settings) -> FastAPI:
    """A fresh application with its own empty store and seeded database."""

    application = create_app(test_settings)
    yield application
    application.dependency_overrides.clear()
    application.state.database.dispose()


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)
