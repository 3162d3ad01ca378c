"""Shared fixtures for the Invoice Tracker tests."""

import pytest
from fastapi.testclient import TestClient

from invoice_tracker.config import get_settings
from invoice_tracker.main import create_app

ENV_VARS = (
    "APP_TITLE",
    "FOOTER_TEXT",
    "DEBUG",
    "LOG_LEVEL",
    "ALLOWED_ORIGINS",
    "LOKI__INTEGRATIONS__JURISDICTION",
    "LOKI__INTEGRATIONS__CHECKPOINTS",
    "LOKI__INTEGRATIONS__VERIFICATION",
)


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Start every test from default settings."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def client():
    with TestClient(create_app()) as test_client:
        yield test_client
