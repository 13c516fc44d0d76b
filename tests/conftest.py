"""Shared fixtures for API tests."""

import pytest
from fastapi.testclient import TestClient

from sms_classifier import config
from sms_classifier.main import app


@pytest.fixture
def client(monkeypatch):
    """Client against an unauthenticated service."""
    monkeypatch.setattr(config, "API_KEY", "")
    return TestClient(app)


@pytest.fixture
def secured_client(monkeypatch):
    """Client against a service that requires X-API-Key: secret."""
    monkeypatch.setattr(config, "API_KEY", "secret")
    return TestClient(app)
