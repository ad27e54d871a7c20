"""
Tests for the optional security headers middleware.
"""

import pytest
from fastapi.testclient import TestClient

from app import create_app


@pytest.fixture
def hardened_client(monkeypatch):
    monkeypatch.setattr("config.SECURITY_HEADERS_ENABLED", True)
    return TestClient(create_app())


def test_headers_added_when_enabled(hardened_client):
    response = hardened_client.get("/health")

    assert response.status_code == 200
    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-Frame-Options"] == "DENY"
    assert response.headers["Cache-Control"] == "no-store"
    assert "Strict-Transport-Security" not in response.headers


def test_hsts_only_when_enabled(hardened_client, monkeypatch):
    monkeypatch.setattr("config.HSTS_ENABLED", True)

    response = hardened_client.get("/health")

    assert response.headers["Strict-Transport-Security"].startswith("max-age=31536000")


def test_headers_absent_by_default():
    response = TestClient(create_app()).get("/health")

    assert "X-Frame-Options" not in response.headers
