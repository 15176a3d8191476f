"""Tests for request_id and CSP headers in error responses."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.cspkit.main import create_app

pytestmark = pytest.mark.integration


@pytest.fixture
def app(settings) -> FastAPI:
    """App with an endpoint that fails with an unhandled exception."""
    app = create_app(settings, csp_config={"nonces_for": ["script_src"]})

    @app.get("/boom")
    async def boom() -> None:
        raise RuntimeError("boom")

    return app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Test client fixture that returns 500 responses instead of re-raising."""
    return TestClient(app, raise_server_exceptions=False)


def test_http_exception_includes_request_id(client: TestClient) -> None:
    """Unknown paths return 404 with detail and request_id."""
    response = client.get("/nonexistent-endpoint")

    assert response.status_code == 404
    data = response.json()
    assert data["detail"] == "Not Found"
    assert isinstance(data["request_id"], str)
    assert data["request_id"] == response.headers["x-request-id"]


def test_http_exception_keeps_csp_header(client: TestClient) -> None:
    response = client.get("/nonexistent-endpoint")

    assert "script-src 'nonce-" in response.headers["content-security-policy"]


def test_unhandled_exception_includes_request_id(client: TestClient) -> None:
    """Unhandled exceptions return a generic 500 with request_id."""
    response = client.get("/boom")

    assert response.status_code == 500
    data = response.json()
    assert data["detail"] == "Internal server error"
    assert isinstance(data["request_id"], str)
    assert data["request_id"]


def test_unhandled_exception_keeps_csp_header(client: TestClient) -> None:
    response = client.get("/boom")

    assert response.status_code == 500
    header = response.headers["content-security-policy"]
    assert header.startswith("default-src 'none';")
    assert "script-src 'nonce-" in header


def test_supplied_request_id_is_echoed(client: TestClient) -> None:
    request_id = "0f8fad5b-d9cb-469f-a165-70867728950e"

    response = client.get("/nonexistent-endpoint", headers={"X-Request-ID": request_id})

    assert response.json()["request_id"] == request_id
