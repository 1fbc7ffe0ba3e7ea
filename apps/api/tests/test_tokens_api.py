"""HTTP tests for the session token endpoint."""
from __future__ import annotations

import jwt
import pytest
from httpx import ASGITransport, AsyncClient

from videosdk_auth.core import config
from videosdk_auth.main import app

SECRET = "sdk-secret-for-tests-0123456789abcdef"


@pytest.fixture
def signing_settings(monkeypatch):
    monkeypatch.setattr(config.settings, "zoom_video_sdk_key", "sdk-key", raising=False)
    monkeypatch.setattr(config.settings, "zoom_video_sdk_secret", SECRET, raising=False)
    return config.settings


@pytest.mark.asyncio
async def test_returns_signature_for_valid_request(signing_settings) -> None:
    transport = ASGITransport(app=app)

    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        response = await client.post(
            "/",
            json={"role": "1", "sessionName": "demo", "expirationSeconds": "1800", "geoRegions": ["US", "JP"]},
        )

    assert response.status_code == 200
    body = response.json()
    assert list(body) == ["signature"]
    claims = jwt.decode(body["signature"], SECRET, algorithms=["HS256"])
    assert claims["app_key"] == "sdk-key"
    assert claims["role_type"] == 1
    assert claims["tpc"] == "demo"
    assert claims["geo_regions"] == "US,JP"
    assert claims["exp"] - claims["iat"] == 1800


@pytest.mark.asyncio
async def test_rejects_invalid_role(signing_settings) -> None:
    transport = ASGITransport(app=app)

    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        response = await client.post("/", json={"role": 2, "sessionName": "demo"})

    assert response.status_code == 400
    assert response.json() == {"errors": [{"field": "role", "message": "must be one of 0, 1"}]}


@pytest.mark.asyncio
async def test_empty_body_reports_required_fields(signing_settings) -> None:
    transport = ASGITransport(app=app)

    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        response = await client.post("/")

    assert response.status_code == 400
    assert response.json() == {
        "errors": [
            {"field": "role", "message": "is required"},
            {"field": "sessionName", "message": "is required"},
        ]
    }


@pytest.mark.asyncio
async def test_missing_secret_returns_server_error(monkeypatch) -> None:
    monkeypatch.setattr(config.settings, "zoom_video_sdk_secret", "", raising=False)
    transport = ASGITransport(app=app)

    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        response = await client.post("/", json={"role": 1, "sessionName": "demo"})

    assert response.status_code == 500
    assert "signature" not in response.json()


@pytest.mark.asyncio
async def test_cors_preflight_for_local_client() -> None:
    transport = ASGITransport(app=app)

    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        response = await client.options(
            "/",
            headers={
                "Origin": "http://localhost:5173",
                "Access-Control-Request-Method": "POST",
                "Access-Control-Request-Headers": "Content-Type",
            },
        )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "http://localhost:5173"


@pytest.mark.asyncio
async def test_overlong_numeric_string_is_a_client_error(signing_settings) -> None:
    transport = ASGITransport(app=app)

    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        response = await client.post(
            "/",
            json={"role": 1, "sessionName": "demo", "expirationSeconds": "9" * 5000},
        )

    assert response.status_code == 400
    assert response.json() == {
        "errors": [{"field": "expirationSeconds", "message": "must be between 1800 and 172800"}]
    }
