"""Tests for the application error handlers."""
from __future__ import annotations

import httpx
import pytest
from fastapi import status

from learnspring.main import create_app
from learnspring.core.errors import AppError, ErrorResponse


def test_app_error_to_dict():
    err = AppError("boom", code="demo_error", http_status=status.HTTP_409_CONFLICT)
    assert err.to_dict() == {"error": "demo_error", "message": "boom"}
    assert ErrorResponse(**err.to_dict()).message == "boom"


@pytest.mark.asyncio
async def test_app_error_handler_renders_json():
    app = create_app()

    @app.get("/_fail")
    async def fail() -> None:
        raise AppError("not allowed", code="forbidden", http_status=status.HTTP_403_FORBIDDEN)

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        resp = await client.get("/_fail")
    assert resp.status_code == 403
    assert resp.json() == {"error": "forbidden", "message": "not allowed"}


@pytest.mark.asyncio
async def test_validation_error_handler():
    app = create_app()

    @app.get("/_count")
    async def count(n: int) -> dict[str, int]:
        return {"n": n}

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        resp = await client.get("/_count", params={"n": "abc"})
    assert resp.status_code == 422
    data = resp.json()
    assert data["error"] == "validation_error"
    assert data["details"]
