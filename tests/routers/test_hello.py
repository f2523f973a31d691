import httpx
import pytest

from learnspring.main import create_app


@pytest.mark.asyncio
async def test_hello_endpoint():
    app = create_app()
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/hello")
    assert response.status_code == 200
    assert response.text == "hello"
    assert response.headers["content-type"].startswith("text/plain")


@pytest.mark.asyncio
async def test_hello_is_idempotent():
    app = create_app()
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        bodies = [(await client.get("/hello")).text for _ in range(3)]
    assert bodies == ["hello", "hello", "hello"]


@pytest.mark.asyncio
async def test_hello_rejects_other_methods():
    app = create_app()
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.post("/hello")
    assert response.status_code == 405


@pytest.mark.asyncio
async def test_unknown_path_is_not_found():
    app = create_app()
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/hello/world")
    assert response.status_code == 404
