import pytest


@pytest.mark.asyncio
async def test_banner_and_health(api_client):
    banner = await api_client.get("/api")
    assert banner.status_code == 200
    assert banner.json()["message"] == "Clubify API Server is running!"

    health = await api_client.get("/health")
    assert health.status_code == 200
    body = health.json()
    assert body["status"] == "healthy"
    assert body["uptime"] >= 0
    assert "timestamp" in body


@pytest.mark.asyncio
async def test_unknown_route(api_client):
    response = await api_client.get("/api/does-not-exist")
    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Route not found"}


@pytest.mark.asyncio
async def test_pages_are_not_cached(api_client):
    for path in ("/", "/dashboard"):
        response = await api_client.get(path)
        assert response.status_code == 200
        assert "Clubify" in response.text
        assert response.headers["cache-control"] == "no-cache, no-store, must-revalidate"
