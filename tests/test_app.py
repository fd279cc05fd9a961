"""Health, API info, CORS and the error boundary."""

from fastapi import APIRouter
from httpx import ASGITransport, AsyncClient

from app.main import create_app


async def test_health(client, settings):
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "OK", "message": "IRAS GST API is running", "version": settings.API_VERSION}


async def test_api_info(client):
    resp = await client.get("/api/info")
    body = resp.json()
    assert body["title"] == "Check GST Register"
    assert body["basePath"] == "/iras/prod/GSTListing"
    assert body["endpoints"]["main"] == "POST /iras/prod/GSTListing/SearchGSTRegistered"


async def test_cors_preflight_allows_iras_headers(client):
    resp = await client.options(
        "/iras/prod/GSTListing/SearchGSTRegistered",
        headers={
            "Origin": "http://localhost:3000",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "X-IBM-Client-Id, X-IBM-Client-Secret",
        },
    )
    assert resp.status_code == 200
    assert "access-control-allow-origin" in resp.headers


async def test_unhandled_error_becomes_500(engine, settings):
    app = create_app(settings, engine)
    router = APIRouter()

    @router.get("/boom")
    async def boom():
        raise RuntimeError("boom")

    app.include_router(router)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        resp = await c.get("/boom")
    assert resp.status_code == 500
    assert resp.json() == {"success": False, "message": "Internal server error"}
