import pytest
import httpx

from backend.api.app import app
from frontend.client import fetch_json, get_status, validate_cpf

API_BASE = "http://api:3000"


def mock_client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_fetch_json_success():
    async with mock_client(lambda request: httpx.Response(200, json={"status": "ok"})) as client:
        assert await fetch_json(client, "GET", f"{API_BASE}/") == (True, {"status": "ok"}, 200)


@pytest.mark.asyncio
async def test_fetch_json_http_error():
    async with mock_client(lambda request: httpx.Response(400, json={"detail": "Campo obrigatório: cpf"})) as client:
        ok, data, status = await fetch_json(client, "POST", f"{API_BASE}/api/v1/cpf/validate", json={})
        assert ok is False
        assert status == 400
        assert data["detail"] == "Campo obrigatório: cpf"


@pytest.mark.asyncio
async def test_fetch_json_non_json_body():
    async with mock_client(lambda request: httpx.Response(502, text="Bad Gateway")) as client:
        assert await fetch_json(client, "GET", f"{API_BASE}/") == (False, {"raw": "Bad Gateway"}, 502)


@pytest.mark.asyncio
async def test_fetch_json_invalid_json_body():
    def handler(request):
        return httpx.Response(502, headers={"content-type": "application/json"}, content=b"<html>bad gateway</html>")

    async with mock_client(handler) as client:
        assert await fetch_json(client, "GET", f"{API_BASE}/") == (False, {"raw": "<html>bad gateway</html>"}, 502)


@pytest.mark.asyncio
async def test_fetch_json_transport_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    async with mock_client(handler) as client:
        assert await fetch_json(client, "GET", f"{API_BASE}/") == (False, {"error": "connection refused"}, 0)


@pytest.mark.asyncio
async def test_validate_cpf_against_api():
    async with httpx.AsyncClient(transport=httpx.ASGITransport(app=app)) as client:
        ok, data, status = await get_status(client, api_base=API_BASE)
        assert ok and status == 200

        ok, data, status = await validate_cpf(client, "111.444.777-35", api_base=API_BASE)
        assert ok and status == 200
        assert data["formatted"] == "111.444.777-35"

        ok, data, status = await validate_cpf(client, "111/444/777-35", api_base=API_BASE)
        assert ok and status == 200
        assert data["reason"] == "invalid-format"
