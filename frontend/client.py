import os
from typing import Any, Dict, Tuple

import httpx

API_BASE = os.getenv("API_BASE", "http://api:3000")  # service name in docker network (docker compose network)


async def fetch_json(client: httpx.AsyncClient, method: str, url: str, **kwargs) -> Tuple[bool, Dict[str, Any], int]:
    try:
        resp = await client.request(method, url, timeout=10, **kwargs)
        if resp.headers.get("content-type", "").startswith("application/json"):
            try:
                data = resp.json()
            except ValueError:
                # content-type errado (ex.: página de erro do proxy)
                data = {"raw": resp.text}
        else:
            data = {"raw": resp.text}
        if resp.is_error:
            return False, data, resp.status_code
        return True, data, resp.status_code
    except httpx.HTTPError as e:
        return False, {"error": str(e)}, 0


async def get_status(client: httpx.AsyncClient, api_base: str = API_BASE):
    return await fetch_json(client, "GET", f"{api_base}/")


async def validate_cpf(client: httpx.AsyncClient, cpf: str, api_base: str = API_BASE):
    # POST evita que '/' no texto digitado quebre a rota
    return await fetch_json(client, "POST", f"{api_base}/api/v1/cpf/validate", json={"cpf": cpf})
