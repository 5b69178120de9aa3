from __future__ import annotations

import pytest

from api.main import create_app
from tally.core.config import Config, CorsConfig
from tests.unit._api_test_client import make_client

ORIGIN = "http://frontend.example"


@pytest.mark.anyio
async def test_preflight_allows_any_origin_with_credentials(app):
    async with make_client(app) as ac:
        r = await ac.options(
            "/counter",
            headers={
                "Origin": ORIGIN,
                "Access-Control-Request-Method": "PUT",
                "Access-Control-Request-Headers": "Content-Type",
            },
        )
        assert r.status_code == 200
        assert r.headers["access-control-allow-origin"] == ORIGIN
        assert r.headers["access-control-allow-credentials"] == "true"
        allowed = {m.strip() for m in r.headers["access-control-allow-methods"].split(",")}
        assert {"OPTIONS", "GET", "POST", "PUT"} <= allowed


@pytest.mark.anyio
async def test_preflight_rejects_unlisted_method(app):
    async with make_client(app) as ac:
        r = await ac.options(
            "/counter",
            headers={"Origin": ORIGIN, "Access-Control-Request-Method": "DELETE"},
        )
        assert r.status_code == 400


@pytest.mark.anyio
async def test_simple_request_carries_cors_header(app):
    async with make_client(app) as ac:
        r = await ac.get("/counter", headers={"Origin": ORIGIN})
        assert r.status_code == 200
        assert "access-control-allow-origin" in r.headers


@pytest.mark.anyio
async def test_cors_disabled_when_no_origins(test_config: Config):
    cfg = test_config.model_copy(update={"cors": CorsConfig(allow_origins=[])})
    app = create_app(cfg)
    async with make_client(app) as ac:
        r = await ac.get("/counter", headers={"Origin": ORIGIN})
        assert r.status_code == 200
        assert "access-control-allow-origin" not in r.headers
