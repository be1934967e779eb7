"""Error handler tests - domain errors, other HTTP errors, and the catch-all.

Uses a fresh app from create_app() so extra test routes never leak into
the module-level app.
"""

import logging

import pytest
from fastapi import HTTPException
from httpx import ASGITransport, AsyncClient

from hello_service.core.errors import HelloServiceError
from hello_service.main import create_app


@pytest.fixture
async def scratch_client():
    app = create_app()

    @app.get("/boom")
    async def boom():
        raise RuntimeError("secret internal detail")

    @app.get("/teapot")
    async def teapot():
        raise HelloServiceError("I'm a teapot", "TEAPOT", 418)

    @app.get("/forbidden")
    async def forbidden():
        raise HTTPException(status_code=403, detail="Forbidden")

    # ServerErrorMiddleware re-raises after responding; keep the response
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c


async def test_unhandled_exception_returns_generic_500(scratch_client):
    res = await scratch_client.get("/boom")
    assert res.status_code == 500
    assert res.json() == {"error": "Internal Server Error"}
    assert "secret" not in res.text


async def test_service_error_uses_its_status_and_message(scratch_client):
    res = await scratch_client.get("/teapot")
    assert res.status_code == 418
    assert res.json() == {"error": "I'm a teapot"}


async def test_other_http_errors_keep_status(scratch_client):
    res = await scratch_client.get("/forbidden")
    assert res.status_code == 403
    assert res.json() == {"error": "Forbidden"}


async def test_fresh_app_still_falls_back_to_404(scratch_client):
    res = await scratch_client.get("/nope")
    assert res.status_code == 404
    assert res.json() == {"error": "Not Found"}


async def test_unhandled_exception_logged_with_traceback(scratch_client, caplog):
    caplog.set_level(logging.ERROR, logger="hello_service.api.error_handlers")

    await scratch_client.get("/boom")

    records = [
        r for r in caplog.records
        if r.name == "hello_service.api.error_handlers" and r.levelname == "ERROR"
    ]
    assert len(records) == 1
    assert records[0].exc_info is not None
    assert records[0].exc_info[0] is RuntimeError
    assert "/boom" in records[0].getMessage()
