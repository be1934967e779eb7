"""Root conftest - shared fixtures: settings isolation + async test client.

Invariants:
    - get_settings cache cleared around every test (env changes take effect)
    - dependency_overrides reset after each client fixture

Design Decisions:
    - httpx AsyncClient over ASGITransport: exercises the real ASGI stack without a socket
"""

import pytest
from httpx import ASGITransport, AsyncClient

from hello_service.config import Settings, get_settings
from hello_service.main import app


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    for var in (
        "APP_NAME", "WELCOME_MESSAGE", "HELLO_TEXT", "RESPONSE_FORMAT",
        "HOST", "PORT", "LOG_LEVEL", "LOG_FORMAT",
    ):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def override_settings():
    """Install a Settings instance for the root route. Returns the setter."""

    def _install(**values) -> Settings:
        settings = Settings(_env_file=None, **values)
        app.dependency_overrides[get_settings] = lambda: settings
        return settings

    yield _install
    app.dependency_overrides.pop(get_settings, None)


@pytest.fixture
async def client():
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()
