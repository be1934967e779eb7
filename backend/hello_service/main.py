"""hello-service API - FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers own every non-200 response shape
    - Logging configured on startup via the lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern
    - create_app() factory plus module-level `app`: uvicorn imports `app`,
      tests build fresh instances when they need extra routes
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from hello_service.api.error_handlers import register_error_handlers
from hello_service.api.routes import root
from hello_service.config import get_settings
from hello_service.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format.value)
    logger.info(
        f"{settings.app_name} started "
        f"(response_format={settings.response_format.value})",
    )
    yield
    logger.info(f"{settings.app_name} shutting down")


def create_app() -> FastAPI:
    # No docs/openapi routes: only GET / is served, everything else is 404
    app = FastAPI(
        title="hello-service", version="1.0.0", lifespan=lifespan,
        docs_url=None, redoc_url=None, openapi_url=None,
    )

    # Routes - explicit registration
    app.include_router(root.router)

    register_error_handlers(app)
    return app


app = create_app()
