"""Root Route - the welcome endpoint.

Invariants:
    - GET / always returns 200
    - JSON mode body is exactly {"message": settings.welcome_message}
    - Text mode body is exactly settings.hello_text as text/plain
    - Handler is pure: reads settings, mutates nothing

Design Decisions:
    - Settings injected via Depends(get_settings): tests swap variants with
      app.dependency_overrides instead of patching globals
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse, PlainTextResponse

from hello_service.config import Settings, get_settings
from hello_service.core.domain_types import ResponseFormat
from hello_service.schemas.greeting import WelcomeMessage

router = APIRouter(tags=["root"])


@router.get(
    "/",
    status_code=status.HTTP_200_OK,
    response_model=None,
)
async def read_root(
    settings: Settings = Depends(get_settings),
) -> JSONResponse | PlainTextResponse:
    """Welcome payload, JSON or plain text depending on response_format."""
    if settings.response_format == ResponseFormat.TEXT:
        return PlainTextResponse(settings.hello_text)
    body = WelcomeMessage(message=settings.welcome_message)
    return JSONResponse(content=body.model_dump())
