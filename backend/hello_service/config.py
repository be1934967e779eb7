"""Application Configuration - environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache) - single instance per process
    - Routes receive settings through Depends(get_settings), never a module global

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults reproduce the stock service: JSON welcome on port 3000
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from hello_service.core.domain_types import LogFormat, ResponseFormat

# uvicorn accepts these (lower-cased); TRACE is uvicorn-only
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "TRACE")


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    app_name: str = "hello-service"

    # Root route
    welcome_message: str = "Welcome to Node.js App"
    hello_text: str = "Hello World"
    response_format: ResponseFormat = ResponseFormat.JSON

    # Server
    host: str = "0.0.0.0"
    port: int = Field(3000, ge=1, le=65535)

    # Observability
    log_level: str = "INFO"
    log_format: LogFormat = LogFormat.JSON

    @field_validator("response_format", "log_format", mode="before")
    @classmethod
    def lower_enum_value(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("log_level")
    @classmethod
    def upper_log_level(cls, v: str) -> str:
        v = v.strip().upper()
        if v not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
