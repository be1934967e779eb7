"""Process entry point - runs the API under uvicorn on the configured port."""

import uvicorn

from hello_service.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "hello_service.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        reload=False,
    )


if __name__ == "__main__":
    main()
