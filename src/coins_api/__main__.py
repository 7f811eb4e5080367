"""Run the API with uvicorn: ``python -m coins_api``."""

import uvicorn

from coins_api.config import get_settings


def main() -> None:
    """Start the HTTP server on the configured host and port."""
    settings = get_settings()
    uvicorn.run(
        "coins_api.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
