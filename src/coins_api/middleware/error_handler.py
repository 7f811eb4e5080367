"""Global error handlers: every error response is ``{"error": message}``."""

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from coins_api.errors import CoinsAPIError, ServerConfigError

logger = structlog.get_logger()


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build the JSON error body used by every handler."""
    return JSONResponse(status_code=status_code, content={"error": message})


def setup_error_handlers(app: FastAPI) -> None:
    """Register global exception handlers."""

    @app.exception_handler(CoinsAPIError)
    async def coins_api_error_handler(request: Request, exc: CoinsAPIError) -> JSONResponse:
        """Render taxonomy errors with their own status and message."""
        if isinstance(exc, ServerConfigError):
            logger.error("server_configuration_error", path=request.url.path, error=exc.message)
        return error_response(exc.status_code, exc.message)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(_request: Request, exc: StarletteHTTPException) -> JSONResponse:
        """Unmatched paths and methods answer 404; other framework HTTP errors keep their status."""
        if exc.status_code in (404, 405):
            return error_response(404, "Route not found")
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        """Bodies that are not a JSON object (or not JSON at all)."""
        logger.info("invalid_request_body", path=request.url.path, errors=exc.errors())
        return error_response(400, "Invalid request body")

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Catch-all for unhandled exceptions: detail stays in the logs."""
        logger.error(
            "unhandled_exception",
            path=request.url.path,
            method=request.method,
            error=str(exc),
            exc_info=exc,
        )
        return error_response(500, "Internal server error")
