"""HTTP error types and exception handlers."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from real_gains.services.analysis import AnalysisTimeoutError

INVALID_REQUEST_BODY = {
    "error": "Invalid request",
    "message": "Please provide a food description as a string",
}

_logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Error carrying an HTTP status and optional details."""

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: object | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details


def error_body(message: str, path: str, details: object | None = None) -> dict:
    """Build the JSON body returned by the top-level error handlers."""
    body: dict[str, object] = {"error": True, "message": message}
    if details is not None:
        body["details"] = details
    body["path"] = path
    return body


def register_error_handlers(app: FastAPI) -> None:
    """Attach JSON error handlers to the application."""

    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
        _logger.error("API error on %s: %s", request.url.path, exc.message)
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(exc.message, request.url.path, exc.details),
        )

    @app.exception_handler(AnalysisTimeoutError)
    async def timeout_handler(
        request: Request, exc: AnalysisTimeoutError
    ) -> JSONResponse:
        _logger.error("Analysis timed out on %s", request.url.path)
        return JSONResponse(
            status_code=status.HTTP_504_GATEWAY_TIMEOUT,
            content=error_body(
                str(exc),
                request.url.path,
                {"timeout_seconds": exc.timeout_seconds},
            ),
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        if exc.status_code in {
            status.HTTP_404_NOT_FOUND,
            status.HTTP_405_METHOD_NOT_ALLOWED,
        }:
            return JSONResponse(
                status_code=status.HTTP_404_NOT_FOUND,
                content=error_body("Route not found", request.url.path),
            )
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(str(exc.detail), request.url.path),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=INVALID_REQUEST_BODY,
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        _logger.exception("Unhandled error on %s", request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_body(str(exc) or "Internal Server Error", request.url.path),
        )
