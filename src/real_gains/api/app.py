"""FastAPI application factory."""

import logging
import time
from collections.abc import Awaitable, Callable
from datetime import UTC, datetime

from fastapi import FastAPI, Request, Response, status
from fastapi.responses import JSONResponse

from real_gains.api.errors import INVALID_REQUEST_BODY, register_error_handlers
from real_gains.api.models import (
    AnalyzeRequest,
    AnalyzeResponse,
    FoodMentionOut,
    HealthResponse,
    NutritionResultOut,
)
from real_gains.app_logging import configure_logging
from real_gains.containers import AppContainer
from real_gains.services.analysis import AnalysisTimeoutError

SERVICE_NAME = "Real Gains Fitness API"

SERVICE_INFO: dict[str, object] = {
    "name": SERVICE_NAME,
    "description": "A proof of concept for the Real Gains Fitness application",
    "endpoints": {
        "analyze": "POST /api/analyze - Analyze food descriptions",
        "health": "GET /api/health - Check API status",
    },
}


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(logging.DEBUG if container.settings.debug else logging.INFO)
    logger = logging.getLogger(__name__)

    app = FastAPI(title=SERVICE_NAME)
    app.state.container = container
    register_error_handlers(app)

    @app.middleware("http")
    async def log_requests(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        started = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - started) * 1000
        logger.info(
            "%s %s - %s (%.0fms)",
            request.method,
            request.url.path,
            response.status_code,
            duration_ms,
        )
        return response

    @app.get("/")
    async def index() -> dict[str, object]:
        """Static service metadata."""
        return SERVICE_INFO

    @app.get("/api/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        """Simple health check endpoint."""
        return HealthResponse(
            status="ok",
            timestamp=_utc_timestamp(),
            message=f"{SERVICE_NAME} is running",
        )

    @app.post(
        "/api/analyze",
        response_model=AnalyzeResponse,
        response_model_exclude_none=True,
    )
    async def analyze(payload: AnalyzeRequest, request: Request) -> object:
        """Analyze a free-text food description into nutrition totals."""
        description = payload.description
        if not description or not isinstance(description, str):
            return JSONResponse(
                status_code=status.HTTP_400_BAD_REQUEST,
                content=INVALID_REQUEST_BODY,
            )

        state_container: AppContainer = request.app.state.container
        try:
            result = await state_container.analysis_service.analyze(description)
        except AnalysisTimeoutError:
            raise
        except Exception:
            logger.exception("Error processing food analysis")
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={
                    "error": "Server error",
                    "message": "An error occurred while processing your request",
                },
            )

        return AnalyzeResponse(
            parsed=[
                FoodMentionOut.model_validate(mention)
                for mention in result.parsed.items
            ],
            nutrition=NutritionResultOut.model_validate(result.nutrition),
        )

    return app


def _utc_timestamp() -> str:
    """Return the current UTC time as an ISO-8601 string with millisecond precision."""
    now = datetime.now(tz=UTC).isoformat(timespec="milliseconds")
    return now.replace("+00:00", "Z")
