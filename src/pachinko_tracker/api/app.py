"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from pachinko_tracker.api.lookups import router as lookups_router
from pachinko_tracker.api.sessions import router as sessions_router
from pachinko_tracker.api.stats import router as stats_router
from pachinko_tracker.app_logging import configure_logging
from pachinko_tracker.containers import AppContainer
from pachinko_tracker.errors import NotFoundError, ValidationError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Pachinko Session Tracker")
    app.state.container = container

    app.include_router(lookups_router)
    app.include_router(sessions_router)
    app.include_router(stats_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.exception_handler(ValidationError)
    async def handle_validation_error(
        request: Request, exc: ValidationError
    ) -> JSONResponse:
        logger.warning(
            "Rejected invalid request",
            extra={"path": request.url.path, "reason": str(exc)},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST, content={"error": str(exc)}
        )

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError) -> JSONResponse:
        logger.warning(
            "Session not found",
            extra={"path": request.url.path, "session_id": exc.session_id},
        )
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"error": "Session not found"},
        )

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": _describe_request_errors(exc)},
        )

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=exc.headers,
        )

    return app


def _describe_request_errors(exc: RequestValidationError) -> str:
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()))
        problems.append(f"{location}: {error.get('msg', 'invalid')}")
    return "; ".join(problems) or "Invalid request"
