"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from poker_tracker.api.sessions import router as sessions_router
from poker_tracker.api.stats import router as stats_router
from poker_tracker.app_logging import configure_logging
from poker_tracker.containers import AppContainer
from poker_tracker.domain.errors import (
    SessionNotFoundError,
    SessionStoreError,
    SessionValidationError,
)


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    app = FastAPI()
    app.state.container = container

    app.include_router(sessions_router)
    app.include_router(stats_router)

    @app.exception_handler(SessionNotFoundError)
    async def session_not_found(
        request: Request, exc: SessionNotFoundError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)}
        )

    @app.exception_handler(SessionValidationError)
    async def session_invalid(
        request: Request, exc: SessionValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)}
        )

    @app.exception_handler(SessionStoreError)
    async def session_store_failed(
        request: Request, exc: SessionStoreError
    ) -> JSONResponse:
        logger.error(
            "Session store failure",
            exc_info=exc,
            extra={"path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_502_BAD_GATEWAY,
            content={"detail": "Session store unavailable"},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
