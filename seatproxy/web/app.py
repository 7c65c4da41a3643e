"""FastAPI application factory."""

from __future__ import annotations

import structlog
from fastapi import Depends, FastAPI, Request
from fastapi.responses import PlainTextResponse

from seatproxy import __version__
from seatproxy.config.logging import setup_logging
from seatproxy.config.settings import Settings, get_settings
from seatproxy.exceptions import SeatProxyError
from seatproxy.web.middleware import RequestIDMiddleware
from seatproxy.web.routes.graphql import router as graphql_router
from seatproxy.web.routes.seats import router as seats_router

logger = structlog.get_logger(__name__)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()
    setup_logging(log_level=settings.log_level, json_output=not settings.debug)

    app = FastAPI(
        title="SeatProxy",
        description="Copilot seat usage proxy with member email enrichment",
        version=__version__,
    )

    # Seat errors are plain text with the status the error carries
    @app.exception_handler(SeatProxyError)
    async def seat_proxy_error_handler(request: Request, exc: SeatProxyError) -> PlainTextResponse:
        logger.warning(
            "request_failed",
            path=request.url.path,
            status=exc.status_code,
            error_type=type(exc).__name__,
            error=str(exc),
        )
        return PlainTextResponse(str(exc), status_code=exc.status_code)

    app.add_middleware(RequestIDMiddleware)

    @app.get("/api/health")
    async def health_check(
        current: Settings = Depends(get_settings),
    ) -> dict[str, object]:
        from seatproxy.web.health import check_health

        return await check_health(current)

    app.include_router(seats_router)
    app.include_router(graphql_router)

    logger.info("app_created", mocked=settings.is_data_mocked, scope=settings.scope)
    return app
