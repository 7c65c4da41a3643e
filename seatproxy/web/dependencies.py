"""FastAPI dependency injection for the seat routes."""

from __future__ import annotations

from collections.abc import AsyncIterator

import httpx
import structlog
from fastapi import Depends, Request

from seatproxy.config.settings import Settings, get_settings
from seatproxy.github.emails import EmailEnricher
from seatproxy.github.seats import SeatFetcher


async def get_http_client(
    settings: Settings = Depends(get_settings),
) -> AsyncIterator[httpx.AsyncClient]:
    """One outbound client per request, closed when the response is sent."""
    async with httpx.AsyncClient(timeout=settings.request_timeout_seconds) as client:
        yield client


def get_request_logger(request: Request) -> structlog.stdlib.BoundLogger:
    """Structured logger scoped to the current request."""
    return structlog.get_logger("seatproxy.request").bind(
        method=request.method,
        path=request.url.path,
    )


def get_seat_fetcher(
    settings: Settings = Depends(get_settings),
    http_client: httpx.AsyncClient = Depends(get_http_client),
    logger: structlog.stdlib.BoundLogger = Depends(get_request_logger),
) -> SeatFetcher:
    return SeatFetcher(
        http_client,
        api_url=settings.github_api_url,
        mock_data_dir=settings.mock_data_dir,
        logger=logger,
    )


def get_email_enricher(
    settings: Settings = Depends(get_settings),
    http_client: httpx.AsyncClient = Depends(get_http_client),
    logger: structlog.stdlib.BoundLogger = Depends(get_request_logger),
) -> EmailEnricher:
    return EmailEnricher(
        http_client,
        graphql_url=settings.email_graphql_url,
        org_login=settings.github_org,
        logger=logger,
    )
