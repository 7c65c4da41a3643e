"""Copilot seats API route."""

from __future__ import annotations

import structlog
from fastapi import APIRouter, Depends

from seatproxy.config.settings import Settings, get_settings
from seatproxy.github.emails import EmailEnricher, merge_emails
from seatproxy.github.seats import SeatFetcher
from seatproxy.models.seats import Seat
from seatproxy.web.dependencies import (
    get_email_enricher,
    get_request_logger,
    get_seat_fetcher,
)
from seatproxy.web.request_context import RequestContext, get_request_context


router = APIRouter(prefix="/api/seats", tags=["seats"])


@router.get("", response_model=list[Seat])
async def list_seats(
    context: RequestContext = Depends(get_request_context),
    settings: Settings = Depends(get_settings),
    fetcher: SeatFetcher = Depends(get_seat_fetcher),
    enricher: EmailEnricher = Depends(get_email_enricher),
    logger: structlog.stdlib.BoundLogger = Depends(get_request_logger),
) -> list[Seat]:
    log = logger.bind(scope=context.scope, org=context.org, ent=context.ent)
    seats = await fetcher.fetch(context, mocked=settings.is_data_mocked)
    if settings.is_data_mocked:
        return seats

    emails = await enricher.fetch_user_emails(context.authorization)
    merged = merge_emails(seats, emails)
    log.info(
        "seats_served",
        count=len(merged),
        with_email=sum(1 for seat in merged if seat.email),
    )
    return merged
