"""GraphQL pass-through to the GitHub GraphQL API."""

from __future__ import annotations

from typing import Any

import httpx
import structlog
from fastapi import APIRouter, Body, Depends, Request
from fastapi.responses import JSONResponse

from seatproxy.config.settings import Settings, get_settings
from seatproxy.exceptions import AuthenticationError, UpstreamFetchError
from seatproxy.web.dependencies import get_http_client, get_request_logger

router = APIRouter(prefix="/api/graphql", tags=["graphql"])


@router.post("")
async def proxy_graphql(
    request: Request,
    body: dict[str, Any] = Body(...),
    settings: Settings = Depends(get_settings),
    http_client: httpx.AsyncClient = Depends(get_http_client),
    logger: structlog.stdlib.BoundLogger = Depends(get_request_logger),
) -> JSONResponse:
    authorization = request.headers.get("authorization")
    if not authorization and settings.github_token:
        authorization = f"token {settings.github_token}"
    if not authorization:
        logger.error("graphql_auth_missing")
        raise AuthenticationError("No Authentication provided")

    url = f"{settings.github_api_url.rstrip('/')}/graphql"
    resp: httpx.Response | None = None
    try:
        resp = await http_client.post(
            url,
            json=body,
            headers={"Authorization": authorization, "Content-Type": "application/json"},
        )
        content = resp.json()
    except (httpx.HTTPError, ValueError) as e:
        status = resp.status_code if resp is not None and resp.is_error else None
        logger.error("graphql_proxy_failed", url=url, status=status, error=str(e))
        raise UpstreamFetchError(
            f"Error proxying GraphQL request. Error: {e}", status_code=status
        ) from e

    logger.debug("graphql_proxied", status=resp.status_code)
    return JSONResponse(content=content, status_code=resp.status_code)
