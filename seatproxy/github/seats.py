"""Copilot billing seats: endpoint resolution, mocked fixtures and paging."""

from __future__ import annotations

import json
import math
from pathlib import Path
from typing import TYPE_CHECKING

import httpx
import structlog

from seatproxy.exceptions import (
    AuthenticationError,
    ConfigurationError,
    SeatProxyError,
    UpstreamFetchError,
)
from seatproxy.models.seats import Seat, SeatPage, parse_seats
from seatproxy.types import RequestScope

if TYPE_CHECKING:
    from seatproxy.web.request_context import RequestContext

PER_PAGE = 100

ORG_FIXTURE = "organization_seats_response_sample.json"
ENT_FIXTURE = "enterprise_seats_response_sample.json"


class SeatFetcher:
    """Fetches every Copilot seat for an organization or enterprise."""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        api_url: str = "https://api.github.com",
        mock_data_dir: Path | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        self._client = http_client
        self._api_url = api_url.rstrip("/")
        self._mock_data_dir = mock_data_dir
        self._logger = logger or structlog.get_logger(__name__)

    def resolve_scope(self, context: RequestContext) -> RequestScope:
        try:
            return RequestScope(context.scope)
        except ValueError:
            raise ConfigurationError(
                "Invalid configuration/parameters for the request"
            ) from None

    def fixture_for(self, scope: RequestScope) -> str:
        return ENT_FIXTURE if scope is RequestScope.ENT else ORG_FIXTURE

    def resolve_endpoint(self, context: RequestContext) -> str:
        """Return the billing seats URL for the context's scope and tenant."""
        scope = self.resolve_scope(context)
        if scope is RequestScope.ENT:
            tenant, path = context.ent, "enterprises"
        else:
            tenant, path = context.org, "orgs"

        if not tenant:
            raise ConfigurationError(
                f"Invalid configuration/parameters for the request: no tenant for scope '{scope}'"
            )
        return f"{self._api_url}/{path}/{tenant}/copilot/billing/seats"

    async def fetch(self, context: RequestContext, mocked: bool = False) -> list[Seat]:
        scope = self.resolve_scope(context)

        # Fixtures are per scope family, so no tenant is needed to serve them
        if mocked:
            fixture = self.fixture_for(scope)
            seats = self.load_mocked(fixture)
            self._logger.info("seats_mocked", fixture=fixture, count=len(seats))
            return seats

        url = self.resolve_endpoint(context)
        if not context.authorization:
            self._logger.error("seats_auth_missing", url=url)
            raise AuthenticationError("No Authentication provided")

        self._logger.info("seats_fetch_start", url=url)
        first = await self._fetch_page(url, 1, context.headers)
        seats = parse_seats(first.seats)

        total_pages = math.ceil(first.total_seats / PER_PAGE)
        for page in range(2, total_pages + 1):
            page_data = await self._fetch_page(url, page, context.headers)
            seats.extend(parse_seats(page_data.seats))

        self._logger.info(
            "seats_fetch_done",
            url=url,
            total_seats=first.total_seats,
            pages=max(total_pages, 1),
            count=len(seats),
        )
        return seats

    def load_mocked(self, fixture: str) -> list[Seat]:
        if self._mock_data_dir is None:
            raise ConfigurationError("Mocked data requested but no mock data directory is set")
        path = self._mock_data_dir / fixture
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            self._logger.error("seats_fixture_unreadable", path=str(path), error=str(e))
            raise SeatProxyError(f"Error reading mocked seats data. Error: {e}") from e

        if not isinstance(data, dict) or not isinstance(data.get("seats"), list):
            self._logger.error("seats_fixture_malformed", path=str(path))
            raise SeatProxyError(
                f"Error reading mocked seats data. Error: {fixture} has no 'seats' list"
            )
        return parse_seats(data["seats"])

    async def _fetch_page(self, url: str, page: int, headers: dict[str, str]) -> SeatPage:
        try:
            resp = await self._client.get(
                url,
                headers=headers,
                params={"per_page": PER_PAGE, "page": page},
            )
            resp.raise_for_status()
            page_data = SeatPage.model_validate(resp.json())
        except httpx.HTTPStatusError as e:
            self._logger.error(
                "seats_fetch_failed", url=url, page=page, status=e.response.status_code
            )
            raise UpstreamFetchError(
                f"Error fetching seats data. Error: {e}", status_code=e.response.status_code
            ) from e
        except (httpx.HTTPError, ValueError) as e:
            self._logger.error("seats_fetch_failed", url=url, page=page, error=str(e))
            raise UpstreamFetchError(f"Error fetching seats data. Error: {e}") from e

        self._logger.debug("seats_page_fetched", page=page, count=len(page_data.seats))
        return page_data
