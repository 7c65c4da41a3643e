"""Organization member email lookup via GraphQL, and the seat/email join."""

from __future__ import annotations

import json

import httpx
import structlog

from seatproxy.exceptions import EnrichmentError
from seatproxy.models.seats import Seat, UserEmail

MEMBERS_FIRST = 100


def build_members_query(org_login: str) -> str:
    # json.dumps yields a valid GraphQL string literal
    return f"""
        query {{
          organization(login: {json.dumps(org_login)}) {{
            membersWithRole(first: {MEMBERS_FIRST}) {{
              nodes {{
                login
                email
              }}
            }}
          }}
        }}
    """


class EmailEnricher:
    """Looks up member emails for one organization.

    Enrichment is best-effort: every failure is logged and produces an
    empty result so the seat listing still succeeds.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        graphql_url: str,
        org_login: str,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        self._client = http_client
        self._graphql_url = graphql_url
        self._org_login = org_login
        self._logger = logger or structlog.get_logger(__name__)

    async def fetch_user_emails(self, authorization: str | None) -> list[UserEmail]:
        try:
            return await self._query_members(authorization)
        except Exception as e:
            self._logger.warning(
                "user_emails_fetch_failed", org=self._org_login, error=str(e)
            )
            return []

    async def _query_members(self, authorization: str | None) -> list[UserEmail]:
        headers = {"Content-Type": "application/json"}
        if authorization:
            headers["Authorization"] = authorization

        resp = await self._client.post(
            self._graphql_url,
            headers=headers,
            json={"query": build_members_query(self._org_login)},
        )
        resp.raise_for_status()
        body = resp.json()

        try:
            nodes = body["data"]["organization"]["membersWithRole"]["nodes"]
        except (KeyError, TypeError) as e:
            errors = body.get("errors") if isinstance(body, dict) else None
            raise EnrichmentError(f"Unexpected GraphQL response: {errors or e}") from e

        emails = [UserEmail.model_validate(node) for node in nodes if node]
        self._logger.info("user_emails_fetched", org=self._org_login, count=len(emails))
        return emails


def merge_emails(seats: list[Seat], emails: list[UserEmail]) -> list[Seat]:
    """Attach emails to seats by exact login match, first match winning."""
    by_login: dict[str, str | None] = {}
    for user in emails:
        by_login.setdefault(user.login, user.email)
    return [seat.with_email(by_login.get(seat.login)) for seat in seats]
