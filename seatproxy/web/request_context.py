"""Request context for seat lookups: scope, tenant and forwarded headers."""

from __future__ import annotations

from dataclasses import dataclass, field

from fastapi import Depends, Request

from seatproxy.config.settings import Settings, get_settings

GITHUB_ACCEPT = "application/vnd.github+json"
GITHUB_API_VERSION = "2022-11-28"


@dataclass(frozen=True, slots=True)
class RequestContext:
    """Immutable per-request context handed to the seat fetcher."""

    scope: str  # team | org | ent, validated by the fetcher
    org: str = ""
    ent: str = ""
    team: str = ""
    headers: dict[str, str] = field(default_factory=dict)

    @property
    def authorization(self) -> str | None:
        return self.headers.get("Authorization")


def build_forward_headers(authorization: str | None) -> dict[str, str]:
    """Headers forwarded verbatim to the GitHub REST API."""
    headers = {
        "Accept": GITHUB_ACCEPT,
        "X-GitHub-Api-Version": GITHUB_API_VERSION,
    }
    if authorization:
        headers["Authorization"] = authorization
    return headers


async def get_request_context(
    request: Request,
    settings: Settings = Depends(get_settings),
) -> RequestContext:
    """Resolve the request context from settings and query overrides.

    Query params ``scope``, ``githubOrg``, ``githubEnt`` and ``githubTeam``
    override the configured defaults. When the caller sends no
    ``Authorization`` header, the server-side token is used if configured.
    """
    query = request.query_params
    authorization = request.headers.get("authorization")
    if not authorization and settings.github_token:
        authorization = f"token {settings.github_token}"

    return RequestContext(
        scope=query.get("scope") or settings.scope,
        org=query.get("githubOrg") or settings.github_org,
        ent=query.get("githubEnt") or settings.github_ent,
        team=query.get("githubTeam") or settings.github_team,
        headers=build_forward_headers(authorization),
    )
