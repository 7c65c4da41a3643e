"""Shared test fixtures."""

from __future__ import annotations

from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient

from seatproxy.config.settings import Settings, get_settings
from seatproxy.web.app import create_app


def _make_raw_seat(login: str, team: str | None = None, **extra: Any) -> dict[str, Any]:
    seat: dict[str, Any] = {
        "created_at": "2024-08-03T18:00:00-06:00",
        "updated_at": "2024-09-23T15:00:00-06:00",
        "pending_cancellation_date": None,
        "last_activity_at": "2024-10-14T00:53:32-06:00",
        "last_activity_editor": "vscode/1.77.3/copilot/1.86.82",
        "plan_type": "business",
        "assignee": {"login": login, "id": sum(map(ord, login)), "type": "User"},
        **extra,
    }
    if team is not None:
        seat["assigning_team"] = {"id": 1, "name": team, "slug": team.lower()}
    return seat


def _make_members_body(members: list[tuple[str, str | None]]) -> dict[str, Any]:
    return {
        "data": {
            "organization": {
                "membersWithRole": {
                    "nodes": [{"login": login, "email": email} for login, email in members]
                }
            }
        }
    }


@pytest.fixture(autouse=True)
def _fresh_settings_cache(monkeypatch: pytest.MonkeyPatch):
    """Keep cached settings from leaking between tests."""
    monkeypatch.setenv("GITHUB_ORG", "octo-org")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def settings() -> Settings:
    return Settings(
        _env_file=None,
        is_data_mocked=False,
        scope="org",
        github_org="octo-org",
        github_ent="octo-ent",
        github_token=None,
    )


@pytest.fixture()
def mocked_settings(settings: Settings) -> Settings:
    return settings.model_copy(update={"is_data_mocked": True})


@pytest.fixture()
def app(settings: Settings):
    """Create a fresh app instance with test settings."""
    application = create_app()
    application.dependency_overrides[get_settings] = lambda: settings
    yield application
    application.dependency_overrides.clear()


@pytest.fixture()
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture()
def raw_seat():
    """Factory for billing-API seat objects as GitHub returns them."""
    return _make_raw_seat


@pytest.fixture()
def members_body():
    """Factory for GraphQL membersWithRole response bodies."""
    return _make_members_body
