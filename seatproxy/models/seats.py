"""Seat records and the upstream payload shapes they are parsed from."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict

from seatproxy.exceptions import SeatParseError


class Seat(BaseModel):
    """One Copilot seat, normalized from the billing API."""

    model_config = ConfigDict(frozen=True)

    login: str
    id: int | None = None
    team: str = ""
    created_at: str | None = None
    updated_at: str | None = None
    pending_cancellation_date: str | None = None
    last_activity_at: str | None = None
    last_activity_editor: str | None = None
    plan_type: str | None = None
    email: str | None = None

    def with_email(self, email: str | None) -> Seat:
        return self.model_copy(update={"email": email})


class SeatPage(BaseModel):
    seats: list[dict[str, Any]] = []
    total_seats: int = 0


class UserEmail(BaseModel):
    login: str
    email: str | None = None


def parse_seat(raw: Any) -> Seat:
    """Map one raw billing-API seat object to a ``Seat``.

    The assignee login is required; a seat without one cannot be joined to
    anything downstream, so it fails fast. Every other field is optional.
    """
    if not isinstance(raw, dict):
        raise SeatParseError(f"Seat entry must be an object, got {type(raw).__name__}")

    assignee = raw.get("assignee")
    if not isinstance(assignee, dict) or not assignee.get("login"):
        raise SeatParseError("Seat entry is missing assignee.login")

    assigning_team = raw.get("assigning_team")
    team = assigning_team.get("name", "") if isinstance(assigning_team, dict) else ""

    return Seat(
        login=assignee["login"],
        id=assignee.get("id"),
        team=team or "",
        created_at=raw.get("created_at"),
        updated_at=raw.get("updated_at"),
        pending_cancellation_date=raw.get("pending_cancellation_date"),
        last_activity_at=raw.get("last_activity_at"),
        last_activity_editor=raw.get("last_activity_editor"),
        plan_type=raw.get("plan_type"),
    )


def parse_seats(items: list[Any]) -> list[Seat]:
    return [parse_seat(item) for item in items]
