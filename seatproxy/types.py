"""Enums and type aliases for the seat proxy."""

from enum import StrEnum


class RequestScope(StrEnum):
    TEAM = "team"
    ORG = "org"
    ENT = "ent"
