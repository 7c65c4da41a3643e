"""Health check endpoint logic."""

from __future__ import annotations

from seatproxy import __version__
from seatproxy.config.settings import Settings


async def check_health(settings: Settings) -> dict[str, object]:
    """Return application health status and data source."""
    return {
        "status": "healthy",
        "version": __version__,
        "data_source": "mocked" if settings.is_data_mocked else "github",
        "scope": settings.scope,
    }
