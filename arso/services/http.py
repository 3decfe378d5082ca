"""Outbound HTTP client construction."""
import httpx

from arso.config import Settings


def build_client(settings: Settings) -> httpx.AsyncClient:
    """Create the client shared by the earthquake and station services."""
    return httpx.AsyncClient(
        timeout=settings.http_timeout,
        follow_redirects=True,
        headers={"User-Agent": settings.user_agent},
    )
