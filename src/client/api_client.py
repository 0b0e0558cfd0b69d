"""HTTP client helpers for the bookmarks API."""

import os
from typing import Any

import httpx

from schemas.bookmark import ArchiveResponse, BookmarkListResponse, MarkReadResponse


def get_api_base_url() -> str:
    """Get the API base URL from environment."""
    return os.getenv("BOOKMARKS_API_URL", "http://localhost:8000")


def get_default_timeout() -> float:
    """Get the default request timeout."""
    return float(os.getenv("BOOKMARKS_API_TIMEOUT", "30.0"))


def create_http_client() -> httpx.AsyncClient:
    """Create an AsyncClient pointed at the configured API."""
    return httpx.AsyncClient(
        base_url=get_api_base_url(),
        timeout=get_default_timeout(),
    )


async def api_get(
    client: httpx.AsyncClient,
    path: str,
    params: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Make a GET request to the API. Non-2xx responses raise httpx.HTTPStatusError."""
    response = await client.get(path, params=params)
    response.raise_for_status()
    return response.json()


async def api_post(
    client: httpx.AsyncClient,
    path: str,
) -> dict[str, Any]:
    """Make a body-less POST request to the API. Non-2xx responses raise."""
    response = await client.post(path)
    response.raise_for_status()
    return response.json()


def build_list_params(
    bookmark_filter: str,
    archived: bool,
    offset: int,
    limit: int,
) -> dict[str, Any]:
    """
    Build query params for the listing endpoint.

    `archived` is only sent when true and `filter` only when it narrows the
    listing, so the default view produces the shortest URL.
    """
    params: dict[str, Any] = {"limit": limit, "offset": offset}
    if archived:
        params["archived"] = "true"
    if bookmark_filter != "all":
        params["filter"] = bookmark_filter
    return params


async def fetch_bookmarks(
    client: httpx.AsyncClient,
    bookmark_filter: str = "all",
    archived: bool = False,
    offset: int = 0,
    limit: int = 20,
) -> BookmarkListResponse:
    """Fetch one page of bookmarks."""
    payload = await api_get(
        client,
        "/api/bookmarks",
        params=build_list_params(bookmark_filter, archived, offset, limit),
    )
    return BookmarkListResponse.model_validate(payload)


async def mark_read(client: httpx.AsyncClient, x_id: str) -> MarkReadResponse:
    """Mark a bookmark read on the server."""
    payload = await api_post(client, f"/api/bookmarks/{x_id}/read")
    return MarkReadResponse.model_validate(payload)


async def archive(client: httpx.AsyncClient, x_id: str) -> ArchiveResponse:
    """Archive a bookmark on the server."""
    payload = await api_post(client, f"/api/bookmarks/{x_id}/archive")
    return ArchiveResponse.model_validate(payload)


async def unarchive(client: httpx.AsyncClient, x_id: str) -> ArchiveResponse:
    """Unarchive a bookmark on the server."""
    payload = await api_post(client, f"/api/bookmarks/{x_id}/unarchive")
    return ArchiveResponse.model_validate(payload)
