"""Fixtures for client-side tests."""
from collections.abc import AsyncGenerator, Callable
from typing import Any

import httpx
import pytest
import respx

API_BASE_URL = "http://localhost:8000"


@pytest.fixture
async def mock_api() -> AsyncGenerator[respx.MockRouter]:
    """Context manager for mocking API responses."""
    with respx.mock(base_url=API_BASE_URL, assert_all_called=False) as respx_mock:
        yield respx_mock


@pytest.fixture
async def http_client(mock_api: respx.MockRouter) -> AsyncGenerator[httpx.AsyncClient]:
    """AsyncClient whose requests are routed through respx."""
    async with httpx.AsyncClient(base_url=API_BASE_URL) as client:
        yield client


@pytest.fixture
def bookmark_json() -> Callable[..., dict[str, Any]]:
    """Build a bookmark payload as the listing endpoint returns it."""
    def _build(x_id: str, **overrides: Any) -> dict[str, Any]:
        payload = {
            "x_id": x_id,
            "url": f"https://x.com/i/status/{x_id}",
            "title": f"Bookmark {x_id}",
            "description": None,
            "author": None,
            "thumbnail_url": None,
            "source_type": "x_article",
            "created_at": "2024-01-15T12:00:00Z",
            "read_at": None,
            "archived_at": None,
            "updated_at": "2024-01-15T12:00:00Z",
        }
        payload.update(overrides)
        return payload

    return _build
