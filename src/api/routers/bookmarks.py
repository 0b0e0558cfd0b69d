"""Bookmark listing and read/archive endpoints."""
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import get_async_session, get_settings
from core.config import Settings
from schemas.bookmark import (
    ArchiveResponse,
    BookmarkFilter,
    BookmarkListResponse,
    BookmarkResponse,
    MarkReadResponse,
)
from services import bookmark_service

router = APIRouter(prefix="/api/bookmarks", tags=["bookmarks"])


@router.get("", response_model=BookmarkListResponse)
async def list_bookmarks(
    filter: str | None = Query(  # noqa: A002
        default=None,
        description="One of: all, unread, x_article, external. Unrecognized values apply no filter.",  # noqa: E501
    ),
    archived: str | None = Query(
        default=None,
        description="'true' lists archived bookmarks; any other value lists active ones",
    ),
    offset: int = Query(default=0, ge=0, description="Pagination offset"),
    limit: int | None = Query(default=None, ge=1, description="Pagination limit"),
    settings: Settings = Depends(get_settings),
    db: AsyncSession = Depends(get_async_session),
) -> BookmarkListResponse:
    """
    List bookmarks newest first.

    - **filter**: 'unread' keeps bookmarks without read_at; 'x_article' / 'external' match source_type
    - **archived**: exactly 'true' lists archived bookmarks, otherwise only non-archived ones
    - **offset** / **limit**: pagination; limit defaults to the configured page size and is
      clamped to the configured maximum
    """  # noqa: E501
    if limit is None:
        limit = settings.default_page_size
    limit = min(limit, settings.max_page_size)

    page = await bookmark_service.list_bookmarks(
        db=db,
        bookmark_filter=BookmarkFilter.parse(filter),
        archived=archived == "true",
        offset=offset,
        limit=limit,
    )
    return BookmarkListResponse(
        data=[BookmarkResponse.model_validate(b) for b in page.bookmarks],
        total=page.total,
        unread_count=page.unread_count,
    )


@router.post("/{x_id}/read", response_model=MarkReadResponse)
async def mark_bookmark_read(
    x_id: str,
    db: AsyncSession = Depends(get_async_session),
) -> MarkReadResponse:
    """Mark a bookmark as read. Returns the new read_at timestamp."""
    bookmark = await bookmark_service.mark_bookmark_read(db, x_id)
    if bookmark is None:
        raise HTTPException(status_code=404, detail="Bookmark not found")
    return MarkReadResponse(read_at=bookmark.read_at)


@router.post("/{x_id}/archive", response_model=ArchiveResponse)
async def archive_bookmark(
    x_id: str,
    db: AsyncSession = Depends(get_async_session),
) -> ArchiveResponse:
    """Archive a bookmark. Returns the new archived_at timestamp."""
    bookmark = await bookmark_service.archive_bookmark(db, x_id)
    if bookmark is None:
        raise HTTPException(status_code=404, detail="Bookmark not found")
    return ArchiveResponse(archived_at=bookmark.archived_at)


@router.post("/{x_id}/unarchive", response_model=ArchiveResponse)
async def unarchive_bookmark(
    x_id: str,
    db: AsyncSession = Depends(get_async_session),
) -> ArchiveResponse:
    """Move a bookmark back out of the archive. archived_at is null on success."""
    bookmark = await bookmark_service.unarchive_bookmark(db, x_id)
    if bookmark is None:
        raise HTTPException(status_code=404, detail="Bookmark not found")
    return ArchiveResponse(archived_at=bookmark.archived_at)
