"""Service layer for listing bookmarks and flipping their read/archive state."""
import logging
from dataclasses import dataclass

from sqlalchemy import ColumnElement, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from models.base import utcnow
from models.bookmark import Bookmark
from schemas.bookmark import BookmarkFilter

logger = logging.getLogger(__name__)


@dataclass
class BookmarkPage:
    """A page of bookmarks with counts computed over the same scope."""

    bookmarks: list[Bookmark]
    total: int
    unread_count: int


def build_scope_conditions(
    bookmark_filter: BookmarkFilter,
    archived: bool,
) -> list[ColumnElement[bool]]:
    """
    Build the predicates that define the listing scope.

    The archive predicate is always present: archived=True selects rows with
    archived_at set, otherwise rows without it. Source-type filters narrow the
    scope further. The unread filter is deliberately NOT part of the scope;
    see build_unread_condition().
    """
    conditions: list[ColumnElement[bool]] = [
        Bookmark.archived_at.is_not(None) if archived else Bookmark.archived_at.is_(None),
    ]
    if bookmark_filter in (BookmarkFilter.X_ARTICLE, BookmarkFilter.EXTERNAL):
        conditions.append(Bookmark.source_type == bookmark_filter.value)
    return conditions


def build_unread_condition() -> ColumnElement[bool]:
    """Predicate matching bookmarks that have not been opened."""
    return Bookmark.read_at.is_(None)


def build_list_conditions(
    bookmark_filter: BookmarkFilter,
    archived: bool,
) -> list[ColumnElement[bool]]:
    """Full predicate set for the paged rows: scope plus the unread filter if active."""
    conditions = build_scope_conditions(bookmark_filter, archived)
    if bookmark_filter == BookmarkFilter.UNREAD:
        conditions.append(build_unread_condition())
    return conditions


async def list_bookmarks(
    db: AsyncSession,
    bookmark_filter: BookmarkFilter = BookmarkFilter.ALL,
    archived: bool = False,
    offset: int = 0,
    limit: int = 20,
) -> BookmarkPage:
    """
    List bookmarks newest first with pagination.

    Args:
        db: Database session.
        bookmark_filter: Extra predicate to apply (unread, source type, or none).
        archived: Select the archived view instead of the active one.
        offset: Pagination offset.
        limit: Pagination limit.

    Returns:
        BookmarkPage with the rows, the total matching count, and the unread
        count. Both counts come from a single conditional aggregate over the
        scope, so unread_count is the same whether or not the unread filter
        is active.

    The paged SELECT and the aggregate are separate statements; a concurrent
    write between them can make total disagree with the visible rows.
    """
    rows_query = (
        select(Bookmark)
        .where(*build_list_conditions(bookmark_filter, archived))
        .order_by(Bookmark.created_at.desc(), Bookmark.x_id.desc())
        .offset(offset)
        .limit(limit)
    )
    result = await db.execute(rows_query)
    bookmarks = list(result.scalars().all())

    unread = build_unread_condition()
    if bookmark_filter == BookmarkFilter.UNREAD:
        total_expr = func.count().filter(unread)
    else:
        total_expr = func.count()
    counts_query = select(
        total_expr.label("total"),
        func.count().filter(unread).label("unread_count"),
    ).where(*build_scope_conditions(bookmark_filter, archived))
    counts = (await db.execute(counts_query)).one()

    return BookmarkPage(
        bookmarks=bookmarks,
        total=counts.total or 0,
        unread_count=counts.unread_count or 0,
    )


async def get_bookmark(db: AsyncSession, x_id: str) -> Bookmark | None:
    """Get a bookmark by its identity. Returns None if not found."""
    result = await db.execute(select(Bookmark).where(Bookmark.x_id == x_id))
    return result.scalar_one_or_none()


async def mark_bookmark_read(db: AsyncSession, x_id: str) -> Bookmark | None:
    """
    Set read_at to the current time.

    An already-read bookmark is stamped again, so repeated calls succeed and
    return the newest timestamp. Returns None if the bookmark does not exist.

    Note: Does not commit. Caller (session generator) handles commit at request end.
    """
    bookmark = await get_bookmark(db, x_id)
    if bookmark is None:
        return None

    bookmark.read_at = utcnow()
    bookmark.updated_at = utcnow()
    await db.flush()
    await db.refresh(bookmark)
    logger.debug("Marked bookmark %s read at %s", x_id, bookmark.read_at)
    return bookmark


async def archive_bookmark(db: AsyncSession, x_id: str) -> Bookmark | None:
    """
    Archive a bookmark by setting archived_at to the current time.

    Same overwrite semantics as mark_bookmark_read(). Returns None if the
    bookmark does not exist.

    Note: Does not commit. Caller (session generator) handles commit at request end.
    """
    bookmark = await get_bookmark(db, x_id)
    if bookmark is None:
        return None

    bookmark.archived_at = utcnow()
    bookmark.updated_at = utcnow()
    await db.flush()
    await db.refresh(bookmark)
    logger.debug("Archived bookmark %s", x_id)
    return bookmark


async def unarchive_bookmark(db: AsyncSession, x_id: str) -> Bookmark | None:
    """
    Unarchive a bookmark by clearing archived_at.

    Clearing an already-clear archived_at is allowed and only touches
    updated_at. Returns None if the bookmark does not exist.

    Note: Does not commit. Caller (session generator) handles commit at request end.
    """
    bookmark = await get_bookmark(db, x_id)
    if bookmark is None:
        return None

    bookmark.archived_at = None
    bookmark.updated_at = utcnow()
    await db.flush()
    await db.refresh(bookmark)
    logger.debug("Unarchived bookmark %s", x_id)
    return bookmark
