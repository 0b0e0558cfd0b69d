"""View models for rendering bookmark cards."""
from dataclasses import dataclass
from datetime import UTC, datetime

from schemas.bookmark import BookmarkResponse

# X profile pictures are square avatars and get a smaller, round thumbnail.
PROFILE_IMAGE_MARKER = "/profile_images/"


def format_time_ago(created_at: datetime, now: datetime | None = None) -> str:
    """
    Format a timestamp relative to now.

    "now" under a minute, then minutes, hours and days ("5m ago", "3h ago",
    "2d ago"); anything a week or older shows the date ("Mar 4").
    """
    if now is None:
        now = datetime.now(UTC)
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=UTC)
    seconds = int((now - created_at).total_seconds())

    if seconds < 60:
        return "now"
    if seconds < 3600:
        return f"{seconds // 60}m ago"
    if seconds < 86400:
        return f"{seconds // 3600}h ago"
    if seconds < 604800:
        return f"{seconds // 86400}d ago"
    return f"{created_at:%b} {created_at.day}"


@dataclass
class BookmarkCard:
    """Everything a template needs to draw one bookmark card."""

    x_id: str
    url: str
    title: str
    description: str | None
    author: str | None
    source_type: str
    thumbnail_url: str | None
    is_profile_thumbnail: bool
    is_read: bool
    created_at: datetime
    time_ago: str

    @property
    def css_class(self) -> str:
        return f"bookmark-card {'read' if self.is_read else 'unread'}"

    @property
    def thumbnail_class(self) -> str:
        return "thumbnail-profile" if self.is_profile_thumbnail else ""


def build_card(bookmark: BookmarkResponse, now: datetime | None = None) -> BookmarkCard:
    """Build the card view model for a bookmark."""
    thumbnail_url = bookmark.thumbnail_url or None
    return BookmarkCard(
        x_id=bookmark.x_id,
        url=bookmark.url,
        title=bookmark.title,
        description=bookmark.description or None,
        author=bookmark.author or None,
        source_type=bookmark.source_type.value,
        thumbnail_url=thumbnail_url,
        is_profile_thumbnail=thumbnail_url is not None and PROFILE_IMAGE_MARKER in thumbnail_url,
        is_read=bookmark.read_at is not None,
        created_at=bookmark.created_at,
        time_ago=format_time_ago(bookmark.created_at, now),
    )


def build_cards(
    bookmarks: list[BookmarkResponse],
    now: datetime | None = None,
) -> list[BookmarkCard]:
    """Build cards for a listing, sharing one reference time across all of them."""
    if now is None:
        now = datetime.now(UTC)
    return [build_card(b, now) for b in bookmarks]
