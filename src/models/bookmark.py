"""Bookmark model for saved X articles and external links."""
from datetime import datetime
from enum import StrEnum

from sqlalchemy import CheckConstraint, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from models.base import Base, TimestampMixin, UTCDateTime


class SourceType(StrEnum):
    """Where a bookmark came from."""

    X_ARTICLE = "x_article"
    EXTERNAL = "external"


class Bookmark(Base, TimestampMixin):
    """
    A saved reference to external content.

    Rows are created by an external ingestion job. This application only
    reads them and flips the read/archive timestamps; the two timestamps are
    independent, so a bookmark can be read and archived, either, or neither.
    """

    __tablename__ = "x_bookmarks"
    __table_args__ = (
        CheckConstraint(
            "source_type IN ('x_article', 'external')",
            name="ck_x_bookmarks_source_type",
        ),
    )

    x_id: Mapped[str] = mapped_column(Text, primary_key=True)
    url: Mapped[str] = mapped_column(Text, nullable=False)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    author: Mapped[str | None] = mapped_column(Text, nullable=True)
    thumbnail_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    source_type: Mapped[str] = mapped_column(String(20), nullable=False)

    read_at: Mapped[datetime | None] = mapped_column(
        UTCDateTime(), nullable=True, default=None,
    )
    archived_at: Mapped[datetime | None] = mapped_column(
        UTCDateTime(), nullable=True, default=None, index=True,
    )

    @property
    def is_read(self) -> bool:
        """True once the bookmark has been opened."""
        return self.read_at is not None

    @property
    def is_archived(self) -> bool:
        """True while archived_at is set."""
        return self.archived_at is not None
