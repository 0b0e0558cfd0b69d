"""Pydantic schemas for bookmark endpoints."""
from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict

from models.bookmark import SourceType


class BookmarkFilter(StrEnum):
    """Named predicates selectable on the listing endpoint."""

    ALL = "all"
    UNREAD = "unread"
    X_ARTICLE = "x_article"
    EXTERNAL = "external"

    @classmethod
    def parse(cls, value: str | None) -> "BookmarkFilter":
        """
        Resolve a raw query value to a filter.

        Missing and unrecognized values resolve to ALL (no extra predicate)
        rather than failing the request.
        """
        if value is None:
            return cls.ALL
        try:
            return cls(value.strip().lower())
        except ValueError:
            return cls.ALL


class BookmarkResponse(BaseModel):
    """Schema for a single bookmark row as returned by the listing."""

    model_config = ConfigDict(from_attributes=True)

    x_id: str
    url: str
    title: str
    description: str | None = None
    author: str | None = None
    thumbnail_url: str | None = None
    source_type: SourceType
    created_at: datetime
    read_at: datetime | None = None
    archived_at: datetime | None = None
    updated_at: datetime


class BookmarkListResponse(BaseModel):
    """One page of bookmarks plus counts over the whole matching scope."""

    data: list[BookmarkResponse]
    total: int  # Rows matching the full predicate set (before pagination)
    unread_count: int  # Unread rows in the scope, independent of the unread filter


class MarkReadResponse(BaseModel):
    """Result of marking a bookmark read."""

    success: bool = True
    read_at: datetime


class ArchiveResponse(BaseModel):
    """Result of archiving or unarchiving a bookmark."""

    success: bool = True
    archived_at: datetime | None  # None after unarchive
