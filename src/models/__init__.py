"""SQLAlchemy models."""
from models.base import Base, TimestampMixin
from models.bookmark import Bookmark, SourceType

__all__ = ["Base", "Bookmark", "SourceType", "TimestampMixin"]
