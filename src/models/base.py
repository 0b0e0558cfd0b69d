"""SQLAlchemy declarative base with common mixins and column types."""
from datetime import UTC, datetime
from typing import Any

from sqlalchemy import DateTime
from sqlalchemy.engine import Dialect
from sqlalchemy.ext.compiler import compiles
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.sql.compiler import SQLCompiler
from sqlalchemy.sql.expression import FunctionElement
from sqlalchemy.types import TypeDecorator


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""

    pass


class UTCDateTime(TypeDecorator):
    """
    Timezone-aware datetime that always round-trips as UTC.

    PostgreSQL stores TIMESTAMP WITH TIME ZONE natively. Backends without a
    timezone type (SQLite) return naive values, which are read back as UTC.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value: datetime | None, dialect: Dialect) -> datetime | None:
        if value is not None and value.tzinfo is not None:
            value = value.astimezone(UTC)
        return value

    def process_result_value(self, value: datetime | None, dialect: Dialect) -> datetime | None:
        if value is not None and value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        return value


class utcnow(FunctionElement):  # noqa: N801
    """
    Current wall-clock time, evaluated by the database.

    On PostgreSQL this is clock_timestamp() rather than now(), so several
    writes inside one transaction still get distinct, increasing timestamps.
    """

    type = UTCDateTime()
    inherit_cache = True


@compiles(utcnow)
def _utcnow_default(element: utcnow, compiler: SQLCompiler, **kw: Any) -> str:
    return "CURRENT_TIMESTAMP"


@compiles(utcnow, "postgresql")
def _utcnow_postgresql(element: utcnow, compiler: SQLCompiler, **kw: Any) -> str:
    return "clock_timestamp()"


@compiles(utcnow, "sqlite")
def _utcnow_sqlite(element: utcnow, compiler: SQLCompiler, **kw: Any) -> str:
    return "(STRFTIME('%Y-%m-%d %H:%M:%f', 'now'))"


class TimestampMixin:
    """
    Mixin that adds created_at and updated_at columns.

    Both default to utcnow() on insert.
    """

    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime(),
        server_default=utcnow(),
        nullable=False,
        index=True,  # Listing is always ordered by created_at
    )
    updated_at: Mapped[datetime] = mapped_column(
        UTCDateTime(),
        server_default=utcnow(),
        nullable=False,
    )
