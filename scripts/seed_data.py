"""Seed script to populate the local dev database with sample bookmarks.

Usage:
    PYTHONPATH=src uv run python scripts/seed_data.py populate
    PYTHONPATH=src uv run python scripts/seed_data.py populate --force
    PYTHONPATH=src uv run python scripts/seed_data.py clear

Only rows whose x_id starts with SEED_PREFIX are touched, so real ingested
bookmarks in the same database are left alone.
"""

import argparse
import asyncio
import logging
from datetime import UTC, datetime, timedelta

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from core.config import get_settings
from models import Bookmark, SourceType

logger = logging.getLogger(__name__)

SEED_PREFIX = 'seed-'

# Offsets are relative to "now" so the list shows a spread of relative times.
BOOKMARKS = [
    {
        'x_id': 'seed-1001',
        'url': 'https://x.com/simonw/status/1001',
        'title': 'Things I learned building a personal search engine',
        'description': 'A long thread on SQLite FTS, embeddings, and why boring tech wins.',
        'author': 'Simon Willison',
        'thumbnail_url': 'https://pbs.twimg.com/profile_images/1001/avatar.jpg',
        'source_type': SourceType.X_ARTICLE,
        'age': timedelta(minutes=20),
    },
    {
        'x_id': 'seed-1002',
        'url': 'https://www.postgresql.org/docs/current/sql-expressions.html#SYNTAX-AGGREGATES',
        'title': 'PostgreSQL: Aggregate Expressions',
        'description': 'FILTER clauses, ordered-set aggregates and friends.',
        'author': None,
        'thumbnail_url': None,
        'source_type': SourceType.EXTERNAL,
        'age': timedelta(hours=3),
        'read': True,
    },
    {
        'x_id': 'seed-1003',
        'url': 'https://x.com/b0rk/status/1003',
        'title': 'How DNS caching actually works',
        'description': None,
        'author': 'Julia Evans',
        'thumbnail_url': 'https://pbs.twimg.com/media/1003.jpg',
        'source_type': SourceType.X_ARTICLE,
        'age': timedelta(days=2),
    },
    {
        'x_id': 'seed-1004',
        'url': 'https://fastapi.tiangolo.com/advanced/async-tests/',
        'title': 'FastAPI: Async Tests',
        'description': 'Testing async endpoints with httpx.AsyncClient and ASGITransport.',
        'author': None,
        'thumbnail_url': None,
        'source_type': SourceType.EXTERNAL,
        'age': timedelta(days=5),
    },
    {
        'x_id': 'seed-1005',
        'url': 'https://x.com/hynek/status/1005',
        'title': 'Why I stopped using setup.py',
        'description': 'Packaging in 2026: pyproject.toml all the way down.',
        'author': 'Hynek Schlawack',
        'thumbnail_url': None,
        'source_type': SourceType.X_ARTICLE,
        'age': timedelta(days=12),
        'read': True,
        'archived': True,
    },
    {
        'x_id': 'seed-1006',
        'url': 'https://docs.sqlalchemy.org/en/20/orm/queryguide/select.html',
        'title': 'SQLAlchemy 2.0 ORM Querying Guide',
        'description': None,
        'author': None,
        'thumbnail_url': None,
        'source_type': SourceType.EXTERNAL,
        'age': timedelta(days=40),
        'archived': True,
    },
]


async def create_bookmarks(session: AsyncSession, now: datetime) -> int:
    """Insert the sample bookmarks. Returns the number created."""
    for data in BOOKMARKS:
        created_at = now - data['age']
        session.add(Bookmark(
            x_id=data['x_id'],
            url=data['url'],
            title=data['title'],
            description=data['description'],
            author=data['author'],
            thumbnail_url=data['thumbnail_url'],
            source_type=data['source_type'].value,
            created_at=created_at,
            updated_at=created_at,
            read_at=created_at + timedelta(minutes=5) if data.get('read') else None,
            archived_at=created_at + timedelta(days=1) if data.get('archived') else None,
        ))
    await session.flush()
    return len(BOOKMARKS)


async def count_seed_rows(session: AsyncSession) -> int:
    """Count bookmarks previously created by this script."""
    return (await session.execute(
        select(func.count()).select_from(Bookmark).where(Bookmark.x_id.startswith(SEED_PREFIX))
    )).scalar() or 0


async def clear_data(session: AsyncSession) -> int:
    """Delete seed bookmarks. Returns the number deleted."""
    existing = await count_seed_rows(session)
    await session.execute(delete(Bookmark).where(Bookmark.x_id.startswith(SEED_PREFIX)))
    await session.flush()
    return existing


async def populate(force: bool = False) -> None:
    """Populate the database with seed data."""
    settings = get_settings()
    engine = create_async_engine(settings.database_url, echo=False)
    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async with session_factory() as session:
        try:
            existing = await count_seed_rows(session)
            if existing:
                if not force:
                    logger.info(
                        'Seed data already exists (%d bookmarks). Use --force to clear and re-seed.',
                        existing,
                    )
                    return
                logger.info('Existing seed data found, clearing first (--force)...')
                await clear_data(session)

            created = await create_bookmarks(session, datetime.now(UTC))
            await session.commit()
            logger.info('Created %d seed bookmarks.', created)
        except Exception:
            await session.rollback()
            raise
        finally:
            await engine.dispose()


async def clear() -> None:
    """Remove all seed bookmarks."""
    settings = get_settings()
    engine = create_async_engine(settings.database_url, echo=False)
    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async with session_factory() as session:
        try:
            deleted = await clear_data(session)
            await session.commit()
            logger.info('Deleted %d seed bookmarks.', deleted)
        except Exception:
            await session.rollback()
            raise
        finally:
            await engine.dispose()


def main() -> None:
    """CLI entry point."""
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )

    parser = argparse.ArgumentParser(description='Seed the dev database with sample bookmarks.')
    subparsers = parser.add_subparsers(dest='command', required=True)

    populate_parser = subparsers.add_parser('populate', help='Insert sample bookmarks')
    populate_parser.add_argument(
        '--force', action='store_true',
        help='Clear existing seed bookmarks before populating',
    )

    subparsers.add_parser('clear', help='Remove sample bookmarks')

    args = parser.parse_args()

    if args.command == 'populate':
        asyncio.run(populate(force=args.force))
    elif args.command == 'clear':
        asyncio.run(clear())


if __name__ == '__main__':
    main()
