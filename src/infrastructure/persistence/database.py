"""Offline database connection and session management.

The offline database is a local SQLite file (through SQLAlchemy's async
engine and aiosqlite) holding the trips, expenses, notes and queued writes
the client needs without a connection.

Following hexagonal architecture:
- This is an infrastructure concern
- Provides sessions to OfflineCacheRepository
- Exposes clear_all() for the offline database store adapter
"""

from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator

from sqlalchemy import func, inspect, select, text
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncConnection,
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from src.infrastructure.persistence import models  # noqa: F401  (registers tables)
from src.infrastructure.persistence.base import BaseModel


def _prepare_sqlite_url(database_url: str) -> str:
    """Expand "~" in SQLite paths and create the parent directory.

    Args:
        database_url: SQLAlchemy URL.

    Returns:
        str: URL with an absolute database path (unchanged for in-memory
            or non-SQLite URLs).
    """
    url = make_url(database_url)
    if not url.drivername.startswith("sqlite") or url.database in (None, "", ":memory:"):
        return database_url

    path = Path(url.database).expanduser()
    path.parent.mkdir(parents=True, exist_ok=True)
    return url.set(database=str(path)).render_as_string(hide_password=False)


class OfflineDatabase:
    """Offline cache engine and session management.

    Usage:
        db = OfflineDatabase("sqlite+aiosqlite:///~/.halftrip/offline.db")
        await db.initialize()
        async with db.get_session() as session:
            repo = OfflineCacheRepository(session)
            await repo.cache_trip(trip_row)
        await db.clear_all()  # secure logout
    """

    def __init__(self, database_url: str, echo: bool = False) -> None:
        """Initialize offline database.

        Args:
            database_url: SQLAlchemy async URL (e.g., sqlite+aiosqlite:///path).
            echo: If True, log all SQL statements.
        """
        url = _prepare_sqlite_url(database_url)
        in_memory = make_url(url).database in (None, "", ":memory:")

        self.engine: AsyncEngine = create_async_engine(
            url,
            echo=echo,
            # An in-memory SQLite database lives as long as its connection
            poolclass=StaticPool if in_memory else None,
        )

        self.async_session = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide a transactional session.

        Commits on successful exit, rolls back on exception, always closes.

        Yields:
            AsyncSession: Session for offline cache operations.
        """
        async with self.async_session() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise
            finally:
                await session.close()

    async def initialize(self) -> None:
        """Create every offline cache table that does not exist yet."""
        async with self.engine.begin() as conn:
            await conn.run_sync(BaseModel.metadata.create_all)

    async def clear_all(self) -> int:
        """Delete every row of every offline cache table.

        Runs in a single transaction: either all tables are emptied or none
        are. Tables that were never created are skipped, so clearing a
        never-initialized database succeeds.

        Returns:
            int: Number of tables emptied.
        """
        async with self.engine.begin() as conn:
            existing = await self._existing_tables(conn)
            cleared = 0
            for table in reversed(BaseModel.metadata.sorted_tables):
                if table.name not in existing:
                    continue
                await conn.execute(table.delete())
                cleared += 1
            return cleared

    async def stats(self) -> dict[str, int]:
        """Count rows per offline cache table.

        Returns:
            dict: Row count per table name plus a "total" entry. Missing
                tables count as 0.
        """
        counts: dict[str, int] = {}
        async with self.engine.connect() as conn:
            existing = await self._existing_tables(conn)
            for table in BaseModel.metadata.sorted_tables:
                if table.name not in existing:
                    counts[table.name] = 0
                    continue
                result = await conn.execute(select(func.count()).select_from(table))
                counts[table.name] = int(result.scalar_one())
        counts["total"] = sum(counts.values())
        return counts

    async def delete(self) -> None:
        """Drop every offline cache table (full reset)."""
        async with self.engine.begin() as conn:
            await conn.run_sync(BaseModel.metadata.drop_all)

    async def close(self) -> None:
        """Dispose of the engine's connections."""
        await self.engine.dispose()

    async def check_connection(self) -> bool:
        """Check if the offline database can be opened.

        Returns:
            bool: True if a trivial query succeeds, False otherwise.
        """
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
                return True
        except Exception:
            return False

    @staticmethod
    async def _existing_tables(conn: AsyncConnection) -> set[str]:
        """Names of tables physically present in the database."""
        names = await conn.run_sync(
            lambda sync_conn: inspect(sync_conn).get_table_names()
        )
        return set(names)
