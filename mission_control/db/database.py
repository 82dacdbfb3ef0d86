"""Database connection manager for Mission Control."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from mission_control.db.models import Base

DEFAULT_DB_PATH = "mission_control.db"

# Applied to every new SQLite connection; WAL lets polling readers run alongside a writer
SQLITE_PRAGMAS = (
    "PRAGMA foreign_keys=ON",
    "PRAGMA journal_mode=WAL",
    "PRAGMA busy_timeout=5000",
)


def _configure_sqlite_connection(dbapi_conn: Any, connection_record: Any) -> None:
    """Apply SQLITE_PRAGMAS to a fresh DBAPI connection."""
    cursor = dbapi_conn.cursor()
    for pragma in SQLITE_PRAGMAS:
        cursor.execute(pragma)
    cursor.close()


class DatabaseManager:
    """Manages the async SQLite store behind the dashboard.

    One manager owns one engine. Requests and CLI commands each take a
    short-lived session from :meth:`session`.
    """

    def __init__(self, db_path: Path | str = DEFAULT_DB_PATH):
        self.db_path = Path(db_path)
        self.db_url = f"sqlite+aiosqlite:///{self.db_path}"

        self.engine = create_async_engine(self.db_url, echo=False)
        event.listen(self.engine.sync_engine, "connect", _configure_sqlite_connection)

        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    async def init_db(self) -> None:
        """Create the database file's directory and any missing tables.

        Safe to call on an existing database; rows are left alone.
        """
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def close(self) -> None:
        """Close database connections."""
        await self.engine.dispose()

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide a transactional session.

        Commits when the block exits cleanly and rolls back on any
        exception, which is then re-raised.
        """
        async with self.session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise


# Singleton shared by the API lifespan, request dependencies and tests
_db_manager: DatabaseManager | None = None


def init_db_manager(db_path: Path | str = DEFAULT_DB_PATH) -> DatabaseManager:
    """Create the global database manager, replacing any previous one."""
    global _db_manager
    _db_manager = DatabaseManager(db_path)
    return _db_manager


def get_db_manager() -> DatabaseManager:
    """Get the database manager (must be initialized first)."""
    if _db_manager is None:
        raise RuntimeError("Database not initialized. Call init_db_manager() first.")
    return _db_manager
