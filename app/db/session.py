from sqlalchemy import event
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
import os

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite+aiosqlite:///./taskboard.db")
SQL_ECHO = os.getenv("SQL_ECHO", "false").lower() == "true"


def enable_sqlite_foreign_keys(engine):
    """SQLite only enforces ON DELETE CASCADE with the pragma set per connection."""

    @event.listens_for(engine.sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def make_engine(url: str, **kwargs):
    engine = create_async_engine(url, future=True, **kwargs)
    if engine.dialect.name == "sqlite":
        enable_sqlite_foreign_keys(engine)
    return engine


def make_sessionmaker(engine):
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


engine = make_engine(DATABASE_URL, echo=SQL_ECHO)

async_session = make_sessionmaker(engine)

async def get_db():
    async with async_session() as session:
        yield session
