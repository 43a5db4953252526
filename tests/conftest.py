"""
Pytest configuration and shared fixtures.

Every test gets a fresh file-backed SQLite database with the full schema, so
activity ids start at 1. ``seed`` inserts one user owning one board with one
list holding one card, plus a second board the user does not own.
"""

import asyncio
from dataclasses import dataclass
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy import text
from sqlalchemy.exc import OperationalError
from sqlalchemy.pool import NullPool

from app.core import ids
from app.db import models  # noqa: F401
from app.db.base import Base
from app.db.session import get_db, make_engine, make_sessionmaker
from app.main import app


@dataclass
class Seed:
    user_id: str
    board_id: str
    board2_id: str
    list_id: str
    card_id: str


SEED_STATEMENTS = [
    (
        "INSERT INTO users (id, username, email, hash, salt) "
        "VALUES (:user_id, 'test', 'test@test.com', 'hash', 'salt')",
        ("user_id",),
    ),
    ("INSERT INTO boards (id, title) VALUES (:board_id, 'test board')", ("board_id",)),
    ("INSERT INTO boards (id, title) VALUES (:board2_id, 'test board 2')", ("board2_id",)),
    ("INSERT INTO users_boards (user_id, board_id) VALUES (:user_id, :board_id)", ("user_id", "board_id")),
    ("INSERT INTO lists (id, title) VALUES (:list_id, 'test list')", ("list_id",)),
    ("INSERT INTO boards_lists (board_id, list_id) VALUES (:board_id, :list_id)", ("board_id", "list_id")),
    ("INSERT INTO cards (id, text) VALUES (:card_id, 'test card')", ("card_id",)),
    ("INSERT INTO lists_cards (list_id, card_id) VALUES (:list_id, :card_id)", ("list_id", "card_id")),
]


async def create_schema(engine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def seed_database(session_factory) -> Seed:
    seed = Seed(*(ids.generate() for _ in range(5)))
    values = vars(seed)
    async with session_factory() as db:
        async with db.begin():
            for sql, names in SEED_STATEMENTS:
                await db.execute(text(sql), {name: values[name] for name in names})
    return seed


# ==============================================================================
# Database Fixtures
# ==============================================================================


@pytest.fixture
def database_url(tmp_path):
    return f"sqlite+aiosqlite:///{tmp_path / 'taskboard.db'}"


@pytest_asyncio.fixture
async def engine(database_url):
    engine = make_engine(database_url, poolclass=NullPool)
    await create_schema(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return make_sessionmaker(engine)


@pytest_asyncio.fixture
async def seed(session_factory) -> Seed:
    return await seed_database(session_factory)


@pytest_asyncio.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def query(session_factory):
    """Run raw SQL on a separate session, for asserting on stored rows."""

    async def _query(sql: str, **params):
        async with session_factory() as session:
            result = await session.execute(text(sql), params)
            return [dict(row) for row in result.mappings().all()]

    return _query


# ==============================================================================
# API Fixtures
# ==============================================================================


@pytest.fixture
def api_database(database_url):
    """Schema and seed prepared outside any test event loop, for TestClient tests."""
    engine = make_engine(database_url, poolclass=NullPool)
    session_factory = make_sessionmaker(engine)

    async def prepare():
        await create_schema(engine)
        return await seed_database(session_factory)

    seed = asyncio.run(prepare())
    yield session_factory, seed
    asyncio.run(engine.dispose())


@pytest.fixture
def api_seed(api_database) -> Seed:
    return api_database[1]


@pytest.fixture
def client(api_database):
    session_factory, _ = api_database

    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def user_headers(api_seed):
    return {"X-User-Id": api_seed.user_id}


@pytest.fixture
def unavailable_client():
    """TestClient whose database session fails every statement."""
    session = MagicMock()
    session.in_transaction.return_value = False
    session.begin.return_value.__aenter__ = AsyncMock(return_value=None)
    session.begin.return_value.__aexit__ = AsyncMock(return_value=False)
    session.execute = AsyncMock(
        side_effect=OperationalError("SELECT 1", {}, Exception("connection refused"))
    )

    async def override_get_db():
        yield session

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()
