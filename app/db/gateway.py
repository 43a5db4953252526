"""Persistence gateway: runs registered statements on one session."""

import logging
from contextlib import asynccontextmanager
from typing import Any, Dict, List, Optional

from sqlalchemy.exc import DBAPIError, IntegrityError
from sqlalchemy.exc import TimeoutError as PoolTimeoutError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import ConstraintError, NotFoundError, StoreError
from app.db.queries import Statement, get_statement

logger = logging.getLogger(__name__)


class Gateway:
    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    @asynccontextmanager
    async def transaction(self):
        """
        Commit everything run inside the block together, or nothing.

        When the session already has a transaction open, the block joins it
        and the owner of that transaction decides the outcome.
        """
        if self.db.in_transaction():
            yield self
            return
        async with self.db.begin():
            yield self

    async def _run(self, statement: Statement, params: Dict[str, Any]):
        try:
            return await self.db.execute(statement.clause, params)
        except IntegrityError as e:
            logger.info(f"Constraint violated by {statement.name}: {e.orig}")
            raise ConstraintError(f"{statement.name} violates a constraint: {e.orig}") from e
        except (DBAPIError, PoolTimeoutError, OSError) as e:
            logger.error(f"Store failure in {statement.name}: {e}", exc_info=True)
            raise StoreError(f"{statement.name} failed: store unavailable") from e

    def _not_found(self, statement: Statement, params: Dict[str, Any]) -> NotFoundError:
        return NotFoundError(statement.entity or "record", params.get(statement.key or ""))

    async def query_many(self, name: str, **params) -> List[Dict[str, Any]]:
        statement = get_statement(name)
        result = await self._run(statement, params)
        return [dict(row) for row in result.mappings().all()]

    async def query_one_or_none(self, name: str, **params) -> Optional[Dict[str, Any]]:
        statement = get_statement(name)
        result = await self._run(statement, params)
        row = result.mappings().first()
        return dict(row) if row is not None else None

    async def query_one(self, name: str, **params) -> Dict[str, Any]:
        row = await self.query_one_or_none(name, **params)
        if row is None:
            raise self._not_found(get_statement(name), params)
        return row

    async def execute(self, name: str, **params) -> int:
        """Run a statement that returns no rows; returns the affected row count."""
        statement = get_statement(name)
        result = await self._run(statement, params)
        if statement.singular and result.rowcount == 0:
            raise self._not_found(statement, params)
        return result.rowcount
