"""Subscription store — the only component that issues database statements.

Every operation runs a single statement in its own short transaction on a
pooled connection, so each call is atomic on its own and nothing is shared
between concurrent requests except the engine's pool.
"""

import logging
from collections.abc import Sequence

from sqlalchemy import delete, insert, select, text, update
from sqlalchemy.engine import RowMapping
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine
from sqlalchemy.sql import Executable

from subtracker.core.exceptions import NotFoundError, StorageError
from subtracker.database import Base
from subtracker.models import Subscription
from subtracker.schemas.subscription import SubscriptionCreate, SubscriptionUpdate

logger = logging.getLogger(__name__)

subscriptions = Subscription.__table__


def _to_entity(row: RowMapping) -> Subscription:
    """Copy a result row into a detached Subscription."""
    return Subscription(**row)


class SubscriptionStore:
    """CRUD operations for the ``subscriptions`` table."""

    def __init__(self, engine: AsyncEngine) -> None:
        self._engine = engine

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    async def _execute(self, statement: Executable) -> Sequence[RowMapping]:
        try:
            async with self._engine.begin() as conn:
                result = await conn.execute(statement)
                return result.mappings().all() if result.returns_rows else []
        except SQLAlchemyError as exc:
            message = str(getattr(exc, "orig", None) or exc)
            logger.warning("Subscription statement failed: %s", message)
            raise StorageError(message) from exc

    async def init_schema(self) -> None:
        """Create the subscriptions table if it does not exist yet."""
        async with self._engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Ensured table %s exists", subscriptions.name)

    async def ping(self) -> None:
        """Round-trip a trivial query to prove the database is reachable."""
        await self._execute(text("SELECT 1"))

    async def list_all(self) -> list[Subscription]:
        rows = await self._execute(select(subscriptions).order_by(subscriptions.c.id))
        return [_to_entity(row) for row in rows]

    async def create(self, candidate: SubscriptionCreate) -> Subscription:
        """Insert a new row and return it with the store-assigned id."""
        rows = await self._execute(
            insert(subscriptions).values(**candidate.model_dump()).returning(*subscriptions.c)
        )
        created = _to_entity(rows[0])
        logger.info("Created subscription %s for user %s", created.id, created.user_id)
        return created

    async def read(self, subscription_id: int) -> Subscription:
        rows = await self._execute(
            select(subscriptions).where(subscriptions.c.id == subscription_id)
        )
        if not rows:
            raise NotFoundError(f"subscription {subscription_id} not found")
        return _to_entity(rows[0])

    async def update(self, subscription_id: int, candidate: SubscriptionUpdate) -> Subscription:
        """Replace name, cost and dates of an existing row.

        ``user_id`` is never touched, whatever the caller sends.
        """
        rows = await self._execute(
            update(subscriptions)
            .where(subscriptions.c.id == subscription_id)
            .values(
                service_name=candidate.service_name,
                cost=candidate.cost,
                start_date=candidate.start_date,
                end_date=candidate.end_date,
            )
            .returning(*subscriptions.c)
        )
        if not rows:
            raise NotFoundError(f"subscription {subscription_id} not found")
        return _to_entity(rows[0])

    async def delete(self, subscription_id: int) -> None:
        """Remove a row. Deleting an id that does not exist is a no-op."""
        await self._execute(delete(subscriptions).where(subscriptions.c.id == subscription_id))
        logger.info("Deleted subscription %s", subscription_id)
