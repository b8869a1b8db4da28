from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from passkeep.domain.users import User
from passkeep.infrastructure.users.mappers import user_domain_to_row, user_model_to_domain
from passkeep.infrastructure.users.models import UserModel

logger = logging.getLogger(__name__)

# dialects with a native INSERT ... ON CONFLICT construct
_UPSERT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class UnsupportedDialectError(Exception):
    def __init__(self, dialect_name: str):
        super().__init__(f"No upsert support for dialect {dialect_name!r}")


def upsert_statement(user: User, dialect_name: str):
    """INSERT ... ON CONFLICT (user_id) DO UPDATE SET password_hash for the given dialect."""
    insert = _UPSERT_INSERTS.get(dialect_name)
    if insert is None:
        raise UnsupportedDialectError(dialect_name)
    stmt = insert(UserModel).values(**user_domain_to_row(user))
    return stmt.on_conflict_do_update(
        index_elements=[UserModel.user_id],
        set_={"password_hash": stmt.excluded.password_hash},
    )


class SqlAlchemyUserStore:
    """
    User store backed by the ``users`` table.

    Every call runs in its own session and transaction, so a ``save`` is
    durable once it returns. Pass ``engine`` to hand its lifetime to the store
    (``close`` then disposes it).
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        *,
        engine: AsyncEngine | None = None,
    ) -> None:
        self._session_factory = session_factory
        self._engine = engine

    async def get_by_id(self, user_id: int) -> Optional[User]:
        stmt = select(UserModel).where(UserModel.user_id == user_id)
        async with self._session_factory() as session:
            result = await session.execute(stmt)
            model: Optional[UserModel] = result.scalar_one_or_none()
            if model is None:
                logger.debug("No user row for id %s", user_id)
                return None
            return user_model_to_domain(model)

    async def save(self, user: User) -> None:
        async with self._session_factory() as session, session.begin():
            await session.execute(upsert_statement(user, session.get_bind().dialect.name))
        logger.debug("Upserted user %s", user.user_id)

    async def close(self) -> None:
        if self._engine is not None:
            await self._engine.dispose()
