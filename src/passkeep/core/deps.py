from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy.ext.asyncio import AsyncEngine

from passkeep.application.users import PasswordHasher, PasswordService
from passkeep.core.config import Settings
from passkeep.core.security import Argon2PasswordHasher, FastPasswordHasher
from passkeep.infrastructure.db import create_engine, init_db, make_session_factory
from passkeep.infrastructure.users import InMemoryUserStore, SqlAlchemyUserStore


class UnsupportedHasherError(Exception):
    def __init__(self, name: str):
        super().__init__(f"Unknown password hasher {name!r}")


class UnsupportedStoreError(Exception):
    def __init__(self, name: str):
        super().__init__(f"Unknown user store {name!r}")


def build_password_hasher(settings: Settings) -> PasswordHasher:
    if settings.PASSWORD_HASHER == "argon2":
        return Argon2PasswordHasher()
    if settings.PASSWORD_HASHER == "fast":
        return FastPasswordHasher()
    raise UnsupportedHasherError(settings.PASSWORD_HASHER)


def build_user_store(
    settings: Settings,
    engine: AsyncEngine | None = None,
) -> InMemoryUserStore | SqlAlchemyUserStore:
    """
    Pick the store named in settings. A SQL store built without an ``engine``
    creates its own and disposes it on ``close``.
    """
    if settings.USER_STORE == "memory":
        return InMemoryUserStore()
    if settings.USER_STORE == "sql":
        if engine is not None:
            return SqlAlchemyUserStore(make_session_factory(engine))
        owned = create_engine(settings.database_url, echo=settings.DB_ECHO)
        return SqlAlchemyUserStore(make_session_factory(owned), engine=owned)
    raise UnsupportedStoreError(settings.USER_STORE)


@asynccontextmanager
async def password_service(settings: Settings) -> AsyncIterator[PasswordService]:
    """Wire the whole graph once; the SQL table is created if missing."""
    engine: AsyncEngine | None = None
    store: InMemoryUserStore | SqlAlchemyUserStore | None = None
    try:
        if settings.USER_STORE == "sql":
            engine = create_engine(settings.database_url, echo=settings.DB_ECHO)
            await init_db(engine)
        store = build_user_store(settings, engine)
        yield PasswordService(users=store, password_hasher=build_password_hasher(settings))
    finally:
        if store is not None:
            await store.close()
        if engine is not None:
            await engine.dispose()
