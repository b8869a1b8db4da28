import pytest_asyncio

from passkeep.infrastructure.db import create_engine, drop_db, init_db, make_session_factory
from passkeep.infrastructure.users import SqlAlchemyUserStore

TEST_DATABASE_URL = "sqlite+aiosqlite://"


@pytest_asyncio.fixture
async def db_engine():
    engine = create_engine(TEST_DATABASE_URL)
    await init_db(engine)
    yield engine
    await drop_db(engine)
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(db_engine):
    return make_session_factory(db_engine)


@pytest_asyncio.fixture
async def sql_users(session_factory) -> SqlAlchemyUserStore:
    return SqlAlchemyUserStore(session_factory)
