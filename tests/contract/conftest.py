import pytest
import pytest_asyncio

from passkeep.core.security import Argon2PasswordHasher, FastPasswordHasher
from passkeep.infrastructure.db import create_engine, init_db, make_session_factory
from passkeep.infrastructure.users import InMemoryUserStore, SqlAlchemyUserStore


@pytest_asyncio.fixture(params=["memory", "sql"])
async def store(request):
    """Every UserStore implementation, one at a time."""
    if request.param == "memory":
        yield InMemoryUserStore()
        return

    engine = create_engine("sqlite+aiosqlite://")
    await init_db(engine)
    store = SqlAlchemyUserStore(make_session_factory(engine), engine=engine)
    yield store
    await store.close()


@pytest.fixture(params=["argon2", "fast"])
def password_hasher(request):
    if request.param == "argon2":
        return Argon2PasswordHasher()
    return FastPasswordHasher()
