from sqlalchemy.ext.asyncio import AsyncEngine

from passkeep.infrastructure.db.base import Base


def _load_models() -> None:
    # registers the tables on Base.metadata
    import passkeep.infrastructure.users.models  # noqa: F401


async def init_db(engine: AsyncEngine) -> None:
    _load_models()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def drop_db(engine: AsyncEngine) -> None:
    _load_models()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
