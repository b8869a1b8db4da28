import logging

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)


def _is_in_memory_sqlite(database_url: str) -> bool:
    url = make_url(database_url)
    return url.get_backend_name() == "sqlite" and url.database in (None, "", ":memory:")


def create_engine(database_url: str, *, echo: bool = False) -> AsyncEngine:
    if _is_in_memory_sqlite(database_url):
        # one shared connection, otherwise every checkout sees an empty database
        engine = create_async_engine(
            database_url,
            echo=echo,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )
    else:
        engine = create_async_engine(
            database_url,
            echo=echo,
            pool_pre_ping=True,
        )
    logger.debug("Created async engine for %s", engine.url.render_as_string(hide_password=True))
    return engine
