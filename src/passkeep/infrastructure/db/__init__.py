from passkeep.infrastructure.db.base import Base
from passkeep.infrastructure.db.engine import create_engine
from passkeep.infrastructure.db.errors import StorageFailure
from passkeep.infrastructure.db.init_db import init_db, drop_db
from passkeep.infrastructure.db.session import make_session_factory

__all__ = ['Base', 'create_engine', 'make_session_factory', 'init_db', 'drop_db', 'StorageFailure']
