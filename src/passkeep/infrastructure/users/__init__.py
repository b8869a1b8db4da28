from passkeep.infrastructure.users.memory import InMemoryUserStore
from passkeep.infrastructure.users.repositories import SqlAlchemyUserStore, UnsupportedDialectError

__all__ = ['InMemoryUserStore', 'SqlAlchemyUserStore', 'UnsupportedDialectError']
