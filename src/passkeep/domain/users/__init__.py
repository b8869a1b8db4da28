from passkeep.domain.users.entities import User
from passkeep.domain.users.errors import InvalidCredentialsError, UserNotFoundError
from passkeep.domain.users.repositories import UserStore

__all__ = ['User', 'UserStore', 'InvalidCredentialsError', 'UserNotFoundError']
