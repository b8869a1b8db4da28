from passkeep.application.users import PasswordHasher, PasswordService
from passkeep.domain.users import User, UserStore, InvalidCredentialsError, UserNotFoundError
from passkeep.infrastructure.db.errors import StorageFailure

__all__ = [
    'User',
    'UserStore',
    'PasswordHasher',
    'PasswordService',
    'InvalidCredentialsError',
    'UserNotFoundError',
    'StorageFailure',
]
