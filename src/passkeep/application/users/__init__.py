from passkeep.application.users.interfaces import PasswordHasher
from passkeep.application.users.password_service import PasswordService

__all__ = ['PasswordHasher', 'PasswordService']
