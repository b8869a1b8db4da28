from passkeep.core.config import Settings, get_settings
from passkeep.core.security import Argon2PasswordHasher, FastPasswordHasher, checksum_to_hex

__all__ = ['Settings',
           'get_settings',
           'Argon2PasswordHasher',
           'FastPasswordHasher',
           'checksum_to_hex']
