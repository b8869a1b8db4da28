# passkeep/core/security.py
import zlib

from passlib.context import CryptContext


class Argon2PasswordHasher:
    """Salted, deliberately slow hashing for real credentials."""

    def __init__(self, context: CryptContext | None = None) -> None:
        self._context = context or CryptContext(schemes=["argon2"], deprecated="auto")

    def hash(self, raw_password: str) -> str:
        return self._context.hash(raw_password)

    def verify(self, hashed_password: str, raw_password: str) -> bool:
        try:
            return self._context.verify(raw_password, hashed_password)
        except ValueError:
            # not an argon2 digest at all
            return False


def checksum_to_hex(value: int) -> str:
    return format(value & 0xFFFFFFFF, "08x")


class FastPasswordHasher:
    """
    CRC-32 "hasher" for tests. Not a password hash: trivially reversible by
    brute force and full of collisions.
    """

    def hash(self, raw_password: str) -> str:
        return checksum_to_hex(zlib.crc32(raw_password.encode("utf-8")))

    def verify(self, hashed_password: str, raw_password: str) -> bool:
        return hashed_password == self.hash(raw_password)
