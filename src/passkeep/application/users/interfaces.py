from typing import Protocol


class PasswordHasher(Protocol):
    def hash(self, raw_password: str) -> str:
        ...

    def verify(self, hashed_password: str, raw_password: str) -> bool:  # pragma: no cover - interface
        ...
