from __future__ import annotations
from typing import Protocol, Optional
from .entities import User


class UserStore(Protocol):
    async def get_by_id(self, user_id: int) -> Optional[User]:
        ...

    async def save(self, user: User) -> None:
        ...
