from __future__ import annotations

from dataclasses import replace
from typing import Optional

from passkeep.domain.users import User


class InMemoryUserStore:
    """
    Process-local user store.

    Records go in and come out as copies, so nothing a caller holds aliases
    the stored value. Not safe for use from several threads without an
    external lock.
    """

    def __init__(self) -> None:
        self._by_id: dict[int, User] = {}

    async def get_by_id(self, user_id: int) -> Optional[User]:
        user = self._by_id.get(user_id)
        if user is None:
            return None
        return replace(user)

    async def save(self, user: User) -> None:
        self._by_id[user.user_id] = replace(user)

    async def close(self) -> None:
        self._by_id.clear()
