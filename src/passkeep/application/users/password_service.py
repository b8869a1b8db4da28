from __future__ import annotations

import logging
from dataclasses import replace

from passkeep.application.users.interfaces import PasswordHasher
from passkeep.domain.users import InvalidCredentialsError, UserNotFoundError, UserStore

logger = logging.getLogger(__name__)


class PasswordService:
    def __init__(
        self,
        users: UserStore,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher

    @property
    def users(self) -> UserStore:
        return self._users

    async def change_password(self, user_id: int, old_password: str, new_password: str) -> None:
        # 1) load user
        user = await self._users.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)

        # 2) check the old password; nothing is hashed or saved on mismatch
        if not self._password_hasher.verify(user.password_hash, old_password):
            logger.warning("Rejected password change for user %s: wrong old password", user_id)
            raise InvalidCredentialsError(user_id)

        # 3) single write
        await self._users.save(replace(user, password_hash=self._password_hasher.hash(new_password)))
        logger.info("Password changed for user %s", user_id)
