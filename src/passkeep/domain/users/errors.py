class InvalidCredentialsError(Exception):
    """Raised when the old password does not match the stored digest."""
    def __init__(self, user_id: int):
        super().__init__(f"Wrong old password for user {user_id}")
        self.user_id = user_id


class UserNotFoundError(Exception):
    def __init__(self, user_id: int):
        super().__init__(f"User with id {user_id} not found.")
        self.user_id = user_id
