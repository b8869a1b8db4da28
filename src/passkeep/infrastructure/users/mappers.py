from passkeep.domain.users import User
from passkeep.infrastructure.users.models import UserModel


def user_model_to_domain(model: UserModel) -> User:
    return User(
        user_id=model.user_id,
        password_hash=model.password_hash,
    )


def user_domain_to_row(user: User) -> dict:
    return {
        "user_id": user.user_id,
        "password_hash": user.password_hash,
    }
