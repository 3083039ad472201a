"""Role checks performed before any model operation."""

from sqlalchemy.orm import Session

from recruitment.core.errors import NotFoundError, PermissionDeniedError
from recruitment.models import Role, User


def ensure_role(db: Session, user_id: int, role: Role, message: str) -> User:
    """
    Return the user if it exists and holds ``role``.

    Raises:
        NotFoundError: no user has this id
        PermissionDeniedError: the user exists with another role
    """
    user = db.get(User, user_id)
    if user is None:
        raise NotFoundError(f"User {user_id} does not exist")
    if user.role != role.value:
        raise PermissionDeniedError(message)
    return user
