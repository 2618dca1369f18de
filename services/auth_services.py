from core.errors import Unauthorized
from schemas.auth import CurrentUser


def require_user(user: CurrentUser | None) -> CurrentUser:
    """Guard every operation runs before touching storage."""
    if user is None or not user.id:
        raise Unauthorized()
    return user
