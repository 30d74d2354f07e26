from core.auth import AuthUser
from core.errors import AuthenticationError
from core.models import UserOut
from core.result import returns_result


@returns_result("Error fetching user")
def get_current_user(user: AuthUser | None) -> UserOut:
    if user is None:
        raise AuthenticationError("User not found")
    return UserOut(id=user.user_id, name=user.name, avatar=user.avatar_url, email=user.email)
