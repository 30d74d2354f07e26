from clerk_backend_api import Clerk, authenticate_request
from clerk_backend_api.security.types import AuthenticateRequestOptions

from core.errors import AuthenticationError, ErrorCode

from .interface import AuthProvider, AuthUser


class _FakeRequest:
    """Adapts a raw Bearer token to the Requestish protocol expected by Clerk SDK."""

    def __init__(self, token: str):
        self.headers = {"Authorization": f"Bearer {token}"}


class ClerkAuthProvider(AuthProvider):
    def __init__(self, secret_key: str):
        self._client = Clerk(bearer_auth=secret_key)
        self._secret_key = secret_key

    async def verify_token(self, token: str) -> AuthUser:
        try:
            request_state = authenticate_request(
                _FakeRequest(token),
                AuthenticateRequestOptions(secret_key=self._secret_key),
            )
            if not request_state.is_signed_in or request_state.payload is None:
                raise AuthenticationError(
                    f"Token verification failed: {request_state.message or 'unknown'}",
                    code=ErrorCode.INVALID_TOKEN,
                )
            user_id = str(request_state.payload["sub"])
            return await self.get_user(user_id)
        except AuthenticationError:
            raise
        except Exception as e:
            raise AuthenticationError(f"Token verification failed: {e}", code=ErrorCode.INVALID_TOKEN) from e

    async def get_user(self, user_id: str) -> AuthUser:
        try:
            user = self._client.users.get(user_id=user_id)
            full_name = f"{user.first_name or ''} {user.last_name or ''}".strip()
            return AuthUser(
                user_id=user.id,
                email=user.email_addresses[0].email_address if user.email_addresses else "",
                name=full_name or user.username or None,
                avatar_url=user.image_url or None,
            )
        except Exception as e:
            raise AuthenticationError(f"Failed to fetch user: {e}") from e
