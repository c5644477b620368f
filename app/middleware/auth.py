"""
FitPulse API - Authentication Middleware.

JWT verification for protected routes. Tokens come from the
``Authorization: Bearer`` header or, for the browser client, from the
httpOnly cookie set at login.
"""

from typing import Optional

from fastapi import Request
from fastapi.security import HTTPBearer

from app.services.auth import verify_token
from app.services.token_blacklist import token_blacklist
from app.utils.errors import AuthenticationError
from settings import settings


def extract_token(request: Request) -> Optional[str]:
    """Return the raw JWT from the Authorization header or the auth cookie."""
    authorization = request.headers.get("Authorization", "")
    scheme, _, credentials = authorization.partition(" ")
    if scheme.lower() == "bearer" and credentials:
        return credentials.strip()
    return request.cookies.get(settings.AUTH_COOKIE_NAME)


class JWTBearer(HTTPBearer):
    """
    JWT Bearer token authentication.

    Custom HTTPBearer that validates JWT tokens on protected routes.

    Attributes:
        require_token: Whether to raise on missing or invalid credentials.
    """

    def __init__(self, auto_error: bool = True):
        """
        Initialize JWTBearer.

        Args:
            auto_error: Whether to raise AuthenticationError on auth failure.
        """
        # The cookie fallback means a missing header is not an error by itself
        super().__init__(auto_error=False)
        self.require_token = auto_error

    def _reject(self, detail: str) -> None:
        if self.require_token:
            raise AuthenticationError(detail)

    async def __call__(self, request: Request) -> Optional[str]:
        """
        Verify JWT token from the request.

        Args:
            request: FastAPI request object.

        Returns:
            Optional[str]: User ID from token if valid.

        Raises:
            AuthenticationError: If the token is missing, invalid or revoked.
        """
        token = extract_token(request)
        if not token:
            self._reject("Unauthorized: No token provided")
            return None

        # Check if token is blacklisted (logout)
        if await token_blacklist.contains(token):
            self._reject("Token has been revoked")
            return None

        payload = verify_token(token)
        if not payload:
            self._reject("Unauthorized: Invalid token")
            return None

        user_id = payload.get("sub")
        if not user_id:
            self._reject("Invalid token payload")
            return None

        # Used by the rate limiter key function
        request.state.user_id = user_id
        return user_id


# Global JWT bearer instance for dependency injection
jwt_bearer = JWTBearer()
