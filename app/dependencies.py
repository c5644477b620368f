"""
FitPulse API - FastAPI Dependencies.

Dependency injection helpers for routes. The authenticated user is
resolved per request; nothing about the caller is kept in module state.
"""

from beanie import PydanticObjectId
from bson.errors import InvalidId
from fastapi import Depends

from app.middleware.auth import jwt_bearer
from app.models.mongodb import UserDocument
from app.utils.errors import AuthenticationError, NotFoundError


async def get_current_user_id(
    user_id: str = Depends(jwt_bearer)
) -> PydanticObjectId:
    """
    Get current authenticated user ID from JWT token.

    Args:
        user_id: User ID extracted by jwt_bearer dependency.

    Returns:
        PydanticObjectId: Authenticated user's document id.

    Raises:
        AuthenticationError: If not authenticated or the subject is malformed.
    """
    if not user_id:
        raise AuthenticationError("Not authenticated")
    try:
        return PydanticObjectId(user_id)
    except (InvalidId, TypeError):
        raise AuthenticationError("Invalid token payload")


async def get_current_user(
    user_id: PydanticObjectId = Depends(get_current_user_id)
) -> UserDocument:
    """
    Get current authenticated user from database.

    Raises:
        NotFoundError: If the user no longer exists.
    """
    user = await UserDocument.get(user_id)

    if not user:
        raise NotFoundError("User not found")

    return user
