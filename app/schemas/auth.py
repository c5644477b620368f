"""
FitPulse API - Authentication Schemas.

Pydantic schemas for authentication requests and responses.
"""

from pydantic import BaseModel, EmailStr, Field, ConfigDict

from app.schemas.user import ProfileData


class RegisterRequest(BaseModel):
    """
    Schema for user registration request.

    Attributes:
        username: Unique login name.
        email: User's email address.
        password: User's password (min 8 characters).
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "username": "jdoe",
                "email": "user@example.com",
                "password": "squats4days"
            }
        }
    )

    username: str = Field(..., min_length=3, max_length=32, pattern=r"^\s*[A-Za-z0-9_.-]+\s*$")
    email: EmailStr = Field(..., description="User's email address")
    password: str = Field(
        ...,
        min_length=8,
        description="User's password (minimum 8 characters)"
    )


class LoginRequest(BaseModel):
    """Schema for user login request."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "username": "jdoe",
                "password": "squats4days"
            }
        }
    )

    username: str = Field(..., description="Username chosen at registration")
    password: str = Field(..., description="User's password")


class MessageResponse(BaseModel):
    """Plain acknowledgement."""

    message: str


class LoginUser(BaseModel):
    """Identity returned to the client after login."""

    id: str
    username: str
    email: str
    profile: ProfileData


class LoginResponse(BaseModel):
    """
    Schema for login response.

    The token is also set as an httpOnly cookie; it is repeated here for
    clients that send it as a bearer header.
    """

    model_config = ConfigDict(populate_by_name=True)

    message: str = "Login successful"
    user: LoginUser
    access_token: str = Field(..., alias="accessToken")
    token_type: str = Field(default="bearer", alias="tokenType")
