# app/routes/auth.py
"""
FitPulse API - Authentication Routes.

Register, login, logout endpoints with MongoDB/Beanie.
"""

from datetime import datetime, timezone, timedelta
import logging

from beanie.operators import Or
from fastapi import APIRouter, HTTPException, Request, Response, status
from pymongo.errors import DuplicateKeyError

from app.middleware.auth import extract_token
from app.middleware.rate_limit import limiter, auth_limit
from app.models.mongodb import UserDocument
from app.schemas.auth import (
    RegisterRequest,
    LoginRequest,
    LoginResponse,
    LoginUser,
    MessageResponse,
)
from app.schemas.user import ProfileData
from app.services.auth import (
    hash_password,
    verify_password,
    create_access_token,
    verify_token,
    token_ttl_seconds,
)
from app.services.token_blacklist import token_blacklist
from app.utils.errors import ValidationError
from app.utils.security import sanitize_string, validate_password_strength
from settings import settings

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/register", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit(auth_limit)
async def register(request: Request, payload: RegisterRequest) -> MessageResponse:
    """
    Register a new user.

    Args:
        request: Incoming request (used by the rate limiter).
        payload: RegisterRequest with username, email, password.

    Returns:
        MessageResponse confirming the registration.

    Raises:
        ValidationError: Username or email already taken, or weak password.
    """
    username = sanitize_string(payload.username, max_length=32)

    is_valid, error = validate_password_strength(payload.password)
    if not is_valid:
        raise ValidationError(error)

    existing = await UserDocument.find_one(
        Or(UserDocument.email == payload.email, UserDocument.username == username)
    )
    if existing:
        raise ValidationError("User already exists")

    now = datetime.now(timezone.utc)
    user = UserDocument(
        username=username,
        email=payload.email,
        password_hash=hash_password(payload.password),
        created_at=now,
        updated_at=now
    )

    try:
        await user.insert()
    except DuplicateKeyError:
        # Lost a race with a concurrent registration
        raise ValidationError("User already exists")

    logger.info(f"New user registered: {user.username}")
    return MessageResponse(message="User registered successfully")


@router.post("/login", response_model=LoginResponse)
@limiter.limit(auth_limit)
async def login(request: Request, payload: LoginRequest, response: Response) -> LoginResponse:
    """
    Login user, set the auth cookie and return the token.

    Args:
        request: Incoming request (used by the rate limiter).
        payload: LoginRequest with username, password.
        response: Outgoing response the cookie is attached to.

    Returns:
        LoginResponse with the user's identity and access token.

    Raises:
        HTTPException 400: Invalid credentials
    """
    user = await UserDocument.find_one(UserDocument.username == payload.username.strip())
    if not user or not verify_password(payload.password, user.password_hash):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid credentials"
        )

    await user.set({UserDocument.last_login_at: datetime.now(timezone.utc)})

    expires = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    access_token = create_access_token({"sub": str(user.id)}, expires_delta=expires)

    response.set_cookie(
        key=settings.AUTH_COOKIE_NAME,
        value=access_token,
        httponly=True,
        max_age=int(expires.total_seconds()),
        secure=settings.is_production,
        samesite="lax"
    )

    return LoginResponse(
        message="Login successful",
        user=LoginUser(
            id=str(user.id),
            username=user.username,
            email=user.email,
            profile=ProfileData.model_validate(user.profile.model_dump())
        ),
        access_token=access_token,
        token_type="bearer"
    )


@router.post("/logout", response_model=MessageResponse)
async def logout(request: Request, response: Response) -> MessageResponse:
    """
    Logout by clearing the auth cookie and revoking the presented token.

    Works without a valid token, so a client with an expired session can
    still clear its cookie.
    """
    token = extract_token(request)
    if token:
        payload = verify_token(token)
        if payload:
            await token_blacklist.add(token, token_ttl_seconds(payload))

    response.delete_cookie(settings.AUTH_COOKIE_NAME)
    return MessageResponse(message="Logout successful")
