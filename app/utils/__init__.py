"""FitPulse API - Utilities Package."""

from app.utils.security import validate_password_strength
from app.utils.errors import (
    FitPulseException,
    AuthenticationError,
    NotFoundError,
    ValidationError,
    ConflictError,
    PersistenceError,
)

__all__ = [
    "validate_password_strength",
    "FitPulseException",
    "AuthenticationError",
    "NotFoundError",
    "ValidationError",
    "ConflictError",
    "PersistenceError",
]
