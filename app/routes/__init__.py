"""FitPulse API - Routes Package."""

from app.routes import (
    auth,
    profile,
    workout,
)

__all__ = [
    "auth",
    "profile",
    "workout",
]
