"""FitPulse API - Services Package."""

from .auth import (
    hash_password,
    verify_password,
    create_access_token,
    verify_token,
)
from .token_blacklist import token_blacklist, TokenBlacklist
from .streak_tracker import streak_tracker, StreakTrackerService
from .workout_service import workout_service, WorkoutService

__all__ = [
    "hash_password",
    "verify_password",
    "create_access_token",
    "verify_token",
    "token_blacklist",
    "TokenBlacklist",
    "streak_tracker",
    "StreakTrackerService",
    "workout_service",
    "WorkoutService",
]
