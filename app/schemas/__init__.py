"""FitPulse API - Pydantic Schemas Package."""

from app.schemas.workout import (
    WorkoutSaveRequest,
    WorkoutSaveResponse,
    WorkoutEntryOut,
    AchievementOut,
    WorkoutCompletionResponse,
    AchievementCatalogItem,
    AchievementsResponse,
)
from app.schemas.user import (
    ProfileData,
    UserProfileResponse,
)
from app.schemas.auth import (
    RegisterRequest,
    LoginRequest,
    LoginResponse,
    LoginUser,
    MessageResponse,
)

__all__ = [
    # Workout
    "WorkoutSaveRequest",
    "WorkoutSaveResponse",
    "WorkoutEntryOut",
    "AchievementOut",
    "WorkoutCompletionResponse",
    "AchievementCatalogItem",
    "AchievementsResponse",
    # User
    "ProfileData",
    "UserProfileResponse",
    # Auth
    "RegisterRequest",
    "LoginRequest",
    "LoginResponse",
    "LoginUser",
    "MessageResponse",
]
