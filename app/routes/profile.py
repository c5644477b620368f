"""
FitPulse API - Profile Routes.

Endpoints for reading the user record and replacing the profile.
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from app.dependencies import get_current_user
from app.models.mongodb import Profile, UserDocument
from app.schemas.user import ProfileData, UserProfileResponse
from app.schemas.workout import AchievementOut, WorkoutEntryOut


router = APIRouter()


def build_profile_response(user: UserDocument) -> UserProfileResponse:
    """Serialize a user document without its password hash."""
    return UserProfileResponse(
        id=str(user.id),
        username=user.username,
        email=user.email,
        profile=ProfileData.model_validate(user.profile.model_dump()),
        workout_history=[
            WorkoutEntryOut.model_validate(entry.model_dump())
            for entry in user.workout_history
        ],
        achievements=[
            AchievementOut.model_validate(a.model_dump())
            for a in user.achievements
        ],
        streak=user.streak,
        last_workout=user.last_workout
    )


@router.get("/profile", response_model=UserProfileResponse)
async def get_profile(
    user: UserDocument = Depends(get_current_user)
) -> UserProfileResponse:
    """
    Get current user's record.

    Args:
        user: Current user resolved from the JWT.

    Returns:
        UserProfileResponse with profile, history, achievements and streak.
    """
    return build_profile_response(user)


@router.put("/profile", response_model=UserProfileResponse)
async def update_profile(
    profile: ProfileData,
    user: UserDocument = Depends(get_current_user)
) -> UserProfileResponse:
    """
    Replace current user's profile.

    Fields missing from the request are cleared, not kept.

    Args:
        profile: ProfileData with the new attributes.
        user: Current user resolved from the JWT.

    Returns:
        UserProfileResponse with updated profile data.
    """
    new_profile = Profile(**profile.model_dump())

    # $set only the profile so a concurrent workout write is not clobbered
    await user.set({
        UserDocument.profile: new_profile.model_dump(mode="json"),
        UserDocument.updated_at: datetime.now(timezone.utc),
    })
    user.profile = new_profile

    return build_profile_response(user)
