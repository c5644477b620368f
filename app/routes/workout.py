# app/routes/workout.py
"""FitPulse API - Workout Routes (MongoDB)."""

from typing import List

from beanie import PydanticObjectId
from fastapi import APIRouter, Depends, status

from app.dependencies import get_current_user, get_current_user_id
from app.models.mongodb import UserDocument
from app.schemas.workout import (
    AchievementCatalogItem,
    AchievementOut,
    AchievementsResponse,
    WorkoutCompletionResponse,
    WorkoutEntryOut,
    WorkoutSaveRequest,
    WorkoutSaveResponse,
)
from app.services.streak_tracker import ACHIEVEMENT_RULES
from app.services.workout_service import workout_service

router = APIRouter()


@router.post(
    "/workouts",
    response_model=WorkoutSaveResponse,
    status_code=status.HTTP_201_CREATED
)
async def save_workout(
    request: WorkoutSaveRequest,
    user_id: PydanticObjectId = Depends(get_current_user_id)
):
    """Save a generated workout to the user's history (not yet completed)."""
    entry = await workout_service.add_workout(user_id, request.workout)
    return WorkoutSaveResponse(workout_id=entry.id)


@router.get("/workouts/history", response_model=List[WorkoutEntryOut])
async def get_history(user_id: PydanticObjectId = Depends(get_current_user_id)):
    """Get workout history, oldest first."""
    history = await workout_service.get_history(user_id)
    return [WorkoutEntryOut.model_validate(entry.model_dump()) for entry in history]


@router.put("/workouts/{workout_id}/complete", response_model=WorkoutCompletionResponse)
async def complete_workout(
    workout_id: str,
    user_id: PydanticObjectId = Depends(get_current_user_id)
):
    """
    Mark a workout completed and update streak and achievements.

    Returns the new streak and every achievement dated today.
    """
    outcome = await workout_service.record_completion(user_id, workout_id)
    return WorkoutCompletionResponse(
        message="Workout completed",
        streak=outcome.streak,
        new_achievements=[
            AchievementOut.model_validate(a.model_dump())
            for a in outcome.new_achievements
        ]
    )


@router.get("/achievements", response_model=AchievementsResponse)
async def get_achievements(user: UserDocument = Depends(get_current_user)):
    """List earned achievements alongside everything that can be earned."""
    earned_names = {a.name for a in user.achievements}
    return AchievementsResponse(
        earned=[AchievementOut.model_validate(a.model_dump()) for a in user.achievements],
        available=[
            AchievementCatalogItem(
                name=rule.name,
                description=rule.description,
                icon=rule.icon,
                earned=rule.name in earned_names
            )
            for rule in ACHIEVEMENT_RULES
        ],
        streak=user.streak
    )
