"""
FitPulse API - Workout Schemas.

Pydantic schemas for saving, listing and completing workouts.
"""

from typing import Any, List

from pydantic import BaseModel, Field, ConfigDict

from app.utils.dates import UTCDatetime


class WorkoutSaveRequest(BaseModel):
    """
    Schema for saving a workout to history.

    The payload is opaque to the server and is never validated.

    Attributes:
        workout: The workout payload.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "workout": [
                    {"name": "Bench Press", "muscles": ["chest", "triceps"], "sets": 4, "reps": 10},
                    {"name": "Plank", "muscles": ["core"], "duration": "60s"}
                ]
            }
        }
    )

    # Stored as the generator produced it: a list of exercises or an object
    workout: Any = None


class WorkoutSaveResponse(BaseModel):
    """Acknowledgement carrying the new entry's id."""

    model_config = ConfigDict(populate_by_name=True)

    message: str = "Workout saved successfully"
    workout_id: str = Field(..., alias="workoutId")


class WorkoutEntryOut(BaseModel):
    """A workout history entry as returned to the client."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    date: UTCDatetime
    workout: Any = None
    completed: bool


class AchievementOut(BaseModel):
    """An earned achievement as returned to the client."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    name: str
    description: str
    date_earned: UTCDatetime = Field(..., alias="dateEarned")
    icon: str


class WorkoutCompletionResponse(BaseModel):
    """
    Schema for the workout completion response.

    Attributes:
        message: Status message.
        streak: Streak after the completion.
        new_achievements: Achievements whose earned date is today.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "message": "Workout completed",
                "streak": 7,
                "newAchievements": [
                    {
                        "name": "Week Warrior",
                        "description": "Completed workouts for 7 consecutive days",
                        "dateEarned": "2024-01-15T10:30:00Z",
                        "icon": "🔥"
                    }
                ]
            }
        }
    )

    message: str = "Workout completed"
    streak: int
    new_achievements: List[AchievementOut] = Field(
        default_factory=list,
        alias="newAchievements"
    )


class AchievementCatalogItem(BaseModel):
    """An achievement the tracker can award, and whether the user has it."""

    name: str
    description: str
    icon: str
    earned: bool


class AchievementsResponse(BaseModel):
    """Earned achievements plus the full catalogue."""

    earned: List[AchievementOut]
    available: List[AchievementCatalogItem]
    streak: int
