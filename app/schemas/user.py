"""
FitPulse API - User Schemas.

Pydantic schemas for profile operations. Field names on the wire are the
camelCase ones the web client uses; requests accept snake_case as well.
"""

from typing import List, Optional

from pydantic import BaseModel, Field, ConfigDict

from app.models.mongodb import FitnessGoal, FitnessLevel
from app.schemas.workout import AchievementOut, WorkoutEntryOut
from app.utils.dates import UTCDatetime


class ProfileData(BaseModel):
    """
    Schema for profile attributes, used for both update and response.

    Attributes:
        name: Display name.
        age: Age in years.
        weight: Body weight in kg.
        height: Height in cm.
        fitness_goal: Primary goal.
        fitness_level: Training experience.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        from_attributes=True,
        json_schema_extra={
            "example": {
                "name": "John Doe",
                "age": 31,
                "weight": 82.5,
                "height": 180,
                "fitnessGoal": "muscle_gain",
                "fitnessLevel": "intermediate"
            }
        }
    )

    name: Optional[str] = Field(None, max_length=100)
    age: Optional[int] = Field(None, ge=1, le=120)
    weight: Optional[float] = Field(None, gt=0, le=500)
    height: Optional[float] = Field(None, gt=0, le=300)
    fitness_goal: Optional[FitnessGoal] = Field(
        None,
        alias="fitnessGoal",
        description="Goal (weight_loss/muscle_gain/endurance)"
    )
    fitness_level: Optional[FitnessLevel] = Field(
        None,
        alias="fitnessLevel",
        description="Fitness level (beginner/intermediate/advanced)"
    )


class UserProfileResponse(BaseModel):
    """
    Schema for the full user record minus credentials.

    Attributes:
        id: User's document id.
        username: Login name.
        email: Email address.
        profile: Profile attributes.
        workout_history: Saved workouts in insertion order.
        achievements: Earned achievements.
        streak: Current consecutive-day streak.
        last_workout: Timestamp of the last completion.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., description="User's unique ID")
    username: str
    email: str
    profile: ProfileData
    workout_history: List[WorkoutEntryOut] = Field(
        default_factory=list,
        alias="workoutHistory"
    )
    achievements: List[AchievementOut] = Field(default_factory=list)
    streak: int = 0
    last_workout: Optional[UTCDatetime] = Field(None, alias="lastWorkout")
