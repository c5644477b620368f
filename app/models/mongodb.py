# app/models/mongodb.py
"""
FitPulse MongoDB Document Models.

Beanie ODM models for MongoDB. A user's workout history, achievements and
streak live inside the user document.
"""

from beanie import Document, Indexed
from bson import ObjectId
from pydantic import BaseModel, EmailStr, Field
from datetime import datetime
from enum import Enum
from typing import Optional, List, Any

from app.utils.dates import utc_now


class FitnessGoal(str, Enum):
    WEIGHT_LOSS = "weight_loss"
    MUSCLE_GAIN = "muscle_gain"
    ENDURANCE = "endurance"


class FitnessLevel(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class Profile(BaseModel):
    """Body metrics and training preferences."""

    name: Optional[str] = None
    age: Optional[int] = None
    weight: Optional[float] = None  # kg
    height: Optional[float] = None  # cm
    fitness_goal: Optional[FitnessGoal] = None
    fitness_level: Optional[FitnessLevel] = None


class WorkoutEntry(BaseModel):
    """A saved workout and whether it has been completed."""

    id: str = Field(default_factory=lambda: str(ObjectId()))
    date: datetime = Field(default_factory=utc_now)
    # Opaque generator output, usually a list of exercises
    workout: Any = None
    completed: bool = False


class Achievement(BaseModel):
    """A milestone awarded to the user. Never updated once appended."""

    name: str
    description: str
    date_earned: datetime
    icon: str


class UserDocument(Document):
    """User model for MongoDB."""

    username: Indexed(str, unique=True)
    email: Indexed(EmailStr, unique=True)
    password_hash: str

    profile: Profile = Field(default_factory=Profile)

    # Progress tracking
    workout_history: List[WorkoutEntry] = Field(default_factory=list)
    achievements: List[Achievement] = Field(default_factory=list)
    streak: int = Field(default=0, ge=0)
    last_workout: Optional[datetime] = None

    # Bumped on every progress write; writers compare-and-swap on it
    version: int = 0

    # Timestamps
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
    last_login_at: Optional[datetime] = None

    class Settings:
        name = "users"  # Collection name in MongoDB

    class Config:
        json_schema_extra = {
            "example": {
                "username": "jdoe",
                "email": "john@fitpulse.app",
                "profile": {
                    "name": "John Doe",
                    "age": 31,
                    "weight": 82.5,
                    "height": 180,
                    "fitness_goal": "muscle_gain",
                    "fitness_level": "intermediate"
                },
                "streak": 3
            }
        }
