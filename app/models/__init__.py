"""
FitPulse API - MongoDB Models Package.

Export all Beanie ODM models for MongoDB operations.
"""

from app.models.mongodb import (
    UserDocument,
    Profile,
    WorkoutEntry,
    Achievement,
    FitnessGoal,
    FitnessLevel,
)

# Documents registered with init_beanie
DOCUMENT_MODELS = [
    UserDocument,
]

__all__ = [
    "UserDocument",
    "Profile",
    "WorkoutEntry",
    "Achievement",
    "FitnessGoal",
    "FitnessLevel",
    "DOCUMENT_MODELS",
]
