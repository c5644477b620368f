# app/services/workout_service.py
"""
FitPulse API - Workout Persistence Service.

Saves workouts into a user's history and persists workout completions.

Every progress write is a single atomic update that bumps the user's
``version``. Completions are read-modify-write, so they are saved with a
compare-and-swap on that version and re-applied from a fresh read when a
concurrent request got there first.
"""

from datetime import datetime, timezone
from typing import Any, List, Optional
import logging

from beanie import PydanticObjectId
from pymongo.errors import PyMongoError

from app.models.mongodb import UserDocument, WorkoutEntry
from app.services.streak_tracker import CompletionOutcome, streak_tracker
from app.utils.errors import ConflictError, NotFoundError, PersistenceError
from settings import settings

logger = logging.getLogger(__name__)


class WorkoutService:
    """Service wrapping the workout-related writes to the user document."""

    async def _load_user(self, user_id: PydanticObjectId) -> UserDocument:
        user = await UserDocument.get(user_id)
        if not user:
            raise NotFoundError("User not found")
        return user

    async def add_workout(
        self,
        user_id: PydanticObjectId,
        workout: Any,
        now: Optional[datetime] = None
    ) -> WorkoutEntry:
        """
        Append a not-yet-completed workout to the user's history.

        Args:
            user_id: Owner of the history.
            workout: Workout payload as produced by the plan generator.
            now: Save timestamp (defaults to the current UTC time).

        Returns:
            WorkoutEntry: The stored entry, including its id.

        Raises:
            NotFoundError: If the user does not exist.
            PersistenceError: If MongoDB rejects the write.
        """
        now = now or datetime.now(timezone.utc)
        entry = WorkoutEntry(date=now, workout=workout, completed=False)

        try:
            result = await UserDocument.find_one(UserDocument.id == user_id).update({
                "$push": {"workout_history": entry.model_dump()},
                "$inc": {"version": 1},
                "$set": {"updated_at": now},
            })
        except PyMongoError as e:
            logger.error(f"Failed to save workout for user {user_id}: {e}")
            raise PersistenceError(detail="Server error") from e

        if not result or not result.matched_count:
            raise NotFoundError("User not found")

        logger.info(f"Workout {entry.id} saved for user {user_id}")
        return entry

    async def get_history(self, user_id: PydanticObjectId) -> List[WorkoutEntry]:
        """Return the user's workouts in the order they were saved."""
        user = await self._load_user(user_id)
        return user.workout_history

    async def compare_and_swap(
        self,
        user: UserDocument,
        outcome: CompletionOutcome
    ) -> bool:
        """
        Write ``outcome`` only if nobody saved progress since ``user`` was read.

        Returns:
            bool: False when the stored version moved on.
        """
        result = await UserDocument.find_one(
            UserDocument.id == user.id,
            UserDocument.version == user.version,
        ).update({
            "$set": {
                "workout_history": [entry.model_dump() for entry in outcome.workout_history],
                "achievements": [a.model_dump() for a in outcome.achievements],
                "streak": outcome.streak,
                "last_workout": outcome.last_workout,
                "updated_at": outcome.last_workout,
            },
            "$inc": {"version": 1},
        })
        return bool(result and result.matched_count)

    async def record_completion(
        self,
        user_id: PydanticObjectId,
        workout_id: str,
        now: Optional[datetime] = None
    ) -> CompletionOutcome:
        """
        Mark a workout completed and persist the new streak and achievements.

        Args:
            user_id: Owner of the workout.
            workout_id: Id of the history entry to complete.
            now: Completion timestamp (defaults to the current UTC time).

        Returns:
            CompletionOutcome: What was written.

        Raises:
            NotFoundError: If the user or the workout does not exist.
            ConflictError: If every compare-and-swap attempt lost a race.
            PersistenceError: If MongoDB rejects the write.
        """
        now = now or datetime.now(timezone.utc)
        attempts = settings.PROGRESS_SAVE_ATTEMPTS

        for attempt in range(1, attempts + 1):
            user = await self._load_user(user_id)
            outcome = streak_tracker.complete_workout(
                workout_history=user.workout_history,
                streak=user.streak,
                last_workout=user.last_workout,
                achievements=user.achievements,
                workout_id=workout_id,
                now=now,
            )

            try:
                swapped = await self.compare_and_swap(user, outcome)
            except PyMongoError as e:
                logger.error(f"Failed to save workout completion for user {user_id}: {e}")
                raise PersistenceError(detail="Server error") from e

            if swapped:
                logger.info(
                    f"Workout {workout_id} completed by user {user_id}, streak {outcome.streak}"
                )
                return outcome

            logger.warning(
                f"Progress for user {user_id} changed concurrently (attempt {attempt}/{attempts})"
            )

        raise ConflictError(
            "Workout progress changed concurrently",
            detail="Workout progress changed concurrently, please retry"
        )


# Singleton instance
workout_service = WorkoutService()
