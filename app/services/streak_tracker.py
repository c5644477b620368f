# app/services/streak_tracker.py
"""
FitPulse API - Workout Completion & Streak Tracker.

Marks a workout in a user's history as completed and recomputes the
progress fields that depend on it:

1. Streak - consecutive days with a completed workout
2. Last workout timestamp
3. Achievements - milestones awarded on exact counts

The tracker is pure: it works on copies of the progress fields and hands
back a ``CompletionOutcome``. Persisting the outcome is the caller's job
(see ``app.services.workout_service``).
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import List, Optional
import logging

from app.models.mongodb import Achievement, WorkoutEntry
from app.utils.dates import as_utc
from app.utils.errors import NotFoundError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AchievementRule:
    """A milestone and the exact value that unlocks it."""
    name: str
    description: str
    icon: str
    metric: str  # "streak" or "completed_workouts"
    target: int


WEEK_WARRIOR = AchievementRule(
    name="Week Warrior",
    description="Completed workouts for 7 consecutive days",
    icon="🔥",
    metric="streak",
    target=7,
)

DEDICATED = AchievementRule(
    name="Dedicated",
    description="Completed 10 workouts",
    icon="💪",
    metric="completed_workouts",
    target=10,
)

ACHIEVEMENT_RULES = [WEEK_WARRIOR, DEDICATED]


@dataclass
class CompletionOutcome:
    """Progress fields after a completion, ready to be persisted."""
    workout_history: List[WorkoutEntry]
    achievements: List[Achievement]
    streak: int
    last_workout: datetime
    new_achievements: List[Achievement]


class StreakTrackerService:
    """
    Service applying a workout completion to a user's progress.

    Streak rules (elapsed whole days since the previous completion):
    - no previous completion: streak = 1
    - 1 day: streak + 1
    - more than 1 day: streak = 1
    - 0 days: unchanged

    Achievements fire when their metric equals the target exactly, so a
    streak that resets and climbs back to 7 earns Week Warrior again.
    """

    DAY = timedelta(days=1)

    def day_difference(self, last_workout: datetime, now: datetime) -> int:
        """Whole days elapsed between two timestamps, floored."""
        return (as_utc(now) - as_utc(last_workout)) // self.DAY

    def next_streak(
        self,
        streak: int,
        last_workout: Optional[datetime],
        now: datetime
    ) -> int:
        """
        Compute the streak after a completion at ``now``.

        Args:
            streak: Current streak count.
            last_workout: Previous completion timestamp, if any.
            now: Completion timestamp.

        Returns:
            int: The new streak count.
        """
        if last_workout is None:
            return 1

        days = self.day_difference(last_workout, now)
        if days == 1:
            return streak + 1
        if days > 1:
            return 1
        # Same day (or a clock running behind the stored timestamp)
        return streak

    def complete_workout(
        self,
        workout_history: List[WorkoutEntry],
        streak: int,
        last_workout: Optional[datetime],
        achievements: List[Achievement],
        workout_id: str,
        now: datetime
    ) -> CompletionOutcome:
        """
        Mark ``workout_id`` completed and recompute streak and achievements.

        Args:
            workout_history: The user's workouts in insertion order.
            streak: Current streak count.
            last_workout: Previous completion timestamp, if any.
            achievements: Achievements earned so far.
            workout_id: Id of the entry being completed.
            now: Completion timestamp.

        Returns:
            CompletionOutcome with the updated fields and the achievements
            dated today.

        Raises:
            NotFoundError: If no entry has ``workout_id``. Inputs are untouched.
        """
        index = next(
            (i for i, entry in enumerate(workout_history) if entry.id == workout_id),
            None
        )
        if index is None:
            raise NotFoundError("Workout not found")

        now = as_utc(now)
        history = [entry.model_copy() for entry in workout_history]
        history[index].completed = True

        new_streak = self.next_streak(streak, last_workout, now)
        earned = list(achievements)

        metrics = {
            "streak": new_streak,
            "completed_workouts": sum(1 for entry in history if entry.completed),
        }
        for rule in ACHIEVEMENT_RULES:
            if metrics[rule.metric] == rule.target:
                logger.info(f"Achievement unlocked: {rule.name}")
                earned.append(Achievement(
                    name=rule.name,
                    description=rule.description,
                    date_earned=now,
                    icon=rule.icon
                ))

        # "New" means earned on today's calendar day, not in this call
        today = now.date()
        new_achievements = [a for a in earned if as_utc(a.date_earned).date() == today]

        return CompletionOutcome(
            workout_history=history,
            achievements=earned,
            streak=new_streak,
            last_workout=now,
            new_achievements=new_achievements
        )


# Singleton instance
streak_tracker = StreakTrackerService()
