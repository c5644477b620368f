"""Tests for the workout completion and streak rules."""

from datetime import datetime, timedelta, timezone

import pytest

from app.models.mongodb import Achievement, WorkoutEntry
from app.services.streak_tracker import (
    DEDICATED,
    WEEK_WARRIOR,
    streak_tracker,
)
from app.utils.errors import NotFoundError


NOW = datetime(2024, 3, 14, 18, 30, tzinfo=timezone.utc)


def _history(*completed_flags):
    return [
        WorkoutEntry(id=f"w{i}", date=NOW - timedelta(days=30), completed=flag)
        for i, flag in enumerate(completed_flags)
    ]


def _complete(history, streak=0, last_workout=None, achievements=None, workout_id="w0", now=NOW):
    return streak_tracker.complete_workout(
        workout_history=history,
        streak=streak,
        last_workout=last_workout,
        achievements=achievements or [],
        workout_id=workout_id,
        now=now,
    )


def _names(achievements):
    return [a.name for a in achievements]


# ============================================================================
# Streak
# ============================================================================

def test_first_completion_starts_streak():
    history = [WorkoutEntry(id="a", completed=False)]

    outcome = _complete(history, streak=0, last_workout=None, workout_id="a")

    assert outcome.streak == 1
    assert outcome.workout_history[0].completed is True
    assert outcome.last_workout == NOW
    assert outcome.new_achievements == []
    assert outcome.achievements == []


def test_next_day_increments_streak():
    outcome = _complete(_history(False), streak=3, last_workout=NOW - timedelta(days=1))
    assert outcome.streak == 4


def test_same_day_keeps_streak():
    outcome = _complete(_history(False), streak=3, last_workout=NOW - timedelta(hours=5))
    assert outcome.streak == 3


def test_gap_resets_streak():
    outcome = _complete(_history(False), streak=5, last_workout=NOW - timedelta(days=3))
    assert outcome.streak == 1


@pytest.mark.parametrize(
    "elapsed, expected",
    [
        (timedelta(hours=23, minutes=59), 4),   # still "0 days"
        (timedelta(hours=24), 5),
        (timedelta(hours=47, minutes=59), 5),   # floors to 1 day
        (timedelta(hours=48), 1),
    ],
)
def test_day_difference_counts_elapsed_whole_days(elapsed, expected):
    outcome = _complete(_history(False), streak=4, last_workout=NOW - elapsed)
    assert outcome.streak == expected


def test_last_workout_in_future_keeps_streak():
    outcome = _complete(_history(False), streak=2, last_workout=NOW + timedelta(hours=2))
    assert outcome.streak == 2
    assert outcome.last_workout == NOW


def test_naive_timestamps_are_read_as_utc():
    # MongoDB returns datetimes without tzinfo
    naive_yesterday = (NOW - timedelta(days=1)).replace(tzinfo=None)

    outcome = _complete(_history(False), streak=1, last_workout=naive_yesterday)

    assert outcome.streak == 2


def test_repeat_completion_same_day_moves_last_workout_only():
    history = _history(True)
    earlier = NOW - timedelta(hours=2)

    outcome = _complete(history, streak=2, last_workout=earlier, workout_id="w0")

    assert outcome.streak == 2
    assert outcome.last_workout == NOW
    assert outcome.workout_history[0].completed is True


# ============================================================================
# Achievements
# ============================================================================

def test_week_warrior_awarded_at_seven_day_streak():
    outcome = _complete(_history(False), streak=6, last_workout=NOW - timedelta(days=1))

    assert outcome.streak == 7
    assert _names(outcome.new_achievements) == [WEEK_WARRIOR.name]
    award = outcome.new_achievements[0]
    assert award.description == "Completed workouts for 7 consecutive days"
    assert award.icon == "🔥"
    assert award.date_earned == NOW


def test_week_warrior_not_awarded_past_seven():
    week_warrior = Achievement(
        name=WEEK_WARRIOR.name,
        description=WEEK_WARRIOR.description,
        date_earned=NOW - timedelta(days=1),
        icon=WEEK_WARRIOR.icon,
    )

    outcome = _complete(
        _history(False),
        streak=7,
        last_workout=NOW - timedelta(days=1),
        achievements=[week_warrior],
    )

    assert outcome.streak == 8
    assert outcome.new_achievements == []
    assert _names(outcome.achievements) == [WEEK_WARRIOR.name]


def test_week_warrior_can_be_earned_again():
    first = Achievement(
        name=WEEK_WARRIOR.name,
        description=WEEK_WARRIOR.description,
        date_earned=NOW - timedelta(days=40),
        icon=WEEK_WARRIOR.icon,
    )

    outcome = _complete(
        _history(False),
        streak=6,
        last_workout=NOW - timedelta(days=1),
        achievements=[first],
    )

    assert _names(outcome.achievements) == [WEEK_WARRIOR.name, WEEK_WARRIOR.name]
    assert _names(outcome.new_achievements) == [WEEK_WARRIOR.name]


def test_dedicated_awarded_on_tenth_completed_workout():
    history = _history(*([True] * 9 + [False]))

    outcome = _complete(history, streak=1, last_workout=NOW - timedelta(hours=1), workout_id="w9")

    assert _names(outcome.new_achievements) == [DEDICATED.name]
    assert outcome.new_achievements[0].description == "Completed 10 workouts"
    assert outcome.new_achievements[0].icon == "💪"


def test_dedicated_not_awarded_on_eleventh():
    history = _history(*([True] * 10 + [False]))

    outcome = _complete(history, streak=1, last_workout=NOW - timedelta(hours=1), workout_id="w10")

    assert outcome.new_achievements == []


def test_both_achievements_in_one_completion():
    history = _history(*([True] * 9 + [False]))

    outcome = _complete(history, streak=6, last_workout=NOW - timedelta(days=1), workout_id="w9")

    assert _names(outcome.new_achievements) == [WEEK_WARRIOR.name, DEDICATED.name]


def test_new_achievements_are_those_dated_today():
    earlier_today = Achievement(
        name="Dedicated",
        description="Completed 10 workouts",
        date_earned=NOW.replace(hour=6),
        icon="💪",
    )
    yesterday = Achievement(
        name="Week Warrior",
        description="Completed workouts for 7 consecutive days",
        date_earned=NOW - timedelta(days=1),
        icon="🔥",
    )

    outcome = _complete(
        _history(False),
        streak=2,
        last_workout=NOW - timedelta(hours=1),
        achievements=[yesterday, earlier_today],
    )

    assert outcome.new_achievements == [earlier_today]


# ============================================================================
# Not found
# ============================================================================

def test_unknown_workout_raises_and_changes_nothing():
    history = _history(False, True)
    achievements = []

    with pytest.raises(NotFoundError) as exc_info:
        _complete(history, streak=4, last_workout=NOW - timedelta(days=1),
                  achievements=achievements, workout_id="missing")

    assert exc_info.value.status_code == 404
    assert exc_info.value.detail == "Workout not found"
    assert [entry.completed for entry in history] == [False, True]
    assert achievements == []


def test_inputs_are_not_mutated():
    history = _history(False)
    achievements = []

    outcome = _complete(history, streak=6, last_workout=NOW - timedelta(days=1),
                        achievements=achievements)

    assert history[0].completed is False
    assert achievements == []
    assert outcome.workout_history[0].completed is True
