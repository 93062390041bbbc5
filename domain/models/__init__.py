"""
Domain models for the training analytics engine.

This package contains pure domain models that are independent of
infrastructure concerns (database, external services).

These models represent the core business concepts:
- Exercise: A catalog exercise with its primary muscle group
- WorkoutSession: A training occasion, completed once it has an end time
- LoggedSet: One performed set (weight, reps, role, PR flag)
- JoinedSet: A logged set with its exercise join (name, muscle group)

All models are frozen: the analytics only ever read snapshots.

Usage:
    >>> from domain.models import LoggedSet, SetType
    >>> from datetime import datetime, timezone
    >>> s = LoggedSet(
    ...     id="set1",
    ...     session_id="s1",
    ...     exercise_id="ex_squat",
    ...     weight=225,
    ...     reps=5,
    ...     set_type=SetType.WORKING,
    ...     logged_at=datetime(2024, 1, 15, tzinfo=timezone.utc),
    ... )
"""

from domain.models.enums import (
    EquipmentType,
    MuscleGroup,
    SetType,
    SplitType,
    TrainingStyle,
)
from domain.models.exercise import Exercise
from domain.models.logged_set import ExerciseRef, JoinedSet, LoggedSet
from domain.models.session import WorkoutSession

__all__ = [
    # Entities
    "Exercise",
    "WorkoutSession",
    "LoggedSet",
    "JoinedSet",
    "ExerciseRef",
    # Enums
    "MuscleGroup",
    "EquipmentType",
    "SetType",
    "SplitType",
    "TrainingStyle",
]
