"""
Domain layer for the training analytics engine.

This package contains pure domain models that are independent of
infrastructure concerns (database, external services).
"""

from domain.models import (
    EquipmentType,
    Exercise,
    ExerciseRef,
    JoinedSet,
    LoggedSet,
    MuscleGroup,
    SetType,
    SplitType,
    TrainingStyle,
    WorkoutSession,
)

__all__ = [
    "Exercise",
    "WorkoutSession",
    "LoggedSet",
    "JoinedSet",
    "ExerciseRef",
    "MuscleGroup",
    "EquipmentType",
    "SetType",
    "SplitType",
    "TrainingStyle",
]
