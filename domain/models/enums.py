"""
Enumerations shared by the training domain models.

Values match the strings stored by the logging layer, so every enum
subclasses ``str`` and can be compared against raw column values.
"""

from enum import Enum


class MuscleGroup(str, Enum):
    """Primary muscle groups an exercise can target."""

    CHEST = "chest"
    BACK = "back"
    SHOULDERS = "shoulders"
    BICEPS = "biceps"
    TRICEPS = "triceps"
    QUADS = "quads"
    HAMSTRINGS = "hamstrings"
    GLUTES = "glutes"
    CALVES = "calves"
    CORE = "core"
    FOREARMS = "forearms"


class EquipmentType(str, Enum):
    """Equipment categories for exercises."""

    BARBELL = "barbell"
    DUMBBELL = "dumbbell"
    CABLE = "cable"
    MACHINE = "machine"
    BODYWEIGHT = "bodyweight"
    BAND = "band"
    OTHER = "other"


class SetType(str, Enum):
    """
    Role a logged set played in the session.

    Only WORKING sets feed the overload advisor and plateau detection;
    every other role is excluded from best-set selection.
    """

    WORKING = "working"
    WARMUP = "warmup"
    DROPSET = "dropset"
    FAILURE = "failure"
    REST_PAUSE = "rest_pause"
    GIANT_SET = "giant_set"
    CENTURY = "century"


class SplitType(str, Enum):
    """Training split label attached to a session."""

    PUSH = "push"
    PULL = "pull"
    LEGS = "legs"
    UPPER = "upper"
    LOWER = "lower"
    FULL_BODY = "full_body"
    CUSTOM = "custom"


class TrainingStyle(str, Enum):
    """Coarse policy selector for progressive overload."""

    HYPERTROPHY = "hypertrophy"
    STRENGTH = "strength"
    MIXED = "mixed"
