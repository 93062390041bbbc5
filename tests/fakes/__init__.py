"""
Fake Repository Implementations and Factories for Testing.

This package provides in-memory fake implementations of repository interfaces
for fast, isolated testing. No database or external dependencies required.

Features:
- All fakes implement the same Protocol interfaces as real implementations
- Supports seeding with test data
- Supports reset() for test isolation
- Supports fail_with() to simulate an unreachable backend
- Factory functions for sessions and sets

Usage:
    from tests.fakes import FakeSessionRepository, make_session, make_set

    repo = FakeSessionRepository()
    repo.seed([make_session("s1", started_at=NOW)])
"""
from typing import Optional
from datetime import datetime, timedelta, timezone

from domain.models import (
    ExerciseRef,
    JoinedSet,
    MuscleGroup,
    SetType,
    WorkoutSession,
)

# Import all fake implementations
from tests.fakes.session_repository import FakeSessionRepository
from tests.fakes.set_repository import FakeSetRepository


# Wednesday, 2024-01-17 18:00 UTC
NOW = datetime(2024, 1, 17, 18, 0, tzinfo=timezone.utc)


# =============================================================================
# Factory Functions
# =============================================================================


_MISSING = object()


def make_session(
    session_id: str,
    *,
    started_at: datetime,
    duration: Optional[timedelta] = timedelta(hours=1),
    user_id: str = "test_user",
) -> WorkoutSession:
    """
    Create a WorkoutSession.

    Args:
        session_id: Session ID
        started_at: Start timestamp
        duration: Length of the session, or None for one still in progress
        user_id: Owning user

    Returns:
        WorkoutSession
    """
    return WorkoutSession(
        id=session_id,
        user_id=user_id,
        started_at=started_at,
        ended_at=started_at + duration if duration is not None else None,
    )


def make_set(
    set_id: str,
    *,
    session_id: str = "s1",
    exercise_id: str = "ex_bench",
    weight: float = 100,
    reps: int = 8,
    set_type: SetType = SetType.WORKING,
    is_pr: bool = False,
    logged_at: datetime = NOW,
    set_number: int = 1,
    exercise_name=_MISSING,
    muscle_group=_MISSING,
) -> JoinedSet:
    """
    Create a JoinedSet.

    The exercise join defaults to "Barbell Bench Press" / chest. Pass
    ``exercise_name=None`` and ``muscle_group=None`` to simulate a join
    that did not resolve.
    """
    name = "Barbell Bench Press" if exercise_name is _MISSING else exercise_name
    muscle = MuscleGroup.CHEST if muscle_group is _MISSING else muscle_group

    exercise = None
    if name is not None or muscle is not None:
        exercise = ExerciseRef(name=name, primary_muscle_group=muscle)

    return JoinedSet(
        id=set_id,
        session_id=session_id,
        exercise_id=exercise_id,
        weight=weight,
        reps=reps,
        set_type=set_type,
        is_pr=is_pr,
        logged_at=logged_at,
        set_number=set_number,
        exercise=exercise,
    )


__all__ = [
    "FakeSessionRepository",
    "FakeSetRepository",
    "NOW",
    "make_session",
    "make_set",
]
