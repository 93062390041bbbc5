"""
Logged set entities.

A LoggedSet is one performed set as written by the logging layer. Reads
that join exercise metadata return JoinedSet, whose exercise reference
may be missing or partial when the join does not resolve.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from domain.models.enums import MuscleGroup, SetType


class LoggedSet(BaseModel):
    """
    One performed set.

    ``weight`` is stored in the user's unit; the analytics never convert it.

    Examples:
        >>> from datetime import datetime, timezone
        >>> s = LoggedSet(
        ...     id="set1",
        ...     session_id="s1",
        ...     exercise_id="ex_bench",
        ...     weight=100,
        ...     reps=8,
        ...     logged_at=datetime(2024, 1, 15, 18, 5, tzinfo=timezone.utc),
        ... )
        >>> s.volume
        800.0
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Set identifier")
    session_id: str = Field(..., min_length=1, description="Owning session")
    exercise_id: str = Field(..., min_length=1, description="Exercise performed")
    weight: float = Field(..., ge=0, description="Load in the user's unit")
    reps: int = Field(..., ge=1, description="Repetitions completed")
    set_type: SetType = Field(default=SetType.WORKING, description="Set role")
    is_pr: bool = Field(default=False, description="Flagged as a personal record")
    logged_at: datetime = Field(..., description="When the set was logged")
    set_number: int = Field(default=1, ge=1, description="Position within the exercise")

    @property
    def volume(self) -> float:
        """Weight times reps."""
        return float(self.weight) * self.reps

    @property
    def is_working(self) -> bool:
        return self.set_type == SetType.WORKING


class ExerciseRef(BaseModel):
    """Exercise columns carried along by a joined set read."""

    model_config = ConfigDict(frozen=True)

    name: Optional[str] = None
    primary_muscle_group: Optional[MuscleGroup] = None


class JoinedSet(LoggedSet):
    """
    A logged set with its exercise join.

    ``exercise`` is None when the exercise reference no longer resolves.
    """

    exercise: Optional[ExerciseRef] = Field(
        default=None, description="Joined exercise metadata, if it resolved"
    )

    @property
    def exercise_name(self) -> Optional[str]:
        if self.exercise is None or not self.exercise.name:
            return None
        return self.exercise.name

    @property
    def muscle_group(self) -> Optional[MuscleGroup]:
        if self.exercise is None:
            return None
        return self.exercise.primary_muscle_group
