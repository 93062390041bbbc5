"""
Workout session entity.

A session is a single training occasion. Sessions still in progress
(no ``ended_at``) are excluded from completed-training aggregates such as the streak,
weekly summary and recent records.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from domain.models.enums import SplitType, TrainingStyle


class WorkoutSession(BaseModel):
    """
    A training occasion owned by one user.

    Examples:
        >>> from datetime import datetime, timezone
        >>> session = WorkoutSession(
        ...     id="s1",
        ...     user_id="u1",
        ...     started_at=datetime(2024, 1, 15, 18, 0, tzinfo=timezone.utc),
        ...     ended_at=datetime(2024, 1, 15, 19, 0, tzinfo=timezone.utc),
        ... )
        >>> session.is_completed
        True
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Session identifier")
    user_id: str = Field(..., min_length=1, description="Owning user")
    started_at: datetime = Field(..., description="When the session started")
    ended_at: Optional[datetime] = Field(
        default=None, description="When the session ended (None while in progress)"
    )
    split_type: Optional[SplitType] = Field(default=None, description="Split label")
    training_style: Optional[TrainingStyle] = Field(
        default=None, description="Training style the session was run with"
    )

    @model_validator(mode="after")
    def validate_timeline(self) -> "WorkoutSession":
        """A session cannot end before it starts."""
        if self.ended_at is not None and self.ended_at < self.started_at:
            raise ValueError("ended_at must not be earlier than started_at")
        return self

    @property
    def is_completed(self) -> bool:
        """True once the session has an end timestamp."""
        return self.ended_at is not None
