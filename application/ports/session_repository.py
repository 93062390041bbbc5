"""
Session Repository Interface (Port).

This module defines the abstract interface for reading workout sessions.
Used by the TrainingAnalyticsService for streaks, weekly summaries,
plateau detection and badge evaluation.
"""
from typing import Protocol, Optional, List
from datetime import datetime

from domain.models import WorkoutSession


class SessionRepository(Protocol):
    """
    Abstract interface for workout session reads.

    Implementations must only return completed sessions (non-null end
    timestamp) and raise RepositoryError when the fetch fails.
    """

    def list_completed_sessions(
        self,
        user_id: str,
        *,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        limit: Optional[int] = None,
    ) -> List[WorkoutSession]:
        """
        List a user's completed sessions, newest first.

        Args:
            user_id: Owning user ID
            start: Only sessions started at or after this moment
            end: Only sessions started at or before this moment
            limit: Maximum sessions to return

        Returns:
            Completed sessions ordered by started_at descending

        Raises:
            RepositoryError: If the backing store cannot be queried
        """
        ...
