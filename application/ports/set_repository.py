"""
Set Repository Interface (Port).

This module defines the abstract interface for reading logged sets.
Every read returns JoinedSet values carrying the exercise name and
primary muscle group when the exercise join resolves.
"""
from typing import Protocol, Optional, List, Sequence
from datetime import datetime

from domain.models import JoinedSet


class SetRepository(Protocol):
    """
    Abstract interface for logged set reads.

    Implementations raise RepositoryError when the fetch fails; an empty
    list always means "no data", never "fetch failed".
    """

    def list_sets(
        self,
        *,
        session_ids: Optional[Sequence[str]] = None,
        exercise_id: Optional[str] = None,
        user_id: Optional[str] = None,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> List[JoinedSet]:
        """
        List logged sets joined with exercise metadata.

        Filters combine with AND. ``user_id`` restricts to sets whose
        session is owned by that user.

        Args:
            session_ids: Only sets belonging to these sessions
            exercise_id: Only sets of this exercise
            user_id: Only sets from sessions owned by this user
            start: Only sets logged at or after this moment
            end: Only sets logged at or before this moment

        Returns:
            Sets ordered by logged_at ascending

        Raises:
            RepositoryError: If the backing store cannot be queried
        """
        ...

    def list_pr_sets(
        self,
        user_id: str,
        since: datetime,
    ) -> List[JoinedSet]:
        """
        List sets flagged as personal records since a moment.

        Args:
            user_id: Owning user ID
            since: Only sets logged at or after this moment

        Returns:
            PR sets ordered by logged_at descending

        Raises:
            RepositoryError: If the backing store cannot be queried
        """
        ...
