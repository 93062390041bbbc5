"""
Fake Session Repository for Testing.

In-memory implementation of SessionRepository for fast, isolated testing.
"""
from typing import Optional, List, Dict, Iterable
from datetime import datetime
from collections import defaultdict

from application.exceptions import RepositoryError
from domain.models import WorkoutSession


class FakeSessionRepository:
    """
    In-memory fake implementation of SessionRepository.

    Stores sessions per user. Call ``fail_with()`` to make every read
    raise RepositoryError, simulating an unreachable backend.
    """

    def __init__(self, sessions: Optional[Iterable[WorkoutSession]] = None):
        """Initialize with optional seed sessions."""
        self._sessions: Dict[str, List[WorkoutSession]] = defaultdict(list)
        self._error: Optional[str] = None
        self.calls: List[Dict[str, object]] = []
        if sessions:
            self.seed(sessions)

    def reset(self) -> None:
        """Clear all stored data and injected failures."""
        self._sessions.clear()
        self._error = None
        self.calls.clear()

    def seed(self, sessions: Iterable[WorkoutSession]) -> None:
        """Add sessions to the store."""
        for session in sessions:
            self._sessions[session.user_id].append(session)

    def fail_with(self, message: str = "backend unavailable") -> None:
        """Make subsequent reads raise RepositoryError."""
        self._error = message

    def list_completed_sessions(
        self,
        user_id: str,
        *,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        limit: Optional[int] = None,
    ) -> List[WorkoutSession]:
        """List a user's completed sessions, newest first."""
        self.calls.append({"user_id": user_id, "start": start, "end": end, "limit": limit})
        if self._error:
            raise RepositoryError(self._error)

        sessions = [
            s for s in self._sessions.get(user_id, [])
            if s.is_completed
            and (start is None or s.started_at >= start)
            and (end is None or s.started_at <= end)
        ]
        sessions.sort(key=lambda s: s.started_at, reverse=True)
        if limit is not None:
            sessions = sessions[:limit]
        return sessions
