"""
Supabase Session Repository Implementation.

This module implements the SessionRepository protocol using Supabase.
Reads the workout_sessions table; only completed sessions (non-null
ended_at) are returned.
"""
from typing import Optional, List, Dict, Any
from datetime import datetime
import logging

from pydantic import ValidationError
from supabase import Client

from application.exceptions import RepositoryError
from domain.models import WorkoutSession

logger = logging.getLogger(__name__)

SESSION_COLUMNS = "id, user_id, started_at, ended_at, split_type, training_style"


def session_from_row(row: Dict[str, Any]) -> Optional[WorkoutSession]:
    """Convert a workout_sessions row, or None if the row is malformed."""
    try:
        return WorkoutSession.model_validate(row)
    except ValidationError as e:
        logger.warning(f"Skipping malformed session row {row.get('id')}: {e}")
        return None


class SupabaseSessionRepository:
    """
    Supabase implementation of SessionRepository.

    Query failures are raised as RepositoryError, never returned as an
    empty list.
    """

    def __init__(self, client: Client):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected)
        """
        self._client = client

    def list_completed_sessions(
        self,
        user_id: str,
        *,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        limit: Optional[int] = None,
    ) -> List[WorkoutSession]:
        """List a user's completed sessions, newest first."""
        try:
            query = self._client.table("workout_sessions") \
                .select(SESSION_COLUMNS) \
                .eq("user_id", user_id) \
                .not_.is_("ended_at", "null")

            if start is not None:
                query = query.gte("started_at", start.isoformat())
            if end is not None:
                query = query.lte("started_at", end.isoformat())

            query = query.order("started_at", desc=True)
            if limit is not None:
                query = query.limit(limit)

            result = query.execute()

        except Exception as e:
            logger.exception(f"Error fetching sessions for user {user_id}: {e}")
            raise RepositoryError(f"Failed to fetch sessions for user {user_id}") from e

        sessions = [session_from_row(row) for row in result.data or []]
        return [s for s in sessions if s is not None]
