"""
Supabase Set Repository Implementation.

This module implements the SetRepository protocol using Supabase.
Reads the workout_sets table joined with exercises (name, primary muscle
group) and, when scoping by user, with workout_sessions.
"""
from typing import Optional, List, Dict, Any, Sequence
from datetime import datetime
import logging

from pydantic import ValidationError
from supabase import Client

from application.exceptions import RepositoryError
from domain.models import ExerciseRef, JoinedSet, MuscleGroup

logger = logging.getLogger(__name__)

SET_COLUMNS = (
    "id, session_id, exercise_id, set_number, weight, reps, set_type, is_pr, logged_at, "
    "exercise:exercises(name, primary_muscle_group)"
)
USER_JOIN = "workout_sessions!inner(user_id)"


def exercise_ref_from_join(exercise: Any) -> Optional[ExerciseRef]:
    """
    Parse the embedded exercise of a set row.

    PostgREST returns the embed as an object or a one-element list
    depending on the relationship. Unknown muscle groups resolve to None
    rather than failing the row.
    """
    if isinstance(exercise, list):
        exercise = exercise[0] if exercise else None
    if not isinstance(exercise, dict):
        return None

    muscle = exercise.get("primary_muscle_group")
    try:
        muscle_group = MuscleGroup(muscle) if muscle else None
    except ValueError:
        logger.warning(f"Unknown muscle group in exercise join: {muscle}")
        muscle_group = None

    return ExerciseRef(name=exercise.get("name"), primary_muscle_group=muscle_group)


def set_from_row(row: Dict[str, Any]) -> Optional[JoinedSet]:
    """Convert a workout_sets row, or None if the row is malformed."""
    data = {k: v for k, v in row.items() if k not in ("exercise", "workout_sessions")}
    data["exercise"] = exercise_ref_from_join(row.get("exercise"))
    try:
        return JoinedSet.model_validate(data)
    except ValidationError as e:
        logger.warning(f"Skipping malformed set row {row.get('id')}: {e}")
        return None


class SupabaseSetRepository:
    """
    Supabase implementation of SetRepository.

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

    def _select(self, *, scope_to_user: bool):
        columns = f"{SET_COLUMNS}, {USER_JOIN}" if scope_to_user else SET_COLUMNS
        return self._client.table("workout_sets").select(columns)

    def list_sets(
        self,
        *,
        session_ids: Optional[Sequence[str]] = None,
        exercise_id: Optional[str] = None,
        user_id: Optional[str] = None,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> List[JoinedSet]:
        """List logged sets joined with exercise metadata, oldest first."""
        if session_ids is not None and not session_ids:
            return []

        try:
            query = self._select(scope_to_user=user_id is not None)

            if session_ids is not None:
                query = query.in_("session_id", list(session_ids))
            if exercise_id is not None:
                query = query.eq("exercise_id", exercise_id)
            if user_id is not None:
                query = query.eq("workout_sessions.user_id", user_id)
            if start is not None:
                query = query.gte("logged_at", start.isoformat())
            if end is not None:
                query = query.lte("logged_at", end.isoformat())

            result = query.order("logged_at").execute()

        except Exception as e:
            logger.exception(f"Error fetching sets: {e}")
            raise RepositoryError("Failed to fetch logged sets") from e

        sets = [set_from_row(row) for row in result.data or []]
        return [s for s in sets if s is not None]

    def list_pr_sets(
        self,
        user_id: str,
        since: datetime,
    ) -> List[JoinedSet]:
        """List PR-flagged sets since a moment, newest first."""
        try:
            result = self._select(scope_to_user=True) \
                .eq("is_pr", True) \
                .eq("workout_sessions.user_id", user_id) \
                .gte("logged_at", since.isoformat()) \
                .order("logged_at", desc=True) \
                .execute()

        except Exception as e:
            logger.exception(f"Error fetching PR sets for user {user_id}: {e}")
            raise RepositoryError(f"Failed to fetch PR sets for user {user_id}") from e

        sets = [set_from_row(row) for row in result.data or []]
        return [s for s in sets if s is not None]
