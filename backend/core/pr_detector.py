"""
Personal record detection.

Resolves sets flagged as personal records into display records. The
flag itself is set by the logging layer (see ``is_new_pr``); this module
only selects, orders and resolves flagged sets.

A set whose exercise join no longer resolves still yields a record, with
a placeholder name and ``RecordStatus.MISSING_EXERCISE``, so one bad join
never drops the rest of the batch.
"""
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Collection, Iterable, List, Optional
import logging

from backend.core.calendar import localize, on_or_after, window_start
from domain.models import JoinedSet, LoggedSet

logger = logging.getLogger(__name__)


UNKNOWN_EXERCISE_NAME = "Unknown"
DEFAULT_PR_WINDOW_DAYS = 7
MAX_RECENT_PRS = 10


class RecordStatus(str, Enum):
    """Whether a record resolved all of its joined metadata."""

    COMPLETE = "complete"
    MISSING_EXERCISE = "missing_exercise"


@dataclass(frozen=True)
class PersonalRecord:
    """A personal record ready for display."""
    exercise_name: str
    weight: float
    reps: int
    date: datetime
    exercise_id: str
    status: RecordStatus = RecordStatus.COMPLETE

    @property
    def is_complete(self) -> bool:
        return self.status == RecordStatus.COMPLETE


def _resolve(logged: JoinedSet) -> PersonalRecord:
    name = logged.exercise_name
    if name is None:
        logger.warning(
            "PR set %s references unresolved exercise %s",
            logged.id,
            logged.exercise_id,
        )
        return PersonalRecord(
            exercise_name=UNKNOWN_EXERCISE_NAME,
            weight=logged.weight,
            reps=logged.reps,
            date=logged.logged_at,
            exercise_id=logged.exercise_id,
            status=RecordStatus.MISSING_EXERCISE,
        )

    return PersonalRecord(
        exercise_name=name,
        weight=logged.weight,
        reps=logged.reps,
        date=logged.logged_at,
        exercise_id=logged.exercise_id,
    )


def recent_prs(
    sets: Iterable[JoinedSet],
    now: datetime,
    window_days: int = DEFAULT_PR_WINDOW_DAYS,
    *,
    completed_session_ids: Optional[Collection[str]] = None,
    limit: int = MAX_RECENT_PRS,
) -> List[PersonalRecord]:
    """
    Personal records logged within a trailing window, newest first.

    Args:
        sets: Candidate sets (already scoped to the querying user)
        now: Reference time
        window_days: Trailing window length in days
        completed_session_ids: IDs of the user's completed sessions; only
            sets of these sessions count. ``None`` skips the check, so
            callers whose sets may include in-progress sessions must pass it
        limit: Maximum records returned

    Returns:
        At most ``limit`` records ordered by logged_at descending; equal
        timestamps keep their input order
    """
    since = window_start(now, window_days)

    flagged = [
        logged for logged in sets
        if logged.is_pr
        and on_or_after(logged.logged_at, since)
        and (completed_session_ids is None or logged.session_id in completed_session_ids)
    ]
    flagged.sort(key=lambda s: localize(s.logged_at, now.tzinfo), reverse=True)

    return [_resolve(logged) for logged in flagged[:limit]]


def is_new_pr(weight: float, reps: int, history: Iterable[LoggedSet]) -> bool:
    """
    Decide whether a candidate set beats the user's history for an exercise.

    A set is a PR unless some earlier set matched or exceeded it on both
    weight and reps.

    Args:
        weight: Candidate weight
        reps: Candidate reps
        history: Prior sets of the same exercise

    Returns:
        True if no prior set dominates the candidate
    """
    return not any(
        prior.weight >= weight and prior.reps >= reps
        for prior in history
    )
