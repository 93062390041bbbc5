"""
Weekly training summary.

The week runs Monday 00:00 through Sunday 23:59:59 in the local zone of
the reference time. Sets are attributed to the week of their session's
start, not of their own timestamp.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, List, Sequence

from backend.core.calendar import in_window, local_date, week_bounds
from domain.models import LoggedSet, WorkoutSession


@dataclass(frozen=True)
class WeeklySummary:
    """Days trained, total volume and set count for one week."""
    days_this_week: int = 0
    total_volume: float = 0.0
    total_sets: int = 0


def sessions_in_week(
    sessions: Iterable[WorkoutSession],
    week_of: datetime,
) -> List[WorkoutSession]:
    """Completed sessions that started inside the week containing ``week_of``."""
    start, end = week_bounds(week_of)
    return [
        session for session in sessions
        if session.is_completed and in_window(session.started_at, start, end)
    ]


def weekly_summary(
    sessions: Iterable[WorkoutSession],
    sets: Sequence[LoggedSet],
    now: datetime,
) -> WeeklySummary:
    """
    Summarize the current week.

    Args:
        sessions: Candidate sessions; in-progress ones are ignored
        sets: Candidate sets; only those of qualifying sessions count
        now: Reference time anchoring the week

    Returns:
        WeeklySummary, all zero when nothing qualifies
    """
    week_sessions = sessions_in_week(sessions, now)
    if not week_sessions:
        return WeeklySummary()

    session_ids = {session.id for session in week_sessions}
    days = {local_date(session.started_at, now.tzinfo) for session in week_sessions}

    total_volume = 0.0
    total_sets = 0
    for logged in sets:
        if logged.session_id in session_ids:
            total_volume += logged.volume
            total_sets += 1

    return WeeklySummary(
        days_this_week=len(days),
        total_volume=total_volume,
        total_sets=total_sets,
    )


def weekly_volume(
    sessions: Iterable[WorkoutSession],
    sets: Sequence[LoggedSet],
    week_of: datetime,
) -> float:
    """Total volume of the week containing ``week_of``."""
    return weekly_summary(sessions, sets, week_of).total_volume
