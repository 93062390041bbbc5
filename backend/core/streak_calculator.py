"""
Training streak calculation.

The streak is the number of consecutive local calendar days, ending today
or yesterday, on which at least one completed session started. A missed
"today" does not break the streak until the day has fully elapsed.
"""
from datetime import date, datetime, timedelta, tzinfo
from typing import Iterable, Optional, Set
import logging

from backend.core.calendar import local_date
from domain.models import WorkoutSession

logger = logging.getLogger(__name__)


def training_days(
    sessions: Iterable[WorkoutSession],
    tz: Optional[tzinfo] = None,
) -> Set[date]:
    """
    Distinct local start dates of completed sessions.

    A session running past midnight belongs to the day it started.
    """
    return {
        local_date(session.started_at, tz)
        for session in sessions
        if session.is_completed
    }


def current_streak(sessions: Iterable[WorkoutSession], now: datetime) -> int:
    """
    Count consecutive training days ending today (or yesterday).

    Args:
        sessions: Sessions in any order; in-progress sessions are ignored
        now: Reference time; its tzinfo defines the local calendar day

    Returns:
        Streak length in days, 0 when there is no recent training
    """
    days = training_days(sessions, now.tzinfo)
    if not days:
        return 0

    check = now.date()
    if check not in days:
        check -= timedelta(days=1)

    streak = 0
    while check in days:
        streak += 1
        check -= timedelta(days=1)

    logger.debug("Computed streak of %d day(s) from %d training day(s)", streak, len(days))
    return streak
