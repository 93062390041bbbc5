"""
Achievement badge evaluation.

Decides which badges a user has newly earned from a snapshot of their
sessions and sets. Persisting awards and posting feed events belong to
the caller.
"""
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Collection, List, Sequence
import logging

from backend.core.calendar import local_date
from backend.core.streak_calculator import current_streak
from backend.core.weekly_aggregator import sessions_in_week, weekly_summary
from domain.models import LoggedSet, WorkoutSession

logger = logging.getLogger(__name__)

VOLUME_RECORD_LOOKBACK_WEEKS = 52
CONSISTENCY_WEEKS = 4
CONSISTENCY_DAYS_PER_WEEK = 4
CENTURY_REPS = 100


@dataclass(frozen=True)
class BadgeDefinition:
    type: str
    name: str
    description: str


BADGE_DEFINITIONS: List[BadgeDefinition] = [
    BadgeDefinition("iron_streak_3", "Iron Streak (3)", "3-day workout streak"),
    BadgeDefinition("iron_streak_7", "Iron Streak (7)", "7-day workout streak"),
    BadgeDefinition("iron_streak_14", "Iron Streak (14)", "14-day workout streak"),
    BadgeDefinition("iron_streak_30", "Iron Streak (30)", "30-day workout streak"),
    BadgeDefinition("pr_hunter", "PR Hunter", "Hit a new personal record"),
    BadgeDefinition("century_club", "Century Club", "Complete a 100-rep set"),
    BadgeDefinition("volume_king", "Volume King", "New weekly volume record"),
    BadgeDefinition(
        "consistency_crown", "Consistency Crown", "4+ workouts/week for a full month"
    ),
]

STREAK_THRESHOLDS = [
    (3, "iron_streak_3"),
    (7, "iron_streak_7"),
    (14, "iron_streak_14"),
    (30, "iron_streak_30"),
]


def is_weekly_volume_record(
    sessions: Sequence[WorkoutSession],
    sets: Sequence[LoggedSet],
    now: datetime,
    lookback_weeks: int = VOLUME_RECORD_LOOKBACK_WEEKS,
) -> bool:
    """
    True if this week's volume beats every earlier week that had sessions.

    A week with zero volume is never a record.
    """
    current = weekly_summary(sessions, sets, now).total_volume
    if current <= 0:
        return False

    for weeks_back in range(1, lookback_weeks + 1):
        week_of = now - timedelta(weeks=weeks_back)
        if not sessions_in_week(sessions, week_of):
            continue
        if weekly_summary(sessions, sets, week_of).total_volume >= current:
            return False

    return True


def is_consistent_month(
    sessions: Sequence[WorkoutSession],
    now: datetime,
    weeks: int = CONSISTENCY_WEEKS,
    days_per_week: int = CONSISTENCY_DAYS_PER_WEEK,
) -> bool:
    """True if each of the last ``weeks`` weeks, this one included, had enough training days."""
    for weeks_back in range(weeks):
        week_of = now - timedelta(weeks=weeks_back)
        days = {
            local_date(s.started_at, now.tzinfo)
            for s in sessions_in_week(sessions, week_of)
        }
        if len(days) < days_per_week:
            return False
    return True


def evaluate_badges(
    sessions: Sequence[WorkoutSession],
    sets: Sequence[LoggedSet],
    now: datetime,
    *,
    earned: Collection[str] = (),
) -> List[str]:
    """
    Badge types newly earned from the snapshot.

    Args:
        sessions: The user's sessions (in-progress ones are ignored)
        sets: The user's logged sets
        now: Reference time
        earned: Badge types already awarded

    Returns:
        Newly earned badge types in definition order
    """
    earned_set = set(earned)
    qualified = set()

    streak = current_streak(sessions, now)
    for threshold, badge_type in STREAK_THRESHOLDS:
        if streak >= threshold:
            qualified.add(badge_type)

    today = now.date()
    if any(s.is_pr and local_date(s.logged_at, now.tzinfo) == today for s in sets):
        qualified.add("pr_hunter")

    if any(s.reps >= CENTURY_REPS for s in sets):
        qualified.add("century_club")

    if "volume_king" not in earned_set and is_weekly_volume_record(sessions, sets, now):
        qualified.add("volume_king")

    if "consistency_crown" not in earned_set and is_consistent_month(sessions, now):
        qualified.add("consistency_crown")

    newly_earned = [
        badge.type for badge in BADGE_DEFINITIONS
        if badge.type in qualified and badge.type not in earned_set
    ]
    if newly_earned:
        logger.info("Newly earned badges: %s", ", ".join(newly_earned))
    return newly_earned
