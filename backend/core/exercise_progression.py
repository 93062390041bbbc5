"""
Exercise progression and training frequency over a trailing window.

These feed the progress charts: the heaviest working set per day for an
exercise, which muscle groups were trained on each day, and weekly set
counts per muscle group.
"""
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Dict, Iterable, List, Tuple

from backend.core.calendar import (
    local_date,
    localize,
    on_or_after,
    week_start,
    window_start,
)
from domain.models import JoinedSet, LoggedSet, MuscleGroup

DEFAULT_PROGRESSION_WINDOW_DAYS = 90


@dataclass(frozen=True)
class ProgressionPoint:
    """Heaviest working set on one day."""
    date: date
    weight: float
    reps: int


@dataclass(frozen=True)
class FrequencyDay:
    """Muscle groups trained on one day."""
    date: date
    muscle_groups: Tuple[MuscleGroup, ...]

    @property
    def muscle_group_count(self) -> int:
        return len(self.muscle_groups)


@dataclass(frozen=True)
class WeeklyMuscleVolume:
    """Set counts per muscle group for one Monday-anchored week."""
    week_start: date
    set_counts: Dict[MuscleGroup, int] = field(default_factory=dict)


def exercise_progression(
    sets: Iterable[LoggedSet],
    now: datetime,
    window_days: int = DEFAULT_PROGRESSION_WINDOW_DAYS,
) -> List[ProgressionPoint]:
    """
    Heaviest working set per local day, oldest day first.

    ``sets`` should be the sets of a single exercise. On equal weight the
    earlier logged set wins.
    """
    since = window_start(now, window_days)
    ordered = sorted(
        (s for s in sets if s.is_working and on_or_after(s.logged_at, since)),
        key=lambda s: localize(s.logged_at, now.tzinfo),
    )

    by_day: Dict[date, LoggedSet] = {}
    for logged in ordered:
        day = local_date(logged.logged_at, now.tzinfo)
        existing = by_day.get(day)
        if existing is None or logged.weight > existing.weight:
            by_day[day] = logged

    return [
        ProgressionPoint(date=day, weight=float(best.weight), reps=best.reps)
        for day, best in sorted(by_day.items())
    ]


def training_frequency(
    sets: Iterable[JoinedSet],
    now: datetime,
    window_days: int = DEFAULT_PROGRESSION_WINDOW_DAYS,
) -> List[FrequencyDay]:
    """Distinct muscle groups trained per local day, oldest day first."""
    since = window_start(now, window_days)

    by_day: Dict[date, Dict[MuscleGroup, None]] = {}
    for logged in sets:
        if logged.muscle_group is None or not on_or_after(logged.logged_at, since):
            continue
        day = local_date(logged.logged_at, now.tzinfo)
        by_day.setdefault(day, {})[logged.muscle_group] = None

    return [
        FrequencyDay(date=day, muscle_groups=tuple(muscles))
        for day, muscles in sorted(by_day.items())
    ]


def weekly_muscle_volume(
    sets: Iterable[JoinedSet],
    now: datetime,
    window_days: int = DEFAULT_PROGRESSION_WINDOW_DAYS,
) -> List[WeeklyMuscleVolume]:
    """Set counts per muscle group per week, oldest week first."""
    since = window_start(now, window_days)

    weeks: Dict[date, Dict[MuscleGroup, int]] = {}
    for logged in sets:
        if logged.muscle_group is None or not on_or_after(logged.logged_at, since):
            continue
        monday = week_start(local_date(logged.logged_at, now.tzinfo))
        counts = weeks.setdefault(monday, {})
        counts[logged.muscle_group] = counts.get(logged.muscle_group, 0) + 1

    return [
        WeeklyMuscleVolume(week_start=monday, set_counts=counts)
        for monday, counts in sorted(weeks.items())
    ]
