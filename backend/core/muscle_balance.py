"""
Muscle group balance.

Counts sets, not volume or reps, per primary muscle group over a trailing
window. It is a training-frequency signal, distinct from weekly volume.
"""
from collections import Counter
from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, List

from backend.core.calendar import on_or_after, window_start
from domain.models import JoinedSet, MuscleGroup

DEFAULT_BALANCE_WINDOW_DAYS = 30


@dataclass(frozen=True)
class BalanceEntry:
    """Set count for one muscle group."""
    muscle_group: MuscleGroup
    set_count: int


def muscle_balance(
    sets: Iterable[JoinedSet],
    now: datetime,
    window_days: int = DEFAULT_BALANCE_WINDOW_DAYS,
) -> List[BalanceEntry]:
    """
    Set count per muscle group within a trailing window.

    Groups with no sets are omitted, never zero-filled. Sets whose muscle
    group did not resolve are skipped.

    Returns:
        Entries ordered by set count descending, ties by first appearance
    """
    since = window_start(now, window_days)

    # Counter preserves insertion order, so the stable sort keeps ties
    # in first-seen order.
    counts: Counter = Counter()
    for logged in sets:
        if not on_or_after(logged.logged_at, since):
            continue
        muscle = logged.muscle_group
        if muscle is None:
            continue
        counts[muscle] += 1

    entries = [
        BalanceEntry(muscle_group=muscle, set_count=count)
        for muscle, count in counts.items()
    ]
    entries.sort(key=lambda e: e.set_count, reverse=True)
    return entries
