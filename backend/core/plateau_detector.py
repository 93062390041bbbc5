"""
Plateau and regression detection.

Looks at the most recent completed sessions and, per exercise, compares
the best working set (highest weight x reps) of each session:

- plateau: the same weight AND reps in 2+ consecutive sessions, counted
  from the most recent one
- regression: weight and reps both non-increasing, with at least one
  strictly lower, across 2+ sessions counted from the most recent one

A plateau takes precedence over a regression. Each finding comes with a
fixed list of interventions.
"""
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Dict, Iterable, List, Mapping, Optional
import logging

from backend.core.calendar import instant
from backend.core.volume_landmarks import VOLUME_LANDMARKS
from domain.models import JoinedSet, MuscleGroup, WorkoutSession

logger = logging.getLogger(__name__)

DEFAULT_SESSION_LIMIT = 3


class PlateauType(str, Enum):
    PLATEAU = "plateau"
    REGRESSION = "regression"


@dataclass(frozen=True)
class Intervention:
    type: str  # deload, rep_range, exercise_swap, technique, volume
    title: str
    description: str
    replacement_exercise: Optional[str] = None


@dataclass(frozen=True)
class PlateauResult:
    exercise_id: str
    exercise_name: str
    muscle_group: Optional[MuscleGroup]
    plateau_type: PlateauType
    session_count: int
    last_weight: float
    last_reps: int
    interventions: List[Intervention] = field(default_factory=list)


@dataclass(frozen=True)
class _SessionBest:
    started_at: datetime
    weight: float
    reps: int


def detect_pattern(bests: List[_SessionBest]) -> Optional[PlateauType]:
    """Classify per-session bests ordered most recent first."""
    if len(bests) < 2:
        return None

    latest = bests[0]
    identical = 1
    for best in bests[1:]:
        if best.weight == latest.weight and best.reps == latest.reps:
            identical += 1
        else:
            break
    if identical >= 2:
        return PlateauType.PLATEAU

    decreasing = 1
    for newer, older in zip(bests, bests[1:]):
        if (
            newer.weight <= older.weight
            and newer.reps <= older.reps
            and (newer.weight < older.weight or newer.reps < older.reps)
        ):
            decreasing += 1
        else:
            break
    if decreasing >= 2:
        return PlateauType.REGRESSION

    return None


def interventions_for(
    plateau_type: PlateauType,
    muscle_group: Optional[MuscleGroup] = None,
    replacement_exercise: Optional[str] = None,
) -> List[Intervention]:
    """Standard interventions for a plateau or regression."""
    if plateau_type == PlateauType.REGRESSION:
        deload_text = (
            "Your performance is declining -- reduce volume by 50% for 1 week "
            "to allow full recovery."
        )
    else:
        deload_text = (
            "Reduce volume by 50% for 1 week. Strategic deloads let accumulated "
            "fatigue dissipate while maintaining adaptations."
        )

    if replacement_exercise:
        swap_text = (
            f"Try switching to {replacement_exercise}. A new movement variation "
            "provides a novel stimulus for the same muscle group."
        )
    else:
        swap_text = (
            "Try a different variation of this exercise. Changing equipment type "
            "or grip can provide a new stimulus."
        )

    if muscle_group is not None:
        vl = VOLUME_LANDMARKS[muscle_group]
        volume = Intervention(
            type="volume",
            title="Adjust weekly volume",
            description=(
                f"Check your weekly sets for {muscle_group.value}. "
                f"MEV is {vl.mev} sets, the optimal range (MAV) is "
                f"{vl.mav_min}-{vl.mav_max} sets, and MRV is {vl.mrv} sets. "
                "Below MEV, add volume; near MRV, consider a deload."
            ),
        )
    else:
        volume = Intervention(
            type="volume",
            title="Check weekly volume",
            description=(
                "Review your weekly set count for this muscle group. You may need "
                "more volume to drive adaptation, or less if you exceed your "
                "recovery capacity."
            ),
        )

    return [
        Intervention(type="deload", title="Take a deload week", description=deload_text),
        Intervention(
            type="rep_range",
            title="Switch rep range",
            description=(
                "Switch from 8-10 reps to 12-15 reps for 2 weeks to change the "
                "training stimulus."
            ),
        ),
        Intervention(
            type="exercise_swap",
            title="Swap exercise variation",
            description=swap_text,
            replacement_exercise=replacement_exercise,
        ),
        Intervention(
            type="technique",
            title="Modify technique",
            description=(
                "Try a different grip width or stance, or slow the eccentric to "
                "3 seconds."
            ),
        ),
        volume,
    ]


def detect_plateaus(
    sessions: Iterable[WorkoutSession],
    sets: Iterable[JoinedSet],
    *,
    session_limit: int = DEFAULT_SESSION_LIMIT,
    replacements: Optional[Mapping[str, str]] = None,
) -> List[PlateauResult]:
    """
    Detect plateaus and regressions across recent sessions.

    Args:
        sessions: Candidate sessions; only completed ones count
        sets: Sets of those sessions joined with exercise metadata
        session_limit: Number of most recent completed sessions examined
        replacements: Optional exercise_id -> replacement exercise name

    Returns:
        One result per exercise showing a pattern, in first-seen order
    """
    recent = sorted(
        (s for s in sessions if s.is_completed),
        key=lambda s: instant(s.started_at),
        reverse=True,
    )[:session_limit]
    if len(recent) < 2:
        return []

    started = {s.id: s.started_at for s in recent}
    names: Dict[str, str] = {}
    muscles: Dict[str, Optional[MuscleGroup]] = {}
    bests: Dict[str, Dict[str, JoinedSet]] = {}

    for logged in sets:
        if not logged.is_working or logged.session_id not in started:
            continue
        if logged.exercise_name is None:
            logger.warning("Skipping set %s with unresolved exercise", logged.id)
            continue

        names.setdefault(logged.exercise_id, logged.exercise_name)
        muscles.setdefault(logged.exercise_id, logged.muscle_group)
        per_session = bests.setdefault(logged.exercise_id, {})
        existing = per_session.get(logged.session_id)
        if existing is None or logged.volume > existing.volume:
            per_session[logged.session_id] = logged

    results: List[PlateauResult] = []
    for exercise_id, per_session in bests.items():
        if len(per_session) < 2:
            continue

        ordered = sorted(
            (
                _SessionBest(started[sid], float(best.weight), best.reps)
                for sid, best in per_session.items()
            ),
            key=lambda b: instant(b.started_at),
            reverse=True,
        )
        plateau_type = detect_pattern(ordered)
        if plateau_type is None:
            continue

        replacement = (replacements or {}).get(exercise_id)
        results.append(PlateauResult(
            exercise_id=exercise_id,
            exercise_name=names[exercise_id],
            muscle_group=muscles[exercise_id],
            plateau_type=plateau_type,
            session_count=len(ordered),
            last_weight=ordered[0].weight,
            last_reps=ordered[0].reps,
            interventions=interventions_for(
                plateau_type, muscles[exercise_id], replacement
            ),
        ))

    return results
