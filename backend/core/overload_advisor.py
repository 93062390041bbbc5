"""
Progressive Overload Advisor.

Suggests the next weight/rep target for an exercise from the working sets
of its most recent completed session. The suggestion comes from a small,
auditable rule table keyed by training style:

    Style        Condition  Suggested weight  Suggested reps
    hypertrophy  R >= 12    W + 5             8
    hypertrophy  R < 12     W                 R + 1
    strength     R >= 5     W + 10            3
    strength     R < 5      W                 R + 1
    mixed        R >= 10    W + 5             R - 2
    mixed        R < 10     W                 R + 1

W and R are the weight and reps of the best working set (highest
weight x reps). The table is plain configuration (``OverloadPolicy``) and
callers can inject their own mapping without changing ``suggest_next``.
"""
from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Union
import logging

from backend.core.calendar import instant
from domain.models import LoggedSet, TrainingStyle, WorkoutSession

logger = logging.getLogger(__name__)


# =============================================================================
# Policy Table
# =============================================================================


@dataclass(frozen=True)
class OverloadPolicy:
    """
    Progression rule for one training style.

    When the best set reaches ``rep_threshold`` reps the weight goes up by
    ``weight_increment`` and reps reset to ``target_reps`` (or drop by
    ``rep_drop`` when no fixed target is set). Below the threshold the
    weight holds and reps go up by ``rep_increment``.

    Message templates may use ``{weight}``, ``{reps}``,
    ``{suggested_weight}``, ``{suggested_reps}`` and ``{unit}``.
    """
    rep_threshold: int
    weight_increment: float
    progress_message: str
    hold_message: str
    target_reps: Optional[int] = None
    rep_drop: int = 0
    rep_increment: int = 1


DEFAULT_POLICIES: Dict[TrainingStyle, OverloadPolicy] = {
    TrainingStyle.HYPERTROPHY: OverloadPolicy(
        rep_threshold=12,
        weight_increment=5,
        target_reps=8,
        progress_message=(
            "You hit {reps} reps last time -- bump up to {suggested_weight} {unit} "
            "and aim for {suggested_reps}+ reps"
        ),
        hold_message="Try to beat {reps} reps at {weight} {unit}",
    ),
    TrainingStyle.STRENGTH: OverloadPolicy(
        rep_threshold=5,
        weight_increment=10,
        target_reps=3,
        progress_message=(
            "You hit {reps} reps -- try {suggested_weight} {unit} for {suggested_reps}+ reps"
        ),
        hold_message="Try to add a rep at {weight} {unit}",
    ),
    TrainingStyle.MIXED: OverloadPolicy(
        rep_threshold=10,
        weight_increment=5,
        rep_drop=2,
        progress_message="Progress to {suggested_weight} {unit}, aim for {suggested_reps}+ reps",
        hold_message="Try {suggested_reps} reps at {weight} {unit}",
    ),
}


# =============================================================================
# Response DTOs
# =============================================================================


@dataclass(frozen=True)
class OverloadSuggestion:
    """Next target for an exercise, derived fresh on every query."""
    last_weight: float
    last_reps: int
    last_sets: int  # working sets considered, for "based on N sets"
    suggested_weight: float
    suggested_reps: int
    message: str
    training_style: TrainingStyle


# =============================================================================
# Advisor
# =============================================================================


def _format_weight(weight: float) -> str:
    weight = float(weight)
    if weight.is_integer():
        return str(int(weight))
    return f"{round(weight, 2):g}"


def best_working_set(sets: Sequence[LoggedSet]) -> Optional[LoggedSet]:
    """
    The working set with the highest weight x reps.

    Ties go to the earliest ``logged_at``; sets with identical volume and
    timestamp keep input order (first wins).
    """
    best: Optional[LoggedSet] = None
    for logged in sets:
        if not logged.is_working:
            continue
        if best is None or logged.volume > best.volume:
            best = logged
        elif (
            logged.volume == best.volume
            and instant(logged.logged_at) < instant(best.logged_at)
        ):
            best = logged
    return best


def suggest_next(
    last_working_sets: Sequence[LoggedSet],
    training_style: Union[TrainingStyle, str] = TrainingStyle.HYPERTROPHY,
    *,
    policies: Mapping[TrainingStyle, OverloadPolicy] = DEFAULT_POLICIES,
    weight_unit: str = "lbs",
) -> Optional[OverloadSuggestion]:
    """
    Suggest the next weight/rep target for an exercise.

    Args:
        last_working_sets: Sets of one exercise from its most recent
            completed session; non-working sets are ignored
        training_style: Policy selector
        policies: Rule table keyed by training style
        weight_unit: Unit shown in the message

    Returns:
        OverloadSuggestion, or None when there is no working set to
        extrapolate from

    Raises:
        ValueError: If training_style is not a known style
        KeyError: If ``policies`` has no rule for the style
    """
    style = TrainingStyle(training_style)
    policy = policies[style]

    working = [logged for logged in last_working_sets if logged.is_working]
    best = best_working_set(working)
    if best is None:
        return None

    weight = float(best.weight)
    reps = best.reps

    if reps >= policy.rep_threshold:
        suggested_weight = weight + policy.weight_increment
        if policy.target_reps is not None:
            suggested_reps = policy.target_reps
        else:
            suggested_reps = max(1, reps - policy.rep_drop)
        template = policy.progress_message
    else:
        suggested_weight = weight
        suggested_reps = reps + policy.rep_increment
        template = policy.hold_message

    message = template.format(
        weight=_format_weight(weight),
        reps=reps,
        suggested_weight=_format_weight(suggested_weight),
        suggested_reps=suggested_reps,
        unit=weight_unit,
    )

    return OverloadSuggestion(
        last_weight=weight,
        last_reps=reps,
        last_sets=len(working),
        suggested_weight=suggested_weight,
        suggested_reps=suggested_reps,
        message=message,
        training_style=style,
    )


def latest_session_sets(
    sets: Iterable[LoggedSet],
    sessions: Iterable[WorkoutSession],
    exercise_id: str,
) -> List[LoggedSet]:
    """
    Sets of ``exercise_id`` from the most recent completed session containing it.

    Returns:
        Those sets ordered by set_number, or an empty list if the exercise
        was never performed in a completed session
    """
    completed = {s.id: s for s in sessions if s.is_completed}

    by_session: Dict[str, List[LoggedSet]] = {}
    for logged in sets:
        if logged.exercise_id == exercise_id and logged.session_id in completed:
            by_session.setdefault(logged.session_id, []).append(logged)

    if not by_session:
        return []

    latest_id = max(by_session, key=lambda sid: instant(completed[sid].started_at))
    return sorted(by_session[latest_id], key=lambda s: s.set_number)
