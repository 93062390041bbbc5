"""
Training Analytics Service.

Fetches snapshots through the repository ports and hands them to the
pure analytics in backend.core:
- Current streak and weekly summary
- Recent personal records and muscle balance
- Progressive overload suggestions
- Exercise progression, plateau detection and badge evaluation

Single-metric methods let RepositoryError propagate so callers can tell
"no data" from "fetch failed". get_dashboard() renders each widget
independently and degrades a failed widget to its empty state.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Collection, List, Optional, Union
import logging

from application.exceptions import RepositoryError
from application.ports import SessionRepository, SetRepository
from backend.core.badges import evaluate_badges
from backend.core.calendar import week_bounds, window_start
from backend.core.exercise_progression import ProgressionPoint, exercise_progression
from backend.core.muscle_balance import BalanceEntry, muscle_balance
from backend.core.overload_advisor import (
    OverloadSuggestion,
    latest_session_sets,
    suggest_next,
)
from backend.core.plateau_detector import (
    DEFAULT_SESSION_LIMIT,
    PlateauResult,
    detect_plateaus,
)
from backend.core.pr_detector import PersonalRecord, recent_prs
from backend.core.streak_calculator import current_streak
from backend.core.weekly_aggregator import WeeklySummary, weekly_summary
from backend.settings import Settings, get_settings
from domain.models import TrainingStyle

logger = logging.getLogger(__name__)


# =============================================================================
# Response DTOs
# =============================================================================


@dataclass
class DashboardSnapshot:
    """Everything the dashboard renders, one field per widget."""
    streak: int = 0
    weekly: WeeklySummary = field(default_factory=WeeklySummary)
    recent_prs: List[PersonalRecord] = field(default_factory=list)
    muscle_balance: List[BalanceEntry] = field(default_factory=list)
    failed_widgets: List[str] = field(default_factory=list)

    @property
    def is_partial(self) -> bool:
        """True if at least one widget fell back to its empty state."""
        return bool(self.failed_widgets)


# =============================================================================
# Training Analytics Service
# =============================================================================


class TrainingAnalyticsService:
    """
    Service for training analytics on top of repository data access.

    Every method accepts an optional ``now``; when omitted the injected
    clock is used, which defaults to the current time in the configured
    timezone.
    """

    def __init__(
        self,
        session_repo: SessionRepository,
        set_repo: SetRepository,
        *,
        settings: Optional[Settings] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """
        Initialize the analytics service.

        Args:
            session_repo: Repository for completed sessions
            set_repo: Repository for logged sets
            settings: Settings instance (defaults to get_settings())
            clock: Zero-argument callable returning the reference time
        """
        self._session_repo = session_repo
        self._set_repo = set_repo
        self._settings = settings or get_settings()
        self._clock = clock or (lambda: datetime.now(self._settings.tzinfo))

    def _now(self, now: Optional[datetime]) -> datetime:
        return now if now is not None else self._clock()

    @staticmethod
    def _window(window_days: Optional[int], default: int) -> int:
        if window_days is None:
            return default
        if window_days < 1:
            raise ValueError(f"window_days must be at least 1, got {window_days}")
        return window_days

    # -------------------------------------------------------------------------
    # Dashboard metrics
    # -------------------------------------------------------------------------

    def get_current_streak(self, user_id: str, *, now: Optional[datetime] = None) -> int:
        """
        Get the user's current training streak in days.

        Raises:
            RepositoryError: If sessions cannot be fetched
        """
        now = self._now(now)
        sessions = self._session_repo.list_completed_sessions(
            user_id,
            limit=self._settings.streak_lookback_sessions,
        )
        return current_streak(sessions, now)

    def get_weekly_summary(
        self,
        user_id: str,
        *,
        now: Optional[datetime] = None,
    ) -> WeeklySummary:
        """
        Get days trained, volume and set count for the current week.

        Raises:
            RepositoryError: If sessions or sets cannot be fetched
        """
        now = self._now(now)
        start, end = week_bounds(now)
        sessions = self._session_repo.list_completed_sessions(user_id, start=start, end=end)
        if not sessions:
            return WeeklySummary()

        sets = self._set_repo.list_sets(session_ids=[s.id for s in sessions])
        return weekly_summary(sessions, sets, now)

    def get_recent_prs(
        self,
        user_id: str,
        *,
        window_days: Optional[int] = None,
        now: Optional[datetime] = None,
    ) -> List[PersonalRecord]:
        """
        Get personal records from the trailing window, newest first.

        Raises:
            RepositoryError: If PR sets or sessions cannot be fetched
            ValueError: If window_days is below 1
        """
        now = self._now(now)
        days = self._window(window_days, self._settings.pr_window_days)
        since = window_start(now, days)

        pr_sets = self._set_repo.list_pr_sets(user_id, since)
        if not pr_sets:
            return []

        sessions = self._session_repo.list_completed_sessions(user_id, start=since)
        # PR sets can belong to sessions that started before the window.
        completed_ids = {s.id for s in sessions}
        missing = {s.session_id for s in pr_sets} - completed_ids
        if missing:
            older = self._session_repo.list_completed_sessions(user_id)
            completed_ids |= {s.id for s in older}

        return recent_prs(
            pr_sets,
            now,
            days,
            completed_session_ids=completed_ids,
            limit=self._settings.pr_limit,
        )

    def get_muscle_balance(
        self,
        user_id: str,
        *,
        window_days: Optional[int] = None,
        now: Optional[datetime] = None,
    ) -> List[BalanceEntry]:
        """
        Get set counts per muscle group for the trailing window.

        Raises:
            RepositoryError: If sets cannot be fetched
            ValueError: If window_days is below 1
        """
        now = self._now(now)
        days = self._window(window_days, self._settings.balance_window_days)
        sets = self._set_repo.list_sets(user_id=user_id, start=window_start(now, days))
        return muscle_balance(sets, now, days)

    def get_dashboard(
        self,
        user_id: str,
        *,
        now: Optional[datetime] = None,
    ) -> DashboardSnapshot:
        """
        Get every dashboard widget, tolerating per-widget fetch failures.

        A widget whose fetch raises RepositoryError keeps its empty value
        and is listed in ``failed_widgets``.
        """
        now = self._now(now)
        snapshot = DashboardSnapshot()

        widgets = [
            ("streak", lambda: self.get_current_streak(user_id, now=now)),
            ("weekly", lambda: self.get_weekly_summary(user_id, now=now)),
            ("recent_prs", lambda: self.get_recent_prs(user_id, now=now)),
            ("muscle_balance", lambda: self.get_muscle_balance(user_id, now=now)),
        ]
        for name, load in widgets:
            try:
                setattr(snapshot, name, load())
            except RepositoryError:
                logger.exception(f"Dashboard widget '{name}' failed for user {user_id}")
                snapshot.failed_widgets.append(name)

        return snapshot

    # -------------------------------------------------------------------------
    # Exercise analytics
    # -------------------------------------------------------------------------

    def get_overload_suggestion(
        self,
        user_id: str,
        exercise_id: str,
        training_style: Union[TrainingStyle, str, None] = None,
    ) -> Optional[OverloadSuggestion]:
        """
        Suggest the next target for an exercise from its last completed session.

        Args:
            user_id: User ID
            exercise_id: Exercise to advise on
            training_style: Policy selector (defaults to settings)

        Returns:
            OverloadSuggestion or None if there is no prior working set

        Raises:
            RepositoryError: If sets or sessions cannot be fetched
        """
        style = training_style or self._settings.default_training_style

        sets = self._set_repo.list_sets(user_id=user_id, exercise_id=exercise_id)
        if not sets:
            return None

        sessions = self._session_repo.list_completed_sessions(user_id)
        last_sets = latest_session_sets(sets, sessions, exercise_id)
        return suggest_next(last_sets, style, weight_unit=self._settings.weight_unit)

    def get_exercise_progression(
        self,
        user_id: str,
        exercise_id: str,
        *,
        window_days: Optional[int] = None,
        now: Optional[datetime] = None,
    ) -> List[ProgressionPoint]:
        """
        Get the heaviest working set per day for an exercise.

        Raises:
            RepositoryError: If sets cannot be fetched
            ValueError: If window_days is below 1
        """
        now = self._now(now)
        days = self._window(window_days, self._settings.progression_window_days)
        sets = self._set_repo.list_sets(
            user_id=user_id,
            exercise_id=exercise_id,
            start=window_start(now, days),
        )
        return exercise_progression(sets, now, days)

    def detect_plateaus(
        self,
        user_id: str,
        *,
        session_limit: int = DEFAULT_SESSION_LIMIT,
    ) -> List[PlateauResult]:
        """
        Detect plateaus and regressions across the most recent sessions.

        Raises:
            RepositoryError: If sessions or sets cannot be fetched
        """
        sessions = self._session_repo.list_completed_sessions(user_id, limit=session_limit)
        if len(sessions) < 2:
            return []

        sets = self._set_repo.list_sets(session_ids=[s.id for s in sessions])
        return detect_plateaus(sessions, sets, session_limit=session_limit)

    def evaluate_badges(
        self,
        user_id: str,
        *,
        earned: Collection[str] = (),
        now: Optional[datetime] = None,
    ) -> List[str]:
        """
        Get badge types newly earned by the user.

        Raises:
            RepositoryError: If sessions or sets cannot be fetched
        """
        now = self._now(now)
        sessions = self._session_repo.list_completed_sessions(user_id)
        sets = self._set_repo.list_sets(user_id=user_id)
        return evaluate_badges(sessions, sets, now, earned=earned)
