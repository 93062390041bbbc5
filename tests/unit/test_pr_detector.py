"""
Unit tests for the PR detector.

Tests cover:
- Window, flag and session filtering
- Newest-first ordering and the 10-record cap
- Placeholder resolution for unresolved exercise joins
- is_new_pr dominance rule
"""
import pytest
from datetime import datetime, timedelta

from backend.core.pr_detector import (
    MAX_RECENT_PRS,
    RecordStatus,
    UNKNOWN_EXERCISE_NAME,
    is_new_pr,
    recent_prs,
)
from tests.fakes import NOW, make_set


@pytest.mark.unit
class TestRecentPRs:
    """Tests for recent_prs."""

    def test_no_sets_returns_empty(self):
        assert recent_prs([], NOW) == []

    def test_excludes_non_pr_sets(self):
        sets = [
            make_set("a", is_pr=True, logged_at=NOW - timedelta(hours=1)),
            make_set("b", is_pr=False, logged_at=NOW - timedelta(hours=2)),
        ]
        records = recent_prs(sets, NOW)
        assert len(records) == 1
        assert records[0].date == NOW - timedelta(hours=1)

    def test_excludes_sets_outside_window(self):
        sets = [
            make_set("a", is_pr=True, logged_at=NOW - timedelta(days=6)),
            make_set("b", is_pr=True, logged_at=NOW - timedelta(days=8)),
        ]
        assert len(recent_prs(sets, NOW, window_days=7)) == 1

    def test_custom_window(self):
        sets = [make_set("a", is_pr=True, logged_at=NOW - timedelta(days=20))]
        assert recent_prs(sets, NOW, window_days=7) == []
        assert len(recent_prs(sets, NOW, window_days=30)) == 1

    def test_newest_first(self):
        sets = [
            make_set(f"s{i}", is_pr=True, logged_at=NOW - timedelta(hours=h))
            for i, h in enumerate([5, 1, 30, 2])
        ]
        dates = [r.date for r in recent_prs(sets, NOW)]
        assert dates == sorted(dates, reverse=True)

    def test_capped_at_ten(self):
        sets = [
            make_set(f"s{i}", is_pr=True, logged_at=NOW - timedelta(hours=i))
            for i in range(15)
        ]
        records = recent_prs(sets, NOW)
        assert len(records) == MAX_RECENT_PRS == 10
        assert records[0].date == NOW
        assert records[-1].date == NOW - timedelta(hours=9)

    def test_ties_keep_input_order(self):
        same = NOW - timedelta(hours=1)
        sets = [
            make_set("a", is_pr=True, weight=100, logged_at=same),
            make_set("b", is_pr=True, weight=110, logged_at=same),
        ]
        assert [r.weight for r in recent_prs(sets, NOW)] == [100, 110]

    def test_filters_to_completed_sessions(self):
        sets = [
            make_set("a", session_id="done", is_pr=True, logged_at=NOW - timedelta(hours=1)),
            make_set("b", session_id="live", is_pr=True, logged_at=NOW - timedelta(hours=2)),
        ]
        records = recent_prs(sets, NOW, completed_session_ids={"done"})
        assert len(records) == 1

    def test_resolves_display_fields(self):
        sets = [make_set(
            "a",
            exercise_id="ex_squat",
            exercise_name="Back Squat",
            weight=140,
            reps=3,
            is_pr=True,
            logged_at=NOW - timedelta(hours=1),
        )]
        record = recent_prs(sets, NOW)[0]

        assert record.exercise_name == "Back Squat"
        assert record.exercise_id == "ex_squat"
        assert record.weight == 140
        assert record.reps == 3
        assert record.is_complete

    def test_missing_exercise_uses_placeholder_without_dropping_others(self):
        sets = [
            make_set("a", is_pr=True, logged_at=NOW - timedelta(hours=1),
                     exercise_name=None, muscle_group=None),
            make_set("b", is_pr=True, logged_at=NOW - timedelta(hours=2)),
        ]
        records = recent_prs(sets, NOW)

        assert len(records) == 2
        assert records[0].exercise_name == UNKNOWN_EXERCISE_NAME
        assert records[0].status == RecordStatus.MISSING_EXERCISE
        assert not records[0].is_complete
        assert records[1].status == RecordStatus.COMPLETE

    def test_missing_exercise_is_logged(self, caplog):
        sets = [make_set("a", is_pr=True, exercise_name=None, muscle_group=None)]
        with caplog.at_level("WARNING"):
            recent_prs(sets, NOW)
        assert "unresolved exercise" in caplog.text


@pytest.mark.unit
class TestIsNewPR:
    """Tests for is_new_pr."""

    def test_no_history_is_pr(self):
        assert is_new_pr(100, 5, []) is True

    def test_heavier_at_same_reps_is_pr(self):
        history = [make_set("a", weight=100, reps=5)]
        assert is_new_pr(105, 5, history) is True

    def test_more_reps_at_same_weight_is_pr(self):
        history = [make_set("a", weight=100, reps=5)]
        assert is_new_pr(100, 6, history) is True

    def test_matching_prior_set_is_not_pr(self):
        history = [make_set("a", weight=100, reps=5)]
        assert is_new_pr(100, 5, history) is False

    def test_dominated_by_prior_set_is_not_pr(self):
        history = [make_set("a", weight=120, reps=8)]
        assert is_new_pr(110, 6, history) is False


@pytest.mark.unit
class TestMixedAwareness:
    """Naive logged_at values are read in the zone of ``now``."""

    def test_naive_pr_set_with_aware_now(self):
        sets = [make_set("a", is_pr=True, logged_at=datetime(2024, 1, 17, 12, 0))]
        records = recent_prs(sets, NOW)
        assert len(records) == 1

    def test_naive_set_outside_window(self):
        sets = [make_set("a", is_pr=True, logged_at=datetime(2024, 1, 1, 12, 0))]
        assert recent_prs(sets, NOW) == []

    def test_mixed_sets_sorted_newest_first(self):
        sets = [
            make_set("naive", is_pr=True, weight=90, logged_at=datetime(2024, 1, 17, 12, 0)),
            make_set("aware", is_pr=True, weight=110, logged_at=NOW - timedelta(hours=1)),
        ]
        assert [r.weight for r in recent_prs(sets, NOW)] == [110, 90]


@pytest.mark.unit
def test_without_completed_ids_in_progress_sets_count():
    """Omitting completed_session_ids skips the completed-session check."""
    sets = [make_set("a", session_id="live", is_pr=True)]
    assert len(recent_prs(sets, NOW)) == 1
    assert recent_prs(sets, NOW, completed_session_ids=set()) == []
