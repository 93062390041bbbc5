"""
Unit tests for the muscle balance analyzer.
"""
import pytest
from datetime import datetime, timedelta

from backend.core.muscle_balance import BalanceEntry, muscle_balance
from domain.models import MuscleGroup, SetType
from tests.fakes import NOW, make_set


@pytest.mark.unit
class TestMuscleBalance:
    """Tests for muscle_balance."""

    def test_empty_input(self):
        assert muscle_balance([], NOW) == []

    def test_counts_sets_not_volume(self):
        sets = [
            make_set("a", muscle_group=MuscleGroup.CHEST, weight=300, reps=10),
            make_set("b", muscle_group=MuscleGroup.BACK, weight=10, reps=1),
            make_set("c", muscle_group=MuscleGroup.BACK, weight=10, reps=1),
        ]
        balance = muscle_balance(sets, NOW)
        assert balance == [
            BalanceEntry(MuscleGroup.BACK, 2),
            BalanceEntry(MuscleGroup.CHEST, 1),
        ]

    def test_omits_groups_without_sets(self):
        sets = [make_set("a", muscle_group=MuscleGroup.QUADS)]
        balance = muscle_balance(sets, NOW)
        assert [e.muscle_group for e in balance] == [MuscleGroup.QUADS]
        assert all(e.set_count > 0 for e in balance)

    def test_excludes_sets_outside_window(self):
        sets = [
            make_set("a", muscle_group=MuscleGroup.CHEST, logged_at=NOW - timedelta(days=29)),
            make_set("b", muscle_group=MuscleGroup.BACK, logged_at=NOW - timedelta(days=31)),
        ]
        balance = muscle_balance(sets, NOW, window_days=30)
        assert balance == [BalanceEntry(MuscleGroup.CHEST, 1)]

    def test_skips_unresolved_muscle_group(self):
        sets = [
            make_set("a", muscle_group=None, exercise_name=None),
            make_set("b", muscle_group=MuscleGroup.GLUTES),
        ]
        assert muscle_balance(sets, NOW) == [BalanceEntry(MuscleGroup.GLUTES, 1)]

    def test_ties_keep_first_appearance(self):
        sets = [
            make_set("a", muscle_group=MuscleGroup.CALVES),
            make_set("b", muscle_group=MuscleGroup.CORE),
        ]
        assert [e.muscle_group for e in muscle_balance(sets, NOW)] == [
            MuscleGroup.CALVES,
            MuscleGroup.CORE,
        ]

    def test_counts_all_set_types(self):
        sets = [
            make_set("a", set_type=SetType.WARMUP),
            make_set("b", set_type=SetType.WORKING),
        ]
        assert muscle_balance(sets, NOW) == [BalanceEntry(MuscleGroup.CHEST, 2)]


@pytest.mark.unit
class TestMixedAwareness:
    """Naive logged_at values are read in the zone of ``now``."""

    def test_naive_sets_with_aware_now(self):
        sets = [
            make_set("a", logged_at=datetime(2024, 1, 16, 10, 0)),
            make_set("b", logged_at=NOW - timedelta(days=1)),
            make_set("old", logged_at=datetime(2023, 12, 1, 10, 0)),
        ]
        assert muscle_balance(sets, NOW) == [BalanceEntry(MuscleGroup.CHEST, 2)]

    def test_aware_sets_with_naive_now(self):
        sets = [make_set("a", logged_at=NOW)]
        now = datetime(2024, 1, 17, 20, 0)
        assert muscle_balance(sets, now) == [BalanceEntry(MuscleGroup.CHEST, 1)]
