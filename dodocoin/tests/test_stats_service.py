"""
Tests for the derived values in stats_service.

Tests cover:
1. Weekly summary window and fixed 7-day average
2. Daily totals bucketing and order
3. Running balance points
4. Balance chart path
"""
import pytest
from datetime import timedelta

from dodocoin.schemas import Transaction
from dodocoin.services import stats_service
from dodocoin.tests.conftest import make_transaction


class TestWeeklySummary:
    """Tests for weekly_summary"""

    def test_excludes_transactions_older_than_a_week(self, now):
        """Today +5, 8 days ago +100, today -3"""
        history = [
            make_transaction(5, now - timedelta(hours=2)),
            make_transaction(100, now - timedelta(days=8)),
            make_transaction(-3, now - timedelta(hours=1)),
        ]

        summary = stats_service.weekly_summary(history, now)

        assert summary.earned == 5
        assert summary.spent == -3
        assert summary.net == 2
        assert summary.avg_per_day == pytest.approx(2 / 7)
        assert round(summary.avg_per_day, 2) == 0.29

    def test_window_start_is_inclusive(self, now):
        """A transaction exactly 7 days old is counted"""
        history = [make_transaction(7, now - timedelta(days=7))]

        summary = stats_service.weekly_summary(history, now)

        assert summary.earned == 7

    def test_average_always_divides_by_seven(self, now):
        """One day of data still averages over 7 days"""
        history = [make_transaction(14, now)]

        summary = stats_service.weekly_summary(history, now)

        assert summary.avg_per_day == 2.0

    def test_empty_history(self, now):
        summary = stats_service.weekly_summary([], now)

        assert summary.earned == 0
        assert summary.spent == 0
        assert summary.net == 0
        assert summary.avg_per_day == 0.0

    def test_unreadable_timestamp_is_skipped(self, now):
        """Transactions with bad dates are left out"""
        history = [
            Transaction(label="bad", amount=50, date="not a date"),
            make_transaction(4, now),
        ]

        summary = stats_service.weekly_summary(history, now)

        assert summary.earned == 4

    def test_naive_now_is_treated_as_utc(self, now):
        history = [make_transaction(3, now - timedelta(days=1))]

        summary = stats_service.weekly_summary(history, now.replace(tzinfo=None))

        assert summary.earned == 3


class TestDailyTotals:
    """Tests for daily_totals"""

    def test_buckets_by_date_descending(self, now):
        """Sums per day, newest day first"""
        history = [
            make_transaction(-3, now),
            make_transaction(5, now - timedelta(hours=1)),
            make_transaction(10, now - timedelta(days=2)),
            make_transaction(2, now - timedelta(days=1)),
        ]

        totals = stats_service.daily_totals(history)

        assert [(d.date, d.total) for d in totals] == [
            ("2026-01-30", 2),
            ("2026-01-29", 2),
            ("2026-01-28", 10),
        ]

    def test_empty_history(self):
        assert stats_service.daily_totals([]) == []


class TestRunningBalancePoints:
    """Tests for running_balance_points"""

    def test_prefix_sums_in_chronological_order(self, now):
        """History is most-recent-first; points are chronological"""
        history = [
            make_transaction(2, now),
            make_transaction(-4, now - timedelta(hours=1)),
            make_transaction(10, now - timedelta(hours=2)),
        ]

        assert stats_service.running_balance_points(history) == [10, 6, 8]

    def test_does_not_mutate_history(self, now):
        history = [
            make_transaction(2, now),
            make_transaction(10, now - timedelta(hours=2)),
        ]
        original = list(history)

        stats_service.running_balance_points(history)

        assert history == original

    def test_equal_timestamps_keep_application_order(self, now):
        """Same-instant transactions are summed in the order they were applied"""
        history = [
            make_transaction(-4, now, label="applied second"),
            make_transaction(10, now, label="applied first"),
        ]

        assert stats_service.running_balance_points(history) == [10, 6]

    def test_unreadable_timestamp_sorts_first(self, ledger, now):
        """A bad date does not break the chart; it is counted first"""
        ledger.apply_transaction("ok", 5, make_transaction(5, now).date)
        ledger.apply_transaction("odd", 3, "not a date")

        assert stats_service.running_balance_points(ledger.history) == [3, 8]

    def test_empty_history(self):
        assert stats_service.running_balance_points([]) == []


class TestBalanceChartPath:
    """Tests for balance_chart_path"""

    def test_fewer_than_two_points_is_empty(self):
        assert stats_service.balance_chart_path([]) == ""
        assert stats_service.balance_chart_path([5]) == ""

    def test_scales_to_max_point(self):
        """Largest point touches the top of the chart"""
        path = stats_service.balance_chart_path([5, 10, 5])

        assert path == "M 0 60 L 150 0 L 300 60"

    def test_minimum_scale_is_ten(self):
        """Small balances are scaled against 10"""
        path = stats_service.balance_chart_path([0, 5])

        assert path == "M 0 120 L 300 60"

    def test_custom_size(self):
        path = stats_service.balance_chart_path([0, 20], width=100, height=50)

        assert path == "M 0 50 L 100 0"
