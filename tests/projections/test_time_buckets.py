"""Tests for time-bucketed projections."""

from datetime import UTC, datetime, timedelta, timezone

from event_modeling.events import Event, order_cancelled, order_placed
from event_modeling.projections.time_buckets import (
    cancelled_in_month,
    count_in_period,
    histogram_by_hour,
    orders_per_hour,
)


class TestCountInPeriod:
    """Tests for count_in_period and cancelled_in_month."""

    def test_cancelled_in_july(self, sample_events: list[Event]):
        assert cancelled_in_month(sample_events, 2025, 7) == 1

    def test_cancelled_in_august(self, sample_events: list[Event]):
        assert cancelled_in_month(sample_events, 2025, 8) == 1

    def test_no_matches_is_zero(self, sample_events: list[Event]):
        assert cancelled_in_month(sample_events, 2025, 6) == 0
        assert cancelled_in_month(sample_events, 2024, 7) == 0
        assert cancelled_in_month([], 2025, 7) == 0

    def test_count_in_period_for_any_type(self, sample_events: list[Event]):
        assert count_in_period(sample_events, "order-placed", 2025, 7) == 4
        assert count_in_period(sample_events, "order-placed", 2025, 8) == 1
        assert count_in_period(sample_events, "payment-processed", 2025, 7) == 0

    def test_month_is_decided_in_utc(self):
        """23:30 UTC on July 31st is in July even when recorded at +02:00."""
        plus_two = timezone(timedelta(hours=2))
        events = [
            order_cancelled("order-1", "order-1",
                            created_at=datetime(2025, 8, 1, 1, 30, tzinfo=plus_two)),
        ]

        assert cancelled_in_month(events, 2025, 7) == 1
        assert cancelled_in_month(events, 2025, 8) == 0

    def test_events_without_timestamp_are_skipped(self):
        events = [
            Event(stream_id="order-1", type="order-cancelled", payload={}, metadata={}, version=1),
            order_cancelled("order-2", "order-2", created_at=datetime(2025, 7, 2, tzinfo=UTC)),
        ]

        assert cancelled_in_month(events, 2025, 7) == 1


class TestHistogramByHour:
    """Tests for histogram_by_hour and orders_per_hour."""

    def test_orders_per_hour(self, sample_events: list[Event]):
        assert orders_per_hour(sample_events) == {14: 2, 15: 2, 10: 1}

    def test_histogram_is_sparse(self, sample_events: list[Event]):
        histogram = orders_per_hour(sample_events)

        assert 0 not in histogram
        assert all(count > 0 for count in histogram.values())

    def test_histogram_for_other_type(self, sample_events: list[Event]):
        assert histogram_by_hour(sample_events, "order-cancelled") == {16: 1, 11: 1}

    def test_empty_histogram(self):
        assert orders_per_hour([]) == {}

    def test_hour_is_decided_in_utc(self):
        minus_five = timezone(timedelta(hours=-5))
        events = [
            order_placed(
                "order-1",
                "order-1",
                "customer-alice",
                10,
                created_at=datetime(2025, 7, 15, 9, 0, tzinfo=minus_five),
            ),
        ]

        assert orders_per_hour(events) == {14: 1}


class TestPurity:
    """Projections are referentially transparent."""

    def test_repeated_calls_give_identical_results(self, sample_events: list[Event]):
        before = list(sample_events)

        first = (orders_per_hour(sample_events), cancelled_in_month(sample_events, 2025, 7))
        second = (orders_per_hour(sample_events), cancelled_in_month(sample_events, 2025, 7))

        assert first == second
        assert sample_events == before
