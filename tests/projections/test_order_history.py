"""Tests for the customer order history projection."""

from datetime import UTC, datetime

import pytest

from event_modeling.events import Event, order_placed
from event_modeling.projections.order_history import (
    OrderSummary,
    customer_lifetime_total,
    customer_order_history,
)
from event_modeling.store import EventLog


class TestCustomerOrderHistory:
    """Tests for customer_order_history."""

    def test_alice_history(self, sample_events: list[Event]):
        history = customer_order_history(sample_events, "customer-alice")

        assert history == [
            OrderSummary("order-1", 99.99, datetime(2025, 7, 15, 14, 30, tzinfo=UTC)),
            OrderSummary("order-3", 79.99, datetime(2025, 7, 16, 14, 20, tzinfo=UTC)),
            OrderSummary("order-4", 199.99, datetime(2025, 7, 20, 15, 10, tzinfo=UTC)),
        ]

    def test_cancelled_orders_stay_in_history(self, sample_events: list[Event]):
        """The history lists what was placed; cancellations do not filter it."""
        history = customer_order_history(sample_events, "customer-bob")

        assert [order.order_id for order in history] == ["order-2", "order-5"]

    def test_unknown_customer_is_empty(self, sample_events: list[Event]):
        assert customer_order_history(sample_events, "customer-charlie") == []

    def test_new_events_show_up_on_recompute(
        self, store: EventLog, sample_events: list[Event]
    ):
        store.append(
            order_placed(
                "order-6",
                "order-6",
                "customer-alice",
                50.00,
                created_at=datetime(2025, 8, 1, 14, 30, tzinfo=UTC),
            )
        )

        assert len(customer_order_history(sample_events, "customer-alice")) == 3
        assert len(customer_order_history(store.read_all(), "customer-alice")) == 4

    def test_order_id_falls_back_to_stream_id(self):
        events = [
            Event(
                stream_id="order-77",
                type="order-placed",
                payload={"order.customerId": "customer-alice", "order.total": 5},
                metadata={},
                version=1,
            )
        ]

        history = customer_order_history(events, "customer-alice")

        assert history == [OrderSummary(order_id="order-77", amount=5, timestamp=None)]

    def test_summary_is_immutable(self, sample_events: list[Event]):
        order = customer_order_history(sample_events, "customer-alice")[0]

        with pytest.raises(AttributeError):
            order.amount = 0  # type: ignore


class TestCustomerLifetimeTotal:
    """Tests for customer_lifetime_total."""

    def test_lifetime_total(self, sample_events: list[Event]):
        assert customer_lifetime_total(sample_events, "customer-alice") == pytest.approx(379.97)

    def test_unknown_customer_total_is_zero(self, sample_events: list[Event]):
        assert customer_lifetime_total(sample_events, "customer-charlie") == 0.0

    def test_non_numeric_totals_are_skipped(self):
        events = [
            Event(
                stream_id=f"order-{index}",
                type="order-placed",
                payload={"order.customerId": "customer-alice", "order.total": total},
                metadata={},
                version=1,
            )
            for index, total in enumerate([10, "99.99", True, None, 2.5])
        ]

        assert customer_lifetime_total(events, "customer-alice") == pytest.approx(12.5)
        assert len(customer_order_history(events, "customer-alice")) == 5
