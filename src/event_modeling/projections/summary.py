"""Summary projections for order activity dashboards.

Several views computed from the same events: how many orders each customer
placed, which customers are active, the busiest hour of the day, and a
combined dashboard.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field

from event_modeling.events.base import Event
from event_modeling.events.order import ORDER_CANCELLED, ORDER_CUSTOMER_ID, ORDER_PLACED
from event_modeling.projections.base import filter_by_type
from event_modeling.projections.time_buckets import orders_per_hour


@dataclass(frozen=True)
class Dashboard:
    """Order activity at a glance.

    Attributes:
        total_orders: Number of order-placed events
        total_cancelled: Number of order-cancelled events
        orders_by_hour: Sparse UTC hour -> placed order count
    """

    total_orders: int
    total_cancelled: int
    orders_by_hour: dict[int, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.total_orders < 0:
            raise ValueError("Total orders cannot be negative")
        if self.total_cancelled < 0:
            raise ValueError("Total cancelled cannot be negative")


def orders_per_customer(events: Sequence[Event]) -> dict[str, int]:
    """Count placed orders per customer."""
    counts: dict[str, int] = {}
    for customer_id in _placing_customers(events):
        counts[customer_id] = counts.get(customer_id, 0) + 1
    return counts


def distinct_customers(events: Sequence[Event]) -> list[str]:
    """List customers who placed at least one order, in first-seen order."""
    return list(dict.fromkeys(_placing_customers(events)))


def busiest_hour(events: Sequence[Event]) -> int | None:
    """Return the UTC hour with the most placed orders.

    Ties go to the hour seen first. Returns None when there are no
    timestamped orders.
    """
    histogram = orders_per_hour(events)
    if not histogram:
        return None
    return max(histogram, key=lambda hour: histogram[hour])


def build_dashboard(events: Sequence[Event]) -> Dashboard:
    """Project events to the order activity dashboard."""
    return Dashboard(
        total_orders=len(filter_by_type(events, ORDER_PLACED)),
        total_cancelled=len(filter_by_type(events, ORDER_CANCELLED)),
        orders_by_hour=orders_per_hour(events),
    )


def _placing_customers(events: Sequence[Event]) -> list[str]:
    return [
        event.payload[ORDER_CUSTOMER_ID]
        for event in filter_by_type(events, ORDER_PLACED)
        if event.payload is not None and event.payload.get(ORDER_CUSTOMER_ID) is not None
    ]
