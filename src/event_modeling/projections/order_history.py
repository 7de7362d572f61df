"""Customer order history projection.

This module builds the per-customer view of placed orders: a list of
simplified records suitable for displaying in a table, in the order the
orders were placed.

Example:
    >>> history = customer_order_history(log.read_all(), "customer-alice")
    >>> for order in history:
    ...     print(order.order_id, order.amount, order.timestamp)
"""

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from event_modeling.events.base import Event
from event_modeling.events.order import ORDER_CUSTOMER_ID, ORDER_ID, ORDER_PLACED, ORDER_TOTAL
from event_modeling.projections.base import event_timestamp, filter_by_type


@dataclass(frozen=True)
class OrderSummary:
    """One row of a customer's order history.

    Attributes:
        order_id: Identifier of the order (payload "order.id", else the stream id)
        amount: Order total, None if the event carried none
        timestamp: When the order was placed (UTC), None if unknown
    """

    order_id: str | None
    amount: Any
    timestamp: datetime | None


def customer_order_history(events: Sequence[Event], customer_id: str) -> list[OrderSummary]:
    """Build the list of orders placed by one customer.

    Args:
        events: Events to project, in log order
        customer_id: Customer to select, matched against payload "order.customerId"

    Returns:
        One OrderSummary per matching order-placed event, preserving their
        relative order. An unknown customer yields an empty list.
    """
    return [
        _to_summary(event)
        for event in filter_by_type(events, ORDER_PLACED)
        if event.payload is not None and event.payload.get(ORDER_CUSTOMER_ID) == customer_id
    ]


def customer_lifetime_total(events: Sequence[Event], customer_id: str) -> float:
    """Sum the totals of every order a customer placed.

    Totals that are not numbers (absent, strings, booleans) are left out of
    the sum rather than failing the projection.
    """
    return sum(
        (
            order.amount
            for order in customer_order_history(events, customer_id)
            if _is_number(order.amount)
        ),
        0.0,
    )


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _to_summary(event: Event) -> OrderSummary:
    payload = event.payload or {}
    return OrderSummary(
        order_id=payload.get(ORDER_ID, event.stream_id),
        amount=payload.get(ORDER_TOTAL),
        timestamp=event_timestamp(event),
    )
