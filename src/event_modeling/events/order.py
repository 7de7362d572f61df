"""Order event types for the order-processing domain.

This module defines the events that describe the life of an order: it is
placed, paid for, and possibly cancelled. Payload keys are namespaced
("order.", "payment.") so that data from different domains never collide
inside one payload mapping.
"""

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any

from event_modeling.events.base import Event, EventData

# Event type constants for consistency
ORDER_PLACED = "order-placed"
ORDER_CANCELLED = "order-cancelled"
PAYMENT_PROCESSED = "payment-processed"

# Payload keys
ORDER_ID = "order.id"
ORDER_CUSTOMER_ID = "order.customerId"
ORDER_TOTAL = "order.total"
PAYMENT_ORDER_ID = "payment.orderId"
PAYMENT_AMOUNT = "payment.amount"

# Metadata keys
CREATED_AT = "event.createdAt"
CREATED_BY = "event.createdBy"


@dataclass(frozen=True)
class OrderPlacedData(EventData):
    """Data payload for the order-placed event.

    Attributes:
        order_id: Identifier of the order
        customer_id: Identifier of the customer who placed it
        total: Total amount of the order

    Example:
        >>> data = OrderPlacedData(order_id="order-123", customer_id="customer-47", total=99.99)
    """

    order_id: str
    customer_id: str
    total: float

    def __post_init__(self) -> None:
        """Validate order data after initialization.

        Raises:
            ValueError: If an identifier is empty or the total is negative
        """
        if not self.order_id or not self.order_id.strip():
            raise ValueError("Order ID cannot be empty")
        if not self.customer_id or not self.customer_id.strip():
            raise ValueError("Customer ID cannot be empty")
        if self.total < 0:
            raise ValueError(f"Order total must be >= 0, got {self.total}")

    def to_payload(self) -> dict[str, Any]:
        return {
            ORDER_ID: self.order_id,
            ORDER_CUSTOMER_ID: self.customer_id,
            ORDER_TOTAL: self.total,
        }


@dataclass(frozen=True)
class OrderCancelledData(EventData):
    """Data payload for the order-cancelled event.

    Attributes:
        order_id: Identifier of the cancelled order
    """

    order_id: str

    def __post_init__(self) -> None:
        if not self.order_id or not self.order_id.strip():
            raise ValueError("Order ID cannot be empty")

    def to_payload(self) -> dict[str, Any]:
        return {ORDER_ID: self.order_id}


@dataclass(frozen=True)
class PaymentProcessedData(EventData):
    """Data payload for the payment-processed event.

    Attributes:
        order_id: Identifier of the order the payment settles
        amount: Amount charged
    """

    order_id: str
    amount: float

    def __post_init__(self) -> None:
        """Validate payment data after initialization.

        Raises:
            ValueError: If order_id is empty or amount is not positive
        """
        if not self.order_id or not self.order_id.strip():
            raise ValueError("Order ID cannot be empty")
        if self.amount <= 0:
            raise ValueError(f"Payment amount must be > 0, got {self.amount}")

    def to_payload(self) -> dict[str, Any]:
        return {PAYMENT_ORDER_ID: self.order_id, PAYMENT_AMOUNT: self.amount}


def create_event(
    stream_id: str,
    event_type: str,
    payload: dict[str, Any] | EventData,
    *,
    created_at: datetime | None = None,
    created_by: str | None = None,
    version: int = 1,
) -> Event:
    """Create a candidate event with standard metadata.

    Args:
        stream_id: Stream the event belongs to
        event_type: Past-tense event type (e.g. "order-placed")
        payload: Namespaced payload mapping, or an EventData to render
        created_at: When the fact happened (default: now, in UTC)
        created_by: Originating actor or service, omitted when None
        version: Payload schema version (default: 1)

    Returns:
        Candidate Event without an id, ready to append

    Example:
        >>> candidate = create_event(
        ...     "stream_customer_47",
        ...     PAYMENT_PROCESSED,
        ...     PaymentProcessedData(order_id="order-123", amount=99.99),
        ...     created_by="payment-service",
        ... )
    """
    if isinstance(payload, EventData):
        payload = payload.to_payload()

    metadata: dict[str, Any] = {CREATED_AT: created_at or datetime.now(UTC)}
    if created_by is not None:
        metadata[CREATED_BY] = created_by

    return Event(
        stream_id=stream_id,
        type=event_type,
        payload=payload,
        metadata=metadata,
        version=version,
    )


def order_placed(
    stream_id: str,
    order_id: str,
    customer_id: str,
    total: float,
    *,
    created_at: datetime | None = None,
    created_by: str | None = None,
) -> Event:
    """Create an order-placed candidate event."""
    return create_event(
        stream_id,
        ORDER_PLACED,
        OrderPlacedData(order_id=order_id, customer_id=customer_id, total=total),
        created_at=created_at,
        created_by=created_by,
    )


def order_cancelled(
    stream_id: str,
    order_id: str,
    *,
    created_at: datetime | None = None,
    created_by: str | None = None,
) -> Event:
    """Create an order-cancelled candidate event."""
    return create_event(
        stream_id,
        ORDER_CANCELLED,
        OrderCancelledData(order_id=order_id),
        created_at=created_at,
        created_by=created_by,
    )


def payment_processed(
    stream_id: str,
    order_id: str,
    amount: float,
    *,
    created_at: datetime | None = None,
    created_by: str | None = None,
) -> Event:
    """Create a payment-processed candidate event."""
    return create_event(
        stream_id,
        PAYMENT_PROCESSED,
        PaymentProcessedData(order_id=order_id, amount=amount),
        created_at=created_at,
        created_by=created_by,
    )
