"""Event type definitions for the event store.

This package contains the Event record and the order-domain event vocabulary:
type constants, namespaced payload keys, typed payloads and factories.
"""

from event_modeling.events.base import Event, EventData
from event_modeling.events.order import (
    CREATED_AT,
    CREATED_BY,
    ORDER_CANCELLED,
    ORDER_CUSTOMER_ID,
    ORDER_ID,
    ORDER_PLACED,
    ORDER_TOTAL,
    PAYMENT_AMOUNT,
    PAYMENT_ORDER_ID,
    PAYMENT_PROCESSED,
    OrderCancelledData,
    OrderPlacedData,
    PaymentProcessedData,
    create_event,
    order_cancelled,
    order_placed,
    payment_processed,
)

__all__ = [
    "Event",
    "EventData",
    "OrderPlacedData",
    "OrderCancelledData",
    "PaymentProcessedData",
    "ORDER_PLACED",
    "ORDER_CANCELLED",
    "PAYMENT_PROCESSED",
    "ORDER_ID",
    "ORDER_CUSTOMER_ID",
    "ORDER_TOTAL",
    "PAYMENT_ORDER_ID",
    "PAYMENT_AMOUNT",
    "CREATED_AT",
    "CREATED_BY",
    "create_event",
    "order_placed",
    "order_cancelled",
    "payment_processed",
]
