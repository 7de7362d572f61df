"""Pytest configuration and fixtures for testing.

This module provides pytest fixtures for:
- Fresh event logs
- A sample order history spanning July and August 2025
- Resetting structlog between tests
"""

from datetime import datetime

import pytest
import structlog

from event_modeling.events import Event, order_cancelled, order_placed
from event_modeling.store import EventLog, create_store


def parse_time(value: str) -> datetime:
    """Parse an ISO 8601 instant such as 2025-07-15T14:30:00Z."""
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


@pytest.fixture(autouse=True)
def reset_structlog():
    """Restore the default structlog configuration after each test.

    The CLI configures structlog to write to the sys.stderr of the moment,
    which pytest closes once a capturing test finishes.
    """
    yield
    structlog.reset_defaults()


@pytest.fixture
def store() -> EventLog:
    """Provide an empty event log."""
    return create_store()


@pytest.fixture
def sample_candidates() -> list[Event]:
    """Orders for alice and bob across July and August 2025, two of them cancelled."""
    return [
        order_placed(
            "order-1",
            "order-1",
            "customer-alice",
            99.99,
            created_at=parse_time("2025-07-15T14:30:00Z"),
        ),
        order_placed(
            "order-2",
            "order-2",
            "customer-bob",
            149.99,
            created_at=parse_time("2025-07-15T15:45:00Z"),
        ),
        order_placed(
            "order-3",
            "order-3",
            "customer-alice",
            79.99,
            created_at=parse_time("2025-07-16T14:20:00Z"),
        ),
        order_cancelled("order-2", "order-2", created_at=parse_time("2025-07-16T16:00:00Z")),
        order_placed(
            "order-4",
            "order-4",
            "customer-alice",
            199.99,
            created_at=parse_time("2025-07-20T15:10:00Z"),
        ),
        order_placed(
            "order-5",
            "order-5",
            "customer-bob",
            299.99,
            created_at=parse_time("2025-08-01T10:30:00Z"),
        ),
        order_cancelled("order-5", "order-5", created_at=parse_time("2025-08-01T11:00:00Z")),
    ]


@pytest.fixture
def sample_events(store: EventLog, sample_candidates: list[Event]) -> list[Event]:
    """The sample orders appended to ``store``, as returned by read_all."""
    for candidate in sample_candidates:
        store.append(candidate)
    return store.read_all()
