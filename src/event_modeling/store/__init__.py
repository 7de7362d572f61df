"""
In-memory event store.

This module provides the append-only EventLog and the validation error raised
when a candidate event is rejected.
"""

from event_modeling.store.log import (
    REQUIRED_FIELDS,
    EventLog,
    ValidationError,
    create_store,
    validate_candidate,
)

__all__ = [
    "EventLog",
    "ValidationError",
    "REQUIRED_FIELDS",
    "create_store",
    "validate_candidate",
]
