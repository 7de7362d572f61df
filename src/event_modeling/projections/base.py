"""Base infrastructure for projection functions.

Projections are pure functions that transform event histories into derived
views. They take an explicit list of events (usually ``EventLog.read_all()``)
and never read from or write to a log themselves, so they are trivially
testable with literal fixtures and decoupled from storage.

Core Principles:
    - Projections are pure functions: same inputs always produce same outputs
    - No side effects (no I/O, no state mutation, no randomness)
    - A projection result is only as fresh as the events passed in
    - New views are new functions; the log is never modified to support them

Example:
    >>> from event_modeling.events import Event
    >>> from event_modeling.projections.base import ProjectionFunction
    >>>
    >>> def count_orders(events: list[Event]) -> int:
    ...     return sum(1 for e in events if e.type == "order-placed")
    >>>
    >>> projection: ProjectionFunction[int] = count_orders
    >>> count = projection(log.read_all())
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Generic, TypeVar

from event_modeling.events.base import Event
from event_modeling.events.order import CREATED_AT

# Generic type variable for projection results
T = TypeVar("T")


# A projection function takes a sequence of events and returns a value of type T
ProjectionFunction = Callable[[Sequence[Event]], T]


@dataclass(frozen=True)
class ProjectionResult(Generic[T]):
    """A projection value together with what it was computed from.

    Attributes:
        value: The result of the projection
        event_count: Number of events that were projected
        last_event_id: Id of the last event processed (None if no events or
            the last event was never stored)

    Example:
        >>> result = project_with_metadata(log.read_all(), count_orders)
        >>> print(result.value, result.event_count, result.last_event_id)
    """

    value: T
    event_count: int
    last_event_id: int | None

    def __post_init__(self) -> None:
        """Validate the projection result.

        Raises:
            ValueError: If event_count is negative
        """
        if self.event_count < 0:
            raise ValueError(f"event_count must be non-negative, got {self.event_count}")


def project_with_metadata(
    events: Sequence[Event],
    projection: ProjectionFunction[T],
) -> ProjectionResult[T]:
    """Apply a projection function and wrap the result with metadata.

    Args:
        events: Events to project
        projection: The projection function to apply

    Returns:
        ProjectionResult containing the projected value and metadata
    """
    value = projection(events)
    last_event_id = events[-1].id if events else None

    return ProjectionResult(
        value=value,
        event_count=len(events),
        last_event_id=last_event_id,
    )


def compose_projections(
    *projections: ProjectionFunction[T],
) -> ProjectionFunction[list[T]]:
    """Compose multiple projection functions into a single projection.

    Args:
        *projections: Projection functions to compose

    Returns:
        A projection function that returns a list of results, one per input projection

    Example:
        >>> combined = compose_projections(count_orders, count_cancellations)
        >>> orders, cancellations = combined(events)
    """

    def combined_projection(events: Sequence[Event]) -> list[T]:
        return [projection(events) for projection in projections]

    return combined_projection


def filter_by_type(events: Sequence[Event], event_type: str) -> list[Event]:
    """Return the events of the given type, preserving their order."""
    return [event for event in events if event.type == event_type]


def count_by_type(events: Sequence[Event]) -> dict[str, int]:
    """Count events per type, keyed in first-seen order."""
    counts: dict[str, int] = {}
    for event in events:
        if event.type is not None:
            counts[event.type] = counts.get(event.type, 0) + 1
    return counts


def event_timestamp(event: Event) -> datetime | None:
    """Return when an event happened, as an aware UTC datetime.

    The timestamp is read from the ``event.createdAt`` metadata field, which
    may hold a datetime or an ISO 8601 string. Naive values are taken to be
    UTC so that time-bucketed projections are deterministic.

    Returns:
        The timestamp in UTC, or None if the event has no usable timestamp
    """
    if not event.metadata:
        return None

    raw = event.metadata.get(CREATED_AT)
    if isinstance(raw, datetime):
        timestamp = raw
    elif isinstance(raw, str):
        try:
            timestamp = datetime.fromisoformat(raw.replace("Z", "+00:00"))
        except ValueError:
            return None
    else:
        return None

    if timestamp.tzinfo is None:
        return timestamp.replace(tzinfo=UTC)
    return timestamp.astimezone(UTC)
