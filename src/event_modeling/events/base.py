"""Base event types and structures for the event store.

This module defines the core event record used throughout the system.
Events are immutable records of facts that happened in the business domain.

An Event starts life as a *candidate*: a value built by a producer with no
``id``. It becomes a stored fact only once ``EventLog.append`` accepts it and
returns a copy carrying the assigned id. Candidate fields default to ``None``,
which the log treats as "absent" when validating.
"""

from collections.abc import Mapping
from dataclasses import dataclass, replace
from datetime import datetime
from types import MappingProxyType
from typing import Any


@dataclass(frozen=True)
class EventData:
    """Base class for type-safe event payloads.

    Domain payload classes inherit from this base class, validate their own
    fields in ``__post_init__`` and render themselves to the namespaced
    payload mapping stored on an Event via ``to_payload``.

    Example:
        >>> @dataclass(frozen=True)
        ... class OrderShippedData(EventData):
        ...     order_id: str
        ...
        ...     def to_payload(self) -> dict[str, Any]:
        ...         return {"order.id": self.order_id}
    """

    def to_payload(self) -> dict[str, Any]:
        """Render this payload as a namespaced mapping.

        Raises:
            NotImplementedError: If the subclass does not override it
        """
        raise NotImplementedError(f"{type(self).__name__} must implement to_payload()")


@dataclass(frozen=True)
class Event:
    """Immutable record of a single fact appended to an event log.

    Events are the single source of truth of the system. They are append-only
    and never modified or removed once stored.

    Attributes:
        stream_id: Business entity or process this event belongs to (e.g. an order key)
        type: Past-tense tag naming what happened (e.g. "order-placed")
        payload: Domain data keyed by namespaced keys (e.g. "order.customerId")
        metadata: Operational fields (e.g. "event.createdAt", "event.createdBy")
        version: Schema version of the payload for this event type
        id: Position of the event in the log, assigned at append time (None on candidates)

    Example:
        >>> candidate = Event(
        ...     stream_id="stream_customer_47",
        ...     type="order-placed",
        ...     payload={"order.id": "order-123", "order.total": 99.99},
        ...     metadata={"event.createdBy": "web-api"},
        ...     version=1,
        ... )
        >>> stored = log.append(candidate)
        >>> stored.id
        0
    """

    stream_id: str | None = None
    type: str | None = None
    payload: Mapping[str, Any] | None = None
    metadata: Mapping[str, Any] | None = None
    version: int | None = None
    id: int | None = None

    @property
    def is_stored(self) -> bool:
        """Whether this event carries an id assigned by a log."""
        return self.id is not None

    def with_id(self, event_id: int) -> "Event":
        """Return a stored copy of this event carrying ``event_id``.

        The copy owns its own ``payload`` and ``metadata``, exposed as read-only
        mappings so that callers cannot alter a stored fact through them.
        Nested values are frozen too: mappings become read-only mappings,
        lists become tuples and sets become frozensets.

        Args:
            event_id: Id assigned by the log

        Returns:
            A new Event; this instance is left untouched
        """
        return replace(
            self,
            id=event_id,
            payload=_freeze(self.payload),
            metadata=_freeze(self.metadata),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert the event to a plain, JSON-friendly dictionary.

        Datetimes anywhere in payload or metadata are rendered as ISO 8601
        strings. The ``id`` key is only included for stored events.
        """
        result: dict[str, Any] = {}
        if self.is_stored:
            result["id"] = self.id
        result["stream_id"] = self.stream_id
        result["type"] = self.type
        result["payload"] = _to_plain(self.payload)
        result["metadata"] = _to_plain(self.metadata)
        result["version"] = self.version
        return result

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Event":
        """Build an event from a plain mapping.

        Keys that are missing from ``data`` stay ``None`` so that the log can
        report them as absent. Unknown keys are ignored.

        Args:
            data: Mapping with any of the keys id, stream_id, type, payload,
                metadata and version

        Returns:
            Event built from the mapping
        """
        return cls(
            stream_id=data.get("stream_id"),
            type=data.get("type"),
            payload=data.get("payload"),
            metadata=data.get("metadata"),
            version=data.get("version"),
            id=data.get("id"),
        )


def _freeze(mapping: Mapping[str, Any] | None) -> Mapping[str, Any] | None:
    if mapping is None:
        return None
    return _frozen_copy(mapping)


def _frozen_copy(value: Any) -> Any:
    # Containers at any depth become read-only copies
    if isinstance(value, Mapping):
        return MappingProxyType({key: _frozen_copy(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(_frozen_copy(item) for item in value)
    if isinstance(value, (set, frozenset)):
        return frozenset(_frozen_copy(item) for item in value)
    return value


def _to_plain(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {key: _to_plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [_to_plain(item) for item in value]
    if isinstance(value, datetime):
        return value.isoformat()
    return value
