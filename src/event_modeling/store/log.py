"""In-memory append-only event log.

This module provides the EventLog, the single source of truth for accepted
events. It enforces the append contract (validation at the boundary, dense id
assignment) and serves ordered reads by stream and by event type.

Appends are serialized by a single lock. Reads never take it: an append
publishes the new length only after the event and its index entries are in
place, and readers never look past the length they observed, so a reader sees
either the whole event or none of it.
"""

import threading
from collections.abc import Mapping
from typing import Any

import structlog

from event_modeling.events.base import Event

logger = structlog.get_logger(__name__)

REQUIRED_FIELDS = ("stream_id", "type", "payload", "metadata", "version")


class ValidationError(Exception):
    """Raised when a candidate event is rejected by ``EventLog.append``.

    Attributes:
        field: Name of the offending field (e.g. "stream_id", "payload")
        reason: "missing" when the field is absent, "invalid" when it is
            present but has the wrong type or value
        detail: Human-readable description of the problem
    """

    def __init__(self, field: str, reason: str, detail: str) -> None:
        self.field = field
        self.reason = reason
        self.detail = detail
        super().__init__(f"Invalid event field '{field}' ({reason}): {detail}")


def validate_candidate(candidate: Event) -> None:
    """Check that a candidate carries every field the log requires.

    Present but empty payload/metadata mappings and a zero version satisfy the
    check; an absent (None) field does not.

    Args:
        candidate: Event to validate

    Raises:
        ValidationError: For the first missing or invalid field, in the order
            stream_id, type, payload, metadata, version
    """
    for field in REQUIRED_FIELDS:
        if getattr(candidate, field) is None:
            raise ValidationError(field, "missing", f"{field} is required")

    if not isinstance(candidate.stream_id, str) or not candidate.stream_id:
        raise ValidationError("stream_id", "invalid", "stream_id must be a non-empty string")
    if not isinstance(candidate.type, str) or not candidate.type:
        raise ValidationError("type", "invalid", "type must be a non-empty string")
    if not isinstance(candidate.payload, Mapping):
        raise ValidationError(
            "payload", "invalid", f"payload must be a mapping, got {type(candidate.payload).__name__}"
        )
    if not isinstance(candidate.metadata, Mapping):
        raise ValidationError(
            "metadata",
            "invalid",
            f"metadata must be a mapping, got {type(candidate.metadata).__name__}",
        )
    # bool is an int subclass but never a meaningful schema version
    if isinstance(candidate.version, bool) or not isinstance(candidate.version, int):
        raise ValidationError(
            "version", "invalid", f"version must be an integer, got {candidate.version!r}"
        )
    if candidate.version < 0:
        raise ValidationError("version", "invalid", f"version must be >= 0, got {candidate.version}")


class EventLog:
    """Append-only, in-memory sequence of events.

    The log is the exclusive owner of its events and of id assignment. It is
    created empty, grows by exactly one event per successful append, and never
    shrinks or reorders.

    Example:
        ```python
        log = create_store()
        stored = log.append(
            Event(
                stream_id="s47",
                type="order-placed",
                payload={"order.total": 99.99},
                metadata={},
                version=1,
            )
        )
        assert stored.id == 0
        assert log.read_stream("s47") == [stored]
        ```
    """

    def __init__(self) -> None:
        self._events: list[Event] = []
        self._by_stream: dict[str, list[int]] = {}
        self._by_type: dict[str, list[int]] = {}
        self._count = 0
        self._append_lock = threading.Lock()

    def append(self, candidate: Event | Mapping[str, Any]) -> Event:
        """Validate a candidate and append it to the log.

        Args:
            candidate: Candidate Event, or a mapping with the keys stream_id,
                type, payload, metadata and version

        Returns:
            The stored event: the candidate plus its assigned id. The input is
            not modified; the log keeps its own copy.

        Raises:
            ValidationError: If a required field is missing or invalid. The log
                is left unchanged and no id is consumed.
        """
        if not isinstance(candidate, Event):
            candidate = Event.from_dict(candidate)

        log = logger.bind(stream_id=candidate.stream_id, event_type=candidate.type)

        try:
            validate_candidate(candidate)
        except ValidationError as e:
            log.warning("Rejected event", field=e.field, reason=e.reason)
            raise

        with self._append_lock:
            event_id = self._count
            stored = candidate.with_id(event_id)
            self._events.append(stored)
            self._by_stream.setdefault(stored.stream_id, []).append(event_id)  # type: ignore[arg-type]
            self._by_type.setdefault(stored.type, []).append(event_id)  # type: ignore[arg-type]
            self._count = event_id + 1

        log.info("Event appended", event_id=event_id)
        return stored

    def read_all(self) -> list[Event]:
        """Return all events in append order."""
        count = self._count
        return self._events[:count]

    def read_stream(self, stream_id: str) -> list[Event]:
        """Return the events of one stream, in append order.

        An unknown stream is a valid query and yields an empty list.
        """
        return self._select(self._by_stream.get(stream_id))

    def read_by_type(self, event_type: str) -> list[Event]:
        """Return the events of one type across all streams, in append order.

        A type with no events yields an empty list.
        """
        return self._select(self._by_type.get(event_type))

    def stream_ids(self) -> list[str]:
        """Return the ids of all streams with events, in first-seen order."""
        count = self._count
        return [
            stream_id for stream_id, ids in list(self._by_stream.items()) if ids and ids[0] < count
        ]

    def event_types(self) -> list[str]:
        """Return all event types present in the log, in first-seen order."""
        count = self._count
        return [
            event_type for event_type, ids in list(self._by_type.items()) if ids and ids[0] < count
        ]

    def __len__(self) -> int:
        return self._count

    def _select(self, ids: list[int] | None) -> list[Event]:
        if not ids:
            return []
        count = self._count
        return [self._events[event_id] for event_id in ids if event_id < count]


def create_store() -> EventLog:
    """Create a new, empty event log."""
    return EventLog()
