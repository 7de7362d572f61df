"""Time-bucketed projections.

These projections decompose event timestamps into calendar fields and count
matches per bucket. All decomposition happens in UTC, so results do not
depend on the local time zone of the process. Events without a usable
timestamp (see ``event_timestamp``) fall in no bucket and are skipped.

Example:
    >>> events = log.read_all()
    >>> cancelled_in_month(events, 2025, 7)
    1
    >>> orders_per_hour(events)
    {14: 2, 15: 2, 10: 1}
"""

from collections.abc import Sequence

from event_modeling.events.base import Event
from event_modeling.events.order import ORDER_CANCELLED, ORDER_PLACED
from event_modeling.projections.base import event_timestamp, filter_by_type


def count_in_period(events: Sequence[Event], event_type: str, year: int, month: int) -> int:
    """Count events of a type whose UTC timestamp falls in the given month.

    Args:
        events: Events to project
        event_type: Type of event to count
        year: Calendar year (e.g. 2025)
        month: Calendar month, 1-12

    Returns:
        Number of matching events; 0 when nothing matches
    """
    count = 0
    for event in filter_by_type(events, event_type):
        timestamp = event_timestamp(event)
        if timestamp is not None and timestamp.year == year and timestamp.month == month:
            count += 1
    return count


def histogram_by_hour(events: Sequence[Event], event_type: str) -> dict[int, int]:
    """Count events of a type per UTC hour of day.

    The histogram is sparse: hours with no matching event are omitted rather
    than reported as zero.

    Args:
        events: Events to project
        event_type: Type of event to count

    Returns:
        Mapping of hour (0-23) to number of events, keyed in first-seen order
    """
    histogram: dict[int, int] = {}
    for event in filter_by_type(events, event_type):
        timestamp = event_timestamp(event)
        if timestamp is None:
            continue
        histogram[timestamp.hour] = histogram.get(timestamp.hour, 0) + 1
    return histogram


def cancelled_in_month(events: Sequence[Event], year: int, month: int) -> int:
    """Count cancelled orders in a specific month (UTC)."""
    return count_in_period(events, ORDER_CANCELLED, year, month)


def orders_per_hour(events: Sequence[Event]) -> dict[int, int]:
    """Group placed orders by UTC hour, e.g. {14: 5, 15: 8} for 5 orders at 2pm and 8 at 3pm."""
    return histogram_by_hour(events, ORDER_PLACED)
