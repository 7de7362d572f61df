"""Projection framework for transforming event sequences into derived views.

Projections are pure functions: the same input events always produce the same
output, the input is never modified, and nothing is retained between calls.
They take an explicit list of events instead of reading a log, so a view is
only as fresh as the events passed in.

Available Projections:
    - Base infrastructure (ProjectionFunction, ProjectionResult, filters)
    - Time buckets (count_in_period, histogram_by_hour, cancelled_in_month,
      orders_per_hour)
    - Order history (customer_order_history, customer_lifetime_total)
    - Summaries (orders_per_customer, distinct_customers, busiest_hour,
      build_dashboard)

Example:
    >>> from event_modeling.projections import customer_order_history
    >>> history = customer_order_history(log.read_all(), "customer-alice")
"""

from event_modeling.projections.base import (
    ProjectionFunction,
    ProjectionResult,
    compose_projections,
    count_by_type,
    event_timestamp,
    filter_by_type,
    project_with_metadata,
)
from event_modeling.projections.order_history import (
    OrderSummary,
    customer_lifetime_total,
    customer_order_history,
)
from event_modeling.projections.summary import (
    Dashboard,
    build_dashboard,
    busiest_hour,
    distinct_customers,
    orders_per_customer,
)
from event_modeling.projections.time_buckets import (
    cancelled_in_month,
    count_in_period,
    histogram_by_hour,
    orders_per_hour,
)

__all__ = [
    # Base infrastructure
    "ProjectionFunction",
    "ProjectionResult",
    "project_with_metadata",
    "compose_projections",
    "filter_by_type",
    "count_by_type",
    "event_timestamp",
    # Time buckets
    "count_in_period",
    "histogram_by_hour",
    "cancelled_in_month",
    "orders_per_hour",
    # Order history
    "OrderSummary",
    "customer_order_history",
    "customer_lifetime_total",
    # Summaries
    "Dashboard",
    "build_dashboard",
    "busiest_hour",
    "distinct_customers",
    "orders_per_customer",
]
