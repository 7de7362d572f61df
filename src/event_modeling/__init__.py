"""
event-modeling: append-only event log with pure projections.

This package provides an in-memory event store that records immutable domain
facts in append order, indexed by stream and by event type, and a set of pure
projection functions that fold event sequences into derived views.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
