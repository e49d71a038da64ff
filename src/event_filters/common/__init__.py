"""Shared data structures passed between the host and filters."""

from event_filters.common.event import Event

__all__ = ["Event"]
