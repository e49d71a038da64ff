"""Field reverser filter plugin."""

from event_filters.plugins.field_reverser.filter import (
    SOURCE_CONFIG,
    FieldReverserFilter,
)

__all__ = [
    "FieldReverserFilter",
    "SOURCE_CONFIG",
]
