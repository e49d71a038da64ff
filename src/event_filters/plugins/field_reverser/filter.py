"""
Field reverser filter.

Reverses the string stored in one configurable field of every event in a
batch. Events whose field is missing or holds a non-string value pass
through unchanged.

Configuration:
    source: field reference to reverse (default: "message")

Reversal is by Unicode code point, so non-ASCII text is reversed character
by character; combining marks are not kept attached to their base
character.
"""

from collections.abc import Sequence

from core.errors import ConfigError, InvalidFieldReferenceError
from event_filters.common.event import Event, parse_field_reference
from event_filters.plugins.shared.base import (
    Configuration,
    Context,
    Filter,
    PluginConfigSpec,
    string_setting,
)

SOURCE_CONFIG = string_setting(
    "source",
    "message",
    description="Field whose string value is reversed",
)


class FieldReverserFilter(Filter):
    """Reverse the string value of a single field on each event."""

    name = "field_reverser"

    def __init__(self, config: Configuration, context: Context):
        super().__init__(config, context)

        source = config.get(SOURCE_CONFIG)
        if not isinstance(source, str):
            raise ConfigError.invalid_value(SOURCE_CONFIG.name, source)
        try:
            parse_field_reference(source)
        except InvalidFieldReferenceError as e:
            raise ConfigError(
                f"Invalid value '{source}' for config option {SOURCE_CONFIG.name}",
                option=SOURCE_CONFIG.name,
                value=source,
                cause=e,
            ) from e

        self._source_field = source

        self.logger.debug(
            "Filter configured",
            extra={
                "plugin_name": self.name,
                "source_field": self._source_field,
                "pipeline_id": context.pipeline_id,
            },
        )

    @property
    def source_field(self) -> str:
        return self._source_field

    @classmethod
    def config_schema(cls) -> list[PluginConfigSpec]:
        return [SOURCE_CONFIG]

    def filter(self, events: Sequence[Event]) -> Sequence[Event]:
        reversed_count = 0
        for event in events:
            value = event.get_field(self._source_field)
            # Only str values are reversed; absent fields read as None
            if isinstance(value, str):
                event.set_field(self._source_field, value[::-1])
                reversed_count += 1

        self.logger.debug(
            "Reversed field in batch",
            extra={
                "plugin_name": self.name,
                "source_field": self._source_field,
                "batch_size": len(events),
                "records_processed": reversed_count,
                "records_skipped": len(events) - reversed_count,
            },
        )
        return events
