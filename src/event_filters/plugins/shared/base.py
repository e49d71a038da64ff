"""
Plugin framework base classes.

Defines the narrow contract between the pipeline host and a filter plugin:
option descriptors, the validated configuration handed to a constructor,
the opaque execution context and the Filter interface itself.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict

from event_filters.common.event import Event


class SettingType(str, Enum):
    """Value types a configuration option can declare."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    HASH = "hash"
    ARRAY = "array"

    def accepts(self, value: Any) -> bool:
        """Check whether a raw configuration value matches this type."""
        if self is SettingType.STRING:
            return isinstance(value, str)
        if self is SettingType.NUMBER:
            # bool is an int subclass but never a valid number setting
            return isinstance(value, (int, float)) and not isinstance(value, bool)
        if self is SettingType.BOOLEAN:
            return isinstance(value, bool)
        if self is SettingType.HASH:
            return isinstance(value, Mapping)
        return isinstance(value, (list, tuple))


class PluginConfigSpec(BaseModel):
    """Descriptor of one configuration option a plugin accepts."""

    model_config = ConfigDict(frozen=True)

    name: str
    type: SettingType
    default: Any = None
    required: bool = False
    description: str = ""


def string_setting(name: str, default: str | None = None, **kwargs: Any) -> PluginConfigSpec:
    return PluginConfigSpec(name=name, type=SettingType.STRING, default=default, **kwargs)


def number_setting(name: str, default: int | float | None = None, **kwargs: Any) -> PluginConfigSpec:
    return PluginConfigSpec(name=name, type=SettingType.NUMBER, default=default, **kwargs)


def boolean_setting(name: str, default: bool | None = None, **kwargs: Any) -> PluginConfigSpec:
    return PluginConfigSpec(name=name, type=SettingType.BOOLEAN, default=default, **kwargs)


def hash_setting(name: str, default: dict | None = None, **kwargs: Any) -> PluginConfigSpec:
    return PluginConfigSpec(name=name, type=SettingType.HASH, default=default, **kwargs)


def array_setting(name: str, default: list | None = None, **kwargs: Any) -> PluginConfigSpec:
    return PluginConfigSpec(name=name, type=SettingType.ARRAY, default=default, **kwargs)


class Configuration(Mapping[str, Any]):
    """
    Read-only mapping of option name to the raw value the user supplied.

    Values are not coerced; a plugin constructor decides what a value of the
    wrong type means.
    """

    def __init__(self, options: Mapping[str, Any] | None = None):
        self._options = MappingProxyType(dict(options or {}))

    def contains(self, spec: PluginConfigSpec) -> bool:
        """Check whether the option described by spec was supplied."""
        return spec.name in self._options

    def get(self, spec: PluginConfigSpec | str, default: Any = None) -> Any:
        """
        Return the supplied value for an option.

        Given a PluginConfigSpec, falls back to the spec's default when the
        option is absent. Given a plain key, behaves like Mapping.get.
        """
        if isinstance(spec, PluginConfigSpec):
            return self._options.get(spec.name, spec.default)
        return self._options.get(spec, default)

    def __getitem__(self, key: str) -> Any:
        return self._options[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._options)

    def __len__(self) -> int:
        return len(self._options)

    def __repr__(self) -> str:
        return f"Configuration({dict(self._options)!r})"


@dataclass(frozen=True)
class Context:
    """Execution context the host passes to plugin constructors."""

    pipeline_id: str = "main"
    worker_id: str | None = None


class Filter(ABC):
    """
    Base class for filter plugins.

    The host constructs a filter once per pipeline load, then calls filter()
    repeatedly with batches of events. Subclasses define:
      - config_schema() listing every option they accept
      - __init__() validating those options
      - filter() with the per-batch transform
    """

    # Identifier used in log records
    name: str = "unnamed_filter"

    def __init__(self, config: Configuration, context: Context):
        """
        Initialize the filter.

        Constructors should validate configuration options and raise
        ConfigError for values they cannot use.

        Args:
            config: Validated option values
            context: Host execution context
        """
        self.logger = logging.getLogger(type(self).__module__)
        self.config = config
        self.context = context

    @classmethod
    @abstractmethod
    def config_schema(cls) -> list[PluginConfigSpec]:
        """Return descriptors for every option this filter accepts."""

    @abstractmethod
    def filter(self, events: Sequence[Event]) -> Sequence[Event]:
        """
        Transform a batch of events.

        Args:
            events: Ordered batch, possibly empty

        Returns:
            The batch to pass down the pipeline
        """
