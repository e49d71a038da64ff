"""
Plugin registry.

Binds plugin names to filter classes, validates user-supplied options
against each filter's schema and constructs filter instances for the host.
"""

import importlib
import logging
from collections.abc import Iterable, Mapping
from typing import Any

from config.config import FilterDefinition
from core.errors import ConfigError
from core.logging import log_exception
from event_filters.plugins.shared.base import Configuration, Context, Filter

logger = logging.getLogger(__name__)

# Filters shipped with this package, imported on first use of the global registry
BUILTIN_FILTERS: dict[str, dict[str, str]] = {
    "field_reverser": {
        "module": "event_filters.plugins.field_reverser.filter",
        "class": "FieldReverserFilter",
    },
}


def validate_configuration(
    filter_class: type[Filter],
    options: Mapping[str, Any] | None,
) -> Configuration:
    """
    Check raw options against a filter's config schema.

    Args:
        filter_class: Filter class whose config_schema() is used
        options: Raw option values supplied by the user

    Returns:
        Configuration wrapping the options

    Raises:
        ConfigError: On unknown options, missing required options or
            values of the wrong type
    """
    options = dict(options or {})
    schema = {spec.name: spec for spec in filter_class.config_schema()}

    for option, value in options.items():
        spec = schema.get(option)
        if spec is None:
            raise ConfigError(
                f"Unknown setting '{option}' for {filter_class.name}",
                option=option,
                value=value,
            )
        if not spec.type.accepts(value):
            raise ConfigError.invalid_value(option, value)

    for spec in schema.values():
        if spec.required and spec.name not in options:
            raise ConfigError(
                f"Missing required setting '{spec.name}' for {filter_class.name}",
                option=spec.name,
            )

    return Configuration(options)


class PluginRegistry:
    """
    Registry for filter classes.

    Maps the plugin name used in pipeline configuration to the class that
    implements it.
    """

    def __init__(self):
        self._plugins: dict[str, type[Filter]] = {}

        logger.debug("PluginRegistry initialized")

    def register(self, name: str, filter_class: type[Filter]) -> None:
        """
        Register a filter class under a plugin name.

        Args:
            name: Plugin name referenced by filter definitions
            filter_class: Filter subclass to construct for that name
        """
        if name in self._plugins:
            logger.warning(
                "Overwriting plugin registration",
                extra={"plugin_name": name},
            )

        self._plugins[name] = filter_class

        logger.info(
            "Registered plugin",
            extra={
                "plugin_name": name,
                "plugin_class": filter_class.__name__,
                "plugin_module": filter_class.__module__,
            },
        )

    def unregister(self, name: str) -> type[Filter] | None:
        """
        Unregister a plugin by name.

        Returns:
            Removed filter class or None if not found
        """
        filter_class = self._plugins.pop(name, None)
        if filter_class:
            logger.info(
                "Unregistered plugin",
                extra={"plugin_name": name},
            )
        return filter_class

    def get_plugin(self, name: str) -> type[Filter] | None:
        """Get filter class by plugin name."""
        return self._plugins.get(name)

    def list_plugins(self) -> list[str]:
        """Get all registered plugin names."""
        return list(self._plugins)

    def clear(self) -> None:
        """Remove all plugins."""
        self._plugins.clear()

    def create(
        self,
        name: str,
        options: Mapping[str, Any] | None = None,
        context: Context | None = None,
    ) -> Filter:
        """
        Validate options and construct the filter registered under name.

        Args:
            name: Registered plugin name
            options: Raw option values
            context: Host context (default: Context())

        Returns:
            Constructed filter instance

        Raises:
            ConfigError: If the plugin is unknown or its options are invalid
        """
        context = context or Context()
        filter_class = self._plugins.get(name)
        if filter_class is None:
            raise ConfigError(f"Unknown plugin '{name}'", option="name", value=name)

        try:
            config = validate_configuration(filter_class, options)
            plugin = filter_class(config, context)
        except ConfigError as e:
            log_exception(
                logger,
                e,
                "Filter configuration rejected",
                include_traceback=False,
                plugin_name=name,
                pipeline_id=context.pipeline_id,
                option=e.option,
            )
            raise
        except Exception as e:
            log_exception(
                logger,
                e,
                "Filter construction failed",
                plugin_name=name,
                pipeline_id=context.pipeline_id,
            )
            raise

        logger.debug(
            "Created plugin from config",
            extra={
                "plugin_name": name,
                "plugin_class": filter_class.__name__,
                "pipeline_id": context.pipeline_id,
            },
        )
        return plugin

    def build_filters(
        self,
        definitions: Iterable[FilterDefinition],
        context: Context | None = None,
    ) -> list[Filter]:
        """
        Create the enabled filters from configuration, preserving order.

        Any invalid definition aborts the whole build with ConfigError.
        """
        context = context or Context()
        filters = []
        for definition in definitions:
            if not definition.enabled:
                logger.debug(
                    "Plugin disabled in config",
                    extra={"plugin_name": definition.name},
                )
                continue
            filters.append(self.create(definition.name, definition.options, context))

        logger.info(
            "Built filters from config",
            extra={
                "pipeline_id": context.pipeline_id,
                "plugins_loaded": len(filters),
                "plugin_names": [f.name for f in filters],
            },
        )
        return filters


def _register_builtin_filters(registry: PluginRegistry) -> None:
    for name, entry in BUILTIN_FILTERS.items():
        module = importlib.import_module(entry["module"])
        registry.register(name, getattr(module, entry["class"]))


_global_registry: PluginRegistry | None = None


def get_global_registry() -> PluginRegistry:
    """Get or create the global plugin registry, populated with the built-in filters."""
    global _global_registry
    if _global_registry is None:
        _global_registry = PluginRegistry()
        _register_builtin_filters(_global_registry)
    return _global_registry


def reset_plugin_registry() -> None:
    """Reset the global plugin registry (for testing)."""
    global _global_registry
    _global_registry = None
