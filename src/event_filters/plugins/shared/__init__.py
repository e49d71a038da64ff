"""
Shared plugin framework components.

Core functionality used across all filter plugins.
"""

from event_filters.plugins.shared.base import (
    Configuration,
    Context,
    Filter,
    PluginConfigSpec,
    SettingType,
    array_setting,
    boolean_setting,
    hash_setting,
    number_setting,
    string_setting,
)
from event_filters.plugins.shared.registry import (
    BUILTIN_FILTERS,
    PluginRegistry,
    get_global_registry,
    reset_plugin_registry,
)

__all__ = [
    "Filter",
    "Configuration",
    "Context",
    "PluginConfigSpec",
    "SettingType",
    "string_setting",
    "number_setting",
    "boolean_setting",
    "hash_setting",
    "array_setting",
    "PluginRegistry",
    "BUILTIN_FILTERS",
    "get_global_registry",
    "reset_plugin_registry",
]
