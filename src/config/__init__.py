"""Configuration loading for the filter pipeline.

Configuration is loaded from a single YAML file, config/filters.yaml by
default.

Usage Examples
--------------

Load configuration:
    >>> from config import load_config
    >>>
    >>> config = load_config()
    >>> for definition in config.enabled_filters:
    ...     print(definition.name, definition.options)

Custom config path:
    >>> from pathlib import Path
    >>> config = load_config(config_path=Path("/custom/path/filters.yaml"))

Configuration Priority
---------------------

1. Overrides passed to load_config()
2. YAML configuration file (with ${VAR} expansion)
3. Dataclass defaults
"""

from config.config import (
    FilterDefinition,
    FilterPipelineConfig,
    LoggingSettings,
    load_config,
)

__all__ = [
    "load_config",
    "FilterPipelineConfig",
    "FilterDefinition",
    "LoggingSettings",
]
