"""Filter pipeline configuration from YAML file.

Loads from config/filters.yaml with all settings in one place:
- Pipeline identity
- Logging settings
- Ordered list of filter definitions and their options

Environment variables ARE supported using ${VAR_NAME} and
${VAR_NAME:-default} syntax in YAML files.
"""

import logging
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from core.errors import ConfigError
from core.logging import setup_logging

# Configure module logger
logger = logging.getLogger(__name__)

_ENV_VAR_PATTERN = re.compile(r"\$\{([^}:]+)(?::-(([^}]*))?)?\}")


def load_yaml(path: Path) -> Dict[str, Any]:
    """Load YAML file and return dict."""
    if not path.exists():
        return {}
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def _expand_env_vars(data: Any) -> Any:
    """Recursively expand ${VAR_NAME} and ${VAR_NAME:-default} environment variables in config data."""
    if isinstance(data, dict):
        return {key: _expand_env_vars(value) for key, value in data.items()}
    elif isinstance(data, list):
        return [_expand_env_vars(item) for item in data]
    elif isinstance(data, str):

        def replacer(match):
            var_name = match.group(1)
            default_value = match.group(2) if match.group(2) is not None else match.group(0)
            return os.getenv(var_name, default_value)

        return _ENV_VAR_PATTERN.sub(replacer, data)
    else:
        return data


def _deep_merge(base: Dict[str, Any], overlay: Dict[str, Any]) -> Dict[str, Any]:
    """Deep merge overlay into base dict."""
    result = base.copy()
    for key, value in overlay.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


# Default config file: config/filters.yaml in src/ directory
DEFAULT_CONFIG_FILE = Path(__file__).parent / "filters.yaml"


@dataclass
class FilterDefinition:
    """One filter stage: the registered plugin name and its raw options."""

    name: str
    options: Dict[str, Any] = field(default_factory=dict)
    enabled: bool = True

    @classmethod
    def from_dict(cls, data: Any, index: int) -> "FilterDefinition":
        if not isinstance(data, dict):
            raise ConfigError(
                f"Invalid filter entry at position {index}: expected a mapping",
                option="filters",
                value=data,
            )
        name = data.get("name")
        if not isinstance(name, str) or not name:
            raise ConfigError(
                f"Filter entry at position {index} is missing a name",
                option="name",
                value=name,
            )
        options = data.get("options") or {}
        if not isinstance(options, dict):
            raise ConfigError(
                f"Invalid options for filter '{name}': expected a mapping",
                option="options",
                value=options,
            )
        return cls(name=name, options=options, enabled=bool(data.get("enabled", True)))


@dataclass
class LoggingSettings:
    """Logging configuration for the filter pipeline, applied with apply()."""

    level: str = "INFO"
    json_format: bool = False
    log_file: Optional[Path] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LoggingSettings":
        log_file = data.get("log_file")
        return cls(
            level=str(data.get("level", "INFO")).upper(),
            json_format=bool(data.get("json_format", False)),
            log_file=Path(log_file) if log_file else None,
        )

    def apply(self, pipeline_id: Optional[str] = None) -> logging.Logger:
        """Configure process logging from these settings via setup_logging."""
        return setup_logging(
            pipeline_id=pipeline_id,
            level=self.level,
            json_format=self.json_format,
            log_file=self.log_file,
        )


@dataclass
class FilterPipelineConfig:
    """Filter pipeline configuration.

    Configuration structure:
        pipeline_id: main
        logging:
          level: INFO
          json_format: false
          log_file: logs/filters.log
        filters:
          - name: field_reverser
            enabled: true
            options:
              source: message
    """

    pipeline_id: str = "main"
    logging: LoggingSettings = field(default_factory=LoggingSettings)
    filters: List[FilterDefinition] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FilterPipelineConfig":
        filters = data.get("filters") or []
        if not isinstance(filters, list):
            raise ConfigError(
                "Invalid config file: 'filters' must be a list",
                option="filters",
                value=filters,
            )
        logging_data = data.get("logging") or {}
        if not isinstance(logging_data, dict):
            raise ConfigError(
                "Invalid config file: 'logging' must be a mapping",
                option="logging",
                value=logging_data,
            )
        return cls(
            pipeline_id=str(data.get("pipeline_id", "main")),
            logging=LoggingSettings.from_dict(logging_data),
            filters=[FilterDefinition.from_dict(entry, i) for i, entry in enumerate(filters)],
        )

    @property
    def enabled_filters(self) -> List[FilterDefinition]:
        return [f for f in self.filters if f.enabled]


def load_config(
    config_path: Optional[Path] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> FilterPipelineConfig:
    """Load filter pipeline configuration from a YAML file.

    Raises:
        FileNotFoundError: If config_path does not exist
        ConfigError: If the file content is malformed
    """
    if config_path is None:
        config_path = DEFAULT_CONFIG_FILE
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    logger.info("Loading configuration from file", extra={"config_path": str(config_path)})
    yaml_data = load_yaml(config_path)
    if not isinstance(yaml_data, dict):
        raise ConfigError(f"Invalid config file: expected a mapping at top level in {config_path}")
    yaml_data = _expand_env_vars(yaml_data)

    if overrides:
        logger.debug(f"Applying overrides: {list(overrides.keys())}")
        yaml_data = _deep_merge(yaml_data, overrides)

    config = FilterPipelineConfig.from_dict(yaml_data)

    logger.debug(
        "Configuration loaded successfully",
        extra={
            "pipeline_id": config.pipeline_id,
            "plugin_names": [f.name for f in config.filters],
        },
    )
    return config
