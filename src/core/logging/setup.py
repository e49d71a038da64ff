"""Logging setup and configuration."""

import io
import logging
import sys
from pathlib import Path

from core.logging.context import set_log_context
from core.logging.formatters import ConsoleFormatter, JSONFormatter

DEFAULT_LEVEL = logging.INFO

# Noisy loggers to suppress
NOISY_LOGGERS = [
    "urllib3",
    "asyncio",
]


def _resolve_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level}")
    return resolved


def setup_logging(
    name: str = "event_filters",
    pipeline_id: str | None = None,
    worker_id: str | None = None,
    level: int | str = DEFAULT_LEVEL,
    json_format: bool = False,
    log_file: Path | None = None,
    suppress_noisy: bool = True,
) -> logging.Logger:
    """
    Configure the root logger with a stdout handler and an optional file handler.

    The stdout handler uses JSONFormatter when json_format is set, otherwise
    ConsoleFormatter. The file handler, when log_file is given, always writes
    JSON lines so the output stays machine-readable.

    Args:
        name: Logger name returned to the caller
        pipeline_id: Pipeline identifier stored in the log context
        worker_id: Worker identifier stored in the log context
        level: Level name ("DEBUG") or number for all handlers
        json_format: Use JSON lines on stdout instead of the console format
        log_file: Optional path of a JSON lines log file
        suppress_noisy: Quiet down third-party loggers

    Returns:
        Configured logger instance
    """
    level = _resolve_level(level)

    if pipeline_id:
        set_log_context(pipeline_id=pipeline_id)
    if worker_id:
        set_log_context(worker_id=worker_id)

    if sys.platform == "win32":
        safe_stdout = io.TextIOWrapper(sys.stdout.buffer, encoding="utf-8", errors="replace")
        console_handler = logging.StreamHandler(safe_stdout)
    else:
        console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(JSONFormatter() if json_format else ConsoleFormatter())

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()
    root_logger.addHandler(console_handler)

    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(JSONFormatter())
        root_logger.addHandler(file_handler)

    if suppress_noisy:
        for logger_name in NOISY_LOGGERS:
            logging.getLogger(logger_name).setLevel(logging.WARNING)

    logger = logging.getLogger(name)
    logger.debug(
        f"Logging initialized: file={log_file}, json={json_format}",
        extra={"pipeline_id": pipeline_id},
    )
    return logger

