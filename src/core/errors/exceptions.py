"""
Unified exception hierarchy for the filter pipeline.

Provides typed exceptions with an error category so the host can tell a
fatal misconfiguration apart from a failure worth retrying.
"""

from typing import Any

# Import ErrorCategory from canonical source to avoid duplicate enum issues
# (comparing enums from different classes always returns False)
from core.types import ErrorCategory


class PipelineError(Exception):
    """
    Base exception for all pipeline errors.

    Attributes:
        message: Human-readable error description
        category: Error classification for retry decisions
        cause: Original exception if wrapping
        context: Additional context dict for debugging
    """

    category: ErrorCategory = ErrorCategory.UNKNOWN

    def __init__(
        self,
        message: str,
        cause: Exception | None = None,
        context: dict | None = None,
    ):
        self.message = message
        self.cause = cause
        self.context = context or {}
        super().__init__(message)

    @property
    def is_retryable(self) -> bool:
        return self.category != ErrorCategory.PERMANENT

    def __str__(self) -> str:
        parts = [self.message]
        if self.cause:
            parts.append(f"Caused by: {self.cause}")
        return " | ".join(parts)


class PermanentError(PipelineError):
    """Base class for permanent/non-retriable errors."""

    category = ErrorCategory.PERMANENT


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigError(PermanentError):
    """
    Invalid plugin or pipeline configuration.

    Raised at construction time only. The host must refuse to start the
    pipeline stage that raised it.
    """

    def __init__(
        self,
        message: str,
        option: str | None = None,
        value: Any = None,
        cause: Exception | None = None,
    ):
        context = {}
        if option is not None:
            context["option"] = option
            context["value"] = value
        super().__init__(message, cause, context)
        self.option = option
        self.value = value

    @classmethod
    def invalid_value(cls, option: str, value: Any) -> "ConfigError":
        return cls(
            f"Invalid value '{value}' for config option {option}",
            option=option,
            value=value,
        )


# =============================================================================
# Event Data Errors
# =============================================================================


class InvalidFieldReferenceError(PermanentError):
    """A field reference cannot be parsed or cannot be written through."""

    def __init__(self, reference: str, reason: str):
        super().__init__(
            f"Invalid field reference '{reference}': {reason}",
            context={"reference": reference},
        )
        self.reference = reference
