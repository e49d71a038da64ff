"""
Exception hierarchy for the pipeline host and its plugins.

Provides:
- ErrorCategory enum for classifying errors
- PipelineError hierarchy for typed exceptions
"""

from core.errors.exceptions import (
    ConfigError,
    ErrorCategory,
    InvalidFieldReferenceError,
    PermanentError,
    PipelineError,
)

__all__ = [
    # Enums
    "ErrorCategory",
    # Base classes
    "PipelineError",
    "PermanentError",
    # Configuration and data errors
    "ConfigError",
    "InvalidFieldReferenceError",
]
