"""
Core types shared across modules.
"""

from enum import Enum


class ErrorCategory(Enum):
    """
    Classification of error types for handling decisions.

    Categories:
        PERMANENT: Failures that will not succeed on retry
                   (e.g., invalid plugin configuration, malformed field references)
        UNKNOWN: Unclassified errors
    """

    PERMANENT = "permanent"
    UNKNOWN = "unknown"
