"""
Core library: infrastructure shared by the pipeline host and its plugins.

Modules:
    errors      - Typed exception hierarchy with error categories
    logging     - Structured JSON/console logging with context propagation

Design Principles:
    - No dependency on any specific plugin
    - All modules are independently testable
"""

from .types import ErrorCategory

__version__ = "0.1.0"

__all__ = [
    "ErrorCategory",
]
