"""
Event filters: example filter plugins for a log-processing pipeline host.

Subpackages:
    common   - Event record shared by the host and its plugins
    plugins  - Plugin API, plugin registry and the bundled filters

Dependencies:
    - core.*: Errors and structured logging
    - pydantic: Configuration option descriptors
"""

__version__ = "0.1.0"
