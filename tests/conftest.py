"""
pytest configuration for the filter pipeline tests.

Adds src directory to Python path for imports and resets shared state
between tests.
"""

import sys
from pathlib import Path

import pytest

# Add src directory to Python path
src_dir = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_dir))


@pytest.fixture(autouse=True)
def _reset_shared_state():
    """Clear the global plugin registry and log context around every test."""
    from core.logging.context import clear_log_context
    from event_filters.plugins.shared.registry import reset_plugin_registry

    reset_plugin_registry()
    clear_log_context()
    yield
    reset_plugin_registry()
    clear_log_context()
