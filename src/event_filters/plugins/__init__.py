"""
Filter plugins for the pipeline host.

Import plugin classes and utilities from:
- event_filters.plugins.shared.base - Plugin API (Filter, Configuration, Context)
- event_filters.plugins.shared.registry - Plugin registration and construction
- event_filters.plugins.field_reverser - Field reverser filter
"""
