"""
Structured event record.

An Event is one log record flowing through the pipeline: a mapping from
field name to a dynamically-typed value (string, number, boolean, nested
mapping, list or None).

Fields are addressed by reference:
    "message"        top-level field
    "a.b.c"          nested field, dotted form
    "[a][b][c]"      nested field, bracket form
    "[a.b]"          top-level field whose name contains a dot
"""

import copy
import re
from collections.abc import Mapping
from functools import lru_cache
from typing import Any

from core.errors import InvalidFieldReferenceError

_BRACKET_SEGMENT = re.compile(r"\[([^\[\]]+)\]")

_MISSING = object()


def parse_field_reference(reference: str) -> tuple[str, ...]:
    """
    Split a field reference into its path segments.

    Args:
        reference: Dotted or bracketed field reference

    Returns:
        Tuple of keys from the outermost mapping inwards

    Raises:
        InvalidFieldReferenceError: If the reference is empty or malformed
    """
    if not isinstance(reference, str) or not reference:
        raise InvalidFieldReferenceError(str(reference), "reference must be a non-empty string")
    return _parse_field_reference(reference)


@lru_cache(maxsize=1024)
def _parse_field_reference(reference: str) -> tuple[str, ...]:
    if reference.startswith("["):
        segments = _BRACKET_SEGMENT.findall(reference)
        if "".join(f"[{s}]" for s in segments) != reference:
            raise InvalidFieldReferenceError(reference, "malformed brackets")
        return tuple(segments)

    if "[" in reference or "]" in reference:
        raise InvalidFieldReferenceError(reference, "brackets must enclose every segment")

    segments = tuple(reference.split("."))
    if any(not segment for segment in segments):
        raise InvalidFieldReferenceError(reference, "empty path segment")
    return segments


class Event:
    """
    A structured record owned by the pipeline host.

    The supplied mapping is deep-copied so the event owns its data. Filters
    borrow events for the duration of a batch and may change fields in place.
    """

    def __init__(self, data: Mapping[str, Any] | None = None):
        self._data: dict[str, Any] = copy.deepcopy(dict(data)) if data else {}

    def _lookup(self, reference: str) -> Any:
        value: Any = self._data
        for key in parse_field_reference(reference):
            if not isinstance(value, dict) or key not in value:
                return _MISSING
            value = value[key]
        return value

    def get_field(self, reference: str) -> Any:
        """Return the value at reference, or None when the field is absent."""
        value = self._lookup(reference)
        return None if value is _MISSING else value

    def includes(self, reference: str) -> bool:
        """Check whether the field exists, even when it holds None."""
        return self._lookup(reference) is not _MISSING

    def set_field(self, reference: str, value: Any) -> None:
        """
        Set the value at reference, creating intermediate mappings as needed.

        Raises:
            InvalidFieldReferenceError: If an intermediate value is not a mapping
        """
        *parents, leaf = parse_field_reference(reference)
        target = self._data
        for key in parents:
            child = target.setdefault(key, {})
            if not isinstance(child, dict):
                raise InvalidFieldReferenceError(
                    reference, f"'{key}' holds a {type(child).__name__}, not a mapping"
                )
            target = child
        target[leaf] = value

    def remove_field(self, reference: str) -> Any:
        """Remove the field and return its value, or None when it was absent."""
        *parents, leaf = parse_field_reference(reference)
        target: Any = self._data
        for key in parents:
            target = target.get(key) if isinstance(target, dict) else None
        if not isinstance(target, dict):
            return None
        return target.pop(leaf, None)

    def to_dict(self) -> dict[str, Any]:
        """Return a deep copy of the event data."""
        return copy.deepcopy(self._data)

    def __repr__(self) -> str:
        return f"Event({self._data!r})"
