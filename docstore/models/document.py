"""
Dotted-path field access into mapping-shaped documents.
"""

import copy
from collections.abc import Mapping, Sequence
from typing import Any


class _NotSet:
    """Sentinel type for a path that does not resolve."""

    _instance = None

    def __new__(cls) -> "_NotSet":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NOT_SET"

    def __bool__(self) -> bool:
        return False


NOT_SET: Any = _NotSet()


def split_path(path: str) -> list[str]:
    """
    Split a dotted path into its segments.

    Raises:
        ValueError: If the path is empty or has an empty segment.
    """
    if not path:
        raise ValueError("Field path cannot be empty")

    parts = path.split(".")
    if any(part == "" for part in parts):
        raise ValueError(f"Invalid field path: {path!r}")
    return parts


def get_field(doc: Mapping[str, Any], path: str, default: Any = NOT_SET) -> Any:
    """
    Resolve a dotted path like ``address.city`` or ``tags.0`` in a document.

    Mapping segments are looked up by key. Sequence segments (lists, tuples,
    never strings) are looked up by integer index.

    Args:
        doc: The document to read from. Never mutated.
        path: Dotted field path.
        default: Returned when any segment does not resolve.

    Returns:
        The resolved value, or ``default``.
    """
    current: Any = doc
    for part in split_path(path):
        if isinstance(current, Mapping):
            if part not in current:
                return default
            current = current[part]
        elif isinstance(current, Sequence) and not isinstance(current, (str, bytes)):
            try:
                index = int(part)
            except ValueError:
                return default
            if index < 0 or index >= len(current):
                return default
            current = current[index]
        else:
            return default
    return current


def has_field(doc: Mapping[str, Any], path: str) -> bool:
    return get_field(doc, path) is not NOT_SET


def ensure_document(doc: Any) -> Mapping[str, Any]:
    """
    Check that a value can be stored as a document.

    Raises:
        TypeError: If ``doc`` is not a mapping.
    """
    if not isinstance(doc, Mapping):
        raise TypeError(
            f"Documents must be mappings, got {type(doc).__name__}"
        )
    return doc


def clone(doc: Mapping[str, Any]) -> dict[str, Any]:
    """Return an independent deep copy of a document as a plain dict."""
    return copy.deepcopy(dict(doc))


def shallow_merge(doc: Mapping[str, Any], partial: Mapping[str, Any]) -> dict[str, Any]:
    """
    Merge ``partial`` over ``doc`` at the top level only.

    Keys in ``partial`` overwrite (or add) keys in ``doc``; nested mappings are
    replaced wholesale. Neither argument is mutated.
    """
    merged = dict(doc)
    merged.update(partial)
    return merged
