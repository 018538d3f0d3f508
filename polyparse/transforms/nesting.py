"""
Dotted-Key Unnester.

INI files have no syntax for nesting below a section, so nesting is
expressed with dotted keys::

    [zero]
    batters.batter.0.id = 1001

unnest() rewrites such keys into nested dicts and merges every key that
shares a prefix::

    {"zero": {"batters": {"batter": {"0": {"id": "1001"}}}}}

Rules:
- Keys without the separator pass through unchanged.
- Mapping values (INI sections) are unnested first, recursively.
- Numeric segments stay string keys ("0"); they never become list indices.
- A path that would need a segment to be both a scalar and a mapping, or
  that assigns two values to the same leaf, raises StructureConflictError.
- There is no escape for a literal separator inside a key name.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from polyparse.exceptions import StructureConflictError


def unnest(flat: Mapping[str, Any], separator: str = ".") -> dict[str, Any]:
    """Expand dotted keys in *flat* into nested dicts.

    Args:
        flat: Mapping whose keys may contain *separator*.
        separator: Level separator inside keys.

    Returns:
        A new nested dict; *flat* is not modified.

    Raises:
        StructureConflictError: If two keys disagree on the shape of a
            shared path.
    """
    nested: dict[str, Any] = {}
    for key, value in flat.items():
        if isinstance(value, Mapping):
            value = unnest(value, separator)
        _insert(nested, str(key).split(separator), value, separator)
    return nested


def _insert(target: dict[str, Any], path: list[str], value: Any, separator: str) -> None:
    node = target
    for depth, segment in enumerate(path[:-1]):
        child = node.setdefault(segment, {})
        if not isinstance(child, dict):
            raise StructureConflictError(separator.join(path[:depth + 1]))
        node = child

    leaf = path[-1]
    leaf_path = separator.join(path)
    if leaf not in node:
        node[leaf] = value
    elif isinstance(node[leaf], dict) and isinstance(value, dict):
        _merge(node[leaf], value, leaf_path, separator)
    else:
        raise StructureConflictError(leaf_path)


def _merge(dest: dict[str, Any], src: dict[str, Any], prefix: str, separator: str) -> None:
    """Merge *src* into *dest* in place; both are already unnested."""
    for key, value in src.items():
        path = f"{prefix}{separator}{key}"
        if key not in dest:
            dest[key] = value
        elif isinstance(dest[key], dict) and isinstance(value, dict):
            _merge(dest[key], value, path, separator)
        else:
            raise StructureConflictError(path)
