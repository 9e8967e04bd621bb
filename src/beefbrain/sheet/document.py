"""
Document model for character sheets.

A parsed sheet is a plain tree of dicts, lists and scalars as produced by
``yaml.safe_load``. Nodes are addressed by paths: tuples of mapping keys and
sequence indices.
"""

from typing import Any

import yaml

from beefbrain.exceptions import ParseError

NodePath = tuple[str | int, ...]

_MISSING = object()


def parse_document(text: str) -> Any:
    """
    Parse YAML text into a document tree.

    Args:
        text: YAML document text

    Returns:
        The document tree, or None for an empty document

    Raises:
        ParseError: If the text is not well-formed YAML
    """
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as e:
        details: dict[str, Any] = {}
        mark = getattr(e, "problem_mark", None)
        if mark is not None:
            details = {"line": mark.line + 1, "column": mark.column + 1}
        problem = getattr(e, "problem", None) or str(e)
        raise ParseError(f"Invalid YAML: {problem}", details=details) from e
    except RecursionError as e:
        raise ParseError("Invalid YAML: document nested too deeply") from e


def get_path(tree: Any, path: NodePath, default: Any = None) -> Any:
    """
    Look up the node at ``path``.

    Args:
        tree: Document tree
        path: Keys and indices from the root
        default: Returned when any segment is missing

    Returns:
        The node, or ``default``
    """
    node = tree
    for segment in path:
        if isinstance(node, dict):
            node = node.get(segment, _MISSING)
        elif isinstance(node, list) and isinstance(segment, int) and 0 <= segment < len(node):
            node = node[segment]
        else:
            return default
        if node is _MISSING:
            return default
    return node


def get_mapping(tree: Any, path: NodePath) -> dict[str, Any] | None:
    """Return the mapping at ``path``, or None if absent or not a mapping."""
    node = get_path(tree, path)
    return node if isinstance(node, dict) else None


def set_path(tree: Any, path: NodePath, value: Any) -> None:
    """
    Assign ``value`` at ``path``, replacing whatever was there.

    The parent of the target must already exist. Existing mapping keys keep
    their position; new keys are appended.

    Raises:
        KeyError: If the parent node does not exist or cannot hold the key
    """
    if not path:
        raise KeyError("Cannot replace the document root")
    parent = get_path(tree, path[:-1])
    key = path[-1]
    if isinstance(parent, dict):
        parent[key] = value
    elif isinstance(parent, list) and isinstance(key, int) and 0 <= key < len(parent):
        parent[key] = value
    else:
        raise KeyError(f"No container at {format_path(path[:-1])}")


def format_path(path: NodePath) -> str:
    """Format a path as a dotted string, e.g. ``character.skills.climb``."""
    return ".".join(str(segment) for segment in path)


def is_number(value: Any) -> bool:
    """Check if a scalar counts as a number on a sheet. Booleans do not."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def sum_numbers(values: dict[str, Any]) -> int | float:
    """Sum the numeric values of a contribution map, ignoring everything else."""
    return sum(value for value in values.values() if is_number(value))
