"""Path navigation over JSONNode trees.

``node_at`` walks a sequence of steps and returns the node found there.
``value_at`` additionally checks the node's variant against a requested
``NodeKind`` and returns the payload.  Every miss (index out of range, absent
key, step that does not fit the node's variant, wrong requested kind) yields
None; nothing here raises for a lookup that simply does not match.

Example::

    from json_node import NodeKind, from_python, path, value_at

    root = from_python({"people": [{"name": "Keith Moon", "age": 36}]})
    value_at(root, path("people", 0, "name"), NodeKind.STRING)   # "Keith Moon"
    value_at(root, path("people", 0, "name"), NodeKind.INTEGER)  # None
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Literal, overload

from json_node.nodes import (
    ArrayNode,
    JSONNode,
    NodeKind,
    ObjectNode,
    Payload,
    payload_of,
)
from json_node.path import Index, Key, PathStep, parse_pointer

__all__ = [
    "array_at",
    "boolean_at",
    "floating_point_at",
    "integer_at",
    "node_at",
    "object_at",
    "string_at",
    "value_at",
    "value_at_pointer",
]


def node_at(node: JSONNode, steps: Iterable[PathStep]) -> JSONNode | None:
    """Return the node addressed by ``steps``, or None if the path misses.

    Each step must pair with the current node's variant: ``Index`` with an
    ArrayNode (bounds checked with a strict ``<``), ``Key`` with an ObjectNode.
    The first mismatch ends the walk; no partial result is returned.
    """
    current = node
    for step in steps:
        if isinstance(current, ArrayNode) and isinstance(step, Index):
            if step.position >= len(current.items):
                return None
            current = current.items[step.position]
        elif isinstance(current, ObjectNode) and isinstance(step, Key):
            child = current.members.get(step.name)
            if child is None:
                return None
            current = child
        else:
            return None
    return current


@overload
def value_at(
    node: JSONNode, steps: Iterable[PathStep], kind: Literal[NodeKind.STRING]
) -> str | None: ...
@overload
def value_at(
    node: JSONNode, steps: Iterable[PathStep], kind: Literal[NodeKind.INTEGER]
) -> int | None: ...
@overload
def value_at(
    node: JSONNode, steps: Iterable[PathStep], kind: Literal[NodeKind.FLOATING_POINT]
) -> float | None: ...
@overload
def value_at(
    node: JSONNode, steps: Iterable[PathStep], kind: Literal[NodeKind.BOOLEAN]
) -> bool | None: ...
@overload
def value_at(
    node: JSONNode, steps: Iterable[PathStep], kind: Literal[NodeKind.ARRAY]
) -> tuple[JSONNode, ...] | None: ...
@overload
def value_at(
    node: JSONNode, steps: Iterable[PathStep], kind: Literal[NodeKind.OBJECT]
) -> Mapping[str, JSONNode] | None: ...
@overload
def value_at(
    node: JSONNode, steps: Iterable[PathStep], kind: NodeKind
) -> Payload | None: ...
def value_at(
    node: JSONNode, steps: Iterable[PathStep], kind: NodeKind
) -> Payload | None:
    """Return the payload at ``steps`` if the node there is of variant ``kind``.

    An empty path inspects ``node`` itself, so a composite root yields its
    tuple of items or its member mapping when ``kind`` asks for that shape.

    Args:
        node:  Root of the lookup.
        steps: Sequence of Index / Key steps.
        kind:  The variant the caller expects at the end of the path.

    Returns:
        The payload (str, int, float, bool, tuple of nodes or mapping of
        nodes), or None on any path miss or variant mismatch.
    """
    target = node_at(node, steps)
    if target is None:
        return None
    return payload_of(target, kind)


def value_at_pointer(node: JSONNode, pointer: str, kind: NodeKind) -> Payload | None:
    """Like ``value_at`` but addressed by an RFC 6901 JSON Pointer string.

    Raises:
        InvalidPointerError: If ``pointer`` is not valid pointer syntax.
    """
    return value_at(node, parse_pointer(pointer), kind)


def string_at(node: JSONNode, steps: Iterable[PathStep]) -> str | None:
    """Return the text at ``steps``, or None on a miss or another variant."""
    return value_at(node, steps, NodeKind.STRING)


def integer_at(node: JSONNode, steps: Iterable[PathStep]) -> int | None:
    """Return the integer at ``steps``, or None on a miss or another variant."""
    return value_at(node, steps, NodeKind.INTEGER)


def floating_point_at(node: JSONNode, steps: Iterable[PathStep]) -> float | None:
    """Return the float at ``steps``, or None on a miss or another variant."""
    return value_at(node, steps, NodeKind.FLOATING_POINT)


def boolean_at(node: JSONNode, steps: Iterable[PathStep]) -> bool | None:
    """Return the bool at ``steps``, or None on a miss or another variant."""
    return value_at(node, steps, NodeKind.BOOLEAN)


def array_at(
    node: JSONNode, steps: Iterable[PathStep]
) -> tuple[JSONNode, ...] | None:
    """Return the array items at ``steps``, or None on a miss or mismatch."""
    return value_at(node, steps, NodeKind.ARRAY)


def object_at(
    node: JSONNode, steps: Iterable[PathStep]
) -> Mapping[str, JSONNode] | None:
    """Return the object members at ``steps``, or None on a miss or mismatch."""
    return value_at(node, steps, NodeKind.OBJECT)
