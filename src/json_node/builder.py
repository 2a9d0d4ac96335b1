"""NodeBuilder: converts a decoded JSON value into a JSONNode tree.

Converts dicts, lists and scalar values into the six node variants using an
explicit work stack, so nesting depth is bounded by memory rather than by the
interpreter recursion limit.

Values with no node representation (None, bytes, sets, mappings with non-str
keys, ...) make that value fail; inside a container the failing element or
member is dropped and the container still converts unless
``BuildConfig.strict`` is set.

JSON Pointer paths (RFC 6901) are built during traversal purely for the debug
log records emitted when something is dropped:
- Root is "" (empty string)
- Each level appends "/{escaped key or index}"
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any

import numpy as np

from json_node.config import BuildConfig
from json_node.nodes import (
    ArrayNode,
    BooleanNode,
    FloatNode,
    IntegerNode,
    JSONNode,
    ObjectNode,
    StringNode,
)
from json_node.path import escape_token

__all__ = ["NodeBuilder", "from_python"]

logger = logging.getLogger(__name__)


@dataclass
class NodeBuilder:
    """Converts a decoded JSON value into a JSONNode tree.

    The dispatch order is critical: bool MUST be checked before int because
    bool is a subclass of int in Python (isinstance(True, int) is True).  The
    same holds for ``numpy.bool_``, which is checked before ``numpy.integer``.

    Numeric kinds are never coerced: 5 becomes an IntegerNode and 5.0 a
    FloatNode, exactly as the decoder produced them.

    Example::

        builder = NodeBuilder()
        node = builder.build({"people": [{"name": "Keith Moon", "age": 36}]})
        # node: ObjectNode -> ArrayNode -> ObjectNode -> StringNode / IntegerNode
    """

    config: BuildConfig = field(default_factory=BuildConfig)

    def build(self, value: Any) -> JSONNode | None:
        """Convert a decoded JSON value to a JSONNode tree.

        Containers are expanded depth-first from a stack of open frames; a
        frame is closed into its node once all of its entries are converted,
        and that node is then attached to the frame below it.

        Args:
            value: A value as produced by ``json.loads`` (dict, list, str, int,
                   float, bool), or an equivalent numpy scalar / ndarray.

        Returns:
            The root node, or None if ``value`` itself is unrepresentable (or,
            in strict mode, if anything nested inside it is).
        """
        opened = self._open(value, path="", depth=0)
        if not isinstance(opened, _Frame):
            return opened

        stack = [opened]
        while True:
            frame = stack[-1]
            entry = next(frame.entries, None)

            if entry is not None:
                label, child_value = entry
                child_path = f"{frame.path}/{_token(label)}"
                child = self._open(child_value, child_path, frame.depth)
                if isinstance(child, _Frame):
                    child.label = label
                    stack.append(child)
                    continue
            else:
                stack.pop()
                if not stack:
                    return frame.close()
                label, child_path, child_value = frame.label, frame.path, frame.source
                child = frame.close()
                frame = stack[-1]

            if child is None:
                if self.config.strict:
                    return None
                logger.debug(
                    "Dropping unrepresentable %s at %r (%s)",
                    "array element" if frame.is_array else "object member",
                    child_path,
                    type(child_value).__name__,
                )
                continue
            frame.children.append((label, child))

    def _open(self, value: Any, path: str, depth: int) -> JSONNode | _Frame | None:
        """Convert a leaf directly, or open a frame for a container.

        Args:
            value: The decoded value.
            path:  JSON Pointer path to ``value``.
            depth: Number of containers enclosing ``value``.

        Returns:
            A leaf node, a new frame for a list/tuple/mapping, or None when the
            value is unrepresentable or nested deeper than ``max_depth``.
        """
        if isinstance(value, np.ndarray):
            value = value.tolist()

        # CRITICAL: bool MUST be checked before int: bool subclasses int
        if isinstance(value, (bool, np.bool_)):
            return BooleanNode(bool(value))

        if isinstance(value, str):
            return StringNode(str(value))

        if isinstance(value, (int, np.integer)):
            return IntegerNode(int(value))

        if isinstance(value, (float, np.floating)):
            return FloatNode(float(value))

        if isinstance(value, (list, tuple)):
            if not self._within_depth(depth, path):
                return None
            return _Frame(
                entries=enumerate(value),
                path=path,
                depth=depth + 1,
                is_array=True,
                source=value,
            )

        if isinstance(value, Mapping) and all(isinstance(k, str) for k in value):
            if not self._within_depth(depth, path):
                return None
            return _Frame(
                entries=iter(value.items()),
                path=path,
                depth=depth + 1,
                is_array=False,
                source=value,
            )

        return None

    def _within_depth(self, depth: int, path: str) -> bool:
        max_depth = self.config.max_depth
        if max_depth is not None and depth >= max_depth:
            logger.debug("Container at %r exceeds max_depth=%d", path, max_depth)
            return False
        return True


def _token(label: int | str) -> str:
    return str(label) if isinstance(label, int) else escape_token(label)


@dataclass
class _Frame:
    """An array or object whose entries are still being converted.

    Attributes:
        entries:  Remaining (index, value) or (key, value) pairs of the source.
        path:     JSON Pointer path to this container.
        depth:    Nesting depth of this container (root container is 1).
        is_array: True for a list/tuple source, False for a mapping.
        source:   The source container, kept for the drop log record.
        label:    Index or key under which the parent stores this container.
        children: Converted entries, in source order.
    """

    entries: Iterator[tuple[Any, Any]]
    path: str
    depth: int
    is_array: bool
    source: Any
    label: int | str = ""
    children: list[tuple[Any, JSONNode]] = field(default_factory=list)

    def close(self) -> ArrayNode | ObjectNode:
        if self.is_array:
            return ArrayNode(tuple(node for _, node in self.children))
        # Keys are used verbatim; the decoder already collapsed duplicates.
        return ObjectNode(dict(self.children))


def from_python(value: Any, config: BuildConfig | None = None) -> JSONNode | None:
    """Convert a decoded JSON value to a JSONNode tree with a fresh NodeBuilder.

    Returns None when ``value`` is unrepresentable at the top level.
    """
    builder = NodeBuilder(config=config if config is not None else BuildConfig())
    return builder.build(value)
