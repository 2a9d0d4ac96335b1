"""json-node - immutable typed JSON trees with path-based value extraction."""

from __future__ import annotations

from json_node.api import loads, parse
from json_node.builder import NodeBuilder, from_python
from json_node.config import BuildConfig
from json_node.errors import (
    InvalidPointerError,
    JSONNodeError,
    NodeDecodeError,
    UnrepresentableValueError,
)
from json_node.navigator import (
    array_at,
    boolean_at,
    floating_point_at,
    integer_at,
    node_at,
    object_at,
    string_at,
    value_at,
    value_at_pointer,
)
from json_node.nodes import (
    ArrayNode,
    BooleanNode,
    FloatNode,
    IntegerNode,
    JSONNode,
    NodeKind,
    ObjectNode,
    StringNode,
    payload_of,
)
from json_node.path import Index, Key, PathStep, format_pointer, parse_pointer, path

__version__: str = "0.1.0"
__all__: list[str] = [
    "ArrayNode",
    "BooleanNode",
    "BuildConfig",
    "FloatNode",
    "Index",
    "IntegerNode",
    "InvalidPointerError",
    "JSONNode",
    "JSONNodeError",
    "Key",
    "NodeBuilder",
    "NodeDecodeError",
    "NodeKind",
    "ObjectNode",
    "PathStep",
    "StringNode",
    "UnrepresentableValueError",
    "array_at",
    "boolean_at",
    "floating_point_at",
    "format_pointer",
    "from_python",
    "integer_at",
    "loads",
    "node_at",
    "object_at",
    "parse",
    "parse_pointer",
    "path",
    "payload_of",
    "string_at",
    "value_at",
    "value_at_pointer",
]
