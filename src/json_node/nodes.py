"""JSONNode variants and the NodeKind StrEnum.

A JSON value is represented by exactly one of six frozen dataclasses:

- StringNode, IntegerNode, FloatNode, BooleanNode: leaves holding a scalar.
- ArrayNode:  ordered tuple of child nodes.
- ObjectNode: read-only mapping from unique string keys to child nodes.

``JSONNode`` is the closed union of those six classes.  Every node carries
typed accessor properties (``string``, ``integer``, ...) that return the
payload when the node is that variant and ``None`` otherwise.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from enum import StrEnum, auto
from types import MappingProxyType
from typing import Any, ClassVar

__all__ = [
    "ArrayNode",
    "BooleanNode",
    "FloatNode",
    "IntegerNode",
    "JSONNode",
    "NodeKind",
    "ObjectNode",
    "Payload",
    "StringNode",
    "payload_of",
]


class NodeKind(StrEnum):
    """Enumeration of the six JSON node variants.

    StrEnum values are the lowercased member names:
    - STRING         -> "string"
    - INTEGER        -> "integer"
    - FLOATING_POINT -> "floating_point"
    - BOOLEAN        -> "boolean"
    - ARRAY          -> "array"
    - OBJECT         -> "object"
    """

    STRING = auto()
    INTEGER = auto()
    FLOATING_POINT = auto()
    BOOLEAN = auto()
    ARRAY = auto()
    OBJECT = auto()


class _NodeBase:
    """Typed accessors shared by every variant.

    Each accessor is an O(1) isinstance check; there is no coercion between
    variants (``IntegerNode(5).string`` is ``None``, never ``"5"``).
    """

    __slots__ = ()

    kind: ClassVar[NodeKind]

    @property
    def string(self) -> str | None:
        """The text if this is a StringNode, else None."""
        return self.value if isinstance(self, StringNode) else None

    @property
    def integer(self) -> int | None:
        """The integer if this is an IntegerNode, else None."""
        return self.value if isinstance(self, IntegerNode) else None

    @property
    def floating_point(self) -> float | None:
        """The float if this is a FloatNode, else None."""
        return self.value if isinstance(self, FloatNode) else None

    @property
    def boolean(self) -> bool | None:
        """The bool if this is a BooleanNode, else None."""
        return self.value if isinstance(self, BooleanNode) else None

    @property
    def array(self) -> tuple[JSONNode, ...] | None:
        """The child tuple if this is an ArrayNode, else None."""
        return self.items if isinstance(self, ArrayNode) else None

    @property
    def object(self) -> Mapping[str, JSONNode] | None:
        """The read-only member mapping if this is an ObjectNode, else None."""
        return self.members if isinstance(self, ObjectNode) else None


def _require(value: Any, expected: type, variant: str) -> None:
    # bool subclasses int; an IntegerNode or FloatNode must never hold one.
    if not isinstance(value, expected) or (
        expected is not bool and isinstance(value, bool)
    ):
        msg = f"{variant} requires a {expected.__name__} value, got {type(value)!r}"
        raise TypeError(msg)


@dataclass(frozen=True, slots=True)
class StringNode(_NodeBase):
    """Leaf holding JSON text."""

    kind: ClassVar[NodeKind] = NodeKind.STRING

    value: str

    def __post_init__(self) -> None:
        _require(self.value, str, "StringNode")

    @property
    def payload(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class IntegerNode(_NodeBase):
    """Leaf holding a JSON integer.  Never a bool, never a float."""

    kind: ClassVar[NodeKind] = NodeKind.INTEGER

    value: int

    def __post_init__(self) -> None:
        _require(self.value, int, "IntegerNode")

    @property
    def payload(self) -> int:
        return self.value


@dataclass(frozen=True, slots=True)
class FloatNode(_NodeBase):
    """Leaf holding a JSON floating-point number."""

    kind: ClassVar[NodeKind] = NodeKind.FLOATING_POINT

    value: float

    def __post_init__(self) -> None:
        _require(self.value, float, "FloatNode")

    @property
    def payload(self) -> float:
        return self.value


@dataclass(frozen=True, slots=True)
class BooleanNode(_NodeBase):
    """Leaf holding true or false."""

    kind: ClassVar[NodeKind] = NodeKind.BOOLEAN

    value: bool

    def __post_init__(self) -> None:
        _require(self.value, bool, "BooleanNode")

    @property
    def payload(self) -> bool:
        return self.value


@dataclass(frozen=True, slots=True)
class ArrayNode(_NodeBase):
    """Ordered sequence of child nodes.

    Attributes:
        items: The children, in source order.  Any iterable passed in is
               frozen into a tuple so the node stays immutable.

    Subscripting accepts non-negative indices only; ``array[-1]`` raises
    IndexError rather than wrapping around.
    """

    kind: ClassVar[NodeKind] = NodeKind.ARRAY

    items: tuple[JSONNode, ...] = ()

    def __post_init__(self) -> None:
        items = tuple(self.items)
        for item in items:
            if not isinstance(item, _NodeBase):
                msg = f"ArrayNode items must be JSON nodes, got {type(item)!r}"
                raise TypeError(msg)
        object.__setattr__(self, "items", items)

    @property
    def payload(self) -> tuple[JSONNode, ...]:
        return self.items

    def __getitem__(self, index: int) -> JSONNode:
        if index < 0:
            msg = f"negative array index {index} is not supported"
            raise IndexError(msg)
        return self.items[index]

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[JSONNode]:
        return iter(self.items)


@dataclass(frozen=True, slots=True)
class ObjectNode(_NodeBase):
    """Mapping from unique string keys to child nodes.

    Attributes:
        members: Read-only view (MappingProxyType) over a private copy of the
                 mapping passed in.  Key order carries no meaning: two objects
                 with the same members compare equal and hash alike.
    """

    kind: ClassVar[NodeKind] = NodeKind.OBJECT

    members: Mapping[str, JSONNode] = field(default_factory=dict)

    def __post_init__(self) -> None:
        members = dict(self.members)
        for key, child in members.items():
            if not isinstance(key, str):
                msg = f"ObjectNode keys must be str, got {type(key)!r}"
                raise TypeError(msg)
            if not isinstance(child, _NodeBase):
                msg = f"ObjectNode values must be JSON nodes, got {type(child)!r}"
                raise TypeError(msg)
        object.__setattr__(self, "members", MappingProxyType(members))

    def __hash__(self) -> int:
        return hash(frozenset(self.members.items()))

    @property
    def payload(self) -> Mapping[str, JSONNode]:
        return self.members

    def __getitem__(self, key: str) -> JSONNode:
        return self.members[key]

    def __len__(self) -> int:
        return len(self.members)

    def __iter__(self) -> Iterator[str]:
        return iter(self.members)

    def __contains__(self, key: object) -> bool:
        return key in self.members


# Closed union of every node variant.
JSONNode = StringNode | IntegerNode | FloatNode | BooleanNode | ArrayNode | ObjectNode

Payload = str | int | float | bool | tuple[JSONNode, ...] | Mapping[str, JSONNode]


def payload_of(node: JSONNode, kind: NodeKind) -> Payload | None:
    """Return the node's payload if its variant is ``kind``, else None."""
    if node.kind != kind:
        return None
    return node.payload
