"""Tests for the JSONNode variants and the NodeKind StrEnum.

Verifies:
- NodeKind has exactly six members with lowercase string values
- Each variant's accessor returns its payload and every other accessor None
- Leaf constructors reject payloads of the wrong type (no bool as int)
- Nodes are immutable, compare by value and are hashable
- Composite subscripting, len(), iteration and membership
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

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

ACCESSORS = ("string", "integer", "floating_point", "boolean", "array", "object")


class TestNodeKind:
    """Tests for the NodeKind StrEnum."""

    def test_has_exactly_six_members(self) -> None:
        assert len(NodeKind) == 6

    def test_values_are_lowercased(self) -> None:
        assert NodeKind.STRING == "string"
        assert NodeKind.INTEGER == "integer"
        assert NodeKind.FLOATING_POINT == "floating_point"
        assert NodeKind.BOOLEAN == "boolean"
        assert NodeKind.ARRAY == "array"
        assert NodeKind.OBJECT == "object"

    def test_each_variant_reports_its_kind(self) -> None:
        assert StringNode("x").kind is NodeKind.STRING
        assert IntegerNode(1).kind is NodeKind.INTEGER
        assert FloatNode(1.0).kind is NodeKind.FLOATING_POINT
        assert BooleanNode(False).kind is NodeKind.BOOLEAN
        assert ArrayNode().kind is NodeKind.ARRAY
        assert ObjectNode().kind is NodeKind.OBJECT


class TestTypedAccessors:
    """Each accessor returns the payload only for its own variant."""

    @pytest.mark.parametrize(
        ("node", "accessor", "expected"),
        [
            (StringNode("hello"), "string", "hello"),
            (IntegerNode(42), "integer", 42),
            (FloatNode(2.5), "floating_point", 2.5),
            (BooleanNode(True), "boolean", True),
            (ArrayNode((IntegerNode(1),)), "array", (IntegerNode(1),)),
        ],
    )
    def test_matching_accessor_returns_payload(
        self, node: JSONNode, accessor: str, expected: object
    ) -> None:
        assert getattr(node, accessor) == expected

    @pytest.mark.parametrize(
        ("node", "accessor"),
        [
            (StringNode("hello"), "string"),
            (IntegerNode(42), "integer"),
            (FloatNode(2.5), "floating_point"),
            (BooleanNode(True), "boolean"),
            (ArrayNode(), "array"),
            (ObjectNode(), "object"),
        ],
    )
    def test_non_matching_accessors_return_none(
        self, node: JSONNode, accessor: str
    ) -> None:
        for other in ACCESSORS:
            if other != accessor:
                assert getattr(node, other) is None, f"{other} on {node!r}"

    def test_object_accessor_returns_members(self) -> None:
        node = ObjectNode({"a": StringNode("b")})
        assert node.object == {"a": StringNode("b")}

    def test_integer_is_not_stringified(self) -> None:
        assert IntegerNode(5).string is None

    def test_integer_is_not_widened_to_float(self) -> None:
        assert IntegerNode(5).floating_point is None

    def test_false_boolean_is_returned_not_none(self) -> None:
        assert BooleanNode(False).boolean is False

    def test_empty_array_accessor_returns_empty_tuple(self) -> None:
        assert ArrayNode().array == ()


class TestPayloadOf:
    """payload_of() matches on NodeKind."""

    def test_matching_kind(self) -> None:
        assert payload_of(StringNode("x"), NodeKind.STRING) == "x"

    def test_mismatched_kind(self) -> None:
        assert payload_of(StringNode("x"), NodeKind.INTEGER) is None

    def test_accepts_plain_string_kind(self) -> None:
        assert payload_of(IntegerNode(3), NodeKind("integer")) == 3

    @pytest.mark.parametrize(
        ("node", "expected"),
        [
            (StringNode("x"), "x"),
            (IntegerNode(3), 3),
            (FloatNode(1.5), 1.5),
            (BooleanNode(False), False),
            (ArrayNode((IntegerNode(1),)), (IntegerNode(1),)),
            (ObjectNode({"a": IntegerNode(1)}), {"a": IntegerNode(1)}),
        ],
    )
    def test_every_variant_reports_own_payload(
        self, node: JSONNode, expected: object
    ) -> None:
        assert node.payload == expected
        assert payload_of(node, node.kind) == expected


class TestLeafValidation:
    """Leaf constructors reject payloads of another type."""

    @pytest.mark.parametrize(
        ("cls", "value"),
        [
            (StringNode, 5),
            (IntegerNode, True),
            (IntegerNode, 1.0),
            (IntegerNode, "1"),
            (FloatNode, 1),
            (FloatNode, False),
            (BooleanNode, 1),
        ],
    )
    def test_wrong_payload_type_raises(self, cls: type, value: object) -> None:
        with pytest.raises(TypeError):
            cls(value)

    def test_array_rejects_non_node_items(self) -> None:
        with pytest.raises(TypeError):
            ArrayNode((1, 2))  # type: ignore[arg-type]

    def test_object_rejects_non_node_values(self) -> None:
        with pytest.raises(TypeError):
            ObjectNode({"a": 1})  # type: ignore[dict-item]

    def test_object_rejects_non_str_keys(self) -> None:
        with pytest.raises(TypeError):
            ObjectNode({1: StringNode("x")})  # type: ignore[dict-item]


class TestImmutability:
    """Nodes cannot be changed after construction."""

    def test_leaf_field_assignment_raises(self) -> None:
        node = StringNode("x")
        with pytest.raises(FrozenInstanceError):
            node.value = "y"  # type: ignore[misc]

    def test_array_items_frozen_into_tuple(self) -> None:
        source = [IntegerNode(1)]
        node = ArrayNode(source)  # type: ignore[arg-type]
        source.append(IntegerNode(2))
        assert isinstance(node.items, tuple)
        assert len(node) == 1

    def test_object_members_are_read_only(self) -> None:
        node = ObjectNode({"a": IntegerNode(1)})
        with pytest.raises(TypeError):
            node.members["b"] = IntegerNode(2)  # type: ignore[index]

    def test_object_copies_source_mapping(self) -> None:
        source = {"a": IntegerNode(1)}
        node = ObjectNode(source)
        source["b"] = IntegerNode(2)
        assert "b" not in node

    def test_cannot_add_arbitrary_attributes(self) -> None:
        node = IntegerNode(1)
        with pytest.raises((AttributeError, TypeError)):
            node.extra = "nope"  # type: ignore[attr-defined]


class TestEqualityAndHashing:
    """Nodes compare by value and can be used as dict keys."""

    def test_equal_leaves(self) -> None:
        assert StringNode("a") == StringNode("a")
        assert hash(StringNode("a")) == hash(StringNode("a"))

    def test_integer_and_float_never_equal(self) -> None:
        assert IntegerNode(1) != FloatNode(1.0)

    def test_integer_and_boolean_never_equal(self) -> None:
        assert IntegerNode(1) != BooleanNode(True)

    def test_array_order_is_significant(self) -> None:
        a = ArrayNode((IntegerNode(1), IntegerNode(2)))
        b = ArrayNode((IntegerNode(2), IntegerNode(1)))
        assert a != b

    def test_object_key_order_is_not_significant(self) -> None:
        a = ObjectNode({"x": IntegerNode(1), "y": IntegerNode(2)})
        b = ObjectNode({"y": IntegerNode(2), "x": IntegerNode(1)})
        assert a == b
        assert hash(a) == hash(b)

    def test_nested_nodes_are_hashable(self) -> None:
        node = ObjectNode({"list": ArrayNode((ObjectNode({"k": BooleanNode(True)}),))})
        assert {node: "ok"}[node] == "ok"


class TestArrayNodeContainer:
    """ArrayNode behaves like a read-only sequence."""

    @pytest.fixture
    def array(self) -> ArrayNode:
        return ArrayNode((StringNode("a"), StringNode("b"), StringNode("c")))

    def test_len(self, array: ArrayNode) -> None:
        assert len(array) == 3

    def test_getitem(self, array: ArrayNode) -> None:
        assert array[1] == StringNode("b")

    def test_out_of_range_raises_index_error(self, array: ArrayNode) -> None:
        with pytest.raises(IndexError):
            array[3]

    def test_negative_index_raises_index_error(self, array: ArrayNode) -> None:
        with pytest.raises(IndexError):
            array[-1]

    def test_iteration_preserves_order(self, array: ArrayNode) -> None:
        assert [node.string for node in array] == ["a", "b", "c"]


class TestObjectNodeContainer:
    """ObjectNode behaves like a read-only mapping keyed by str."""

    @pytest.fixture
    def obj(self) -> ObjectNode:
        return ObjectNode({"name": StringNode("Keith"), "age": IntegerNode(36)})

    def test_len(self, obj: ObjectNode) -> None:
        assert len(obj) == 2

    def test_getitem(self, obj: ObjectNode) -> None:
        assert obj["age"] == IntegerNode(36)

    def test_missing_key_raises_key_error(self, obj: ObjectNode) -> None:
        with pytest.raises(KeyError):
            obj["missing"]

    def test_contains(self, obj: ObjectNode) -> None:
        assert "name" in obj
        assert "missing" not in obj

    def test_iterates_over_keys(self, obj: ObjectNode) -> None:
        assert set(obj) == {"name", "age"}
