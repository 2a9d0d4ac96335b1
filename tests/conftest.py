"""Shared JSON documents for the json-node test suite."""

from __future__ import annotations

from typing import Any

import pytest

from json_node import JSONNode, from_python

SAMPLE_DOCUMENT: dict[str, Any] = {
    "string": "This is a string",
    "int": 5,
    "floatingPoint": 3.14,
    "bool": True,
    "array": ["arrayValue1", "arrayValue2", "arrayValue3"],
    "dictionary": {"key1": "value1", "key2": "value2", "key3": "value3"},
}

PEOPLE_DOCUMENT: dict[str, Any] = {
    "people": [
        {"name": "Keith Moon", "age": 36},
        {"name": "Alissa Moon", "age": 31},
    ],
    "company": "Data Ninjitsu",
    "cool": True,
    "coolness": 5.5,
    "rating": 5,
}


@pytest.fixture
def sample_root() -> JSONNode:
    """Node tree built from SAMPLE_DOCUMENT."""
    node = from_python(SAMPLE_DOCUMENT)
    assert node is not None
    return node


@pytest.fixture
def people_root() -> JSONNode:
    """Node tree built from PEOPLE_DOCUMENT."""
    node = from_python(PEOPLE_DOCUMENT)
    assert node is not None
    return node


@pytest.fixture
def people_document() -> dict[str, Any]:
    """The raw PEOPLE_DOCUMENT mapping, as json.loads would return it."""
    return PEOPLE_DOCUMENT
