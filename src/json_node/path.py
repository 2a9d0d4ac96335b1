"""Path steps for navigating a JSONNode tree.

A path is any finite sequence of steps:

- ``Index(n)`` selects the n-th element of an ArrayNode.
- ``Key(name)`` selects a member of an ObjectNode.

The empty path addresses the node itself.  Paths can also be written as
RFC 6901 JSON Pointers; ``parse_pointer`` converts one into steps and
``format_pointer`` goes the other way.

Example::

    from json_node.path import Index, Key, parse_pointer, path

    path("people", 0, "name")           # (Key("people"), Index(0), Key("name"))
    parse_pointer("/people/0/name")     # same steps
"""

from __future__ import annotations

import re
import threading
from collections.abc import Iterable
from dataclasses import dataclass

from cachetools import LRUCache, cached

from json_node.errors import InvalidPointerError

__all__ = [
    "POINTER_CACHE_SIZE",
    "Index",
    "Key",
    "PathStep",
    "escape_token",
    "format_pointer",
    "parse_pointer",
    "path",
]

# Parsed pointers are pure functions of their text; memoise the hot ones.
# LRUCache reorders entries on every hit, so access is serialised by a lock.
POINTER_CACHE_SIZE = 256

# Array-index tokens per RFC 6901: "0" or a digit string without leading zeros.
_INDEX_TOKEN = re.compile(r"0|[1-9][0-9]*")

# A "~" not followed by "0" or "1" is an invalid escape.
_BAD_ESCAPE = re.compile(r"~(?![01])")


@dataclass(frozen=True, slots=True)
class Index:
    """Array-index step.  ``position`` must be a non-negative int."""

    position: int

    def __post_init__(self) -> None:
        if not isinstance(self.position, int) or isinstance(self.position, bool):
            msg = f"Index position must be an int, got {type(self.position)!r}"
            raise TypeError(msg)
        if self.position < 0:
            msg = f"Index position must be >= 0, got {self.position}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Key:
    """Object-key step.  The name is used verbatim, never normalised."""

    name: str

    def __post_init__(self) -> None:
        if not isinstance(self.name, str):
            msg = f"Key name must be a str, got {type(self.name)!r}"
            raise TypeError(msg)


PathStep = Index | Key


def path(*components: int | str | PathStep) -> tuple[PathStep, ...]:
    """Build a path from plain components.

    ``int`` becomes ``Index``, ``str`` becomes ``Key`` and existing steps pass
    through unchanged.

    Raises:
        TypeError: For any other component type (including bool).
        ValueError: For a negative int.
    """
    steps: list[PathStep] = []
    for component in components:
        if isinstance(component, (Index, Key)):
            steps.append(component)
        elif isinstance(component, str):
            steps.append(Key(component))
        elif isinstance(component, int) and not isinstance(component, bool):
            steps.append(Index(component))
        else:
            msg = f"Unsupported path component: {component!r}"
            raise TypeError(msg)
    return tuple(steps)


def escape_token(token: str) -> str:
    """Escape one reference token for use in a JSON Pointer ("~" first, then "/")."""
    return token.replace("~", "~0").replace("/", "~1")


def _unescape_token(token: str) -> str:
    if _BAD_ESCAPE.search(token):
        msg = f"Invalid escape sequence in JSON Pointer token {token!r}"
        raise InvalidPointerError(msg)
    # Order matters: "~01" must decode to "~1", not "/".
    return token.replace("~1", "/").replace("~0", "~")


@cached(LRUCache(maxsize=POINTER_CACHE_SIZE), lock=threading.Lock())
def parse_pointer(pointer: str) -> tuple[PathStep, ...]:
    """Parse an RFC 6901 JSON Pointer into path steps.

    Tokens that look like array indices ("0", "7", "12", but not "07" or "-")
    become ``Index`` steps; every other token becomes a ``Key``.  A pointer to
    an object member literally named "0" therefore cannot be expressed this
    way; build the path with ``Key("0")`` instead.

    Args:
        pointer: The pointer text.  "" addresses the root.

    Returns:
        A tuple of steps (empty for the root pointer).

    Raises:
        InvalidPointerError: If a non-empty pointer does not start with "/" or
            contains a "~" escape other than "~0" / "~1".
    """
    if pointer == "":
        return ()
    if not pointer.startswith("/"):
        msg = f"JSON Pointer must be empty or start with '/', got {pointer!r}"
        raise InvalidPointerError(msg)

    steps: list[PathStep] = []
    for raw in pointer[1:].split("/"):
        if _INDEX_TOKEN.fullmatch(raw):
            steps.append(Index(int(raw)))
        else:
            steps.append(Key(_unescape_token(raw)))
    return tuple(steps)


def format_pointer(steps: Iterable[PathStep]) -> str:
    """Render steps as an RFC 6901 JSON Pointer ("" for the empty path)."""
    parts: list[str] = []
    for step in steps:
        if isinstance(step, Index):
            parts.append(f"/{step.position}")
        else:
            parts.append(f"/{escape_token(step.name)}")
    return "".join(parts)
