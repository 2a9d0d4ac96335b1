"""Exception hierarchy for json-node.

Lookups and conversions report failure as ``None``.  The exceptions below are
raised only by the explicitly raising entry points (``loads``,
``parse_pointer``) so callers can catch the whole family via
``JSONNodeError`` or a specific failure via its builtin base.
"""

from __future__ import annotations

__all__ = [
    "InvalidPointerError",
    "JSONNodeError",
    "NodeDecodeError",
    "UnrepresentableValueError",
]


class JSONNodeError(Exception):
    """Base class for every error raised by json-node."""


class NodeDecodeError(JSONNodeError, ValueError):
    """The input buffer is not JSON text the decoder accepts."""


class UnrepresentableValueError(JSONNodeError, TypeError):
    """A decoded value has no JSONNode representation (e.g. a top-level null)."""


class InvalidPointerError(JSONNodeError, ValueError):
    """A JSON Pointer string is not valid RFC 6901 syntax."""
