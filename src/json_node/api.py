"""Public entry points that turn JSON text into a JSONNode tree.

- ``parse``: absent-value form.  Any failure returns None.
- ``loads``: raising form.  Bad JSON raises NodeDecodeError; a decoded value
  with no node representation raises UnrepresentableValueError.

Decoding is delegated to the standard library ``json`` module, which accepts
bytes in UTF-8/16/32 as well as str, tolerates top-level scalar fragments and
resolves duplicate object keys last-write-wins.
"""

from __future__ import annotations

import json
import logging

from json_node.builder import NodeBuilder
from json_node.config import BuildConfig
from json_node.errors import (
    JSONNodeError,
    NodeDecodeError,
    UnrepresentableValueError,
)
from json_node.nodes import JSONNode

__all__ = ["loads", "parse"]

logger = logging.getLogger(__name__)


def loads(
    data: bytes | bytearray | str, config: BuildConfig | None = None
) -> JSONNode:
    """Decode JSON text and convert it to a JSONNode tree.

    Args:
        data:   JSON text as bytes, bytearray or str.
        config: Construction options.  Defaults to ``BuildConfig()`` when None.

    Returns:
        The root node.

    Raises:
        NodeDecodeError: If ``data`` is not well-formed JSON, or is a top-level
            scalar while ``config.allow_fragments`` is False.
        UnrepresentableValueError: If the decoded top-level value (for example
            ``null``) cannot be represented, or, in strict mode, if any nested
            value cannot.
    """
    cfg = config if config is not None else BuildConfig()

    try:
        decoded = json.loads(data)
    except (ValueError, RecursionError) as exc:
        # JSONDecodeError and UnicodeDecodeError are ValueErrors; so is the
        # int digit-limit error.  RecursionError comes from very deep nesting.

        msg = f"Input is not valid JSON: {exc}"
        raise NodeDecodeError(msg) from exc

    if not cfg.allow_fragments and not isinstance(decoded, (dict, list)):
        msg = (
            "Top-level JSON fragment not allowed: expected an object or array, "
            f"got {type(decoded).__name__}"
        )
        raise NodeDecodeError(msg)

    node = NodeBuilder(config=cfg).build(decoded)
    if node is None:
        msg = (
            f"Decoded value of type {type(decoded).__name__} "
            "has no node representation"
        )
        raise UnrepresentableValueError(msg)
    return node


def parse(
    data: bytes | bytearray | str, config: BuildConfig | None = None
) -> JSONNode | None:
    """Decode JSON text and convert it to a JSONNode tree, or return None.

    Same pipeline as ``loads``; every decode or conversion failure is reported
    as None instead of an exception.
    """
    try:
        return loads(data, config=config)
    except JSONNodeError as exc:
        logger.debug("parse() failed: %s", exc)
        return None
