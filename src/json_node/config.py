"""BuildConfig: options controlling how decoded values become JSON nodes.

BuildConfig is a frozen (immutable) dataclass.  The defaults reproduce the
lossy construction policy: unrepresentable array elements and object values
are dropped while their container still converts.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["BuildConfig"]


@dataclass(frozen=True, slots=True)
class BuildConfig:
    """Immutable configuration for NodeBuilder and the parse/loads entry points.

    Attributes:
        strict: When True, a single unrepresentable element or member makes its
            enclosing container fail, and with it the whole build.  Default
            False (drop the element and keep going).
        allow_fragments: When True, ``parse``/``loads`` accept a top-level
            scalar such as ``"42"``.  When False only an object or array is
            accepted at the top level.  Default True.
        max_depth: Maximum container nesting depth.  A container nested deeper
            than this is treated as unrepresentable.  ``None`` (default) means
            unlimited; ``0`` allows leaves only.
    """

    strict: bool = False
    allow_fragments: bool = True
    max_depth: int | None = None

    def __post_init__(self) -> None:
        if self.max_depth is not None and self.max_depth < 0:
            msg = f"max_depth must be >= 0 or None, got {self.max_depth}"
            raise ValueError(msg)
