"""Protocol definitions for fluentsql.

Protocols provide type-safe interfaces without requiring inheritance,
following Python's structural subtyping (duck typing with type hints).
"""

from .dialects import LimitClauseRenderer

__all__ = [
    "LimitClauseRenderer",
]
