"""Dialect protocol definitions.

This module defines the single capability a SQL dialect contributes to
query construction: writing the row-limiting clause. Everything else
(validation, draft mutation, the remaining clause text) is shared by all
dialects.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class LimitClauseRenderer(Protocol):
    """Protocol for dialect-specific LIMIT clause rendering.

    Implementations are injected into a query builder at construction
    time. Adding a dialect means implementing this protocol; no builder
    code changes.

    Attributes:
        name: Dialect name, used for logging, tracing and factory lookup.
    """

    name: str

    def render_limit(self, start: int, offset: int) -> str:
        """Render the limit clause.

        Args:
            start: First bound of the clause, already validated as >= 0
            offset: Second bound of the clause, already validated as >= 0

        Returns:
            Clause text without surrounding whitespace or terminator,
            e.g. ``LIMIT 10, 20``
        """
        ...
