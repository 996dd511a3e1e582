"""In-progress query state owned by a query builder."""

from typing import List, Optional, Tuple

from fluentsql.common.exceptions import invalid_operation_error
from fluentsql.constants import QueryKind


class QueryDraft:
    """Mutable state of one query under construction.

    A draft is created by a builder's entry operation and is never handed
    out to callers. It stores state only; which mutations are allowed for
    a given kind is decided by the builder.

    Attributes:
        kind: Kind of query, fixed at creation
        base_clause: Starting clause text, e.g. ``SELECT a, b FROM t``
        predicates: Rendered filter conditions in insertion order
        limit_clause: Dialect-specific limit text, or None when unlimited
    """

    __slots__ = ("_kind", "_base_clause", "_predicates", "_limit_clause")

    def __init__(self, kind: QueryKind, base_clause: Optional[str] = None):
        self._kind = kind
        self._base_clause: Optional[str] = None
        self._predicates: List[str] = []
        self._limit_clause: Optional[str] = None

        if base_clause is not None:
            self.set_base_clause(base_clause)

    @property
    def kind(self) -> QueryKind:
        return self._kind

    @property
    def base_clause(self) -> Optional[str]:
        return self._base_clause

    @property
    def limit_clause(self) -> Optional[str]:
        return self._limit_clause

    @property
    def has_base_clause(self) -> bool:
        return self._base_clause is not None

    @property
    def predicates(self) -> Tuple[str, ...]:
        return tuple(self._predicates)

    def set_base_clause(self, clause: str) -> None:
        """Set the base clause. A draft accepts exactly one."""
        if self._base_clause is not None:
            raise invalid_operation_error(
                "Base clause is already set for this draft; start a new query instead",
                operation="set_base_clause",
                kind=self._kind,
            )
        self._base_clause = clause

    def add_predicate(self, predicate: str) -> None:
        self._predicates.append(predicate)

    def set_limit_clause(self, clause: str) -> None:
        self._limit_clause = clause

    def __repr__(self) -> str:
        return (
            f"QueryDraft(kind={self._kind.value}, base_clause={self._base_clause!r}, "
            f"predicates={len(self._predicates)}, limit_clause={self._limit_clause!r})"
        )


__all__ = ["QueryDraft"]
