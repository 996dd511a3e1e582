import threading
from typing import Optional, Sequence

from opentelemetry.trace import Status, StatusCode
from typing_extensions import assert_never

from fluentsql.common.exceptions import (
    ErrorCode,
    InvalidOperationError,
    configuration_error,
    invalid_operation_error,
)
from fluentsql.constants import (
    DEFAULT_OPERATOR,
    FIELD_SEPARATOR,
    PREDICATE_JOINER,
    STATEMENT_TERMINATOR,
    QueryKind,
)
from fluentsql.logging import get_logger
from fluentsql.protocols.dialects import LimitClauseRenderer
from fluentsql.query_builder.draft import QueryDraft
from fluentsql.query_builder.mysql.limit_renderer import MySQLLimitRenderer
from fluentsql.telemetry import get_tracer

logger = get_logger(__name__)


def _permits_filtering(kind: QueryKind) -> bool:
    if kind is QueryKind.SELECT:
        return True
    if kind is QueryKind.UPDATE:
        return True
    assert_never(kind)


def _permits_limiting(kind: QueryKind) -> bool:
    if kind is QueryKind.SELECT:
        return True
    if kind is QueryKind.UPDATE:
        return False
    assert_never(kind)


class QueryBuilder:
    """Chainable SQL query builder.

    The builder owns at most one :class:`QueryDraft`. ``select`` starts a
    new draft, ``where`` and ``limit`` validate the draft's kind and
    mutate it, and ``render`` turns the accumulated state into SQL text.
    Every chain operation returns the builder itself.

    Dialects differ only in the LIMIT clause. That difference is injected
    as a :class:`LimitClauseRenderer` at construction time; validation and
    mutation are the same for every dialect.

    Operations on one builder are serialized with a re-entrant lock, but a
    builder is meant to build one logical query at a time. Values passed
    to ``where`` are quoted as string literals; identifiers and operators
    are written as given, so untrusted input must be sanitized upstream.

    Example:
        >>> builder = QueryBuilder()
        >>> builder.select("users", ["name", "email"]).where("age", "18", ">").limit(10, 20).render()
        "SELECT name, email FROM users WHERE age > '18' LIMIT 10, 20;"
    """

    def __init__(self, limit_renderer: Optional[LimitClauseRenderer] = None):
        """Initialize the builder.

        Args:
            limit_renderer: Dialect strategy for the LIMIT clause. Defaults
                to MySQL syntax.

        Raises:
            ConfigurationError: If the renderer does not implement
                LimitClauseRenderer.
        """
        if limit_renderer is None:
            limit_renderer = MySQLLimitRenderer()
        elif not isinstance(limit_renderer, LimitClauseRenderer):
            raise configuration_error(
                f"{type(limit_renderer).__name__} does not implement LimitClauseRenderer",
                argument="limit_renderer",
                error_code=ErrorCode.CONFIG_INVALID,
            )

        self.limit_renderer = limit_renderer
        self._draft: Optional[QueryDraft] = None
        self._lock = threading.RLock()

    @property
    def dialect(self) -> str:
        """Name of the dialect this builder renders for."""
        return self.limit_renderer.name

    @property
    def kind(self) -> Optional[QueryKind]:
        """Kind of the current draft, or None when no query has been started."""
        draft = self._draft
        return draft.kind if draft is not None else None

    def select(self, table: str, fields: Sequence[str]) -> "QueryBuilder":
        """Start a new SELECT query, discarding any previous draft.

        Args:
            table: Table to select from
            fields: Non-empty ordered sequence of field names

        Returns:
            This builder

        Raises:
            ConfigurationError: If the table is empty or the field list is
                empty or contains an empty name. The previous draft is kept.
        """
        if not isinstance(table, str) or not table.strip():
            raise configuration_error(
                "Cannot start SELECT: table name is empty",
                argument="table",
                value=table,
            )

        if isinstance(fields, str):
            raise configuration_error(
                f"Cannot start SELECT on {table}: fields must be a sequence of names, not a string",
                argument="fields",
                value=fields,
            )

        field_list = list(fields)
        if not field_list:
            raise configuration_error(
                f"Cannot start SELECT on {table}: no fields specified",
                argument="fields",
            )

        for field in field_list:
            if not isinstance(field, str) or not field.strip():
                raise configuration_error(
                    f"Cannot start SELECT on {table}: empty field name in {field_list!r}",
                    argument="fields",
                    value=field,
                )

        with self._lock:
            self._draft = QueryDraft(
                QueryKind.SELECT,
                base_clause=f"SELECT {FIELD_SEPARATOR.join(field_list)} FROM {table}",
            )

        logger.debug(
            "Started SELECT draft",
            extra={"table": table, "field_count": len(field_list), "dialect": self.dialect},
        )
        return self

    def where(self, field: str, value: str, operator: str = DEFAULT_OPERATOR) -> "QueryBuilder":
        """Append a filter condition.

        Conditions accumulate and are rendered in call order, joined by
        ``AND``.

        Args:
            field: Field to compare
            value: Value, rendered as a quoted string literal
            operator: Comparison operator, ``=`` by default

        Returns:
            This builder

        Raises:
            InvalidOperationError: If no query has been started or the
                current kind does not support filtering.
            ConfigurationError: If the field or operator is empty.
        """
        with self._lock:
            draft = self._require_draft("where")
            if not _permits_filtering(draft.kind):
                raise invalid_operation_error(
                    f"WHERE is not supported for {draft.kind.value} queries",
                    operation="where",
                    kind=draft.kind,
                    error_code=ErrorCode.KIND_MISMATCH,
                )

            self._validate_term("field", field)
            self._validate_term("operator", operator)

            draft.add_predicate(f"{field} {operator} {self.quote_string(value)}")
            predicate_count = len(draft.predicates)

        logger.debug(
            "Added predicate",
            extra={"field": field, "operator": operator, "predicate_count": predicate_count},
        )
        return self

    def limit(self, start: int, offset: int) -> "QueryBuilder":
        """Limit the rows returned. A later call replaces an earlier one.

        Args:
            start: First bound, >= 0
            offset: Second bound, >= 0

        Returns:
            This builder

        Raises:
            InvalidOperationError: If no query has been started or the
                current query is not a SELECT.
            ConfigurationError: If either bound is negative or not an int.
        """
        with self._lock:
            draft = self._require_draft("limit")
            if not _permits_limiting(draft.kind):
                raise invalid_operation_error(
                    f"LIMIT is only supported for SELECT queries, not {draft.kind.value}",
                    operation="limit",
                    kind=draft.kind,
                    error_code=ErrorCode.KIND_MISMATCH,
                )

            self._validate_bound("start", start)
            self._validate_bound("offset", offset)

            clause = self.limit_renderer.render_limit(start, offset)
            draft.set_limit_clause(clause)

        logger.debug("Set limit clause", extra={"limit_clause": clause, "dialect": self.dialect})
        return self

    def render(self) -> str:
        """Render the current query as SQL text.

        The draft is not modified, so repeated calls return the same text
        until the next mutation. Each call is traced as a
        ``fluentsql.query_builder.render`` span carrying the dialect, the
        query kind, the predicate count and whether a limit is set.

        Returns:
            ``<base>[ WHERE <p1> AND <p2>...][ <limit>];``

        Raises:
            InvalidOperationError: If no base clause has been set.
        """
        tracer = get_tracer(__name__)
        with tracer.start_as_current_span(
            "fluentsql.query_builder.render",
            record_exception=False,
            set_status_on_exception=False,
        ) as span:
            span.set_attribute("fluentsql.dialect", self.dialect)
            try:
                with self._lock:
                    draft = self._require_draft("render")
                    predicates = draft.predicates
                    limit_clause = draft.limit_clause

                    span.set_attribute("fluentsql.kind", draft.kind.value)
                    span.set_attribute("fluentsql.predicate_count", len(predicates))
                    span.set_attribute("fluentsql.has_limit", limit_clause is not None)

                    sql = draft.base_clause
                    if sql is None:
                        raise invalid_operation_error(
                            "Cannot render a query without a base clause",
                            operation="render",
                            kind=draft.kind,
                        )
            except InvalidOperationError as exc:
                span.record_exception(exc)
                span.set_status(Status(StatusCode.ERROR, str(exc)))
                raise

        if predicates:
            sql += f" WHERE {PREDICATE_JOINER.join(predicates)}"
        if limit_clause is not None:
            sql += f" {limit_clause}"

        return f"{sql}{STATEMENT_TERMINATOR}"

    def reset(self) -> "QueryBuilder":
        """Discard the current draft."""
        with self._lock:
            self._draft = None
        return self

    def quote_string(self, value: str) -> str:
        """Quote a string value for SQL.

        Args:
            value: String value to quote

        Returns:
            Properly quoted and escaped string
        """
        # Escape single quotes by doubling them
        escaped = str(value).replace("'", "''")
        return f"'{escaped}'"

    def _require_draft(self, operation: str) -> QueryDraft:
        if self._draft is None:
            raise invalid_operation_error(
                f"Cannot apply {operation}: no query started, call select() first",
                operation=operation,
                error_code=ErrorCode.MISSING_DRAFT,
            )
        return self._draft

    @staticmethod
    def _validate_term(name: str, value: str) -> None:
        if not isinstance(value, str) or not value.strip():
            raise configuration_error(
                f"WHERE {name} must be a non-empty string",
                argument=name,
                value=value,
            )

    @staticmethod
    def _validate_bound(name: str, value: int) -> None:
        if isinstance(value, bool) or not isinstance(value, int):
            raise configuration_error(
                f"LIMIT {name} must be an integer, got {type(value).__name__}",
                argument=name,
                value=value,
            )
        if value < 0:
            raise configuration_error(
                f"LIMIT {name} must be >= 0, got {value}",
                argument=name,
                value=value,
            )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(dialect={self.dialect!r}, draft={self._draft!r})"
