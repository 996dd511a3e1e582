"""Query builder module for dialect-aware SQL generation.

Query builders assemble a query through chained calls and render it as
SQL text. They do NOT execute queries.

Architecture:
    - base.py: QueryBuilder, the chainable API shared by every dialect
    - draft.py: QueryDraft, the in-progress state a builder owns
    - mysql/: MySQL limit renderer (``LIMIT <start>, <offset>``)
    - postgres/: PostgreSQL limit renderer (``LIMIT <start> OFFSET <offset>``)
    - factory.py: QueryBuilderFactory and dialect registration

Design Principles:
    1. **SQL Generation Only**: Builders only generate SQL strings
    2. **Validate Early**: Invalid calls fail at the offending call, not at render time
    3. **Strategy, not Subclass**: Dialects plug in a limit renderer; validation is shared
    4. **Chainable**: Every construction call returns the builder

Example:
    >>> from fluentsql.query_builder import get_postgres_query_builder
    >>>
    >>> builder = get_postgres_query_builder()
    >>> sql = (
    ...     builder.select("users", ["email"])
    ...     .where("age", "18", ">")
    ...     .limit(10, 20)
    ...     .render()
    ... )
    >>> print(sql)
    SELECT email FROM users WHERE age > '18' LIMIT 10 OFFSET 20;

Security:
    Only the ``value`` argument of ``where`` is quoted (single quotes are
    doubled). Table, field and operator text is written as given; callers
    passing untrusted input must sanitize it first.
"""

from fluentsql.query_builder.base import QueryBuilder
from fluentsql.query_builder.factory import (
    QueryBuilderFactory,
    get_query_builder,
    get_mysql_query_builder,
    get_postgres_query_builder,
)
from fluentsql.query_builder.mysql import MySQLLimitRenderer
from fluentsql.query_builder.postgres import PostgresLimitRenderer

__all__ = [
    "QueryBuilder",
    "QueryBuilderFactory",
    "get_query_builder",
    "get_mysql_query_builder",
    "get_postgres_query_builder",
    "MySQLLimitRenderer",
    "PostgresLimitRenderer",
]
