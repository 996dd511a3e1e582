from fluentsql.__version__ import __version__

from fluentsql.constants import Dialect, QueryKind
from fluentsql.common.exceptions import (
    ConfigurationError,
    ErrorCode,
    FluentSQLError,
    InvalidOperationError,
)
from fluentsql.protocols import LimitClauseRenderer
from fluentsql.query_builder import (
    MySQLLimitRenderer,
    PostgresLimitRenderer,
    QueryBuilder,
    QueryBuilderFactory,
    get_mysql_query_builder,
    get_postgres_query_builder,
    get_query_builder,
)
from fluentsql.logging import setup_logging


__all__ = [
    "__version__",

    "QueryBuilder",
    "QueryBuilderFactory",
    "get_query_builder",
    "get_mysql_query_builder",
    "get_postgres_query_builder",

    # Dialects
    "Dialect",
    "LimitClauseRenderer",
    "MySQLLimitRenderer",
    "PostgresLimitRenderer",
    "QueryKind",

    # Exceptions (public API)
    "FluentSQLError",
    "ConfigurationError",
    "InvalidOperationError",
    "ErrorCode",

    "setup_logging",
]
