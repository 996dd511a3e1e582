"""Query Builder Factory.

This module provides a factory for creating dialect-specific query
builders, either for an explicit dialect name or for the dialect
configured in settings.

Every builder is the same :class:`QueryBuilder` class; the factory only
chooses which limit renderer to inject. New dialects are added by
registering a renderer factory under a name.
"""

import threading
from typing import Callable, Dict, List, Optional

from fluentsql.common.exceptions import ErrorCode, configuration_error
from fluentsql.constants import Dialect
from fluentsql.logging import get_logger
from fluentsql.protocols.dialects import LimitClauseRenderer
from fluentsql.query_builder.base import QueryBuilder
from fluentsql.query_builder.mysql.limit_renderer import MySQLLimitRenderer
from fluentsql.query_builder.postgres.limit_renderer import PostgresLimitRenderer

logger = get_logger(__name__)

RendererFactory = Callable[[], LimitClauseRenderer]


class QueryBuilderFactory:
    """Factory for creating dialect-specific query builders.

    Example:
        >>> mysql = QueryBuilderFactory.create_mysql_builder()
        >>> postgres = QueryBuilderFactory.create("postgres")
        >>> auto = QueryBuilderFactory.create()  # dialect from settings
    """

    _renderers: Dict[str, RendererFactory] = {
        Dialect.MYSQL.value: MySQLLimitRenderer,
        Dialect.POSTGRES.value: PostgresLimitRenderer,
    }
    _lock = threading.Lock()

    @classmethod
    def register_dialect(cls, name: str, renderer_factory: RendererFactory) -> None:
        """Register a dialect by its limit renderer.

        Registering an existing name replaces the previous renderer.

        Args:
            name: Dialect name (case-insensitive)
            renderer_factory: Zero-argument callable returning a
                LimitClauseRenderer, typically the renderer class itself

        Raises:
            ConfigurationError: If the name is empty or the factory is not
                callable.

        Example:
            >>> class SQLServerLimitRenderer:
            ...     name = "sqlserver"
            ...     def render_limit(self, start, offset):
            ...         return f"OFFSET {start} ROWS FETCH NEXT {offset} ROWS ONLY"
            >>> QueryBuilderFactory.register_dialect("sqlserver", SQLServerLimitRenderer)
        """
        key = (name or "").strip().lower()
        if not key:
            raise configuration_error(
                "Dialect name must not be empty",
                argument="name",
                value=name,
            )
        if not callable(renderer_factory):
            raise configuration_error(
                f"Renderer factory for dialect '{key}' is not callable",
                argument="renderer_factory",
                value=renderer_factory,
            )

        with cls._lock:
            replaced = key in cls._renderers
            cls._renderers[key] = renderer_factory

        logger.info(
            "Registered query builder dialect",
            extra={"dialect": key, "replaced": replaced},
        )

    @classmethod
    def unregister_dialect(cls, name: str) -> None:
        """Remove a registered dialect. Unknown names are ignored."""
        with cls._lock:
            cls._renderers.pop((name or "").strip().lower(), None)

    @classmethod
    def supported_dialects(cls) -> List[str]:
        """Names of all registered dialects, sorted."""
        with cls._lock:
            return sorted(cls._renderers)

    @classmethod
    def create(cls, dialect: Optional[str] = None) -> QueryBuilder:
        """Create a query builder for a dialect.

        Args:
            dialect: Dialect name. Defaults to ``dialect`` from settings.

        Returns:
            QueryBuilder with the dialect's limit renderer injected.

        Raises:
            ConfigurationError: If the dialect is not registered.
        """
        if dialect is None:
            from fluentsql.settings import get_settings
            dialect = get_settings().dialect

        key = dialect.strip().lower()
        with cls._lock:
            renderer_factory = cls._renderers.get(key)
            supported = sorted(cls._renderers)

        if renderer_factory is None:
            raise configuration_error(
                f"Unsupported dialect: {dialect}. Supported dialects: {', '.join(supported)}",
                argument="dialect",
                value=dialect,
                error_code=ErrorCode.DIALECT_NOT_SUPPORTED,
            )

        return QueryBuilder(renderer_factory())

    @classmethod
    def create_mysql_builder(cls) -> QueryBuilder:
        """Create a builder rendering ``LIMIT <start>, <offset>``."""
        return cls.create(Dialect.MYSQL.value)

    @classmethod
    def create_postgres_builder(cls) -> QueryBuilder:
        """Create a builder rendering ``LIMIT <start> OFFSET <offset>``."""
        return cls.create(Dialect.POSTGRES.value)


def get_query_builder(dialect: Optional[str] = None) -> QueryBuilder:
    """Get a query builder for ``dialect``, or for the configured dialect.

    Example:
        >>> from fluentsql.query_builder import get_query_builder
        >>> sql = get_query_builder().select("users", ["email"]).render()
    """
    return QueryBuilderFactory.create(dialect)


def get_mysql_query_builder() -> QueryBuilder:
    """Get a MySQL query builder."""
    return QueryBuilderFactory.create_mysql_builder()


def get_postgres_query_builder() -> QueryBuilder:
    """Get a PostgreSQL query builder."""
    return QueryBuilderFactory.create_postgres_builder()
