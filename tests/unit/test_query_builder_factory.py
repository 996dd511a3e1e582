"""Unit tests for dialect selection and registration."""

import pytest
import sqlglot
from sqlglot import exp

from fluentsql.common.exceptions import ConfigurationError, ErrorCode
from fluentsql.query_builder import (
    QueryBuilder,
    QueryBuilderFactory,
    get_mysql_query_builder,
    get_postgres_query_builder,
    get_query_builder,
)
from fluentsql.query_builder.mysql import MySQLLimitRenderer
from fluentsql.query_builder.postgres import PostgresLimitRenderer


def _chain(builder: QueryBuilder) -> str:
    return builder.select("users", ["email"]).where("age", "18", ">").limit(10, 20).render()


class SQLServerLimitRenderer:
    name = "sqlserver"

    def render_limit(self, start: int, offset: int) -> str:
        return f"OFFSET {start} ROWS FETCH NEXT {offset} ROWS ONLY"


@pytest.fixture
def sqlserver_dialect():
    QueryBuilderFactory.register_dialect("sqlserver", SQLServerLimitRenderer)
    yield "sqlserver"
    QueryBuilderFactory.unregister_dialect("sqlserver")


class TestQueryBuilderFactory:

    def test_create_mysql_builder(self):
        builder = QueryBuilderFactory.create_mysql_builder()

        assert isinstance(builder, QueryBuilder)
        assert isinstance(builder.limit_renderer, MySQLLimitRenderer)
        assert builder.dialect == "mysql"

    def test_create_postgres_builder(self):
        builder = QueryBuilderFactory.create_postgres_builder()

        assert isinstance(builder.limit_renderer, PostgresLimitRenderer)
        assert builder.dialect == "postgres"

    def test_create_is_case_insensitive(self):
        assert QueryBuilderFactory.create(" PostgreS ").dialect == "postgres"

    def test_each_call_returns_fresh_builder(self):
        assert get_mysql_query_builder() is not get_mysql_query_builder()

    def test_unknown_dialect_rejected(self):
        with pytest.raises(ConfigurationError, match="Unsupported dialect: oracle") as exc_info:
            QueryBuilderFactory.create("oracle")

        assert exc_info.value.error_code is ErrorCode.DIALECT_NOT_SUPPORTED
        assert "mysql, postgres" in str(exc_info.value)

    def test_create_uses_settings_dialect(self, monkeypatch):
        monkeypatch.setenv("FLUENTSQL_DIALECT", "postgres")

        assert get_query_builder().dialect == "postgres"

    def test_create_defaults_to_mysql(self, monkeypatch):
        monkeypatch.delenv("FLUENTSQL_DIALECT", raising=False)

        assert get_query_builder().dialect == "mysql"

    def test_supported_dialects(self):
        assert QueryBuilderFactory.supported_dialects() == ["mysql", "postgres"]


class TestDialectRegistration:

    def test_registered_dialect_only_changes_limit(self, sqlserver_dialect):
        sql = _chain(QueryBuilderFactory.create(sqlserver_dialect))

        assert sql == "SELECT email FROM users WHERE age > '18' OFFSET 10 ROWS FETCH NEXT 20 ROWS ONLY;"
        assert "sqlserver" in QueryBuilderFactory.supported_dialects()

    def test_unregister_dialect(self, sqlserver_dialect):
        QueryBuilderFactory.unregister_dialect(sqlserver_dialect)

        with pytest.raises(ConfigurationError):
            QueryBuilderFactory.create(sqlserver_dialect)

    def test_register_rejects_empty_name(self):
        with pytest.raises(ConfigurationError, match="must not be empty"):
            QueryBuilderFactory.register_dialect("  ", SQLServerLimitRenderer)

    def test_register_rejects_non_callable(self):
        with pytest.raises(ConfigurationError, match="not callable"):
            QueryBuilderFactory.register_dialect("broken", SQLServerLimitRenderer())


class TestDialectOutput:
    """Rendered SQL must parse in the dialect it was built for."""

    @pytest.mark.parametrize(
        "factory, read, expected_limit",
        [
            (get_mysql_query_builder, "mysql", "LIMIT 10, 20;"),
            (get_postgres_query_builder, "postgres", "LIMIT 10 OFFSET 20;"),
        ],
    )
    def test_rendered_sql_parses(self, factory, read, expected_limit):
        sql = _chain(factory())

        assert sql.endswith(expected_limit)
        parsed = sqlglot.parse_one(sql.rstrip(";"), read=read)
        assert isinstance(parsed, exp.Select)
        assert parsed.args.get("where") is not None
        assert parsed.args.get("limit") is not None

    def test_same_chain_differs_only_in_limit(self):
        mysql_sql = _chain(get_mysql_query_builder())
        postgres_sql = _chain(get_postgres_query_builder())

        assert mysql_sql == "SELECT email FROM users WHERE age > '18' LIMIT 10, 20;"
        assert postgres_sql == "SELECT email FROM users WHERE age > '18' LIMIT 10 OFFSET 20;"
