"""PostgreSQL dialect support.

The PostgreSQL builder shares every validation and mutation rule with
the MySQL one; only the limit clause differs.

Example:
    from fluentsql.query_builder import get_postgres_query_builder

    sql = (
        get_postgres_query_builder()
        .select("users", ["name", "email"])
        .limit(10, 20)
        .render()
    )
    # SELECT name, email FROM users LIMIT 10 OFFSET 20;
"""

from fluentsql.query_builder.postgres.limit_renderer import PostgresLimitRenderer

__all__ = [
    "PostgresLimitRenderer",
]
