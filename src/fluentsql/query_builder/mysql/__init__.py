"""MySQL dialect support.

Example:
    from fluentsql.query_builder import get_mysql_query_builder

    sql = (
        get_mysql_query_builder()
        .select("users", ["name", "email"])
        .limit(10, 20)
        .render()
    )
    # SELECT name, email FROM users LIMIT 10, 20;
"""

from fluentsql.query_builder.mysql.limit_renderer import MySQLLimitRenderer

__all__ = [
    "MySQLLimitRenderer",
]
