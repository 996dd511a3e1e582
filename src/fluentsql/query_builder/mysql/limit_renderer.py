"""MySQL limit clause rendering."""

from fluentsql.constants import Dialect


class MySQLLimitRenderer:
    """Renders ``LIMIT <start>, <offset>``.

    This is the base dialect: builders created without an explicit
    renderer use it.
    """

    name = Dialect.MYSQL.value

    def render_limit(self, start: int, offset: int) -> str:
        return f"LIMIT {start}, {offset}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
