"""PostgreSQL limit clause rendering."""

from fluentsql.constants import Dialect


class PostgresLimitRenderer:
    """Renders ``LIMIT <start> OFFSET <offset>``."""

    name = Dialect.POSTGRES.value

    def render_limit(self, start: int, offset: int) -> str:
        return f"LIMIT {start} OFFSET {offset}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
