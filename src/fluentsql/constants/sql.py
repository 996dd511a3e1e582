"""SQL and query-related constants.

This module contains the fundamental enums shared by the query builder,
the factory and the settings layer. It has no dependencies on other
fluentsql modules.
"""

from enum import Enum


class QueryKind(str, Enum):
    """Kind of query held by a draft.

    The kind is fixed when a draft is created and decides which builder
    operations are permitted against it.

    Values:
        SELECT: Row selection. Supports filtering and row limiting.
        UPDATE: Row modification. Supports filtering only. There is no
            entry operation producing this kind yet; it is referenced by
            the validation rules.
    """

    SELECT = "SELECT"
    UPDATE = "UPDATE"


class Dialect(str, Enum):
    """Built-in SQL dialects.

    Dialects differ only in how the row-limiting clause is written.
    Additional dialects can be registered on the factory by name.

    Values:
        MYSQL: ``LIMIT <start>, <offset>``
        POSTGRES: ``LIMIT <start> OFFSET <offset>``
    """

    MYSQL = "mysql"
    POSTGRES = "postgres"


STATEMENT_TERMINATOR = ";"
PREDICATE_JOINER = " AND "
FIELD_SEPARATOR = ", "
DEFAULT_OPERATOR = "="
