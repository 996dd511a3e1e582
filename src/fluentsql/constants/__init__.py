"""Constants module for fluentsql.

Layer 0 of the package: enums and literal values with no dependencies on
other fluentsql modules.
"""

from fluentsql.constants.sql import (
    DEFAULT_OPERATOR,
    FIELD_SEPARATOR,
    PREDICATE_JOINER,
    STATEMENT_TERMINATOR,
    Dialect,
    QueryKind,
)

__all__ = [
    "QueryKind",
    "Dialect",
    "STATEMENT_TERMINATOR",
    "PREDICATE_JOINER",
    "FIELD_SEPARATOR",
    "DEFAULT_OPERATOR",
]
