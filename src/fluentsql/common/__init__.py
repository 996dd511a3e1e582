"""Common building blocks shared across fluentsql."""

from fluentsql.common.exceptions import (
    ConfigurationError,
    ErrorCode,
    FluentSQLError,
    InvalidOperationError,
    configuration_error,
    invalid_operation_error,
)

__all__ = [
    "ErrorCode",
    "FluentSQLError",
    "ConfigurationError",
    "InvalidOperationError",
    "configuration_error",
    "invalid_operation_error",
]
