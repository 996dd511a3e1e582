from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(Enum):
    """Standard error codes for fluentsql operations.

    Error codes categorize failures without requiring a dedicated exception
    class for every situation. Each category has its own prefix.

    Attributes:
        CONFIG_*: Invalid arguments or configuration (CONFIG_xxx)
        OPERATION_*: Operations invalid for the current draft (OPERATION_xxx)
    """
    # Configuration errors
    CONFIG_INVALID = "CONFIG_001"
    INVALID_ARGUMENT = "CONFIG_002"
    DIALECT_NOT_SUPPORTED = "CONFIG_003"

    # Operation errors
    INVALID_OPERATION = "OPERATION_001"
    MISSING_DRAFT = "OPERATION_002"
    KIND_MISMATCH = "OPERATION_003"


class FluentSQLError(Exception):
    """Base exception for all fluentsql errors.

    Attributes:
        message: Error message
        error_code: Error code from ErrorCode enum
        details: Additional error details
    """

    default_error_code: ErrorCode = ErrorCode.INVALID_OPERATION

    def __init__(
        self,
        message: str,
        error_code: Optional[ErrorCode] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        """Initialize fluentsql error.

        Args:
            message: Error message
            error_code: Error code from ErrorCode enum. Defaults to the
                class-level ``default_error_code``.
            details: Additional error details
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.default_error_code
        self.details = details or {}

        # Lazy import to avoid circular dependency
        from fluentsql.logging import get_logger
        logger = get_logger(__name__)
        logger.error(
            message,
            extra={
                "error_code": self.error_code.value,
                "error_type": self.__class__.__name__,
                "details": self.details,
            },
        )

    def __str__(self) -> str:
        """String representation of the error."""
        return f"[{self.error_code.value}] {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for serialization."""
        return {
            "type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code.value,
            "error_name": self.error_code.name,
            "details": self.details,
        }


class ConfigurationError(FluentSQLError, ValueError):
    """Raised when an operation receives structurally invalid arguments.

    Covers an empty table or field list passed to ``select``, negative
    limit bounds and unknown dialect names.
    """

    default_error_code = ErrorCode.CONFIG_INVALID


class InvalidOperationError(FluentSQLError, RuntimeError):
    """Raised when an operation is not permitted by the current draft.

    Covers filtering or limiting before any draft exists, limiting a
    non-SELECT draft and rendering before the base clause is set.
    """

    default_error_code = ErrorCode.INVALID_OPERATION


def configuration_error(
    message: str,
    argument: Optional[str] = None,
    value: Any = None,
    error_code: ErrorCode = ErrorCode.INVALID_ARGUMENT,
) -> ConfigurationError:
    """Create a configuration error for a rejected argument.

    Args:
        message: Error message
        argument: Name of the argument that failed validation
        value: Rejected value
        error_code: Error code, INVALID_ARGUMENT by default

    Returns:
        ConfigurationError carrying the argument in its details
    """
    details: Dict[str, Any] = {}
    if argument:
        details["argument"] = argument
    if value is not None:
        details["value"] = repr(value)

    return ConfigurationError(message=message, error_code=error_code, details=details)


def invalid_operation_error(
    message: str,
    operation: str,
    kind: Any = None,
    error_code: ErrorCode = ErrorCode.INVALID_OPERATION,
) -> InvalidOperationError:
    """Create an invalid operation error.

    Args:
        message: Error message
        operation: Builder operation that was rejected
        kind: Kind of the current draft, if any
        error_code: Error code, INVALID_OPERATION by default

    Returns:
        InvalidOperationError carrying the operation and kind in its details
    """
    details: Dict[str, Any] = {"operation": operation}
    if kind is not None:
        details["kind"] = getattr(kind, "value", str(kind))

    return InvalidOperationError(message=message, error_code=error_code, details=details)
