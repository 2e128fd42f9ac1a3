"""chaintable Error Handling Module

This module defines the error handling system for chaintable, providing
structured error classes with context information.

The error hierarchy follows these principles:
- One Source of Truth: All error codes are defined in ErrorCode enum
- Structured Context: ErrorContext provides additional information
- Proper Exception Chaining: Original exceptions are preserved

Absent keys are not errors. ``HashMap.get``/``remove`` report absence with
``None`` and only the subscript accessors raise ``KeyError``.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from pathlib import Path
from typing import Any, Union

# Type alias for primitive context values (str, int, float, bool only)
PrimitiveContextValue = Union[str, int, float, bool]


class ErrorCode(str, Enum):
    """Error codes for chaintable.

    This enum serves as the single source of truth for all error codes
    used throughout the package.
    """

    # Argument Validation Errors
    INVALID_ARGUMENT = "INVALID_ARGUMENT"

    # Configuration Errors
    CONFIG_MISSING = "CONFIG_MISSING"
    INVALID_CONFIG = "INVALID_CONFIG"


def _coerce_primitives(value: Any | None) -> dict[str, PrimitiveContextValue] | None:
    """Coerce additional_data values to primitives.

    Converts Path, Enum, Decimal to primitive types.

    Args:
        value: Input dictionary or None

    Returns:
        Dictionary with primitive values only, or None

    Raises:
        TypeError: If value is not a dict or contains unconvertible types
    """
    if value is None:
        return None

    if not isinstance(value, dict):
        error_msg = f"additional_data must be dict, got {type(value).__name__}"
        raise TypeError(error_msg)

    coerced: dict[str, PrimitiveContextValue] = {}
    for key, val in value.items():
        if isinstance(val, (str, int, float, bool)):
            coerced[key] = val
        elif isinstance(val, Path):
            coerced[key] = str(val)
        elif isinstance(val, Enum):
            coerced[key] = val.value
        elif isinstance(val, Decimal):
            coerced[key] = float(val)
        else:
            error_msg = (
                f"Cannot coerce {type(val).__name__} to primitive type. "
                f"Only str, int, float, bool, Path, Enum, Decimal are allowed."
            )
            raise TypeError(error_msg)

    return coerced


@dataclass(frozen=True)
class ErrorContext:
    """Context information for errors.

    Only primitive types (str, int, float, bool) are allowed in
    additional_data so the context can be logged safely.

    Attributes:
        file_path: Optional file path associated with the error
        operation: Optional operation name that caused the error
        additional_data: Optional dict with primitive values only
    """

    file_path: str | None = None
    operation: str | None = None
    additional_data: dict[str, PrimitiveContextValue] | None = None

    def __post_init__(self) -> None:
        if self.additional_data is not None:
            coerced = _coerce_primitives(self.additional_data)
            # frozen dataclass: internal update through object.__setattr__
            object.__setattr__(self, "additional_data", coerced)

    def safe_dict(self) -> dict[str, Any]:
        """Export context as a dict for logging.

        ``additional_data`` is always present in the result, as an empty
        dict when no data was attached.
        """
        data: dict[str, Any] = {}
        if self.file_path is not None:
            data["file_path"] = self.file_path
        if self.operation is not None:
            data["operation"] = self.operation
        data["additional_data"] = self.additional_data or {}
        return data


class ChainTableError(Exception):
    """Base exception class for all chaintable errors."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        context: ErrorContext | None = None,
        original_error: Exception | None = None,
    ) -> None:
        """Initialize ChainTableError.

        Args:
            code: Error code from ErrorCode enum
            message: Human-readable error message
            context: Additional context information
            original_error: Original exception that caused this error
        """
        self.code = code
        self.message = message
        self.context = context or ErrorContext()
        self.original_error = original_error

        super().__init__(f"{code.value}: {message}")

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging.

        Returns:
            Dictionary with code, message, context and original_error
        """
        return {
            "code": self.code.value,
            "message": self.message,
            "context": self.context.safe_dict(),
            "original_error": str(self.original_error) if self.original_error else None,
        }


class DomainError(ChainTableError):
    """Domain-specific errors.

    These errors occur when a table operation's precondition is violated.
    """


class InvalidArgumentError(DomainError, ValueError):
    """A caller-supplied argument is outside its accepted range.

    Raised synchronously, before any state is allocated or mutated. It is
    also a ``ValueError`` so callers written against plain Python
    containers can catch it without importing chaintable.
    """


class ApplicationError(ChainTableError):
    """Application-level errors.

    These errors occur while loading or validating configuration.
    """


class ConfigurationError(ApplicationError):
    """Configuration could not be read or failed validation."""


# Convenience functions for common error scenarios
def create_invalid_argument_error(
    message: str,
    argument: str,
    value: PrimitiveContextValue,
    operation: str | None = None,
) -> InvalidArgumentError:
    """Create an invalid-argument error with context."""
    context = ErrorContext(
        operation=operation,
        additional_data={"argument": argument, "value": value},
    )
    return InvalidArgumentError(
        ErrorCode.INVALID_ARGUMENT,
        message,
        context,
    )


def create_config_error(
    message: str,
    file_path: str | Path | None = None,
    operation: str | None = None,
    original_error: Exception | None = None,
    code: ErrorCode = ErrorCode.INVALID_CONFIG,
) -> ConfigurationError:
    """Create a configuration error with context."""
    context = ErrorContext(
        file_path=str(file_path) if file_path is not None else None,
        operation=operation,
    )
    return ConfigurationError(
        code,
        message,
        context,
        original_error,
    )
