"""Domain-Specific Error Builders

Ergonomic constructors for typed errors.
Each builder creates AppError with appropriate code and context.
"""
from typing import Any

from .types import AppError, ErrorCode, ErrorContext, Err


# =============================================================================
# Validation Errors (E2xxx)
# =============================================================================

def validation_error(
    message: str,
    *,
    code: ErrorCode = ErrorCode.E2000_VALIDATION_GENERIC,
    field: str | None = None,
    value: Any = None,
    origin: str = "",
    **metadata,
) -> Err[AppError]:
    """Create validation error."""
    meta = {"field": field, "value": value, **metadata}
    return Err(AppError(
        code=code,
        message=message,
        context=ErrorContext(origin=origin),
        metadata={k: v for k, v in meta.items() if v is not None},
    ))


# =============================================================================
# Schema Configuration Errors (E7xxx)
# =============================================================================

def configuration_error(
    message: str,
    *,
    code: ErrorCode = ErrorCode.E7000_CONFIGURATION_GENERIC,
    combinator: str | None = None,
    argument: Any = None,
    origin: str = "",
    **metadata,
) -> Err[AppError]:
    """Create schema configuration error."""
    meta = {"combinator": combinator, "argument": repr(argument) if argument is not None else None, **metadata}
    return Err(AppError(
        code=code,
        message=message,
        context=ErrorContext(origin=origin),
        metadata={k: v for k, v in meta.items() if v is not None},
    ))


def invalid_bound(combinator: str, argument: Any, origin: str = "") -> Err[AppError]:
    return configuration_error(
        f"{combinator}() expects a non-negative integer, got {argument!r}",
        code=ErrorCode.E7001_INVALID_BOUND,
        combinator=combinator,
        argument=argument,
        origin=origin,
    )


def invalid_set_value(combinator: str, argument: Any, expected: str, origin: str = "") -> Err[AppError]:
    return configuration_error(
        f"{combinator}() only accepts {expected} values, got {type(argument).__name__} {argument!r}",
        code=ErrorCode.E7002_INVALID_SET_VALUE,
        combinator=combinator,
        argument=argument,
        origin=origin,
    )


def invalid_argument(combinator: str, argument: Any, expected: str, origin: str = "") -> Err[AppError]:
    return configuration_error(
        f"{combinator}() expects {expected}, got {argument!r}",
        code=ErrorCode.E7004_INVALID_ARGUMENT,
        combinator=combinator,
        argument=argument,
        origin=origin,
    )


def unknown_type(name: str, available: list[str], origin: str = "") -> Err[AppError]:
    return configuration_error(
        f"Type '{name}' not registered. Available: {', '.join(available) or 'none'}",
        code=ErrorCode.E7010_UNKNOWN_TYPE,
        origin=origin,
        type_name=name,
    )
