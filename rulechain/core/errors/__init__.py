"""Monadic Error Handling System

Type-safe error handling inspired by Haskell's Either monad and Rust's
Result type.

Key components:
- Result[T, E]: Monadic container for success/failure
- AppError: Base error type with full context
- ErrorCode: Hierarchical error code taxonomy
- Builder functions: Ergonomic error construction
- ConfigurationError: Exception raised for malformed schemas

Usage:
    from rulechain.core.errors import Ok, Err, Result, AppError, unknown_type

    def lookup(name: str) -> Result[TypeFactory, AppError]:
        if name not in table:
            return unknown_type(name, sorted(table))
        return Ok(table[name])

    match lookup("string"):
        case Ok(factory):
            schema = factory()
        case Err(error):
            log.error(error.message, code=error.code.name)
"""
from .types import (
    # Core types
    Result,
    Ok,
    Err,
    AppError,
    ErrorCode,
    ErrorContext,
    # Combinators
    collect_results,
    sequence_results,
)

from .builders import (
    # Validation (E2xxx)
    validation_error,
    # Configuration (E7xxx)
    configuration_error,
    invalid_bound,
    invalid_set_value,
    invalid_argument,
    unknown_type,
)

from .exceptions import (
    AppErrorException,
    ConfigurationError,
    raise_error,
    raise_result,
)

__all__ = [
    # Core types
    "Result",
    "Ok",
    "Err",
    "AppError",
    "ErrorCode",
    "ErrorContext",
    # Combinators
    "collect_results",
    "sequence_results",
    # Validation (E2xxx)
    "validation_error",
    # Configuration (E7xxx)
    "configuration_error",
    "invalid_bound",
    "invalid_set_value",
    "invalid_argument",
    "unknown_type",
    # Exceptions
    "AppErrorException",
    "ConfigurationError",
    "raise_error",
    "raise_result",
]
