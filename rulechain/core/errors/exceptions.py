"""Exception Boundary for Result-Typed Errors

Schema construction runs at definition time and has no Result channel to
return through, so configuration failures escape as exceptions.
"""
from __future__ import annotations

from typing import TypeVar

from .types import AppError, Err, Result

T = TypeVar("T")


class AppErrorException(Exception):
    """Exception wrapper for AppError.

    Use this when you need to raise an AppError in code that
    doesn't use the Result monad (e.g. builder combinators).
    """

    def __init__(self, error: AppError):
        self.error = error
        super().__init__(error.message)

    @property
    def code(self):
        return self.error.code


class ConfigurationError(AppErrorException):
    """Raised when a schema is built with malformed combinator arguments."""


def raise_error(result: Err[AppError], exc_type: type[AppErrorException] = AppErrorException) -> None:
    """Raise the error carried by an Err."""
    raise exc_type(result.error)


def raise_result(result: Result[T, AppError], exc_type: type[AppErrorException] = AppErrorException) -> T:
    """Unwrap a Result, raising its error as an exception."""
    if isinstance(result, Err):
        raise exc_type(result.error)
    return result.value
