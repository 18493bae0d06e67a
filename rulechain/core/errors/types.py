"""Monadic Error Handling Types

Result/Either types for deterministic, composable error propagation,
plus the error code taxonomy shared by validation and schema construction.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from enum import Enum
from typing import Callable, Generic, Iterator, NoReturn, TypeVar, Union, final
from uuid import uuid4

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E", bound="AppError")
F = TypeVar("F", bound="AppError")


class ErrorCode(Enum):
    """Hierarchical error code taxonomy.

    E2xxx: Validation failures (data errors, recoverable)
    E7xxx: Schema configuration errors (programmer errors, fatal)
    E9xxx: Internal/Unknown errors
    """
    # Validation (E2xxx)
    E2000_VALIDATION_GENERIC = 2000
    E2001_REQUIRED_FIELD_MISSING = 2001
    E2002_INVALID_FORMAT = 2002
    E2003_OUT_OF_RANGE = 2003
    E2004_INVALID_TYPE = 2004
    E2005_CONSTRAINT_VIOLATION = 2005
    E2006_NULL_NOT_ALLOWED = 2006
    E2007_EMPTY_NOT_ALLOWED = 2007
    E2008_VALUE_DENIED = 2008
    E2009_NOT_ALPHANUMERIC = 2009
    E2010_INVALID_EMAIL = 2010
    E2013_NOT_IN_VALID_SET = 2013
    E2014_IN_INVALID_SET = 2014

    # Schema configuration (E7xxx)
    E7000_CONFIGURATION_GENERIC = 7000
    E7001_INVALID_BOUND = 7001
    E7002_INVALID_SET_VALUE = 7002
    E7003_INVALID_PATTERN = 7003
    E7004_INVALID_ARGUMENT = 7004
    E7010_UNKNOWN_TYPE = 7010
    E7011_DUPLICATE_TYPE = 7011
    E7020_INVALID_TEMPLATE = 7020

    # Internal (E9xxx)
    E9000_INTERNAL_GENERIC = 9000
    E9001_UNEXPECTED_ERROR = 9001

    @property
    def category(self) -> str:
        """Human-readable error category."""
        code = self.value
        if 2000 <= code < 3000:
            return "validation"
        if 7000 <= code < 8000:
            return "configuration"
        return "internal"


@dataclass(frozen=True, slots=True)
class ErrorContext:
    """Where and when an error was produced."""
    correlation_id: str = field(default_factory=lambda: uuid4().hex[:8])
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    origin: str = ""


@dataclass(frozen=True, slots=True)
class AppError:
    """Typed error value.

    Validation failures and schema configuration problems both travel as
    AppError: inside Err for Result-returning entry points, inside an
    AppErrorException where a combinator has to raise.
    """
    code: ErrorCode
    message: str
    context: ErrorContext = field(default_factory=ErrorContext)
    metadata: dict = field(default_factory=dict)
    cause: Exception | None = None

    @property
    def error_id(self) -> str:
        return f"{self.code.name}:{self.context.correlation_id}"

    def with_context(self, **changes) -> AppError:
        """Copy with context fields replaced (origin, correlation_id)."""
        return replace(self, context=replace(self.context, **changes))

    def to_dict(self) -> dict:
        return {"error": {
            "code": self.code.name,
            "code_num": self.code.value,
            "message": self.message,
            "category": self.code.category,
            "correlation_id": self.context.correlation_id,
            "timestamp": self.context.timestamp.isoformat(),
            "metadata": self.metadata,
        }}

    def __str__(self) -> str:
        return f"[{self.code.name}] {self.message} (correlation_id={self.context.correlation_id})"


@final
@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Success variant of Result."""
    value: T

    def is_ok(self) -> bool: return True

    def is_err(self) -> bool: return False

    def unwrap(self) -> T: return self.value

    def unwrap_or(self, default: T) -> T: return self.value

    def map(self, f: Callable[[T], U]) -> Result[U, AppError]: return Ok(f(self.value))

    def map_err(self, f: Callable[[AppError], F]) -> Result[T, F]: return self  # type: ignore

    def flat_map(self, f: Callable[[T], Result[U, AppError]]) -> Result[U, AppError]: return f(self.value)

    def match(self, ok: Callable[[T], U], err: Callable[[AppError], U]) -> U: return ok(self.value)

    def __iter__(self) -> Iterator[T]:
        yield self.value


@final
@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failure variant of Result."""
    error: E

    def is_ok(self) -> bool: return False

    def is_err(self) -> bool: return True

    def unwrap(self) -> NoReturn:
        raise ValueError(f"Called unwrap on Err: {self.error}")

    def unwrap_or(self, default: T) -> T: return default

    def unwrap_err(self) -> E: return self.error

    def map(self, f: Callable[[T], U]) -> Result[U, E]: return self  # type: ignore

    def map_err(self, f: Callable[[E], F]) -> Result[T, F]: return Err(f(self.error))

    def flat_map(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]: return self  # type: ignore

    def match(self, ok: Callable[[T], U], err: Callable[[E], U]) -> U: return err(self.error)

    def __iter__(self) -> Iterator:
        return iter(())


Result = Union[Ok[T], Err[E]]


def collect_results(results: list[Result[T, AppError]]) -> Result[list[T], list[AppError]]:
    """Ok with every value, or Err with every error when any result failed."""
    values = [r.value for r in results if isinstance(r, Ok)]
    errors = [r.error for r in results if isinstance(r, Err)]
    return Err(errors) if errors else Ok(values)  # type: ignore


def sequence_results(results: list[Result[T, AppError]]) -> Result[list[T], AppError]:
    """Ok with every value, or the first Err."""
    values: list[T] = []
    for r in results:
        match r:
            case Ok(v):
                values.append(v)
            case Err(e):
                return Err(e)
    return Ok(values)
