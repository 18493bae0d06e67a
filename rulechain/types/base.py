"""Schema node base type.

Every combinator returns a new node wrapping an updated constraint set;
the receiver is never modified, so schemas derived from a shared base
cannot contaminate each other.
"""
from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any, ClassVar, NoReturn, TypeVar
import re

from rulechain.core.errors import AppError, ConfigurationError, Err, invalid_set_value, raise_error
from rulechain.core.logging import schema_logger
from rulechain.validation.constraints import AlphanumPolicy, BaseConstraints, UNDEFINED
from rulechain.validation.evaluator import evaluate
from rulechain.validation.results import ValidationResult

log = schema_logger()

N = TypeVar("N", bound="BaseType")


def reject(result: Err[AppError]) -> NoReturn:
    """Log and raise a schema configuration error."""
    log.warning("schema_configuration_rejected", code=result.error.code.name, **result.error.metadata)
    raise_error(result, ConfigurationError)


def normalize_values(combinator: str, values: tuple[Any, ...]) -> tuple[str, ...]:
    """Accept f("a", "b") and f(["a", "b"]) alike; every member must be a string."""
    if len(values) == 1 and isinstance(values[0], (list, tuple, set, frozenset)):
        values = tuple(values[0])
    for value in values:
        if not isinstance(value, str):
            reject(invalid_set_value(combinator, value, "string"))
    return values


@dataclass(frozen=True, slots=True)
class BaseType:
    """Shared combinators: presence, null/empty policy, enumeration and override sets."""
    constraints_type: ClassVar[type[BaseConstraints]] = BaseConstraints

    constraints: BaseConstraints | None = None

    def __post_init__(self):
        if self.constraints is None:
            object.__setattr__(self, "constraints", self.constraints_type())

    def _with(self: N, constraints: BaseConstraints) -> N:
        return type(self)(constraints)

    def _set(self: N, **changes: Any) -> N:
        return self._with(replace(self.constraints, **changes))

    # ------------------------------------------------------------------
    # Combinators
    # ------------------------------------------------------------------

    def required(self: N) -> N:
        return self._set(required=True)

    def null_ok(self: N) -> N:
        return self._set(null_ok=True)

    def empty_ok(self: N) -> N:
        return self._set(empty_ok=True)

    def insensitive(self: N) -> N:
        """Compare valid/invalid members case-insensitively, including ones already added."""
        return self._set(case_insensitive=True)

    def valid(self: N, *values: Any) -> N:
        return self._with(self.constraints.with_valid(normalize_values("valid", values)))

    def invalid(self: N, *values: Any) -> N:
        return self._with(self.constraints.with_invalid(normalize_values("invalid", values)))

    def allow(self: N, *values: Any) -> N:
        return self._with(self.constraints.with_allowed(normalize_values("allow", values)))

    def deny(self: N, *values: Any) -> N:
        return self._with(self.constraints.with_denied(normalize_values("deny", values)))

    # ------------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------------

    @property
    def type_name(self) -> str:
        return self.constraints.type_name

    def validate(self, value: Any = UNDEFINED) -> ValidationResult:
        return evaluate(self.constraints, value)

    def is_valid(self, value: Any = UNDEFINED) -> bool:
        return self.validate(value).is_valid

    def describe(self) -> dict[str, Any]:
        """Configured (non-default) constraints, for introspection and logging."""
        described: dict[str, Any] = {"type": self.type_name}
        for f in fields(self.constraints):
            value = getattr(self.constraints, f.name)
            if value is None or value is False or value == () or value == frozenset():
                continue
            described[f.name] = _plain(value)
        return described


def _plain(value: Any) -> Any:
    if isinstance(value, frozenset): return sorted(value)
    if isinstance(value, tuple): return list(value)
    if isinstance(value, re.Pattern): return value.pattern
    if isinstance(value, AlphanumPolicy): return {"allow_spaces": value.allow_spaces}
    return value
