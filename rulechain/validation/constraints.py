"""Constraint Sets

Immutable bags of independently-settable flags and predicates attached to
one schema node. BaseConstraints carries the rules every type shares
(presence, null/empty policy, enumeration and override sets);
StringConstraints adds the string refinements. Updates go through
dataclasses.replace, so a constraint set referenced by one schema is never
changed by another schema derived from it.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, ClassVar
import re

from .validators import (
    AtomicValidator,
    StringLength,
    RegexPattern,
    Alphanumeric,
    EmailFormat,
    OneOf,
    NoneOf,
)


class _Undefined:
    """Marker for an absent value, distinct from None (null)."""

    __slots__ = ()
    _instance: ClassVar[_Undefined | None] = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED: Any = _Undefined()


def _extend(existing: tuple[str, ...], values: tuple[str, ...]) -> tuple[str, ...]:
    """Union preserving first-insertion order."""
    return existing + tuple(v for v in dict.fromkeys(values) if v not in existing)


@dataclass(frozen=True, slots=True)
class AlphanumPolicy:
    """Alphanumeric check settings. allow_spaces=None behaves as True."""
    allow_spaces: bool | None = None

    @property
    def spaces_allowed(self) -> bool:
        return self.allow_spaces is not False


@dataclass(frozen=True, slots=True)
class BaseConstraints:
    """Rules shared by every schema type."""
    type_name: ClassVar[str] = "any"

    required: bool = False
    null_ok: bool = False
    empty_ok: bool = False
    valid_values: tuple[str, ...] = ()
    invalid_values: tuple[str, ...] = ()
    allowed: frozenset[str] = field(default_factory=frozenset)
    denied: frozenset[str] = field(default_factory=frozenset)
    case_insensitive: bool = False

    def accepts(self, value: Any) -> bool:
        """Type predicate for present, non-null values."""
        return True

    def is_empty(self, value: Any) -> bool:
        return False

    def with_valid(self, values: tuple[str, ...]) -> BaseConstraints:
        return replace(self, valid_values=_extend(self.valid_values, values))

    def with_invalid(self, values: tuple[str, ...]) -> BaseConstraints:
        return replace(self, invalid_values=_extend(self.invalid_values, values))

    def with_allowed(self, values: tuple[str, ...]) -> BaseConstraints:
        return replace(self, allowed=self.allowed | frozenset(values))

    def with_denied(self, values: tuple[str, ...]) -> BaseConstraints:
        return replace(self, denied=self.denied | frozenset(values))

    def refinements(self) -> tuple[AtomicValidator, ...]:
        """Ordered checks that run after the override gates."""
        checks: list[AtomicValidator] = []
        if self.valid_values:
            checks.append(OneOf(self.valid_values, case_sensitive=not self.case_insensitive))
        if self.invalid_values:
            checks.append(NoneOf(self.invalid_values, case_sensitive=not self.case_insensitive))
        return tuple(checks)


@dataclass(frozen=True, slots=True)
class StringConstraints(BaseConstraints):
    """Constraint set for string schema nodes."""
    type_name: ClassVar[str] = "string"

    min_length: int | None = None
    max_length: int | None = None
    pattern: re.Pattern | None = None
    alphanum: AlphanumPolicy | None = None
    email: bool = False

    def accepts(self, value: Any) -> bool:
        return isinstance(value, str)

    def is_empty(self, value: Any) -> bool:
        return value == ""

    def refinements(self) -> tuple[AtomicValidator, ...]:
        checks: list[AtomicValidator] = []
        if self.min_length is not None or self.max_length is not None:
            checks.append(StringLength(self.min_length, self.max_length))
        if self.pattern is not None:
            checks.append(RegexPattern(self.pattern))
        if self.alphanum is not None:
            checks.append(Alphanumeric(allow_spaces=self.alphanum.spaces_allowed))
        if self.email:
            checks.append(EmailFormat())
        return tuple(checks) + BaseConstraints.refinements(self)
