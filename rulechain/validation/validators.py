"""Refinement Validators

Atomic string validators for the refinement stage of evaluation (length,
pattern, character class, email format, enumeration sets). They combine
with AllOf, which short-circuits on the first failure so a value is
reported against exactly one rule.

Features:
- Frozen dataclass validators for immutability
- Precompiled patterns
- Rich validation metadata for error context
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any
import re

from .results import DiagnosticKind, ValidationResult

# Local part: dot-separated atoms of RFC 5322 atext. Domain: dot-separated
# hostname labels. Neither side admits "@", so exactly one is present.
_EMAIL_PATTERN = re.compile(
    r"[A-Za-z0-9!#$%&'*+/=?^_`{|}~-]+(?:\.[A-Za-z0-9!#$%&'*+/=?^_`{|}~-]+)*"
    r"@"
    r"[A-Za-z0-9](?:[A-Za-z0-9-]*[A-Za-z0-9])?(?:\.[A-Za-z0-9](?:[A-Za-z0-9-]*[A-Za-z0-9])?)*"
)
_ALPHANUM = re.compile(r"[A-Za-z0-9]+")
_ALPHANUM_SPACES = re.compile(r"[A-Za-z0-9 ]+")


def _type_mismatch(value: Any) -> ValidationResult:
    return ValidationResult.invalid(
        DiagnosticKind.TYPE_MISMATCH,
        f"Expected string, got {type(value).__name__}",
        constraint="string",
        expected="string",
        actual=type(value).__name__,
    )


def _preview(value: str) -> str:
    return value[:50] + ("..." if len(value) > 50 else "")


class AtomicValidator(ABC):
    """Base class for atomic validators."""

    @abstractmethod
    def validate(self, value: Any) -> ValidationResult:
        """Validate a value. Returns ValidationResult."""

    @property
    @abstractmethod
    def constraint_name(self) -> str:
        """Human-readable constraint name for error messages."""

    def __call__(self, value: Any) -> ValidationResult: return self.validate(value)


# ============================================================================
# String Validators
# ============================================================================

@dataclass(frozen=True, slots=True)
class StringLength(AtomicValidator):
    """Validate string length constraints."""
    min_length: int | None = None
    max_length: int | None = None

    @property
    def constraint_name(self) -> str:
        if self.min_length is not None and self.max_length is not None:
            return f"length[{self.min_length},{self.max_length}]"
        if self.min_length is not None:
            return f"min_length[{self.min_length}]"
        if self.max_length is not None:
            return f"max_length[{self.max_length}]"
        return "string_length"

    def validate(self, value: Any) -> ValidationResult:
        if not isinstance(value, str):
            return _type_mismatch(value)

        length = len(value)

        if self.min_length is not None and length < self.min_length:
            return ValidationResult.invalid(
                DiagnosticKind.LENGTH_OUT_OF_RANGE,
                f"String length {length} is less than minimum {self.min_length}",
                constraint=self.constraint_name,
                expected=f">= {self.min_length} characters",
                actual=f"{length} characters",
                min=self.min_length,
                max=self.max_length,
            )

        if self.max_length is not None and length > self.max_length:
            return ValidationResult.invalid(
                DiagnosticKind.LENGTH_OUT_OF_RANGE,
                f"String length {length} exceeds maximum {self.max_length}",
                constraint=self.constraint_name,
                expected=f"<= {self.max_length} characters",
                actual=f"{length} characters",
                min=self.min_length,
                max=self.max_length,
            )

        return ValidationResult.valid()


@dataclass(frozen=True, slots=True)
class RegexPattern(AtomicValidator):
    """Validate string against a regex pattern.

    The pattern is searched, not anchored: callers anchor with ^ and $
    when the whole value must match.
    """
    pattern: re.Pattern

    @property
    def constraint_name(self) -> str:
        return f"pattern[{self.pattern.pattern}]"

    def validate(self, value: Any) -> ValidationResult:
        if not isinstance(value, str):
            return _type_mismatch(value)

        if not self.pattern.search(value):
            return ValidationResult.invalid(
                DiagnosticKind.PATTERN_MISMATCH,
                f"Value does not match pattern: {self.pattern.pattern}",
                constraint=self.constraint_name,
                expected=f"match pattern '{self.pattern.pattern}'",
                actual=_preview(value),
                pattern=self.pattern.pattern,
            )

        return ValidationResult.valid()


@dataclass(frozen=True, slots=True)
class Alphanumeric(AtomicValidator):
    """Validate string holds only ASCII letters and digits (and optionally spaces)."""
    allow_spaces: bool = True

    @property
    def constraint_name(self) -> str:
        return "alphanum" + ("_spaces" if self.allow_spaces else "")

    def validate(self, value: Any) -> ValidationResult:
        if not isinstance(value, str):
            return _type_mismatch(value)

        pattern = _ALPHANUM_SPACES if self.allow_spaces else _ALPHANUM
        if not pattern.fullmatch(value):
            return ValidationResult.invalid(
                DiagnosticKind.NOT_ALPHANUMERIC,
                "String must only contain letters and digits" + (" and spaces" if self.allow_spaces else ""),
                constraint=self.constraint_name,
                expected="alpha-numeric characters" + (" or spaces" if self.allow_spaces else ""),
                actual=_preview(value),
                allow_spaces=self.allow_spaces,
            )

        return ValidationResult.valid()


@dataclass(frozen=True, slots=True)
class EmailFormat(AtomicValidator):
    """Validate email address format."""

    @property
    def constraint_name(self) -> str:
        return "email"

    def validate(self, value: Any) -> ValidationResult:
        if not isinstance(value, str):
            return _type_mismatch(value)

        if not _EMAIL_PATTERN.fullmatch(value):
            return ValidationResult.invalid(
                DiagnosticKind.INVALID_EMAIL,
                f"Invalid email format: {_preview(value)}",
                constraint=self.constraint_name,
                expected="valid email address",
                actual=_preview(value),
            )

        return ValidationResult.valid()


# ============================================================================
# Enumeration Validators
# ============================================================================

def _contains(options: tuple[str, ...], value: str, case_sensitive: bool) -> bool:
    if case_sensitive: return value in options
    return value.lower() in {o.lower() for o in options}


@dataclass(frozen=True, slots=True)
class OneOf(AtomicValidator):
    """Validate value is one of allowed options."""
    options: tuple[str, ...]
    case_sensitive: bool = True

    @property
    def constraint_name(self) -> str:
        opts = list(self.options[:5])
        suffix = f"... +{len(self.options) - 5}" if len(self.options) > 5 else ""
        return f"one_of[{', '.join(opts)}{suffix}]"

    def validate(self, value: Any) -> ValidationResult:
        if not isinstance(value, str):
            return _type_mismatch(value)

        if not _contains(self.options, value, self.case_sensitive):
            return ValidationResult.invalid(DiagnosticKind.NOT_IN_VALID_SET,
                f"Value '{_preview(value)}' is not one of: {', '.join(self.options)}",
                constraint=self.constraint_name, expected=list(self.options), actual=value,
                values=list(self.options), case_sensitive=self.case_sensitive)
        return ValidationResult.valid()


@dataclass(frozen=True, slots=True)
class NoneOf(AtomicValidator):
    """Validate value is none of the excluded options."""
    options: tuple[str, ...]
    case_sensitive: bool = True

    @property
    def constraint_name(self) -> str:
        opts = list(self.options[:5])
        suffix = f"... +{len(self.options) - 5}" if len(self.options) > 5 else ""
        return f"none_of[{', '.join(opts)}{suffix}]"

    def validate(self, value: Any) -> ValidationResult:
        if not isinstance(value, str):
            return _type_mismatch(value)

        if _contains(self.options, value, self.case_sensitive):
            return ValidationResult.invalid(DiagnosticKind.IN_INVALID_SET,
                f"Value '{_preview(value)}' is one of the excluded values: {', '.join(self.options)}",
                constraint=self.constraint_name, expected=f"none of {list(self.options)}", actual=value,
                values=list(self.options), case_sensitive=self.case_sensitive)
        return ValidationResult.valid()


# ============================================================================
# Combinators
# ============================================================================

@dataclass(frozen=True, slots=True)
class AllOf(AtomicValidator):
    """All validators must pass; the first failure is returned."""
    validators: tuple[AtomicValidator, ...]

    def __init__(self, *validators: AtomicValidator):
        object.__setattr__(self, "validators", tuple(validators))

    @property
    def constraint_name(self) -> str:
        return f"all_of[{', '.join(v.constraint_name for v in self.validators)}]"

    def validate(self, value: Any) -> ValidationResult:
        for v in self.validators:
            if not (result := v.validate(value)).is_valid: return result
        return ValidationResult.valid()
