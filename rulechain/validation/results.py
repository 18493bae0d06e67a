"""Validation Outcomes

A ValidationResult is either valid or invalid with exactly one diagnostic
kind: the first rule violated in evaluation order.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from rulechain.core.errors import ErrorCode


class ValidationMode(str, Enum):
    """Error accumulation strategy across fields."""
    FAIL_FAST = "fail_fast"
    COLLECT_ALL = "collect_all"


class DiagnosticKind(str, Enum):
    """Reason attached to an invalid outcome."""
    REQUIRED = "required"
    NULL_NOT_ALLOWED = "null_not_allowed"
    TYPE_MISMATCH = "type_mismatch"
    EMPTY_NOT_ALLOWED = "empty_not_allowed"
    DENIED = "denied"
    LENGTH_OUT_OF_RANGE = "length_out_of_range"
    PATTERN_MISMATCH = "pattern_mismatch"
    NOT_ALPHANUMERIC = "not_alphanumeric"
    INVALID_EMAIL = "invalid_email"
    NOT_IN_VALID_SET = "not_in_valid_set"
    IN_INVALID_SET = "in_invalid_set"

    @property
    def error_code(self) -> ErrorCode:
        return _ERROR_CODES[self]


_ERROR_CODES: dict[DiagnosticKind, ErrorCode] = {
    DiagnosticKind.REQUIRED: ErrorCode.E2001_REQUIRED_FIELD_MISSING,
    DiagnosticKind.NULL_NOT_ALLOWED: ErrorCode.E2006_NULL_NOT_ALLOWED,
    DiagnosticKind.TYPE_MISMATCH: ErrorCode.E2004_INVALID_TYPE,
    DiagnosticKind.EMPTY_NOT_ALLOWED: ErrorCode.E2007_EMPTY_NOT_ALLOWED,
    DiagnosticKind.DENIED: ErrorCode.E2008_VALUE_DENIED,
    DiagnosticKind.LENGTH_OUT_OF_RANGE: ErrorCode.E2003_OUT_OF_RANGE,
    DiagnosticKind.PATTERN_MISMATCH: ErrorCode.E2002_INVALID_FORMAT,
    DiagnosticKind.NOT_ALPHANUMERIC: ErrorCode.E2009_NOT_ALPHANUMERIC,
    DiagnosticKind.INVALID_EMAIL: ErrorCode.E2010_INVALID_EMAIL,
    DiagnosticKind.NOT_IN_VALID_SET: ErrorCode.E2013_NOT_IN_VALID_SET,
    DiagnosticKind.IN_INVALID_SET: ErrorCode.E2014_IN_INVALID_SET,
}


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Result of a validation check with rich context."""
    is_valid: bool
    kind: DiagnosticKind | None = None
    error_message: str | None = None
    constraint: str | None = None
    expected: Any = None
    actual: Any = None
    metadata: dict[str, Any] | None = None

    @classmethod
    def valid(cls) -> ValidationResult: return cls(is_valid=True)

    @classmethod
    def invalid(cls, kind: DiagnosticKind, message: str, *, constraint: str | None = None,
                expected: Any = None, actual: Any = None, **metadata) -> ValidationResult:
        return cls(is_valid=False, kind=kind, error_message=message, constraint=constraint or kind.value,
            expected=expected, actual=actual, metadata=metadata or None)

    @property
    def error_code(self) -> ErrorCode | None:
        return self.kind.error_code if self.kind else None

    def __bool__(self) -> bool:
        return self.is_valid

    def to_dict(self) -> dict[str, Any]:
        """Serialize for API responses."""
        if self.is_valid: return {"valid": True}
        return {"valid": False, "kind": self.kind.value, "message": self.error_message, "code": self.error_code.name,
            "constraint": self.constraint, "expected": self.expected, "actual": self.actual, **(self.metadata or {})}
