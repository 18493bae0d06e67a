"""Per-field validation errors and their accumulation.

A ValidationContext walks a value, keeps the dotted path of the field being
checked, and records one ValidationErrorDetail per failing field. In
fail-fast mode it stops at the first detail; in collect-all mode it keeps
going until max_errors details are held.

Serialized shape:
{
    "error": {
        "type": "validation_error",
        "message": "Validation failed",
        "mode": "collect_all",
        "error_count": 1,
        "errors": [
            {
                "field": "user.email",
                "kind": "invalid_email",
                "constraint": "email",
                "value": "nope",
                "message": "user.email must be a valid email",
                "suggested_fix": "Provide a valid email (e.g., 'user@example.com')"
            }
        ]
    }
}
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Protocol

from rulechain.core.errors import AppError, ErrorCode
from .messages import MessageCatalog, render_message, suggested_fix
from .results import DiagnosticKind, ValidationMode, ValidationResult

REDACTED = "[REDACTED]"
ROOT_PATH = "$"


class SupportsValidate(Protocol):
    def validate(self, value: Any) -> ValidationResult: ...


@dataclass(frozen=True, slots=True)
class ValidationErrorDetail:
    """One failing field.

    field_path is dotted from the root ("user.contact.email"), or "$" for
    the root value itself. message is already rendered for that path.
    """
    field_path: str
    kind: DiagnosticKind
    constraint: str
    actual_value: Any = None
    message: str = ""
    suggested_fix: str | None = None

    @classmethod
    def from_result(cls, field_path: str, result: ValidationResult, *, label: str | None = None,
                    catalog: MessageCatalog | None = None, redact: bool = False) -> ValidationErrorDetail:
        """Build a detail; with redact, the value is hidden from the message as well."""
        if redact: result = replace(result, actual=REDACTED)
        return cls(field_path=field_path, kind=result.kind, constraint=result.constraint or result.kind.value,
            actual_value=result.actual, message=render_message(result, label or field_path, catalog),
            suggested_fix=suggested_fix(result))

    def redacted(self) -> ValidationErrorDetail:
        return replace(self, actual_value=REDACTED)

    def to_dict(self) -> dict[str, Any]:
        out = {"field": self.field_path, "kind": self.kind.value, "constraint": self.constraint, "message": self.message}
        if self.actual_value is not None: out["value"] = self.actual_value
        if self.suggested_fix: out["suggested_fix"] = self.suggested_fix
        return out


@dataclass
class ValidationError(Exception):
    """Raised by assert_valid(); converted to an AppError by validate()."""
    message: str
    details: list[ValidationErrorDetail]
    mode: ValidationMode = ValidationMode.FAIL_FAST
    redact_values: bool = False

    def __post_init__(self):
        super().__init__(self.message)

    def __str__(self) -> str:
        if len(self.details) == 1: return self.details[0].message
        return f"{self.message} ({len(self.details)} errors)" if self.details else self.message

    @property
    def first_error(self) -> ValidationErrorDetail | None:
        return self.details[0] if self.details else None

    @property
    def field_errors(self) -> dict[str, list[ValidationErrorDetail]]:
        grouped: dict[str, list[ValidationErrorDetail]] = {}
        for d in self.details:
            grouped.setdefault(d.field_path, []).append(d)
        return grouped

    def get_errors_for_field(self, field_path: str) -> list[ValidationErrorDetail]:
        return self.field_errors.get(field_path, [])

    def visible_details(self) -> list[ValidationErrorDetail]:
        """Details as they may be shown to callers, values redacted if configured."""
        return [d.redacted() for d in self.details] if self.redact_values else list(self.details)

    def to_app_error(self) -> AppError:
        """One detail keeps its own code; several fold into E2000 with the list attached."""
        details = self.visible_details()
        if len(details) == 1:
            (d,) = details
            return AppError(code=d.kind.error_code, message=d.message, metadata={
                "field": d.field_path, "kind": d.kind.value, "constraint": d.constraint,
                "value": d.actual_value, "suggested_fix": d.suggested_fix})

        return AppError(code=ErrorCode.E2000_VALIDATION_GENERIC, message=f"Validation failed: {len(details)} errors",
            metadata={"validation_mode": self.mode.value, "error_count": len(details),
                "errors": [d.to_dict() for d in details]})

    def to_dict(self) -> dict[str, Any]:
        details = self.visible_details()
        return {"error": {"type": "validation_error", "message": self.message, "mode": self.mode.value,
            "error_count": len(details), "errors": [d.to_dict() for d in details]}}


@dataclass
class ErrorAccumulator:
    """Holds details up to a limit: one in fail-fast mode, max_errors otherwise."""
    mode: ValidationMode = ValidationMode.FAIL_FAST
    max_errors: int = 50
    details: list[ValidationErrorDetail] = field(default_factory=list)

    @property
    def limit(self) -> int:
        return 1 if self.mode is ValidationMode.FAIL_FAST else max(self.max_errors, 1)

    @property
    def full(self) -> bool:
        return len(self.details) >= self.limit

    def add(self, detail: ValidationErrorDetail) -> bool:
        """Record a detail unless full. Returns False once no more will be accepted."""
        if not self.full: self.details.append(detail)
        return not self.full

    def to_validation_error(self, message: str = "Validation failed", redact_values: bool = False) -> ValidationError | None:
        if not self.details: return None
        return ValidationError(message=message, details=list(self.details), mode=self.mode, redact_values=redact_values)


class ValidationContext:
    """Path-aware error collector for hand-written or schema-driven checks.

    Usage:
        with ValidationContext(mode=ValidationMode.COLLECT_ALL) as ctx:
            ctx.validate("email", email, String().email())
            ctx.validate("name", name, String().min(3).required())
        # ValidationError raised here if anything failed
    """

    def __init__(self, mode: ValidationMode = ValidationMode.FAIL_FAST, max_errors: int = 50,
                 redact_values: bool = False, catalog: MessageCatalog | None = None):
        self.accumulator = ErrorAccumulator(mode=ValidationMode(mode), max_errors=max_errors)
        self.redact_values = redact_values
        self.catalog = catalog
        self._path: list[str] = []

    def __enter__(self) -> ValidationContext:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        if exc_type is None and (error := self.to_validation_error()) is not None:
            raise error
        return False

    def push_path(self, segment: str | int) -> None:
        self._path.append(str(segment))

    def pop_path(self) -> str | None:
        return self._path.pop() if self._path else None

    @property
    def current_path(self) -> str:
        return ".".join(self._path) or ROOT_PATH

    @property
    def stopped(self) -> bool:
        """True once the accumulator refuses further details."""
        return self.accumulator.full

    def validate(self, field: str | None, value: Any, validator: SupportsValidate) -> bool:
        """Check one field. Returns True when it passed."""
        result = validator.validate(value)
        if not result.is_valid:
            self.add_result(field, result)
        return result.is_valid

    def add_result(self, field: str | None, result: ValidationResult) -> bool:
        """Record an invalid result at the current path (plus field). Returns False once stopped."""
        if field is None:
            path = self.current_path
        else:
            path = f"{'.'.join(self._path)}.{field}" if self._path else str(field)
        label = "value" if path == ROOT_PATH else path
        return self.accumulator.add(ValidationErrorDetail.from_result(path, result, label=label,
            catalog=self.catalog, redact=self.redact_values))

    @property
    def has_errors(self) -> bool:
        return bool(self.accumulator.details)

    @property
    def errors(self) -> list[ValidationErrorDetail]:
        return list(self.accumulator.details)

    def to_validation_error(self, message: str = "Validation failed") -> ValidationError | None:
        return self.accumulator.to_validation_error(message, self.redact_values)
