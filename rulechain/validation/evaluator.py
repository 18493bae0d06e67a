"""Fixed-Precedence Evaluator

Decides the outcome for one (constraints, value) pair. The order is:

1. absent      -> valid unless required
2. null        -> valid only if null_ok
3. wrong type  -> type mismatch
4. empty       -> valid only if empty_ok (skips everything below)
5. denied      -> invalid, even if also allowed
6. allowed     -> valid (skips refinements)
7. refinements -> length, pattern, alphanum, email, valid set, invalid set

Each step that yields a verdict stops evaluation. The function is pure:
no logging, no state, no mutation of the constraint set.
"""
from __future__ import annotations

from typing import Any

from .constraints import BaseConstraints, UNDEFINED
from .results import DiagnosticKind, ValidationResult
from .validators import AllOf


def evaluate(constraints: BaseConstraints, value: Any = UNDEFINED) -> ValidationResult:
    """Evaluate a value against a constraint set. Never raises for any input value."""
    if value is UNDEFINED:
        if constraints.required:
            return ValidationResult.invalid(DiagnosticKind.REQUIRED, "Value is required",
                expected="a value", actual="undefined")
        return ValidationResult.valid()

    if value is None:
        if constraints.null_ok: return ValidationResult.valid()
        return ValidationResult.invalid(DiagnosticKind.NULL_NOT_ALLOWED, "Value cannot be null",
            expected=f"non-null {constraints.type_name}", actual=None)

    if not constraints.accepts(value):
        return ValidationResult.invalid(DiagnosticKind.TYPE_MISMATCH,
            f"Expected {constraints.type_name}, got {type(value).__name__}",
            constraint=constraints.type_name, expected=constraints.type_name, actual=type(value).__name__)

    if constraints.is_empty(value):
        if constraints.empty_ok: return ValidationResult.valid()
        return ValidationResult.invalid(DiagnosticKind.EMPTY_NOT_ALLOWED, "Value cannot be empty",
            expected=f"non-empty {constraints.type_name}", actual=value)

    # override and enumeration sets hold strings only
    member = isinstance(value, str)

    if member and value in constraints.denied:
        return ValidationResult.invalid(DiagnosticKind.DENIED, f"Value '{value}' is denied",
            expected=f"none of {sorted(constraints.denied)}", actual=value)

    if member and value in constraints.allowed:
        return ValidationResult.valid()

    return AllOf(*constraints.refinements()).validate(value)
