"""Diagnostic Message Construction

Maps each diagnostic kind to a human-readable template. Templates use
str.format placeholders drawn from the result's context:

    {label}    field label or path ("value" when unnamed)
    {actual}   offending value
    {type}     expected type name
    {bounds}   rendered length bounds ("between 2 and 3 characters long")
    {pattern}  regex source
    {spaces}   " and spaces" when the alphanumeric check admits spaces
    {values}   comma-separated enumeration members
"""
from __future__ import annotations

from dataclasses import dataclass, field
from string import Formatter
from types import MappingProxyType
from typing import Any, Mapping

from rulechain.core.errors import ErrorCode, configuration_error, raise_error, ConfigurationError
from .results import DiagnosticKind, ValidationResult

PLACEHOLDERS = frozenset({"label", "actual", "type", "bounds", "pattern", "spaces", "values"})
_KIND_VALUES = frozenset(k.value for k in DiagnosticKind) | frozenset(DiagnosticKind)

DEFAULT_TEMPLATES: Mapping[DiagnosticKind, str] = MappingProxyType({
    DiagnosticKind.REQUIRED: "{label} is required",
    DiagnosticKind.NULL_NOT_ALLOWED: "{label} must not be null",
    DiagnosticKind.TYPE_MISMATCH: "{label} must be a {type}",
    DiagnosticKind.EMPTY_NOT_ALLOWED: "{label} must not be empty",
    DiagnosticKind.DENIED: "{label} must not be '{actual}'",
    DiagnosticKind.LENGTH_OUT_OF_RANGE: "{label} length must be {bounds}",
    DiagnosticKind.PATTERN_MISMATCH: "{label} must match the pattern {pattern}",
    DiagnosticKind.NOT_ALPHANUMERIC: "{label} must only contain alpha-numeric characters{spaces}",
    DiagnosticKind.INVALID_EMAIL: "{label} must be a valid email",
    DiagnosticKind.NOT_IN_VALID_SET: "{label} must be one of {values}",
    DiagnosticKind.IN_INVALID_SET: "{label} must not be one of {values}",
})


def _bounds(min_length: int | None, max_length: int | None) -> str:
    if min_length is not None and max_length is not None:
        return f"between {min_length} and {max_length} characters long"
    if min_length is not None:
        return f"at least {min_length} characters long"
    if max_length is not None:
        return f"at most {max_length} characters long"
    return "within range"


def _params(result: ValidationResult, label: str) -> dict[str, Any]:
    meta = result.metadata or {}
    values = meta.get("values") or []
    return {
        "label": label,
        "actual": result.actual,
        "type": result.expected if result.kind is DiagnosticKind.TYPE_MISMATCH else "",
        "bounds": _bounds(meta.get("min"), meta.get("max")),
        "pattern": meta.get("pattern", ""),
        "spaces": " and spaces" if meta.get("allow_spaces") else "",
        "values": ", ".join(f"'{v}'" for v in values),
    }


def _template_problem(template: Any) -> str | None:
    """Why a template cannot be rendered from PLACEHOLDERS, or None when it can."""
    if not isinstance(template, str):
        return f"must be a string, got {type(template).__name__}"
    try:
        names = {name for _, name, _, _ in Formatter().parse(template) if name is not None}
    except ValueError as exc:
        return f"is malformed: {exc}"
    unknown = names - PLACEHOLDERS
    if unknown:
        return f"uses unknown placeholders: {', '.join(sorted(repr(n) for n in unknown))}"
    try:
        template.format(**dict.fromkeys(PLACEHOLDERS, ""))
    except (ValueError, IndexError, KeyError) as exc:
        return f"cannot be rendered: {exc}"
    return None


@dataclass(frozen=True, slots=True)
class MessageCatalog:
    """Immutable template table. Overrides are checked when the catalog is built."""
    templates: Mapping[DiagnosticKind, str] = field(default_factory=lambda: DEFAULT_TEMPLATES)

    def with_overrides(self, overrides: Mapping[DiagnosticKind | str, str]) -> MessageCatalog:
        merged = dict(self.templates)
        for key, template in overrides.items():
            if key not in _KIND_VALUES:
                raise_error(configuration_error(f"Unknown diagnostic kind {key!r}",
                    code=ErrorCode.E7020_INVALID_TEMPLATE, combinator="messages", argument=key), ConfigurationError)
            kind = DiagnosticKind(key)
            if (problem := _template_problem(template)) is not None:
                raise_error(configuration_error(f"Template for {kind.value} {problem}",
                    code=ErrorCode.E7020_INVALID_TEMPLATE, combinator="messages", argument=template), ConfigurationError)
            merged[kind] = template
        return MessageCatalog(MappingProxyType(merged))

    def render(self, result: ValidationResult, label: str = "value") -> str:
        if result.is_valid or result.kind is None: return ""
        return self.templates[result.kind].format(**_params(result, label))


DEFAULT_CATALOG = MessageCatalog()


def render_message(result: ValidationResult, label: str = "value", catalog: MessageCatalog | None = None) -> str:
    """Render a human-readable message for an invalid result ("" for a valid one)."""
    return (catalog or DEFAULT_CATALOG).render(result, label)


def suggested_fix(result: ValidationResult) -> str | None:
    """Generate an actionable hint for an invalid result."""
    if result.is_valid: return None
    meta = result.metadata or {}

    fix_generators = {
        DiagnosticKind.REQUIRED: lambda: "This field is required - provide a value",
        DiagnosticKind.NULL_NOT_ALLOWED: lambda: "Provide a value instead of null",
        DiagnosticKind.TYPE_MISMATCH: lambda: f"Provide a {result.expected} value",
        DiagnosticKind.EMPTY_NOT_ALLOWED: lambda: "Provide a non-empty value",
        DiagnosticKind.DENIED: lambda: "Use a different value - this one is explicitly denied",
        DiagnosticKind.LENGTH_OUT_OF_RANGE: lambda: f"Value must be {_bounds(meta.get('min'), meta.get('max'))}",
        DiagnosticKind.PATTERN_MISMATCH: lambda: f"Value must match pattern: {meta.get('pattern', '?')}",
        DiagnosticKind.NOT_ALPHANUMERIC: lambda: "Remove characters other than letters and digits"
            + (" and spaces" if meta.get("allow_spaces") else ""),
        DiagnosticKind.INVALID_EMAIL: lambda: "Provide a valid email (e.g., 'user@example.com')",
        DiagnosticKind.NOT_IN_VALID_SET: lambda: f"Valid options: {', '.join(meta.get('values', []))}",
        DiagnosticKind.IN_INVALID_SET: lambda: f"Avoid: {', '.join(meta.get('values', []))}",
    }

    return fix_generators[result.kind]() if result.kind in fix_generators else None
