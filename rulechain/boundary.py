"""Validation Entry Point

Validates a value against a schema node, a registered type name, or a
(possibly nested) mapping of key -> node, and reports per-field errors.

Usage:
    from rulechain import String, validate

    schema = {"item": String().email(), "name": String().min(3).required()}
    result = validate({"item": "something", "name": "joi"}, schema)
    if result.is_err():
        print(result.unwrap_err().message)   # "item must be a valid email"
"""
from __future__ import annotations

from typing import Any, Mapping

from rulechain.core.config import get_settings
from rulechain.core.errors import AppError, Err, Ok, Result, invalid_argument
from rulechain.core.logging import validation_logger
from rulechain.types import TypeRegistry, default_registry
from rulechain.types.base import reject
from rulechain.validation import (
    UNDEFINED,
    DiagnosticKind,
    MessageCatalog,
    ValidationContext,
    ValidationError,
    ValidationMode,
    ValidationResult,
)

log = validation_logger()

Schema = Any  # BaseType | str | Mapping[str, Schema]


def _mode(mode: ValidationMode | str) -> ValidationMode:
    try:
        return ValidationMode(mode)
    except ValueError:
        reject(invalid_argument("check", mode, " or ".join(repr(m.value) for m in ValidationMode), origin="mode"))


def _walk(ctx: ValidationContext, key: str | None, value: Any, node: Schema, registry: TypeRegistry) -> None:
    if not isinstance(node, Mapping):
        ctx.validate(key, value, registry.resolve(node))
        return

    if value is UNDEFINED: return

    if key is not None: ctx.push_path(key)
    try:
        if not isinstance(value, Mapping):
            ctx.add_result(None, ValidationResult.invalid(DiagnosticKind.TYPE_MISMATCH,
                f"Expected object, got {type(value).__name__}",
                constraint="object", expected="object", actual=type(value).__name__))
            return
        for child_key, child in node.items():
            if ctx.stopped: break
            _walk(ctx, child_key, value.get(child_key, UNDEFINED), child, registry)
    finally:
        if key is not None: ctx.pop_path()


def check(
    value: Any,
    schema: Schema,
    *,
    registry: TypeRegistry | None = None,
    mode: ValidationMode | str | None = None,
    max_errors: int | None = None,
    catalog: MessageCatalog | None = None,
) -> ValidationError | None:
    """Validate and return the aggregated error, or None when the value conforms."""
    settings = get_settings()
    mode = _mode(settings.VALIDATION_MODE if mode is None else mode)
    max_errors = settings.MAX_ERRORS if max_errors is None else max_errors
    if isinstance(max_errors, bool) or not isinstance(max_errors, int) or max_errors < 1:
        reject(invalid_argument("check", max_errors, "max_errors as a positive int", origin="max_errors"))
    ctx = ValidationContext(mode=mode, max_errors=max_errors,
        redact_values=settings.REDACT_VALUES, catalog=catalog)
    _walk(ctx, None, value, schema, registry if registry is not None else default_registry())

    error = ctx.to_validation_error()
    log.debug("validation_completed", valid=error is None, mode=mode.value,
        error_count=len(error.details) if error else 0)
    return error


def validate(
    value: Any,
    schema: Schema,
    *,
    registry: TypeRegistry | None = None,
    mode: ValidationMode | str | None = None,
    max_errors: int | None = None,
    catalog: MessageCatalog | None = None,
) -> Result[Any, AppError]:
    """Validate a value; Ok(value) when it conforms, Err(AppError) otherwise."""
    error = check(value, schema, registry=registry, mode=mode, max_errors=max_errors, catalog=catalog)
    if error is None: return Ok(value)
    return Err(error.to_app_error().with_context(origin="validate"))


def assert_valid(
    value: Any,
    schema: Schema,
    *,
    registry: TypeRegistry | None = None,
    mode: ValidationMode | str | None = None,
    max_errors: int | None = None,
    catalog: MessageCatalog | None = None,
) -> Any:
    """Validate a value, raising ValidationError when it does not conform."""
    error = check(value, schema, registry=registry, mode=mode, max_errors=max_errors, catalog=catalog)
    if error is not None: raise error
    return value
