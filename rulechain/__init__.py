"""rulechain - chained constraint schemas for runtime value validation

Schemas are built by chaining combinators; each call returns a new schema.
A fixed-precedence evaluator decides whether a value conforms and, when it
does not, names the first rule it violated.

Usage:
    from rulechain import String, validate, UNDEFINED

    email = String().email().min(8).max(10).allow("x@x.com").deny("123@x.com")
    email.validate("x@x.com").is_valid       # True: allowed despite length 7
    email.validate("123@x.com").kind         # DiagnosticKind.DENIED

    String().validate(UNDEFINED).is_valid    # True: absent and not required
    String().validate("").kind               # DiagnosticKind.EMPTY_NOT_ALLOWED
"""

from rulechain.core.errors import (
    AppError,
    ConfigurationError,
    Err,
    ErrorCode,
    Ok,
    Result,
)
from rulechain.types import (
    BaseType,
    StringType,
    String,
    TypeRegistry,
    default_registry,
)
from rulechain.validation import (
    UNDEFINED,
    DiagnosticKind,
    MessageCatalog,
    ValidationContext,
    ValidationError,
    ValidationMode,
    ValidationResult,
    evaluate,
    render_message,
)
from rulechain.boundary import assert_valid, check, validate

__version__ = "0.1.0"

__all__ = [
    "AppError",
    "ConfigurationError",
    "Err",
    "ErrorCode",
    "Ok",
    "Result",
    "BaseType",
    "StringType",
    "String",
    "TypeRegistry",
    "default_registry",
    "UNDEFINED",
    "DiagnosticKind",
    "MessageCatalog",
    "ValidationContext",
    "ValidationError",
    "ValidationMode",
    "ValidationResult",
    "evaluate",
    "render_message",
    "assert_valid",
    "check",
    "validate",
]
