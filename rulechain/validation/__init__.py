"""Constraint Evaluation System

Constraint sets are immutable bags of flags and predicates; the evaluator
turns one (constraint set, value) pair into a single outcome using a fixed
precedence order in which null/empty policy and allow/deny overrides
short-circuit the refinement checks.

Key Features:
- Frozen dataclass constraint sets, updated by replacement
- Pure evaluator with exactly one diagnostic per invalid outcome
- Atomic refinement validators combined with a short-circuit AllOf
- Message templates with per-kind overrides
- Structured error accumulation (fail-fast or collect-all)

Usage:
    from rulechain.validation import StringConstraints, evaluate, render_message

    constraints = StringConstraints(min_length=3, null_ok=True)
    result = evaluate(constraints, "ab")
    if not result.is_valid:
        print(render_message(result, "username"))
"""

from .results import (
    ValidationResult,
    DiagnosticKind,
    ValidationMode,
)

from .validators import (
    AtomicValidator,
    StringLength,
    RegexPattern,
    Alphanumeric,
    EmailFormat,
    OneOf,
    NoneOf,
    AllOf,
)

from .constraints import (
    UNDEFINED,
    AlphanumPolicy,
    BaseConstraints,
    StringConstraints,
)

from .evaluator import evaluate

from .messages import (
    MessageCatalog,
    DEFAULT_TEMPLATES,
    render_message,
    suggested_fix,
)

from .errors import (
    REDACTED,
    ValidationError,
    ValidationErrorDetail,
    ErrorAccumulator,
    ValidationContext,
)

__all__ = [
    # Outcomes
    "ValidationResult",
    "DiagnosticKind",
    "ValidationMode",
    # Refinement validators
    "AtomicValidator",
    "StringLength",
    "RegexPattern",
    "Alphanumeric",
    "EmailFormat",
    "OneOf",
    "NoneOf",
    "AllOf",
    # Constraint sets
    "UNDEFINED",
    "AlphanumPolicy",
    "BaseConstraints",
    "StringConstraints",
    # Evaluator
    "evaluate",
    # Messages
    "MessageCatalog",
    "DEFAULT_TEMPLATES",
    "render_message",
    "suggested_fix",
    # Errors
    "REDACTED",
    "ValidationError",
    "ValidationErrorDetail",
    "ErrorAccumulator",
    "ValidationContext",
]
