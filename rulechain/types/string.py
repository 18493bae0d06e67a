"""String schema type.

Usage:
    from rulechain import String

    username = String().min(3).max(20).alphanum(False).required()
    username.validate("w0rldofw4lm4rtl4bs").is_valid      # True

    contact = String().email().allow("x@x.com").deny("123@x.com")
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar
import re

from rulechain.core.errors import ErrorCode, configuration_error, invalid_argument, invalid_bound
from rulechain.validation.constraints import AlphanumPolicy, StringConstraints
from .base import BaseType, reject


def _check_bound(combinator: str, n: Any) -> int:
    # bool is an int subclass but never a length
    if isinstance(n, bool) or not isinstance(n, int) or n < 0:
        reject(invalid_bound(combinator, n))
    return n


@dataclass(frozen=True, slots=True)
class StringType(BaseType):
    """String node: length bounds, pattern, character class and email format."""
    constraints_type: ClassVar[type[StringConstraints]] = StringConstraints

    def min(self, n: int) -> StringType:
        """Minimum length. Replaces any earlier bound."""
        return self._set(min_length=_check_bound("min", n))

    def max(self, n: int) -> StringType:
        """Maximum length. Replaces any earlier bound."""
        return self._set(max_length=_check_bound("max", n))

    def regex(self, pattern: str | re.Pattern, flags: int = 0) -> StringType:
        """Pattern the value must contain a match for. Replaces any earlier pattern."""
        if isinstance(pattern, re.Pattern) and isinstance(pattern.pattern, str):
            if flags:
                reject(invalid_argument("regex", flags, "no flags with a compiled pattern"))
            return self._set(pattern=pattern)
        if not isinstance(pattern, str):
            reject(invalid_argument("regex", pattern, "a str pattern or compiled str pattern"))
        try:
            compiled = re.compile(pattern, flags)
        except re.error as e:
            reject(configuration_error(f"regex() pattern does not compile: {e}",
                code=ErrorCode.E7003_INVALID_PATTERN, combinator="regex", argument=pattern))
        return self._set(pattern=compiled)

    def alphanum(self, allow_spaces: bool | None = None) -> StringType:
        """Restrict to ASCII letters and digits; spaces pass unless allow_spaces is False."""
        if allow_spaces is not None and not isinstance(allow_spaces, bool):
            reject(invalid_argument("alphanum", allow_spaces, "True, False or None"))
        return self._set(alphanum=AlphanumPolicy(allow_spaces))

    def email(self) -> StringType:
        return self._set(email=True)


def String() -> StringType:
    """Factory for an unconstrained string node."""
    return StringType()
