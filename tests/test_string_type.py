"""Behavioural tests for the string schema type."""
from __future__ import annotations

import re

import pytest

from rulechain import ConfigurationError, String, validate
from rulechain.validation import UNDEFINED, DiagnosticKind


class TestValid:

    def test_rejects_non_string_members(self):
        with pytest.raises(ConfigurationError):
            String().valid(1)

    def test_accepts_string_members(self):
        String().valid("joi")

    def test_case_sensitive_values(self, verify_behavior):
        verify_behavior(String().valid("a", "b"), [("a", True), ("b", True), ("A", False), ("B", False)])

    def test_case_insensitive_values(self, verify_behavior):
        verify_behavior(String().valid("a", "b").insensitive(), [("a", True), ("b", True), ("A", True), ("B", True)])


class TestInvalid:

    def test_rejects_non_string_members(self):
        with pytest.raises(ConfigurationError):
            String().invalid(1)

    def test_accepts_string_members(self):
        String().invalid("joi")

    def test_case_sensitive_values(self, verify_behavior):
        verify_behavior(String().invalid("a", "b"), [("a", False), ("b", False), ("A", True), ("B", True)])

    def test_case_insensitive_values(self, verify_behavior):
        verify_behavior(String().invalid("a", "b").insensitive(), [("a", False), ("b", False), ("A", False), ("B", False)])


class TestValidate:

    def test_validate_does_not_raise(self):
        assert String().validate("joi").is_valid

    def test_default_allows_undefined_denies_empty(self, verify_behavior):
        verify_behavior(String(), [(UNDEFINED, True), ("", False)])

    def test_required_denies_undefined_and_empty(self, verify_behavior):
        verify_behavior(String().required(), [(UNDEFINED, False), ("", False)])

    def test_required_empty_string_message(self):
        result = validate("", String().required())

        assert result.is_err()
        assert "be empty" in result.unwrap_err().message

    def test_required_accepts_non_empty_strings(self, verify_behavior):
        verify_behavior(String().required(), [("test", True), ("0", True), (None, False)])

    def test_invalid_values(self, verify_behavior):
        verify_behavior(String().invalid("a", "b", "c"), [("x", True), ("a", False), ("c", False)])

    def test_valid_values(self, verify_behavior):
        verify_behavior(String().valid("a", "b", "c"), [("x", False), ("a", True), ("c", True)])

    def test_array_arguments(self, verify_behavior):
        verify_behavior(String().valid(["a", "b", "c"]), [("x", False), ("a", True), ("c", True)])

    def test_min_length(self, verify_behavior):
        verify_behavior(String().min(3), [("test", True), ("0", False), (None, False)])

    def test_min_length_zero(self, verify_behavior):
        verify_behavior(String().min(0).required(), [("0", True), (None, False), (UNDEFINED, False)])

    def test_min_length_rejects_null(self, verify_behavior):
        verify_behavior(String().min(3), [(None, False)])

    def test_null_ok_overrides_min_length(self, verify_behavior):
        verify_behavior(String().min(3).null_ok(), [(None, True)])

    def test_max_length(self, verify_behavior):
        verify_behavior(String().max(3), [("test", False), ("0", True), (None, False)])

    def test_max_allows_undefined_when_not_required(self, verify_behavior):
        verify_behavior(String().max(3), [(UNDEFINED, True)])

    def test_regex(self, verify_behavior):
        verify_behavior(String().regex(re.compile(r"^[0-9][-][a-z]+$")), [("van", False), ("0-www", True)])

    def test_alphanum_allowing_spaces(self, verify_behavior):
        verify_behavior(String().alphanum(True), [("w0rld of w4lm4rtl4bs", True), ("abcd#f?h1j orly?", False)])

    def test_alphanum_without_spaces(self, verify_behavior):
        verify_behavior(String().alphanum(False), [
            ("w0rld of w4lm4rtl4bs", False),
            ("w0rldofw4lm4rtl4bs", True),
            ("abcd#f?h1j orly?", False),
        ])

    def test_alphanum_spaces_unset(self, verify_behavior):
        verify_behavior(String().alphanum(None), [("w0rld of w4lm4rtl4bs", True), ("abcd#f?h1j orly?", False)])

    def test_email(self, verify_behavior):
        verify_behavior(String().email(), [("van@walmartlabs.com", True), ("@iaminvalid.com", False)])

    def test_email_message(self):
        result = validate({"item": "something"}, {"item": String().email()})

        assert "must be a valid email" in result.unwrap_err().message

    def test_denied_value(self):
        assert String().deny("joi").validate("joi").kind is DiagnosticKind.DENIED

    def test_allowed_value_does_not_restrict_others(self):
        assert String().allow("hapi").validate("result").is_valid

    def test_single_validator(self):
        assert String().min(3).validate("joi").is_valid

    def test_two_validators(self):
        text = String().min(3).required()

        assert text.validate("joi").is_valid
        assert text.validate().kind is DiagnosticKind.REQUIRED

    def test_null_ok(self, verify_behavior):
        verify_behavior(String().null_ok(), [(None, True)])

    def test_empty_ok(self, verify_behavior):
        verify_behavior(String().empty_ok(), [("", True), ("", True)])


class TestCombinations:
    """Each combination evaluated against the same sample values."""

    @pytest.mark.parametrize("schema, cases", [
        (String().required().min(3), [("x", False), ("123", True), ("", False), (None, False)]),
        (String().required().max(3), [("x", True), ("123", True), ("1234", False), ("", False), (None, False)]),
        (String().empty_ok().min(3), [("x", False), ("123", True), ("1234", True), ("", True), (None, False)]),
        (String().empty_ok().max(3), [("x", True), ("123", True), ("1234", False), ("", True), (None, False)]),
        (String().null_ok().max(3), [("x", True), ("123", True), ("1234", False), ("", False), (None, True)]),
        (String().min(2).max(3), [("x", False), ("123", True), ("1234", False), ("12", True), ("", False), (None, False)]),
        (String().min(2).max(3).empty_ok(),
            [("x", False), ("123", True), ("1234", False), ("12", True), ("", True), (None, False)]),
        (String().min(2).max(3).required(),
            [("x", False), ("123", True), ("1234", False), ("12", True), ("", False), (None, False)]),
    ], ids=["required-min", "required-max", "empty_ok-min", "empty_ok-max", "null_ok-max",
            "min-max", "min-max-empty_ok", "min-max-required"])
    def test_presence_and_length(self, verify_behavior, schema, cases):
        verify_behavior(schema, cases)

    REGEX_PROBES = [("x", False), ("123", False), ("1234", False), ("12", False),
                    ("ab", True), ("abc", True), ("abcd", False)]

    @pytest.mark.parametrize("schema, empty_expected", [
        (String().min(2).max(3).regex(r"^a"), False),
        (String().min(2).max(3).regex(r"^a").empty_ok(), True),
        (String().min(2).max(3).regex(r"^a").required(), False),
    ], ids=["plain", "empty_ok", "required"])
    def test_length_and_regex(self, verify_behavior, schema, empty_expected):
        verify_behavior(schema, self.REGEX_PROBES + [("", empty_expected), (None, False)])

    ALPHANUM_PROBES = [("x", False), ("123", True), ("1234", False), ("12", True),
                       ("ab", True), ("abc", True), ("abcd", False), ("*ab", False)]

    @pytest.mark.parametrize("schema, empty_expected", [
        (String().min(2).max(3).alphanum(), False),
        (String().min(2).max(3).alphanum().empty_ok(), True),
        (String().min(2).max(3).alphanum().required(), False),
    ], ids=["plain", "empty_ok", "required"])
    def test_length_and_alphanum(self, verify_behavior, schema, empty_expected):
        verify_behavior(schema, self.ALPHANUM_PROBES + [("", empty_expected), (None, False)])

    ALPHANUM_REGEX_PROBES = [("x", False), ("123", False), ("1234", False), ("12", False), ("ab", True),
                             ("abc", True), ("a2c", True), ("abcd", False), ("*ab", False)]

    @pytest.mark.parametrize("schema, empty_expected", [
        (String().min(2).max(3).alphanum().regex(r"^a"), False),
        (String().min(2).max(3).alphanum().required().regex(r"^a"), False),
        (String().min(2).max(3).alphanum().empty_ok().regex(r"^a"), True),
    ], ids=["plain", "required", "empty_ok"])
    def test_length_alphanum_and_regex(self, verify_behavior, schema, empty_expected):
        verify_behavior(schema, self.ALPHANUM_REGEX_PROBES + [("", empty_expected), (None, False)])

    def test_email_and_min(self, verify_behavior):
        verify_behavior(String().email().min(8),
            [("x@x.com", False), ("123@x.com", True), ("", False), (None, False)])

    EMAIL = String().email().min(8).max(10)

    @pytest.mark.parametrize("schema, expected", [
        (EMAIL, [False, True, True, False, False]),
        (EMAIL.deny("123@x.com"), [False, False, True, False, False]),
        (EMAIL.allow("x@x.com"), [True, True, True, False, False]),
        (EMAIL.allow("x@x.com").deny("123@x.com"), [True, False, True, False, False]),
        (EMAIL.allow("x@x.com").deny("123@x.com").empty_ok(), [True, False, True, False, True]),
        (EMAIL.allow("x@x.com").empty_ok(), [True, True, True, False, True]),
        (EMAIL.allow("x@x.com").deny("123@x.com").regex(r"^1"), [True, False, True, False, False]),
        (EMAIL.allow("x@x.com").deny("123@x.com").regex(r"^1").empty_ok(), [True, False, True, False, True]),
        (EMAIL.empty_ok(), [False, True, True, False, True]),
        (EMAIL.regex(r"^1234"), [False, False, True, False, False]),
        (EMAIL.regex(r"^1234").empty_ok(), [False, False, True, False, True]),
        (EMAIL.regex(r"^1234").required(), [False, False, True, False, False]),
    ], ids=["plain", "deny", "allow", "allow-deny", "allow-deny-empty_ok", "allow-empty_ok",
            "allow-deny-regex", "allow-deny-regex-empty_ok", "empty_ok", "regex", "regex-empty_ok",
            "regex-required"])
    def test_email_length_overrides(self, verify_behavior, schema, expected):
        samples = ["x@x.com", "123@x.com", "1234@x.com", "12345@x.com", ""]
        verify_behavior(schema, list(zip(samples, expected)) + [(None, False)])
