"""
Unit tests for the validation engine: validate_field, validate_form, FormValidator.
"""

import re

import pytest
from pydantic import ValidationError

from ledforms.validators import (
    COMMON_RULES,
    VALIDATION_PATTERNS,
    FormValidator,
    ValidationResult,
    ValidationRule,
    validate_field,
    validate_form,
)

EMPTY_VALUES = [None, "", "   "]


@pytest.mark.unit
class TestRequired:

    @pytest.mark.parametrize("value", EMPTY_VALUES)
    def test_missing_value_fails_required(self, value):
        assert validate_field(value, ValidationRule(required=True)) == "This field is required"

    @pytest.mark.parametrize("value", EMPTY_VALUES)
    def test_missing_value_passes_when_optional(self, value):
        assert validate_field(value, ValidationRule()) is None

    def test_present_value_passes_required(self):
        assert validate_field("value", ValidationRule(required=True)) is None

    def test_required_short_circuits_other_checks(self):
        rule = ValidationRule(required=True, min_length=5, custom=lambda v: "custom ran")
        assert validate_field("", rule) == "This field is required"

    def test_optional_empty_skips_every_check(self):
        rule = ValidationRule(min_length=5, pattern=r"\d+", custom=lambda v: "custom ran")
        assert validate_field("", rule) is None
        assert validate_field(None, ValidationRule(min=10)) is None

    def test_zero_and_false_are_values(self):
        assert validate_field(0, ValidationRule(required=True)) is None
        assert validate_field(False, ValidationRule(required=True)) is None


@pytest.mark.unit
class TestStringChecks:

    def test_min_length(self):
        assert validate_field("ab", ValidationRule(min_length=3)) == "Must be at least 3 characters"
        assert validate_field("abc", ValidationRule(min_length=3)) is None

    def test_max_length_message_mentions_limit(self):
        error = validate_field("This is a long text", ValidationRule(max_length=10))
        assert error == "Must be no more than 10 characters"
        assert "10" in error
        assert validate_field("abcde", ValidationRule(max_length=5)) is None

    def test_pattern(self):
        rule = ValidationRule(pattern=VALIDATION_PATTERNS["email"])
        assert validate_field("invalid-email", rule) == "Invalid format"
        assert validate_field("valid@email.com", rule) is None

    def test_pattern_from_string_is_compiled(self):
        rule = ValidationRule(pattern=r"^\d{6}$")
        assert isinstance(rule.pattern, re.Pattern)
        assert validate_field("518000", rule) is None
        assert validate_field("51800", rule) == "Invalid format"

    def test_first_failure_wins(self):
        rule = ValidationRule(min_length=5, max_length=2, pattern=r"^x$")
        assert validate_field("abc", rule) == "Must be at least 5 characters"

    def test_numeric_bounds_ignored_for_strings(self):
        assert validate_field("3", ValidationRule(min=5)) is None


@pytest.mark.unit
class TestNumberChecks:

    def test_min_message_mentions_bound(self):
        error = validate_field(3, ValidationRule(min=5))
        assert error == "Must be at least 5"

    def test_min_and_max_are_inclusive(self):
        assert validate_field(10, ValidationRule(min=10)) is None
        assert validate_field(10, ValidationRule(max=10)) is None

    def test_max(self):
        assert validate_field(15, ValidationRule(max=10)) == "Must be no more than 10"

    def test_float_bounds(self):
        assert validate_field(0.2, ValidationRule(min=0.5)) == "Must be at least 0.5"
        assert validate_field(1.5, ValidationRule(min=0.5, max=2)) is None

    def test_string_checks_ignored_for_numbers(self):
        assert validate_field(12345, ValidationRule(max_length=2, pattern=r"^x$")) is None

    def test_bool_is_not_numeric(self):
        assert validate_field(True, ValidationRule(min=5)) is None


@pytest.mark.unit
class TestCustomCheck:

    @staticmethod
    def forbid(value):
        return "This value is not allowed" if value == "forbidden" else None

    def test_custom_message_returned(self):
        rule = ValidationRule(custom=self.forbid)
        assert validate_field("forbidden", rule) == "This value is not allowed"
        assert validate_field("allowed", rule) is None

    def test_custom_overrides_earlier_failure(self):
        rule = ValidationRule(min_length=20, custom=lambda v: None)
        assert validate_field("short", rule) is None

    def test_custom_runs_after_passing_checks(self):
        rule = ValidationRule(max=100, custom=lambda v: "odd" if v % 2 else None)
        assert validate_field(7, rule) == "odd"

    def test_unrecognized_types_reach_custom(self):
        rule = ValidationRule(min_length=3, min=1, custom=lambda v: "list" if isinstance(v, list) else None)
        assert validate_field(["a"], rule) == "list"
        assert validate_field(["a"], ValidationRule(min_length=3, min=10)) is None


@pytest.mark.unit
class TestValidationRule:

    def test_rule_is_immutable(self):
        rule = ValidationRule(required=True)
        with pytest.raises(ValidationError):
            rule.required = False

    def test_dict_rules_are_accepted(self):
        assert validate_field("ab", {"min_length": 3}) == "Must be at least 3 characters"


@pytest.mark.unit
class TestValidateForm:

    RULES = {
        "email": ValidationRule(required=True, pattern=VALIDATION_PATTERNS["email"]),
        "password": ValidationRule(required=True, min_length=6),
        "age": ValidationRule(required=True, min=18),
    }

    def test_collects_every_failure(self):
        result = validate_form({"email": "invalid-email", "password": "123", "age": 15}, self.RULES)

        assert result.is_valid is False
        assert result.errors == {
            "email": "Invalid format",
            "password": "Must be at least 6 characters",
            "age": "Must be at least 18",
        }

    def test_valid_form(self):
        result = validate_form(
            {"email": "user@example.com", "password": "password123", "age": 25},
            self.RULES,
        )
        assert result.is_valid is True
        assert result.errors == {}

    def test_missing_field_is_required_error(self):
        result = validate_form({}, {"email": ValidationRule(required=True)})
        assert result == ValidationResult(is_valid=False, errors={"email": "This field is required"})

    def test_email_pattern_only(self):
        result = validate_form({"email": "a@b.com"}, {"email": {"pattern": VALIDATION_PATTERNS["email"]}})
        assert result.is_valid is True
        assert result.errors == {}

    def test_extra_values_ignored(self):
        result = validate_form({"email": "a@b.com", "spam": "x" * 5000}, {"email": COMMON_RULES["email"]})
        assert result.is_valid is True

    def test_errors_follow_rule_order(self):
        rules = {"b": ValidationRule(required=True), "a": ValidationRule(required=True)}
        assert list(validate_form({}, rules).errors) == ["b", "a"]

    def test_repeat_calls_are_identical(self):
        values = {"email": "nope", "password": "123456", "age": 30}
        assert validate_form(values, self.RULES) == validate_form(values, self.RULES)
        assert validate_field("nope", self.RULES["email"]) == validate_field("nope", self.RULES["email"])


@pytest.mark.unit
class TestFormValidator:

    def test_validate_matches_validate_form(self):
        validator = FormValidator("signup", {"email": COMMON_RULES["email"]})
        assert validator.fields == ["email"]
        assert validator.validate({"email": "bad"}).errors == {"email": "Invalid format"}

    def test_validate_field_unknown_raises(self):
        validator = FormValidator("signup", {"email": COMMON_RULES["email"]})
        with pytest.raises(KeyError):
            validator.validate_field("phone", "123")
