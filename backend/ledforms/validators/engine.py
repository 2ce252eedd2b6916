"""Validation Engine — checks field values against rules and aggregates per form.

validate_field() and validate_form() are pure: same input → same output,
nothing is retained between calls.

Usage:
    result = validate_form(values, {"email": COMMON_RULES["email"]})
    if not result.is_valid:
        # Render result.errors next to each field
"""

import time
from typing import Any, Mapping, Optional, Union

import structlog

from ledforms.validators.models import ValidationResult, ValidationRule

logger = structlog.get_logger()

REQUIRED_MESSAGE = "This field is required"
INVALID_FORMAT_MESSAGE = "Invalid format"

RuleLike = Union[ValidationRule, Mapping[str, Any]]


def is_missing(value: Any) -> bool:
    """None, or a string that is empty once whitespace is stripped."""
    if value is None:
        return True
    return isinstance(value, str) and value.strip() == ""


def _is_number(value: Any) -> bool:
    # bool is an int subclass but is not a numeric field value
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _check_string(value: str, rule: ValidationRule) -> Optional[str]:
    if rule.min_length and len(value) < rule.min_length:
        return f"Must be at least {rule.min_length} characters"

    if rule.max_length and len(value) > rule.max_length:
        return f"Must be no more than {rule.max_length} characters"

    if rule.pattern is not None and not rule.pattern.search(value):
        return INVALID_FORMAT_MESSAGE

    return None


def _check_number(value: Union[int, float], rule: ValidationRule) -> Optional[str]:
    if rule.min is not None and value < rule.min:
        return f"Must be at least {rule.min}"

    if rule.max is not None and value > rule.max:
        return f"Must be no more than {rule.max}"

    return None


def _coerce_rule(rule: RuleLike) -> ValidationRule:
    if isinstance(rule, ValidationRule):
        return rule
    return ValidationRule.model_validate(rule)


def validate_field(value: Any, rule: RuleLike) -> Optional[str]:
    """Validate one value against one rule.

    Args:
        value: Submitted value (str, number, None or anything else)
        rule: ValidationRule, or a dict of its fields

    Returns:
        Error message, or None when the value passes
    """
    rule = _coerce_rule(rule)

    if is_missing(value):
        # Optional empty fields skip every other check, custom included
        return REQUIRED_MESSAGE if rule.required else None

    error = None
    if isinstance(value, str):
        error = _check_string(value, rule)
    elif _is_number(value):
        error = _check_number(value, rule)

    # Custom check overrides whatever the type-specific checks concluded
    if rule.custom is not None:
        return rule.custom(value)

    return error


def validate_form(
    values: Mapping[str, Any],
    rules: Mapping[str, RuleLike],
) -> ValidationResult:
    """Validate every field named in rules, in rules order.

    Keys of values without a rule are ignored; ruled fields absent from
    values are validated as None.
    """
    errors: dict[str, str] = {}

    for field_name, rule in rules.items():
        error = validate_field(values.get(field_name), rule)
        if error:
            errors[field_name] = error

    return ValidationResult.build(errors)


class FormValidator:
    """Validates submissions for one named form schema and logs each run."""

    def __init__(self, name: str, rules: Mapping[str, RuleLike]):
        self.name = name
        self.rules = {field: _coerce_rule(rule) for field, rule in rules.items()}

    @property
    def fields(self) -> list[str]:
        return list(self.rules)

    def validate(self, values: Mapping[str, Any]) -> ValidationResult:
        start_time = time.perf_counter()

        result = validate_form(values, self.rules)

        logger.info(
            "form_validated",
            form=self.name,
            is_valid=result.is_valid,
            failed_fields=list(result.errors),
            duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
        )

        return result

    def validate_field(self, field_name: str, value: Any) -> Optional[str]:
        """Validate a single field of this form (e.g. on blur).

        Raises:
            KeyError: If the form has no rule for field_name
        """
        return validate_field(value, self.rules[field_name])
