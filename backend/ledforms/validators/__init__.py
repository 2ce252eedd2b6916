"""Form validation — declarative field rules, form aggregation and formatters.

Usage:
    from ledforms.validators import validate_form, COMMON_RULES

    result = validate_form(values, {"email": COMMON_RULES["email"]})
    if not result.is_valid:
        # Show result.errors next to each field
"""

from ledforms.validators.engine import FormValidator, validate_field, validate_form
from ledforms.validators.formatters import format_currency, format_phone_number, parse_number
from ledforms.validators.models import ValidationResult, ValidationRule, ValidationState
from ledforms.validators.patterns import COMMON_RULES, CUSTOM_CHECKS, VALIDATION_PATTERNS

__all__ = [
    "FormValidator",
    "validate_field",
    "validate_form",
    "format_currency",
    "format_phone_number",
    "parse_number",
    "ValidationResult",
    "ValidationRule",
    "ValidationState",
    "COMMON_RULES",
    "CUSTOM_CHECKS",
    "VALIDATION_PATTERNS",
]
