"""Composable validators — small single-purpose checks that chain together.

Each factory returns a Validator: a callable taking the field value and,
optionally, all form values, returning an error message or None. Every
factory except required() lets empty values through.

Usage:
    schema = {"email": COMMON_VALIDATIONS["email"]}
    state = validate_schema(values, schema)
"""

import re
from datetime import date as date_type, datetime
from typing import Any, Callable, Mapping, Optional, Union

from ledforms.validators.models import ValidationState

FormValues = Optional[Mapping[str, Any]]
Validator = Callable[..., Optional[str]]

_EMAIL_RE = re.compile(r"^[A-Z0-9._%+-]+@[A-Z0-9.-]+\.[A-Z]{2,}\Z", re.IGNORECASE)
_PHONE_RE = re.compile(r"^[\+]?[1-9][0-9]{0,15}\Z")
_PHONE_NOISE_RE = re.compile(r"[\s\-\(\)]")
_URL_RE = re.compile(r"^https?://.+\..+")
_PASSWORD_RE = re.compile(
    r"^(?=.*[a-z])(?=.*[A-Z])(?=.*[0-9])(?=.*[@$!%*?&])[A-Za-z0-9@$!%*?&]{8,}\Z"
)


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, (str, list, tuple, dict, set)):
        return len(value) == 0
    return False


def _length(value: Any) -> Optional[int]:
    return len(value) if hasattr(value, "__len__") else None


def _to_float(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _to_datetime(value: Any) -> Optional[datetime]:
    if isinstance(value, datetime):
        return value
    if isinstance(value, date_type):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value.strip())
        except ValueError:
            return None
    return None


def _now_for(moment: datetime) -> datetime:
    return datetime.now(moment.tzinfo) if moment.tzinfo else datetime.now()


# ── Factories ──


def required(message: str = "This field is required") -> Validator:
    def check(value: Any, form_values: FormValues = None) -> Optional[str]:
        return message if _is_empty(value) else None

    return check


def min_length(length: int, message: Optional[str] = None) -> Validator:
    def check(value: Any, form_values: FormValues = None) -> Optional[str]:
        size = None if _is_empty(value) else _length(value)
        if size is not None and size < length:
            return message or f"Must be at least {length} characters"
        return None

    return check


def max_length(length: int, message: Optional[str] = None) -> Validator:
    def check(value: Any, form_values: FormValues = None) -> Optional[str]:
        size = None if _is_empty(value) else _length(value)
        if size is not None and size > length:
            return message or f"Must be no more than {length} characters"
        return None

    return check


def email(message: str = "Please enter a valid email address") -> Validator:
    def check(value: Any, form_values: FormValues = None) -> Optional[str]:
        if not _is_empty(value) and not _EMAIL_RE.search(str(value)):
            return message
        return None

    return check


def phone(message: str = "Please enter a valid phone number") -> Validator:
    def check(value: Any, form_values: FormValues = None) -> Optional[str]:
        if _is_empty(value):
            return None
        if not _PHONE_RE.search(_PHONE_NOISE_RE.sub("", str(value))):
            return message
        return None

    return check


def url(message: str = "Please enter a valid URL") -> Validator:
    def check(value: Any, form_values: FormValues = None) -> Optional[str]:
        if not _is_empty(value) and not _URL_RE.search(str(value)):
            return message
        return None

    return check


def number(message: str = "Please enter a valid number") -> Validator:
    def check(value: Any, form_values: FormValues = None) -> Optional[str]:
        if not _is_empty(value) and _to_float(value) is None:
            return message
        return None

    return check


def min_value(minimum: float, message: Optional[str] = None) -> Validator:
    def check(value: Any, form_values: FormValues = None) -> Optional[str]:
        parsed = None if _is_empty(value) else _to_float(value)
        if parsed is not None and parsed < minimum:
            return message or f"Must be at least {minimum}"
        return None

    return check


def max_value(maximum: float, message: Optional[str] = None) -> Validator:
    def check(value: Any, form_values: FormValues = None) -> Optional[str]:
        parsed = None if _is_empty(value) else _to_float(value)
        if parsed is not None and parsed > maximum:
            return message or f"Must be no more than {maximum}"
        return None

    return check


def pattern(regex: Union[re.Pattern, str], message: str = "Invalid format") -> Validator:
    compiled = re.compile(regex) if isinstance(regex, str) else regex

    def check(value: Any, form_values: FormValues = None) -> Optional[str]:
        if not _is_empty(value) and not compiled.search(str(value)):
            return message
        return None

    return check


def password(
    message: str = (
        "Password must contain at least 8 characters, including uppercase, "
        "lowercase, number and special character"
    ),
) -> Validator:
    def check(value: Any, form_values: FormValues = None) -> Optional[str]:
        if not _is_empty(value) and not _PASSWORD_RE.search(str(value)):
            return message
        return None

    return check


def confirm_password(password_field: str, message: str = "Passwords do not match") -> Validator:
    def check(value: Any, form_values: FormValues = None) -> Optional[str]:
        if _is_empty(value) or form_values is None:
            return None
        if value != form_values.get(password_field):
            return message
        return None

    return check


def date(message: str = "Please enter a valid date") -> Validator:
    def check(value: Any, form_values: FormValues = None) -> Optional[str]:
        if not _is_empty(value) and _to_datetime(value) is None:
            return message
        return None

    return check


def future_date(message: str = "Date must be in the future") -> Validator:
    def check(value: Any, form_values: FormValues = None) -> Optional[str]:
        moment = None if _is_empty(value) else _to_datetime(value)
        if moment is not None and moment <= _now_for(moment):
            return message
        return None

    return check


def past_date(message: str = "Date must be in the past") -> Validator:
    def check(value: Any, form_values: FormValues = None) -> Optional[str]:
        moment = None if _is_empty(value) else _to_datetime(value)
        if moment is not None and moment >= _now_for(moment):
            return message
        return None

    return check


# ── Combinators ──


def combine_validators(*validators: Validator) -> Validator:
    """Run validators in order and return the first failure."""

    def check(value: Any, form_values: FormValues = None) -> Optional[str]:
        for validator in validators:
            error = validator(value, form_values)
            if error:
                return error
        return None

    return check


def conditional_validator(
    condition: Callable[[FormValues], bool],
    validator: Validator,
) -> Validator:
    """Apply validator only when condition(form_values) holds."""

    def check(value: Any, form_values: FormValues = None) -> Optional[str]:
        if condition(form_values):
            return validator(value, form_values)
        return None

    return check


COMMON_VALIDATIONS: dict[str, Validator] = {
    "username": combine_validators(
        required(),
        min_length(3),
        max_length(20),
        pattern(r"^[a-zA-Z0-9_]+\Z", "Username can only contain letters, numbers and underscores"),
    ),
    "email": combine_validators(required(), email()),
    "password": combine_validators(required(), password()),
    "name": combine_validators(
        required(),
        min_length(2),
        max_length(50),
        pattern(r"^[a-zA-Z\s\u4e00-\u9fa5]+\Z", "Name can only contain letters and spaces"),
    ),
    "company_name": combine_validators(required(), min_length(2), max_length(100)),
    "phone": combine_validators(required(), phone()),
    "website": combine_validators(url()),
    "inquiry_message": combine_validators(required(), min_length(10), max_length(1000)),
    "quantity": combine_validators(required(), number(), min_value(1)),
    "budget": combine_validators(number(), min_value(0)),
}


def validate_schema(
    values: Mapping[str, Any],
    schema: Mapping[str, Validator],
    touched: Optional[Mapping[str, bool]] = None,
) -> ValidationState:
    """Evaluate every validator in schema against values.

    Each validator also receives the full values mapping, so cross-field
    checks such as confirm_password() work.
    """
    errors: dict[str, str] = {}

    for field_name, validator in schema.items():
        error = validator(values.get(field_name), values)
        if error:
            errors[field_name] = error

    return ValidationState(
        is_valid=len(errors) == 0,
        errors=errors,
        touched=dict(touched or {}),
    )
