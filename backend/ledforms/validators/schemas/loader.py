"""Form schema loader — reads JSON form definitions and builds ValidationRules.

Each JSON file describes one form: its name, display name and a mapping of
field → rule. In a rule, "pattern" is either a key of VALIDATION_PATTERNS or
a raw regular expression, and "custom" is a key of CUSTOM_CHECKS.
"""

import json
import re
from pathlib import Path
from typing import Optional

import structlog

from ledforms.validators.engine import validate_field
from ledforms.validators.models import CustomCheck, ValidationRule
from ledforms.validators.patterns import CUSTOM_CHECKS, VALIDATION_PATTERNS

logger = structlog.get_logger()

SCHEMAS_DIR = Path(__file__).parent

# Cache loaded schema files to avoid re-reading from disk
_schema_cache: dict[str, dict] = {}


def _load_all_schemas() -> dict[str, dict]:
    """Load and cache all JSON schema files from the schemas directory."""
    if _schema_cache:
        return _schema_cache

    for json_file in sorted(SCHEMAS_DIR.glob("*.json")):
        try:
            data = json.loads(json_file.read_text(encoding="utf-8"))
            form_name = data.get("form", json_file.stem)
            _schema_cache[form_name] = data
        except (OSError, ValueError, AttributeError) as e:
            logger.warning("form_schema_skipped", file=json_file.name, error=str(e))
            continue

    return _schema_cache


_CONSTRAINT_KEYS = ("min_length", "max_length", "pattern", "min", "max")


def _with_constraints(check: CustomCheck, constraints: ValidationRule) -> CustomCheck:
    """Run the rule's own constraints before a named check.

    The engine lets a custom check override every other constraint, so a
    named check sharing a rule with length, pattern or bound constraints
    must report their failures itself.
    """

    def check_with_constraints(value):
        return validate_field(value, constraints) or check(value)

    return check_with_constraints


def build_rule(spec: dict) -> ValidationRule:
    """Turn a JSON rule spec into a ValidationRule.

    Raises:
        ValueError: If the custom check name is unknown or the regex is invalid
    """
    fields = dict(spec)

    pattern = fields.get("pattern")
    if isinstance(pattern, str):
        if pattern in VALIDATION_PATTERNS:
            fields["pattern"] = VALIDATION_PATTERNS[pattern]
        else:
            try:
                fields["pattern"] = re.compile(pattern)
            except re.error as e:
                raise ValueError(f"Invalid pattern '{pattern}': {e}") from e

    custom = fields.get("custom")
    if isinstance(custom, str):
        if custom not in CUSTOM_CHECKS:
            raise ValueError(
                f"Unknown custom check '{custom}'. "
                f"Use one of: {', '.join(sorted(CUSTOM_CHECKS))}"
            )
        check = CUSTOM_CHECKS[custom]

        constraints = {key: fields[key] for key in _CONSTRAINT_KEYS if fields.get(key) is not None}
        if constraints:
            check = _with_constraints(check, ValidationRule(**constraints))
        fields["custom"] = check

    return ValidationRule(**fields)


def load_form_schema(form_name: str) -> Optional[dict]:
    """Load a form's raw schema definition by name.

    Args:
        form_name: Form identifier (e.g., "contact", "inquiry")

    Returns:
        Schema dict, or None if not found
    """
    return _load_all_schemas().get(form_name)


def get_form_rules(form_name: str) -> Optional[dict[str, ValidationRule]]:
    """Build the field → ValidationRule mapping for a form, in file order."""
    schema = load_form_schema(form_name)
    if schema is None:
        return None

    return {
        field: build_rule(spec)
        for field, spec in schema.get("fields", {}).items()
    }


def get_all_forms() -> list[str]:
    """List all available form schema names."""
    return list(_load_all_schemas().keys())
