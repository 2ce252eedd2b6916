"""Reference patterns and rule presets shared by every form on the site.

Patterns are searched (not fully matched) by the engine, so each one is
anchored explicitly. End anchors reject a trailing newline and digit
classes are ASCII-only.
"""

import re
from typing import Any, Optional

from ledforms.validators.models import ValidationRule

# ──────────────────────────────────────────────────────────────────────
# PATTERNS
# ──────────────────────────────────────────────────────────────────────

VALIDATION_PATTERNS: dict[str, re.Pattern] = {
    "email": re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+\Z"),
    "phone": re.compile(r"^[\+]?[1-9][0-9]{0,15}\Z"),
    "url": re.compile(r"^https?://.+"),
    "alphanumeric": re.compile(r"^[a-zA-Z0-9]+\Z"),
    "numeric": re.compile(r"^[0-9]+\Z"),
    "decimal": re.compile(r"^[0-9]*\.?[0-9]*\Z"),
}


# ──────────────────────────────────────────────────────────────────────
# RULE PRESETS
# ──────────────────────────────────────────────────────────────────────

COMMON_RULES: dict[str, ValidationRule] = {
    "email": ValidationRule(required=True, pattern=VALIDATION_PATTERNS["email"]),
    "phone": ValidationRule(pattern=VALIDATION_PATTERNS["phone"]),
    "required": ValidationRule(required=True),
    "url": ValidationRule(pattern=VALIDATION_PATTERNS["url"]),
}


# ──────────────────────────────────────────────────────────────────────
# NAMED CUSTOM CHECKS (referenced by name from JSON form schemas)
# ──────────────────────────────────────────────────────────────────────

_LINK_RE = re.compile(r"(https?://|www\.)", re.IGNORECASE)


def must_accept(value: Any) -> Optional[str]:
    """Checkbox-style consent: anything falsy is a refusal."""
    return None if value else "You must accept the terms and conditions"


def no_links(value: Any) -> Optional[str]:
    if isinstance(value, str) and _LINK_RE.search(value):
        return "Links are not allowed in this field"
    return None


CUSTOM_CHECKS = {
    "must_accept": must_accept,
    "no_links": no_links,
}
