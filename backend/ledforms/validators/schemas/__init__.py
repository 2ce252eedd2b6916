"""Form schemas — JSON-based field rules for each form on the site."""

from ledforms.validators.schemas.loader import (
    build_rule,
    get_all_forms,
    get_form_rules,
    load_form_schema,
)

__all__ = ["build_rule", "get_all_forms", "get_form_rules", "load_form_schema"]
