"""Validation models — field rules and form-level results.

A ValidationRule is passive configuration: every constraint is optional and
absence means "no constraint of this kind".
"""

import re
from typing import Any, Callable, Optional, Union

from pydantic import BaseModel, Field

Number = Union[int, float]
CustomCheck = Callable[[Any], Optional[str]]


class ValidationRule(BaseModel):
    """Constraints for a single form field."""

    required: Optional[bool] = None
    min_length: Optional[int] = None   # str values only
    max_length: Optional[int] = None   # str values only
    pattern: Optional[re.Pattern] = None  # str values only, compiled from str
    min: Optional[Number] = None       # numeric values only
    max: Optional[Number] = None       # numeric values only
    custom: Optional[CustomCheck] = None  # always has the final say

    model_config = {"frozen": True}


class ValidationResult(BaseModel):
    """Outcome of validating a whole form."""

    is_valid: bool
    errors: dict[str, str] = Field(default_factory=dict)

    @classmethod
    def build(cls, errors: dict[str, str]) -> "ValidationResult":
        """Build a result whose validity is derived from the errors."""
        return cls(is_valid=len(errors) == 0, errors=dict(errors))


class ValidationState(BaseModel):
    """Result of evaluating a composable validator schema."""

    is_valid: bool
    errors: dict[str, str] = Field(default_factory=dict)
    touched: dict[str, bool] = Field(default_factory=dict)
