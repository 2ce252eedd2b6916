"""API request models."""

from typing import Any

from pydantic import BaseModel, Field


class ValidateFormRequest(BaseModel):
    """Submitted form values, keyed by field name."""

    values: dict[str, Any] = Field(
        default_factory=dict,
        description="Field values as entered by the user",
        examples=[{"email": "buyer@example.com", "message": "Need a 4x3m outdoor screen"}],
    )


class ValidateFieldRequest(BaseModel):
    """A single field value checked on blur."""

    field: str = Field(..., min_length=1)
    value: Any = None


class TextValueRequest(BaseModel):
    """Raw text to format or parse."""

    value: str = Field(..., max_length=100)
