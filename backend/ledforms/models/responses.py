"""API response models."""

from pydantic import BaseModel
from typing import Optional, Literal


class FieldErrorResponse(BaseModel):
    """Outcome of validating a single field."""

    field: str
    error: Optional[str] = None


class FormSchemaSummary(BaseModel):
    """A form available for validation."""

    name: str
    display_name: str
    description: str = ""
    fields: list[str]


class FormSchemaDetail(FormSchemaSummary):
    """A form with its raw field rules as defined in the schema file."""

    rules: dict[str, dict]


class FormattedResponse(BaseModel):
    """Result of a formatting helper."""

    formatted: str


class ParsedNumberResponse(BaseModel):
    """Result of parsing a numeric string; value is null when rejected."""

    value: Optional[float] = None


class HealthResponse(BaseModel):
    """System health check response."""

    status: Literal["healthy", "unhealthy", "degraded"]
    version: str = "1.0.0"
    uptime_seconds: float
    forms_loaded: int
