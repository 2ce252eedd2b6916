"""Forms API — list schemas and validate submissions server-side."""

from fastapi import APIRouter, HTTPException, Request

import structlog

from ledforms.models.requests import ValidateFieldRequest, ValidateFormRequest
from ledforms.models.responses import (
    FieldErrorResponse,
    FormSchemaDetail,
    FormSchemaSummary,
)
from ledforms.services.rate_limiter import rate_limiter
from ledforms.validators import FormValidator, ValidationResult
from ledforms.validators.schemas import get_all_forms, get_form_rules, load_form_schema

logger = structlog.get_logger()

router = APIRouter()


def _summary(name: str, schema: dict) -> dict:
    return {
        "name": name,
        "display_name": schema.get("display_name", name),
        "description": schema.get("description", ""),
        "fields": list(schema.get("fields", {})),
    }


def _get_validator(form_name: str) -> FormValidator:
    rules = get_form_rules(form_name)
    if rules is None:
        raise HTTPException(status_code=404, detail=f"Form {form_name} not found")
    return FormValidator(form_name, rules)


def _check_rate_limit(request: Request) -> None:
    client_ip = request.client.host if request.client else "unknown"
    if not rate_limiter.allow_request(client_ip):
        logger.warning("rate_limited", client_ip=client_ip, path=request.url.path)
        raise HTTPException(
            status_code=429,
            detail={
                "error": "Rate limit exceeded",
                "message": (
                    f"Maximum {rate_limiter.max_tokens} submissions per "
                    f"{rate_limiter.refill_seconds} seconds. Try again later."
                ),
                "remaining": rate_limiter.remaining(client_ip),
                "retry_after_seconds": int(rate_limiter.reset_time(client_ip)),
            },
        )


# ─── Endpoints ───


@router.get("/forms", response_model=list[FormSchemaSummary])
async def list_forms():
    """List every form that can be validated."""
    return [_summary(name, load_form_schema(name)) for name in get_all_forms()]


@router.get("/forms/{form_name}", response_model=FormSchemaDetail)
async def get_form(form_name: str):
    """Describe one form and its raw field rules."""
    schema = load_form_schema(form_name)
    if schema is None:
        raise HTTPException(status_code=404, detail=f"Form {form_name} not found")

    return {**_summary(form_name, schema), "rules": schema.get("fields", {})}


@router.post("/forms/{form_name}/validate", response_model=ValidationResult)
async def validate_submission(
    form_name: str,
    request_body: ValidateFormRequest,
    request: Request,
):
    """Validate a full submission; errors are keyed by field name."""
    validator = _get_validator(form_name)
    _check_rate_limit(request)

    return validator.validate(request_body.values)


@router.post("/forms/{form_name}/fields", response_model=FieldErrorResponse)
async def validate_single_field(form_name: str, request_body: ValidateFieldRequest):
    """Validate one field as the user leaves it."""
    validator = _get_validator(form_name)

    if request_body.field not in validator.rules:
        raise HTTPException(
            status_code=404,
            detail=f"Form {form_name} has no field {request_body.field}",
        )

    return FieldErrorResponse(
        field=request_body.field,
        error=validator.validate_field(request_body.field, request_body.value),
    )
