"""Formatting API — display helpers shared with the page layer."""

from typing import Optional

from fastapi import APIRouter, Query

from ledforms.config import get_settings
from ledforms.models.requests import TextValueRequest
from ledforms.models.responses import FormattedResponse, ParsedNumberResponse
from ledforms.validators import format_currency, format_phone_number, parse_number

router = APIRouter()


@router.post("/format/phone", response_model=FormattedResponse)
async def format_phone(request_body: TextValueRequest):
    return FormattedResponse(formatted=format_phone_number(request_body.value))


@router.get("/format/currency", response_model=FormattedResponse)
async def format_amount(
    value: float,
    locale: Optional[str] = Query(default=None, max_length=10),
    currency: Optional[str] = Query(default=None, min_length=3, max_length=3),
):
    """Format an amount for display, e.g. 1234.56 → "$1,234.56"."""
    return FormattedResponse(
        formatted=format_currency(
            value,
            locale=locale or get_settings().DEFAULT_LOCALE,
            currency=currency,
        )
    )


@router.post("/parse/number", response_model=ParsedNumberResponse)
async def parse_amount(request_body: TextValueRequest):
    return ParsedNumberResponse(value=parse_number(request_body.value))
