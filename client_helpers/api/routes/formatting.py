from __future__ import annotations

from fastapi import APIRouter, Query

from client_helpers.schemas.api import (
    CurrencyResponse,
    MaskEmailRequest,
    PhoneRequest,
    TextResponse,
    TruncateRequest,
)
from client_helpers.schemas.options import DateRange
from client_helpers.utils.currency import CURRENCY_SYMBOLS
from client_helpers.utils.dates import get_date_range
from client_helpers.utils.formatting import format_currency, format_phone_number
from client_helpers.utils.text import mask_email, truncate

router = APIRouter(tags=["Formatting"])


@router.post("/text/truncate", response_model=TextResponse)
def truncate_value(payload: TruncateRequest) -> TextResponse:
    """Shorten text in the middle or at the end."""
    return TextResponse(
        result=truncate(
            payload.text,
            start_length=payload.start_length,
            end_length=payload.end_length,
            append_text=payload.append_text,
            append_position=payload.append_position,
        )
    )


@router.post("/text/mask-email", response_model=TextResponse)
def mask_email_value(payload: MaskEmailRequest) -> TextResponse:
    """Mask the local part of an email address."""
    return TextResponse(
        result=mask_email(
            payload.email,
            visible_start_chars=payload.visible_start_chars,
            visible_end_chars=payload.visible_end_chars,
        )
    )


@router.post("/format/phone", response_model=TextResponse)
def format_phone(payload: PhoneRequest) -> TextResponse:
    """Format a phone number; unrecognised shapes are returned unchanged."""
    return TextResponse(result=format_phone_number(payload.phone_number))


@router.get("/format/currency/{code}", response_model=CurrencyResponse)
def currency_symbol(code: str) -> CurrencyResponse:
    """Look up a currency symbol. Unknown codes are not an error."""
    return CurrencyResponse(
        code=code,
        symbol=format_currency(code),
        known=code in CURRENCY_SYMBOLS,
    )


@router.get("/format/date-range", response_model=DateRange)
def date_range(
    filter_days: int = Query(1, alias="filter", description="1 daily, 7 weekly, 30 monthly"),
) -> DateRange:
    """Return the report window for a filter, based on server local time."""
    return get_date_range(filter_days)
