"""Pydantic request/response schemas for the helper HTTP endpoints."""

from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel, Field


class ValidatorKind(str, Enum):
    """Validators reachable through /validate/{kind}."""

    EMAIL = "email"
    URL = "url"
    IP = "ip"
    CREDIT_CARD = "credit-card"
    SSN = "ssn"
    ZIP = "zip"
    PASSWORD = "password"


class ValidateRequest(BaseModel):
    """Value to check against one of the validators."""

    value: str = Field(..., description="Raw user input to validate.")
    min_length: int | None = Field(
        default=None,
        ge=1,
        description="Password minimum length; server default when omitted.",
    )


class ValidateResponse(BaseModel):
    """Outcome of a validation call (the input is never echoed back)."""

    kind: ValidatorKind
    valid: bool


class GeneratedValueResponse(BaseModel):
    """A freshly generated identifier, coupon or password."""

    value: str


class PasswordRequest(BaseModel):
    """Parameters for random password generation."""

    length: int | None = Field(
        default=None,
        ge=1,
        le=256,
        description="Desired length; server default when omitted. Minimum effective length is 4.",
    )


class TruncateRequest(BaseModel):
    """Parameters for the configurable truncation helper."""

    text: str
    start_length: int = Field(3, ge=0)
    end_length: int = Field(4, ge=0)
    append_text: str = "..."
    append_position: Literal["center", "end"] = "center"


class MaskEmailRequest(BaseModel):
    """Parameters for email masking."""

    email: str
    visible_start_chars: int = Field(2, ge=0)
    visible_end_chars: int = Field(1, ge=0)


class PhoneRequest(BaseModel):
    """Phone number to format."""

    phone_number: str


class TextResponse(BaseModel):
    """Single transformed string."""

    result: str


class CurrencyResponse(BaseModel):
    """Currency symbol lookup result; ``symbol`` is empty for unknown codes."""

    code: str
    symbol: str
    known: bool
