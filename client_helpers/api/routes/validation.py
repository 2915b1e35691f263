from __future__ import annotations

from typing import Callable

from fastapi import APIRouter

from client_helpers.core.config import settings
from client_helpers.schemas.api import ValidateRequest, ValidateResponse, ValidatorKind
from client_helpers.utils.validators import (
    is_valid_credit_card,
    is_valid_email,
    is_valid_ip_address,
    is_valid_password,
    is_valid_ssn,
    is_valid_url,
    is_valid_zip_code,
)

router = APIRouter(prefix="/validate", tags=["Validation"])

_VALIDATORS: dict[ValidatorKind, Callable[[str], bool]] = {
    ValidatorKind.EMAIL: is_valid_email,
    ValidatorKind.URL: is_valid_url,
    ValidatorKind.IP: is_valid_ip_address,
    ValidatorKind.CREDIT_CARD: is_valid_credit_card,
    ValidatorKind.SSN: is_valid_ssn,
    ValidatorKind.ZIP: is_valid_zip_code,
}


@router.post("/{kind}", response_model=ValidateResponse)
def validate_value(kind: ValidatorKind, payload: ValidateRequest) -> ValidateResponse:
    """Validate a value with the named validator.

    Invalid input is a normal outcome (``valid: false``, HTTP 200), never an
    error. ``min_length`` only applies to ``password``.
    """
    if kind is ValidatorKind.PASSWORD:
        min_length = payload.min_length or settings.helpers.password_min_length
        valid = is_valid_password(payload.value, min_length)
    else:
        valid = _VALIDATORS[kind](payload.value)

    return ValidateResponse(kind=kind, valid=valid)
