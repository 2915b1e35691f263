from __future__ import annotations

import logging

from fastapi import APIRouter

from client_helpers.core.config import settings
from client_helpers.schemas.api import GeneratedValueResponse, PasswordRequest
from client_helpers.schemas.options import CouponOptions
from client_helpers.utils.generators import (
    generate_coupon,
    generate_random_password,
    generate_uuid,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/generate", tags=["Generation"])


@router.get("/uuid", response_model=GeneratedValueResponse)
def new_uuid() -> GeneratedValueResponse:
    """Return a random version 4 UUID."""
    return GeneratedValueResponse(value=generate_uuid())


@router.post("/coupon", response_model=GeneratedValueResponse)
def new_coupon(options: CouponOptions) -> GeneratedValueResponse:
    """Generate a coupon code from the given policy.

    When ``length`` is omitted the configured default length is used.
    Selecting no character class is answered with HTTP 400
    (``no_character_class_selected``) by the global error handler.
    """
    if "length" not in options.model_fields_set:
        options = options.model_copy(update={"length": settings.helpers.coupon_length})

    coupon = generate_coupon(options)
    logger.info("coupon.generated", extra={"length": len(coupon)})
    return GeneratedValueResponse(value=coupon)


@router.post("/password", response_model=GeneratedValueResponse)
def new_password(payload: PasswordRequest) -> GeneratedValueResponse:
    """Generate a random password containing every character class."""
    length = payload.length or settings.helpers.password_length
    return GeneratedValueResponse(value=generate_random_password(length))
