"""Stand-alone helpers for validation, formatting, generation and call-rate control."""

from __future__ import annotations

from client_helpers.core.errors import AppError, ConfigurationAppError, ValidationAppError
from client_helpers.schemas.options import CouponOptions, DateRange, UploadOptions
from client_helpers.utils.call_rate import Debouncer, Throttler, debounce, throttle
from client_helpers.utils.currency import CURRENCY_SYMBOLS
from client_helpers.utils.dates import format_date_for_api, get_date_range
from client_helpers.utils.file_validators import (
    is_allowed_attachment_type,
    is_valid_image_type,
    validate_upload,
)
from client_helpers.utils.filters import build_filters
from client_helpers.utils.formatting import format_currency, format_phone_number
from client_helpers.utils.generators import (
    generate_coupon,
    generate_random_password,
    generate_uuid,
)
from client_helpers.utils.text import (
    capitalize_first_letter,
    mask_email,
    truncate,
    truncate_id,
    truncate_text,
)
from client_helpers.utils.validators import (
    is_valid_credit_card,
    is_valid_email,
    is_valid_ip_address,
    is_valid_password,
    is_valid_ssn,
    is_valid_url,
    is_valid_zip_code,
)

__all__ = [
    "AppError",
    "CURRENCY_SYMBOLS",
    "ConfigurationAppError",
    "CouponOptions",
    "DateRange",
    "Debouncer",
    "Throttler",
    "UploadOptions",
    "ValidationAppError",
    "build_filters",
    "capitalize_first_letter",
    "debounce",
    "format_currency",
    "format_date_for_api",
    "format_phone_number",
    "generate_coupon",
    "generate_random_password",
    "generate_uuid",
    "get_date_range",
    "is_allowed_attachment_type",
    "is_valid_credit_card",
    "is_valid_email",
    "is_valid_image_type",
    "is_valid_ip_address",
    "is_valid_password",
    "is_valid_ssn",
    "is_valid_url",
    "is_valid_zip_code",
    "mask_email",
    "throttle",
    "truncate",
    "truncate_id",
    "truncate_text",
    "validate_upload",
]
