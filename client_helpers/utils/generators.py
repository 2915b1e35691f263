"""Random identifier and secret generators.

Randomness comes from ``secrets`` (coupon, password) and ``uuid.uuid4``.
"""

from __future__ import annotations

import logging
import re
import secrets
import string
import uuid

from client_helpers.core.errors import ConfigurationAppError
from client_helpers.schemas.options import CouponOptions

logger = logging.getLogger(__name__)

COUPON_SPECIAL_CHARS = "!@#$%^&*()_+-=[]{}|;:,.<>?"

PASSWORD_SYMBOLS = "!@#$%&*?"
PASSWORD_CHARSET = (
    string.ascii_lowercase + string.ascii_uppercase + string.digits + PASSWORD_SYMBOLS
)

_random = secrets.SystemRandom()
_WHITESPACE = re.compile(r"\s+")


def generate_uuid() -> str:
    """Return a random (version 4) UUID as 36 lowercase hex characters."""
    return str(uuid.uuid4())


def coupon_alphabet(options: CouponOptions) -> str:
    """Return the union of the character classes selected by ``options``."""
    alphabet = ""
    if options.include_numbers:
        alphabet += string.digits
    if options.include_uppercase:
        alphabet += string.ascii_uppercase
    if options.include_lowercase:
        alphabet += string.ascii_lowercase
    if options.include_special_chars:
        alphabet += COUPON_SPECIAL_CHARS
    return alphabet


def generate_coupon(options: CouponOptions | None = None) -> str:
    """Generate a coupon code ``prefix + body + suffix``.

    The body is ``options.length`` characters drawn uniformly from the
    selected classes. Whitespace is stripped from the final code, including
    any inside the prefix or suffix.

    Args:
        options: Coupon policy; defaults to 8 digits/uppercase characters.

    Returns:
        The generated coupon code.

    Raises:
        ConfigurationAppError: If no character class is selected.
    """
    options = options or CouponOptions()
    alphabet = coupon_alphabet(options)
    if not alphabet:
        logger.warning("coupon.config_invalid", extra={"reason": "no_character_class_selected"})
        raise ConfigurationAppError(
            code="no_character_class_selected",
            message="At least one character type must be included",
            details={"hint": "Enable numbers, uppercase, lowercase or special characters."},
        )

    body = "".join(secrets.choice(alphabet) for _ in range(options.length))
    return _WHITESPACE.sub("", f"{options.prefix}{body}{options.suffix}")


def generate_random_password(length: int = 6) -> str:
    """Generate a password with at least one character of each class.

    One lowercase letter, uppercase letter, digit and symbol (``!@#$%&*?``)
    are always present, so passwords shorter than 4 are never produced: any
    ``length`` below 4 still yields 4 characters.

    Args:
        length: Desired length (default 6).

    Returns:
        The shuffled password.
    """
    chars = [
        secrets.choice(string.ascii_lowercase),
        secrets.choice(string.ascii_uppercase),
        secrets.choice(string.digits),
        secrets.choice(PASSWORD_SYMBOLS),
    ]
    while len(chars) < length:
        chars.append(secrets.choice(PASSWORD_CHARSET))

    _random.shuffle(chars)
    return "".join(chars)
