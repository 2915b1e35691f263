"""Display formatting for phone numbers and currency codes.

Formatters never raise: input they don't recognise is passed through or
mapped to an empty string.
"""

from __future__ import annotations

import logging
import re

from client_helpers.utils.currency import CURRENCY_SYMBOLS

logger = logging.getLogger(__name__)

_NON_DIGITS = re.compile(r"[^0-9]")


def format_phone_number(phone_number: str) -> str:
    """Format a phone number by its digit count.

    - 10 digits: ``(123) 456-7890``
    - 11 digits starting with 1: ``+1 (123) 456-7890``
    - 12 digits starting with 91: ``+91 98765 43210``

    Anything else is returned exactly as given.
    """
    digits = _NON_DIGITS.sub("", phone_number)

    if len(digits) == 10:
        return f"({digits[:3]}) {digits[3:6]}-{digits[6:]}"
    if len(digits) == 11 and digits.startswith("1"):
        return f"+1 ({digits[1:4]}) {digits[4:7]}-{digits[7:]}"
    if len(digits) == 12 and digits.startswith("91"):
        return f"+91 {digits[2:7]} {digits[7:]}"

    return phone_number


def format_currency(currency: str) -> str:
    """Return the display symbol for an ISO currency code.

    Args:
        currency: Upper-case ISO 4217 code such as ``USD``.

    Returns:
        The symbol (``$``, ``€``, ...) or ``""`` for unknown codes.
    """
    symbol = CURRENCY_SYMBOLS.get(currency)
    if symbol is None:
        logger.warning("currency.unknown_code", extra={"currency": currency})
        return ""
    return symbol
