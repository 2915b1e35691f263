"""Format validators for user-supplied strings.

Every validator is a pure predicate: it returns ``False`` for bad input and
never raises. The grammars are the permissive ones client forms use (not
full RFC 5322 for email, for instance).

Patterns are matched with ``fullmatch`` so a trailing newline never slips
through the way it would with ``re.match`` and ``$``.
"""

from __future__ import annotations

import logging
import re

from pydantic import AnyUrl, TypeAdapter, ValidationError

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")

ZIP_CODE_PATTERN = re.compile(r"[0-9]{5}(-[0-9]{4})?")

# Area 000, 666 and 900-999, group 00 and serial 0000 are never issued
SSN_PATTERN = re.compile(r"(?!000|666|9[0-9]{2})[0-9]{3}(?!00)[0-9]{2}(?!0000)[0-9]{4}")

CARD_NUMBER_PATTERN = re.compile(r"[0-9]{13,19}")

PASSWORD_SPECIAL_CHARS = "@$!%*?&"

_OCTET = r"(25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)"
IPV4_PATTERN = re.compile(rf"{_OCTET}\.{_OCTET}\.{_OCTET}\.{_OCTET}")

_H16 = r"[0-9a-fA-F]{1,4}"
_LOOSE_V4 = r"(([0-9]{1,3}\.){3,3}[0-9]{1,3})"
IPV6_PATTERN = re.compile(
    "("
    rf"({_H16}:){{7,7}}{_H16}"
    rf"|({_H16}:){{1,7}}:"
    rf"|({_H16}:){{1,6}}:{_H16}"
    rf"|({_H16}:){{1,5}}(:{_H16}){{1,2}}"
    rf"|({_H16}:){{1,4}}(:{_H16}){{1,3}}"
    rf"|({_H16}:){{1,3}}(:{_H16}){{1,4}}"
    rf"|({_H16}:){{1,2}}(:{_H16}){{1,5}}"
    rf"|{_H16}:((:{_H16}){{1,6}})"
    rf"|:((:{_H16}){{1,7}}|:)"
    r"|fe80:(:[0-9a-fA-F]{0,4}){0,4}%[0-9a-zA-Z]{1,}"
    rf"|::(ffff(:0{{1,4}}){{0,1}}:){{0,1}}{_LOOSE_V4}"
    rf"|({_H16}:){{1,4}}:{_LOOSE_V4}"
    ")"
)

_SEPARATORS = re.compile(r"\s+")

_url_adapter: TypeAdapter[AnyUrl] = TypeAdapter(AnyUrl)


def _strip_separators(value: str) -> str:
    return _SEPARATORS.sub("", value).replace("-", "")


def is_valid_email(email: str) -> bool:
    """Check ``local@domain.tld`` shape: no whitespace, exactly one ``@``."""
    return EMAIL_PATTERN.fullmatch(email) is not None


def is_valid_url(url: str) -> bool:
    """Check whether a WHATWG URL parser accepts ``url`` as an absolute URL.

    Relative references (``example.com``, ``/path``) and special schemes
    without a host (``http://``) are rejected; opaque URLs such as
    ``mailto:user@example.com`` are accepted.
    """
    try:
        _url_adapter.validate_python(url)
    except ValidationError:
        return False
    return True


def is_valid_ip_address(ip: str) -> bool:
    """Check for a dotted-quad IPv4 or a full/abbreviated IPv6 address.

    IPv6 forms include an embedded IPv4 tail (``::ffff:192.0.2.1``) and a
    link-local zone index (``fe80::1%eth0``).
    """
    return IPV4_PATTERN.fullmatch(ip) is not None or IPV6_PATTERN.fullmatch(ip) is not None


def luhn_checksum_ok(digits: str) -> bool:
    """Return True when a digit string passes the Luhn (mod 10) check.

    Walking from the rightmost digit, every second digit is doubled and
    reduced by 9 when the result exceeds 9.
    """
    total = 0
    for position, char in enumerate(reversed(digits)):
        digit = int(char)
        if position % 2 == 1:
            digit *= 2
            if digit > 9:
                digit -= 9
        total += digit
    return total % 10 == 0


def is_valid_credit_card(card_number: str) -> bool:
    """Validate a 13-19 digit card number with the Luhn checksum.

    Spaces and dashes are ignored, so ``4532 0151 1283 0366`` is accepted.
    """
    cleaned = _strip_separators(card_number)
    if CARD_NUMBER_PATTERN.fullmatch(cleaned) is None:
        logger.debug("validation.rejected", extra={"validator": "credit_card", "reason": "format"})
        return False

    if not luhn_checksum_ok(cleaned):
        logger.debug("validation.rejected", extra={"validator": "credit_card", "reason": "luhn"})
        return False
    return True


def is_valid_ssn(ssn: str) -> bool:
    """Validate a US Social Security Number (``XXX-XX-XXXX`` or 9 digits)."""
    return SSN_PATTERN.fullmatch(_strip_separators(ssn)) is not None


def is_valid_zip_code(zip_code: str) -> bool:
    """Validate a US ZIP (``12345``) or ZIP+4 (``12345-6789``) code."""
    return ZIP_CODE_PATTERN.fullmatch(zip_code) is not None


def is_valid_password(password: str, min_length: int = 8) -> bool:
    """Check password strength.

    Requires at least ``min_length`` characters including one lowercase
    letter, one uppercase letter, one digit and one of ``@$!%*?&``. Other
    characters are allowed.

    Args:
        password: Candidate password.
        min_length: Minimum number of characters (default 8).

    Returns:
        True if every requirement is met.
    """
    checks = {
        "length": len(password) >= min_length,
        "lowercase": any("a" <= c <= "z" for c in password),
        "uppercase": any("A" <= c <= "Z" for c in password),
        "digit": any("0" <= c <= "9" for c in password),
        "special": any(c in PASSWORD_SPECIAL_CHARS for c in password),
    }
    failed = [name for name, ok in checks.items() if not ok]
    if failed:
        logger.debug("validation.rejected", extra={"validator": "password", "failed_rules": failed})
        return False
    return True
