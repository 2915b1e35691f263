"""Display helpers for shortening and masking text."""

from __future__ import annotations

from typing import Literal

ELLIPSIS = "..."
CENTER_MASK = "*********"
MAX_EMAIL_MASK_CHARS = 5
TRUNCATE_TEXT_WORDS = 3

AppendPosition = Literal["center", "end"]


def _tail(value: str, count: int) -> str:
    # value[-0:] would return the whole string
    return value[len(value) - count:] if count > 0 else ""


def truncate_id(value: str, start_length: int = 3, end_length: int = 4) -> str:
    """Shorten an identifier to ``start...end``.

    Values no longer than ``start_length + end_length + 3`` are returned
    unchanged, since the ellipsis would not save anything.
    """
    if len(value) <= start_length + end_length + len(ELLIPSIS):
        return value
    return f"{value[:start_length]}{ELLIPSIS}{_tail(value, end_length)}"


def truncate(
    text: str,
    start_length: int = 3,
    end_length: int = 4,
    append_text: str = ELLIPSIS,
    append_position: AppendPosition | str = "center",
) -> str:
    """Shorten text either in the middle or at the end.

    Args:
        text: Text to shorten; empty input returns ``""``.
        start_length: Characters kept at the start.
        end_length: Characters kept at the end (``center`` only).
        append_text: Marker appended in ``end`` mode.
        append_position: ``center`` masks the middle with asterisks, ``end``
            cuts after ``start_length``. Any other value leaves text as is.

    Returns:
        The shortened text.
    """
    if not text:
        return ""

    if append_position == "center":
        if len(text) <= start_length + end_length + 3:
            return text
        return f"{text[:start_length]}{CENTER_MASK}{_tail(text, end_length)}"

    if append_position == "end":
        if len(text) <= start_length:
            return text
        return f"{text[:start_length]}{append_text}"

    return text


def truncate_text(text: str) -> str:
    """Keep the first three space-separated words, adding ``...`` if cut."""
    words = text.split(" ")
    if len(words) <= TRUNCATE_TEXT_WORDS:
        return text
    return " ".join(words[:TRUNCATE_TEXT_WORDS]) + ELLIPSIS


def capitalize_first_letter(value: str) -> str:
    """Upper-case the first character and leave the rest untouched."""
    if not value:
        return ""
    return value[0].upper() + value[1:]


def mask_email(email: str, visible_start_chars: int = 2, visible_end_chars: int = 1) -> str:
    """Mask the local part of an email address, e.g. ``jo***n@example.com``.

    At most five asterisks are shown regardless of how many characters are
    hidden, so the mask does not reveal the local part's length.

    Args:
        email: Address to mask.
        visible_start_chars: Characters of the local part kept at the start.
        visible_end_chars: Characters of the local part kept at the end.

    Returns:
        The masked address, the address unchanged when the local part is too
        short to mask, or ``""`` when the input has no ``@``.
    """
    if not email or "@" not in email:
        return ""

    parts = email.split("@")
    username, domain = parts[0], parts[1]
    if len(username) <= visible_start_chars + visible_end_chars:
        return email

    hidden = len(username) - visible_start_chars - visible_end_chars
    start = username[:visible_start_chars]
    end = _tail(username, visible_end_chars)
    return f"{start}{'*' * min(hidden, MAX_EMAIL_MASK_CHARS)}{end}@{domain}"
