"""Library exception types.

Validators report failure with ``False`` and formatters fall back to a safe
default, so these errors only cover the two cases that must fail loudly:
a raising upload check and an impossible generator policy.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypedDict


class ErrorDetails(TypedDict, total=False):
    """Structured error context for observability and clients."""

    hint: str
    allowed_types: list[str]
    content_type: str
    max_size_mb: float
    actual_size_bytes: int


@dataclass
class AppError(Exception):
    """Base error for helper failures.

    Attributes:
        code: Stable, machine-readable error code.
        message: Human-readable error message.
        details: Optional structured details for debugging/observability.
    """

    code: str
    message: str
    details: ErrorDetails | None = None

    def __post_init__(self) -> None:
        # Populate Exception args so str(error) is useful in logs/tracebacks.
        super().__init__(self.message)


class ValidationAppError(AppError):
    """Raised when a raising check rejects its input."""


class ConfigurationAppError(AppError):
    """Raised when a generator is given a policy it cannot satisfy."""
