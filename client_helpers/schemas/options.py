"""Pydantic models for helper policies and results.

Policies are frozen: a generator consumes one per call and never mutates it.
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class CouponOptions(BaseModel):
    """Character-class and shape policy for coupon codes."""

    model_config = ConfigDict(frozen=True)

    length: int = Field(
        8, ge=0, le=256, description="Number of random characters in the body."
    )
    prefix: str = Field("", description="Text placed before the random body.")
    suffix: str = Field("", description="Text placed after the random body.")
    include_numbers: bool = Field(True, description="Draw from 0-9.")
    include_uppercase: bool = Field(True, description="Draw from A-Z.")
    include_lowercase: bool = Field(False, description="Draw from a-z.")
    include_special_chars: bool = Field(
        False, description="Draw from punctuation such as !@#$%^&*."
    )


class UploadOptions(BaseModel):
    """Acceptance policy for an uploaded file."""

    model_config = ConfigDict(frozen=True)

    allowed_types: List[str] = Field(
        ..., min_length=1, description="Accepted MIME types, e.g. ['image/png']."
    )
    max_size_mb: float = Field(1, gt=0, description="Maximum size in megabytes.")
    file_type_label: str = Field(
        ..., description="Human label used in error messages, e.g. 'Image'."
    )


class DateRange(BaseModel):
    """Inclusive start/end pair formatted as ``YYYY-MM-DD HH:mm:ss``."""

    model_config = ConfigDict(frozen=True)

    start_date: str
    end_date: str
