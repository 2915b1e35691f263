"""Upload acceptance checks (content type and size).

These are the pure parts of a file-upload flow: they decide whether a file
may be sent, and leave showing the outcome to the caller.
"""

from __future__ import annotations

import logging

from client_helpers.core.errors import ValidationAppError
from client_helpers.schemas.options import UploadOptions

logger = logging.getLogger(__name__)

IMAGE_CONTENT_TYPES = frozenset({"image/png", "image/jpeg", "image/jpg", "image/webp"})

ATTACHMENT_CONTENT_TYPES = frozenset({"image/jpeg", "image/png", "application/pdf"})

BYTES_PER_MB = 1024 * 1024


def is_valid_image_type(content_type: str) -> bool:
    """Return True for PNG, JPEG or WebP content types."""
    return content_type in IMAGE_CONTENT_TYPES


def is_allowed_attachment_type(content_type: str) -> bool:
    """Return True for content types accepted as attachments (JPEG, PNG, PDF)."""
    return content_type in ATTACHMENT_CONTENT_TYPES


def validate_upload(content_type: str, size_bytes: int, options: UploadOptions) -> None:
    """Validate an upload's content type and size against a policy.

    Content type is checked before size, so a file that fails both reports
    the type problem.

    Args:
        content_type: MIME type reported for the file.
        size_bytes: File size in bytes.
        options: Accepted types, size limit and label for messages.

    Raises:
        ValidationAppError: ``invalid_file_type`` or ``file_too_large``.
    """
    if content_type not in options.allowed_types:
        logger.warning(
            "upload.rejected",
            extra={"reason": "invalid_file_type", "content_type": content_type},
        )
        raise ValidationAppError(
            code="invalid_file_type",
            message=(
                f"Please upload a valid {options.file_type_label} file "
                f"({', '.join(options.allowed_types)})"
            ),
            details={
                "content_type": content_type,
                "allowed_types": list(options.allowed_types),
            },
        )

    max_bytes = options.max_size_mb * BYTES_PER_MB
    if size_bytes > max_bytes:
        logger.warning(
            "upload.rejected",
            extra={
                "reason": "file_too_large",
                "size_bytes": size_bytes,
                "max_bytes": max_bytes,
            },
        )
        raise ValidationAppError(
            code="file_too_large",
            message=f"{options.file_type_label} size should not exceed {options.max_size_mb:g}MB",
            details={
                "max_size_mb": options.max_size_mb,
                "actual_size_bytes": size_bytes,
            },
        )
