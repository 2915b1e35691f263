"""Tests for upload acceptance checks.

Tests cover:
- Image and attachment content-type predicates
- Upload policy enforcement (type before size, error codes and messages)
"""

import pytest
from pydantic import ValidationError

from client_helpers.core.errors import ValidationAppError
from client_helpers.schemas.options import UploadOptions
from client_helpers.utils.file_validators import (
    is_allowed_attachment_type,
    is_valid_image_type,
    validate_upload,
)


@pytest.fixture
def image_options() -> UploadOptions:
    """Return a typical avatar upload policy."""
    return UploadOptions(
        allowed_types=["image/png", "image/jpeg"],
        max_size_mb=2,
        file_type_label="Image",
    )


class TestContentTypePredicates:
    @pytest.mark.parametrize("content_type", ["image/png", "image/jpeg", "image/jpg", "image/webp"])
    def test_image_types_accepted(self, content_type: str) -> None:
        assert is_valid_image_type(content_type) is True

    @pytest.mark.parametrize("content_type", ["image/gif", "application/pdf", "IMAGE/PNG", ""])
    def test_other_types_rejected(self, content_type: str) -> None:
        assert is_valid_image_type(content_type) is False

    @pytest.mark.parametrize("content_type", ["image/jpeg", "image/png", "application/pdf"])
    def test_attachment_types_accepted(self, content_type: str) -> None:
        assert is_allowed_attachment_type(content_type) is True

    def test_webp_is_not_an_attachment_type(self) -> None:
        assert is_allowed_attachment_type("image/webp") is False


class TestValidateUpload:
    def test_accepts_allowed_type_within_limit(self, image_options: UploadOptions) -> None:
        assert validate_upload("image/png", 2 * 1024 * 1024, image_options) is None

    def test_rejects_disallowed_type(self, image_options: UploadOptions) -> None:
        with pytest.raises(ValidationAppError) as exc_info:
            validate_upload("application/pdf", 10, image_options)

        error = exc_info.value
        assert error.code == "invalid_file_type"
        assert error.message == "Please upload a valid Image file (image/png, image/jpeg)"
        assert error.details is not None
        assert error.details["content_type"] == "application/pdf"

    def test_rejects_oversized_file(self, image_options: UploadOptions) -> None:
        with pytest.raises(ValidationAppError) as exc_info:
            validate_upload("image/jpeg", 2 * 1024 * 1024 + 1, image_options)

        assert exc_info.value.code == "file_too_large"
        assert exc_info.value.message == "Image size should not exceed 2MB"

    def test_type_checked_before_size(self, image_options: UploadOptions) -> None:
        with pytest.raises(ValidationAppError) as exc_info:
            validate_upload("text/plain", 100 * 1024 * 1024, image_options)

        assert exc_info.value.code == "invalid_file_type"

    def test_default_limit_is_one_megabyte(self) -> None:
        options = UploadOptions(allowed_types=["application/pdf"], file_type_label="PDF")

        validate_upload("application/pdf", 1024 * 1024, options)
        with pytest.raises(ValidationAppError):
            validate_upload("application/pdf", 1024 * 1024 + 1, options)

    def test_policy_requires_allowed_types(self) -> None:
        with pytest.raises(ValidationError):
            UploadOptions(allowed_types=[], file_type_label="Image")
