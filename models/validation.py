# Copyright 2025 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Upload validation for the description generator."""

import logging

from common.error_handling import (
    FILE_TOO_LARGE_MESSAGE,
    INVALID_FILE_TYPE_MESSAGE,
    REASON_INVALID_TYPE,
    REASON_TOO_LARGE,
    ValidationError,
)
from config.default import Default
from config.document_types import get_document_type_config
from models.requests import UploadCandidate

logger = logging.getLogger(__name__)


def check_upload(size: int, mime_type: str, name: str = "") -> None:
    """Applies the size and type rules, which need no file bytes.

    The size check runs before the type check, so an oversized file is always
    reported as too large whatever its type. The declared MIME type is trusted;
    the bytes are not sniffed.

    Raises:
        ValidationError: with reason "too large" or "invalid type".
    """
    if size > Default().MAX_UPLOAD_BYTES:
        logger.info(f"Rejected upload '{name}': {size} bytes exceeds limit")
        raise ValidationError(REASON_TOO_LARGE, FILE_TOO_LARGE_MESSAGE)

    if not get_document_type_config(mime_type):
        logger.info(f"Rejected upload '{name}': unsupported type '{mime_type}'")
        raise ValidationError(REASON_INVALID_TYPE, INVALID_FILE_TYPE_MESSAGE)


def validate_upload(
    content: bytes, size: int, mime_type: str, name: str = ""
) -> UploadCandidate:
    """Checks a candidate upload and returns it as an UploadCandidate.

    The candidate's preview is derived from its bytes (images) or is the PDF
    placeholder.

    Raises:
        ValidationError: see check_upload.
    """
    check_upload(size, mime_type, name=name)
    return UploadCandidate(
        name=name,
        content=content,
        mime_type=mime_type,
        size=size,
    )
