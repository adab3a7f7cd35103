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

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from common.utils import create_data_url, format_file_size
from config.default import Default


class UploadCandidate(BaseModel):
    """An accepted upload, immutable once the validator lets it through."""

    model_config = ConfigDict(frozen=True)

    mime_type: str
    size: int = Field(..., ge=0)
    name: str = ""
    # Raw bytes are never serialized; the UI keeps them in the uploaded file.
    content: bytes = Field(default=b"", exclude=True, repr=False)

    @property
    def is_image(self) -> bool:
        return self.mime_type.startswith("image/")

    @property
    def size_label(self) -> str:
        return format_file_size(self.size)

    @property
    def preview_url(self) -> Optional[str]:
        """Built on demand from the bytes, so it never lands in saved state."""
        if not self.is_image:
            return Default().PDF_PREVIEW_URL
        if not self.content:
            return None
        return create_data_url(self.content, self.mime_type)


class EncodedDocument(BaseModel):
    """
    Transport form of an upload candidate: a base64 payload and its MIME type.
    Built per generation attempt and discarded once the model call returns.
    """

    payload: str = Field(repr=False)
    mime_type: str


class DescriptionResponse(BaseModel):
    """Response body of the describe endpoint."""

    description: str
    file_name: str
    mime_type: str


class DownloadRequest(BaseModel):
    """Request body of the download endpoint."""

    text: str


class DownloadArtifact(BaseModel):
    """A plain-text file offered to the user."""

    model_config = ConfigDict(frozen=True)

    file_name: str
    content: bytes
    media_type: str = "text/plain"
