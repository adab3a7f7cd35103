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

from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True)
class DocumentTypeConfig:
    """An upload type accepted by the description generator."""

    mime_type: str  # Exact declared MIME type (e.g., "image/png")
    label: str  # Short label shown in the preview box (e.g., "PNG")
    is_image: bool  # Images get an inline preview, PDFs a placeholder icon


# Single source of truth
DOCUMENT_TYPES: List[DocumentTypeConfig] = [
    DocumentTypeConfig(mime_type="application/pdf", label="PDF", is_image=False),
    DocumentTypeConfig(mime_type="image/png", label="PNG", is_image=True),
    DocumentTypeConfig(mime_type="image/jpeg", label="JPEG", is_image=True),
    DocumentTypeConfig(mime_type="image/jpg", label="JPG", is_image=True),
    DocumentTypeConfig(mime_type="image/webp", label="WEBP", is_image=True),
]

ACCEPTED_MIME_TYPES: List[str] = [doc.mime_type for doc in DOCUMENT_TYPES]


def get_document_type_config(mime_type: str) -> Optional[DocumentTypeConfig]:
    """Finds the config for an exact MIME type match."""
    for doc in DOCUMENT_TYPES:
        if doc.mime_type == mime_type:
            return doc
    return None
