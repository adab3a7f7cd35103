# Copyright 2025 Google LLC.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     https://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from __future__ import annotations

import base64

from absl import logging

DATA_URL_PREFIX = "data:"


def create_data_url(content: bytes, mime_type: str) -> str:
    """Creates an inline data URL for local preview of an uploaded image.

    Args:
        content: The raw file bytes.
        mime_type: The declared MIME type of the file.

    Returns:
        A `data:<mime>;base64,<payload>` string, built without any network call.
    """
    encoded = base64.b64encode(content).decode("ascii")
    return f"data:{mime_type};base64,{encoded}"


def strip_data_url_prefix(value: str) -> str:
    """Removes a `data:...;base64,` scheme prefix if one is present."""
    if value.startswith(DATA_URL_PREFIX):
        parts = value.split(",", 1)
        if len(parts) > 1:
            logging.debug("Stripped data URL prefix %s", parts[0])
            return parts[1]
    return value


def format_file_size(size: int) -> str:
    """Formats a byte count as megabytes with two decimals, e.g. '5.00 MB'."""
    return f"{size / 1024 / 1024:.2f} MB"
