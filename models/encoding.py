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

import base64
import logging
from contextlib import contextmanager
from typing import BinaryIO, Iterator, Union

from common.error_handling import EncodingError
from common.utils import strip_data_url_prefix
from models.requests import EncodedDocument

logger = logging.getLogger(__name__)

DocumentSource = Union[bytes, str, BinaryIO]


def _read_source(source: DocumentSource) -> Union[bytes, str]:
    if isinstance(source, (bytes, bytearray, memoryview)):
        return bytes(source)
    if isinstance(source, str):
        return source
    try:
        if hasattr(source, "seek"):
            source.seek(0)
        return source.read()
    except (OSError, ValueError) as e:
        raise EncodingError(f"Could not read document: {e}") from e


def encode_document(source: DocumentSource, mime_type: str) -> EncodedDocument:
    """Reads a document in full and returns its base64 transport form.

    Args:
        source: Raw bytes, a data URL string, or a readable file object such as
            Mesop's UploadedFile.
        mime_type: The declared MIME type, passed through unchanged.

    Raises:
        EncodingError: if the underlying read fails.
    """
    data = _read_source(source)
    if data is None:
        raise EncodingError("Could not read document: empty read")

    if isinstance(data, str):
        # Already textual, e.g. the result of a data URL read.
        payload = strip_data_url_prefix(data)
    else:
        payload = base64.b64encode(data).decode("ascii")

    return EncodedDocument(payload=payload, mime_type=mime_type)


@contextmanager
def encoded_document(source: DocumentSource, mime_type: str) -> Iterator[EncodedDocument]:
    """Scoped encoding: the payload is released when the block exits."""
    document = encode_document(source, mime_type)
    logger.info(f"Encoded {mime_type} document ({len(document.payload)} base64 chars)")
    try:
        yield document
    finally:
        del document
