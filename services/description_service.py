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

import logging
from typing import Protocol

from common.error_handling import EncodingError, GenerationError
from config.default import Default
from models.encoding import encoded_document
from models.normalizer import normalize_description
from models.requests import EncodedDocument, UploadCandidate

logger = logging.getLogger(__name__)


class DescriptionGenerator(Protocol):
    """Anything that turns an encoded document into raw description text."""

    def generate(self, document: EncodedDocument) -> str:
        ...


def get_description_generator() -> DescriptionGenerator:
    """Returns the generator backend selected by GENERATOR_BACKEND."""
    backend = Default().GENERATOR_BACKEND
    if backend == "mock":
        from models.mock_generator import MockDescriptionGenerator

        logger.info("Using mock description generator")
        return MockDescriptionGenerator()

    from models.gemini import GeminiDescriptionGenerator

    return GeminiDescriptionGenerator()


def generate_description(
    candidate: UploadCandidate, generator: DescriptionGenerator
) -> str:
    """
    One generation attempt: encode, call the model once, normalize.
    Any failure surfaces as GenerationError with the fixed user message;
    the underlying cause is only logged.
    """
    logger.info(f"Generating description for '{candidate.name}' ({candidate.mime_type})")

    try:
        with encoded_document(candidate.content, candidate.mime_type) as document:
            raw_text = generator.generate(document)
    except EncodingError as e:
        logger.exception(f"Could not encode '{candidate.name}'")
        raise GenerationError() from e
    except Exception as e:  # pylint: disable=broad-except
        logger.exception(f"Description generation failed for '{candidate.name}'")
        raise GenerationError() from e

    return normalize_description(raw_text)
