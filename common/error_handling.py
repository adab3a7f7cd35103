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

# User-facing messages (pt-BR). These strings are shown verbatim in the UI.
FILE_TOO_LARGE_MESSAGE = "O arquivo é muito grande. O limite é 20MB."
INVALID_FILE_TYPE_MESSAGE = "Tipo de arquivo inválido. Use PDF ou Imagens (JPG, PNG)."
GENERATION_FAILED_MESSAGE = (
    "Falha ao processar o documento. Verifique se o arquivo é válido e tente novamente."
)
UNKNOWN_ERROR_MESSAGE = "Ocorreu um erro desconhecido."

REASON_TOO_LARGE = "too large"
REASON_INVALID_TYPE = "invalid type"

# Dedicated logger for tracking the suppressed error
race_condition_logger = logging.getLogger("empenho.race_condition_tracker")


class ValidationError(Exception):
    """Raised when an upload is rejected before it becomes a candidate."""

    def __init__(self, reason: str, message: str):
        self.reason = reason
        self.message = message
        super().__init__(self.message)


class EncodingError(Exception):
    """Raised when the uploaded file cannot be read for transmission."""

    def __init__(self, message):
        self.message = message
        super().__init__(self.message)


class GenerationError(Exception):
    """Custom exception for description generation errors."""

    def __init__(self, message=GENERATION_FAILED_MESSAGE):
        self.message = message
        super().__init__(self.message)


class InvalidSessionAction(Exception):
    """Raised when a session action is requested in a state that does not allow it."""
    pass


class UnknownHandlerIdFilter(logging.Filter):
    """A logging filter to suppress 'Unknown handler id' errors."""
    def filter(self, record):
        # Suppress the specific benign error message from Mesop
        if "Unknown handler id" in record.getMessage():
            # Log to a separate, non-disruptive logger for tracking purposes
            race_condition_logger.info("Suppressed 'Unknown handler id' error", extra={"original_record": record.getMessage()})
            return False # Prevent the original logger from processing it
        return True
