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

from common.error_handling import (
    UNKNOWN_ERROR_MESSAGE,
    GenerationError,
    InvalidSessionAction,
    ValidationError,
)
from config.default import Default
from models.normalizer import normalize_description, uppercase_edit
from models.requests import DownloadArtifact
from models.session import Error, Idle, Processing, SessionState, Success
from models.validation import validate_upload
from services.description_service import DescriptionGenerator, generate_description

logger = logging.getLogger(__name__)


class SessionController:
    """
    Sequences one upload through validation, generation and export.

    States: Idle -> Processing -> Success | Error, with reset back to Idle
    from anywhere. At most one generation runs at a time.
    """

    def __init__(self, state: SessionState | None = None):
        self.state = state or SessionState()

    # --- Serialization (Mesop page state keeps the session as a JSON string) ---

    def to_json(self) -> str:
        """Serializes the session. Candidate bytes are not included."""
        return self.state.model_dump_json()

    @classmethod
    def from_json(cls, data: str, content: bytes = b"") -> "SessionController":
        """Restores a session, reattaching the candidate bytes kept elsewhere."""
        if not data:
            return cls()
        state = SessionState.model_validate_json(data)
        if state.candidate is not None and content:
            state.candidate = state.candidate.model_copy(update={"content": content})
        return cls(state)

    # --- Actions ---

    def accept_file(self, content: bytes, size: int, mime_type: str, name: str = "") -> bool:
        """Validates and installs a new candidate.

        On rejection the current candidate and result are kept and the
        validation message becomes the one shown; a stale Error is dropped so
        it cannot hide that message. On acceptance any previous
        result, error and notice are cleared and the session returns to Idle.
        """
        if self.state.is_processing:
            logger.info("Ignoring upload while a generation is in progress")
            return False

        try:
            candidate = validate_upload(content, size, mime_type, name=name)
        except ValidationError as e:
            if isinstance(self.state.status, Error):
                self.state.status = Idle()
            self.state.notice = e.message
            return False

        self.state = SessionState(candidate=candidate)
        logger.info(f"Accepted '{name}' ({mime_type}, {candidate.size_label})")
        return True

    def start_generation(self) -> bool:
        """Idle/Success/Error -> Processing. No-op without a candidate or while busy."""
        if self.state.candidate is None or self.state.is_processing:
            return False
        self.state.status = Processing()
        self.state.notice = None
        self.state.edit_mode = False
        return True

    def complete(self, text: str):
        """Processing -> Success with normalized text; editing is enabled."""
        if not self.state.is_processing:
            raise InvalidSessionAction("No generation in progress")
        self.state.status = Success(text=normalize_description(text))
        self.state.edit_mode = True

    def fail(self, message: str | None):
        """Processing -> Error. Any stale result goes with the old status."""
        if not self.state.is_processing:
            raise InvalidSessionAction("No generation in progress")
        self.state.status = Error(message=message or UNKNOWN_ERROR_MESSAGE)
        self.state.edit_mode = False

    def run_generation(self, generator: DescriptionGenerator) -> None:
        """Runs the pending generation attempt and records its outcome."""
        if not self.state.is_processing:
            raise InvalidSessionAction("Call start_generation() first")
        try:
            text = generate_description(self.state.candidate, generator)
        except GenerationError as e:
            self.fail(e.message)
            return
        except Exception as e:  # pylint: disable=broad-except
            logger.exception("Unexpected error during generation")
            self.fail(str(e))
            return
        self.complete(text)

    def generate(self, generator: DescriptionGenerator) -> bool:
        """start_generation() followed by run_generation()."""
        if not self.start_generation():
            return False
        self.run_generation(generator)
        return True

    def edit(self, new_text: str):
        """Success -> Success. Edits are upper-cased but not re-normalized."""
        if not isinstance(self.state.status, Success) or not self.state.edit_mode:
            raise InvalidSessionAction("Only a generated result can be edited")
        self.state.status = Success(text=uppercase_edit(new_text))

    def reset(self):
        """Any state -> Idle with nothing selected."""
        self.state = SessionState()

    def copy_text(self) -> str:
        """Text for the clipboard, unchanged."""
        if not isinstance(self.state.status, Success):
            raise InvalidSessionAction("Nothing to copy")
        return self.state.status.text

    def download(self) -> DownloadArtifact:
        """The current text as a plain-text file."""
        if not isinstance(self.state.status, Success):
            raise InvalidSessionAction("Nothing to download")
        return build_download_artifact(self.state.status.text)


def build_download_artifact(text: str) -> DownloadArtifact:
    return DownloadArtifact(
        file_name=Default().DOWNLOAD_FILE_NAME,
        content=text.encode("utf-8"),
    )
