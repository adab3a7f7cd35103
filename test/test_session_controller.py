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

import os
import sys

import pytest

# Add the project root to the Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from common.error_handling import (
    FILE_TOO_LARGE_MESSAGE,
    GENERATION_FAILED_MESSAGE,
    INVALID_FILE_TYPE_MESSAGE,
    UNKNOWN_ERROR_MESSAGE,
    InvalidSessionAction,
)
from models.mock_generator import MockDescriptionGenerator
from models.session import Error, Idle, Processing, Success
from services.session_controller import SessionController

MB = 1024 * 1024
PNG = b"\x89PNG\r\n\x1a\n"


class _FailingGenerator:
    call_count = 0

    def generate(self, document):
        self.call_count += 1
        raise TimeoutError("deadline exceeded")


def _with_png() -> SessionController:
    session = SessionController()
    assert session.accept_file(PNG, 5 * MB, "image/png", name="nota.png")
    return session


def _assert_reset(session: SessionController):
    state = session.state
    assert isinstance(state.status, Idle)
    assert state.candidate is None
    assert state.result_text == ""
    assert state.error_message is None
    assert state.edit_mode is False


def test_end_to_end_success():
    session = _with_png()
    assert isinstance(session.state.status, Idle)
    assert session.state.error_message is None

    assert session.start_generation()
    assert isinstance(session.state.status, Processing)

    session.run_generation(MockDescriptionGenerator("material de escritório"))
    assert isinstance(session.state.status, Success)
    assert session.state.result_text == "PELA DESPESA EMPENHADA REFERENTE A MATERIAL DE ESCRITÓRIO"
    assert session.state.edit_mode is True


def test_oversized_file_never_reaches_generator():
    session = SessionController()
    generator = MockDescriptionGenerator()

    assert not session.accept_file(b"x", 25 * MB, "image/png")
    assert isinstance(session.state.status, Idle)
    assert session.state.error_message == FILE_TOO_LARGE_MESSAGE
    assert session.state.candidate is None

    assert not session.generate(generator)
    assert generator.call_count == 0


def test_invalid_type_message():
    session = SessionController()
    assert not session.accept_file(b"GIF89a", 6, "image/gif")
    assert session.state.error_message == INVALID_FILE_TYPE_MESSAGE


def test_rejected_upload_keeps_current_candidate_and_result():
    session = _with_png()
    session.generate(MockDescriptionGenerator("papel"))

    assert not session.accept_file(b"x", 10, "text/plain")
    assert session.state.candidate.name == "nota.png"
    assert session.state.result_text == "PELA DESPESA EMPENHADA REFERENTE A PAPEL"
    assert session.state.error_message == INVALID_FILE_TYPE_MESSAGE


def test_rejected_upload_replaces_generation_error():
    session = _with_png()
    session.generate(_FailingGenerator())
    assert session.state.error_message == GENERATION_FAILED_MESSAGE

    assert not session.accept_file(b"x", 25 * MB, "image/png")
    assert session.state.error_message == FILE_TOO_LARGE_MESSAGE
    assert session.state.candidate.name == "nota.png"
    # The kept candidate can still be retried.
    assert session.generate(MockDescriptionGenerator("papel"))
    assert session.state.result_text == "PELA DESPESA EMPENHADA REFERENTE A PAPEL"
    assert session.state.error_message is None


def test_accepting_new_file_clears_previous_result():
    session = _with_png()
    session.generate(MockDescriptionGenerator("papel"))

    assert session.accept_file(b"%PDF", 4, "application/pdf", name="contrato.pdf")
    assert isinstance(session.state.status, Idle)
    assert session.state.result_text == ""
    assert session.state.error_message is None
    assert session.state.edit_mode is False
    assert session.state.candidate.name == "contrato.pdf"


def test_start_generation_requires_candidate():
    session = SessionController()
    assert not session.start_generation()
    assert isinstance(session.state.status, Idle)


def test_only_one_generation_in_flight():
    session = _with_png()
    assert session.start_generation()
    assert not session.start_generation()
    assert not session.accept_file(PNG, 10, "image/png", name="outra.png")
    assert session.state.candidate.name == "nota.png"


def test_failure_moves_to_error_and_clears_result():
    session = _with_png()
    session.generate(MockDescriptionGenerator("papel"))

    generator = _FailingGenerator()
    assert session.generate(generator)
    assert generator.call_count == 1
    assert isinstance(session.state.status, Error)
    assert session.state.error_message == GENERATION_FAILED_MESSAGE
    assert session.state.result_text == ""


def test_retry_after_error():
    session = _with_png()
    session.generate(_FailingGenerator())
    assert session.generate(MockDescriptionGenerator("referente a limpeza"))
    assert session.state.result_text == "PELA DESPESA EMPENHADA REFERENTE A LIMPEZA"
    assert session.state.error_message is None


def test_fail_without_message_uses_fallback():
    session = _with_png()
    session.start_generation()
    session.fail("")
    assert session.state.error_message == UNKNOWN_ERROR_MESSAGE


def test_complete_and_fail_require_processing():
    session = _with_png()
    with pytest.raises(InvalidSessionAction):
        session.complete("texto")
    with pytest.raises(InvalidSessionAction):
        session.fail("erro")
    with pytest.raises(InvalidSessionAction):
        session.run_generation(MockDescriptionGenerator())


def test_edit_uppercases_without_renormalizing():
    session = _with_png()
    session.generate(MockDescriptionGenerator("papel"))

    session.edit("texto **livre** sem prefixo")
    assert session.state.result_text == "TEXTO **LIVRE** SEM PREFIXO"
    assert isinstance(session.state.status, Success)


def test_edit_outside_success_is_rejected():
    with pytest.raises(InvalidSessionAction):
        _with_png().edit("texto")


def test_edit_requires_edit_mode():
    session = _with_png()
    session.generate(MockDescriptionGenerator("papel"))
    session.state.edit_mode = False
    with pytest.raises(InvalidSessionAction):
        session.edit("texto")
    assert session.state.result_text == "PELA DESPESA EMPENHADA REFERENTE A PAPEL"


def test_copy_and_download():
    session = _with_png()
    session.generate(MockDescriptionGenerator("papel"))
    session.edit("pela despesa empenhada referente a papel a4")

    assert session.copy_text() == "PELA DESPESA EMPENHADA REFERENTE A PAPEL A4"
    artifact = session.download()
    assert artifact.file_name == "descricao_empenho.txt"
    assert artifact.content == "PELA DESPESA EMPENHADA REFERENTE A PAPEL A4".encode("utf-8")
    assert artifact.media_type == "text/plain"
    # Export actions do not change state.
    assert isinstance(session.state.status, Success)


def test_copy_and_download_require_success():
    session = _with_png()
    with pytest.raises(InvalidSessionAction):
        session.copy_text()
    with pytest.raises(InvalidSessionAction):
        session.download()


@pytest.mark.parametrize("stage", ["empty", "rejected", "idle", "processing", "success", "error"])
def test_reset_from_any_state(stage):
    session = SessionController()
    if stage == "rejected":
        session.accept_file(b"x", 25 * MB, "image/png")
    elif stage != "empty":
        session = _with_png()
        if stage == "processing":
            session.start_generation()
        elif stage == "success":
            session.generate(MockDescriptionGenerator("papel"))
        elif stage == "error":
            session.generate(_FailingGenerator())

    session.reset()
    _assert_reset(session)


def test_json_round_trip_reattaches_content():
    session = _with_png()
    session.generate(MockDescriptionGenerator("papel"))

    data = session.to_json()
    assert "\\x89PNG" not in data

    restored = SessionController.from_json(data, content=PNG)
    assert restored.state.candidate.content == PNG
    assert restored.state.candidate.preview_url == session.state.candidate.preview_url
    assert restored.state.result_text == session.state.result_text
    assert restored.state.edit_mode is True


def test_from_empty_json_is_fresh_session():
    _assert_reset(SessionController.from_json(""))


def test_saved_session_does_not_carry_image_bytes():
    small = SessionController()
    small.accept_file(PNG, len(PNG), "image/png", name="nota.png")
    large_content = PNG + b"\0" * (15 * MB)
    large = SessionController()
    large.accept_file(large_content, len(large_content), "image/png", name="nota.png")

    data = large.to_json()
    assert len(data) < 1024
    assert len(data) - len(small.to_json()) < 16

    restored = SessionController.from_json(data, content=large_content)
    assert restored.state.candidate.preview_url.startswith("data:image/png;base64,")
