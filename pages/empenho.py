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
"""Gerador de Empenho page."""

import time
import uuid

import mesop as me

from common.analytics import log_export, log_page_view, log_upload, track_click
from components.document_uploader.document_uploader import document_uploader
from components.result_panel.result_panel import RESULT_TEXTAREA_KEY, result_panel
from components.snackbar import snackbar
from config.default import Default
from services.description_service import get_description_generator
from services.session_controller import SessionController
from state.empenho_state import PageState
from state.state import AppState

COPY_CONFIRMATION_MESSAGE = "Texto copiado para a área de transferência!"

cfg = Default()


def on_load(e: me.LoadEvent):
    app_state = me.state(AppState)
    if not app_state.session_id:
        app_state.session_id = str(uuid.uuid4())
    app_state.current_page = "empenho"
    log_page_view("empenho", session_id=app_state.session_id)
    yield


@me.page(
    path="/",
    title="Gerador de Empenho",
    on_load=on_load,
    security_policy=me.SecurityPolicy(
        allowed_script_srcs=["https://cdn.jsdelivr.net"],
    ),
)
def page():
    """Main Page."""
    state = me.state(PageState)
    session = _load_session(state)

    snackbar(is_visible=state.show_snackbar, label=state.snackbar_message)

    with me.box(
        style=me.Style(
            max_width=760,
            margin=me.Margin.symmetric(horizontal="auto"),
            padding=me.Padding.symmetric(vertical=48, horizontal=16),
            display="flex",
            flex_direction="column",
            gap=32,
        )
    ):
        with me.box(style=me.Style(text_align="center")):
            me.text(cfg.APP_TITLE, type="headline-4", style=me.Style(font_weight="bold"))
            me.text(cfg.APP_SUBTITLE, type="subtitle-1")

        with me.box(
            style=me.Style(
                display="flex",
                flex_direction="column",
                gap=24,
                padding=me.Padding.all(32),
                border_radius=32,
                background=me.theme_var("surface-container-lowest"),
                box_shadow="0 4px 24px rgba(0, 0, 0, 0.12)",
            )
        ):
            document_uploader(
                candidate=session.state.candidate,
                is_processing=session.state.is_processing,
                uploader_key=f"empenho_uploader_{state.uploader_key}",
                on_upload=on_upload,
                on_clear=on_reset_click,
                on_generate=on_generate_click,
            )

            if session.state.error_message:
                me.text(
                    session.state.error_message,
                    style=me.Style(
                        color=me.theme_var("error"),
                        font_weight="bold",
                        text_align="center",
                    ),
                )

            if session.state.is_success:
                result_panel(
                    text=session.state.result_text,
                    file_name=cfg.DOWNLOAD_FILE_NAME,
                    editable=session.state.edit_mode,
                    on_input=on_result_input,
                    on_edit=on_edit_click,
                    on_reset=on_reset_click,
                    on_copy=on_copy,
                    on_download=on_download,
                )


# --- Session helpers ---

def _load_session(state: PageState) -> SessionController:
    content = state.upload.getvalue() if state.upload else b""
    return SessionController.from_json(state.session_json, content=content)


def _save_session(state: PageState, session: SessionController):
    state.session_json = session.to_json()


def show_snackbar(state: PageState, message: str):
    """Displays a snackbar message at the bottom of the page."""
    state.snackbar_message = message
    state.show_snackbar = True
    yield
    time.sleep(3)
    state.show_snackbar = False
    yield


# --- Event Handlers ---

@track_click(element_id="empenho_upload")
def on_upload(e: me.UploadEvent):
    state = me.state(PageState)
    session = _load_session(state)
    file = e.file
    content = file.getvalue()
    if session.accept_file(content, file.size, file.mime_type, name=file.name):
        state.upload = file
        log_upload(file.mime_type, file.size)
    else:
        log_upload(file.mime_type, file.size, rejection=session.state.notice or "busy")
    _save_session(state, session)
    yield


@track_click(element_id="empenho_generate")
def on_generate_click(e: me.ClickEvent):
    state = me.state(PageState)
    session = _load_session(state)
    if not session.start_generation():
        return
    _save_session(state, session)
    yield

    session.run_generation(get_description_generator())
    _save_session(state, session)
    yield


def on_result_input(e: me.InputEvent):
    state = me.state(PageState)
    session = _load_session(state)
    session.edit(e.value)
    _save_session(state, session)


def on_edit_click(e: me.ClickEvent):
    me.focus_component(key=RESULT_TEXTAREA_KEY)
    yield


@track_click(element_id="empenho_reset")
def on_reset_click(e: me.ClickEvent):
    state = me.state(PageState)
    session = _load_session(state)
    session.reset()
    _save_session(state, session)
    state.upload = None
    # A new key gives the user a fresh uploader widget.
    state.uploader_key += 1
    yield


@track_click(element_id="empenho_copy")
def on_copy(e: me.WebEvent):
    state = me.state(PageState)
    session = _load_session(state)
    log_export("copy", session.copy_text())
    yield from show_snackbar(state, COPY_CONFIRMATION_MESSAGE)


@track_click(element_id="empenho_download")
def on_download(e: me.WebEvent):
    state = me.state(PageState)
    artifact = _load_session(state).download()
    log_export("download", artifact.content.decode("utf-8"))
    yield
