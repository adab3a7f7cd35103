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
"""
Component for selecting the document to describe.
"""

from typing import Callable

import mesop as me

from config.document_types import ACCEPTED_MIME_TYPES, get_document_type_config
from models.requests import UploadCandidate


DROP_ZONE_STYLE = me.Style(
    border=me.Border.all(
        me.BorderSide(width=2, style="dashed", color=me.theme_var("outline-variant")),
    ),
    border_radius=24,
    padding=me.Padding.all(40),
    display="flex",
    align_items="center",
    justify_content="center",
    flex_direction="column",
    gap=8,
)

PREVIEW_BOX_STYLE = me.Style(
    width=80,
    height=80,
    flex_shrink=0,
    border_radius=16,
    overflow="hidden",
    display="flex",
    align_items="center",
    justify_content="center",
    background=me.theme_var("surface-container"),
)


@me.component
def document_uploader(
    candidate: UploadCandidate | None,
    is_processing: bool,
    uploader_key: str,
    on_upload: Callable,
    on_clear: Callable,
    on_generate: Callable,
):
    """
    Uploader when nothing is selected; otherwise a preview row with the
    file details and the clear/generate buttons.
    """
    if candidate is None:
        with me.box(style=DROP_ZONE_STYLE):
            me.icon("upload")
            me.text("Toque ou arraste para selecionar", type="subtitle-1")
            me.text("Suporta PDF e Imagens", type="body-2")
            me.uploader(
                label="Selecionar arquivo",
                on_upload=on_upload,
                accepted_file_types=ACCEPTED_MIME_TYPES,
                key=uploader_key,
                type="flat",
            )
        return

    with me.box(
        style=me.Style(
            display="flex",
            flex_direction="row",
            align_items="center",
            gap=24,
            padding=me.Padding.all(24),
            border_radius=24,
            background=me.theme_var("surface-container-low"),
            flex_wrap="wrap",
        )
    ):
        with me.box(style=PREVIEW_BOX_STYLE):
            if candidate.is_image and candidate.preview_url:
                me.image(
                    src=candidate.preview_url,
                    style=me.Style(width="100%", height="100%", object_fit="cover"),
                )
            else:
                document_type = get_document_type_config(candidate.mime_type)
                me.text(document_type.label if document_type else "PDF", type="caption")

        with me.box(style=me.Style(flex_grow=1)):
            me.text(candidate.name, type="subtitle-1", style=me.Style(font_weight="bold"))
            me.text(candidate.size_label, type="caption")

        with me.box(style=me.Style(display="flex", gap=16, align_items="center")):
            me.button(
                "Remover",
                on_click=on_clear,
                type="stroked",
                disabled=is_processing,
            )
            me.button(
                "Processando" if is_processing else "Gerar Texto",
                on_click=on_generate,
                type="flat",
                disabled=is_processing,
            )
            if is_processing:
                me.progress_spinner(diameter=24)
