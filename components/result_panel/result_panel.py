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

from typing import Callable

import mesop as me

from components.text_export.text_export import text_export

RESULT_TEXTAREA_KEY = "empenho_result_textarea"


@me.component
def result_panel(
    text: str,
    file_name: str,
    editable: bool,
    on_input: Callable,
    on_edit: Callable,
    on_reset: Callable,
    on_copy: Callable,
    on_download: Callable,
):
    """Editable description with the reset, edit, download and copy actions."""
    with me.box(
        style=me.Style(
            display="flex",
            flex_direction="column",
            gap=16,
            padding=me.Padding(top=16),
            border=me.Border(
                top=me.BorderSide(width=1, style="solid", color=me.theme_var("outline-variant"))
            ),
        )
    ):
        with me.box(
            style=me.Style(
                display="flex",
                justify_content="space-between",
                align_items="center",
            )
        ):
            me.text("DESCRIÇÃO DA NOTA DE EMPENHO", type="subtitle-2")
            if editable:
                me.text("Editável", type="caption", style=me.Style(color=me.theme_var("primary")))

        me.textarea(
            key=RESULT_TEXTAREA_KEY,
            value=text,
            on_input=on_input,
            readonly=not editable,
            placeholder="O texto gerado aparecerá aqui...",
            rows=8,
            style=me.Style(width="100%", font_family="monospace"),
        )

        with me.box(
            style=me.Style(
                display="flex",
                flex_direction="row",
                justify_content="flex-end",
                gap=12,
                flex_wrap="wrap",
            )
        ):
            me.button("Limpar tudo", on_click=on_reset, type="stroked")
            me.button("Editar", on_click=on_edit, type="stroked", disabled=not editable)
            text_export(
                text=text,
                file_name=file_name,
                on_copy=on_copy,
                on_download=on_download,
                key="empenho_text_export",
            )

        me.text(
            "Verifique os dados (contratos, valores) antes de efetivar.",
            type="caption",
            style=me.Style(text_align="center"),
        )
