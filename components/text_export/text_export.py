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

import typing

import mesop as me


@me.web_component(path="./text_export.js")
def text_export(
    *,
    text: str,
    file_name: str,
    on_copy: typing.Callable[[me.WebEvent], None] | None = None,
    on_download: typing.Callable[[me.WebEvent], None] | None = None,
    key: str | None = None,
):
    """Copy-to-clipboard and download-as-.txt buttons, run in the browser."""
    return me.insert_web_component(
        key=key,
        name="text-export",
        properties={
            "text": text,
            "fileName": file_name,
        },
        events={
            "copyEvent": on_copy,
            "downloadEvent": on_download,
        },
    )
