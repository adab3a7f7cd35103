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

import mesop as me


@me.component
def snackbar(is_visible: bool, label: str):
    """A fixed bottom-center toast."""
    with me.box(
        style=me.Style(
            display="block" if is_visible else "none",
            position="fixed",
            bottom=24,
            left="50%",
            transform="translateX(-50%)",
            z_index=1000,
            background=me.theme_var("inverse-surface"),
            color=me.theme_var("inverse-on-surface"),
            padding=me.Padding.symmetric(vertical=12, horizontal=20),
            border_radius=8,
            box_shadow="0 3px 8px rgba(0, 0, 0, 0.3)",
        )
    ):
        me.text(label)
