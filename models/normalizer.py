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
"""Formatting rules applied to every generated Nota de Empenho description."""

REQUIRED_PREFIX = "PELA DESPESA EMPENHADA"
REFERENCE_WORD = "REFERENTE"


def normalize_description(raw_text: str | None) -> str:
    """Rewrites raw model output into a valid NE description.

    The model is asked for upper-case plain text starting with
    "PELA DESPESA EMPENHADA REFERENTE A", but nothing guarantees it complies,
    so the rules are enforced here:

    1. Upper-case the text and trim surrounding whitespace.
    2. Drop markdown emphasis: every "**", then any remaining "*".
    3. Ensure the required prefix. Text starting with "REFERENTE" only needs
       "PELA DESPESA EMPENHADA " in front; anything else is wrapped as
       "PELA DESPESA EMPENHADA REFERENTE A <text>".

    Whitespace exposed by removing markers is trimmed too, which keeps the
    function idempotent.
    """
    text = (raw_text or "").upper().strip()
    text = text.replace("**", "").replace("*", "").strip()

    if text.startswith(REQUIRED_PREFIX):
        return text
    if text.startswith(REFERENCE_WORD):
        return f"{REQUIRED_PREFIX} {text}"
    return f"{REQUIRED_PREFIX} {REFERENCE_WORD} A {text}".rstrip()


def uppercase_edit(text: str | None) -> str:
    """Live-edit rule for the result textarea: upper-case only."""
    return (text or "").upper()
