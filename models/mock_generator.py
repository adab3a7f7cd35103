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
"""Deterministic stand-in for Gemini, for local development without an API key."""

from models.requests import EncodedDocument

MOCK_DESCRIPTION = "aquisição de material de consumo conforme documento anexo"


class MockDescriptionGenerator:
    """Returns a canned description; the document is never sent anywhere."""

    model_name = "mock"

    def __init__(self, text: str = MOCK_DESCRIPTION):
        self.text = text
        self.call_count = 0

    def generate(self, document: EncodedDocument) -> str:
        self.call_count += 1
        return self.text
