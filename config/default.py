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
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv(override=True)


def _api_key_from_env() -> str:
    return os.environ.get("API_KEY") or os.environ.get("GEMINI_API_KEY", "")


@dataclass
class Default:
    """Defaults class"""

    # pylint: disable=invalid-name

    # Gemini
    API_KEY: str = field(default_factory=_api_key_from_env)
    MODEL_ID: str = field(
        default_factory=lambda: os.environ.get("MODEL_ID", "gemini-2.5-flash")
    )
    GENERATION_TEMPERATURE: float = field(
        default_factory=lambda: float(os.environ.get("GENERATION_TEMPERATURE", "0.2"))
    )
    # "gemini" talks to the remote model, "mock" returns a canned description.
    GENERATOR_BACKEND: str = field(
        default_factory=lambda: os.environ.get("GENERATOR_BACKEND", "gemini").lower()
    )

    # Uploads
    MAX_UPLOAD_BYTES: int = 20 * 1024 * 1024
    PDF_PREVIEW_URL: str = (
        "https://upload.wikimedia.org/wikipedia/commons/8/87/PDF_file_icon.svg"
    )

    # Export
    DOWNLOAD_FILE_NAME: str = "descricao_empenho.txt"

    # UI
    APP_TITLE: str = "GERADOR DE EMPENHO"
    APP_SUBTITLE: str = "Arraste um documento e gere a descrição automaticamente."
