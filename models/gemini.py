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
"""Gemini calls for Nota de Empenho descriptions."""

import base64
import functools

from google import genai
from google.genai import types

from common.analytics import get_logger, track_model_call
from config.default import Default
from models.requests import EncodedDocument

logger = get_logger(__name__)

EMPENHO_DESCRIPTION_PROMPT = """
Analise o documento anexo (pode ser uma fatura, contrato, ordem de serviço, ou requisição).
O seu objetivo é gerar o texto da "Descrição" para uma Nota de Empenho (NE) do setor público.

Regras Estritas:
1. A saída deve estar EXCLUSIVAMENTE em CAIXA ALTA (letras maiúsculas).
2. O texto deve começar OBRIGATORIAMENTE com a frase exata: "PELA DESPESA EMPENHADA REFERENTE A".
3. Identifique o objeto da despesa de forma sucinta mas completa (ex: aquisição de material de consumo, prestação de serviço de limpeza, etc).
4. Se houver número de processo, pregão, contrato ou nota fiscal visível, inclua-os no texto.
5. Não use markdown, apenas texto puro.

Exemplo de formato esperado:
"PELA DESPESA EMPENHADA REFERENTE A AQUISIÇÃO DE MATERIAIS DE ESCRITÓRIO PARA ATENDER AS NECESSIDADES DA SECRETARIA MUNICIPAL DE SAÚDE, CONFORME PREGÃO ELETRÔNICO N. 12/2024 E CONTRATO N. 05/2024."
"""


@functools.lru_cache(maxsize=1)
def get_client() -> genai.Client:
    """Returns the shared Gemini client, created on first use."""
    cfg = Default()
    if not cfg.API_KEY:
        logger.warning("API_KEY is not set; Gemini calls will fail.")
    return genai.Client(api_key=cfg.API_KEY)


class GeminiDescriptionGenerator:
    """Sends a document and the NE prompt to Gemini and returns the raw text."""

    def __init__(self, client: genai.Client | None = None, model_name: str | None = None,
                 temperature: float | None = None):
        cfg = Default()
        self._client = client
        self.model_name = model_name or cfg.MODEL_ID
        self.temperature = (
            cfg.GENERATION_TEMPERATURE if temperature is None else temperature
        )

    @property
    def client(self) -> genai.Client:
        if self._client is None:
            self._client = get_client()
        return self._client

    def generate(self, document: EncodedDocument) -> str:
        """Single, non-retrying call. An absent response text is returned as ""."""
        document_part = types.Part.from_bytes(
            data=base64.b64decode(document.payload),
            mime_type=document.mime_type,
        )
        config = types.GenerateContentConfig(temperature=self.temperature)

        with track_model_call(self.model_name, mime_type=document.mime_type):
            response = self.client.models.generate_content(
                model=self.model_name,
                contents=[document_part, EMPENHO_DESCRIPTION_PROMPT],
                config=config,
            )

        return response.text or ""
