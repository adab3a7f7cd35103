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

from models.normalizer import normalize_description, uppercase_edit


def test_prepends_prefix_to_referente():
    assert normalize_description("REFERENTE A TESTE") == "PELA DESPESA EMPENHADA REFERENTE A TESTE"


def test_lowercase_prefix_is_accepted_after_uppercasing():
    assert (
        normalize_description("pela despesa empenhada referente a compra de papel")
        == "PELA DESPESA EMPENHADA REFERENTE A COMPRA DE PAPEL"
    )


def test_strips_markdown_and_wraps_with_full_prefix():
    assert (
        normalize_description("Aquisição de **material** de limpeza")
        == "PELA DESPESA EMPENHADA REFERENTE A AQUISIÇÃO DE MATERIAL DE LIMPEZA"
    )


def test_single_asterisks_are_removed():
    assert (
        normalize_description("PELA DESPESA EMPENHADA REFERENTE A *ITEM* UNICO")
        == "PELA DESPESA EMPENHADA REFERENTE A ITEM UNICO"
    )


def test_trims_surrounding_whitespace():
    assert (
        normalize_description("\n  pela despesa empenhada referente a café \n")
        == "PELA DESPESA EMPENHADA REFERENTE A CAFÉ"
    )


def test_empty_and_missing_text():
    assert normalize_description("") == "PELA DESPESA EMPENHADA REFERENTE A"
    assert normalize_description(None) == "PELA DESPESA EMPENHADA REFERENTE A"


@pytest.mark.parametrize(
    "raw",
    [
        "",
        "   ",
        "**",
        "FOO **",
        "** bar",
        "referente",
        "referente a serviço de limpeza",
        "*pela despesa empenhada*",
        "Prestação de serviço **urgente**, contrato n. 05/2024",
        "pela despesa empenhada referente a compra de papel",
        "straße",
    ],
)
def test_normalize_is_idempotent(raw):
    once = normalize_description(raw)
    assert normalize_description(once) == once
    assert once.startswith("PELA DESPESA EMPENHADA")


def test_uppercase_edit_only_uppercases():
    assert uppercase_edit("texto **livre**") == "TEXTO **LIVRE**"
    assert uppercase_edit(None) == ""
