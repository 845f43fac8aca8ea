# tests/core/config/test_settings.py
"""
Testes da leitura tipada da seção `graph` (GraphSettings).

Os testes asseguram que:
- a ausência da seção produz os defaults (LOOP vazio permitido, sem limite)
- valores válidos são lidos sem conversão implícita
- valores inválidos são rejeitados com InvalidGraphSettingsError
"""

import pytest

from stagegraph.core.config.errors import InvalidGraphSettingsError
from stagegraph.core.config.settings import GraphSettings


def test_defaults_when_section_missing():
    settings = GraphSettings.from_config({})

    assert settings.allow_empty_loop is True
    assert settings.max_depth is None


def test_none_config_uses_defaults():
    assert GraphSettings.from_config(None) == GraphSettings()


def test_reads_explicit_values():
    settings = GraphSettings.from_config({"graph": {"allow_empty_loop": False, "max_depth": 2}})

    assert settings == GraphSettings(allow_empty_loop=False, max_depth=2)


@pytest.mark.parametrize(
    "section",
    [
        {"allow_empty_loop": "no"},
        {"max_depth": 0},
        {"max_depth": -1},
        {"max_depth": True},
        {"max_depth": "3"},
    ],
)
def test_invalid_values_raise(section):
    with pytest.raises(InvalidGraphSettingsError):
        GraphSettings.from_config({"graph": section})


def test_non_dict_section_raises():
    with pytest.raises(InvalidGraphSettingsError):
        GraphSettings.from_config({"graph": ["allow_empty_loop"]})
