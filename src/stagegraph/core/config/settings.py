# src/stagegraph/core/config/settings.py
"""
Interpretação tipada da seção `graph` da configuração.

Chaves reconhecidas:
    graph:
      allow_empty_loop: true   # false → LOOP vazio é erro de configuração
      max_depth: null          # inteiro positivo → limite de aninhamento

Chaves ausentes assumem os defaults abaixo; chaves desconhecidas são
ignoradas para permitir que o engine mantenha sua própria configuração
no mesmo arquivo.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .errors import InvalidGraphSettingsError


@dataclass(frozen=True)
class GraphSettings:
    """Políticas estruturais aplicadas na construção e validação de grafos."""

    allow_empty_loop: bool = True
    max_depth: Optional[int] = None

    @classmethod
    def from_config(cls, config: Optional[Dict[str, Any]]) -> "GraphSettings":
        section = (config or {}).get("graph", {}) or {}
        if not isinstance(section, dict):
            raise InvalidGraphSettingsError(
                f"Seção 'graph' deve ser dict, recebido: {type(section).__name__}"
            )

        allow_empty_loop = section.get("allow_empty_loop", True)
        if not isinstance(allow_empty_loop, bool):
            raise InvalidGraphSettingsError(
                f"graph.allow_empty_loop deve ser bool, recebido: {allow_empty_loop!r}"
            )

        max_depth = section.get("max_depth")
        if max_depth is not None:
            # bool é subclasse de int
            if isinstance(max_depth, bool) or not isinstance(max_depth, int) or max_depth < 1:
                raise InvalidGraphSettingsError(
                    f"graph.max_depth deve ser inteiro positivo ou null, recebido: {max_depth!r}"
                )

        return cls(allow_empty_loop=allow_empty_loop, max_depth=max_depth)
