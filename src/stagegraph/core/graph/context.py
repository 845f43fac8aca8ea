# src/stagegraph/core/graph/context.py
"""
Contexto de construção de grafos.

Este módulo define o `BuildContext`, a estrutura opcional passada ao
builder para:
    - disponibilizar a configuração resolvida (seção `graph`)
    - registrar eventos estruturados de construção
    - coletar warnings não fatais (ex.: LOOP vazio)

Princípios fundamentais:
    - Isolamento por construção (cada definição de stage tem seu contexto)
    - Ausência de logger ou estado global
    - Sem contexto, o builder não registra nada

Invariantes:
    - Eventos sempre incluem `build_id`, `graph_type`, `level` e `timestamp`
    - Warnings são agrupados pelo valor textual do GraphType

Limites explícitos:
    - Não constrói grafos
    - Não persiste eventos
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List

from stagegraph.core.config.settings import GraphSettings

from .types import GraphType


@dataclass
class BuildContext:
    """
    Contexto compartilhado por um builder e todos os seus sub-builders.

    Campos:
        - build_id: identificador da definição sendo construída (ex.: tipo do stage)
        - created_at: timestamp UTC de criação do contexto
        - config: configuração efetiva (defaults + local deep-merge)
        - events: log estruturado de eventos
        - warnings: warnings por tipo de grafo

    A seção `graph` da configuração é validada na criação do contexto.

    Raises:
        InvalidGraphSettingsError: Se a seção `graph` tiver valores inválidos.
    """
    build_id: str
    created_at: datetime
    config: Dict[str, Any] = field(default_factory=dict)

    events: List[Dict[str, Any]] = field(default_factory=list, init=False)
    warnings: Dict[str, List[str]] = field(default_factory=dict, init=False)
    _settings: GraphSettings = field(init=False, repr=False)

    def __post_init__(self) -> None:
        # falha na criação do contexto, antes de qualquer grafo ser construído
        self._settings = GraphSettings.from_config(self.config)

    @property
    def settings(self) -> GraphSettings:
        return self._settings

    # -----------------------------
    # Logging & warnings
    # -----------------------------
    def log(self, *, graph_type: GraphType, level: str, message: str, **extra: Any) -> None:
        event = {
            "build_id": self.build_id,
            "graph_type": GraphType(graph_type).value,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

    def add_warning(self, *, graph_type: GraphType, message: str) -> None:
        key = GraphType(graph_type).value
        if key not in self.warnings:
            self.warnings[key] = []
        self.warnings[key].append(message)
