"""
stagegraph — Canonical Exceptions (v1)

Este módulo define as exceções tipadas levantadas durante a construção,
resolução e validação de grafos de tasks.

Objetivo:
- Permitir que builder, registry e validação levantem exceções semânticas tipadas
- Facilitar o mapeamento determinístico para GraphErrorPayload (`core.errors`)
- Manter compatibilidade com as exceções built-in equivalentes
  (`ValueError`, `LookupError`) para quem captura de forma genérica

Regras:
- Exceções carregam apenas dados estruturados (serializáveis) em `details`.
- Cada classe declara um código estável em `code`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, Optional


@dataclass(frozen=True)
class GraphException(Exception):
    """Base class para exceções do stagegraph.

    Importante:
    - Sempre carregar dados estruturados em `details`
    - Mensagem deve ser curta e humana
    """

    code: ClassVar[str] = "GRAPH_ERROR"

    message: str
    details: Dict[str, Any] = field(default_factory=dict)
    hint: Optional[str] = None

    def __str__(self) -> str:
        return self.message


# ---------------------------------------------------------------------------
# Construção
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class InvalidTaskArgumentError(GraphException, ValueError):
    """Nome ou referência de implementação ausente/inválido para uma task."""

    code: ClassVar[str] = "GRAPH_INVALID_ARGUMENT"


@dataclass(frozen=True)
class GraphConfigurationError(GraphException):
    """Uso inválido da API de construção ou política estrutural violada."""

    code: ClassVar[str] = "GRAPH_CONFIGURATION_ERROR"


@dataclass(frozen=True)
class EmptyLoopError(GraphConfigurationError):
    """Sub-grafo LOOP sem tasks quando a configuração proíbe loops vazios."""

    code: ClassVar[str] = "GRAPH_EMPTY_LOOP"


@dataclass(frozen=True)
class MaxDepthExceededError(GraphConfigurationError):
    """Aninhamento de sub-grafos acima de `graph.max_depth`."""

    code: ClassVar[str] = "GRAPH_MAX_DEPTH_EXCEEDED"


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class UnknownTaskError(GraphException, LookupError):
    """Identificador de implementação sem registro no TaskRegistry."""

    code: ClassVar[str] = "REGISTRY_UNKNOWN_TASK"


@dataclass(frozen=True)
class DuplicateTaskError(GraphException, ValueError):
    """Identificador de implementação registrado mais de uma vez."""

    code: ClassVar[str] = "REGISTRY_DUPLICATE_TASK"
