"""
stagegraph — Canonical Error Structures (v1)

Este módulo define o formato serializável de erros do stagegraph e o
catálogo de códigos estáveis.

Erros registrados no log estruturado do `BuildContext` usam sempre este
payload, nunca a exceção crua nem stack trace.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

from .exceptions import GraphException


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class GraphErrorPayload:
    """
    Payload canônico de erro do stagegraph.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados relevantes para diagnóstico
    - hint: ação sugerida ao autor do stage
    """

    type: str
    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro (v1)
# ---------------------------------------------------------------------------

# Construção
GRAPH_INVALID_ARGUMENT = "GRAPH_INVALID_ARGUMENT"
GRAPH_CONFIGURATION_ERROR = "GRAPH_CONFIGURATION_ERROR"
GRAPH_EMPTY_LOOP = "GRAPH_EMPTY_LOOP"
GRAPH_MAX_DEPTH_EXCEEDED = "GRAPH_MAX_DEPTH_EXCEEDED"
GRAPH_CONFIGURATOR_FAILED = "GRAPH_CONFIGURATOR_FAILED"

# Registry
REGISTRY_UNKNOWN_TASK = "REGISTRY_UNKNOWN_TASK"
REGISTRY_DUPLICATE_TASK = "REGISTRY_DUPLICATE_TASK"


def exception_to_error(exc: BaseException) -> GraphErrorPayload:
    """Converte exceções em GraphErrorPayload.

    Regras:
    - GraphException: usa `code`, `message`, `details` e `hint` da própria exceção.
    - Outras exceções (levantadas pelo configurator do autor do stage):
      encapsular como GRAPH_CONFIGURATOR_FAILED sem expor stack trace.
    """
    if isinstance(exc, GraphException):
        return GraphErrorPayload(
            type=exc.code,
            message=exc.message,
            details=dict(exc.details or {}),
            hint=exc.hint,
        )

    return GraphErrorPayload(
        type=GRAPH_CONFIGURATOR_FAILED,
        message=str(exc) or "Falha inesperada no configurator",
        details={"exception_class": exc.__class__.__name__},
        hint="Verifique o configurator passado para build/with_loop",
    )
