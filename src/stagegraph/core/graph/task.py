# src/stagegraph/core/graph/task.py
"""
Contrato de Task consumido pelo engine.

Uma Task é a unidade executável referenciada por um `TaskDefinition`.
Este módulo define apenas a interface: o stagegraph nunca chama
`execute`, quem o faz é o engine depois de resolver a implementação
via `TaskRegistry`.

Limites explícitos:
    - Não define retry, timeout ou backoff
    - Não decide por que uma task devolve REDIRECT
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Protocol, runtime_checkable

from .types import ExecutionStatus


@dataclass(frozen=True)
class TaskResult:
    """
    Resultado imutável da execução de uma Task.

    Campos:
        - status: status devolvido ao engine
        - context: valores que a task contribui para o contexto do stage
        - outputs: valores que a task publica para stages seguintes
    """
    status: ExecutionStatus
    context: Dict[str, Any] = field(default_factory=dict)
    outputs: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def succeeded(cls, **context: Any) -> "TaskResult":
        return cls(status=ExecutionStatus.SUCCEEDED, context=dict(context))

    @classmethod
    def redirect(cls, **context: Any) -> "TaskResult":
        return cls(status=ExecutionStatus.REDIRECT, context=dict(context))


@runtime_checkable
class Task(Protocol):
    """
    Contrato mínimo de uma implementação de task.

    A conformidade é estrutural (duck typing): não é necessário herdar
    desta classe, basta expor `execute(stage)`.
    """

    def execute(self, stage: Any) -> TaskResult:
        """Executa a task para o stage informado."""
        ...
