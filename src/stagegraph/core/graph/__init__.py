# src/stagegraph/core/graph/__init__.py
"""
# Graph Core — stagegraph

Este pacote define o modelo declarativo do plano de execução de um
stage: uma árvore ordenada e imutável de tasks, onde sub-árvores LOOP
podem ser reexecutadas pelo engine a partir de um sinal de runtime.

## Componentes

- **types**: `GraphType`, `ExecutionStatus`
- **task**: `Task` (Protocol) e `TaskResult`
- **node**: `TaskDefinition`, `TaskGraph`, `DefinedTask`, `TaskNode`
- **cursor**: `GraphCursor`, percurso bidirecional para reentrada de LOOP
- **builder**: `Builder` e as fábricas `build`, `empty_graph`, `singleton`, `task`
- **context**: `BuildContext`, log estruturado e configuração da construção
- **registry**: `TaskRegistry`, resolução explícita de implementações
- **validation**: percurso em profundidade e checagens estruturais
- **describe**: descrição serializável e fingerprint

## Protocolo de redirect de LOOP

O engine executa os filhos do LOOP em ordem. Se o *último* devolver
`REDIRECT`, volta ao primeiro (`cursor.reset()`) e reexecuta a
sub-sequência; se devolver `SUCCEEDED`, sai do loop e segue com o que
vem depois no grafo pai. Este pacote não avalia o sinal: garante apenas
ordem estável e reiniciável.

## Limites Explícitos

- Não executa tasks
- Não persiste grafos
- Não valida semântica de tasks
"""

from .builder import Builder, build, empty_graph, singleton, task
from .context import BuildContext
from .cursor import GraphCursor
from .describe import compute_graph_hash, describe_graph
from .node import (
    DefinedTask,
    TaskDefinition,
    TaskGraph,
    TaskNode,
    TaskRef,
    resolve_implementation_id,
)
from .registry import TaskRegistry
from .task import Task, TaskResult
from .types import ExecutionStatus, GraphType
from .validation import graph_depth, iter_tasks, validate_graph

__all__ = [
    "Builder",
    "BuildContext",
    "DefinedTask",
    "ExecutionStatus",
    "GraphCursor",
    "GraphType",
    "Task",
    "TaskDefinition",
    "TaskGraph",
    "TaskNode",
    "TaskRef",
    "TaskRegistry",
    "TaskResult",
    "build",
    "compute_graph_hash",
    "describe_graph",
    "empty_graph",
    "graph_depth",
    "iter_tasks",
    "resolve_implementation_id",
    "singleton",
    "task",
    "validate_graph",
]
