# src/stagegraph/__init__.py
"""
stagegraph — modelo declarativo do plano de execução de stages.

Um stage descreve suas tasks como uma árvore ordenada e imutável,
construída por um builder:

    from stagegraph import GraphType, build

    graph = build(GraphType.FULL, lambda b: (
        b.with_task("start", StartTask)
         .with_loop(lambda loop: loop.with_task("poll", PollTask))
         .with_task("finish", FinishTask)
    ))

O grafo resultante é entregue a um engine de execução externo, que o
percorre e aplica o protocolo de redirect dos sub-grafos LOOP.

Limites explícitos:
    - Não executa tasks
    - Não persiste grafos
    - Não valida semântica de tasks
"""

from .core.graph import (
    Builder,
    BuildContext,
    ExecutionStatus,
    GraphType,
    Task,
    TaskDefinition,
    TaskGraph,
    TaskRegistry,
    TaskResult,
    build,
    empty_graph,
    singleton,
    task,
)

__all__ = [
    "Builder",
    "BuildContext",
    "ExecutionStatus",
    "GraphType",
    "Task",
    "TaskDefinition",
    "TaskGraph",
    "TaskRegistry",
    "TaskResult",
    "build",
    "empty_graph",
    "singleton",
    "task",
]
