# src/stagegraph/core/graph/validation.py
"""
Percurso e validação estrutural de grafos já construídos.

Este módulo oferece ao engine (ou a testes) uma checagem pré-execução
análoga a um planner: percorre o grafo em profundidade, na ordem de
declaração, e verifica políticas estruturais explícitas.

Checagens (todas opt-in):
    - LOOP vazio, quando `settings.allow_empty_loop` é falso
    - profundidade acima de `settings.max_depth`
    - tasks sem implementação registrada, quando um registry é informado

Decisões arquiteturais:
    - `iter(graph)` continua não recursivo; a descida é feita aqui,
      explicitamente, por quem precisa dela
    - A ordem de percurso é determinística para o mesmo grafo
    - Violações são falhas fatais, nunca corrigidas automaticamente

Limites explícitos:
    - Não executa tasks
    - Não valida semântica de tasks
"""

from __future__ import annotations

from typing import Iterator, List, Optional

from stagegraph.core.config.settings import GraphSettings
from stagegraph.core.exceptions import EmptyLoopError, MaxDepthExceededError, UnknownTaskError

from .node import TaskDefinition, TaskGraph
from .registry import TaskRegistry
from .types import GraphType


def iter_tasks(graph: TaskGraph) -> Iterator[TaskDefinition]:
    """Percorre as tasks do grafo em profundidade, na ordem de declaração."""
    for node in graph:
        if isinstance(node, TaskGraph):
            yield from iter_tasks(node)
        else:
            yield node


def graph_depth(graph: TaskGraph) -> int:
    """Profundidade de aninhamento: 1 para um grafo sem sub-grafos."""
    nested = [graph_depth(node) for node in graph if isinstance(node, TaskGraph)]
    return 1 + max(nested, default=0)


def _check_loops(graph: TaskGraph, settings: GraphSettings, path: List[int]) -> None:
    if graph.type is GraphType.LOOP and graph.is_empty() and not settings.allow_empty_loop:
        raise EmptyLoopError(
            message="Sub-grafo LOOP sem tasks",
            details={"path": path},
            hint="Adicione tasks ao loop ou habilite graph.allow_empty_loop.",
        )
    for index, node in enumerate(graph):
        if isinstance(node, TaskGraph):
            _check_loops(node, settings, path + [index])


def validate_graph(
    graph: TaskGraph,
    *,
    registry: Optional[TaskRegistry] = None,
    settings: Optional[GraphSettings] = None,
) -> List[TaskDefinition]:
    """
    Valida a estrutura de um grafo e devolve suas tasks em ordem de declaração.

    Args:
        graph (TaskGraph): Grafo a validar.
        registry (Optional[TaskRegistry]): Se informado, toda task precisa
            estar registrada.
        settings (Optional[GraphSettings]): Políticas estruturais; o default
            aceita LOOP vazio e não limita profundidade.

    Returns:
        List[TaskDefinition]: Tasks em profundidade, na ordem de declaração.

    Raises:
        EmptyLoopError: LOOP vazio (raiz ou aninhado) com `allow_empty_loop` falso.
        MaxDepthExceededError: Profundidade acima de `max_depth`.
        UnknownTaskError: Task sem implementação registrada.
    """
    settings = settings or GraphSettings()

    if settings.max_depth is not None:
        depth = graph_depth(graph)
        if depth > settings.max_depth:
            raise MaxDepthExceededError(
                message=f"Graph depth {depth} exceeds max_depth {settings.max_depth}",
                details={"depth": depth, "max_depth": settings.max_depth},
                hint="Reduza o aninhamento de loops ou aumente graph.max_depth.",
            )

    _check_loops(graph, settings, [])

    tasks = list(iter_tasks(graph))
    if registry is not None:
        for definition in tasks:
            if not registry.has(definition):
                raise UnknownTaskError(
                    message=f"No task registered for '{definition.implementation_id}'",
                    details={
                        "task": definition.name,
                        "implementation_id": definition.implementation_id,
                    },
                    hint="Registre a implementação no TaskRegistry antes de executar o grafo.",
                )

    return tasks
