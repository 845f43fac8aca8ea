# src/stagegraph/core/graph/builder.py
"""
Builder de grafos de tasks e superfície de fábricas estáticas.

Fluxo típico de um autor de stage:

    graph = build(GraphType.FULL, lambda b: (
        b.with_task("prepare", PrepareTask)
         .with_loop(lambda loop: (
             loop.with_task("deploy", DeployTask)
                 .with_task("wait", WaitForUpInstancesTask)
         ))
         .with_task("cleanup", CleanupTask)
    ))

O configurator recebe um `Builder`, acumula nós em ordem de inserção e
`build()` congela a lista num `TaskGraph` imutável.

Decisões arquiteturais:
    - O builder é mutável e de uso exclusivo durante o configurator
    - `with_loop` cria um builder independente (LOOP) e anexa o resultado
      como um único filho, nunca achatado
    - Cada `build()` tira um snapshot da lista corrente
    - Exceções do configurator propagam inalteradas para quem chamou `build`

Limites explícitos:
    - Não executa tasks nem avalia o sinal de redirect
    - Não resolve implementações
"""

from __future__ import annotations

from typing import Any, Callable, List, Optional

from stagegraph.core.errors import exception_to_error
from stagegraph.core.exceptions import (
    EmptyLoopError,
    GraphConfigurationError,
    InvalidTaskArgumentError,
)

from .context import BuildContext
from .node import TaskDefinition, TaskGraph, TaskNode, TaskRef
from .types import GraphType


Configurator = Callable[["Builder"], Any]


def _coerce_graph_type(graph_type: Any) -> GraphType:
    try:
        return GraphType(graph_type)
    except ValueError as exc:
        raise GraphConfigurationError(
            message="Tipo de grafo inválido",
            details={"type": repr(graph_type)},
            hint="Use um dos valores de GraphType (FULL, LOOP, HEAD, TAIL).",
        ) from exc


def _check_configurator(configurator: Any) -> None:
    if not callable(configurator):
        raise GraphConfigurationError(
            message="Configurator deve ser chamável",
            details={"received": configurator.__class__.__name__},
            hint="Passe uma função que receba o Builder.",
        )


class Builder:
    """
    Acumulador mutável de nós para um único GraphType.

    Um `BuildContext` opcional é compartilhado com os sub-builders de
    loop; com ele, cada `build()` é registrado e a política de LOOP vazio
    da configuração é aplicada.
    """

    def __init__(self, graph_type: GraphType, *, ctx: Optional[BuildContext] = None):
        self.type = _coerce_graph_type(graph_type)
        self._ctx = ctx
        self._nodes: List[TaskNode] = []

    def with_task(self, task: Any, implementation: Optional[TaskRef] = None) -> "Builder":
        """
        Adiciona uma task ao grafo corrente.

        Aceita duas formas:
            - `with_task(name, implementation)`: cria um TaskDefinition
            - `with_task(node)`: anexa um TaskDefinition ou TaskGraph já construído

        Nada é anexado se a validação falhar.

        Raises:
            InvalidTaskArgumentError: Se nome ou implementação estiverem ausentes,
                ou se um nó for passado junto com uma implementação.
        """
        if isinstance(task, (TaskDefinition, TaskGraph)):
            if implementation is not None:
                raise InvalidTaskArgumentError(
                    message="Nó já construído não aceita implementação adicional",
                    details={"node": task.__class__.__name__},
                    hint="Use with_task(node) ou with_task(name, implementation).",
                )
            node: TaskNode = task
        else:
            node = TaskDefinition(task, implementation)

        self._nodes.append(node)
        return self

    def with_loop(self, configurator: Configurator) -> "Builder":
        """
        Adiciona um sub-grafo LOOP.

        O sub-grafo roda depois de todas as tasks já adicionadas e antes de
        qualquer task adicionada em seguida. Se a última task do sub-grafo
        devolver REDIRECT, o engine reexecuta o sub-grafo desde o início;
        se devolver SUCCEEDED, o engine sai do loop.
        """
        _check_configurator(configurator)
        loop_builder = Builder(GraphType.LOOP, ctx=self._ctx)
        self._nodes.append(loop_builder._configure(configurator))
        return self

    def _configure(self, configurator: Configurator) -> TaskGraph:
        """
        Executa o configurator sobre este builder e congela o resultado.

        Ponto único de registro de falhas: com contexto, cada nível de grafo
        abortado registra um evento ERROR (o LOOP interno e depois o pai),
        e a exceção original é propagada sem alteração.
        """
        try:
            configurator(self)
            return self.build()
        except Exception as exc:
            if self._ctx is not None:
                self._ctx.log(
                    graph_type=self.type,
                    level="ERROR",
                    message="graph build failed",
                    error=exception_to_error(exc).to_dict(),
                )
            raise

    def build(self) -> TaskGraph:
        graph = TaskGraph(self.type, tuple(self._nodes))

        if self._ctx is not None:
            if graph.type is GraphType.LOOP and graph.is_empty():
                if not self._ctx.settings.allow_empty_loop:
                    raise EmptyLoopError(
                        message="Sub-grafo LOOP sem tasks",
                        details={"build_id": self._ctx.build_id},
                        hint="Adicione tasks ao loop ou habilite graph.allow_empty_loop.",
                    )
                self._ctx.add_warning(graph_type=graph.type, message="empty LOOP graph built")
            self._ctx.log(
                graph_type=graph.type,
                level="INFO",
                message="graph built",
                size=len(graph),
            )

        return graph


# ---------------------------------------------------------------------------
# Fábricas estáticas
# ---------------------------------------------------------------------------

def build(
    graph_type: GraphType,
    configurator: Configurator,
    *,
    ctx: Optional[BuildContext] = None,
) -> TaskGraph:
    """
    Constrói um novo TaskGraph.

    Cria um Builder do tipo informado, executa o configurator sobre ele e
    devolve o grafo finalizado. Se o configurator falhar, a exceção é
    registrada no contexto (quando houver) e propagada sem alteração;
    nenhum grafo parcial é produzido.

    Raises:
        GraphConfigurationError: Se o tipo for inválido ou o configurator
            não for chamável.
    """
    builder = Builder(graph_type, ctx=ctx)
    _check_configurator(configurator)
    return builder._configure(configurator)


def empty_graph(graph_type: GraphType, *, ctx: Optional[BuildContext] = None) -> TaskGraph:
    """Cria um TaskGraph vazio."""
    return build(graph_type, lambda builder: None, ctx=ctx)


def singleton(
    graph_type: GraphType,
    name: str,
    implementation: TaskRef,
    *,
    ctx: Optional[BuildContext] = None,
) -> TaskGraph:
    """Cria um TaskGraph com uma única task."""
    return build(graph_type, lambda builder: builder.with_task(name, implementation), ctx=ctx)


def task(name: str, implementation: TaskRef) -> TaskDefinition:
    """Cria um TaskDefinition avulso, para composição via `with_task(node)`."""
    return TaskDefinition(name, implementation)
