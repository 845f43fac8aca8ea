# src/stagegraph/core/graph/node.py
"""
Nós do grafo de tasks.

Um nó é uma de duas variantes:
    - TaskDefinition (folha): uma task individual, nome + implementação
    - TaskGraph (composto): sequência ordenada e imutável de nós, com um GraphType

`TaskNode` é a união das duas; o consumidor distingue as variantes
por `isinstance`, não por uma hierarquia aberta de subclasses.

Invariantes:
    - Ambas as variantes são imutáveis após a construção
    - A ordem dos filhos de um TaskGraph é exatamente a ordem de inserção
    - Sub-grafos aninhados nunca são achatados no pai

Limites explícitos:
    - Não executa tasks
    - Não resolve implementações (ver `registry`)
    - Não valida semântica de tasks
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Protocol, Tuple, Type, Union, runtime_checkable

from stagegraph.core.exceptions import GraphConfigurationError, InvalidTaskArgumentError

from .cursor import GraphCursor
from .task import Task
from .types import GraphType


# Chave simbólica estável ou classe que implementa a task.
TaskRef = Union[str, Type[Task]]

# Prefixo do espaço de nomes das chaves textuais. Ids de classe são
# formados só por identificadores separados por ponto e nunca contêm ":".
KEY_PREFIX = "key:"


def resolve_implementation_id(implementation: TaskRef) -> str:
    """
    Deriva o identificador canônico de uma referência de implementação.

    - classe → nome qualificado global (`modulo.NomeQualificado`)
    - string → `key:<chave>`, num espaço de nomes separado do das classes

    A derivação é determinística: a mesma referência produz sempre o
    mesmo identificador, e referências distintas produzem identificadores
    distintos. Por isso classes locais (declaradas dentro de funções) são
    rejeitadas: duas delas podem compartilhar `__qualname__`.

    Raises:
        InvalidTaskArgumentError: Se a referência estiver ausente, vazia,
            for uma classe local ou não for classe nem string.
    """
    if isinstance(implementation, type):
        if "<locals>" in implementation.__qualname__:
            raise InvalidTaskArgumentError(
                message="Classe local não tem nome qualificado global",
                details={"implementation": implementation.__qualname__},
                hint="Declare a task no nível do módulo ou registre-a por chave textual.",
            )
        return f"{implementation.__module__}.{implementation.__qualname__}"
    if isinstance(implementation, str) and implementation.strip():
        return f"{KEY_PREFIX}{implementation}"
    raise InvalidTaskArgumentError(
        message="Referência de implementação ausente ou inválida",
        details={"implementation": repr(implementation)},
        hint="Informe a classe da task ou uma chave não vazia registrada no TaskRegistry.",
    )


@runtime_checkable
class DefinedTask(Protocol):
    """
    Abstração acima de TaskDefinition: qualquer objeto com nome e
    identificador canônico de implementação pode ser resolvido pelo
    TaskRegistry, mesmo que não tenha sido produzido pelo builder.
    """

    @property
    def name(self) -> str:
        ...

    @property
    def implementation_id(self) -> str:
        ...


@dataclass(frozen=True)
class TaskDefinition:
    """
    Uma task individual do grafo.

    Campos:
        - name: nome legível da task (não vazio)
        - implementation: referência crua à implementação (classe ou chave)

    Raises:
        InvalidTaskArgumentError: Se `name` ou `implementation` estiverem ausentes.
    """
    name: str
    implementation: TaskRef

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise InvalidTaskArgumentError(
                message="Nome da task ausente ou vazio",
                details={"name": repr(self.name)},
                hint="Informe um nome não vazio para a task.",
            )
        # valida a referência sem armazenar o id derivado
        resolve_implementation_id(self.implementation)

    @property
    def implementation_id(self) -> str:
        return resolve_implementation_id(self.implementation)


@dataclass(frozen=True)
class TaskGraph:
    """
    Grafo ou sub-grafo de tasks.

    A construção suportada é via `Builder` / `build(...)`; o construtor é
    público apenas para testes. `children` é copiado para uma tupla, de
    modo que mutações posteriores da lista de origem não afetam o grafo.

    Operações:
        - iter(graph): filhos diretos em ordem, reiniciável a cada chamada
        - graph.cursor(): cursor bidirecional novo a cada chamada
        - graph.is_empty(): O(1)
        - graph.type: o GraphType

    Sub-grafos aninhados aparecem como um único elemento; descer neles é
    decisão de quem percorre.
    """
    type: GraphType
    children: Tuple["TaskNode", ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.type, GraphType):
            raise GraphConfigurationError(
                message="Tipo de grafo inválido",
                details={"type": repr(self.type)},
                hint="Use um dos valores de GraphType (FULL, LOOP, HEAD, TAIL).",
            )
        children = tuple(self.children)
        for index, child in enumerate(children):
            if not isinstance(child, (TaskDefinition, TaskGraph)):
                raise GraphConfigurationError(
                    message="Filho de grafo deve ser TaskDefinition ou TaskGraph",
                    details={"index": index, "received": child.__class__.__name__},
                )
        object.__setattr__(self, "children", children)

    def __iter__(self) -> Iterator["TaskNode"]:
        return iter(self.children)

    def __len__(self) -> int:
        return len(self.children)

    def cursor(self) -> GraphCursor:
        return GraphCursor(self.children)

    def is_empty(self) -> bool:
        return len(self.children) == 0


TaskNode = Union[TaskDefinition, TaskGraph]
