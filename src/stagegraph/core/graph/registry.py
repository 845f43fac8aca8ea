# src/stagegraph/core/graph/registry.py
"""
Registro explícito de implementações de tasks.

Este módulo define o `TaskRegistry`, que mapeia o identificador canônico
de implementação (`TaskDefinition.implementation_id`) para uma fábrica
que produz a instância executável.

O registry substitui qualquer carregamento reflexivo de classes: o
engine só consegue executar o que foi registrado explicitamente.

Responsabilidades do módulo:
    - Validar unicidade do identificador de implementação
    - Preservar a ordem de registro
    - Resolver um `DefinedTask` para uma instância de `Task`

Invariantes:
    - Cada identificador está registrado no máximo uma vez
    - Nenhum registro parcial é aceito após erro

Limites explícitos:
    - Não executa tasks
    - Não percorre grafos (ver `validation.validate_graph`)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Union

from stagegraph.core.exceptions import (
    DuplicateTaskError,
    GraphConfigurationError,
    InvalidTaskArgumentError,
    UnknownTaskError,
)

from .node import DefinedTask, TaskRef, resolve_implementation_id
from .task import Task


TaskFactory = Callable[[], Task]


@dataclass
class TaskRegistry:
    """
    Registro canônico de fábricas de tasks, indexado por identificador.

    Para uma classe, a fábrica padrão é a própria classe (construtor sem
    argumentos). Para uma chave textual, a fábrica é obrigatória.
    """

    _factories: Dict[str, TaskFactory] = field(default_factory=dict, init=False, repr=False)
    _order: List[str] = field(default_factory=list, init=False, repr=False)

    def register(self, implementation: TaskRef, factory: Optional[TaskFactory] = None) -> str:
        key = resolve_implementation_id(implementation)

        if factory is None:
            if not isinstance(implementation, type):
                raise InvalidTaskArgumentError(
                    message="Chave textual exige uma fábrica explícita",
                    details={"implementation_id": key},
                    hint="Use register(key, factory) ou registre a classe da task.",
                )
            factory = implementation

        if not callable(factory):
            raise InvalidTaskArgumentError(
                message="Fábrica de task deve ser chamável",
                details={"implementation_id": key},
            )

        if key in self._factories:
            raise DuplicateTaskError(
                message=f"Duplicate task implementation: {key}",
                details={"implementation_id": key},
            )

        self._factories[key] = factory
        self._order.append(key)
        return key

    def has(self, implementation: Union[TaskRef, DefinedTask]) -> bool:
        return self._key_for(implementation) in self._factories

    def keys(self) -> List[str]:
        return list(self._order)

    def resolve(self, task: DefinedTask) -> Task:
        """
        Resolve e instancia a implementação de uma task.

        Raises:
            UnknownTaskError: Se o identificador não estiver registrado.
            GraphConfigurationError: Se a fábrica não produzir um `Task`.
        """
        key = task.implementation_id
        if key not in self._factories:
            raise UnknownTaskError(
                message=f"No task registered for '{key}'",
                details={"task": task.name, "implementation_id": key},
                hint="Registre a implementação no TaskRegistry antes de executar o grafo.",
            )

        instance = self._factories[key]()
        if not isinstance(instance, Task):
            raise GraphConfigurationError(
                message="Fábrica registrada não produziu um Task",
                details={
                    "implementation_id": key,
                    "received": instance.__class__.__name__,
                },
                hint="A instância deve expor execute(stage) -> TaskResult.",
            )
        return instance

    @staticmethod
    def _key_for(implementation: Union[TaskRef, DefinedTask]) -> str:
        if not isinstance(implementation, (str, type)) and isinstance(implementation, DefinedTask):
            return implementation.implementation_id
        return resolve_implementation_id(implementation)
