# src/stagegraph/core/graph/types.py
"""
Tipos canônicos do grafo de tasks.

Componentes:
    - GraphType       → como um grafo (ou sub-grafo) deve ser interpretado pelo engine
    - ExecutionStatus → vocabulário de status que uma task devolve ao engine

Princípios fundamentais:
    - Enums possuem valores textuais canônicos e estáveis
    - Nenhuma lógica de execução vive neste módulo
"""

from __future__ import annotations

from enum import Enum


class GraphType(str, Enum):
    """
    Tipo de um grafo, que determina como o engine o percorre.

    Tipos definidos:
        - FULL: a sequência completa de tasks de um stage
        - LOOP: sub-sequência que o engine reexecuta a partir do primeiro
          elemento enquanto a *última* task devolver REDIRECT; termina
          quando a última task devolver SUCCEEDED
        - HEAD: tasks executadas uma vez, antes de uma região paralela
        - TAIL: tasks executadas uma vez, após uma região paralela

    Invariantes:
        - O tipo é atribuído na construção e nunca muda
        - Não existem transições entre tipos
    """
    FULL = "FULL"
    LOOP = "LOOP"
    HEAD = "HEAD"
    TAIL = "TAIL"


class ExecutionStatus(str, Enum):
    """
    Status devolvido por uma task ao engine.

    O core nunca avalia estes valores: eles existem para que `TaskResult`
    e o protocolo de loop compartilhem um único vocabulário com o engine.

        - RUNNING: a task ainda não terminou (o engine a chamará de novo)
        - SUCCEEDED: a task terminou; numa LOOP, sai do loop
        - REDIRECT: numa LOOP, reinicia a partir da primeira task
        - TERMINAL: falha definitiva
    """
    RUNNING = "RUNNING"
    SUCCEEDED = "SUCCEEDED"
    REDIRECT = "REDIRECT"
    TERMINAL = "TERMINAL"

    @property
    def is_complete(self) -> bool:
        return self in (ExecutionStatus.SUCCEEDED, ExecutionStatus.TERMINAL)
