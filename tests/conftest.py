# tests/conftest.py
"""
Fixtures compartilhados para testes do stagegraph.

Este módulo define fixtures reutilizáveis que fornecem:
- configurações mínimas em YAML (defaults e overrides locais)
- classes de task dummy, com nomes qualificados distintos
- um BuildContext determinístico

Decisões arquiteturais:
    - Tasks dummy utilizam duck typing em vez de herança
    - Imports do core são realizados de forma lazy para
      melhorar a clareza de erros durante falhas

Invariantes:
    - Nenhuma fixture realiza I/O
    - Nenhuma fixture executa tasks
"""

from datetime import datetime, timezone
from types import SimpleNamespace

import pytest


# =====================================================
# Config fixtures
# =====================================================

@pytest.fixture
def project_like_config_defaults_yaml() -> str:
    """
    YAML de configuração padrão (defaults) semelhante ao `config/config.defaults.yaml`.

    Inclui uma seção `engine` que o stagegraph não interpreta, para
    garantir que o loader preserva chaves de outros consumidores.
    """
    return """\
graph:
  allow_empty_loop: true
  max_depth: null
engine:
  redirect_limit: 100
"""


@pytest.fixture
def project_like_config_local_yaml() -> str:
    """YAML de overrides locais: torna a política de LOOP estrita e limita profundidade."""
    return """\
graph:
  allow_empty_loop: false
  max_depth: 3
"""


# =====================================================
# Task fixtures
# =====================================================

class StartTask:
    def execute(self, stage):
        from stagegraph.core.graph.task import TaskResult

        return TaskResult.succeeded(started=True)


class DeployTask:
    def execute(self, stage):
        from stagegraph.core.graph.task import TaskResult

        return TaskResult.succeeded()


class WaitTask:
    def execute(self, stage):
        from stagegraph.core.graph.task import TaskResult

        return TaskResult.succeeded()


class FinishTask:
    def execute(self, stage):
        from stagegraph.core.graph.task import TaskResult

        return TaskResult.succeeded(finished=True)


class NotATask:
    """Não expõe `execute`: não satisfaz o protocolo Task."""


@pytest.fixture
def tasks() -> SimpleNamespace:
    """
    Classes de task dummy com nomes qualificados distintos.

    São declaradas no nível do módulo (e não dentro da fixture) para que
    cada classe tenha um `__qualname__` único e, portanto, um identificador
    canônico de implementação único.
    """
    return SimpleNamespace(
        start=StartTask,
        deploy=DeployTask,
        wait=WaitTask,
        finish=FinishTask,
        invalid=NotATask,
    )


# =====================================================
# BuildContext fixtures
# =====================================================

@pytest.fixture
def graph_config() -> dict:
    """Configuração já resolvida com os defaults da seção `graph`."""
    return {"graph": {"allow_empty_loop": True, "max_depth": None}}


@pytest.fixture
def build_ctx(graph_config):
    """BuildContext determinístico (build_id e created_at fixos)."""
    from stagegraph.core.graph.context import BuildContext

    return BuildContext(
        build_id="deploy-stage",
        created_at=datetime(2026, 1, 16, 0, 0, 0, tzinfo=timezone.utc),
        config=graph_config,
    )


@pytest.fixture
def strict_build_ctx():
    """BuildContext cuja configuração proíbe LOOP vazio."""
    from stagegraph.core.graph.context import BuildContext

    return BuildContext(
        build_id="strict-stage",
        created_at=datetime(2026, 1, 16, 0, 0, 0, tzinfo=timezone.utc),
        config={"graph": {"allow_empty_loop": False}},
    )
