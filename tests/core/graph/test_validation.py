# tests/core/graph/test_validation.py
"""
Testes de percurso e validação estrutural de grafos.

Os testes asseguram que:
- `iter_tasks` desce em sub-grafos na ordem de declaração
- `graph_depth` conta níveis de aninhamento
- `validate_graph` aplica as políticas de LOOP vazio, profundidade e registry
"""

import pytest

from stagegraph.core.config.settings import GraphSettings
from stagegraph.core.exceptions import EmptyLoopError, MaxDepthExceededError, UnknownTaskError
from stagegraph.core.graph.builder import build, empty_graph
from stagegraph.core.graph.registry import TaskRegistry
from stagegraph.core.graph.types import GraphType
from stagegraph.core.graph.validation import graph_depth, iter_tasks, validate_graph


@pytest.fixture
def nested_graph(tasks):
    return build(
        GraphType.FULL,
        lambda b: b.with_task("start", tasks.start)
        .with_loop(
            lambda outer: outer.with_task("deploy", tasks.deploy).with_loop(
                lambda inner: inner.with_task("wait", tasks.wait)
            )
        )
        .with_task("finish", tasks.finish),
    )


def test_iter_tasks_is_depth_first_in_declaration_order(nested_graph):
    assert [t.name for t in iter_tasks(nested_graph)] == ["start", "deploy", "wait", "finish"]


def test_graph_depth(nested_graph, tasks):
    assert graph_depth(nested_graph) == 3
    assert graph_depth(empty_graph(GraphType.FULL)) == 1


def test_validate_returns_tasks_by_default(nested_graph):
    assert [t.name for t in validate_graph(nested_graph)] == ["start", "deploy", "wait", "finish"]


def test_max_depth_exceeded(nested_graph):
    with pytest.raises(MaxDepthExceededError) as excinfo:
        validate_graph(nested_graph, settings=GraphSettings(max_depth=2))

    assert excinfo.value.details == {"depth": 3, "max_depth": 2}


def test_max_depth_at_limit_is_ok(nested_graph):
    assert len(validate_graph(nested_graph, settings=GraphSettings(max_depth=3))) == 4


def test_empty_loop_allowed_by_default(tasks):
    graph = build(GraphType.FULL, lambda b: b.with_task("start", tasks.start).with_loop(lambda l: None))

    assert [t.name for t in validate_graph(graph)] == ["start"]


def test_empty_loop_rejected_when_forbidden(tasks):
    graph = build(GraphType.FULL, lambda b: b.with_task("start", tasks.start).with_loop(lambda l: None))

    with pytest.raises(EmptyLoopError) as excinfo:
        validate_graph(graph, settings=GraphSettings(allow_empty_loop=False))

    assert excinfo.value.details == {"path": [1]}


def test_empty_full_graph_is_valid_even_when_loops_are_strict():
    assert validate_graph(empty_graph(GraphType.FULL), settings=GraphSettings(allow_empty_loop=False)) == []


def test_unregistered_task_is_reported(nested_graph, tasks):
    registry = TaskRegistry()
    registry.register(tasks.start)
    registry.register(tasks.deploy)

    with pytest.raises(UnknownTaskError) as excinfo:
        validate_graph(nested_graph, registry=registry)

    assert excinfo.value.details["task"] == "wait"


def test_fully_registered_graph_validates(nested_graph, tasks):
    registry = TaskRegistry()
    for cls in (tasks.start, tasks.deploy, tasks.wait, tasks.finish):
        registry.register(cls)

    assert len(validate_graph(nested_graph, registry=registry)) == 4
