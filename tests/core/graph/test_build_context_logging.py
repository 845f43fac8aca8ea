# tests/core/graph/test_build_context_logging.py
"""
Testes de logging estruturado e coleta de warnings no BuildContext.

Os testes asseguram que:
- cada `build()` (incluindo sub-grafos LOOP) registra um evento
- eventos contêm metadados mínimos de rastreabilidade
- LOOP vazio gera warning ou erro conforme a configuração
- falhas do configurator são registradas como payload, por nível de grafo, e propagadas
- configuração `graph` inválida falha já na criação do contexto
"""

from datetime import datetime, timezone

import pytest

from stagegraph.core.config.errors import InvalidGraphSettingsError
from stagegraph.core.exceptions import EmptyLoopError, InvalidTaskArgumentError
from stagegraph.core.graph.builder import Builder, build, empty_graph, singleton
from stagegraph.core.graph.context import BuildContext
from stagegraph.core.graph.types import GraphType


def test_build_logs_one_event_per_graph(build_ctx, tasks):
    build(
        GraphType.FULL,
        lambda b: b.with_task("start", tasks.start).with_loop(lambda l: l.with_task("wait", tasks.wait)),
        ctx=build_ctx,
    )

    assert [(e["graph_type"], e["size"]) for e in build_ctx.events] == [("LOOP", 1), ("FULL", 2)]


def test_event_has_required_fields(build_ctx, tasks):
    singleton(GraphType.HEAD, "start", tasks.start, ctx=build_ctx)

    (event,) = build_ctx.events
    assert event["build_id"] == "deploy-stage"
    assert event["graph_type"] == "HEAD"
    assert event["level"] == "INFO"
    assert event["message"] == "graph built"
    assert isinstance(event["timestamp"], str)


def test_empty_loop_warns_when_allowed(build_ctx, tasks):
    graph = build(GraphType.FULL, lambda b: b.with_loop(lambda l: None), ctx=build_ctx)

    assert list(graph)[0].is_empty()
    assert build_ctx.warnings == {"LOOP": ["empty LOOP graph built"]}


def test_empty_non_loop_graph_does_not_warn(build_ctx):
    empty_graph(GraphType.TAIL, ctx=build_ctx)

    assert build_ctx.warnings == {}


def test_empty_loop_raises_when_forbidden(strict_build_ctx, tasks):
    with pytest.raises(EmptyLoopError):
        build(
            GraphType.FULL,
            lambda b: b.with_task("start", tasks.start).with_loop(lambda l: None),
            ctx=strict_build_ctx,
        )

    assert [(e["level"], e["graph_type"]) for e in strict_build_ctx.events] == [
        ("ERROR", "LOOP"),
        ("ERROR", "FULL"),
    ]
    assert {e["error"]["type"] for e in strict_build_ctx.events} == {"GRAPH_EMPTY_LOOP"}


def test_configurator_failure_is_logged_and_reraised(build_ctx):
    boom = RuntimeError("boom")

    def failing(builder):
        raise boom

    with pytest.raises(RuntimeError) as excinfo:
        build(GraphType.FULL, failing, ctx=build_ctx)

    assert excinfo.value is boom
    (event,) = build_ctx.events
    assert event["message"] == "graph build failed"
    assert event["error"]["type"] == "GRAPH_CONFIGURATOR_FAILED"
    assert event["error"]["details"] == {"exception_class": "RuntimeError"}


def test_direct_with_loop_failure_is_logged(build_ctx, tasks):
    def failing(loop):
        loop.with_task("wait", tasks.wait)
        raise RuntimeError("boom")

    builder = Builder(GraphType.FULL, ctx=build_ctx)

    with pytest.raises(RuntimeError):
        builder.with_loop(failing)

    (event,) = build_ctx.events
    assert event["graph_type"] == "LOOP"
    assert event["message"] == "graph build failed"
    assert event["error"]["type"] == "GRAPH_CONFIGURATOR_FAILED"
    assert builder.build().is_empty()


def test_invalid_argument_is_logged_with_its_code(build_ctx):
    with pytest.raises(InvalidTaskArgumentError):
        singleton(GraphType.FULL, "deploy", None, ctx=build_ctx)

    assert build_ctx.events[-1]["error"]["type"] == "GRAPH_INVALID_ARGUMENT"


def test_no_context_no_side_effects(tasks):
    graph = build(GraphType.FULL, lambda b: b.with_loop(lambda l: None))

    assert len(graph) == 1


@pytest.mark.parametrize(
    "graph_section",
    [
        {"allow_empty_loop": "no"},
        {"max_depth": -4},
        {"allow_empty_loop": "no", "max_depth": -4},
    ],
)
def test_invalid_graph_settings_fail_on_context_creation(graph_section):
    with pytest.raises(InvalidGraphSettingsError):
        BuildContext(
            build_id="bad-stage",
            created_at=datetime(2026, 1, 16, tzinfo=timezone.utc),
            config={"graph": graph_section},
        )


def test_settings_are_parsed_from_config(strict_build_ctx):
    assert strict_build_ctx.settings.allow_empty_loop is False
    assert strict_build_ctx.settings.max_depth is None
