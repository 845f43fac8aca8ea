# src/stagegraph/core/graph/describe.py
"""
Descrição serializável e fingerprint de grafos.

`describe_graph` produz uma estrutura JSON-compatível do grafo, com as
implementações representadas pelo identificador canônico. O fingerprint
usa a mesma política de hashing da configuração, o que permite ao engine
registrar qual plano foi executado sem persistir o grafo em si.
"""

from __future__ import annotations

from typing import Any, Dict

from stagegraph.core.config.hashing import compute_config_hash

from .node import TaskGraph, TaskNode


def _describe_node(node: TaskNode) -> Dict[str, Any]:
    if isinstance(node, TaskGraph):
        return describe_graph(node)
    return {"name": node.name, "implementation": node.implementation_id}


def describe_graph(graph: TaskGraph) -> Dict[str, Any]:
    return {
        "type": graph.type.value,
        "children": [_describe_node(node) for node in graph],
    }


def compute_graph_hash(graph: TaskGraph) -> str:
    """SHA-256 da descrição canônica do grafo (sensível a ordem e tipo)."""
    return compute_config_hash(describe_graph(graph))
