# src/stagegraph/core/graph/cursor.py
"""
Cursor bidirecional sobre os filhos diretos de um TaskGraph.

O cursor fica *entre* elementos: `next_index()` é o índice do elemento
que `next(cursor)` devolveria e `previous_index()` o do elemento que
`previous()` devolveria.

É a ferramenta que o engine usa para o protocolo de redirect de LOOP:
ao receber REDIRECT da última task, chama `reset()` e volta a percorrer
o sub-grafo a partir do primeiro filho, sem reconstruir a sequência.

Invariantes:
    - A sequência subjacente é uma tupla imutável
    - Cada cursor mantém apenas a sua própria posição
"""

from __future__ import annotations

from typing import Any, Iterator, Tuple


class GraphCursor:
    """Cursor no estilo list-iterator, navegável nos dois sentidos."""

    def __init__(self, children: Tuple[Any, ...]):
        self._children = tuple(children)
        self._index = 0

    def __iter__(self) -> Iterator[Any]:
        return self

    def __next__(self) -> Any:
        if not self.has_next():
            raise StopIteration
        node = self._children[self._index]
        self._index += 1
        return node

    def __len__(self) -> int:
        return len(self._children)

    def has_next(self) -> bool:
        return self._index < len(self._children)

    def has_previous(self) -> bool:
        return self._index > 0

    def previous(self) -> Any:
        if not self.has_previous():
            raise IndexError("cursor is at the start of the graph")
        self._index -= 1
        return self._children[self._index]

    def next_index(self) -> int:
        return self._index

    def previous_index(self) -> int:
        return self._index - 1

    def reset(self) -> None:
        """Volta para antes do primeiro filho (reentrada de LOOP)."""
        self._index = 0

    def seek(self, index: int) -> None:
        if not 0 <= index <= len(self._children):
            raise IndexError(f"cursor index out of range: {index}")
        self._index = index
