"""Outline nodes and the ordered outline that holds them."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Union

from .errors import ErrorKind, TopDownError


@dataclass
class Node:
    """One entry of the outline: its hierarchical order and its text."""

    order: str = ""
    content: str = ""

    def serialize(self) -> str:
        """The node in the formatted outline notation."""
        return f"orden({self.order})contenido({self.content});"

    def __str__(self) -> str:
        return self.serialize()


class Outline:
    """An ordered collection of nodes that can be saved to a file."""

    def __init__(self) -> None:
        self._nodes: List[Node] = []

    def add(self, order: str, content: str) -> Node:
        """Append a node and return it."""
        node = Node(order, content)
        self._nodes.append(node)
        return node

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)

    def save(self, path: Union[str, Path]) -> None:
        """Write one serialized node per line to ``path``."""
        try:
            handle = open(path, "w", encoding="utf-8")
        except OSError as exc:
            raise TopDownError(ErrorKind.OUTLINE_OPEN_FILE) from exc
        with handle:
            if not self._nodes:
                raise TopDownError(ErrorKind.OUTLINE_EMPTY)
            for node in self._nodes:
                handle.write(node.serialize() + "\n")