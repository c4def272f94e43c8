"""Reading an outline source file into lines and node boundaries."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator, List, Sequence, Union

from .errors import ErrorKind, TopDownError
from .line import Line


def _split_keeping_newlines(text: str) -> List[str]:
    """Split on ``\\n`` only, keeping the newline at the end of each line."""
    parts = text.split("\n")
    lines = [part + "\n" for part in parts[:-1]]
    if parts[-1]:
        lines.append(parts[-1])
    return lines


class SourceFile:
    """The lines of an outline source and where each node starts."""

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines: List[Line] = [Line(text) for text in lines]
        self._node_starts: List[int] = list(self._find_node_starts())

    @classmethod
    def from_text(cls, text: str) -> "SourceFile":
        """Build a source from the whole text of an outline file."""
        lines = _split_keeping_newlines(text)
        if not lines:
            raise TopDownError(ErrorKind.LINE_FILE_EMPTY)
        return cls(lines)

    @classmethod
    def read(cls, path: Union[str, Path]) -> "SourceFile":
        """Read an outline source from ``path``."""
        try:
            with open(path, encoding="utf-8", newline="") as handle:
                text = handle.read()
        except OSError as exc:
            raise TopDownError(ErrorKind.LINE_OPEN_FILE) from exc
        return cls.from_text(text)

    def _find_node_starts(self) -> Iterator[int]:
        in_node = False
        node_indent = 0
        for index, line in enumerate(self._lines):
            if not in_node:
                yield index
                in_node = True
                node_indent = line.indent
            if line.indent != node_indent or line.ends:
                in_node = False

    def _get(self, index: int) -> Line:
        if not 0 <= index < len(self._lines):
            raise TopDownError(ErrorKind.LINE_MISSING)
        return self._lines[index]

    def __len__(self) -> int:
        return len(self._lines)

    @property
    def node_starts(self) -> Sequence[int]:
        """Line numbers at which each node begins."""
        return tuple(self._node_starts)

    def line(self, index: int) -> str:
        """The raw text of line ``index``."""
        return self._get(index).text

    def indent(self, index: int) -> int:
        """The number of leading spaces and tabs of line ``index``."""
        return self._get(index).indent

    def content(self, index: int) -> str:
        """The content of line ``index`` before its marker."""
        return self._get(index).content()

    def flag(self, index: int, char: str) -> bool:
        """The marker flag ``char`` of line ``index``."""
        return self._get(index).flag(char)

    def node_start(self, number: int) -> int:
        """The line on which node ``number`` begins."""
        if not 0 <= number < len(self._node_starts):
            raise TopDownError(ErrorKind.LINE_MISSING)
        return self._node_starts[number]

    def node_count(self) -> int:
        """How many nodes the source holds."""
        return len(self._node_starts)