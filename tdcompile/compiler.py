"""Compiling an indented outline source into numbered nodes."""

from __future__ import annotations

import argparse
import sys
from itertools import islice
from pathlib import Path
from typing import Iterator, List, Optional, Sequence, Union

from .errors import ErrorKind, TopDownError
from .node import Outline
from .source import SourceFile

DEFAULT_SOURCE = "topdown"
DEFAULT_OUTPUT = "topdown-formateado"
_PREFIX = "[CompiladorTopDown]:"


def _report(message: str) -> None:
    print(f"[ERROR]: {message}", file=sys.stderr)


class Compiler:
    """Reads an outline source, numbers its nodes and writes them out."""

    def __init__(
        self,
        source_path: Union[str, Path] = DEFAULT_SOURCE,
        output_path: Union[str, Path] = DEFAULT_OUTPUT,
    ) -> None:
        self.source_path = source_path
        self.output_path = output_path
        self.source = SourceFile([])
        self.outline = Outline()

    def load(self) -> None:
        """Read the source file."""
        print(f"{_PREFIX} Leyendo datos desde archivo ...")
        try:
            self.source = SourceFile.read(self.source_path)
        except TopDownError as exc:
            raise TopDownError(ErrorKind.COMPILER_SOURCE) from exc

    def check_indentation(self) -> None:
        """Require every line after the title node to be indented."""
        print(f"{_PREFIX} Revisando dentado en el archivo ...")
        if self.source.node_count() > 1:
            first = self.source.node_start(1)
        else:
            first = len(self.source)
        if any(self.source.indent(i) < 1 for i in range(first, len(self.source))):
            raise TopDownError(ErrorKind.COMPILER_INDENT)

    def find_title(self) -> str:
        """Add the title node to the outline and return its text."""
        print(f"{_PREFIX} Buscando título del top down ...")
        title = self.gather_content(self.source.node_start(0), ";")
        self.outline.add("", title)
        return title

    def gather_content(self, line_number: int, char: str) -> str:
        """Join the contents of a node's lines up to one flagged with ``char``."""
        if not 0 <= line_number < len(self.source):
            return ""
        indent = self.source.indent(line_number)
        parts: List[str] = []
        for index in range(line_number, len(self.source)):
            if self.source.indent(index) != indent:
                break
            try:
                parts.append(self.source.content(index))
            except TopDownError as exc:
                _report(exc.message)
            if self.source.flag(index, char):
                break
        return "".join(parts)

    def count_children(self, line_number: int) -> int:
        """How many direct children the node starting at ``line_number`` has."""
        if not 0 <= line_number < len(self.source):
            raise TopDownError(ErrorKind.LINE_MISSING)
        tabs = self.source.indent(line_number)
        end = line_number
        while end < len(self.source) and not self.source.flag(end, ";"):
            end += 1
        children = 0
        for index in range(end + 1, len(self.source)):
            indent = self.source.indent(index)
            if indent == tabs + 1 and self.source.flag(index, ";"):
                children += 1
            if tabs >= indent:
                break
        return children

    def _child_starts(self, line_number: int, tabs: int) -> Iterator[int]:
        starts = self.source.node_starts
        position = next(
            (number for number, start in enumerate(starts) if start == line_number), 0
        )
        return (
            start
            for start in starts[position:]
            if self.source.indent(start) == tabs + 1
        )

    def name_children(self, line_number: int, parent_order: str) -> None:
        """Number the children of a node after its order, recursively."""
        count = self.count_children(line_number)
        if count == 0:
            return
        tabs = self.source.indent(line_number)
        children = list(islice(self._child_starts(line_number, tabs), count))
        for number, start in enumerate(children, 1):
            content = self.gather_content(start, ";")
            order = f"{parent_order}.{number}" if parent_order else str(number)
            self.outline.add(order, content)
            self.name_children(start, order)

    def save(self) -> None:
        """Write the numbered outline to the output file, reporting failures."""
        print(f"{_PREFIX} Guardando archivo formateado de topdown ...")
        try:
            self.outline.save(self.output_path)
        except TopDownError as exc:
            _report(exc.message)

    def compile(self) -> Outline:
        """Run every stage in order and return the resulting outline."""
        print(f"{_PREFIX} Compilando topdown ...")
        self.outline = Outline()
        self.load()
        self.check_indentation()
        self.find_title()
        self.name_children(self.source.node_start(0), "")
        self.save()
        print(f"{_PREFIX} Compilación Completa.")
        return self.outline


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Compile an outline file into its formatted form."""
    parser = argparse.ArgumentParser(description="Compile an indented outline.")
    parser.add_argument("source", nargs="?", default=DEFAULT_SOURCE)
    parser.add_argument("output", nargs="?", default=DEFAULT_OUTPUT)
    args = parser.parse_args(argv)
    try:
        Compiler(args.source, args.output).compile()
    except TopDownError as exc:
        print(f"[ERROR]: {exc.message}, se detiene compilación.", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())