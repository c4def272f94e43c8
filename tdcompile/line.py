"""A single line of an outline source file."""

from __future__ import annotations

import sys

from .errors import ErrorKind, TopDownError

INDENT_CHARS = " \t"
END_CHAR = ";"
OPEN_CHAR = "{"
CLOSE_CHAR = "}"
MARKERS = END_CHAR + OPEN_CHAR + CLOSE_CHAR


class Line:
    """A raw source line with its indentation and marker flags.

    Any of ``;``, ``{`` or ``}`` marks the line as ending its node; a ``;``
    found after such a marker makes the line badly written.
    """

    def __init__(self, text: str) -> None:
        self.text = text
        self.indent = 0
        self.ends = False
        self.opens = False
        self.closes = False
        self.well_written = True
        if text:
            self.indent = len(text) - len(text.lstrip(INDENT_CHARS))
            self._scan_markers()

    def _scan_markers(self) -> None:
        for char in self.text:
            if char == END_CHAR and self.ends:
                self.well_written = False
                print(f"[ERROR]: {ErrorKind.LINE_DOUBLE_CHAR.message}", file=sys.stderr)
                return
            if char in MARKERS:
                self.ends = True

    def content(self) -> str:
        """Text after the indentation and before the first marker.

        A line with no marker keeps its trailing newline.
        """
        if not self.well_written:
            raise TopDownError(ErrorKind.LINE_MALFORMED)
        body = self.text.lstrip(INDENT_CHARS)
        collected = []
        for char in body:
            if char in MARKERS:
                break
            collected.append(char)
            if char == "\n":
                break
        return "".join(collected)

    def flag(self, char: str) -> bool:
        """The flag for marker ``char``: ``;``, ``{`` or ``}``."""
        if char == END_CHAR:
            return self.ends
        if char == OPEN_CHAR:
            return self.opens
        if char == CLOSE_CHAR:
            return self.closes
        raise TopDownError(ErrorKind.LINE_FLAG_MISSING)

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"Line({self.text!r})"