#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Sequential line access with 1-based numbering

:class:`LineCursor` walks an already-loaded document one physical line at a
time.  Running out of lines is never silent: every fetch either returns a
``(line_number, text)`` pair or raises
:class:`~pylamda.exceptions.NotEnoughInputError` naming the line that should
have been there.
"""

from __future__ import annotations

from typing import Iterator

from pylamda.exceptions import NotEnoughInputError

Line = tuple[int, str]
"""A ``(line_number, text)`` pair; line numbers start at 1."""


def split_lines(text: str) -> list[str]:
    """Split *text* into physical lines

    Lines are separated by ``\\n``; a trailing ``\\r`` is dropped from each
    line, and a final newline does not produce an extra empty line.  Blank
    lines in the middle are kept so that numbering matches an editor.

    Examples
    --------
    >>> split_lines("!a\\r\\n\\n1\\n")
    ['!a', '', '1']
    """
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [ln[:-1] if ln.endswith("\r") else ln for ln in lines]


class LineCursor:
    """One-shot cursor over the lines of a document

    Parameters
    ----------
    text : str
        Complete document text.

    Examples
    --------
    >>> cursor = LineCursor("!comment\\n3\\n")
    >>> cursor.next()
    (1, '!comment')
    >>> [line for line in cursor.take(1)]
    [(2, '3')]
    """

    def __init__(self, text: str) -> None:
        self._lines = split_lines(text)
        self._position = 0

    @property
    def line_number(self) -> int:
        """Number of the last line handed out (0 before the first fetch)"""
        return self._position

    def next(self) -> Line:
        """Return the next line

        Raises
        ------
        NotEnoughInputError
            If the document has no more lines.
        """
        if self._position >= len(self._lines):
            raise NotEnoughInputError(self._position + 1)
        line = self._lines[self._position]
        self._position += 1
        return self._position, line

    def take(self, n: int) -> Iterator[Line]:
        """Lazily yield exactly the next *n* lines

        The generator raises :class:`NotEnoughInputError` at the first
        missing line, after yielding every line that does exist.
        """
        for _ in range(n):
            yield self.next()

    def remaining(self) -> Iterator[Line]:
        """Yield every line not consumed yet"""
        while self._position < len(self._lines):
            yield self.next()
