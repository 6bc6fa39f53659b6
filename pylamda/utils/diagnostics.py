#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Compiler-style diagnostic rendering

Every :class:`~pylamda.exceptions.ParseError` renders as three lines with a
fixed-width gutter::

        12 |    2  158.2687410     x.0  3_P_1
           |                       ^^^
           = Value `x.0` from field `statistical weight` has wrong type (should be floating point number).

The first line echoes the offending source line, the second underlines the
offending span with carets, the third carries the explanatory note.  Tabs
are replaced by single spaces before any offset is computed so that the
caret line stays aligned with the echoed text.

The helpers in this module only deal with strings and integers; they know
nothing about the error classes, which keeps the import graph acyclic.
"""

from __future__ import annotations

import re
from typing import Sequence

from pylamda.utils.constants import CARET, GUTTER_WIDTH


def expand_tabs(line: str) -> str:
    """Replace every tab with a single space

    Parameters
    ----------
    line : str
        Raw source line.

    Returns
    -------
    str
        The line with the same length, tabs turned into spaces.
    """
    return line.replace("\t", " ")


def gutter(label: object = "") -> str:
    """Return *label* right-aligned in the line-number gutter"""
    return f"{label!s:>{GUTTER_WIDTH}}"


def caret_line(offset: int, width: int) -> str:
    """Build the caret marker for a span

    Parameters
    ----------
    offset : int
        Zero-based column of the first caret.
    width : int
        Number of carets; values below one still produce a single caret.

    Returns
    -------
    str
        ``offset`` spaces followed by ``max(width, 1)`` carets.
    """
    return " " * max(offset, 0) + CARET * max(width, 1)


def render(
    line_number: int,
    line: str,
    offset: int,
    width: int,
    note: str,
    *,
    echo: bool = True,
) -> str:
    """Render a three-line diagnostic

    Parameters
    ----------
    line_number : int
        One-based line number shown in the gutter.
    line : str
        Source line; tabs are expanded before echoing.
    offset : int
        Column of the first caret within the expanded line.
    width : int
        Number of carets.
    note : str
        Explanatory note; a terminating period is appended.
    echo : bool, optional
        When ``False`` the first line is the bare gutter ``"{n:>6} |"``,
        used when there is no source line to show.

    Returns
    -------
    str
        The diagnostic, lines joined with ``\\n`` and no trailing newline.

    Examples
    --------
    >>> print(render(4, "16.x", 0, 4, "Expected floating point number"))
         4 | 16.x
           | ^^^^
           = Expected floating point number.
    """
    head = f"{gutter(line_number)} |"
    if echo:
        head = f"{head} {expand_tabs(line)}"
    return "\n".join(
        [
            head,
            f"{gutter()} | {caret_line(offset, width)}",
            f"{gutter()} = {note}.",
        ]
    )


# ---------------------------------------------------------------------------
# Caret placement rules
# ---------------------------------------------------------------------------

def whole_line_span(line: str) -> tuple[int, int]:
    """Span covering the full line (count and weight lines)"""
    return 0, len(expand_tabs(line))


def past_end_span(line: str) -> tuple[int, int]:
    """Span starting one column past the last visible character

    Used when a record runs out of tokens: the carets point at where the
    missing field should have been.
    """
    return len(expand_tabs(line).rstrip()) + 1, GUTTER_WIDTH


def literal_span(line: str, literal: str) -> tuple[int, int]:
    """Span of the first occurrence of *literal* in *line*

    Falls back to column 0 when the literal cannot be found.
    """
    column = expand_tabs(line).find(expand_tabs(literal))
    return max(column, 0), len(literal)


def token_span(line: str, tokens: Sequence[str], value: str) -> tuple[int, int]:
    """Span of *value* located through the token slice it was read from

    Parameters
    ----------
    line : str
        Source line.
    tokens : Sequence[str]
        Trailing slice of ``line.split()`` holding *value*.
    value : str
        The offending token.

    Returns
    -------
    tuple[int, int]
        Character offset and width of that token in the expanded line.
        Falls back to :func:`literal_span` when *tokens* does not match
        the line.

    Examples
    --------
    >>> token_span("1 2 1 1.0e-10 e-10", ("1.0e-10", "e-10"), "e-10")
    (14, 4)
    """
    words = [m.span() for m in re.finditer(r"\S+", expand_tabs(line))]
    if value not in tokens:
        return literal_span(line, value)
    position = len(words) - len(tokens) + list(tokens).index(value)
    if not 0 <= position < len(words):
        return literal_span(line, value)
    start, end = words[position]
    return start, end - start


def first_token_span(line: str) -> tuple[int, int]:
    """Span from the first alphanumeric character over the first token"""
    text = expand_tabs(line)
    offset = next((i for i, ch in enumerate(text) if ch.isalnum()), 0)
    tokens = text.split()
    return offset, len(tokens[0]) if tokens else 0
