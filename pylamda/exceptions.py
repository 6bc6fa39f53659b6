#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Custom exception hierarchy for the pylamda package

All exceptions raised by pylamda inherit from :class:`PyLAMDAError`, making it
possible to catch every library-specific error with a single ``except`` clause
while still allowing fine-grained handling when needed.

Exception Hierarchy
-------------------
::

    PyLAMDAError
    ├── ParseError                       # First structural problem in a document
    │   ├── NotEnoughInputError          # Document ended early
    │   ├── WrongCommentFormatError      # Comment line without `!`
    │   ├── MissingFieldError            # Record line ran out of tokens
    │   ├── NotAFloatError               # Weight line is not a number
    │   ├── NotAnIntegerError            # Count line is not an integer
    │   ├── UnknownItemError             # One token has the wrong type
    │   └── UnknownCollisionPartnerError # Partner code outside 1..7
    ├── FieldParseError                  # Single-line failure, no line context yet
    │   ├── MissingFieldValueError
    │   └── FieldFormatError
    ├── ValidationError                  # Opt-in cross-reference checks
    └── FileFormatError                  # Missing or undecodable file

A :class:`ParseError` is self-contained: it carries the line number, the raw
line and a note, so ``str(error)`` renders the full caret diagnostic without
going back to the source text.
"""

from __future__ import annotations

from typing import Optional, Sequence

from pylamda.utils import diagnostics
from pylamda.utils.constants import GUTTER_WIDTH


class PyLAMDAError(Exception):
    """Base exception for all pylamda errors

    Every exception raised by pylamda is a subclass of this type.
    Catching ``PyLAMDAError`` therefore catches any library-specific failure
    while still allowing standard Python exceptions (``KeyError``,
    ``TypeError``, etc.) to propagate normally.
    """


# ---------------------------------------------------------------------------
# Document-level parse errors
# ---------------------------------------------------------------------------

class ParseError(PyLAMDAError):
    """Raised for the first structural problem found in a LAMDA document

    Parameters
    ----------
    line_number : int
        One-based number of the offending line.
    line : str
        The offending line, verbatim.
    note : str
        Human-readable explanation, without a terminating period.

    Notes
    -----
    Subclasses only differ in where the caret goes; see :meth:`span`.
    """

    def __init__(self, line_number: int, line: str = "", note: str = "") -> None:
        self.line_number = line_number
        self.line = line
        self.note = note
        super().__init__(line_number, line, note)

    def span(self) -> tuple[int, int]:
        """Return ``(offset, width)`` of the caret marker"""
        return 0, 1

    def render(self) -> str:
        """Render the three-line caret diagnostic for this error"""
        offset, width = self.span()
        return diagnostics.render(self.line_number, self.line, offset, width, self.note)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(line_number={self.line_number!r}, "
            f"line={self.line!r}, note={self.note!r})"
        )


class NotEnoughInputError(ParseError):
    """Raised when the document ends before the grammar is satisfied

    *line_number* is the number the next, missing line would have had.
    """

    def __init__(self, line_number: int) -> None:
        super().__init__(
            line_number,
            "",
            f"Line {line_number} is empty, but there should be more input",
        )

    def span(self) -> tuple[int, int]:
        return 0, GUTTER_WIDTH

    def render(self) -> str:
        offset, width = self.span()
        return diagnostics.render(
            self.line_number, self.line, offset, width, self.note, echo=False
        )

    def __repr__(self) -> str:
        return f"NotEnoughInputError(line_number={self.line_number!r})"


class WrongCommentFormatError(ParseError):
    """Raised when a line that must be a comment does not start with ``!``"""


class MissingFieldError(ParseError):
    """Raised when a record line has fewer tokens than its fixed prefix"""

    def span(self) -> tuple[int, int]:
        return diagnostics.past_end_span(self.line)


class NotAFloatError(ParseError):
    """Raised when the molecular weight line is not a floating-point number"""

    def span(self) -> tuple[int, int]:
        return diagnostics.whole_line_span(self.line)


class NotAnIntegerError(ParseError):
    """Raised when a count line is not a non-negative integer"""

    def span(self) -> tuple[int, int]:
        return diagnostics.whole_line_span(self.line)


class UnknownItemError(ParseError):
    """Raised when a single token on a data line has the wrong type

    Parameters
    ----------
    line_number : int
        One-based number of the offending line.
    column : int
        Zero-based column of the offending token in the tab-expanded line,
        counted in characters (not UTF-8 bytes).
    value_width : int
        Length of the offending token in characters.
    line : str
        The offending line, verbatim.
    note : str
        Human-readable explanation.
    """

    def __init__(
        self,
        line_number: int,
        column: int,
        value_width: int,
        line: str,
        note: str,
    ) -> None:
        super().__init__(line_number, line, note)
        self.column = column
        self.value_width = value_width

    def span(self) -> tuple[int, int]:
        return self.column, self.value_width

    def __repr__(self) -> str:
        return (
            f"UnknownItemError(line_number={self.line_number!r}, "
            f"column={self.column!r}, value_width={self.value_width!r}, "
            f"line={self.line!r}, note={self.note!r})"
        )


class UnknownCollisionPartnerError(ParseError):
    """Raised when a collision-partner code is not one of the seven known ids"""

    def span(self) -> tuple[int, int]:
        return diagnostics.first_token_span(self.line)


# ---------------------------------------------------------------------------
# Single-line field errors
# ---------------------------------------------------------------------------

class FieldParseError(PyLAMDAError):
    """Raised by the single-line field and record parsers

    These errors know which field failed but not which line it was on; the
    reader wraps them into the matching :class:`ParseError` subclass.
    """


class MissingFieldValueError(FieldParseError):
    """Raised when the token stream ends before *field* is reached

    Parameters
    ----------
    field : enum.Enum
        Field identity (e.g. ``EnergyLevelField.STATISTICAL_WEIGHT``).
    expected : ExpectedValue
        Kind of value the field should hold.
    """

    def __init__(self, field, expected) -> None:
        self.field = field
        self.expected = expected
        super().__init__(f"Missing field `{field}` with value of {expected} type")


class FieldFormatError(FieldParseError):
    """Raised when a token exists but does not parse as the expected kind

    Parameters
    ----------
    field : enum.Enum | None
        Field identity, or ``None`` for single-valued lines and the
        temperature list.
    value : str
        The offending token, verbatim.
    expected : ExpectedValue
        Kind of value the field should hold.
    tokens : Sequence[str], optional
        The tokenised line the value was taken from: a trailing slice
        of ``line.split()`` that contains *value*. The reader uses it to put
        the caret under the right token.
    """

    def __init__(
        self,
        field,
        value: str,
        expected,
        tokens: Optional[Sequence[str]] = None,
    ) -> None:
        self.field = field
        self.value = value
        self.expected = expected
        self.tokens = tuple(tokens) if tokens is not None else (value,)
        if field is None:
            message = f"Value `{value}` has wrong type (should be {expected})"
        else:
            message = (
                f"Value `{value}` from field `{field}` has wrong type "
                f"(should be {expected})"
            )
        super().__init__(message)


# ---------------------------------------------------------------------------
# Outside the parser
# ---------------------------------------------------------------------------

class ValidationError(PyLAMDAError):
    """Raised by the opt-in consistency checks in :mod:`pylamda.utils.validation`

    A ``ValidationError`` means the document was *parseable* but its
    sections disagree with each other (e.g. a transition refers to a level
    that does not exist).  The parser itself never raises it.
    """


class FileFormatError(PyLAMDAError):
    """Raised when a LAMDA file cannot be found or decoded

    This is raised *before* parsing begins, by
    :meth:`~pylamda.readers.lamda.LAMDAReader.read`.
    """
