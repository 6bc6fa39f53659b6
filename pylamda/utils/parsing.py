#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Shared LAMDA parsing helpers for the pylamda package

All single-line parsing lives here: numeric token conversion, the comment
gate, the field parsers for header lines, and the three composite record
parsers.  None of these functions ever looks past the line it is given; the
reader in :mod:`pylamda.readers.lamda` owns the line sequence.

LAMDA Line Layout
-----------------
A LAMDA file alternates ``!`` comment lines with data lines::

    !MOLECULE
    O (neutral atom)
    !MOLECULAR WEIGHT
    16.0
    !NUMBER OF ENERGY LEVELS
    3
    !LEVEL + ENERGIES(cm^-1) + WEIGHT + Qnum
       1    0.000000000   5.0  3_P_2
    ...

Record lines are whitespace separated.  Each record kind starts with a fixed
prefix of typed fields; the rest of the line is either kept as free text
(energy levels, radiative transitions) or parsed as a list of floats
(collisional rates).

Error Contract
--------------
Field and record parsers raise
:class:`~pylamda.exceptions.MissingFieldValueError` or
:class:`~pylamda.exceptions.FieldFormatError`.  They carry the field
identity and the offending token but no line number; the reader wraps them
into the user-facing :class:`~pylamda.exceptions.ParseError` subclasses.

References
----------
.. [1] LAMDA - Leiden Atomic and Molecular Database, file format notes,
   https://home.strw.leidenuniv.nl/~moldata/molformat.html
"""

from __future__ import annotations

import logging
from typing import Sequence

import numpy as np

from pylamda.exceptions import (
    FieldFormatError,
    MissingFieldValueError,
    WrongCommentFormatError,
)
from pylamda.models.records import (
    CollisionalRates,
    CollisionalRatesField,
    CollisionPartnerId,
    EnergyLevel,
    EnergyLevelField,
    ExpectedValue,
    RadiativeTransition,
    RadiativeTransitionField,
)
from pylamda.utils.constants import (
    COMMENT_MARKER,
    COMMENT_TRIM_CHARS,
    FLOAT_PATTERN,
    INFO_TRIM_CHARS,
    UNSIGNED_PATTERN,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Numeric conversion
# ---------------------------------------------------------------------------

def int_lamda(s: str) -> int:
    """Convert a LAMDA unsigned-integer token to a Python int

    Parameters
    ----------
    s : str
        Token, optionally surrounded by whitespace.

    Returns
    -------
    int
        The non-negative value.

    Raises
    ------
    ValueError
        If the token is not made of ASCII digits (an optional leading
        ``+`` is allowed).

    Examples
    --------
    >>> int_lamda(" 65 ")
    65
    >>> int_lamda("+3")
    3
    """
    t = s.strip()
    if UNSIGNED_PATTERN.fullmatch(t) is None:
        raise ValueError(f"invalid unsigned integer: {s!r}")
    return int(t)


def float_lamda(s: str) -> float:
    """Convert a LAMDA floating-point token to a Python float

    Parameters
    ----------
    s : str
        Token, optionally surrounded by whitespace.

    Returns
    -------
    float
        The converted value.

    Raises
    ------
    ValueError
        If the token is not in decimal or exponential notation.

    Notes
    -----
    ``float()`` alone is too lenient for LAMDA data: it accepts
    underscore digit grouping (``"1_000"``) and non-ASCII digits.  Tokens
    are therefore checked against
    :data:`~pylamda.utils.constants.FLOAT_PATTERN` first.

    Examples
    --------
    >>> float_lamda("8.910E-05")
    8.91e-05
    >>> float_lamda("1000.")
    1000.0
    """
    t = s.strip()
    if FLOAT_PATTERN.fullmatch(t) is None:
        raise ValueError(f"invalid floating point number: {s!r}")
    return float(t)


def _split_head(line: str) -> tuple[str, str]:
    """Split *line* at the first whitespace run into ``(head, rest)``"""
    parts = line.strip().split(maxsplit=1)
    if not parts:
        return "", ""
    if len(parts) == 1:
        return parts[0], ""
    return parts[0], parts[1]


def _tail_text(tokens: Sequence[str]) -> str:
    """Join leftover tokens with single spaces and trim quote/marker noise"""
    return " ".join(tokens).strip(INFO_TRIM_CHARS)


# ---------------------------------------------------------------------------
# Comment gate
# ---------------------------------------------------------------------------

def is_comment(line: str) -> bool:
    """Return ``True`` when *line* is a LAMDA comment"""
    return line.strip().startswith(COMMENT_MARKER)


def parse_comment(line: str) -> str:
    """Return the body of a comment line

    Examples
    --------
    >>> parse_comment("!  text   ")
    'text'
    """
    return line.strip(COMMENT_TRIM_CHARS)


def expect_comment(line_number: int, line: str) -> str:
    """Check that *line* is a comment and return its body

    Parameters
    ----------
    line_number : int
        One-based line number, used for the error.
    line : str
        Raw line text.

    Returns
    -------
    str
        Comment body with the ``!`` marker and surrounding whitespace
        removed.

    Raises
    ------
    WrongCommentFormatError
        If the trimmed line does not start with ``!``.
    """
    if not is_comment(line):
        raise WrongCommentFormatError(
            line_number,
            line,
            f"Comment should begin with `{COMMENT_MARKER}` character",
        )
    return parse_comment(line)


# ---------------------------------------------------------------------------
# Field parsers (header lines)
# ---------------------------------------------------------------------------

def parse_name(line: str) -> tuple[str, str]:
    """Split the name line into ``(name, information)``

    The first whitespace-separated token is the name; the rest, with
    ``!``, quotes and whitespace trimmed, is the information text.  This
    never fails: a line without a separator is all name.

    Examples
    --------
    >>> parse_name("  TEST ! Additional information  ")
    ('TEST', 'Additional information')
    >>> parse_name("CO")
    ('CO', '')
    """
    name, rest = _split_head(line)
    return name, rest.strip(INFO_TRIM_CHARS)


def parse_count(line: str) -> int:
    """Parse a count line (levels, transitions, partners, temperatures)

    Raises
    ------
    FieldFormatError
        If the trimmed line is not a non-negative integer.
    """
    try:
        return int_lamda(line)
    except ValueError as exc:
        raise FieldFormatError(None, line.strip(), ExpectedValue.INTEGER) from exc


def parse_weight(line: str) -> float:
    """Parse the molecular-weight line

    Raises
    ------
    FieldFormatError
        If the trimmed line is not a floating-point number.
    """
    try:
        return float_lamda(line)
    except ValueError as exc:
        raise FieldFormatError(None, line.strip(), ExpectedValue.FLOAT) from exc


def parse_collision_partner(line: str) -> tuple[CollisionPartnerId, str]:
    """Parse a collision-partner line into ``(partner, information)``

    Examples
    --------
    >>> parse_collision_partner("2 ! Additional info ")
    (<CollisionPartnerId.PARA_H2: 2>, 'Additional info')

    Raises
    ------
    FieldFormatError
        If the leading code is not an integer between 1 and 7.
    """
    code, rest = _split_head(line)
    try:
        partner = CollisionPartnerId(int_lamda(code))
    except ValueError as exc:
        raise FieldFormatError(None, code, ExpectedValue.INTEGER) from exc
    return partner, rest.strip(INFO_TRIM_CHARS)


def parse_float_list(tokens: Sequence[str], field=None) -> np.ndarray:
    """Convert every token to float and return a read-only float64 array

    Raises
    ------
    FieldFormatError
        At the first token that is not a number, carrying that token.
    """
    values: list[float] = []
    for token in tokens:
        try:
            values.append(float_lamda(token))
        except ValueError as exc:
            raise FieldFormatError(field, token, ExpectedValue.FLOAT, tokens) from exc
    arr = np.asarray(values, dtype="f8")
    arr.setflags(write=False)
    return arr


def parse_temperatures(line: str) -> np.ndarray:
    """Parse the collisional temperature grid

    Examples
    --------
    >>> parse_temperatures("10.1 20.2  30.3     40.4   ").tolist()
    [10.1, 20.2, 30.3, 40.4]
    """
    return parse_float_list(line.split())


# ---------------------------------------------------------------------------
# Composite record parsers
# ---------------------------------------------------------------------------

class _Fields:
    """Positional reader over the tokens of one record line"""

    def __init__(self, line: str) -> None:
        self.tokens = line.split()
        self.index = 0

    def _take(self, field, expected: ExpectedValue, convert):
        if self.index >= len(self.tokens):
            raise MissingFieldValueError(field, expected)
        token = self.tokens[self.index]
        try:
            value = convert(token)
        except ValueError as exc:
            raise FieldFormatError(field, token, expected, self.tokens) from exc
        self.index += 1
        return value

    def integer(self, field) -> int:
        return self._take(field, ExpectedValue.INTEGER, int_lamda)

    def floating(self, field) -> float:
        return self._take(field, ExpectedValue.FLOAT, float_lamda)

    def rest(self) -> list[str]:
        return self.tokens[self.index:]


def parse_energy_level(line: str) -> EnergyLevel:
    """Parse an energy-level line

    Layout: ``level energy statistical_weight [quantum numbers ...]``.

    Examples
    --------
    >>> parse_energy_level("   32  32.4    1e-12   ! ' 3 5 6'")
    EnergyLevel(level=32, energy=32.4, statistical_weight=1e-12, quantum_numbers='3 5 6')

    Raises
    ------
    MissingFieldValueError
        If the line has fewer than three tokens.
    FieldFormatError
        If one of the three leading tokens has the wrong type.
    """
    fields = _Fields(line)
    return EnergyLevel(
        level=fields.integer(EnergyLevelField.LEVEL),
        energy=fields.floating(EnergyLevelField.ENERGY),
        statistical_weight=fields.floating(EnergyLevelField.STATISTICAL_WEIGHT),
        quantum_numbers=_tail_text(fields.rest()),
    )


def parse_radiative_transition(line: str) -> RadiativeTransition:
    """Parse a radiative-transition line

    Layout: ``transition up low einstein_a [extra columns ...]``.  The
    extra columns (frequency, upper-level energy, ...) are kept as text.

    Examples
    --------
    >>> parse_radiative_transition("  45 32 9  1e-14     345.32    Additional")
    RadiativeTransition(transition=45, upper_level=32, lower_level=9, einstein_a=1e-14, extra='345.32 Additional')
    """
    fields = _Fields(line)
    return RadiativeTransition(
        transition=fields.integer(RadiativeTransitionField.TRANSITION),
        upper_level=fields.integer(RadiativeTransitionField.UPPER_LEVEL),
        lower_level=fields.integer(RadiativeTransitionField.LOWER_LEVEL),
        einstein_a=fields.floating(RadiativeTransitionField.EINSTEIN_A),
        extra=_tail_text(fields.rest()),
    )


def parse_collisional_rates(line: str) -> CollisionalRates:
    """Parse one row of a collisional rate table

    Layout: ``transition up low rate_1 rate_2 ... rate_n``.  The number of
    rates is not checked here.
    """
    fields = _Fields(line)
    transition = fields.integer(CollisionalRatesField.TRANSITION)
    upper_level = fields.integer(CollisionalRatesField.UPPER_LEVEL)
    lower_level = fields.integer(CollisionalRatesField.LOWER_LEVEL)
    rates = parse_float_list(fields.rest(), CollisionalRatesField.RATE_COEFFICIENTS)
    return CollisionalRates(
        transition=transition,
        upper_level=upper_level,
        lower_level=lower_level,
        rates=rates,
    )
