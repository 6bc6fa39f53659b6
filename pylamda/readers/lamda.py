#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
LAMDA (Leiden Atomic and Molecular Database) reader

Parses LAMDA-format text and returns a strongly-typed
:class:`~pylamda.models.records.LAMDADocument` containing energy levels,
radiative transitions, and collisional rate tables.

Section Order
-------------
Every data line is preceded by a ``!`` comment line::

    name            (molecule or atom, optional info after it)
    weight          (molecular weight)
    nlev            then nlev energy-level lines
    nlin            then nlin radiative-transition lines
    npart           then npart collision-partner blocks:
        partner code    (1..7, optional info after it)
        ncol            (number of collisional transitions)
        ntemp           (number of temperatures)
        temperatures
        (comment)       then ncol collisional-rate lines
    trailing ``!`` notes, blank lines allowed

Counts may be zero, which yields an empty section.

Failure Model
-------------
Parsing is fail-fast: the first problem raises a
:class:`~pylamda.exceptions.ParseError` subclass carrying the line number and
text, and no partial document is ever returned.  Relations between sections
(level indices, rate-row lengths) are not checked unless asked for, see
:mod:`pylamda.utils.validation`.

References
----------
.. [1] Schöier et al. (2005), *A&A*, 432, 369–379.
"""

from __future__ import annotations

import logging
from typing import Callable, TypeVar

from pylamda.exceptions import (
    FieldParseError,
    MissingFieldError,
    MissingFieldValueError,
    NotAFloatError,
    NotAnIntegerError,
    ParseError,
    UnknownCollisionPartnerError,
    UnknownItemError,
    WrongCommentFormatError,
)
from pylamda.models.records import CollisionPartnerData, LAMDADocument
from pylamda.readers.base import BaseReader
from pylamda.utils.constants import COLLISION_PARTNER_NOTE
from pylamda.utils.cursor import LineCursor
from pylamda.utils.diagnostics import token_span
from pylamda.utils.parsing import (
    expect_comment,
    is_comment,
    parse_collision_partner,
    parse_collisional_rates,
    parse_comment,
    parse_count,
    parse_energy_level,
    parse_name,
    parse_radiative_transition,
    parse_temperatures,
    parse_weight,
)
from pylamda.utils.validation import validate_document

logger = logging.getLogger(__name__)

T = TypeVar("T")

ErrorWrapper = Callable[[FieldParseError, int, str], ParseError]
"""Turns a single-line failure into a :class:`ParseError` for that line."""


# ---------------------------------------------------------------------------
# Error wrapping
# ---------------------------------------------------------------------------

def _not_an_integer(exc: FieldParseError, line_number: int, line: str) -> ParseError:
    return NotAnIntegerError(line_number, line, "Expected integer")


def _not_a_float(exc: FieldParseError, line_number: int, line: str) -> ParseError:
    return NotAFloatError(line_number, line, "Expected floating point number")


def _unknown_partner(exc: FieldParseError, line_number: int, line: str) -> ParseError:
    return UnknownCollisionPartnerError(line_number, line, COLLISION_PARTNER_NOTE)


def _record_error(exc: FieldParseError, line_number: int, line: str) -> ParseError:
    """Wrap a record-field failure, locating the bad token in *line*"""
    if isinstance(exc, MissingFieldValueError):
        return MissingFieldError(line_number, line, str(exc))
    column, width = token_span(line, exc.tokens, exc.value)
    return UnknownItemError(line_number, column, width, line, str(exc))


# ---------------------------------------------------------------------------
# Line-sequence helpers
# ---------------------------------------------------------------------------

def _read_bounded(
    cursor: LineCursor,
    count: int,
    parse_item: Callable[[str], T],
    wrap_error: ErrorWrapper = _record_error,
) -> tuple[T, ...]:
    """Consume exactly *count* lines, parsing each with *parse_item*

    Raises
    ------
    NotEnoughInputError
        If the document ends before *count* lines were read.
    ParseError
        Whatever *wrap_error* builds from the first failing line.
    """
    items = []
    for line_number, line in cursor.take(count):
        try:
            items.append(parse_item(line))
        except FieldParseError as exc:
            raise wrap_error(exc, line_number, line) from exc
    return tuple(items)


def _read_line(
    cursor: LineCursor,
    parse_item: Callable[[str], T],
    wrap_error: ErrorWrapper,
) -> T:
    return _read_bounded(cursor, 1, parse_item, wrap_error)[0]


def _skip_comment(cursor: LineCursor) -> str:
    line_number, line = cursor.next()
    return expect_comment(line_number, line)


def _read_collision_partner(cursor: LineCursor) -> CollisionPartnerData:
    """Read one collision-partner block, from its leading comment to the last rate row"""
    _skip_comment(cursor)
    partner, information = _read_line(cursor, parse_collision_partner, _unknown_partner)
    _skip_comment(cursor)
    n_transitions = _read_line(cursor, parse_count, _not_an_integer)
    _skip_comment(cursor)
    n_temperatures = _read_line(cursor, parse_count, _not_an_integer)
    _skip_comment(cursor)
    temperatures = _read_line(cursor, parse_temperatures, _record_error)
    _skip_comment(cursor)
    rates = _read_bounded(cursor, n_transitions, parse_collisional_rates)

    # Accepted as-is; see pylamda.utils.validation for the strict checks.
    if temperatures.size != n_temperatures:
        logger.warning(
            "Partner %s declares %d temperatures but lists %d.",
            partner.label, n_temperatures, temperatures.size,
        )
    for row in rates:
        if row.rates.size != temperatures.size:
            logger.warning(
                "Partner %s, collisional transition %d: %d rates for %d temperatures.",
                partner.label, row.transition, row.rates.size, temperatures.size,
            )

    logger.debug(
        "  Partner %s: %d transitions x %d temperatures",
        partner.label, len(rates), temperatures.size,
    )
    return CollisionPartnerData(
        partner=partner,
        information=information,
        temperatures=temperatures,
        rates=rates,
    )


def _read_notes(cursor: LineCursor, n_partners: int) -> list[str]:
    """Collect the bodies of the trailing comment lines"""
    notes: list[str] = []
    for line_number, line in cursor.remaining():
        if not line.strip():
            continue
        if not is_comment(line):
            raise WrongCommentFormatError(
                line_number,
                line,
                f"{n_partners} collision partners were read, only comments "
                f"with additional information should be left",
            )
        body = parse_comment(line)
        # A bare `!` contributes nothing, not even a separator.
        if body:
            notes.append(body)
    return notes


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def parse_lamda(text: str) -> LAMDADocument:
    """Parse a complete LAMDA document

    Parameters
    ----------
    text : str
        Full document text.

    Returns
    -------
    LAMDADocument
        Fully populated, immutable document.

    Raises
    ------
    ParseError
        At the first structural problem; ``str(error)`` is a caret
        diagnostic pointing at the offending line.

    Examples
    --------
    >>> doc = parse_lamda(open("oxygen.dat").read())  # doctest: +SKIP
    >>> len(doc.energy_levels)  # doctest: +SKIP
    3
    """
    cursor = LineCursor(text)

    _skip_comment(cursor)
    name, information = _read_line(cursor, parse_name, _record_error)
    _skip_comment(cursor)
    weight = _read_line(cursor, parse_weight, _not_a_float)
    logger.debug("Parsing LAMDA document %r (weight %g)", name, weight)

    _skip_comment(cursor)
    n_levels = _read_line(cursor, parse_count, _not_an_integer)
    _skip_comment(cursor)
    energy_levels = _read_bounded(cursor, n_levels, parse_energy_level)
    logger.debug("Parsed %d energy levels", len(energy_levels))

    _skip_comment(cursor)
    n_lines = _read_line(cursor, parse_count, _not_an_integer)
    _skip_comment(cursor)
    radiative_transitions = _read_bounded(cursor, n_lines, parse_radiative_transition)
    logger.debug("Parsed %d radiative transitions", len(radiative_transitions))

    _skip_comment(cursor)
    n_partners = _read_line(cursor, parse_count, _not_an_integer)
    collision_partners = tuple(
        _read_collision_partner(cursor) for _ in range(n_partners)
    )
    logger.debug("Parsed %d collision partners", len(collision_partners))

    notes = _read_notes(cursor, n_partners)
    information = f"{information}. {' '.join(notes)}".rstrip()

    return LAMDADocument(
        name=name,
        information=information,
        weight=weight,
        energy_levels=energy_levels,
        radiative_transitions=radiative_transitions,
        collision_partners=collision_partners,
    )


class LAMDAReader(BaseReader):
    """Reader for LAMDA data files

    Examples
    --------
    >>> reader = LAMDAReader()
    >>> doc = reader.read("oi.dat")  # doctest: +SKIP
    >>> [p.partner.label for p in doc.collision_partners]  # doctest: +SKIP
    ['H', 'He', 'para-H2', 'ortho-H2', 'H+', 'electrons']

    A malformed file raises a :class:`~pylamda.exceptions.ParseError`
    whose string form is ready to show to a user::

        try:
            reader.read("broken.dat")
        except ParseError as err:
            print(err)
    """

    def parse(self, text: str, *, validate: bool = False) -> LAMDADocument:
        document = parse_lamda(text)
        if validate:
            validate_document(document)
        logger.debug(
            "LAMDA parse complete for %r: %d levels, %d lines, %d partners",
            document.name,
            len(document.energy_levels),
            len(document.radiative_transitions),
            len(document.collision_partners),
        )
        return document
