#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
pylamda - Python library for reading LAMDA molecular and atomic data files

Parse files in the LAMDA (Leiden Atomic and Molecular Database) format into
immutable, typed records: energy levels, radiative transitions, and
collisional rate tables per collision partner.  Malformed input produces a
single compiler-style diagnostic pointing at the first offending line.

Modules
-------
readers
    The LAMDA reader and its abstract base.
models
    Frozen dataclass records returned by the readers.
utils
    Line cursor, field parsers, diagnostics rendering, and opt-in
    validation.

Examples
--------
>>> from pylamda import LAMDAReader, ParseError
>>> doc = LAMDAReader().read("oi.dat")          # doctest: +SKIP
>>> doc.name, len(doc.energy_levels)            # doctest: +SKIP
('O', 3)
"""

from __future__ import annotations

__version__ = "0.1.0"
__author__ = "Melek Derman"

from pylamda.readers.lamda import LAMDAReader, parse_lamda
from pylamda.models.records import (
    CollisionalRates,
    CollisionPartnerData,
    CollisionPartnerId,
    EnergyLevel,
    LAMDADocument,
    RadiativeTransition,
)
from pylamda.exceptions import (
    PyLAMDAError,
    ParseError,
    NotEnoughInputError,
    WrongCommentFormatError,
    MissingFieldError,
    NotAFloatError,
    NotAnIntegerError,
    UnknownItemError,
    UnknownCollisionPartnerError,
    ValidationError,
    FileFormatError,
)

__all__ = [
    # Version
    "__version__",
    # Readers
    "LAMDAReader",
    "parse_lamda",
    # Models
    "LAMDADocument",
    "EnergyLevel",
    "RadiativeTransition",
    "CollisionPartnerData",
    "CollisionalRates",
    "CollisionPartnerId",
    # Exceptions
    "PyLAMDAError",
    "ParseError",
    "NotEnoughInputError",
    "WrongCommentFormatError",
    "MissingFieldError",
    "NotAFloatError",
    "NotAnIntegerError",
    "UnknownItemError",
    "UnknownCollisionPartnerError",
    "ValidationError",
    "FileFormatError",
]
