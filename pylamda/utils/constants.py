#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Format constants and lookup tables used across pylamda

The LAMDA layout is line oriented: comment lines start with ``!`` and every
data line has a fixed shape.  Everything that tunes how lines are trimmed,
how numbers are recognised, and how diagnostics are laid out lives here so
that the parsing and rendering modules carry no magic values.

References
----------
.. [1] Schöier, F. L., van der Tak, F. F. S., van Dishoeck, E. F., &
   Black, J. H. (2005). An atomic and molecular database for analysis of
   submillimetre line observations. *A&A*, 432, 369–379.
"""

from __future__ import annotations

import re

# ---------------------------------------------------------------------------
# Line layout
# ---------------------------------------------------------------------------

COMMENT_MARKER: str = "!"
"""Character that opens every LAMDA comment line."""

COMMENT_TRIM_CHARS: str = " \t\r\n!"
"""Characters stripped from both ends of a comment body."""

INFO_TRIM_CHARS: str = " \t\r\n!'"
"""Characters stripped from free-text tails (names, quantum numbers, extras)."""

# ---------------------------------------------------------------------------
# Numeric tokens
# ---------------------------------------------------------------------------

UNSIGNED_PATTERN: re.Pattern[str] = re.compile(r"\+?[0-9]+")
"""Full-match pattern for an unsigned integer token (levels, indices, counts)."""

FLOAT_PATTERN: re.Pattern[str] = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
    r"|inf(?:inity)?|nan)",
    re.IGNORECASE,
)
"""Full-match pattern for a floating-point token.

Accepts plain decimals (``5``, ``5.``, ``.5``), exponential notation
(``8.910E-05``) and the ``inf`` / ``infinity`` / ``nan`` spellings.
Underscore grouping, Fortran ``D`` exponents and locale separators are
rejected.
"""

# ---------------------------------------------------------------------------
# Diagnostics
# ---------------------------------------------------------------------------

GUTTER_WIDTH: int = 6
"""Width of the right-aligned line-number gutter in rendered diagnostics."""

CARET: str = "^"
"""Marker character used to underline the offending text."""

# ---------------------------------------------------------------------------
# Collision partners
# ---------------------------------------------------------------------------

COLLISION_PARTNERS: dict[int, str] = {
    1: "H2",
    2: "para-H2",
    3: "ortho-H2",
    4: "electrons",
    5: "H",
    6: "He",
    7: "H+",
}
"""LAMDA collision-partner codes mapped to their species labels."""

COLLISION_PARTNER_NOTE: str = "Unknown collision partner id ({})".format(
    ", ".join(f"{code}={label}" for code, label in COLLISION_PARTNERS.items())
)
"""Diagnostic note listing every valid collision-partner code."""
