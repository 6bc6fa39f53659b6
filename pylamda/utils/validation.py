#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Opt-in consistency checks for parsed LAMDA documents

The parser is deliberately permissive about how sections relate to each
other: a transition may name a level that does not exist and a rate row may
hold more or fewer values than there are temperatures.  The functions here
check those relations on request and raise
:class:`~pylamda.exceptions.ValidationError` at the first violation.  They
are never called implicitly during parsing; use
``LAMDAReader(...).read(path, validate=True)`` or call them directly.

Checked Constraints
-------------------
* Radiative and collisional transitions refer to existing levels
  (``1 <= lower < upper <= number of levels``).
* Every collisional rate row holds exactly one value per temperature.

Design Note
-----------
Validation functions read model attributes but do not import
:mod:`pylamda.models`, so :mod:`pylamda.models.records` imports this module
at module level without creating a cycle.
"""

from __future__ import annotations

import logging

from pylamda.exceptions import ValidationError

logger = logging.getLogger(__name__)


def _check_level_pair(kind: str, index: int, upper: int, lower: int, n_levels: int) -> None:
    for label, level in (("upper", upper), ("lower", lower)):
        if not (1 <= level <= n_levels):
            raise ValidationError(
                f"{kind} {index} refers to {label} level {level}, "
                f"outside the declared range [1, {n_levels}]."
            )
    if lower >= upper:
        raise ValidationError(
            f"{kind} {index} has lower level {lower} not below upper level {upper}."
        )


def validate_level_references(document) -> None:
    """Verify that every transition refers to existing levels

    Parameters
    ----------
    document : LAMDADocument
        Parsed document.

    Raises
    ------
    ValidationError
        If a radiative transition or collisional rate row names a level
        outside ``[1, len(document.energy_levels)]`` or has
        ``lower >= upper``.
    """
    n_levels = len(document.energy_levels)
    for rt in document.radiative_transitions:
        _check_level_pair(
            "Radiative transition", rt.transition, rt.upper_level, rt.lower_level, n_levels
        )
    for partner in document.collision_partners:
        for row in partner.rates:
            _check_level_pair(
                f"Collisional transition ({partner.partner.label})",
                row.transition,
                row.upper_level,
                row.lower_level,
                n_levels,
            )
    logger.debug("Level references of %r passed validation.", document.name)


def validate_rate_rows(partner) -> None:
    """Verify that every rate row has one value per temperature

    Parameters
    ----------
    partner : CollisionPartnerData
        One collision partner block.

    Raises
    ------
    ValidationError
        At the first row whose length differs from the temperature count.
    """
    n_temps = len(partner.temperatures)
    for row in partner.rates:
        if len(row.rates) != n_temps:
            raise ValidationError(
                f"Collisional transition {row.transition} ({partner.partner.label}) "
                f"has {len(row.rates)} rate coefficients but {n_temps} "
                f"temperatures were given."
            )
    logger.debug(
        "Rate table for %s (%d rows x %d temperatures) passed validation.",
        partner.partner.label, len(partner.rates), n_temps,
    )


def validate_document(document) -> None:
    """Run every consistency check on *document*

    Raises
    ------
    ValidationError
        At the first violated constraint.
    """
    validate_level_references(document)
    for partner in document.collision_partners:
        validate_rate_rows(partner)
