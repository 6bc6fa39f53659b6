#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Typed dataclass models for parsed LAMDA data

All models are frozen ``dataclasses`` carrying scalars, tuples, and
read-only NumPy arrays.  They are the sole output format of the reader
layer.
"""

from __future__ import annotations

from pylamda.models.records import (
    CollisionalRates,
    CollisionalRatesField,
    CollisionPartnerData,
    CollisionPartnerId,
    EnergyLevel,
    EnergyLevelField,
    ExpectedValue,
    LAMDADocument,
    RadiativeTransition,
    RadiativeTransitionField,
)

__all__ = [
    "CollisionalRates",
    "CollisionalRatesField",
    "CollisionPartnerData",
    "CollisionPartnerId",
    "EnergyLevel",
    "EnergyLevelField",
    "ExpectedValue",
    "LAMDADocument",
    "RadiativeTransition",
    "RadiativeTransitionField",
]
