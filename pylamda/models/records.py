#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Typed dataclass models for parsed LAMDA documents

Every model is a frozen ``dataclass``; ordered collections are tuples and
numeric vectors are read-only NumPy arrays, so a document handed back by the
reader cannot be modified.  Models are the sole output of the reader layer.

Hierarchy
---------
::

    LAMDADocument         - one complete LAMDA file
    ├── EnergyLevel       - level index, energy, statistical weight, labels
    ├── RadiativeTransition
    └── CollisionPartnerData
        └── CollisionalRates

Units
-----
Values are stored exactly as written in the file, without conversion:

* Energies are in **cm⁻¹**.
* Einstein A coefficients are in **s⁻¹**.
* Temperatures are in **K**.
* Collisional rate coefficients are in **cm³ s⁻¹**.
* Level and transition indices are the file's own 1-based numbers.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum

import numpy as np

from pylamda.utils.constants import COLLISION_PARTNERS
from pylamda.utils.validation import validate_rate_rows


# ---------------------------------------------------------------------------
# Closed identity sets
# ---------------------------------------------------------------------------

class CollisionPartnerId(IntEnum):
    """LAMDA collision-partner codes"""

    H2 = 1
    PARA_H2 = 2
    ORTHO_H2 = 3
    ELECTRONS = 4
    H = 5
    HE = 6
    H_PLUS = 7

    @property
    def label(self) -> str:
        """Species label used by LAMDA (e.g. ``"para-H2"``)"""
        return COLLISION_PARTNERS[self.value]


class ExpectedValue(Enum):
    """Kind of value a positional field must hold"""

    INTEGER = "integer"
    FLOAT = "floating point number"

    def __str__(self) -> str:
        return self.value


class EnergyLevelField(Enum):
    """Positional fields of an energy-level line"""

    LEVEL = "level"
    ENERGY = "energy [cm-1]"
    STATISTICAL_WEIGHT = "statistical weight"

    def __str__(self) -> str:
        return self.value


class RadiativeTransitionField(Enum):
    """Positional fields of a radiative-transition line"""

    TRANSITION = "transition"
    UPPER_LEVEL = "upper level"
    LOWER_LEVEL = "lower level"
    EINSTEIN_A = "spontaneous decay rate [s-1]"

    def __str__(self) -> str:
        return self.value


class CollisionalRatesField(Enum):
    """Positional fields of a collisional-rate line"""

    TRANSITION = "transition"
    UPPER_LEVEL = "upper level"
    LOWER_LEVEL = "lower level"
    RATE_COEFFICIENTS = "rate coefficients [cm3 s-1]"

    def __str__(self) -> str:
        return self.value


# ---------------------------------------------------------------------------
# Record types
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class EnergyLevel:
    """A single energy level

    Parameters
    ----------
    level : int
        Level index as given in the file.
    energy : float
        Level energy (cm⁻¹).
    statistical_weight : float
        Degeneracy of the level.
    quantum_numbers : str
        Free-text quantum-number label (everything after the weight).
    """

    level: int
    energy: float
    statistical_weight: float
    quantum_numbers: str = ""


@dataclass(frozen=True)
class RadiativeTransition:
    """A single radiative transition

    Parameters
    ----------
    transition : int
        Transition index.
    upper_level : int
        Index of the upper level.
    lower_level : int
        Index of the lower level.
    einstein_a : float
        Spontaneous decay rate (s⁻¹).
    extra : str
        Remaining columns (frequency, upper-state energy, ...) kept as text.
    """

    transition: int
    upper_level: int
    lower_level: int
    einstein_a: float
    extra: str = ""


@dataclass(frozen=True, eq=False)
class CollisionalRates:
    """One row of a collisional rate table

    Parameters
    ----------
    transition : int
        Transition index.
    upper_level : int
        Index of the upper level.
    lower_level : int
        Index of the lower level.
    rates : numpy.ndarray
        Rate coefficients (cm³ s⁻¹), one per temperature, read-only.
    """

    transition: int
    upper_level: int
    lower_level: int
    rates: np.ndarray


@dataclass(frozen=True, eq=False)
class CollisionPartnerData:
    """Collisional data for one collision partner

    Parameters
    ----------
    partner : CollisionPartnerId
        Species the rates were computed for.
    information : str
        Free text following the partner code (usually the reference).
    temperatures : numpy.ndarray
        Temperature grid (K), read-only.
    rates : tuple[CollisionalRates, ...]
        Rate rows in file order.
    """

    partner: CollisionPartnerId
    information: str
    temperatures: np.ndarray
    rates: tuple[CollisionalRates, ...] = ()

    def rate_table(self) -> np.ndarray:
        """Stack the rate rows into a ``(n_transitions, n_temperatures)`` array

        Returns
        -------
        numpy.ndarray
            Rate coefficients, row *i* belonging to ``rates[i]``.

        Raises
        ------
        ValidationError
            If any row length differs from the number of temperatures.
        """
        validate_rate_rows(self)
        if not self.rates:
            return np.empty((0, self.temperatures.size), dtype="f8")
        return np.vstack([row.rates for row in self.rates])


@dataclass(frozen=True, eq=False)
class LAMDADocument:
    """Complete parsed content of a LAMDA data file

    Instances are returned by :func:`~pylamda.readers.lamda.parse_lamda`
    and :class:`~pylamda.readers.lamda.LAMDAReader`.

    Parameters
    ----------
    name : str
        Molecule or atom name (first token of the name line).
    information : str
        Text following the name, a period, then the trailing notes.
    weight : float
        Molecular or atomic weight.
    energy_levels : tuple[EnergyLevel, ...]
        Energy levels in file order.
    radiative_transitions : tuple[RadiativeTransition, ...]
        Radiative transitions in file order.
    collision_partners : tuple[CollisionPartnerData, ...]
        Collision partners in file order.
    """

    name: str
    information: str
    weight: float
    energy_levels: tuple[EnergyLevel, ...] = ()
    radiative_transitions: tuple[RadiativeTransition, ...] = ()
    collision_partners: tuple[CollisionPartnerData, ...] = ()
