#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Shared pytest fixtures for pylamda tests

Provides a synthetic LAMDA file for neutral oxygen (3 levels, 3 radiative
transitions, 6 collision partners) split into its header, partner blocks,
and trailing notes so tests can reassemble truncated or altered variants.
"""

from __future__ import annotations

import pytest

HEADER = """\
!MOLECULE
O (neutral atom)
!MOLECULAR WEIGHT
16.0
!NUMBER OF ENERGY LEVELS
3
!LEVEL + ENERGIES(cm^-1) + WEIGHT + Qnum
   1    0.000000000   5.0  3_P_2  ! 2S+1  L  J = 3 P 2
   2  158.2687410     3.0  3_P_1  ! 2S+1  L  J = 3 P 1
   3  226.9852492     1.0  3_P_0  ! 2S+1  L  J = 3 P 0
!NUMBER OF RADIATIVE TRANSITIONS
3
!TRANS + UP + LOW + EINSTEINA(s^-1) + FREQ(GHz) + E_u(K)
    1     2     1   8.910E-05  4744.77749   227.712
    2     3     1   1.340E-10  6804.84658   326.579
    3     3     2   1.750E-05  2060.06909   326.579
!NUMBER OF COLL PARTNERS
6"""

PARTNER_BLOCKS = [
    """\
!COLLISIONS BETWEEN
5 O + H  ! Lique et al. 2018, MNRAS 474, 2313
!NUMBER OF COLL TRANS
3
!NUMBER OF COLL TEMPS
5
!COLL TEMPS
   10.000      20.000      30.000      40.000      60.000
!TRANS + UP + LOW + COLLRATES(cm^3 s^-1)
    1     2     1   7.0204e-11  8.2028e-11  9.0584e-11  9.8459e-11  1.1421e-10
    2     3     1   7.3118e-11  6.9519e-11  7.1053e-11  7.4232e-11  8.2569e-11
    3     3     2   1.2258e-10  1.1282e-10  1.1049e-10  1.1007e-10  1.1069e-10""",
    """\
!COLLISIONS BETWEEN
6 O + He  ! Lique et al. 2018, MNRAS 474, 2313
!NUMBER OF COLL TRANS
3
!NUMBER OF COLL TEMPS
5
!COLL TEMPS
   10.000      20.000      30.000      40.000      60.000
!TRANS + UP + LOW + COLLRATES(cm^3 s^-1)
    1     2     1   1.6482e-11  1.8573e-11  2.1463e-11  2.4598e-11  3.0966e-11
    2     3     1   2.7998e-11  2.9454e-11  3.3389e-11  3.8068e-11  4.8082e-11
    3     3     2   1.0152e-13  1.6305e-13  2.5139e-13  3.6504e-13  6.6603e-13""",
    """\
!COLLISIONS BETWEEN
2 O + p-H2  ! Lique et al. 2018, MNRAS 474, 2313
!NUMBER OF COLL TRANS
3
!NUMBER OF COLL TEMPS
5
!COLL TEMPS
   10.000      20.000      30.000      40.000      60.000
!TRANS + UP + LOW + COLLRATES(cm^3 s^-1)
    1     2     1   1.1818e-10  1.2795e-10  1.3314e-10  1.3766e-10  1.4621e-10
    2     3     1   8.1964e-11  1.0202e-10  1.1233e-10  1.2001e-10  1.3180e-10
    3     3     2   7.9957e-14  1.5935e-13  2.6308e-13  3.9685e-13  6.6622e-13""",
    """\
!COLLISIONS BETWEEN
3 O + o-H2  ! Lique et al. 2018, MNRAS 474, 2313
!NUMBER OF COLL TRANS
3
!NUMBER OF COLL TEMPS
5
!COLL TEMPS
   10.000      20.000      30.000      40.000      60.000
!TRANS + UP + LOW + COLLRATES(cm^3 s^-1)
    1     2     1   1.3258e-10  1.3972e-10  1.4475e-10  1.4972e-10  1.5993e-10
    2     3     1   6.5072e-11  7.6028e-11  8.2408e-11  8.7995e-11  9.8545e-11
    3     3     2   2.6483e-12  3.0795e-12  3.3059e-12  3.4907e-12  3.8261e-12""",
    "!COLLISIONS BETWEEN\n"
    "7 O + H+  !  computed from xsections of Spirko et al. J. Phys B 36, 1645, 2003\n"
    "!NUMBER OF COLL TRANS\n"
    "3\n"
    "!NUMBER OF COLL TEMPS\n"
    "5\n"
    "!COLL TEMPS\n"
    "   10.000      20.000      30.000      40.000      60.000\n"
    "!TRANS + UP + LOW + COLLRATES(cm^3 s^-1)\n"
    "    1     2     1   2.4006e-11\t4.4688e-11\t6.4277e-11\t8.3187e-11\t1.1965e-10\n"
    "    2     3     1   4.1218e-12\t8.8188e-12\t1.3761e-11\t1.8868e-11\t2.9441e-11\n"
    "    3     3     2   1.7356e-10\t2.2838e-10\t2.6815e-10\t3.0050e-10\t3.5283e-10",
    """\
!COLLISIONS BETWEEN
4 O + e  ! Bell et al. 1998, MNRAS, 293, L83
!NUMBER OF COLL TRANS
3
!NUMBER OF COLL TEMPS
5
!COLL TEMPS
50.0 100.0 500.0 1000. 3000.
!TRANS + UP + LOW + COLLRATES(cm^3 s^-1)
    1     2     1   3.4E-10  3.6E-10  3.3E-10  3.1E-10  3.1E-10
    2     3     1   3.9E-10  4.3E-10  4.3E-10  4.1E-10  4.2E-10
    3     3     2   3.3E-13  7.7E-13  4.1E-12  6.5E-12  1.1E-11""",
]

NOTES = """\
!NOTES
! A-values are from the NIST database.

! Accurate transition frequencies measured by Zink et al. 1991, ApJ 371, L85.
"""


@pytest.fixture
def lamda_header() -> str:
    """Header lines up to and including the partner count (18 lines)"""
    return HEADER


@pytest.fixture
def partner_blocks() -> list[str]:
    """Six collision-partner blocks of 12 lines each"""
    return list(PARTNER_BLOCKS)


@pytest.fixture
def lamda_notes() -> str:
    """Trailing notes, including one blank line"""
    return NOTES


@pytest.fixture
def oxygen_text() -> str:
    """Complete, well-formed LAMDA document for neutral oxygen"""
    return "\n".join([HEADER, *PARTNER_BLOCKS, NOTES])


@pytest.fixture
def minimal_text() -> str:
    """Smallest valid document: every count is zero"""
    return "\n".join(
        [
            "!MOLECULE",
            "X",
            "!MOLECULAR WEIGHT",
            "1.0",
            "!NUMBER OF ENERGY LEVELS",
            "0",
            "!LEVEL + ENERGIES(cm^-1) + WEIGHT + Qnum",
            "!NUMBER OF RADIATIVE TRANSITIONS",
            "0",
            "!TRANS + UP + LOW + EINSTEINA(s^-1)",
            "!NUMBER OF COLL PARTNERS",
            "0",
        ]
    )
