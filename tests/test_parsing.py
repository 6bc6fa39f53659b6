#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Tests for the single-line parsers and the line cursor

Covers numeric token conversion, the comment gate, header field parsers,
the three composite record parsers, and 1-based line enumeration.
"""

from __future__ import annotations

import numpy as np
import pytest

from pylamda.exceptions import (
    FieldFormatError,
    MissingFieldValueError,
    NotEnoughInputError,
    WrongCommentFormatError,
)
from pylamda.models.records import (
    CollisionalRatesField,
    CollisionPartnerId,
    EnergyLevel,
    EnergyLevelField,
    ExpectedValue,
    RadiativeTransition,
    RadiativeTransitionField,
)
from pylamda.utils.cursor import LineCursor, split_lines
from pylamda.utils.parsing import (
    expect_comment,
    float_lamda,
    int_lamda,
    parse_collision_partner,
    parse_collisional_rates,
    parse_count,
    parse_energy_level,
    parse_name,
    parse_radiative_transition,
    parse_temperatures,
    parse_weight,
)


# -----------------------------------------------------------------------
# int_lamda / float_lamda
# -----------------------------------------------------------------------

class TestIntLamda:
    """Tests for unsigned integer conversion"""

    def test_padded(self) -> None:
        assert int_lamda("  65 ") == 65

    def test_explicit_plus(self) -> None:
        assert int_lamda("+7") == 7

    def test_large_value(self) -> None:
        assert int_lamda("123456789012") == 123456789012

    @pytest.mark.parametrize("token", ["-1", "1.0", "", "1_000", "abc", "0x10"])
    def test_rejected(self, token: str) -> None:
        with pytest.raises(ValueError):
            int_lamda(token)


class TestFloatLamda:
    """Tests for floating-point conversion"""

    def test_decimal(self) -> None:
        assert float_lamda("158.2687410") == pytest.approx(158.268741)

    def test_exponent(self) -> None:
        assert float_lamda("8.910E-05") == pytest.approx(8.91e-05)

    def test_lowercase_exponent(self) -> None:
        assert float_lamda("1e-12") == pytest.approx(1e-12)

    def test_trailing_dot(self) -> None:
        assert float_lamda("1000.") == 1000.0

    def test_leading_dot(self) -> None:
        assert float_lamda("-.5") == -0.5

    def test_infinity(self) -> None:
        assert float_lamda("inf") == float("inf")

    @pytest.mark.parametrize("token", ["1,5", "1_000.0", "1.0D-03", "x.0", "", "e5"])
    def test_rejected(self, token: str) -> None:
        with pytest.raises(ValueError):
            float_lamda(token)


# -----------------------------------------------------------------------
# Comment gate
# -----------------------------------------------------------------------

class TestExpectComment:
    """Tests for the comment gate"""

    def test_body_is_trimmed(self) -> None:
        assert expect_comment(1, "! Comment      ") == "Comment"

    def test_extra_whitespace_is_idempotent(self) -> None:
        assert expect_comment(1, "!  text   ") == expect_comment(1, "! text") == "text"

    def test_indented_comment(self) -> None:
        assert expect_comment(1, "    !NUMBER OF ENERGY LEVELS") == "NUMBER OF ENERGY LEVELS"

    def test_empty_comment(self) -> None:
        assert expect_comment(1, "!") == ""

    def test_missing_marker(self) -> None:
        with pytest.raises(WrongCommentFormatError) as info:
            expect_comment(5, "NUMBER OF ENERGY LEVELS")
        err = info.value
        assert err.line_number == 5
        assert err.line == "NUMBER OF ENERGY LEVELS"
        assert err.note == "Comment should begin with `!` character"


# -----------------------------------------------------------------------
# Header field parsers
# -----------------------------------------------------------------------

class TestParseName:
    """Tests for the name line"""

    def test_name_and_information(self) -> None:
        assert parse_name("  TEST ! Additional information  ") == (
            "TEST",
            "Additional information",
        )

    def test_name_only(self) -> None:
        assert parse_name("CO") == ("CO", "")

    def test_tab_separator(self) -> None:
        assert parse_name("O\t(neutral atom)") == ("O", "(neutral atom)")

    def test_quotes_trimmed(self) -> None:
        assert parse_name("HCO+ 'from CDMS'") == ("HCO+", "from CDMS")

    def test_empty_line_never_fails(self) -> None:
        assert parse_name("") == ("", "")


class TestParseCount:
    """Tests for count lines"""

    def test_padded(self) -> None:
        assert parse_count("  65 ") == 65

    def test_zero(self) -> None:
        assert parse_count("0") == 0

    def test_not_an_integer(self) -> None:
        with pytest.raises(FieldFormatError) as info:
            parse_count(" 3.5 ")
        assert info.value.value == "3.5"
        assert info.value.expected is ExpectedValue.INTEGER


class TestParseWeight:
    """Tests for the molecular-weight line"""

    def test_padded(self) -> None:
        assert parse_weight(" 32.3  ") == pytest.approx(32.3)

    def test_not_a_float(self) -> None:
        with pytest.raises(FieldFormatError):
            parse_weight("sixteen")


class TestParseCollisionPartner:
    """Tests for the collision-partner line"""

    def test_para_h2(self) -> None:
        assert parse_collision_partner("2 ! Additional info ") == (
            CollisionPartnerId.PARA_H2,
            "Additional info",
        )

    def test_all_codes(self) -> None:
        for code in range(1, 8):
            partner, _ = parse_collision_partner(f"{code} X + Y")
            assert partner.value == code

    def test_labels(self) -> None:
        assert CollisionPartnerId.ELECTRONS.label == "electrons"
        assert CollisionPartnerId.H_PLUS.label == "H+"

    @pytest.mark.parametrize("line", ["9 O + Xe ! made up", "0", "H2 ! name", ""])
    def test_unknown_code(self, line: str) -> None:
        with pytest.raises(FieldFormatError):
            parse_collision_partner(line)


class TestParseTemperatures:
    """Tests for the temperature grid"""

    def test_values(self) -> None:
        temps = parse_temperatures("10.1 20.2  30.3     40.4   ")
        np.testing.assert_allclose(temps, [10.1, 20.2, 30.3, 40.4])

    def test_read_only(self) -> None:
        temps = parse_temperatures("10.0 20.0")
        assert temps.dtype == np.float64
        with pytest.raises(ValueError):
            temps[0] = 1.0

    def test_empty_line(self) -> None:
        assert parse_temperatures("   ").size == 0

    def test_first_bad_token(self) -> None:
        with pytest.raises(FieldFormatError) as info:
            parse_temperatures("10.0 2O.0 3x")
        assert info.value.value == "2O.0"
        assert info.value.field is None


# -----------------------------------------------------------------------
# Composite record parsers
# -----------------------------------------------------------------------

class TestParseEnergyLevel:
    """Tests for energy-level records"""

    def test_full_line(self) -> None:
        level = parse_energy_level("   32  32.4    1e-12   ! ' 3 5 6'")
        assert level == EnergyLevel(
            level=32,
            energy=32.4,
            statistical_weight=1e-12,
            quantum_numbers="3 5 6",
        )

    def test_inline_comment_kept_in_label(self) -> None:
        level = parse_energy_level("   1    0.000000000   5.0  3_P_2  ! 2S+1  L  J = 3 P 2")
        assert level.quantum_numbers == "3_P_2 ! 2S+1 L J = 3 P 2"

    def test_without_label(self) -> None:
        assert parse_energy_level("1 0.0 1.0").quantum_numbers == ""

    def test_two_tokens_missing_weight(self) -> None:
        with pytest.raises(MissingFieldValueError) as info:
            parse_energy_level("  1  0.0")
        assert info.value.field is EnergyLevelField.STATISTICAL_WEIGHT
        assert info.value.expected is ExpectedValue.FLOAT
        assert "statistical weight" in str(info.value)

    def test_empty_line_missing_level(self) -> None:
        with pytest.raises(MissingFieldValueError) as info:
            parse_energy_level("")
        assert info.value.field is EnergyLevelField.LEVEL

    def test_bad_level(self) -> None:
        with pytest.raises(FieldFormatError) as info:
            parse_energy_level("1a 0.0 5.0")
        assert info.value.field is EnergyLevelField.LEVEL
        assert info.value.value == "1a"
        assert info.value.tokens == ("1a", "0.0", "5.0")

    def test_bad_energy(self) -> None:
        with pytest.raises(FieldFormatError) as info:
            parse_energy_level("1 zero 5.0")
        assert info.value.field is EnergyLevelField.ENERGY
        assert str(info.value) == (
            "Value `zero` from field `energy [cm-1]` has wrong type "
            "(should be floating point number)"
        )


class TestParseRadiativeTransition:
    """Tests for radiative-transition records"""

    def test_full_line(self) -> None:
        rt = parse_radiative_transition("  45 32 9  1e-14     345.32    Additional")
        assert rt == RadiativeTransition(
            transition=45,
            upper_level=32,
            lower_level=9,
            einstein_a=1e-14,
            extra="345.32 Additional",
        )

    def test_missing_einstein_a(self) -> None:
        with pytest.raises(MissingFieldValueError) as info:
            parse_radiative_transition("1 2 1")
        assert info.value.field is RadiativeTransitionField.EINSTEIN_A

    def test_bad_lower_level(self) -> None:
        with pytest.raises(FieldFormatError) as info:
            parse_radiative_transition("1 2 one 8.9e-5")
        assert info.value.field is RadiativeTransitionField.LOWER_LEVEL
        assert info.value.expected is ExpectedValue.INTEGER


class TestParseCollisionalRates:
    """Tests for collisional-rate rows"""

    def test_full_line(self) -> None:
        row = parse_collisional_rates("65 42 13    12e-12 13e-13 14e-14")
        assert (row.transition, row.upper_level, row.lower_level) == (65, 42, 13)
        np.testing.assert_allclose(row.rates, [12e-12, 13e-13, 14e-14])

    def test_tab_separated(self) -> None:
        row = parse_collisional_rates("1\t2\t1\t2.4e-11\t4.4e-11")
        assert row.rates.shape == (2,)

    def test_no_rates_is_accepted(self) -> None:
        assert parse_collisional_rates("1 2 1").rates.size == 0

    def test_bad_rate(self) -> None:
        with pytest.raises(FieldFormatError) as info:
            parse_collisional_rates("1 2 1 1.0e-10 n/a 3.0e-10")
        assert info.value.field is CollisionalRatesField.RATE_COEFFICIENTS
        assert info.value.value == "n/a"
        assert info.value.tokens == ("1.0e-10", "n/a", "3.0e-10")

    def test_missing_lower_level(self) -> None:
        with pytest.raises(MissingFieldValueError) as info:
            parse_collisional_rates("1 2")
        assert info.value.field is CollisionalRatesField.LOWER_LEVEL


# -----------------------------------------------------------------------
# LineCursor
# -----------------------------------------------------------------------

class TestLineCursor:
    """Tests for 1-based line enumeration"""

    def test_split_lines(self) -> None:
        assert split_lines("a\r\n\nb\n") == ["a", "", "b"]

    def test_split_empty(self) -> None:
        assert split_lines("") == []

    def test_numbering_counts_blank_lines(self) -> None:
        cursor = LineCursor("a\n\nc")
        assert [cursor.next() for _ in range(3)] == [(1, "a"), (2, ""), (3, "c")]

    def test_next_past_end(self) -> None:
        cursor = LineCursor("a\nb\n")
        cursor.next()
        cursor.next()
        with pytest.raises(NotEnoughInputError) as info:
            cursor.next()
        assert info.value.line_number == 3

    def test_take_is_lazy(self) -> None:
        cursor = LineCursor("a\nb\nc")
        run = cursor.take(2)
        assert cursor.line_number == 0
        assert list(run) == [(1, "a"), (2, "b")]
        assert cursor.next() == (3, "c")

    def test_take_fails_mid_sequence(self) -> None:
        cursor = LineCursor("a\nb")
        run = cursor.take(4)
        assert next(run) == (1, "a")
        assert next(run) == (2, "b")
        with pytest.raises(NotEnoughInputError) as info:
            next(run)
        assert info.value.line_number == 3

    def test_take_zero(self) -> None:
        cursor = LineCursor("")
        assert list(cursor.take(0)) == []

    def test_remaining(self) -> None:
        cursor = LineCursor("a\nb\nc")
        cursor.next()
        assert list(cursor.remaining()) == [(2, "b"), (3, "c")]
        assert list(cursor.remaining()) == []
