"""Unit tests for checksum.py — ICE control, RIB key and IBAN MOD 97-10."""
from __future__ import annotations

import pytest

from morocco_ids.checksum import (
    MODULUS,
    iban_check_digits,
    iban_remainder,
    iban_to_numeric,
    ice_control,
    is_valid_iban_checksum,
    mod97,
    rib_key,
    rib_remainder,
)

VALID_IBAN = "MA64007108000779200030312071"


# ---------------------------------------------------------------------------
# mod97
# ---------------------------------------------------------------------------


class TestMod97:
    def test_empty_is_zero(self) -> None:
        assert mod97("") == 0

    def test_modulus_is_zero(self) -> None:
        assert mod97("97") == 0

    def test_matches_integer_arithmetic(self) -> None:
        value = "12345678901234567890123456789"
        assert mod97(value) == int(value) % MODULUS

    def test_leading_zeros_ignored(self) -> None:
        assert mod97("00098") == 1


# ---------------------------------------------------------------------------
# ICE control
# ---------------------------------------------------------------------------


class TestIceControl:
    @pytest.mark.parametrize(
        "payload, expected",
        [
            ("1234567890001", "61"),
            ("1234567890000", "60"),
            ("0000000000000", "00"),
            ("9999999999999", "14"),
            ("9876543210123", "05"),
        ],
    )
    def test_known_controls(self, payload: str, expected: str) -> None:
        assert ice_control(payload) == expected

    def test_full_ice_strips_control(self) -> None:
        assert ice_control("123456789000131") == ice_control("1234567890001") == "61"

    def test_other_lengths_used_as_is(self) -> None:
        assert ice_control("123456789") == "39"

    def test_result_is_zero_padded(self) -> None:
        assert len(ice_control("9876543210123")) == 2


# ---------------------------------------------------------------------------
# RIB key
# ---------------------------------------------------------------------------


class TestRibKey:
    def test_reference_key(self) -> None:
        assert rib_key("0070000000000000000001") == "49"

    def test_key_closes_remainder(self) -> None:
        remainder = rib_remainder("0070000000000000000001")
        assert (remainder + int(rib_key("0070000000000000000001"))) % MODULUS == 0

    def test_all_zero_payload(self) -> None:
        assert rib_key("0" * 22) == "00"

    def test_key_is_two_digits(self) -> None:
        key = rib_key("1901010000012345678901")
        assert len(key) == 2
        assert key.isdigit()


# ---------------------------------------------------------------------------
# IBAN
# ---------------------------------------------------------------------------


class TestIbanChecksum:
    def test_numeric_expansion(self) -> None:
        assert iban_to_numeric("MA640071") == "0071221064"

    def test_valid_reference(self) -> None:
        assert is_valid_iban_checksum(VALID_IBAN) is True
        assert iban_remainder(VALID_IBAN) == 1

    def test_transposition_detected(self) -> None:
        assert is_valid_iban_checksum("MA64007108000779200030312017") is False

    def test_changed_check_digits_detected(self) -> None:
        assert is_valid_iban_checksum("MA65007108000779200030312071") is False

    def test_check_digits_computed_from_bban(self) -> None:
        assert iban_check_digits("MA", VALID_IBAN[4:]) == "64"

    def test_computed_check_digits_make_valid_iban(self) -> None:
        bban = "007000000000000000000149"
        check = iban_check_digits("MA", bban)
        assert is_valid_iban_checksum(f"MA{check}{bban}") is True
