"""Unit tests for ice/generator.py — generate_test_ice and generate_random_digits."""
from __future__ import annotations

import random
import re

import pytest

from morocco_ids.ice.formatter import IceFormattingError, IceFormattingErrorCode, unformat_ice
from morocco_ids.ice.generator import (
    IceGenerationOptions,
    generate_random_digits,
    generate_test_ice,
)
from morocco_ids.ice.validator import is_valid_ice


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def rng() -> random.Random:
    return random.Random(2024)


# ---------------------------------------------------------------------------
# generate_random_digits
# ---------------------------------------------------------------------------


class TestGenerateRandomDigits:
    def test_length(self, rng: random.Random) -> None:
        digits = generate_random_digits(9, rng)
        assert len(digits) == 9
        assert digits.isdigit()

    @pytest.mark.parametrize("length", [0, -1, -10])
    def test_non_positive_length(self, length: int) -> None:
        assert generate_random_digits(length) == ""

    def test_seeded_is_reproducible(self) -> None:
        assert generate_random_digits(20, random.Random(7)) == generate_random_digits(
            20, random.Random(7)
        )


# ---------------------------------------------------------------------------
# generate_test_ice
# ---------------------------------------------------------------------------


class TestGenerateTestIce:
    def test_raw_output(self, rng: random.Random) -> None:
        ice = generate_test_ice(rng=rng)
        assert re.fullmatch(r"\d{15}", ice)
        assert is_valid_ice(ice) is True

    def test_always_valid(self, rng: random.Random) -> None:
        assert all(is_valid_ice(generate_test_ice(rng=rng)) for _ in range(100))

    def test_distinct_values(self) -> None:
        generated = {generate_test_ice() for _ in range(50)}
        assert len(generated) == 50

    def test_seeded_is_reproducible(self) -> None:
        assert generate_test_ice(rng=random.Random(1)) == generate_test_ice(rng=random.Random(1))

    def test_format_without_separator_uses_space(self, rng: random.Random) -> None:
        ice = generate_test_ice(IceGenerationOptions(format=True), rng)
        assert re.fullmatch(r"\d{9} \d{4} \d{2}", ice)

    def test_format_with_separator(self, rng: random.Random) -> None:
        ice = generate_test_ice(IceGenerationOptions(format=True, separator="-"), rng)
        assert re.fullmatch(r"\d{9}-\d{4}-\d{2}", ice)

    def test_format_with_prefix(self, rng: random.Random) -> None:
        ice = generate_test_ice(IceGenerationOptions(format=True, prefix=True), rng)
        assert re.fullmatch(r"ICE \d{9} \d{4} \d{2}", ice)

    def test_format_with_grouping(self, rng: random.Random) -> None:
        options = IceGenerationOptions(format=True, separator="/", group_company_digits=True)
        ice = generate_test_ice(options, rng)
        assert re.fullmatch(r"\d{3}/\d{3}/\d{3}/\d{4}/\d{2}", ice)

    def test_formatted_output_is_valid(self, rng: random.Random) -> None:
        ice = generate_test_ice(IceGenerationOptions(format=True, prefix=True), rng)
        assert is_valid_ice(unformat_ice(ice)) is True

    def test_format_options_ignored_without_format(self, rng: random.Random) -> None:
        ice = generate_test_ice(IceGenerationOptions(separator="-", prefix=True), rng)
        assert re.fullmatch(r"\d{15}", ice)

    def test_invalid_separator_raises(self, rng: random.Random) -> None:
        with pytest.raises(IceFormattingError) as exc_info:
            generate_test_ice(IceGenerationOptions(format=True, separator="12"), rng)
        assert exc_info.value.code is IceFormattingErrorCode.INVALID_SEPARATOR
