"""Synthetic ICE numbers for tests and demos.

Generated values have a random 9-digit company and 4-digit establishment
identifier and a correctly computed control, so they always pass
:func:`~morocco_ids.ice.validator.validate_ice`.  They do not correspond to
registered companies.
"""
from __future__ import annotations

import random
from dataclasses import dataclass

from morocco_ids.ice.formatter import IceFormatOptions, format_ice
from morocco_ids.ice.validator import COMPANY_LENGTH, ESTABLISHMENT_LENGTH, calculate_control


@dataclass(frozen=True)
class IceGenerationOptions:
    """Options for :func:`generate_test_ice`.

    ``separator``, ``prefix`` and ``group_company_digits`` only apply when
    ``format`` is ``True``.
    """

    format: bool = False
    separator: str | None = None
    prefix: bool = False
    group_company_digits: bool = False


def generate_random_digits(length: int, rng: random.Random | None = None) -> str:
    """Return ``length`` random decimal digits (empty for ``length <= 0``)."""
    if length <= 0:
        return ""
    source = rng or random
    return "".join(str(source.randrange(10)) for _ in range(length))


def generate_test_ice(
    options: IceGenerationOptions | None = None,
    rng: random.Random | None = None,
) -> str:
    """Generate a structurally valid ICE with a correct control.

    Parameters
    ----------
    options:
        Output options.  Raw 15 digits by default.
    rng:
        Optional random source, e.g. a seeded ``random.Random`` for
        reproducible fixtures.

    Returns
    -------
    str
        The ICE, formatted when ``options.format`` is set.
    """
    opts = options or IceGenerationOptions()

    payload = generate_random_digits(COMPANY_LENGTH, rng) + generate_random_digits(
        ESTABLISHMENT_LENGTH, rng
    )
    ice = payload + calculate_control(payload)

    if not opts.format:
        return ice
    return format_ice(
        ice,
        IceFormatOptions(
            separator=opts.separator if opts.separator is not None else " ",
            prefix=opts.prefix,
            group_company_digits=opts.group_company_digits,
        ),
    )
