"""MOD 97 checksum engine for ICE, RIB and IBAN identifiers.

Three variants of the same modulus are implemented here:

- **ICE control**: the company + establishment payload read as one large
  integer, reduced modulo 97 and zero-padded to two digits.
- **RIB key**: the payload folded left to right in 7-digit chunks, the key
  being ``(97 - remainder) % 97``.
- **IBAN check** (ISO 13616 / ISO 7064 MOD 97-10): the first four
  characters moved to the end, letters expanded to ``A=10 .. Z=35``, and
  the resulting number reduced modulo 97; valid when the remainder is 1.

All reductions are done digit by digit so intermediate values stay small.
None of these functions validate their input: callers sanitize and check
lengths before calling in.

Example
-------
>>> ice_control("1234567890001")
'61'
>>> rib_key("0070000000000000000001")
'49'
>>> is_valid_iban_checksum("MA64007108000779200030312071")
True
"""
from __future__ import annotations

MODULUS: int = 97
CONTROL_LENGTH: int = 2
ICE_LENGTH: int = 15
RIB_CHUNK_SIZE: int = 7


def mod97(numeric: str) -> int:
    """Reduce a string of decimal digits modulo 97.

    An empty string reduces to ``0``.
    """
    remainder = 0
    for char in numeric:
        remainder = (remainder * 10 + int(char)) % MODULUS
    return remainder


def _pad(value: int) -> str:
    return str(value).zfill(CONTROL_LENGTH)


# ---------------------------------------------------------------------------
# ICE
# ---------------------------------------------------------------------------


def ice_control(payload: str) -> str:
    """Return the two-digit ICE control for ``payload``.

    A full 15-digit ICE has its trailing control digits stripped before the
    computation, so ``"123456789000131"`` and ``"1234567890001"`` yield the
    same control.  Any other length is used as-is.

    Parameters
    ----------
    payload:
        Digit string, with or without the trailing control digits.

    Returns
    -------
    str
        The control, zero-padded to two digits.
    """
    if len(payload) == ICE_LENGTH:
        payload = payload[:-CONTROL_LENGTH]
    return _pad(mod97(payload))


# ---------------------------------------------------------------------------
# RIB
# ---------------------------------------------------------------------------


def rib_remainder(payload: str) -> int:
    """Fold ``payload`` modulo 97 in chunks of seven digits.

    Each chunk shifts the running remainder by ten to the power of the
    number of digits in the chunk's integer value, leading zeros excluded.
    """
    remainder = 0
    for start in range(0, len(payload), RIB_CHUNK_SIZE):
        chunk = int(payload[start : start + RIB_CHUNK_SIZE])
        remainder = (remainder * 10 ** len(str(chunk)) + chunk) % MODULUS
    return remainder


def rib_key(payload: str) -> str:
    """Return the two-digit RIB key for a payload without its key."""
    return _pad((MODULUS - rib_remainder(payload)) % MODULUS)


# ---------------------------------------------------------------------------
# IBAN
# ---------------------------------------------------------------------------


def iban_to_numeric(iban: str) -> str:
    """Rearrange ``iban`` and expand its letters into digits.

    The country code and check digits move to the end, then every letter is
    replaced by its two-digit value (``A=10`` .. ``Z=35``).
    """
    rearranged = iban[4:] + iban[:4]
    return "".join(
        char if char.isdigit() else str(ord(char) - 55) for char in rearranged
    )


def iban_remainder(iban: str) -> int:
    """Return the MOD 97-10 remainder of an uppercase alphanumeric IBAN."""
    return mod97(iban_to_numeric(iban))


def is_valid_iban_checksum(iban: str) -> bool:
    """Return ``True`` when the IBAN remainder equals 1."""
    return iban_remainder(iban) == 1


def iban_check_digits(country_code: str, bban: str) -> str:
    """Compute the two IBAN check digits for a country code and BBAN."""
    remainder = iban_remainder(f"{country_code}00{bban}")
    return _pad(98 - remainder)
