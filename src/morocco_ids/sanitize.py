"""Input sanitizers shared by every identifier scheme.

Raw input is never trusted.  Each sanitizer accepts any object and returns
a string restricted to the alphabet of the target scheme.  Full-width
characters (``"１２３"``) are folded to their ASCII forms through Unicode
NFKC normalisation before filtering, so they count as digits rather than
noise.  Separators such as spaces, hyphens, slashes, dots and underscores
are simply removed.

Example
-------
>>> sanitize_digits("ICE 123-456/789.0001_60")
'123456789000160'
>>> sanitize_alphanumeric("ma64 0071 0800")
'MA6400710800'
>>> sanitize_digits(None)
''
"""
from __future__ import annotations

import re
import unicodedata

_NON_DIGIT = re.compile(r"[^0-9]")
_NON_ALPHANUMERIC = re.compile(r"[^A-Za-z0-9]")


def _normalise(value: str) -> str:
    return unicodedata.normalize("NFKC", value)


def sanitize_digits(value: object) -> str:
    """Return only the ASCII digits of ``value``.

    Parameters
    ----------
    value:
        Any object.  Non-string input yields an empty string.

    Returns
    -------
    str
        The digits of ``value`` in order of appearance.
    """
    if not isinstance(value, str):
        return ""
    return _NON_DIGIT.sub("", _normalise(value))


def sanitize_alphanumeric(value: object) -> str:
    """Return the uppercase ASCII letters and digits of ``value``.

    Non-string input yields an empty string.
    """
    if not isinstance(value, str):
        return ""
    # Filter before uppercasing so letters like "ß" cannot expand into ASCII.
    return _NON_ALPHANUMERIC.sub("", _normalise(value)).upper()


def strip_prefix(value: object, prefix: str) -> str:
    """Remove a case-insensitive ``prefix`` and the non-digit run after it.

    The prefix is only removed when it appears at the very start of
    ``value``.  The remainder is returned untouched otherwise.
    """
    if not isinstance(value, str):
        return ""
    normalised = _normalise(value)
    pattern = re.compile(rf"^{re.escape(prefix)}\D*", re.IGNORECASE)
    return pattern.sub("", normalised, count=1)
