"""Display formatting for ICE numbers.

:func:`format_ice` renders a *validated* ICE; it refuses to format anything
the validator rejects.  :func:`unformat_ice` goes the other way and is a
best-effort string transform that never validates.
:func:`format_ice_while_typing` regroups partial input for text fields.

Example
-------
>>> format_ice("123456789000161")
'123456789 0001 61'
>>> format_ice("123456789000161", IceFormatOptions(separator="-", prefix=True))
'ICE-123456789-0001-61'
>>> unformat_ice("ICE 123-456/789.0001_61")
'123456789000161'
>>> format_ice_while_typing("1234567890")
'123 456 789 0'
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from morocco_ids.checksum import ICE_LENGTH
from morocco_ids.ice.validator import validate_ice
from morocco_ids.results import MoroccoIdError
from morocco_ids.sanitize import sanitize_digits, strip_prefix

ICE_PREFIX: str = "ICE"
COMPANY_GROUP_SIZE: int = 3

# Group widths used while typing: company as 3+3+3, then establishment, then control.
_TYPING_GROUPS: tuple[int, ...] = (3, 3, 3, 4, 2)


class IceFormattingErrorCode(str, Enum):
    """Error codes raised by :func:`format_ice`."""

    INVALID_INPUT = "ICE_FORMAT_001"
    INVALID_SEPARATOR = "ICE_FORMAT_002"


class IceFormattingError(MoroccoIdError):
    """Raised when an ICE cannot be formatted."""


@dataclass(frozen=True)
class IceFormatOptions:
    """Rendering options for :func:`format_ice`.

    Attributes
    ----------
    separator:
        Single non-digit character placed between segments.
    prefix:
        Prepend the ``ICE`` label followed by the separator.
    group_company_digits:
        Split the 9-digit company identifier into three groups of three.
    """

    separator: str = " "
    prefix: bool = False
    group_company_digits: bool = False


def _check_separator(separator: object) -> str:
    # "½" or "⑩" carry digits once NFKC-folded by unformat_ice.
    if not isinstance(separator, str) or len(separator) != 1 or sanitize_digits(separator):
        raise IceFormattingError(
            IceFormattingErrorCode.INVALID_SEPARATOR,
            "Separator must be a single non-digit character",
            {"separator": separator},
        )
    return separator


def format_ice(value: object, options: IceFormatOptions | None = None) -> str:
    """Format a valid ICE for display.

    Parameters
    ----------
    value:
        The ICE, raw or already formatted.
    options:
        Rendering options.  Defaults to space-separated segments without a
        prefix.

    Returns
    -------
    str
        The formatted ICE, e.g. ``"ICE 123 456 789 0001 61"``.

    Raises
    ------
    IceFormattingError
        ``ICE_FORMAT_001`` when ``value`` is not a valid ICE (``details``
        holds the input and the full validation result), ``ICE_FORMAT_002``
        when the separator is not a single non-digit character.
    """
    opts = options or IceFormatOptions()

    validation = validate_ice(value)
    if not validation.is_valid or validation.components is None:
        raise IceFormattingError(
            IceFormattingErrorCode.INVALID_INPUT,
            "Cannot format invalid ICE number",
            {"input": value, "validation_result": validation},
        )

    separator = _check_separator(opts.separator)
    components = validation.components

    if opts.group_company_digits:
        company = separator.join(
            components.company[i : i + COMPANY_GROUP_SIZE]
            for i in range(0, len(components.company), COMPANY_GROUP_SIZE)
        )
    else:
        company = components.company

    parts = [company, components.establishment, components.control]
    if opts.prefix:
        parts.insert(0, ICE_PREFIX)
    return separator.join(parts)


def unformat_ice(value: object) -> str:
    """Strip an optional ``ICE`` label and every non-digit character.

    Lossy and never raises; the result is not validated and may be partial.
    """
    return sanitize_digits(strip_prefix(value, ICE_PREFIX))


def format_ice_while_typing(
    value: object,
    max_length: int = ICE_LENGTH,
    separator: str = " ",
) -> str:
    """Regroup a partially typed ICE for an input field.

    Digits are truncated to ``max_length`` and cut at fixed boundaries
    (3, 6, 9 and 13 digits).  Each new digit either extends the last group
    or opens a new one, so already placed separators never move.

    Raises ``IceFormattingError`` (``ICE_FORMAT_002``) when ``separator`` is
    not a single non-digit character.

    >>> format_ice_while_typing("123456")
    '123 456'
    >>> format_ice_while_typing("123-456-789-0001-61")
    '123 456 789 0001 61'
    """
    separator = _check_separator(separator)
    digits = unformat_ice(value)[: max(max_length, 0)]

    groups: list[str] = []
    cursor = 0
    for width in _TYPING_GROUPS:
        if cursor >= len(digits):
            break
        groups.append(digits[cursor : cursor + width])
        cursor += width
    if cursor < len(digits):
        # Overflow past a full ICE stays attached to the control group.
        groups[-1] += digits[cursor:]
    return separator.join(groups)
