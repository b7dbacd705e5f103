"""Display formatting and masking for RIBs and IBANs.

Like the ICE formatter, these functions validate first and raise
:class:`BankFormattingError` on invalid input rather than returning a
misleading string.

Example
-------
>>> format_rib("007000000000000000000149")
'007 000 0000000000000001 49'
>>> format_iban("MA64007108000779200030312071")
'MA64 0071 0800 0779 2000 3031 2071'
>>> format_iban("MA64007108000779200030312071", BankFormatOptions(mask=True))
'MA64 **** **** **** **** **** 2071'
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from morocco_ids.bank.registry import BankRegistry
from morocco_ids.bank.validator import BankValidationResult, validate_iban, validate_rib
from morocco_ids.results import MoroccoIdError

IBAN_GROUP_SIZE: int = 4


class BankFormattingErrorCode(str, Enum):
    """Error codes raised by the bank formatters."""

    INVALID_INPUT = "BANK_FORMAT_001"
    INVALID_SEPARATOR = "BANK_FORMAT_002"
    INVALID_MASK = "BANK_FORMAT_003"


class BankFormattingError(MoroccoIdError):
    """Raised when a RIB or IBAN cannot be formatted."""


@dataclass(frozen=True)
class BankFormatOptions:
    """Rendering options for :func:`format_rib` and :func:`format_iban`.

    Attributes
    ----------
    separator:
        Single non-alphanumeric character placed between groups.
    mask:
        Hide every character except ``visible_start`` leading and
        ``visible_end`` trailing ones.
    mask_char:
        Replacement character used when masking.
    """

    separator: str = " "
    mask: bool = False
    visible_start: int = 4
    visible_end: int = 4
    mask_char: str = "*"


def mask_identifier(
    value: str,
    visible_start: int = 4,
    visible_end: int = 4,
    mask_char: str = "*",
) -> str:
    """Replace the middle of ``value`` with ``mask_char``.

    Values too short to hide anything are returned unchanged.

    >>> mask_identifier("MA64007108000779200030312071")
    'MA64********************2071'
    """
    if visible_start < 0 or visible_end < 0 or len(mask_char) != 1:
        raise BankFormattingError(
            BankFormattingErrorCode.INVALID_MASK,
            "Mask range must be non-negative and mask_char a single character",
            {"visible_start": visible_start, "visible_end": visible_end, "mask_char": mask_char},
        )
    hidden = len(value) - visible_start - visible_end
    if hidden <= 0:
        return value
    return value[:visible_start] + mask_char * hidden + value[len(value) - visible_end :]


def _check_options(options: BankFormatOptions) -> str:
    separator = options.separator
    if not isinstance(separator, str) or len(separator) != 1 or separator.isalnum():
        raise BankFormattingError(
            BankFormattingErrorCode.INVALID_SEPARATOR,
            "Separator must be a single non-alphanumeric character",
            {"separator": separator},
        )
    if options.mask and separator == options.mask_char:
        raise BankFormattingError(
            BankFormattingErrorCode.INVALID_SEPARATOR,
            "Separator must differ from the mask character",
            {"separator": separator, "mask_char": options.mask_char},
        )
    return separator


def _require_valid(value: object, validation: BankValidationResult, label: str) -> None:
    if not validation.is_valid or validation.components is None or validation.bank is None:
        raise BankFormattingError(
            BankFormattingErrorCode.INVALID_INPUT,
            f"Cannot format invalid {label}",
            {"input": value, "validation_result": validation},
        )


def _apply_mask(value: str, options: BankFormatOptions) -> str:
    if not options.mask:
        return value
    return mask_identifier(value, options.visible_start, options.visible_end, options.mask_char)


def format_rib(
    value: object,
    options: BankFormatOptions | None = None,
    registry: BankRegistry | None = None,
) -> str:
    """Render a valid RIB as ``bank sep branch sep account sep key``.

    Raises
    ------
    BankFormattingError
        When the RIB is invalid or the options are inconsistent.
    """
    opts = options or BankFormatOptions()
    validation = validate_rib(value, registry)
    _require_valid(value, validation, "RIB")
    separator = _check_options(opts)

    rib = _apply_mask(validation.sanitized, opts)
    fmt = validation.bank.account_format  # type: ignore[union-attr]
    widths = (fmt.bank_code, fmt.branch_code, fmt.account_number, fmt.rib_key)

    parts: list[str] = []
    cursor = 0
    for width in widths:
        parts.append(rib[cursor : cursor + width])
        cursor += width
    return separator.join(parts)


def format_iban(
    value: object,
    options: BankFormatOptions | None = None,
    registry: BankRegistry | None = None,
) -> str:
    """Render a valid IBAN in blocks of four characters.

    Raises
    ------
    BankFormattingError
        When the IBAN is invalid or the options are inconsistent.
    """
    opts = options or BankFormatOptions()
    validation = validate_iban(value, registry)
    _require_valid(value, validation, "IBAN")
    separator = _check_options(opts)

    iban = _apply_mask(validation.sanitized, opts)
    return separator.join(
        iban[i : i + IBAN_GROUP_SIZE] for i in range(0, len(iban), IBAN_GROUP_SIZE)
    )
