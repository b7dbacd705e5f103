"""Component extraction for RIBs."""
from __future__ import annotations

from enum import Enum

from morocco_ids.bank.registry import BankRegistry
from morocco_ids.bank.validator import RibComponents, validate_rib
from morocco_ids.results import MoroccoIdError


class BankExtractionErrorCode(str, Enum):
    """Error codes raised by :func:`extract_rib_components`."""

    INVALID_INPUT = "BANK_EXTRACT_001"
    MISSING_COMPONENTS = "BANK_EXTRACT_002"
    INVALID_COMPONENT_LENGTH = "BANK_EXTRACT_003"


class BankExtractionError(MoroccoIdError):
    """Raised when RIB components cannot be extracted."""


def extract_rib_components(value: object, registry: BankRegistry | None = None) -> RibComponents:
    """Return the bank, branch, account and key segments of a RIB.

    Raises
    ------
    BankExtractionError
        ``BANK_EXTRACT_001`` for an invalid RIB (``details`` carries the
        validation result), ``BANK_EXTRACT_002`` when a valid result has no
        components, ``BANK_EXTRACT_003`` when a segment width disagrees with
        the bank's account format.
    """
    validation = validate_rib(value, registry)
    if not validation.is_valid:
        raise BankExtractionError(
            BankExtractionErrorCode.INVALID_INPUT,
            "Cannot extract elements from invalid RIB",
            {"input": value, "validation_result": validation},
        )

    components = validation.components
    if components is None or validation.bank is None:
        raise BankExtractionError(
            BankExtractionErrorCode.MISSING_COMPONENTS,
            "RIB components are missing",
            {"input": value},
        )

    fmt = validation.bank.account_format
    widths = {
        "bank_code": (components.bank_code, fmt.bank_code),
        "branch_code": (components.branch_code, fmt.branch_code),
        "account_number": (components.account_number, fmt.account_number),
        "rib_key": (components.rib_key, fmt.rib_key),
    }
    if any(len(segment) != width for segment, width in widths.values()):
        raise BankExtractionError(
            BankExtractionErrorCode.INVALID_COMPONENT_LENGTH,
            "RIB components have invalid lengths",
            {name: segment for name, (segment, _) in widths.items()},
        )

    return components
