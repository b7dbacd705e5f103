"""RIB and IBAN validation for Moroccan bank accounts.

A Moroccan RIB is 24 digits: a 3-digit bank code, a 3-digit branch (city)
code, a 16-digit account number and a 2-digit key.  The IBAN wraps it as
``MA`` + 2 check digits + the RIB as BBAN, 28 characters in total.

Both validators return a :class:`BankValidationResult` and never raise.
The boolean wrappers :func:`is_valid_rib` and :func:`is_valid_iban` cover
the common case; :func:`get_rib_details` re-derives the bank metadata and
components on demand.

Example
-------
>>> is_valid_rib("007000000000000000000149")
True
>>> is_valid_iban("MA64 0071 0800 0779 2000 3031 2071")
True
>>> validate_rib("007000000000000000000148").error.code
'BANK_007'
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from morocco_ids.bank.registry import IBAN_COUNTRY_CODE, IBAN_LENGTH, BankDetails, BankRegistry
from morocco_ids.checksum import iban_check_digits, is_valid_iban_checksum, rib_key
from morocco_ids.results import MoroccoIdError, ValidationFailure
from morocco_ids.sanitize import sanitize_alphanumeric, sanitize_digits

logger = logging.getLogger(__name__)


class BankValidationErrorCode(str, Enum):
    """Error codes reported by the bank validators."""

    INVALID_INPUT_TYPE = "BANK_001"
    INVALID_IBAN_FORMAT = "BANK_002"
    INVALID_BANK_CODE = "BANK_003"
    INVALID_IBAN_CHECKSUM = "BANK_004"
    INVALID_RIB_FORMAT = "BANK_005"
    INVALID_RIB_LENGTH = "BANK_006"
    INVALID_RIB_CHECKSUM = "BANK_007"
    BANK_NOT_FOUND = "BANK_008"
    INVALID_AMOUNT = "BANK_009"
    BRANCH_NOT_FOUND = "BANK_010"
    INVALID_IBAN_LENGTH = "BANK_011"


class BankValidationError(MoroccoIdError):
    """Raised inside the bank pipelines and by :func:`mad_to_words`."""


@dataclass(frozen=True)
class RibComponents:
    """Segments of a RIB, as laid out by the bank's account format."""

    bank_code: str
    branch_code: str
    account_number: str
    rib_key: str

    def __str__(self) -> str:
        return f"{self.bank_code}{self.branch_code}{self.account_number}{self.rib_key}"


@dataclass(frozen=True)
class BankValidationResult:
    """Outcome of :func:`validate_rib` or :func:`validate_iban`.

    ``is_valid`` is ``True`` exactly when ``components`` is set and
    ``error`` is ``None``.  For an IBAN the components describe its BBAN.
    """

    is_valid: bool
    sanitized: str
    components: RibComponents | None = None
    bank: BankDetails | None = None
    error: ValidationFailure | None = None

    @classmethod
    def success(
        cls, sanitized: str, components: RibComponents, bank: BankDetails
    ) -> "BankValidationResult":
        return cls(is_valid=True, sanitized=sanitized, components=components, bank=bank)

    @classmethod
    def failure(cls, sanitized: str, error: ValidationFailure) -> "BankValidationResult":
        return cls(is_valid=False, sanitized=sanitized, error=error)


@dataclass(frozen=True)
class RibDetails:
    """Bank metadata and components for a valid RIB or IBAN."""

    bank: BankDetails
    components: RibComponents
    swift: str


def split_rib(rib: str, bank: BankDetails) -> RibComponents:
    """Slice a sanitized RIB according to ``bank.account_format``."""
    fmt = bank.account_format
    branch_end = fmt.bank_code + fmt.branch_code
    account_end = branch_end + fmt.account_number
    return RibComponents(
        bank_code=rib[: fmt.bank_code],
        branch_code=rib[fmt.bank_code : branch_end],
        account_number=rib[branch_end:account_end],
        rib_key=rib[account_end : account_end + fmt.rib_key],
    )


def _require_str(value: object, label: str) -> str:
    if not isinstance(value, str):
        raise BankValidationError(
            BankValidationErrorCode.INVALID_INPUT_TYPE,
            f"{label} must be a string",
            {"provided_type": type(value).__name__, "sanitized": ""},
        )
    return value


# ---------------------------------------------------------------------------
# RIB
# ---------------------------------------------------------------------------


def _check_rib(rib: str, registry: BankRegistry) -> tuple[RibComponents, BankDetails]:
    bank_code = rib[:3]
    bank = registry.find(bank_code)
    if bank is None:
        raise BankValidationError(
            BankValidationErrorCode.BANK_NOT_FOUND,
            "Invalid or inactive bank code",
            {"bank_code": bank_code, "sanitized": rib},
        )

    if len(rib) != bank.rib_length:
        raise BankValidationError(
            BankValidationErrorCode.INVALID_RIB_LENGTH,
            "Invalid RIB length",
            {
                "expected_length": bank.rib_length,
                "received_length": len(rib),
                "sanitized": rib,
            },
        )

    if not bank.rib_regex.match(rib):
        raise BankValidationError(
            BankValidationErrorCode.INVALID_RIB_FORMAT,
            "RIB does not match bank-specific format",
            {"bank_code": bank.code, "sanitized": rib},
        )

    components = split_rib(rib, bank)
    payload = rib[: -bank.account_format.rib_key]
    calculated = rib_key(payload)
    if calculated != components.rib_key:
        raise BankValidationError(
            BankValidationErrorCode.INVALID_RIB_CHECKSUM,
            "Invalid RIB checksum",
            {
                "calculated_key": calculated,
                "provided_key": components.rib_key,
                "sanitized": rib,
            },
        )
    return components, bank


def validate_rib(value: object, registry: BankRegistry | None = None) -> BankValidationResult:
    """Validate a Moroccan RIB.

    Steps: input type, digit sanitization, bank lookup on the first three
    digits, bank-specific length, bank-specific format, RIB key.

    Parameters
    ----------
    value:
        Candidate RIB.  Spaces, hyphens and other separators are ignored.
    registry:
        Bank table to consult.  Defaults to :meth:`BankRegistry.default`.

    Returns
    -------
    BankValidationResult
        Never raises.
    """
    if registry is None:
        registry = BankRegistry.default()
    try:
        rib = sanitize_digits(_require_str(value, "RIB"))
        components, bank = _check_rib(rib, registry)
    except BankValidationError as exc:
        logger.debug("RIB rejected: %s %s", exc.code.value, exc.message)
        return BankValidationResult.failure(
            str(exc.details.get("sanitized", "")), ValidationFailure.from_error(exc)
        )
    except Exception:
        logger.exception("Unexpected error while validating RIB")
        return BankValidationResult.failure(
            sanitize_digits(value),
            ValidationFailure(
                code=BankValidationErrorCode.INVALID_RIB_FORMAT.value,
                message="Unexpected validation error",
            ),
        )
    return BankValidationResult.success(rib, components, bank)


def is_valid_rib(value: object, registry: BankRegistry | None = None) -> bool:
    """Return ``True`` when ``value`` is a valid RIB."""
    return validate_rib(value, registry).is_valid


# ---------------------------------------------------------------------------
# IBAN
# ---------------------------------------------------------------------------


def _check_iban(iban: str, registry: BankRegistry) -> tuple[RibComponents, BankDetails]:
    if len(iban) != IBAN_LENGTH:
        raise BankValidationError(
            BankValidationErrorCode.INVALID_IBAN_LENGTH,
            f"Moroccan IBAN must be exactly {IBAN_LENGTH} characters",
            {
                "expected_length": IBAN_LENGTH,
                "received_length": len(iban),
                "sanitized": iban,
            },
        )

    bban = iban[4:]
    if not (iban.startswith(IBAN_COUNTRY_CODE) and iban[2:].isdigit()):
        raise BankValidationError(
            BankValidationErrorCode.INVALID_IBAN_FORMAT,
            "Invalid IBAN format",
            {"country_code": iban[:2], "sanitized": iban},
        )

    bank_code = bban[:3]
    bank = registry.find(bank_code)
    if bank is None:
        raise BankValidationError(
            BankValidationErrorCode.INVALID_BANK_CODE,
            "Invalid or inactive bank code",
            {"bank_code": bank_code, "sanitized": iban},
        )

    if not bank.iban_regex.match(iban):
        raise BankValidationError(
            BankValidationErrorCode.INVALID_IBAN_FORMAT,
            "IBAN does not match bank-specific format",
            {"bank_code": bank.code, "sanitized": iban},
        )

    if not is_valid_iban_checksum(iban):
        raise BankValidationError(
            BankValidationErrorCode.INVALID_IBAN_CHECKSUM,
            "Invalid IBAN checksum",
            {
                "calculated_check_digits": iban_check_digits(IBAN_COUNTRY_CODE, bban),
                "provided_check_digits": iban[2:4],
                "sanitized": iban,
            },
        )
    return split_rib(bban, bank), bank


def validate_iban(value: object, registry: BankRegistry | None = None) -> BankValidationResult:
    """Validate a Moroccan IBAN.

    Steps: input type, alphanumeric sanitization (case-insensitive), length,
    ``MA`` + digits format, bank lookup, bank-specific format, MOD 97-10.

    Returns
    -------
    BankValidationResult
        Never raises.  ``components`` describe the BBAN.
    """
    if registry is None:
        registry = BankRegistry.default()
    try:
        iban = sanitize_alphanumeric(_require_str(value, "IBAN"))
        components, bank = _check_iban(iban, registry)
    except BankValidationError as exc:
        logger.debug("IBAN rejected: %s %s", exc.code.value, exc.message)
        return BankValidationResult.failure(
            str(exc.details.get("sanitized", "")), ValidationFailure.from_error(exc)
        )
    except Exception:
        logger.exception("Unexpected error while validating IBAN")
        return BankValidationResult.failure(
            sanitize_alphanumeric(value),
            ValidationFailure(
                code=BankValidationErrorCode.INVALID_IBAN_FORMAT.value,
                message="Unexpected validation error",
            ),
        )
    return BankValidationResult.success(iban, components, bank)


def is_valid_iban(value: object, registry: BankRegistry | None = None) -> bool:
    """Return ``True`` when ``value`` is a valid Moroccan IBAN."""
    return validate_iban(value, registry).is_valid


# ---------------------------------------------------------------------------
# Metadata accessors
# ---------------------------------------------------------------------------


def get_rib_details(value: object, registry: BankRegistry | None = None) -> RibDetails | None:
    """Return bank metadata and components for a valid RIB or IBAN.

    Inputs starting with ``MA`` (any case) are treated as IBANs.  Returns
    ``None`` when the value is invalid.
    """
    if isinstance(value, str) and sanitize_alphanumeric(value).startswith(IBAN_COUNTRY_CODE):
        result = validate_iban(value, registry)
    else:
        result = validate_rib(value, registry)
    if not result.is_valid or result.bank is None or result.components is None:
        return None
    return RibDetails(bank=result.bank, components=result.components, swift=result.bank.swift)


def _bank_code_of(value: str) -> str:
    cleaned = sanitize_alphanumeric(value)
    if cleaned.startswith(IBAN_COUNTRY_CODE):
        return cleaned[4:7]
    return cleaned[:3]


def get_bank_details(code: object, registry: BankRegistry | None = None) -> BankDetails | None:
    """Look up an active bank from a bank code, a RIB or an IBAN.

    >>> get_bank_details("007").swift
    'BCMAMAMC'
    >>> get_bank_details("999") is None
    True
    """
    if not isinstance(code, str):
        return None
    if registry is None:
        registry = BankRegistry.default()
    return registry.find(_bank_code_of(code))


def get_swift_code(
    code: object,
    branch: str | None = None,
    registry: BankRegistry | None = None,
) -> str | None:
    """Return the SWIFT/BIC of a bank, or of one of its branches.

    Returns ``None`` when the bank is unknown or when ``branch`` is given
    and the bank lists branches but not that one.  Banks without a branch
    list fall back to the head-office code.
    """
    bank = get_bank_details(code, registry)
    if bank is None:
        return None
    if branch and bank.branches:
        found = bank.find_branch(branch)
        if found is None:
            logger.debug("Branch %s not found for bank %s", branch, bank.code)
            return None
        return found.swift
    return bank.swift
