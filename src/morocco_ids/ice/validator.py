"""Structural validator for the ICE (Identifiant Commun de l'Entreprise).

An ICE is 15 digits: a 9-digit company identifier, a 4-digit establishment
identifier and a 2-digit control.  Validation runs a fixed pipeline and
stops at the first failing step:

1. input type (must be ``str``)
2. sanitization (digits only)
3. length (15)
4. character class (ASCII digits)
5. segmentation into components
6. control check (MOD 97 over the first 13 digits)

The control algorithm is provisional.  It matches the MOD 97 rule used by
the reference data until the official OMPIC algorithm is published.

Example
-------
>>> result = validate_ice("123456789000060")
>>> result.is_valid
True
>>> result.components.company
'123456789'
>>> validate_ice("123456789000061").error.code
'ICE_004'
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from morocco_ids.checksum import CONTROL_LENGTH, ICE_LENGTH, ice_control
from morocco_ids.results import MoroccoIdError, ValidationFailure
from morocco_ids.sanitize import sanitize_digits

logger = logging.getLogger(__name__)

COMPANY_LENGTH: int = 9
ESTABLISHMENT_LENGTH: int = 4


class IceValidationErrorCode(str, Enum):
    """Error codes reported by :func:`validate_ice`."""

    INVALID_INPUT_TYPE = "ICE_001"
    INVALID_LENGTH = "ICE_002"
    NON_NUMERIC_CHARACTERS = "ICE_003"
    INVALID_CONTROL = "ICE_004"


class IceValidationError(MoroccoIdError):
    """Raised inside the ICE pipeline; converted to a result at the boundary."""


@dataclass(frozen=True)
class IceComponents:
    """The three fixed-width segments of an ICE."""

    company: str
    establishment: str
    control: str

    def __str__(self) -> str:
        return f"{self.company}{self.establishment}{self.control}"


@dataclass(frozen=True)
class IceValidationResult:
    """Outcome of :func:`validate_ice`.

    ``is_valid`` is ``True`` exactly when ``components`` is set and
    ``error`` is ``None``.  ``sanitized`` is always populated so callers can
    inspect what the validator actually looked at.
    """

    is_valid: bool
    sanitized: str
    components: IceComponents | None = None
    error: ValidationFailure | None = None

    @classmethod
    def success(cls, sanitized: str, components: IceComponents) -> "IceValidationResult":
        return cls(is_valid=True, sanitized=sanitized, components=components)

    @classmethod
    def failure(cls, sanitized: str, error: ValidationFailure) -> "IceValidationResult":
        return cls(is_valid=False, sanitized=sanitized, error=error)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def sanitize_ice(value: object) -> str:
    """Return the digits of ``value`` (empty string for non-string input)."""
    return sanitize_digits(value)


def calculate_control(value: str) -> str:
    """Return the two-digit control for a 13-digit payload or a full ICE."""
    return ice_control(value)


def validate_control(value: object) -> bool:
    """Return ``True`` when a 15-digit ICE carries the correct control.

    Anything that is not a 15-character ASCII digit string is rejected
    without computing a checksum.
    """
    if not isinstance(value, str):
        return False
    if len(value) != ICE_LENGTH or not (value.isascii() and value.isdigit()):
        return False
    return calculate_control(value) == value[-CONTROL_LENGTH:]


def split_components(sanitized: str) -> IceComponents:
    """Slice a 15-digit string into company, establishment and control."""
    split_at = COMPANY_LENGTH + ESTABLISHMENT_LENGTH
    return IceComponents(
        company=sanitized[:COMPANY_LENGTH],
        establishment=sanitized[COMPANY_LENGTH:split_at],
        control=sanitized[split_at:ICE_LENGTH],
    )


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


def _run_pipeline(value: object) -> tuple[str, IceComponents]:
    if not isinstance(value, str):
        raise IceValidationError(
            IceValidationErrorCode.INVALID_INPUT_TYPE,
            "ICE must be a string",
            {"provided_type": type(value).__name__, "sanitized": ""},
        )

    sanitized = sanitize_ice(value)

    if len(sanitized) != ICE_LENGTH:
        raise IceValidationError(
            IceValidationErrorCode.INVALID_LENGTH,
            f"ICE must be exactly {ICE_LENGTH} digits",
            {
                "received_length": len(sanitized),
                "expected_length": ICE_LENGTH,
                "sanitized": sanitized,
            },
        )

    if not (sanitized.isascii() and sanitized.isdigit()):
        raise IceValidationError(
            IceValidationErrorCode.NON_NUMERIC_CHARACTERS,
            "ICE must contain only numeric characters",
            {"sanitized": sanitized},
        )

    components = split_components(sanitized)

    calculated = calculate_control(sanitized)
    if calculated != components.control:
        raise IceValidationError(
            IceValidationErrorCode.INVALID_CONTROL,
            "Invalid ICE control",
            {
                "calculated_control": calculated,
                "provided_control": components.control,
                "sanitized": sanitized,
            },
        )

    return sanitized, components


def validate_ice(value: object) -> IceValidationResult:
    """Validate a Moroccan ICE number.

    Parameters
    ----------
    value:
        Candidate ICE.  Any object is accepted; non-strings fail with
        ``ICE_001``.  Separators and an ``ICE`` label are tolerated.

    Returns
    -------
    IceValidationResult
        Never raises.  On failure ``error`` describes the first failing
        step.
    """
    try:
        sanitized, components = _run_pipeline(value)
    except IceValidationError as exc:
        logger.debug("ICE rejected: %s %s", exc.code.value, exc.message)
        return IceValidationResult.failure(
            str(exc.details.get("sanitized", "")),
            ValidationFailure.from_error(exc),
        )
    except Exception:
        logger.exception("Unexpected error while validating ICE")
        return IceValidationResult.failure(
            sanitize_ice(value),
            ValidationFailure(
                code=IceValidationErrorCode.INVALID_INPUT_TYPE.value,
                message="Unexpected validation error",
            ),
        )
    return IceValidationResult.success(sanitized, components)


def is_valid_ice(value: object) -> bool:
    """Return ``True`` when ``value`` is a valid ICE.

    >>> is_valid_ice("123456789000060")
    True
    >>> is_valid_ice("A123456")
    False
    """
    return validate_ice(value).is_valid
