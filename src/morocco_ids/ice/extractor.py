"""Component extraction for ICE numbers.

Extraction always goes through :func:`validate_ice` first.  Invalid input
raises :class:`IceExtractionError` carrying the upstream validation result
unchanged, so callers can tell a malformed ICE apart from an extraction
fault.
"""
from __future__ import annotations

from enum import Enum

from morocco_ids.checksum import CONTROL_LENGTH
from morocco_ids.ice.validator import (
    COMPANY_LENGTH,
    ESTABLISHMENT_LENGTH,
    IceComponents,
    validate_ice,
)
from morocco_ids.results import MoroccoIdError


class IceExtractionErrorCode(str, Enum):
    """Error codes raised by :func:`extract_ice_components`."""

    INVALID_INPUT = "ICE_EXTRACT_001"
    MISSING_COMPONENTS = "ICE_EXTRACT_002"
    INVALID_COMPONENT_LENGTH = "ICE_EXTRACT_003"


class IceExtractionError(MoroccoIdError):
    """Raised when ICE components cannot be extracted."""


def extract_ice_components(value: object) -> IceComponents:
    """Return the company, establishment and control segments of an ICE.

    Parameters
    ----------
    value:
        The ICE, raw or formatted.

    Returns
    -------
    IceComponents
        The validated segments.

    Raises
    ------
    IceExtractionError
        ``ICE_EXTRACT_001`` when the ICE is invalid, ``ICE_EXTRACT_002`` when
        the validator accepted the ICE without producing components, and
        ``ICE_EXTRACT_003`` when a segment has the wrong width.
    """
    validation = validate_ice(value)
    if not validation.is_valid:
        raise IceExtractionError(
            IceExtractionErrorCode.INVALID_INPUT,
            "Cannot extract elements from invalid ICE number",
            {"input": value, "validation_result": validation},
        )

    components = validation.components
    if components is None:
        raise IceExtractionError(
            IceExtractionErrorCode.MISSING_COMPONENTS,
            "ICE components are missing",
            {"input": value},
        )

    if (
        len(components.company) != COMPANY_LENGTH
        or len(components.establishment) != ESTABLISHMENT_LENGTH
        or len(components.control) != CONTROL_LENGTH
    ):
        raise IceExtractionError(
            IceExtractionErrorCode.INVALID_COMPONENT_LENGTH,
            "ICE components have invalid lengths",
            {
                "company": components.company,
                "establishment": components.establishment,
                "control": components.control,
            },
        )

    return components
