"""morocco-ids — Validators, formatters and extractors for Moroccan identifiers.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
>>> import morocco_ids as mid
>>> mid.validate_ice("123456789000060").is_valid
True
>>> mid.format_ice("123456789000161", mid.IceFormatOptions(separator="-", prefix=True))
'ICE-123456789-0001-61'
>>> mid.is_valid_iban("MA64 0071 0800 0779 2000 3031 2071")
True
"""
from __future__ import annotations

__version__: str = "0.1.0"

from morocco_ids.results import MoroccoIdError, ValidationFailure
from morocco_ids.sanitize import sanitize_alphanumeric, sanitize_digits

# ---------------------------------------------------------------------------
# ICE
# ---------------------------------------------------------------------------
from morocco_ids.ice import (
    IceComponents,
    IceExtractionError,
    IceExtractionErrorCode,
    IceFormatOptions,
    IceFormattingError,
    IceFormattingErrorCode,
    IceGenerationOptions,
    IceValidationErrorCode,
    IceValidationResult,
    calculate_control,
    extract_ice_components,
    format_ice,
    format_ice_while_typing,
    generate_random_digits,
    generate_test_ice,
    is_valid_ice,
    sanitize_ice,
    unformat_ice,
    validate_control,
    validate_ice,
)

# ---------------------------------------------------------------------------
# Bank (RIB / IBAN)
# ---------------------------------------------------------------------------
from morocco_ids.bank import (
    BankDetails,
    BankExtractionError,
    BankFormatOptions,
    BankFormattingError,
    BankRegistry,
    BankValidationError,
    BankValidationErrorCode,
    BankValidationResult,
    RibComponents,
    RibDetails,
    extract_rib_components,
    format_iban,
    format_rib,
    get_bank_details,
    get_rib_details,
    get_swift_code,
    is_valid_iban,
    is_valid_rib,
    mad_to_words,
    mask_identifier,
    validate_iban,
    validate_rib,
)

__all__ = [
    "__version__",
    "MoroccoIdError",
    "ValidationFailure",
    "sanitize_alphanumeric",
    "sanitize_digits",
    # ICE
    "IceComponents",
    "IceExtractionError",
    "IceExtractionErrorCode",
    "IceFormatOptions",
    "IceFormattingError",
    "IceFormattingErrorCode",
    "IceGenerationOptions",
    "IceValidationErrorCode",
    "IceValidationResult",
    "calculate_control",
    "extract_ice_components",
    "format_ice",
    "format_ice_while_typing",
    "generate_random_digits",
    "generate_test_ice",
    "is_valid_ice",
    "sanitize_ice",
    "unformat_ice",
    "validate_control",
    "validate_ice",
    # Bank
    "BankDetails",
    "BankExtractionError",
    "BankFormatOptions",
    "BankFormattingError",
    "BankRegistry",
    "BankValidationError",
    "BankValidationErrorCode",
    "BankValidationResult",
    "RibComponents",
    "RibDetails",
    "extract_rib_components",
    "format_iban",
    "format_rib",
    "get_bank_details",
    "get_rib_details",
    "get_swift_code",
    "is_valid_iban",
    "is_valid_rib",
    "mad_to_words",
    "mask_identifier",
    "validate_iban",
    "validate_rib",
]
