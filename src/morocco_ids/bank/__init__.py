"""Moroccan bank identifiers: RIB and IBAN validation, formatting and bank metadata."""
from __future__ import annotations

from morocco_ids.bank.amounts import mad_to_words
from morocco_ids.bank.extractor import (
    BankExtractionError,
    BankExtractionErrorCode,
    extract_rib_components,
)
from morocco_ids.bank.formatter import (
    BankFormatOptions,
    BankFormattingError,
    BankFormattingErrorCode,
    format_iban,
    format_rib,
    mask_identifier,
)
from morocco_ids.bank.registry import AccountFormat, BankDetails, BankRegistry, Branch
from morocco_ids.bank.validator import (
    BankValidationError,
    BankValidationErrorCode,
    BankValidationResult,
    RibComponents,
    RibDetails,
    get_bank_details,
    get_rib_details,
    get_swift_code,
    is_valid_iban,
    is_valid_rib,
    validate_iban,
    validate_rib,
)

__all__ = [
    "AccountFormat",
    "BankDetails",
    "BankExtractionError",
    "BankExtractionErrorCode",
    "BankFormatOptions",
    "BankFormattingError",
    "BankFormattingErrorCode",
    "BankRegistry",
    "BankValidationError",
    "BankValidationErrorCode",
    "BankValidationResult",
    "Branch",
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
