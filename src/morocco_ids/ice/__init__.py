"""ICE (Identifiant Commun de l'Entreprise) validation, formatting and extraction."""
from __future__ import annotations

from morocco_ids.ice.extractor import (
    IceExtractionError,
    IceExtractionErrorCode,
    extract_ice_components,
)
from morocco_ids.ice.formatter import (
    IceFormatOptions,
    IceFormattingError,
    IceFormattingErrorCode,
    format_ice,
    format_ice_while_typing,
    unformat_ice,
)
from morocco_ids.ice.generator import (
    IceGenerationOptions,
    generate_random_digits,
    generate_test_ice,
)
from morocco_ids.ice.validator import (
    IceComponents,
    IceValidationError,
    IceValidationErrorCode,
    IceValidationResult,
    calculate_control,
    is_valid_ice,
    sanitize_ice,
    validate_control,
    validate_ice,
)

__all__ = [
    "IceComponents",
    "IceExtractionError",
    "IceExtractionErrorCode",
    "IceFormatOptions",
    "IceFormattingError",
    "IceFormattingErrorCode",
    "IceGenerationOptions",
    "IceValidationError",
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
]
