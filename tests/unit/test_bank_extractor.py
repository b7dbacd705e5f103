"""Unit tests for bank/extractor.py — extract_rib_components."""
from __future__ import annotations

import pytest

from morocco_ids.bank import extractor as bank_extractor
from morocco_ids.bank.extractor import (
    BankExtractionError,
    BankExtractionErrorCode,
    extract_rib_components,
)
from morocco_ids.bank.registry import BankRegistry
from morocco_ids.bank.validator import BankValidationResult, RibComponents

VALID_RIB = "007000000000000000000149"


class TestExtractRibComponents:
    def test_valid_rib(self) -> None:
        components = extract_rib_components(VALID_RIB)
        assert components.bank_code == "007"
        assert components.branch_code == "000"
        assert components.account_number == "0000000000000001"
        assert components.rib_key == "49"
        assert str(components) == VALID_RIB

    def test_invalid_rib(self) -> None:
        with pytest.raises(BankExtractionError) as exc_info:
            extract_rib_components("007000000000000000000148")
        error = exc_info.value
        assert error.code is BankExtractionErrorCode.INVALID_INPUT
        assert error.details["input"] == "007000000000000000000148"
        assert error.details["validation_result"].error.code == "BANK_007"

    def test_missing_components(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(
            bank_extractor,
            "validate_rib",
            lambda value, registry=None: BankValidationResult(is_valid=True, sanitized=VALID_RIB),
        )
        with pytest.raises(BankExtractionError) as exc_info:
            extract_rib_components(VALID_RIB)
        assert exc_info.value.code is BankExtractionErrorCode.MISSING_COMPONENTS

    def test_invalid_component_length(self, monkeypatch: pytest.MonkeyPatch) -> None:
        bank = BankRegistry.default().find("007")
        broken = RibComponents(
            bank_code="007", branch_code="000", account_number="1", rib_key="49"
        )
        monkeypatch.setattr(
            bank_extractor,
            "validate_rib",
            lambda value, registry=None: BankValidationResult(
                is_valid=True, sanitized="007000149", components=broken, bank=bank
            ),
        )
        with pytest.raises(BankExtractionError) as exc_info:
            extract_rib_components("007000149")
        error = exc_info.value
        assert error.code is BankExtractionErrorCode.INVALID_COMPONENT_LENGTH
        assert error.details["account_number"] == "1"
