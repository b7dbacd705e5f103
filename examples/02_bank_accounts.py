#!/usr/bin/env python3
"""Example: Bank accounts — RIB and IBAN

Validate Moroccan RIBs and IBANs, look up bank metadata, print masked
account numbers and spell an amount for a cheque.

Usage:
    python examples/02_bank_accounts.py
"""
from __future__ import annotations

import logging

import morocco_ids as mid


def main() -> None:
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    rib = "007 000 0000000000000001 49"
    iban = "MA64 0071 0800 0779 2000 3031 2071"

    # Step 1: Validate
    for label, result in (("RIB", mid.validate_rib(rib)), ("IBAN", mid.validate_iban(iban))):
        print(f"{label}: valid={result.is_valid} components={result.components}")

    rejected = mid.validate_rib("007000000000000000000148")
    if rejected.error is not None:
        print(f"Rejected RIB: {rejected.error.code} {rejected.error.details}")

    # Step 2: Bank metadata
    bank = mid.get_bank_details(iban)
    if bank is not None:
        print(f"\nBank: {bank.name} ({bank.code})")
        print(f"SWIFT: {mid.get_swift_code(iban)}")
        print(f"Branch SWIFT: {mid.get_swift_code('007', 'ATI')}")

    # Step 3: Display
    masked = mid.BankFormatOptions(mask=True)
    print(f"\nIBAN: {mid.format_iban(iban)}")
    print(f"Masked IBAN: {mid.format_iban(iban, masked)}")
    print(f"RIB: {mid.format_rib(rib, mid.BankFormatOptions(separator='-'))}")

    # Step 4: Cheque amount
    print(f"\n1234.56 MAD: {mid.mad_to_words(1234.56)}")


if __name__ == "__main__":
    main()
