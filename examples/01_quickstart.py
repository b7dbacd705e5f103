#!/usr/bin/env python3
"""Example: Quickstart — morocco-ids

Minimal working example: validate, format and take apart an ICE.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install morocco-ids
"""
from __future__ import annotations

import morocco_ids as mid


def main() -> None:
    print(f"morocco-ids version: {mid.__version__}")

    # Step 1: Validate raw user input
    candidates = [
        "123456789000060",
        "ICE 123-456-789-0001-61",
        "123456789000061",
        "12345",
    ]
    print("\nICE validation:")
    for candidate in candidates:
        result = mid.validate_ice(candidate)
        icon = "VALID" if result.is_valid else "INVALID"
        print(f"  [{icon}] {candidate!r} -> {result.sanitized}")
        if result.error is not None:
            print(f"    {result.error.code}: {result.error.message} {result.error.details}")

    # Step 2: Format for display
    options = mid.IceFormatOptions(separator="-", prefix=True)
    print(f"\nFormatted: {mid.format_ice('123456789000161', options)}")
    print(f"While typing: {mid.format_ice_while_typing('1234567890')}")

    # Step 3: Extract components
    components = mid.extract_ice_components("123456789000161")
    print(f"\nCompany: {components.company}")
    print(f"Establishment: {components.establishment}")
    print(f"Control: {components.control}")

    # Step 4: Generate fixtures
    print("\nGenerated test ICEs:")
    for _ in range(3):
        print(f"  {mid.generate_test_ice(mid.IceGenerationOptions(format=True))}")


if __name__ == "__main__":
    main()
