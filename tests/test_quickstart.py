"""Test that the top-level quickstart API works for morocco-ids."""
from __future__ import annotations


def test_quickstart_import() -> None:
    import morocco_ids

    assert morocco_ids.__version__ == "0.1.0"


def test_quickstart_validate_ice() -> None:
    from morocco_ids import validate_ice

    result = validate_ice("123456789000060")
    assert result.is_valid is True
    assert result.components is not None
    assert result.components.establishment == "0000"


def test_quickstart_format_ice() -> None:
    from morocco_ids import IceFormatOptions, format_ice

    options = IceFormatOptions(separator="-", prefix=True)
    assert format_ice("123456789000161", options) == "ICE-123456789-0001-61"


def test_quickstart_bank_accounts() -> None:
    from morocco_ids import is_valid_iban, is_valid_rib

    assert is_valid_iban("MA64 0071 0800 0779 2000 3031 2071") is True
    assert is_valid_rib("007000000000000000000149") is True


def test_quickstart_all_exports_resolve() -> None:
    import morocco_ids

    for name in morocco_ids.__all__:
        assert hasattr(morocco_ids, name), name
