"""Moroccan bank reference table.

The table maps the 3-digit bank code that opens every RIB (and sits at
offset 4 of every Moroccan IBAN) to the bank's metadata: name, SWIFT/BIC,
account layout and format regexes.  It is loaded once from an embedded YAML
document, validated with Pydantic v2, and exposed read-only through frozen models.

A custom table can be loaded from a YAML file with the same layout::

    version: "1"
    banks:
      - code: "007"
        name: Attijariwafa Bank
        swift: BCMAMAMC
        branches:
          - {code: ATI, swift: BCMAMAMCATI, city: Casablanca}

``rib_length`` defaults to the sum of ``account_format`` and both regexes
default to the bank code followed by the right number of digits.

Example
-------
>>> registry = BankRegistry.default()
>>> registry.find("007").name
'Attijariwafa Bank'
>>> registry.find("999") is None
True
"""
from __future__ import annotations

import functools
import logging
import re
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

logger = logging.getLogger(__name__)

IBAN_COUNTRY_CODE: str = "MA"
IBAN_LENGTH: int = 28

_DEFAULT_BANKS_YAML = """\
# Moroccan banks (Bank Al-Maghrib bank codes)
version: "1"
banks:
  - code: "007"
    name: Attijariwafa Bank
    swift: BCMAMAMC
    example: "007000000000000000000149"
    branches:
      - code: ATI
        swift: BCMAMAMCATI
        city: Casablanca
        name: Attijariwafa Bank Siege
  - code: "011"
    name: Bank of Africa
    swift: BMCEMAMC
  - code: "013"
    name: BMCI
    swift: BMCIMAMC
  - code: "017"
    name: Citibank Maghreb
    swift: CITIMAMC
    active: false
    status: retail activity discontinued
  - code: "021"
    name: Credit du Maroc
    swift: CDMAMAMC
  - code: "022"
    name: Societe Generale Maroc
    swift: SGMBMAMC
  - code: "050"
    name: CFG Bank
    swift: CAFGMAMC
  - code: "190"
    name: Banque Centrale Populaire
    swift: BCPOMAMC
  - code: "225"
    name: Credit Agricole du Maroc
    swift: CNCAMAMR
  - code: "230"
    name: CIH Bank
    swift: CIHMMAMC
"""


class AccountFormat(BaseModel):
    """Width of each RIB segment for a bank."""

    model_config = {"frozen": True}

    bank_code: int = Field(default=3, ge=1)
    branch_code: int = Field(default=3, ge=1)
    account_number: int = Field(default=16, ge=1)
    rib_key: int = Field(default=2, ge=1)

    @property
    def total(self) -> int:
        return self.bank_code + self.branch_code + self.account_number + self.rib_key


class Branch(BaseModel):
    """A bank branch with its own SWIFT/BIC."""

    model_config = {"frozen": True, "extra": "allow"}

    code: str
    swift: str
    city: str
    name: str | None = None


class BankDetails(BaseModel):
    """Reference metadata for one bank.

    Attributes
    ----------
    code:
        3-digit bank code.
    name:
        Display name.
    swift:
        Head-office SWIFT/BIC.
    active:
        Inactive banks are ignored by the validators.
    account_format:
        RIB segment widths.
    rib_length:
        Total RIB length.  Must equal the sum of ``account_format``.
    rib_regex, iban_regex:
        Bank-specific patterns for the sanitized RIB and IBAN.
    branches:
        Known branches with their own SWIFT/BIC.
    """

    model_config = {"frozen": True, "extra": "allow"}

    code: str
    name: str
    swift: str
    active: bool = True
    account_format: AccountFormat = Field(default_factory=AccountFormat)
    rib_length: int
    rib_regex: re.Pattern[str]
    iban_regex: re.Pattern[str]
    status: str | None = None
    example: str | None = None
    branches: list[Branch] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def fill_derived_fields(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        code = str(data.get("code", ""))
        account_format = data.get("account_format") or {}
        if isinstance(account_format, AccountFormat):
            total = account_format.total
        else:
            total = AccountFormat.model_validate(account_format).total
        data.setdefault("rib_length", total)
        tail = total - len(code)
        data.setdefault("rib_regex", rf"^{code}\d{{{tail}}}$")
        data.setdefault("iban_regex", rf"^{IBAN_COUNTRY_CODE}\d{{2}}{code}\d{{{tail}}}$")
        return data

    @field_validator("code")
    @classmethod
    def code_must_be_digits(cls, value: str) -> str:
        if not (value.isascii() and value.isdigit()):
            raise ValueError(f"Bank code must be numeric, got '{value}'")
        return value

    @model_validator(mode="after")
    def check_layout(self) -> "BankDetails":
        if len(self.code) != self.account_format.bank_code:
            raise ValueError(
                f"Bank code '{self.code}' does not match account_format.bank_code="
                f"{self.account_format.bank_code}"
            )
        if self.rib_length != self.account_format.total:
            raise ValueError(
                f"rib_length={self.rib_length} does not match account_format total "
                f"{self.account_format.total} for bank {self.code}"
            )
        return self

    def find_branch(self, code: str) -> Branch | None:
        """Return the branch with ``code`` or ``None``."""
        for branch in self.branches:
            if branch.code == code:
                return branch
        return None


class BankTable(BaseModel):
    """Top-level schema of a bank reference YAML document."""

    model_config = {"extra": "allow"}

    version: str = Field(default="1")
    banks: list[BankDetails] = Field(default_factory=list)


class BankRegistry:
    """Read-only lookup of :class:`BankDetails` by bank code.

    Parameters
    ----------
    banks:
        Bank records.  Codes must be unique.

    Raises
    ------
    ValueError
        When two records share a code.
    """

    def __init__(self, banks: Iterable[BankDetails]) -> None:
        by_code: dict[str, BankDetails] = {}
        for bank in banks:
            if bank.code in by_code:
                raise ValueError(f"Duplicate bank code '{bank.code}'")
            by_code[bank.code] = bank
        self._banks: dict[str, BankDetails] = by_code

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def load_string(cls, yaml_content: str) -> "BankRegistry":
        """Build a registry from YAML text.

        Raises
        ------
        pydantic.ValidationError
            When a record does not match the schema.
        """
        raw: dict[str, object] = yaml.safe_load(yaml_content) or {}
        table = BankTable.model_validate(raw)
        registry = cls(table.banks)
        logger.info("Loaded %d banks (table version %s)", len(registry), table.version)
        return registry

    @classmethod
    def load(cls, path: str | Path) -> "BankRegistry":
        """Build a registry from a YAML file.

        Raises
        ------
        FileNotFoundError
            When the file does not exist.
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Bank table not found: {path}")
        return cls.load_string(path.read_text(encoding="utf-8"))

    @classmethod
    def default(cls) -> "BankRegistry":
        """Return the shared registry built from the embedded table."""
        return _default_registry()

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def find(self, code: str, include_inactive: bool = False) -> BankDetails | None:
        """Return the bank for ``code``, skipping inactive banks by default."""
        bank = self._banks.get(code)
        if bank is None or (not bank.active and not include_inactive):
            return None
        return bank

    def __contains__(self, code: object) -> bool:
        return code in self._banks

    def __iter__(self) -> Iterator[BankDetails]:
        return iter(self._banks.values())

    def __len__(self) -> int:
        return len(self._banks)


@functools.lru_cache(maxsize=1)
def _default_registry() -> BankRegistry:
    return BankRegistry.load_string(_DEFAULT_BANKS_YAML)
