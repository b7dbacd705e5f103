"""Unit tests for cli/main.py — the morocco-ids command line."""
from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from morocco_ids.cli.main import cli

VALID_RIB = "007000000000000000000149"
VALID_IBAN = "MA64007108000779200030312071"


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture()
def banks_file(tmp_path: Path) -> str:
    path = tmp_path / "banks.yaml"
    path.write_text(
        'banks:\n  - code: "007"\n    name: Custom Bank\n    swift: CUSTMAMC\n',
        encoding="utf-8",
    )
    return str(path)


# ---------------------------------------------------------------------------
# Root group
# ---------------------------------------------------------------------------


class TestRootCommands:
    def test_help(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "ice" in result.output
        assert "iban" in result.output

    def test_version(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output


# ---------------------------------------------------------------------------
# ice
# ---------------------------------------------------------------------------


class TestIceCommands:
    def test_validate_valid(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["ice", "validate", "123456789000060"])
        assert result.exit_code == 0
        assert "VALID" in result.output
        assert "123456789" in result.output

    def test_validate_invalid(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["ice", "validate", "123456789000061"])
        assert result.exit_code == 1
        assert "ICE_004" in result.output

    def test_format(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli, ["ice", "format", "123456789000161", "--separator", "-", "--prefix"]
        )
        assert result.exit_code == 0
        assert "ICE-123456789-0001-61" in result.output

    def test_format_invalid(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["ice", "format", "123"])
        assert result.exit_code == 1

    def test_generate(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["ice", "generate", "--count", "3"])
        assert result.exit_code == 0
        lines = [line for line in result.output.splitlines() if line.strip()]
        assert len(lines) == 3
        assert all(len(line.strip()) == 15 for line in lines)

    def test_generate_bad_separator(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["ice", "generate", "--format", "--separator", "12"])
        assert result.exit_code == 1


# ---------------------------------------------------------------------------
# rib / iban
# ---------------------------------------------------------------------------


class TestBankAccountCommands:
    def test_rib_valid(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["rib", "validate", VALID_RIB])
        assert result.exit_code == 0
        assert "Attijariwafa Bank" in result.output

    def test_rib_invalid(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["rib", "validate", "007000000000000000000148"])
        assert result.exit_code == 1
        assert "BANK_007" in result.output

    def test_rib_custom_banks(self, runner: CliRunner, banks_file: str) -> None:
        result = runner.invoke(cli, ["rib", "validate", VALID_RIB, "--banks", banks_file])
        assert result.exit_code == 0
        assert "Custom Bank" in result.output

    def test_iban_valid(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["iban", "validate", VALID_IBAN])
        assert result.exit_code == 0
        assert "MA64 0071 0800 0779 2000 3031 2071" in result.output

    def test_iban_masked(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["iban", "validate", VALID_IBAN, "--mask"])
        assert result.exit_code == 0
        assert "0779" not in result.output

    def test_iban_invalid(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["iban", "validate", "MA65007108000779200030312071"])
        assert result.exit_code == 1
        assert "BANK_004" in result.output


# ---------------------------------------------------------------------------
# bank / amount
# ---------------------------------------------------------------------------


class TestBankCommands:
    def test_show(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["bank", "show", "007", "--branch", "ATI"])
        assert result.exit_code == 0
        assert "BCMAMAMCATI" in result.output

    def test_show_unknown(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["bank", "show", "999"])
        assert result.exit_code == 1

    def test_show_unknown_branch(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["bank", "show", "007", "--branch", "XXX"])
        assert result.exit_code == 1

    def test_list(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["bank", "list"])
        assert result.exit_code == 0
        assert "BCMAMAMC" in result.output
        assert "CIHMMAMC" in result.output

    def test_list_invalid_table(self, runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "broken.yaml"
        path.write_text('banks:\n  - code: "007"\n', encoding="utf-8")
        result = runner.invoke(cli, ["bank", "list", "--banks", str(path)])
        assert result.exit_code == 1


class TestAmountCommands:
    def test_words(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["amount", "words", "1234.56"])
        assert result.exit_code == 0
        assert "cinquante-six centimes" in result.output

    def test_words_invalid(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["amount", "words", "abc"])
        assert result.exit_code == 1
