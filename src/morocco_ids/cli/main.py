"""CLI entry point for morocco-ids.

Invoked as::

    morocco-ids [OPTIONS] COMMAND [ARGS]...

or during development::

    python -m morocco_ids.cli.main

Commands
--------
- ice validate     Validate an ICE and show its components
- ice format       Format a valid ICE for display
- ice generate     Generate test ICE numbers
- rib validate     Validate a RIB
- iban validate    Validate a Moroccan IBAN
- bank show        Show bank metadata for a code, RIB or IBAN
- bank list        List the bank reference table
- amount words     Spell a dirham amount in French
- version          Show version information

Validation commands exit with status 1 when the input is invalid.
"""
from __future__ import annotations

import sys
from decimal import Decimal, InvalidOperation
from pathlib import Path

import click
from pydantic import ValidationError
from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from morocco_ids.bank.amounts import mad_to_words
from morocco_ids.bank.formatter import BankFormatOptions, format_iban, format_rib, mask_identifier
from morocco_ids.bank.registry import BankRegistry
from morocco_ids.bank.validator import (
    BankValidationError,
    BankValidationResult,
    get_bank_details,
    get_swift_code,
    validate_iban,
    validate_rib,
)
from morocco_ids.ice.formatter import IceFormatOptions, IceFormattingError, format_ice
from morocco_ids.ice.generator import IceGenerationOptions, generate_test_ice
from morocco_ids.ice.validator import validate_ice
from morocco_ids.results import ValidationFailure

console = Console()
err_console = Console(stderr=True)

_BANKS_OPTION = click.option(
    "--banks",
    "banks_path",
    default=None,
    type=click.Path(exists=True, dir_okay=False),
    help="YAML bank table to use instead of the built-in one.",
)


def _load_registry(banks_path: str | None) -> BankRegistry:
    if banks_path is None:
        return BankRegistry.default()
    try:
        return BankRegistry.load(Path(banks_path))
    except ValidationError as exc:
        err_console.print(f"[red]Invalid bank table:[/red] {exc}")
        sys.exit(1)


def _print_failure(title: str, error: ValidationFailure | None) -> None:
    console.print(Panel("[red]INVALID[/red]", title=title, border_style="red"))
    if error is None:
        return
    console.print(f"  Code: [bold]{error.code}[/bold]")
    console.print(f"  Message: {error.message}")
    for key, value in error.details.items():
        console.print(f"  {key}: [cyan]{value}[/cyan]")


# ---------------------------------------------------------------------------
# Root command group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="morocco-ids")
def cli() -> None:
    """Moroccan identifier tools — ICE, RIB and IBAN validation and formatting."""


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from morocco_ids import __version__

    console.print(
        Panel(
            f"[bold]morocco-ids[/bold]  v[cyan]{__version__}[/cyan]\n"
            "Validators, formatters and extractors for Moroccan identifiers.",
            title="Version",
            border_style="blue",
        )
    )


# ---------------------------------------------------------------------------
# ice group
# ---------------------------------------------------------------------------


@cli.group(name="ice")
def ice_group() -> None:
    """ICE (Identifiant Commun de l'Entreprise) commands."""


@ice_group.command(name="validate")
@click.argument("value")
def ice_validate_command(value: str) -> None:
    """Validate an ICE and show its components."""
    result = validate_ice(value)
    if not result.is_valid or result.components is None:
        _print_failure("ICE Validation", result.error)
        sys.exit(1)

    console.print(Panel("[green]VALID[/green]", title="ICE Validation", border_style="green"))
    table = Table(box=box.SIMPLE)
    table.add_column("Component", style="cyan")
    table.add_column("Value", style="bold")
    table.add_row("Company", result.components.company)
    table.add_row("Establishment", result.components.establishment)
    table.add_row("Control", result.components.control)
    console.print(table)


@ice_group.command(name="format")
@click.argument("value")
@click.option("--separator", "-s", default=" ", show_default=True, help="Single non-digit separator.")
@click.option("--prefix/--no-prefix", default=False, help="Prepend the ICE label.")
@click.option("--group/--no-group", "group_company_digits", default=False, help="Group company digits by three.")
def ice_format_command(value: str, separator: str, prefix: bool, group_company_digits: bool) -> None:
    """Format a valid ICE for display."""
    options = IceFormatOptions(
        separator=separator, prefix=prefix, group_company_digits=group_company_digits
    )
    try:
        console.print(format_ice(value, options))
    except IceFormattingError as exc:
        err_console.print(f"[red]{exc.code.value}:[/red] {exc.message}")
        sys.exit(1)


@ice_group.command(name="generate")
@click.option("--count", "-n", default=1, show_default=True, type=click.IntRange(min=1), help="Number of ICEs.")
@click.option("--format", "-f", "formatted", is_flag=True, default=False, help="Format the generated ICEs.")
@click.option("--separator", "-s", default=" ", show_default=True, help="Separator when formatting.")
@click.option("--prefix", is_flag=True, default=False, help="Prepend the ICE label when formatting.")
@click.option("--group", "group_company_digits", is_flag=True, default=False, help="Group company digits.")
def ice_generate_command(
    count: int, formatted: bool, separator: str, prefix: bool, group_company_digits: bool
) -> None:
    """Generate structurally valid ICE numbers for testing."""
    options = IceGenerationOptions(
        format=formatted,
        separator=separator,
        prefix=prefix,
        group_company_digits=group_company_digits,
    )
    try:
        for _ in range(count):
            console.print(generate_test_ice(options))
    except IceFormattingError as exc:
        err_console.print(f"[red]{exc.code.value}:[/red] {exc.message}")
        sys.exit(1)


# ---------------------------------------------------------------------------
# rib / iban groups
# ---------------------------------------------------------------------------


def _print_bank_result(
    title: str, result: BankValidationResult, formatted: str, mask: bool = False
) -> None:
    if not result.is_valid or result.components is None or result.bank is None:
        _print_failure(title, result.error)
        sys.exit(1)

    console.print(Panel("[green]VALID[/green]", title=title, border_style="green"))
    table = Table(box=box.SIMPLE)
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="bold")
    table.add_row("Formatted", formatted)
    table.add_row("Bank", f"{result.bank.name} ({result.bank.code})")
    table.add_row("SWIFT", result.bank.swift)
    table.add_row("Branch code", result.components.branch_code)
    account = result.components.account_number
    table.add_row("Account number", mask_identifier(account) if mask else account)
    table.add_row("RIB key", result.components.rib_key)
    console.print(table)


@cli.group(name="rib")
def rib_group() -> None:
    """RIB (Relevé d'Identité Bancaire) commands."""


@rib_group.command(name="validate")
@click.argument("value")
@click.option("--mask", is_flag=True, default=False, help="Mask the account digits in the output.")
@_BANKS_OPTION
def rib_validate_command(value: str, mask: bool, banks_path: str | None) -> None:
    """Validate a RIB and show its components."""
    registry = _load_registry(banks_path)
    result = validate_rib(value, registry)
    formatted = ""
    if result.is_valid:
        formatted = format_rib(value, BankFormatOptions(mask=mask), registry)
    _print_bank_result("RIB Validation", result, formatted, mask)


@cli.group(name="iban")
def iban_group() -> None:
    """Moroccan IBAN commands."""


@iban_group.command(name="validate")
@click.argument("value")
@click.option("--mask", is_flag=True, default=False, help="Mask the account digits in the output.")
@_BANKS_OPTION
def iban_validate_command(value: str, mask: bool, banks_path: str | None) -> None:
    """Validate a Moroccan IBAN and show its components."""
    registry = _load_registry(banks_path)
    result = validate_iban(value, registry)
    formatted = ""
    if result.is_valid:
        formatted = format_iban(value, BankFormatOptions(mask=mask), registry)
    _print_bank_result("IBAN Validation", result, formatted, mask)


# ---------------------------------------------------------------------------
# bank group
# ---------------------------------------------------------------------------


@cli.group(name="bank")
def bank_group() -> None:
    """Bank reference data commands."""


@bank_group.command(name="show")
@click.argument("code")
@click.option("--branch", "-b", default=None, help="Branch code for a branch-level SWIFT.")
@_BANKS_OPTION
def bank_show_command(code: str, branch: str | None, banks_path: str | None) -> None:
    """Show bank metadata for a bank code, RIB or IBAN."""
    registry = _load_registry(banks_path)
    bank = get_bank_details(code, registry)
    if bank is None:
        err_console.print(f"[red]Bank not found or inactive:[/red] {code}")
        sys.exit(1)

    swift = get_swift_code(code, branch, registry)
    if swift is None:
        err_console.print(f"[red]Branch not found:[/red] {branch}")
        sys.exit(1)

    table = Table(title=bank.name, box=box.SIMPLE)
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="bold")
    table.add_row("Code", bank.code)
    table.add_row("SWIFT", swift)
    table.add_row("RIB length", str(bank.rib_length))
    table.add_row("Branches", str(len(bank.branches)))
    console.print(table)


@bank_group.command(name="list")
@_BANKS_OPTION
def bank_list_command(banks_path: str | None) -> None:
    """List every bank of the reference table."""
    registry = _load_registry(banks_path)
    table = Table(title="Banks", box=box.SIMPLE)
    table.add_column("Code", style="cyan")
    table.add_column("Name")
    table.add_column("SWIFT", style="magenta")
    table.add_column("Active")
    for bank in sorted(registry, key=lambda b: b.code):
        active = "[green]yes[/green]" if bank.active else "[red]no[/red]"
        table.add_row(bank.code, bank.name, bank.swift, active)
    console.print(table)


# ---------------------------------------------------------------------------
# amount group
# ---------------------------------------------------------------------------


@cli.group(name="amount")
def amount_group() -> None:
    """Amount helpers."""


@amount_group.command(name="words")
@click.argument("amount")
def amount_words_command(amount: str) -> None:
    """Spell a dirham AMOUNT in French."""
    try:
        console.print(mad_to_words(Decimal(amount)))
    except (InvalidOperation, BankValidationError):
        err_console.print(f"[red]Invalid amount:[/red] {amount}")
        sys.exit(1)


if __name__ == "__main__":
    cli()
