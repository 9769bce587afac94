"""ibanscope CLI application using Typer.

This module provides command-line utilities for validating IBANs,
inspecting their national parts and listing supported countries.
"""

import json
import logging
import sys
from functools import lru_cache
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ibanscope.domain.iban import (
    Iban,
    IbanValidationError,
    all_countries,
    sepa_countries,
)
from ibanscope_config import get_settings

app = typer.Typer(
    name="ibanscope",
    help="ibanscope - IBAN validation and decomposition CLI",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def _configure_logging() -> None:
    """Configure CLI logging.

    Log records go to stderr so command output on stdout stays parseable.
    """
    settings = get_settings()
    log_level = getattr(logging, settings.log_level, logging.WARNING)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
        force=True,  # Override any existing config
    )
    logging.getLogger("ibanscope").setLevel(log_level)


@app.callback()
def main() -> None:
    _configure_logging()


def _describe(iban: Iban) -> dict[str, str | bool]:
    return {
        "iban": iban.value,
        "formatted": iban.formatted,
        "country": iban.country_name,
        "alpha2_code": iban.alpha2_country_code,
        "alpha3_code": iban.alpha3_country_code,
        "numeric_code": iban.numeric_country_code,
        "sepa": iban.is_sepa_enabled,
        "check_digits": iban.check_digits,
        "bank_code": iban.national_bank_code,
        "branch_code": iban.branch_code,
        "account_number_prefix": iban.account_number_prefix,
        "account_number": iban.account_number,
        "swift": iban.swift,
    }


@app.command("validate")
def validate(
    ibans: Annotated[list[str], typer.Argument(help="IBANs to validate")],
) -> None:
    """Validate one or more IBANs.

    Quote IBANs written with spaces. Exits with code 1 if any is invalid.
    """
    failures = 0
    for raw in ibans:
        try:
            iban = Iban.create(raw)
        except IbanValidationError as e:
            failures += 1
            console.print(
                f"[red]✗[/red] {escape(raw)}: {escape(e.message)}",
                highlight=False,
                soft_wrap=True,
            )
            continue
        console.print(f"[green]✓[/green] {iban.formatted}", soft_wrap=True)

    logger.info("Validated %d IBANs, %d invalid", len(ibans), failures)
    if failures:
        raise typer.Exit(code=1)


@app.command("inspect")
def inspect(
    iban: Annotated[str, typer.Argument(help="IBAN to break down")],
    as_json: Annotated[
        Optional[bool],
        typer.Option("--json/--table", help="Output format (default from settings)"),
    ] = None,
) -> None:
    """Show the national parts of a valid IBAN."""
    try:
        validated = Iban.create(iban)
    except IbanValidationError as e:
        err_console.print(
            f"[red]Invalid IBAN:[/red] {escape(e.message)}",
            highlight=False,
            soft_wrap=True,
        )
        raise typer.Exit(code=1) from e

    fields = _describe(validated)
    if as_json is None:
        as_json = get_settings().output_format == "json"

    if as_json:
        typer.echo(json.dumps(fields, indent=2, ensure_ascii=False))
        return

    table = Table(title=validated.formatted, show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    for name, value in fields.items():
        if isinstance(value, bool):
            value = "yes" if value else "no"
        table.add_row(name.replace("_", " "), value or "[dim]-[/dim]")
    console.print(table)


@app.command("countries")
def countries(
    sepa: Annotated[
        bool,
        typer.Option("--sepa", help="Only list SEPA countries"),
    ] = False,
) -> None:
    """List the countries whose IBANs can be validated."""
    profiles = sepa_countries() if sepa else all_countries()

    table = Table(title=f"{len(profiles)} countries")
    table.add_column("Code", style="cyan")
    table.add_column("Alpha-3")
    table.add_column("Numeric")
    table.add_column("Country")
    table.add_column("SEPA")
    table.add_column("Length", justify="right")
    table.add_column("Format")
    for profile in profiles:
        table.add_row(
            profile.alpha2,
            profile.alpha3,
            profile.numeric_code or "-",
            profile.name,
            "yes" if profile.sepa_enabled else "no",
            str(profile.iban_length),
            profile.format,
        )
    console.print(table)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
