"""
Payload validation commands: one raw payload, or a whole fixture corpus.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Iterable, Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from tapprint_shared.contracts import ValidationError
from tapprint_shared.core.config import get_settings
from tapprint_shared.core.exceptions import ContractError, ContractValidationError, FixtureError
from tapprint_shared.fixtures import validate_corpus
from tapprint_shared.schemas import contract_label, validate_payload

console = Console()


def _print_errors(errors: Iterable[ValidationError]) -> None:
    for error in errors:
        console.print(f"  [yellow]{escape(error.field)}[/yellow]: {escape(error.message)}")


@click.command()
@click.argument("payload_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--contract", "-c", required=True, help="Contract name, e.g. Layout or ApiResponse")
@click.option("--of", "of", help="Item contract for envelopes, e.g. Layout or Printer[]")
@click.option("--conventions/--no-conventions", default=None, help="Also check backend conventions")
def validate(payload_file: Path, contract: str, of: Optional[str], conventions: Optional[bool]):
    """Validate a raw JSON payload against a contract."""
    label = contract_label(contract, of)
    try:
        payload = json.loads(payload_file.read_text())
    except json.JSONDecodeError as e:
        raise click.ClickException(f"{payload_file} is not valid JSON: {e}")

    try:
        validate_payload(contract, payload, of=of, conventions=conventions)
    except ContractValidationError as e:
        console.print(f"[red]✗[/red] {escape(str(payload_file))} is not a valid {escape(label)}")
        _print_errors(e.errors)
        sys.exit(1)
    except ContractError as e:
        raise click.ClickException(e.message)

    console.print(f"[green]✓[/green] {escape(str(payload_file))} is a valid {escape(label)}")


@click.command("check-fixtures")
@click.argument("directory", required=False)
def check_fixtures(directory: Optional[str]):
    """Validate every fixture in a corpus directory (default: TAPPRINT_FIXTURES_DIR)."""
    root = directory or get_settings().fixtures_dir
    try:
        report = validate_corpus(root)
    except FixtureError as e:
        raise click.ClickException(e.message)

    table = Table(title=f"Fixtures in {escape(str(root))}")
    table.add_column("Fixture")
    table.add_column("Contract", style="cyan")
    table.add_column("Expect")
    table.add_column("Result")
    for result in report.results:
        status = "[green]pass[/green]" if result.ok else "[red]FAIL[/red]"
        table.add_row(
            escape(str(result.fixture.path.relative_to(report.directory))),
            escape(result.fixture.label),
            result.fixture.expect,
            status,
        )
    console.print(table)

    for result in report.failed:
        console.print(f"\n[red]{escape(str(result.fixture.path))}[/red]: {escape(result.message or 'expected rejection, payload was accepted')}")
        _print_errors(result.errors)

    console.print(f"\n{len(report.passed)} passed, {len(report.failed)} failed")
    if not report.ok:
        sys.exit(1)
