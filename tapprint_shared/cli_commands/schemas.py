"""
"schemas" command group: list, show and export contract JSON Schemas.
"""

from __future__ import annotations

import json
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from tapprint_shared.core.config import get_settings
from tapprint_shared.core.exceptions import ContractError
from tapprint_shared.schemas import ENVELOPES, contract_names, export_schemas, get_contract, schema_for

console = Console()


@click.group()
def schemas():
    """Inspect and export contract schemas."""
    pass


@schemas.command("list")
def list_contracts():
    """List every contract and its wire fields."""
    table = Table(title="TapPrint Contracts")
    table.add_column("Contract", style="cyan", no_wrap=True)
    table.add_column("Required")
    table.add_column("Optional", style="dim")

    for name in contract_names():
        model = get_contract(name)
        required, optional = [], []
        for field_name, info in model.model_fields.items():
            wire_name = info.alias or field_name
            (required if info.is_required() else optional).append(wire_name)
        label = f"{name}[T]" if name in ENVELOPES else name
        table.add_row(escape(label), ", ".join(required), ", ".join(optional))

    console.print(table)


@schemas.command("show")
@click.argument("name")
@click.option("--of", "of", help="Item contract for envelopes, e.g. Layout or Printer[]")
def show(name: str, of: Optional[str]):
    """Print the JSON Schema of one contract."""
    try:
        schema = schema_for(name, of)
    except ContractError as e:
        raise click.ClickException(e.message)
    click.echo(json.dumps(schema, indent=2, sort_keys=True))


@schemas.command("export")
@click.option("--out", "out_dir", help="Output directory (default: TAPPRINT_SCHEMA_DIR)")
def export(out_dir: Optional[str]):
    """Write <Name>.schema.json for every contract."""
    target = out_dir or get_settings().schema_dir
    written = export_schemas(target)
    console.print(f"[green]✓[/green] Wrote {len(written)} schemas to {target}")
