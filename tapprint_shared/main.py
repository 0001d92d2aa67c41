"""
Main entry point for the TapPrint contracts CLI.

Provides schema inspection, schema export and payload validation.
"""

from typing import Optional

import click
from rich.console import Console

from tapprint_shared.cli_commands.schemas import schemas
from tapprint_shared.cli_commands.validate import check_fixtures, validate
from tapprint_shared.core.config import get_settings, print_configuration_summary
from tapprint_shared.core.logging import set_correlation_id, setup_logging

console = Console()


@click.group()
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option("--json-logs", is_flag=True, help="Emit JSON log lines instead of rich output")
@click.option("--correlation-id", help="Set correlation ID for request tracing")
@click.pass_context
def main(ctx, debug: bool, json_logs: bool, correlation_id: Optional[str]):
    """TapPrint shared contract tooling.

    Inspects and exports the JSON Schemas of the client/server contracts and
    validates sample payloads against them.
    """
    ctx.ensure_object(dict)

    config = get_settings()
    debug = debug or config.debug
    setup_logging(debug=debug, rich_output=not (json_logs or config.log_json))

    if correlation_id:
        set_correlation_id(correlation_id)

    ctx.obj["debug"] = debug
    ctx.obj["correlation_id"] = correlation_id


main.add_command(schemas)
main.add_command(validate)
main.add_command(check_fixtures)


@main.command()
def config():
    """Show the current configuration."""
    print_configuration_summary()


if __name__ == "__main__":
    main()
