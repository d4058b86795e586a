"""Main CLI entry point."""

import click

from pocketbook.cli.ledger_file import load_ledger_or_exit
from pocketbook.logging_setup import configure_logging
from pocketbook.storage.factories import LEDGER_FILE_ENV_VAR, create_csv_repository

# Import and register all commands at module level
from pocketbook.cli.commands import (
    add,
    category,
    file,
    summary,
    transaction,
)


@click.group()
@click.option(
    "--file",
    "file_path",
    type=click.Path(dir_okay=False),
    help=f"Path to ledger CSV file (overrides {LEDGER_FILE_ENV_VAR} environment variable)",
    envvar=LEDGER_FILE_ENV_VAR,
)
@click.option(
    "--log-level",
    help="Logging level (DEBUG, INFO, WARNING, ERROR); defaults to POCKETBOOK_LOG_LEVEL or WARNING",
)
@click.pass_context
def cli(ctx, file_path: str | None, log_level: str | None):
    """Pocketbook - Personal income and expense ledger.

    Transactions are kept in a CSV file that is loaded at startup and
    written back after every change.
    """
    ctx.ensure_object(dict)

    try:
        configure_logging(log_level)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--log-level")

    # Load the ledger only when actually running a command (not when showing help)
    if ctx.invoked_subcommand is not None:
        repository = create_csv_repository(file_path=file_path)
        load_ledger_or_exit(ctx, repository)
        ctx.obj["repository"] = repository


# Register all commands
add.register_commands(cli)
transaction.register_commands(cli)
summary.register_commands(cli)
category.register_commands(cli)
file.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
