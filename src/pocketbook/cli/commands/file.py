"""Commands for saving and loading other ledger files."""

import click

from pocketbook.cli.error_handling import fail
from pocketbook.cli.ledger_file import save_ledger_or_exit


@click.command("save")
@click.argument("path", type=click.Path(dir_okay=False))
@click.pass_context
def save_ledger(ctx, path: str):
    """Save all transactions to another CSV file."""
    repository = ctx.obj["repository"]

    result = repository.save_to_file(path)
    if not result.success:
        fail(ctx, result.message)

    click.echo(result.message)


@click.command("load")
@click.argument("path", type=click.Path(dir_okay=False))
@click.pass_context
def load_ledger(ctx, path: str):
    """Replace the ledger with the transactions in another CSV file.

    Rows that cannot be read are skipped and reported. The ledger file is
    rewritten with the loaded transactions.
    """
    repository = ctx.obj["repository"]

    result = repository.load_from_file(path)
    if not result.success:
        fail(ctx, result.message)

    for skipped in result.skipped_rows:
        click.echo(f"  Row {skipped.row_num}: {skipped.reason}", err=True)

    save_ledger_or_exit(ctx, repository)
    click.echo(result.message)


def register_commands(cli):
    """Register save and load commands with main CLI."""
    cli.add_command(save_ledger)
    cli.add_command(load_ledger)
