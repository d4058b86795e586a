"""CLI helpers for reading and writing the ledger file."""

from __future__ import annotations

import click

from pocketbook.cli.error_handling import fail
from pocketbook.domain.errors import LoadFailure
from pocketbook.storage.csv_repository import CsvTransactionRepository


def load_ledger_or_exit(ctx: click.Context, repository: CsvTransactionRepository) -> None:
    """Load the ledger file at startup.

    A missing or empty ledger starts an empty ledger. Skipped rows are
    reported as a warning. Any other failure exits, so a file that could not
    be read is never overwritten by a later save.
    """
    result = repository.load_from_file()
    if result.success:
        if result.skipped_count:
            click.echo(f"Warning: {result.message}", err=True)
        return

    if result.failure in (LoadFailure.FILE_NOT_FOUND, LoadFailure.EMPTY_OR_HEADER_ONLY):
        return

    fail(ctx, result.message)


def save_ledger_or_exit(ctx: click.Context, repository: CsvTransactionRepository) -> None:
    """Write the ledger back to its file, or exit with a CLI error."""
    result = repository.save_to_file()
    if not result.success:
        fail(ctx, result.message)
