"""Failure reporting shared by the CLI commands."""

import click

from pocketbook.domain.errors import DomainError
from pocketbook.logging_setup import get_logger

logger = get_logger(__name__)


def fail(ctx: click.Context, message: str) -> None:
    """Print ``Error: <message>`` to stderr and exit with status 1."""
    click.echo(f"Error: {message}", err=True)
    ctx.exit(1)


def handle_domain_error(ctx: click.Context, error: DomainError) -> None:
    """Report an operation the domain rejected, then exit."""
    logger.debug("%s: %s", type(error).__name__, error)
    fail(ctx, str(error))
