"""Add transaction command."""

import click

from pocketbook.cli.error_handling import fail, handle_domain_error
from pocketbook.cli.ledger_file import save_ledger_or_exit
from pocketbook.domain.category import resolve_category
from pocketbook.domain.entities import TransactionType
from pocketbook.domain.errors import DomainError
from pocketbook.domain.transaction import TransactionService
from pocketbook.utils.amount_parser import parse_amount
from pocketbook.utils.date_parser import parse_date

TYPE_CHOICES = {"income": TransactionType.INCOME, "expense": TransactionType.EXPENSE}


@click.command("add")
@click.option(
    "--date",
    required=True,
    help="Transaction date (YYYY-MM-DD or relative like 'today', 'yesterday')",
)
@click.option("--amount", required=True, help="Transaction amount (e.g., 123.45)")
@click.option(
    "--type",
    "type_name",
    required=True,
    type=click.Choice(list(TYPE_CHOICES), case_sensitive=False),
    help="Transaction type",
)
@click.option(
    "--category",
    required=True,
    help="Category name or menu number (see 'pocketbook categories')",
)
@click.option("--description", default="", help="Transaction description")
@click.pass_context
def add_transaction(
    ctx,
    date: str,
    amount: str,
    type_name: str,
    category: str,
    description: str,
):
    """Add a transaction.

    Examples:
        pocketbook add --date 2024-01-15 --amount 5000 --type income --category Salary
        pocketbook add --date today --amount 12.50 --type expense --category 1 --description "Lunch"
    """
    repository = ctx.obj["repository"]
    service = TransactionService(repository)
    txn_type = TYPE_CHOICES[type_name.lower()]

    try:
        txn_date = parse_date(date)
    except ValueError as e:
        fail(ctx, f"Invalid date format: {e}")

    try:
        txn_amount = parse_amount(amount)
    except ValueError as e:
        fail(ctx, f"Invalid amount format: {e}")

    try:
        txn_category = resolve_category(txn_type, category)
        transaction = service.add_transaction(
            date=txn_date,
            amount=txn_amount,
            type=txn_type,
            category=txn_category,
            description=description,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    save_ledger_or_exit(ctx, repository)

    click.echo(f"Created transaction {transaction.id}")
    click.echo(f"  Date: {transaction.date}")
    click.echo(f"  Type: {transaction.type.value}")
    click.echo(f"  Category: {transaction.category_name}")
    click.echo(f"  Amount: ${transaction.amount:,.2f}")
    if transaction.description:
        click.echo(f"  Description: {transaction.description}")


def register_commands(cli):
    """Register add command with main CLI."""
    cli.add_command(add_transaction)
