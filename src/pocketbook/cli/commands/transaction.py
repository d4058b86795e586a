"""Transaction management commands."""

from dataclasses import replace

import click

from pocketbook.cli.error_handling import fail, handle_domain_error
from pocketbook.cli.ledger_file import save_ledger_or_exit
from pocketbook.domain.category import resolve_category
from pocketbook.domain.entities import Transaction, TransactionType
from pocketbook.domain.errors import DomainError
from pocketbook.domain.transaction import TransactionService
from pocketbook.utils.amount_parser import parse_amount
from pocketbook.utils.date_parser import parse_date

TYPE_CHOICES = {"income": TransactionType.INCOME, "expense": TransactionType.EXPENSE}


def _echo_transaction(txn: Transaction) -> None:
    click.echo(f"\nTransaction ID: {txn.id}")
    click.echo(f"  Date: {txn.date}")
    click.echo(f"  Type: {txn.type.value}")
    click.echo(f"  Category: {txn.category_name}")
    click.echo(f"  Amount: ${txn.amount:,.2f}")
    if txn.description:
        click.echo(f"  Description: {txn.description}")


@click.group()
def transaction_group():
    """Manage transactions."""
    pass


@transaction_group.command("list")
@click.option(
    "--type",
    "type_name",
    type=click.Choice(list(TYPE_CHOICES), case_sensitive=False),
    help="Only show income or expense transactions",
)
@click.pass_context
def list_transactions(ctx, type_name: str | None):
    """View all transactions in the order they were added."""
    service = TransactionService(ctx.obj["repository"])

    transactions = service.list_transactions()
    if type_name is not None:
        txn_type = TYPE_CHOICES[type_name.lower()]
        transactions = [txn for txn in transactions if txn.type == txn_type]

    if not transactions:
        click.echo("No transactions found.")
        return

    click.echo(f"\nFound {len(transactions)} transaction(s):")
    click.echo("-" * 100)
    click.echo(
        f"{'ID':<6} {'Date':<12} {'Type':<8} {'Category':<14} {'Amount':>14}  {'Description':<40}"
    )
    click.echo("-" * 100)

    for txn in transactions:
        amount_str = f"${txn.amount:,.2f}"
        description = " ".join(txn.description.split())[:40]
        click.echo(
            f"{txn.id:<6} {str(txn.date):<12} {txn.type.value:<8} {txn.category_name:<14} "
            f"{amount_str:>14}  {description:<40}"
        )

    total_income = sum(
        (txn.amount for txn in transactions if txn.type == TransactionType.INCOME), start=0
    )
    total_expense = sum(
        (txn.amount for txn in transactions if txn.type == TransactionType.EXPENSE), start=0
    )
    click.echo("-" * 100)
    click.echo(
        f"{'TOTAL':<6} Income: ${total_income:,.2f} | "
        f"Expenses: ${total_expense:,.2f} | Count: {len(transactions)}"
    )


@transaction_group.command("show")
@click.argument("transaction_id", type=int)
@click.pass_context
def show_transaction(ctx, transaction_id: int) -> None:
    """Show a single transaction."""
    service = TransactionService(ctx.obj["repository"])

    try:
        txn = service.require_transaction(transaction_id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    _echo_transaction(txn)


@transaction_group.command("update")
@click.argument("transaction_id", type=int)
@click.option("--date", help="Transaction date (YYYY-MM-DD or relative like 'today', 'yesterday')")
@click.option("--amount", help="Transaction amount (e.g., 123.45)")
@click.option(
    "--type",
    "type_name",
    type=click.Choice(list(TYPE_CHOICES), case_sensitive=False),
    help="Transaction type (changing it requires --category)",
)
@click.option("--category", help="Category name or menu number")
@click.option("--description", help="Transaction description")
@click.pass_context
def update_transaction(
    ctx,
    transaction_id: int,
    date: str | None,
    amount: str | None,
    type_name: str | None,
    category: str | None,
    description: str | None,
) -> None:
    """Update a transaction.

    Updates only the fields that are provided.

    Examples:
        pocketbook transaction update 1 --amount 75.00
        pocketbook transaction update 1 --type expense --category Food
    """
    repository = ctx.obj["repository"]
    service = TransactionService(repository)

    try:
        txn = service.require_transaction(transaction_id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if date is not None:
        try:
            txn = replace(txn, date=parse_date(date))
        except ValueError as e:
            fail(ctx, f"Invalid date format: {e}")

    if amount is not None:
        try:
            txn = replace(txn, amount=parse_amount(amount))
        except ValueError as e:
            fail(ctx, f"Invalid amount format: {e}")

    new_type = TYPE_CHOICES[type_name.lower()] if type_name is not None else txn.type
    if category is None and new_type != txn.type:
        fail(ctx, "Changing the type requires --category")

    if description is not None:
        txn = replace(txn, description=description)

    try:
        if category is not None:
            txn = txn.with_category(resolve_category(new_type, category))
        service.update_transaction(txn)
    except DomainError as e:
        handle_domain_error(ctx, e)

    save_ledger_or_exit(ctx, repository)
    click.echo(f"Updated transaction {transaction_id}")


@transaction_group.command("delete")
@click.argument("transaction_id", type=int)
@click.option("--yes", is_flag=True, help="Delete without asking for confirmation")
@click.pass_context
def delete_transaction(ctx, transaction_id: int, yes: bool) -> None:
    """Delete a transaction.

    Examples:
        pocketbook transaction delete 1
    """
    repository = ctx.obj["repository"]
    service = TransactionService(repository)

    try:
        service.require_transaction(transaction_id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if not yes and not click.confirm(
        f"Are you sure you want to delete transaction {transaction_id}?"
    ):
        click.echo("Deletion cancelled.")
        return

    service.delete_transaction(transaction_id)
    save_ledger_or_exit(ctx, repository)
    click.echo(f"Deleted transaction {transaction_id}")


def register_commands(cli: click.Group) -> None:
    """Register transaction commands with main CLI."""
    cli.add_command(transaction_group, name="transaction")
