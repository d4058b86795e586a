"""Category listing command."""

import click

from pocketbook.domain.category import category_choices
from pocketbook.domain.entities import TransactionType


@click.command("categories")
@click.option(
    "--type",
    "type_name",
    type=click.Choice(["income", "expense"], case_sensitive=False),
    help="Only show categories for this transaction type",
)
def list_categories(type_name: str | None):
    """List the numbered category menus.

    Either the number or the name can be passed to --category.
    """
    types = [TransactionType.INCOME, TransactionType.EXPENSE]
    if type_name is not None:
        types = [TransactionType(type_name.capitalize())]

    for i, txn_type in enumerate(types):
        if i > 0:
            click.echo()
        click.echo(f"{txn_type.value} categories:")
        for number, (display_name, _) in enumerate(category_choices(txn_type), start=1):
            click.echo(f"  {number}. {display_name}")


def register_commands(cli):
    """Register category command with main CLI."""
    cli.add_command(list_categories)
