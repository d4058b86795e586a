"""Summary command."""

import click

from pocketbook.domain.summary import SummaryService


@click.command("summary")
@click.pass_context
def summary(ctx):
    """Show total income, expense, balance and totals by category."""
    service = SummaryService(ctx.obj["repository"])
    result = service.get_summary()

    click.echo("\nSummary")
    click.echo("-" * 50)
    click.echo(f"{'Total Income':<30} {f'${result.total_income:,.2f}':>19}")
    click.echo(f"{'Total Expense':<30} {f'${result.total_expense:,.2f}':>19}")
    click.echo(f"{'Balance':<30} {f'${result.balance:,.2f}':>19}")

    if result.income_by_category:
        click.echo("\nIncome by Category:")
        for category, total in result.income_by_category.items():
            click.echo(f"  {category.value:<28} {f'${total:,.2f}':>19}")

    if result.expense_by_category:
        click.echo("\nExpense by Category:")
        for category, total in result.expense_by_category.items():
            click.echo(f"  {category.value:<28} {f'${total:,.2f}':>19}")


def register_commands(cli):
    """Register summary command with main CLI."""
    cli.add_command(summary)
