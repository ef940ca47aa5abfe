"""Summary commands."""

import click
from fintrack.cli.formatting import bar, capitalize_first, format_currency, format_month
from fintrack.domain.aggregation import AggregationService
from fintrack.domain.entities import TransactionType


@click.group()
def summary_group():
    """Balance, category and monthly summaries."""
    pass


@summary_group.command("balance")
@click.pass_context
def show_balance(ctx):
    """Show current balance with total income and expenses."""
    summary = AggregationService(ctx.obj["adapter"]).balance()

    click.echo(f"{'Balance':<20} {format_currency(summary.balance):>20}")
    click.echo(f"{'Total income':<20} {format_currency(summary.total_income):>20}")
    click.echo(f"{'Total expenses':<20} {format_currency(summary.total_expenses):>20}")
    if summary.balance < 0:
        click.echo("\nSpending exceeds income.")


@summary_group.command("categories")
@click.option(
    "--type",
    "txn_type",
    type=click.Choice([t.value for t in TransactionType]),
    default=TransactionType.EXPENSE.value,
    show_default=True,
    help="Which transactions to total",
)
@click.option("--all-types", is_flag=True, help="Total income and expenses together")
@click.pass_context
def show_categories(ctx, txn_type: str, all_types: bool):
    """Show totals per category, largest first, as a bar chart."""
    type_filter = None if all_types else TransactionType(txn_type)
    totals = AggregationService(ctx.obj["adapter"]).totals_by_category(type_filter)

    if not totals:
        click.echo("No transactions found.")
        return

    largest = max(totals.values())
    grand_total = sum(totals.values())
    title = "All transactions" if all_types else capitalize_first(txn_type)
    click.echo(f"\n{title} by category:")
    click.echo("-" * 80)
    for category, total in sorted(totals.items(), key=lambda item: (-item[1], item[0])):
        share = total / grand_total * 100 if grand_total else 0
        click.echo(
            f"{capitalize_first(category):<15} {format_currency(total):>16} {share:>5.1f}%  "
            f"{bar(total, largest)}"
        )
    click.echo("-" * 80)
    click.echo(f"{'Total':<15} {format_currency(grand_total):>16}")


@summary_group.command("monthly")
@click.pass_context
def show_monthly(ctx):
    """Show income and expenses per month, oldest first."""
    series = AggregationService(ctx.obj["adapter"]).monthly_series()

    if not series:
        click.echo("No transactions found.")
        return

    largest = max(max(m.income, m.expenses) for m in series.values())
    click.echo(f"\n{'Month':<10} {'Income':>16} {'Expenses':>16} {'Net':>16}")
    click.echo("-" * 80)
    for key in sorted(series):
        totals = series[key]
        click.echo(
            f"{format_month(key):<10} {format_currency(totals.income):>16} "
            f"{format_currency(totals.expenses):>16} "
            f"{format_currency(totals.income - totals.expenses):>16}"
        )
        click.echo(f"{'':<10} + {bar(totals.income, largest)}")
        click.echo(f"{'':<10} - {bar(totals.expenses, largest)}")


def register_commands(cli: click.Group) -> None:
    """Register summary commands with main CLI."""
    cli.add_command(summary_group, name="summary")
