"""Budget commands."""

import click
from fintrack.cli.error_handling import fail
from fintrack.cli.formatting import bar, capitalize_first, format_currency
from fintrack.domain.budget import BudgetService
from fintrack.domain.entities import DEFAULT_CATEGORIES


@click.group()
def budget_group():
    """Manage per-category budgets."""
    pass


@budget_group.command("set")
@click.argument("ceilings", nargs=-1, metavar="CATEGORY=AMOUNT...")
@click.pass_context
def set_budget(ctx, ceilings: tuple[str, ...]):
    """Replace all budgets with the given ceilings.

    Categories left out, or given an amount of zero, end up with no budget.

    Examples:
        fintrack budget set food=1500000 transport=500000
        fintrack budget set  # clear all budgets
    """
    budget = {}
    for item in ceilings:
        category, sep, amount = item.partition("=")
        if not sep or not category.strip():
            click.echo(f"Error: Expected CATEGORY=AMOUNT, got '{item}'", err=True)
            ctx.exit(1)
        budget[category.strip()] = amount.strip().replace(",", "") or "0"

    if not BudgetService(ctx.obj["adapter"]).set_budget(budget):
        fail(ctx)


@budget_group.command("show")
@click.pass_context
def show_budget(ctx):
    """Show spending against each budget."""
    progress = BudgetService(ctx.obj["adapter"]).progress()

    if not progress:
        click.echo("No budgets set.")
        click.echo(f"Set one with: fintrack budget set {DEFAULT_CATEGORIES[0]}=AMOUNT")
        return

    click.echo(f"\n{'Category':<15} {'Spent / Budget':>33} {'Used':>8}")
    click.echo("-" * 90)
    for category in sorted(progress):
        item = progress[category]
        status = f"{format_currency(item.spent)} / {format_currency(item.ceiling)}"
        marker = "  OVER BUDGET" if item.over_budget else ""
        click.echo(
            f"{capitalize_first(category):<15} {status:>33} {item.percentage:>7.1f}% "
            f"[{bar(item.spent, item.ceiling):<30}]{marker}"
        )


def register_commands(cli: click.Group) -> None:
    """Register budget commands with main CLI."""
    cli.add_command(budget_group, name="budget")
