"""Transaction management commands."""

from typing import Any

import click
from fintrack.cli.date_filters import period_options, resolve_cli_date_range
from fintrack.cli.error_handling import fail
from fintrack.cli.formatting import capitalize_first, format_currency, format_date
from fintrack.domain.entities import TransactionFilters, TransactionType
from fintrack.domain.ledger import LedgerService
from fintrack.utils.amount_parser import parse_amount
from fintrack.utils.date_parser import parse_date

TYPE_CHOICE = click.Choice([t.value for t in TransactionType])


@click.group()
def transaction_group():
    """Manage transactions."""
    pass


@transaction_group.command("list")
@click.option("--type", "txn_type", type=TYPE_CHOICE, help="Only income or only expenses")
@click.option("--category", help="Exact category name")
@click.option("--search", help="Case-insensitive text to look for in descriptions")
@click.option("--verbose", "-v", is_flag=True, help="Show transaction IDs and creation times")
@click.pass_context
@period_options
def list_transactions(
    ctx,
    txn_type: str | None,
    category: str | None,
    search: str | None,
    verbose: bool,
    start_date: str | None,
    end_date: str | None,
    periods: tuple[str, ...],
):
    """View transactions, most recent first.

    Filters combine: only transactions matching all of them are shown.

    Examples:
        fintrack transaction list --type expense --category food
        fintrack transaction list --search coffee --this-month
    """
    start, end = resolve_cli_date_range(
        ctx, start_date=start_date, end_date=end_date, periods=periods
    )
    filters = TransactionFilters(
        type=TransactionType(txn_type) if txn_type else None,
        category=category,
        search=search,
        start_date=start,
        end_date=end,
    )
    transactions = LedgerService(ctx.obj["adapter"]).list_transactions(filters)

    if not transactions:
        click.echo("No transactions found.")
        return

    click.echo(f"\nFound {len(transactions)} transaction(s):")
    click.echo("-" * 100)
    click.echo(
        f"{'Date':<14} {'Description':<30} {'Category':<15} {'Type':<9} {'Amount':>16}"
    )
    click.echo("-" * 100)
    for txn in transactions:
        click.echo(
            f"{format_date(txn.date):<14} {txn.description[:30]:<30} "
            f"{capitalize_first(txn.category)[:15]:<15} {capitalize_first(txn.type.value):<9} "
            f"{format_currency(txn.amount):>16}"
        )
        if verbose:
            click.echo(f"{'':<14} ID: {txn.id}  Created: {txn.timestamp.isoformat()}")

    income = sum(t.amount for t in transactions if t.type == TransactionType.INCOME)
    expenses = sum(t.amount for t in transactions if t.type == TransactionType.EXPENSE)
    click.echo("-" * 100)
    click.echo(
        f"Income: {format_currency(income)} | Expenses: {format_currency(expenses)} | "
        f"Count: {len(transactions)}"
    )


@transaction_group.command("show")
@click.argument("transaction_id")
@click.pass_context
def show_transaction(ctx, transaction_id: str) -> None:
    """Show all fields of one transaction."""
    txn = LedgerService(ctx.obj["adapter"]).get(transaction_id)
    if txn is None:
        fail(ctx)

    click.echo(f"Transaction ID: {txn.id}")
    click.echo(f"  Type: {capitalize_first(txn.type.value)}")
    click.echo(f"  Date: {txn.date}")
    click.echo(f"  Amount: {format_currency(txn.amount)}")
    click.echo(f"  Category: {capitalize_first(txn.category)}")
    click.echo(f"  Description: {txn.description}")
    click.echo(f"  Created: {txn.timestamp.isoformat()}")


@transaction_group.command("update")
@click.argument("transaction_id")
@click.option("--type", "txn_type", type=TYPE_CHOICE, help="Transaction type")
@click.option("--amount", help="Transaction amount (e.g., 123.45)")
@click.option("--category", help="Category")
@click.option("--description", help="Transaction description")
@click.option("--date", help="Transaction date (YYYY-MM-DD or relative like 'today', 'yesterday')")
@click.pass_context
def update_transaction(
    ctx,
    transaction_id: str,
    txn_type: str | None,
    amount: str | None,
    category: str | None,
    description: str | None,
    date: str | None,
) -> None:
    """Update a transaction.

    Updates only the fields that are provided.

    Examples:
        fintrack transaction update 3f2a... --amount 75000
        fintrack transaction update 3f2a... --category transport --date yesterday
    """
    updates: dict[str, Any] = {}
    if txn_type is not None:
        updates["type"] = TransactionType(txn_type)
    if amount is not None:
        try:
            updates["amount"] = parse_amount(amount)
        except ValueError as e:
            click.echo(f"Error: Invalid amount format: {e}", err=True)
            ctx.exit(1)
    if category is not None:
        updates["category"] = category
    if description is not None:
        updates["description"] = description
    if date is not None:
        try:
            updates["date"] = parse_date(date)
        except ValueError as e:
            click.echo(f"Error: Invalid date format: {e}", err=True)
            ctx.exit(1)

    if not updates:
        click.echo("Error: Nothing to update. Pass at least one field option.", err=True)
        ctx.exit(1)

    if LedgerService(ctx.obj["adapter"]).update(transaction_id, updates) is None:
        fail(ctx)


@transaction_group.command("delete")
@click.argument("transaction_id")
@click.option("--yes", "-y", is_flag=True, help="Delete without asking for confirmation")
@click.pass_context
def delete_transaction(ctx, transaction_id: str, yes: bool) -> None:
    """Delete a transaction.

    Examples:
        fintrack transaction delete 3f2a...
    """
    cancelled = False

    def confirm(message: str) -> bool:
        nonlocal cancelled
        if yes or click.confirm(message):
            return True
        cancelled = True
        return False

    ledger = LedgerService(ctx.obj["adapter"], confirm=confirm)
    if ledger.delete(transaction_id):
        return
    if cancelled:
        click.echo("Deletion cancelled.")
        return
    fail(ctx)


def register_commands(cli: click.Group) -> None:
    """Register transaction commands with main CLI."""
    cli.add_command(transaction_group, name="transaction")
