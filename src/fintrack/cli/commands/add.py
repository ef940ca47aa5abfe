"""Add transaction command."""

import click
from fintrack.cli.error_handling import fail, handle_domain_error
from fintrack.cli.formatting import capitalize_first, format_currency
from fintrack.domain.entities import DEFAULT_CATEGORIES, TransactionType
from fintrack.domain.errors import ValidationError
from fintrack.domain.ledger import LedgerService
from fintrack.domain.validation import validate_transaction_input
from fintrack.utils.amount_parser import parse_amount
from fintrack.utils.date_parser import parse_date


@click.command("add")
@click.option(
    "--type",
    "txn_type",
    required=True,
    type=click.Choice([t.value for t in TransactionType]),
    help="Transaction type",
)
@click.option("--amount", required=True, help="Transaction amount (e.g., 123.45)")
@click.option(
    "--category",
    required=True,
    help=f"Category (e.g., {', '.join(DEFAULT_CATEGORIES)})",
)
@click.option("--description", required=True, help="Transaction description")
@click.option(
    "--date",
    default="today",
    show_default=True,
    help="Transaction date (YYYY-MM-DD or relative like 'today', 'yesterday')",
)
@click.pass_context
def add_transaction(
    ctx,
    txn_type: str,
    amount: str,
    category: str,
    description: str,
    date: str,
):
    """Add a transaction.

    Examples:
        fintrack add --type expense --amount 25000 --category food --description "Lunch"
        fintrack add --type income --amount 5000000 --category other --description "Salary" --date 2024-01-25
    """
    try:
        txn_amount = parse_amount(amount)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)

    try:
        txn_date = parse_date(date)
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)

    try:
        fields = validate_transaction_input(txn_type, txn_amount, category, description, txn_date)
    except ValidationError as e:
        handle_domain_error(ctx, e)

    ledger = LedgerService(ctx.obj["adapter"])
    transaction = ledger.add(**fields)
    if transaction is None:
        fail(ctx)

    click.echo(f"  ID: {transaction.id}")
    click.echo(f"  Type: {capitalize_first(transaction.type.value)}")
    click.echo(f"  Date: {transaction.date}")
    click.echo(f"  Amount: {format_currency(transaction.amount)}")
    click.echo(f"  Category: {capitalize_first(transaction.category)}")
    click.echo(f"  Description: {transaction.description}")


def register_commands(cli):
    """Register add command with main CLI."""
    cli.add_command(add_transaction)
