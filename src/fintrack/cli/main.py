"""Main CLI entry point."""

import click
from fintrack.cli.notifications import EchoNotifier
from fintrack.database.adapter import PersistenceAdapter
from fintrack.database.factories import create_sqlite_storage
from fintrack.utils.log_config import configure_logging

# Import and register all commands at module level
from fintrack.cli.commands import (
    add,
    budget,
    summary,
    transaction,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides FINTRACK_DB_PATH environment variable)",
    envvar="FINTRACK_DB_PATH",
)
@click.option(
    "--quota",
    type=click.IntRange(min=1),
    help="Maximum size in bytes of each stored entry",
    envvar="FINTRACK_STORAGE_QUOTA",
)
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging on stderr")
@click.pass_context
def cli(ctx, db_path: str | None, quota: int | None, verbose: bool):
    """Fintrack - Personal finance tracker.

    Record income and expenses, check your balance, and keep an eye on
    per-category budgets.
    """
    ctx.ensure_object(dict)
    configure_logging(verbose)

    # Open storage only when actually running a command (not when showing help)
    if ctx.invoked_subcommand is not None:
        storage = create_sqlite_storage(database_path=db_path, quota=quota)
        storage.connect()
        storage.initialize_schema()
        ctx.call_on_close(storage.disconnect)
        notifier = EchoNotifier()
        ctx.obj["storage"] = storage
        ctx.obj["notifier"] = notifier
        ctx.obj["adapter"] = PersistenceAdapter(storage, notifier)


# Register all commands
add.register_commands(cli)
transaction.register_commands(cli)
summary.register_commands(cli)
budget.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
