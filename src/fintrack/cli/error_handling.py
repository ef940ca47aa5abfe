"""CLI error handling helpers."""

import click

from fintrack.domain.errors import DomainError


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain error and exit with failure."""
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)


def fail(ctx: click.Context) -> None:
    """Exit with failure after a service has already told the user why."""
    ctx.exit(1)
