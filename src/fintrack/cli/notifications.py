"""Notification sink that prints to the terminal."""

import click

from fintrack.domain.entities import Severity
from fintrack.domain.notifications import Notifier


class EchoNotifier(Notifier):
    """Print notifications; errors go to stderr prefixed like other CLI errors."""

    def notify(self, message: str, severity: Severity = Severity.INFO) -> None:
        if severity == Severity.ERROR:
            click.echo(f"Error: {message}", err=True)
        else:
            click.echo(message)
