"""Notification sinks for user-facing messages."""

from abc import ABC, abstractmethod
import structlog

from fintrack.domain.entities import Severity

logger = structlog.get_logger(__name__)


class Notifier(ABC):
    """Receives messages the user should see."""

    @abstractmethod
    def notify(self, message: str, severity: Severity = Severity.INFO) -> None:
        """Deliver a message with the given severity."""
        pass


class LoggingNotifier(Notifier):
    """Notifier that only writes messages to the log."""

    def notify(self, message: str, severity: Severity = Severity.INFO) -> None:
        if severity == Severity.ERROR:
            logger.error("notification", message=message)
        else:
            logger.info("notification", message=message, severity=severity.value)
