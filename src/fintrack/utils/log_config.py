"""Logging configuration for fintrack."""

import logging
import sys

import structlog


def _stderr_logger(*args) -> structlog.PrintLogger:
    # Look up sys.stderr per logger so redirected streams are honoured
    return structlog.PrintLogger(file=sys.stderr)


def configure_logging(verbose: bool = False) -> None:
    """Configure structlog to render readable lines on stderr.

    Args:
        verbose: If True, emit debug events; otherwise only warnings and errors
    """
    level = logging.DEBUG if verbose else logging.WARNING
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=_stderr_logger,
        cache_logger_on_first_use=False,
    )
