"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested transaction does not exist."""


class StorageError(DomainError):
    """Stored state could not be read or written."""


def transaction_not_found(transaction_id: str) -> str:
    """Return message for missing transaction."""
    return f"Transaction {transaction_id} not found"


def immutable_field(field_name: str) -> str:
    """Return message for an attempt to change a fixed field."""
    return f"Field '{field_name}' cannot be changed"


def unknown_field(field_name: str) -> str:
    """Return message for an update naming an unknown field."""
    return f"Unknown transaction field '{field_name}'"


def quota_exceeded(key: str, size: int, quota: int) -> str:
    """Return message when a write would exceed the storage quota."""
    return f"Storage quota exceeded for '{key}': {size} bytes > {quota} bytes"
