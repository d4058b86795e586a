"""Shared domain error messages and error types."""

from enum import Enum


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested transaction does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as an identifier that is already taken."""


class MalformedRowError(DomainError):
    """A ledger file row could not be decoded into a transaction."""


class LoadFailure(Enum):
    """File-level reasons a ledger load can fail."""

    FILE_NOT_FOUND = "file_not_found"
    EMPTY_OR_HEADER_ONLY = "empty_or_header_only"
    IO_FAILURE = "io_failure"


def transaction_not_found(transaction_id: int) -> str:
    """Return message for missing transaction."""
    return f"Transaction {transaction_id} not found"


def duplicate_transaction_id(transaction_id: int) -> str:
    """Return message for an identifier that is already stored."""
    return f"Transaction with id {transaction_id} already exists"


def category_type_mismatch(category: str, transaction_type: str) -> str:
    """Return message for a category that does not belong to a type."""
    return f"Category '{category}' is not a valid {transaction_type.lower()} category"


def ledger_file_not_found(file_path: str) -> str:
    """Return message for a missing ledger file."""
    return f"File '{file_path}' does not exist."


def no_ledger_file_path() -> str:
    """Return message for a save or load with no file to use."""
    return "No ledger file path given."


def ledger_file_empty() -> str:
    """Return message for a ledger file without data rows."""
    return "CSV file is empty or only contains header."


def load_summary(loaded: int, skipped: int) -> str:
    """Return the human-readable outcome of a successful load."""
    message = f"Loaded {loaded} transactions."
    if skipped > 0:
        message += f" Skipped {skipped} invalid lines."
    return message
