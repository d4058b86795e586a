"""Domain layer for pocketbook application."""

from pocketbook.domain.transaction import TransactionService
from pocketbook.domain.summary import SummaryService, summarize

__all__ = [
    "TransactionService",
    "SummaryService",
    "summarize",
]
