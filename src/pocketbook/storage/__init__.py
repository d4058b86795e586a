"""Storage layer for pocketbook."""

from pocketbook.storage.base import TransactionRepository
from pocketbook.storage.memory import InMemoryTransactionRepository
from pocketbook.storage.csv_repository import (
    CsvTransactionRepository,
    LoadResult,
    SaveResult,
)
from pocketbook.storage.factories import create_csv_repository

__all__ = [
    "TransactionRepository",
    "InMemoryTransactionRepository",
    "CsvTransactionRepository",
    "LoadResult",
    "SaveResult",
    "create_csv_repository",
]
