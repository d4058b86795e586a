"""Abstract transaction repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

# Import entities directly to avoid circular import through domain/__init__.py
from pocketbook.domain.entities import Transaction


class TransactionRepository(ABC):
    """Abstract store of transactions keyed by identifier."""

    @abstractmethod
    def add(self, transaction: Transaction) -> Transaction:
        """Store a transaction under the next free ID. Returns the stored record."""
        pass

    @abstractmethod
    def update(self, transaction: Transaction) -> bool:
        """Replace the stored record with the same ID.

        Returns True if the transaction was found and replaced.
        """
        pass

    @abstractmethod
    def delete(self, transaction_id: int) -> bool:
        """Delete a transaction by ID. Returns True if one was removed."""
        pass

    @abstractmethod
    def get_by_id(self, transaction_id: int) -> Optional[Transaction]:
        """Get transaction by ID."""
        pass

    @abstractmethod
    def get_all(self) -> tuple[Transaction, ...]:
        """Get all transactions in insertion order."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Remove all transactions and reset ID allocation."""
        pass
