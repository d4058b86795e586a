"""In-memory transaction repository."""

from dataclasses import replace
from typing import Optional

from pocketbook.domain.entities import Transaction
from pocketbook.domain.errors import ConflictError, ValidationError, duplicate_transaction_id
from pocketbook.storage.base import TransactionRepository


class InMemoryTransactionRepository(TransactionRepository):
    """Transaction store backed by an insertion-ordered dict.

    IDs start at 1 and only ever grow, so an ID freed by ``delete`` is not
    handed out again during the lifetime of the repository.
    """

    def __init__(self):
        self._transactions: dict[int, Transaction] = {}
        self._next_id = 1

    def __len__(self) -> int:
        return len(self._transactions)

    def __contains__(self, transaction_id: object) -> bool:
        return transaction_id in self._transactions

    @property
    def next_id(self) -> int:
        """ID the next ``add`` call will assign."""
        return self._next_id

    def add(self, transaction: Transaction) -> Transaction:
        stored = replace(transaction, id=self._next_id)
        self._transactions[stored.id] = stored
        self._next_id += 1
        return stored

    def insert(self, transaction: Transaction) -> Transaction:
        """Store a transaction under the ID it already carries.

        Only used when rebuilding the store from a file; pair with
        ``set_next_id`` so later ``add`` calls do not collide.

        Raises:
            ValidationError: If the ID is not positive
            ConflictError: If the ID is already stored
        """
        if transaction.id < 1:
            raise ValidationError(f"Transaction id must be positive, got {transaction.id}")
        if transaction.id in self._transactions:
            raise ConflictError(duplicate_transaction_id(transaction.id))
        self._transactions[transaction.id] = transaction
        return transaction

    def update(self, transaction: Transaction) -> bool:
        if transaction.id not in self._transactions:
            return False
        # Assigning to an existing key keeps its position in iteration order
        self._transactions[transaction.id] = transaction
        return True

    def delete(self, transaction_id: int) -> bool:
        return self._transactions.pop(transaction_id, None) is not None

    def get_by_id(self, transaction_id: int) -> Optional[Transaction]:
        return self._transactions.get(transaction_id)

    def get_all(self) -> tuple[Transaction, ...]:
        return tuple(self._transactions.values())

    def clear(self) -> None:
        self._transactions.clear()
        self._next_id = 1

    def set_next_id(self, next_id: int) -> None:
        """Force the ID counter, e.g. after loading transactions from a file."""
        if next_id < 1:
            raise ValidationError(f"Next id must be at least 1, got {next_id}")
        self._next_id = next_id
