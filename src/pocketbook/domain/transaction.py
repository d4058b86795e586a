"""Transaction domain service."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING, Optional

from pocketbook.domain.entities import (
    Category,
    ExpenseCategory,
    FinanceSummary,
    IncomeCategory,
    Transaction,
    TransactionType,
)
from pocketbook.domain.errors import (
    NotFoundError,
    ValidationError,
    category_type_mismatch,
    transaction_not_found,
)
from pocketbook.domain.summary import summarize
from pocketbook.logging_setup import get_logger

if TYPE_CHECKING:
    from pocketbook.storage.base import TransactionRepository

logger = get_logger(__name__)


def _check_category(transaction_type: TransactionType, category: Category) -> None:
    expected = (
        ExpenseCategory if transaction_type == TransactionType.EXPENSE else IncomeCategory
    )
    if not isinstance(category, expected):
        raise ValidationError(category_type_mismatch(category.value, transaction_type.value))


class TransactionService:
    """Service for managing transactions."""

    def __init__(self, repository: TransactionRepository):
        """Initialize transaction service.

        Args:
            repository: Repository holding the transactions
        """
        self.repository = repository

    def add_transaction(
        self,
        date: date,
        amount: Decimal,
        type: TransactionType,
        category: Category,
        description: str = "",
    ) -> Transaction:
        """Add a transaction.

        Args:
            date: Transaction date
            amount: Transaction amount
            type: Income or expense
            category: Category belonging to ``type``
            description: Optional description

        Returns:
            Stored transaction with its assigned ID

        Raises:
            ValidationError: If the category does not belong to the type
        """
        _check_category(type, category)
        if type == TransactionType.EXPENSE:
            transaction = Transaction.expense(date, amount, category, description)
        else:
            transaction = Transaction.income(date, amount, category, description)

        stored = self.repository.add(transaction)
        logger.debug("Added transaction %d (%s %s)", stored.id, stored.type.value, stored.amount)
        return stored

    def add_expense(
        self, date: date, amount: Decimal, category: ExpenseCategory, description: str = ""
    ) -> Transaction:
        """Add an expense transaction."""
        return self.add_transaction(date, amount, TransactionType.EXPENSE, category, description)

    def add_income(
        self, date: date, amount: Decimal, category: IncomeCategory, description: str = ""
    ) -> Transaction:
        """Add an income transaction."""
        return self.add_transaction(date, amount, TransactionType.INCOME, category, description)

    def get_transaction(self, transaction_id: int) -> Optional[Transaction]:
        """Get transaction by ID.

        Args:
            transaction_id: Transaction ID

        Returns:
            Transaction entity or None if not found
        """
        return self.repository.get_by_id(transaction_id)

    def require_transaction(self, transaction_id: int) -> Transaction:
        """Get transaction by ID or raise.

        Raises:
            NotFoundError: If the transaction doesn't exist
        """
        transaction = self.repository.get_by_id(transaction_id)
        if transaction is None:
            raise NotFoundError(transaction_not_found(transaction_id))
        return transaction

    def list_transactions(self) -> list[Transaction]:
        """List all transactions in insertion order."""
        return list(self.repository.get_all())

    def update_transaction(self, transaction: Transaction) -> bool:
        """Replace a stored transaction with a modified copy.

        Args:
            transaction: Full desired record, carrying the ID to update

        Returns:
            True if the transaction existed and was replaced

        Raises:
            ValidationError: If the record's category does not match its type
        """
        if not transaction.has_valid_category:
            raise ValidationError(
                category_type_mismatch(transaction.category_name, transaction.type.value)
            )

        updated = self.repository.update(transaction)
        if updated:
            logger.debug("Updated transaction %d", transaction.id)
        return updated

    def delete_transaction(self, transaction_id: int) -> bool:
        """Delete a transaction.

        Returns:
            True if a transaction was removed
        """
        deleted = self.repository.delete(transaction_id)
        if deleted:
            logger.debug("Deleted transaction %d", transaction_id)
        return deleted

    def get_summary(self) -> FinanceSummary:
        """Compute totals over all stored transactions."""
        return summarize(self.repository.get_all())
