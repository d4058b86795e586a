"""Summary domain service."""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Iterable

from pocketbook.domain.entities import (
    ExpenseCategory,
    FinanceSummary,
    IncomeCategory,
    Transaction,
    TransactionType,
)

if TYPE_CHECKING:
    from pocketbook.storage.base import TransactionRepository


def summarize(transactions: Iterable[Transaction]) -> FinanceSummary:
    """Aggregate income, expense and per-category totals.

    Categories appear in the order they are first seen. Transactions without
    a category count toward the totals only.
    """
    total_income = Decimal("0")
    total_expense = Decimal("0")
    income_by_category: dict[IncomeCategory, Decimal] = {}
    expense_by_category: dict[ExpenseCategory, Decimal] = {}

    for txn in transactions:
        if txn.type == TransactionType.INCOME:
            total_income += txn.amount
            if txn.income_category is not None:
                income_by_category[txn.income_category] = (
                    income_by_category.get(txn.income_category, Decimal("0")) + txn.amount
                )
        else:
            total_expense += txn.amount
            if txn.expense_category is not None:
                expense_by_category[txn.expense_category] = (
                    expense_by_category.get(txn.expense_category, Decimal("0")) + txn.amount
                )

    return FinanceSummary(
        total_income=total_income,
        total_expense=total_expense,
        income_by_category=income_by_category,
        expense_by_category=expense_by_category,
    )


class SummaryService:
    """Service for building finance summaries from a repository."""

    def __init__(self, repository: TransactionRepository):
        """Initialize summary service.

        Args:
            repository: Repository holding the transactions
        """
        self.repository = repository

    def get_summary(self) -> FinanceSummary:
        """Summarize the repository's current contents."""
        return summarize(self.repository.get_all())

