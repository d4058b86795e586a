"""Domain model entities for pocketbook.

These are pure data classes representing business concepts, independent of
how the ledger is stored. Entities are frozen: callers change a transaction by
building a modified copy and handing it back to the repository.
"""

from dataclasses import dataclass, field, replace
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional, Union

UNASSIGNED_ID = 0
UNKNOWN_CATEGORY = "Unknown"


class TransactionType(Enum):
    """Whether a transaction is income or expense."""

    INCOME = "Income"
    EXPENSE = "Expense"


class ExpenseCategory(Enum):
    """Categories available for expense transactions."""

    FOOD = "Food"
    RENT = "Rent"
    TRANSPORT = "Transport"
    UTILITIES = "Utilities"
    ENTERTAINMENT = "Entertainment"
    OTHER = "Other"


class IncomeCategory(Enum):
    """Categories available for income transactions."""

    SALARY = "Salary"
    BUSINESS = "Business"
    RENTAL = "Rental"
    INVESTMENT = "Investment"
    OTHER = "Other"


Category = Union[ExpenseCategory, IncomeCategory]


@dataclass(frozen=True)
class Transaction:
    """Transaction domain entity.

    Exactly one of ``expense_category`` / ``income_category`` is expected to be
    set, matching ``type``. Records decoded from a file with an unreadable
    category may have neither; see ``has_valid_category``.
    """

    id: int
    date: date
    amount: Decimal
    type: TransactionType
    expense_category: Optional[ExpenseCategory] = None
    income_category: Optional[IncomeCategory] = None
    description: str = ""

    @classmethod
    def expense(
        cls,
        date: date,
        amount: Decimal,
        category: ExpenseCategory,
        description: str = "",
        id: int = UNASSIGNED_ID,
    ) -> "Transaction":
        """Create an expense transaction."""
        return cls(
            id=id,
            date=date,
            amount=amount,
            type=TransactionType.EXPENSE,
            expense_category=category,
            description=description,
        )

    @classmethod
    def income(
        cls,
        date: date,
        amount: Decimal,
        category: IncomeCategory,
        description: str = "",
        id: int = UNASSIGNED_ID,
    ) -> "Transaction":
        """Create an income transaction."""
        return cls(
            id=id,
            date=date,
            amount=amount,
            type=TransactionType.INCOME,
            income_category=category,
            description=description,
        )

    @property
    def category(self) -> Optional[Category]:
        """Return the category field that matches the transaction type."""
        if self.type == TransactionType.EXPENSE:
            return self.expense_category
        return self.income_category

    @property
    def category_name(self) -> str:
        """Category name as a plain string, regardless of type."""
        category = self.category
        return category.value if category is not None else UNKNOWN_CATEGORY

    @property
    def has_valid_category(self) -> bool:
        """Check the type/category invariant."""
        if self.type == TransactionType.EXPENSE:
            return self.expense_category is not None and self.income_category is None
        return self.income_category is not None and self.expense_category is None

    def with_category(self, category: Category) -> "Transaction":
        """Return a copy whose type and category fields follow ``category``."""
        if isinstance(category, ExpenseCategory):
            return replace(
                self,
                type=TransactionType.EXPENSE,
                expense_category=category,
                income_category=None,
            )
        return replace(
            self,
            type=TransactionType.INCOME,
            expense_category=None,
            income_category=category,
        )


@dataclass(frozen=True)
class FinanceSummary:
    """Aggregate totals computed from a set of transactions."""

    total_income: Decimal = Decimal("0")
    total_expense: Decimal = Decimal("0")
    income_by_category: dict[IncomeCategory, Decimal] = field(default_factory=dict)
    expense_by_category: dict[ExpenseCategory, Decimal] = field(default_factory=dict)

    @property
    def balance(self) -> Decimal:
        return self.total_income - self.total_expense
