"""Category choices for income and expense transactions.

Menu numbering is decoupled from the enum members: each transaction type has
an explicit ordered list of (display name, category) pairs, and the ledger
file stores categories by name, so reordering a menu never changes the
meaning of stored data.
"""

from typing import Optional

from pocketbook.domain.entities import (
    Category,
    ExpenseCategory,
    IncomeCategory,
    TransactionType,
)
from pocketbook.domain.errors import ValidationError

EXPENSE_CATEGORY_CHOICES: tuple[tuple[str, ExpenseCategory], ...] = (
    ("Food", ExpenseCategory.FOOD),
    ("Rent", ExpenseCategory.RENT),
    ("Transport", ExpenseCategory.TRANSPORT),
    ("Utilities", ExpenseCategory.UTILITIES),
    ("Entertainment", ExpenseCategory.ENTERTAINMENT),
    ("Other", ExpenseCategory.OTHER),
)

INCOME_CATEGORY_CHOICES: tuple[tuple[str, IncomeCategory], ...] = (
    ("Salary", IncomeCategory.SALARY),
    ("Business", IncomeCategory.BUSINESS),
    ("Rental", IncomeCategory.RENTAL),
    ("Investment", IncomeCategory.INVESTMENT),
    ("Other", IncomeCategory.OTHER),
)


def category_choices(
    transaction_type: TransactionType,
) -> tuple[tuple[str, Category], ...]:
    """Return the ordered category menu for a transaction type."""
    if transaction_type == TransactionType.EXPENSE:
        return EXPENSE_CATEGORY_CHOICES
    return INCOME_CATEGORY_CHOICES


def category_from_choice(transaction_type: TransactionType, choice: int) -> Category:
    """Map a 1-based menu number to a category.

    Raises:
        ValidationError: If the number is outside the menu
    """
    choices = category_choices(transaction_type)
    if not 1 <= choice <= len(choices):
        raise ValidationError(
            f"Category number must be between 1 and {len(choices)}, got {choice}"
        )
    return choices[choice - 1][1]


def parse_category(transaction_type: TransactionType, name: str) -> Optional[Category]:
    """Look up a category by its stored name.

    Matching is exact (after trimming whitespace), which is what the ledger
    file uses. Returns None for empty or unknown names.
    """
    name = name.strip()
    if not name:
        return None
    enum_cls = (
        ExpenseCategory if transaction_type == TransactionType.EXPENSE else IncomeCategory
    )
    try:
        return enum_cls(name)
    except ValueError:
        return None


def resolve_category(transaction_type: TransactionType, category: str | int) -> Category:
    """Resolve a category given by menu number or by name.

    Names are matched case-insensitively against the menu display names.

    Args:
        transaction_type: Type whose menu to resolve against
        category: Menu number (int or numeric string) or category name

    Returns:
        Category enum member

    Raises:
        ValidationError: If the category is not found for this type
    """
    if isinstance(category, int):
        return category_from_choice(transaction_type, category)

    text = category.strip()
    if text.isdigit():
        return category_from_choice(transaction_type, int(text))

    for display_name, value in category_choices(transaction_type):
        if display_name.lower() == text.lower():
            return value

    raise ValidationError(
        f"Category '{category}' not found for {transaction_type.value.lower()} transactions"
    )
