"""Tests for the ledger CSV codec."""

import io
from datetime import date
from decimal import Decimal

import pytest

from pocketbook.domain.entities import (
    ExpenseCategory,
    IncomeCategory,
    Transaction,
    TransactionType,
)
from pocketbook.domain.errors import MalformedRowError
from pocketbook.storage.csv_codec import (
    HEADER,
    decode_transactions,
    encode_transactions,
    format_amount,
    row_to_transaction,
    transaction_to_row,
)

HEADER_LINE = "Id,Date,Type,ExpenseCategory,IncomeCategory,Amount,Description\n"


def test_header_columns():
    assert ",".join(HEADER) + "\n" == HEADER_LINE


@pytest.mark.parametrize(
    "amount, expected",
    [
        (Decimal("5000"), "5000"),
        (Decimal("12.50"), "12.50"),
        (Decimal("1E+3"), "1000"),
        (Decimal("0.0000001"), "0.0000001"),
        (Decimal("-7.25"), "-7.25"),
    ],
)
def test_format_amount_is_plain_decimal(amount, expected):
    assert format_amount(amount) == expected


def test_transaction_to_row_expense():
    txn = Transaction.expense(
        date(2024, 3, 9), Decimal("42.10"), ExpenseCategory.UTILITIES, "Power bill", id=12
    )
    assert transaction_to_row(txn) == [
        "12",
        "2024-03-09",
        "Expense",
        "Utilities",
        "",
        "42.10",
        "Power bill",
    ]


def test_transaction_to_row_income():
    txn = Transaction.income(date(2024, 3, 1), Decimal("5000"), IncomeCategory.SALARY, id=1)
    assert transaction_to_row(txn) == ["1", "2024-03-01", "Income", "", "Salary", "5000", ""]


def test_encode_quotes_only_when_needed():
    transactions = [
        Transaction.expense(date(2024, 1, 1), Decimal("1"), ExpenseCategory.FOOD, "plain", id=1),
        Transaction.expense(date(2024, 1, 2), Decimal("2"), ExpenseCategory.FOOD, "a, b", id=2),
        Transaction.expense(
            date(2024, 1, 3), Decimal("3"), ExpenseCategory.FOOD, 'say "hi"', id=3
        ),
        Transaction.expense(
            date(2024, 1, 4), Decimal("4"), ExpenseCategory.FOOD, "two\nlines", id=4
        ),
    ]

    assert encode_transactions(transactions) == (
        HEADER_LINE
        + "1,2024-01-01,Expense,Food,,1,plain\n"
        + '2,2024-01-02,Expense,Food,,2,"a, b"\n'
        + '3,2024-01-03,Expense,Food,,3,"say ""hi"""\n'
        + '4,2024-01-04,Expense,Food,,4,"two\nlines"\n'
    )


def test_encode_empty_collection_is_header_only():
    assert encode_transactions([]) == HEADER_LINE


def test_row_to_transaction():
    txn = row_to_transaction(["3", "2024-05-06", "Income", "", "Business", "120.5", "Invoice"])
    assert txn == Transaction.income(
        date(2024, 5, 6), Decimal("120.5"), IncomeCategory.BUSINESS, "Invoice", id=3
    )


def test_row_to_transaction_tolerates_whitespace_in_core_fields():
    txn = row_to_transaction([" 3 ", " 2024-05-06 ", " Expense ", "Food", "", " 1.5 ", " x "])
    assert txn.id == 3
    assert txn.date == date(2024, 5, 6)
    assert txn.type == TransactionType.EXPENSE
    assert txn.amount == Decimal("1.5")
    assert txn.description == " x "


def test_row_to_transaction_ignores_extra_fields():
    txn = row_to_transaction(["1", "2024-01-01", "Expense", "Rent", "", "900", "Rent", "extra"])
    assert txn.expense_category == ExpenseCategory.RENT


def test_row_to_transaction_ignores_other_type_category():
    """Only the category column matching the type is read."""
    txn = row_to_transaction(["1", "2024-01-01", "Expense", "Food", "Salary", "10", ""])
    assert txn.expense_category == ExpenseCategory.FOOD
    assert txn.income_category is None


def test_row_to_transaction_unknown_category_left_unset():
    txn = row_to_transaction(["1", "2024-01-01", "Income", "", "Lottery", "10", ""])
    assert txn.type == TransactionType.INCOME
    assert txn.income_category is None
    assert txn.category_name == "Unknown"


@pytest.mark.parametrize(
    "row, message",
    [
        (["1", "2024-01-01", "Expense", "Food", "", "10"], "Expected 7 fields, got 6"),
        (["one", "2024-01-01", "Expense", "Food", "", "10", ""], "Invalid id"),
        (["0", "2024-01-01", "Expense", "Food", "", "10", ""], "Invalid id"),
        (["-4", "2024-01-01", "Expense", "Food", "", "10", ""], "Invalid id"),
        (["1", "2024-13-01", "Expense", "Food", "", "10", ""], "Invalid date"),
        (["1", "", "Expense", "Food", "", "10", ""], "Invalid date"),
        (["1", "2024-01-01", "expense", "Food", "", "10", ""], "Invalid type"),
        (["1", "2024-01-01", "Transfer", "Food", "", "10", ""], "Invalid type"),
        (["1", "2024-01-01", "Expense", "Food", "", "$10", ""], "Invalid amount"),
        (["1", "2024-01-01", "Expense", "Food", "", "NaN", ""], "Invalid amount"),
        (["1", "2024-01-01", "Expense", "Food", "", "", ""], "Invalid amount"),
    ],
)
def test_row_to_transaction_malformed(row, message):
    with pytest.raises(MalformedRowError) as excinfo:
        row_to_transaction(row)

    assert message in str(excinfo.value)


def test_decode_splits_quoted_fields():
    text = (
        HEADER_LINE
        + '1,2024-01-01,Expense,Food,,10,"Dinner, drinks and ""dessert""\nat home"\n'
    )
    decoded = decode_transactions(io.StringIO(text, newline=""))

    assert decoded.skipped == []
    assert len(decoded.transactions) == 1
    assert decoded.transactions[0].description == 'Dinner, drinks and "dessert"\nat home'


def test_decode_counts_and_skips_rows():
    text = (
        HEADER_LINE
        + "1,2024-01-01,Expense,Food,,10,ok\n"
        + "2,2024-01-02,Expense\n"
        + "3,2024-01-03,Expense,Food,,ten,bad amount\n"
    )
    decoded = decode_transactions(io.StringIO(text))

    assert decoded.data_rows == 3
    assert [txn.id for txn in decoded.transactions] == [1]
    assert [skipped.row_num for skipped in decoded.skipped] == [3, 4]
    assert "Invalid amount" in decoded.skipped[1].reason


def test_decode_skips_duplicate_ids():
    text = (
        HEADER_LINE
        + "5,2024-01-01,Expense,Food,,10,first\n"
        + "5,2024-01-02,Expense,Food,,20,second\n"
    )
    decoded = decode_transactions(io.StringIO(text))

    assert [txn.description for txn in decoded.transactions] == ["first"]
    assert decoded.skipped[0].reason == "Duplicate id 5"


def test_decode_ignores_blank_lines():
    text = HEADER_LINE + "\n1,2024-01-01,Income,,Salary,10,\n\n"
    decoded = decode_transactions(io.StringIO(text))

    assert decoded.data_rows == 1
    assert len(decoded.transactions) == 1


def test_decode_empty_input():
    decoded = decode_transactions(io.StringIO(""))
    assert decoded.header is None
    assert decoded.data_rows == 0


def test_decode_header_only():
    decoded = decode_transactions(io.StringIO(HEADER_LINE))
    assert decoded.header == list(HEADER)
    assert decoded.data_rows == 0


def test_encode_quotes_rows_with_carriage_return():
    txn = Transaction.expense(
        date(2024, 1, 1), Decimal("10"), ExpenseCategory.FOOD, "a\rb", id=1
    )

    text = encode_transactions([txn])

    assert text.splitlines(keepends=True)[0] == HEADER_LINE
    assert '"a\rb"' in text
    decoded = decode_transactions(io.StringIO(text, newline=""))
    assert decoded.transactions[0].description == "a\rb"


def test_decode_unterminated_quote_resumes_on_next_line():
    text = (
        HEADER_LINE
        + '1,2024-01-01,Expense,Food,,10,"oops\n'
        + "2,2024-01-02,Expense,Food,,20,second\n"
        + "3,2024-01-03,Expense,Food,,30,third\n"
    )
    decoded = decode_transactions(io.StringIO(text, newline=""))

    assert decoded.data_rows == 3
    assert [txn.id for txn in decoded.transactions] == [2, 3]
    assert len(decoded.skipped) == 1
    assert decoded.skipped[0].row_num == 2
    assert decoded.skipped[0].reason.startswith("Unreadable row:")


def test_decode_skips_text_after_closing_quote():
    text = (
        HEADER_LINE
        + '1,2024-01-01,Expense,Food,,10,"lunch"x\n'
        + "2,2024-01-02,Expense,Food,,20,dinner\n"
    )
    decoded = decode_transactions(io.StringIO(text, newline=""))

    assert [txn.id for txn in decoded.transactions] == [2]
    assert decoded.skipped[0].row_num == 2


def test_decode_numbers_skipped_rows_by_starting_line():
    text = (
        HEADER_LINE
        + '1,2024-01-01,Expense,Food,,10,"two\nlines"\n'
        + "2,2024-01-02,Expense,Food,,ten,bad amount\n"
    )
    decoded = decode_transactions(io.StringIO(text, newline=""))

    assert [txn.id for txn in decoded.transactions] == [1]
    assert decoded.skipped[0].row_num == 4
