"""Encoding and decoding of the ledger CSV format.

The file starts with the header row
``Id,Date,Type,ExpenseCategory,IncomeCategory,Amount,Description`` followed by
one row per transaction. Fields that contain a comma, a double quote or a line
break are wrapped in double quotes with embedded quotes doubled, so a quoted
field may span several physical lines.
"""

import csv
import io
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Iterable, Iterator, Optional

from dateutil.parser import isoparse

from pocketbook.domain.category import parse_category
from pocketbook.domain.entities import Transaction, TransactionType
from pocketbook.domain.errors import MalformedRowError

HEADER = (
    "Id",
    "Date",
    "Type",
    "ExpenseCategory",
    "IncomeCategory",
    "Amount",
    "Description",
)

ID, DATE, TYPE, EXPENSE_CATEGORY, INCOME_CATEGORY, AMOUNT, DESCRIPTION = range(len(HEADER))


class LedgerDialect(csv.Dialect):
    """CSV dialect of the ledger file."""

    delimiter = ","
    quotechar = '"'
    escapechar = None
    doublequote = True
    skipinitialspace = False
    lineterminator = "\n"
    quoting = csv.QUOTE_MINIMAL
    strict = True


class QuotedLedgerDialect(LedgerDialect):
    """Ledger dialect that quotes every field.

    Used for rows holding a carriage return, which QUOTE_MINIMAL leaves
    unquoted when it is not part of the line terminator.
    """

    quoting = csv.QUOTE_ALL


@dataclass
class SkippedRow:
    """A data row rejected while decoding."""

    row_num: int
    reason: str


@dataclass
class DecodedLedger:
    """Result of decoding a ledger file.

    ``data_rows`` counts every non-blank record after the header, accepted or
    not.
    """

    header: Optional[list[str]] = None
    transactions: list[Transaction] = field(default_factory=list)
    skipped: list[SkippedRow] = field(default_factory=list)
    data_rows: int = 0


def format_amount(amount: Decimal) -> str:
    """Format an amount as a plain decimal without exponent or grouping."""
    return format(amount, "f")


def transaction_to_row(transaction: Transaction) -> list[str]:
    """Convert a transaction entity to a list of CSV fields."""
    return [
        str(transaction.id),
        transaction.date.isoformat(),
        transaction.type.value,
        transaction.expense_category.value if transaction.expense_category else "",
        transaction.income_category.value if transaction.income_category else "",
        format_amount(transaction.amount),
        transaction.description,
    ]


def encode_transactions(transactions: Iterable[Transaction]) -> str:
    """Encode transactions, header first, into the ledger CSV text."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, dialect=LedgerDialect)
    quoted_writer = csv.writer(buffer, dialect=QuotedLedgerDialect)
    writer.writerow(HEADER)
    for transaction in transactions:
        row = transaction_to_row(transaction)
        if any("\r" in value for value in row):
            quoted_writer.writerow(row)
        else:
            writer.writerow(row)
    return buffer.getvalue()


def row_to_transaction(row: list[str]) -> Transaction:
    """Convert a list of CSV fields to a transaction entity.

    Fields after the seventh are ignored. A category that cannot be read for
    the row's type is left unset rather than rejecting the row.

    Raises:
        MalformedRowError: If the row is too short or its id, date, type or
            amount cannot be parsed
    """
    if len(row) < len(HEADER):
        raise MalformedRowError(f"Expected {len(HEADER)} fields, got {len(row)}")

    try:
        transaction_id = int(row[ID])
    except ValueError:
        raise MalformedRowError(f"Invalid id '{row[ID]}'")
    if transaction_id < 1:
        raise MalformedRowError(f"Invalid id '{row[ID]}'")

    try:
        txn_date = isoparse(row[DATE].strip()).date()
    except (ValueError, OverflowError):
        raise MalformedRowError(f"Invalid date '{row[DATE]}'")

    try:
        txn_type = TransactionType(row[TYPE].strip())
    except ValueError:
        raise MalformedRowError(f"Invalid type '{row[TYPE]}'")

    try:
        amount = Decimal(row[AMOUNT].strip())
    except InvalidOperation:
        raise MalformedRowError(f"Invalid amount '{row[AMOUNT]}'")
    if not amount.is_finite():
        raise MalformedRowError(f"Invalid amount '{row[AMOUNT]}'")

    transaction = Transaction(
        id=transaction_id,
        date=txn_date,
        amount=amount,
        type=txn_type,
        description=row[DESCRIPTION],
    )

    if txn_type == TransactionType.EXPENSE:
        category = parse_category(txn_type, row[EXPENSE_CATEGORY])
    else:
        category = parse_category(txn_type, row[INCOME_CATEGORY])
    if category is not None:
        transaction = transaction.with_category(category)

    return transaction


def read_records(lines: list[str]) -> Iterator[tuple[int, Optional[list[str]], Optional[str]]]:
    """Split ledger lines into CSV records.

    Yields ``(line_num, fields, error)`` where ``line_num`` is the 1-based line
    the record starts on. A record the csv module cannot read, such as a
    quoted field left open until the end of the input, is yielded with
    ``fields`` set to None and the error text. Reading then resumes on the
    line after the record's first line.
    """
    start = 0
    while start < len(lines):
        reader = csv.reader(lines[start:], dialect=LedgerDialect)
        consumed = 0
        try:
            for fields in reader:
                yield start + consumed + 1, fields, None
                consumed = reader.line_num
        except csv.Error as e:
            yield start + consumed + 1, None, str(e)
            start += consumed + 1
            continue
        return


def decode_transactions(lines: Iterable[str]) -> DecodedLedger:
    """Decode ledger CSV text into transactions.

    Args:
        lines: Text lines, e.g. a file opened with ``newline=""``

    Returns:
        DecodedLedger with accepted transactions in file order and the rows
        that were skipped, numbered by the line they start on
    """
    decoded = DecodedLedger()
    records = read_records(list(lines))

    first = next(records, None)
    if first is None:
        return decoded
    decoded.header = first[1] if first[1] is not None else []

    seen_ids: set[int] = set()
    for line_num, row, error in records:
        if error is None and not row:
            continue
        decoded.data_rows += 1

        if error is not None:
            decoded.skipped.append(SkippedRow(row_num=line_num, reason=f"Unreadable row: {error}"))
            continue

        try:
            transaction = row_to_transaction(row)
        except MalformedRowError as e:
            decoded.skipped.append(SkippedRow(row_num=line_num, reason=str(e)))
            continue

        if transaction.id in seen_ids:
            decoded.skipped.append(
                SkippedRow(row_num=line_num, reason=f"Duplicate id {transaction.id}")
            )
            continue

        seen_ids.add(transaction.id)
        decoded.transactions.append(transaction)

    return decoded
