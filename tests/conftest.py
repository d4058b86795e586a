"""Shared pytest fixtures for pocketbook tests."""

import logging
from datetime import date
from decimal import Decimal
from pathlib import Path

import pytest

from pocketbook import logging_setup
from pocketbook.domain.entities import ExpenseCategory, IncomeCategory
from pocketbook.domain.summary import SummaryService
from pocketbook.domain.transaction import TransactionService
from pocketbook.storage.csv_repository import CsvTransactionRepository
from pocketbook.storage.memory import InMemoryTransactionRepository


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo CLI logging configuration between tests."""
    yield
    logger = logging.getLogger("pocketbook")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    logging_setup._CONFIGURED = False


@pytest.fixture
def ledger_path(tmp_path):
    """Return a path for a ledger file that does not exist yet."""
    return tmp_path / "transactions.csv"


@pytest.fixture
def memory_repository():
    """Create an empty in-memory repository."""
    return InMemoryTransactionRepository()


@pytest.fixture
def csv_repository(ledger_path):
    """Create an empty CSV repository bound to a temporary ledger file."""
    return CsvTransactionRepository(file_path=str(ledger_path))


@pytest.fixture
def transaction_service(memory_repository):
    """Create a TransactionService over the in-memory repository."""
    return TransactionService(memory_repository)


@pytest.fixture
def summary_service(memory_repository):
    """Create a SummaryService over the in-memory repository."""
    return SummaryService(memory_repository)


@pytest.fixture
def sample_transactions(transaction_service):
    """Add a month of income and expenses and return the stored records."""
    return [
        transaction_service.add_income(
            date(2024, 1, 1), Decimal("5000"), IncomeCategory.SALARY, "Salary"
        ),
        transaction_service.add_income(
            date(2024, 1, 15), Decimal("500"), IncomeCategory.SALARY, "Bonus"
        ),
        transaction_service.add_expense(
            date(2024, 1, 3), Decimal("200"), ExpenseCategory.FOOD, "Groceries"
        ),
        transaction_service.add_expense(
            date(2024, 1, 7), Decimal("100"), ExpenseCategory.FOOD, "Restaurant"
        ),
        transaction_service.add_expense(
            date(2024, 1, 9), Decimal("50"), ExpenseCategory.TRANSPORT, "Bus"
        ),
    ]


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def fixtures_dir():
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"
