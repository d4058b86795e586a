"""Repository factory functions."""

import os
from typing import Optional

from pocketbook.storage.csv_repository import CsvTransactionRepository

LEDGER_FILE_ENV_VAR = "POCKETBOOK_FILE"
DEFAULT_LEDGER_FILE = "transactions.csv"


def resolve_ledger_path(file_path: Optional[str] = None) -> str:
    """Resolve the ledger file path.

    Args:
        file_path: Explicit path. If None, checks the POCKETBOOK_FILE
            environment variable, then defaults to transactions.csv in the
            working directory.
    """
    if file_path is None:
        file_path = os.environ.get(LEDGER_FILE_ENV_VAR)

    if not file_path:
        file_path = DEFAULT_LEDGER_FILE

    return file_path


def create_csv_repository(file_path: Optional[str] = None) -> CsvTransactionRepository:
    """Create a CSV-backed repository for the resolved ledger file.

    The repository starts empty; call ``load_from_file`` to read the file.
    """
    return CsvTransactionRepository(file_path=resolve_ledger_path(file_path))
