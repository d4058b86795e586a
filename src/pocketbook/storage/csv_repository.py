"""CSV file-backed transaction repository."""

import csv
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from pocketbook.domain.entities import Transaction
from pocketbook.domain.errors import (
    LoadFailure,
    ledger_file_empty,
    ledger_file_not_found,
    load_summary,
    no_ledger_file_path,
)
from pocketbook.logging_setup import get_logger
from pocketbook.storage.base import TransactionRepository
from pocketbook.storage.csv_codec import SkippedRow, decode_transactions, encode_transactions
from pocketbook.storage.memory import InMemoryTransactionRepository

logger = get_logger(__name__)


@dataclass(frozen=True)
class LoadResult:
    """Outcome of loading a ledger file."""

    success: bool
    message: str
    loaded_count: int = 0
    skipped_count: int = 0
    failure: Optional[LoadFailure] = None
    skipped_rows: tuple[SkippedRow, ...] = field(default=())


@dataclass(frozen=True)
class SaveResult:
    """Outcome of saving a ledger file."""

    success: bool
    message: str
    saved_count: int = 0
    error: Optional[str] = None


class CsvTransactionRepository(TransactionRepository):
    """Repository that keeps transactions in memory and syncs them to CSV files.

    All queries and mutations go to the wrapped in-memory store; the file is
    only touched by ``save_to_file`` and ``load_from_file``.
    """

    def __init__(self, file_path: Optional[str] = None):
        """Initialize CSV repository.

        Args:
            file_path: Default ledger file used when save/load get no path
        """
        self.file_path = file_path
        self._memory = InMemoryTransactionRepository()

    def __len__(self) -> int:
        return len(self._memory)

    def __contains__(self, transaction_id: object) -> bool:
        return transaction_id in self._memory

    @property
    def next_id(self) -> int:
        return self._memory.next_id

    def add(self, transaction: Transaction) -> Transaction:
        return self._memory.add(transaction)

    def update(self, transaction: Transaction) -> bool:
        return self._memory.update(transaction)

    def delete(self, transaction_id: int) -> bool:
        return self._memory.delete(transaction_id)

    def get_by_id(self, transaction_id: int) -> Optional[Transaction]:
        return self._memory.get_by_id(transaction_id)

    def get_all(self) -> tuple[Transaction, ...]:
        return self._memory.get_all()

    def clear(self) -> None:
        self._memory.clear()

    def _resolve_path(self, file_path: Optional[str]) -> Optional[str]:
        resolved = file_path if file_path is not None else self.file_path
        return str(resolved) if resolved is not None else None

    def save_to_file(self, file_path: Optional[str] = None) -> SaveResult:
        """Save all transactions to a CSV file.

        The document is encoded before the file is opened, so an existing file
        is only rewritten once the full contents are ready.

        Args:
            file_path: Target path; defaults to the repository's file_path

        Returns:
            SaveResult with success flag and message
        """
        path = self._resolve_path(file_path)
        if path is None:
            return SaveResult(
                success=False,
                message=no_ledger_file_path(),
                error=no_ledger_file_path(),
            )

        transactions = self._memory.get_all()
        content = encode_transactions(transactions)

        try:
            with open(path, "w", encoding="utf-8", newline="") as f:
                f.write(content)
        except OSError as e:
            logger.error("Saving %s failed: %s", path, e)
            return SaveResult(
                success=False,
                message=f"Error saving to CSV: {e}",
                error=str(e),
            )

        logger.info("Saved %d transactions to %s", len(transactions), path)
        return SaveResult(
            success=True,
            message=f"Transactions saved to {path}",
            saved_count=len(transactions),
        )

    def load_from_file(self, file_path: Optional[str] = None) -> LoadResult:
        """Load transactions from a CSV file, replacing current data.

        Rows that cannot be decoded are skipped and counted. Transactions keep
        the IDs stored in the file and the ID counter continues after the
        highest one. The current contents are left untouched unless the load
        succeeds.

        Args:
            file_path: Source path; defaults to the repository's file_path

        Returns:
            LoadResult with success flag, message and counts
        """
        path = self._resolve_path(file_path)
        if path is None:
            return LoadResult(
                success=False,
                message=no_ledger_file_path(),
                failure=LoadFailure.IO_FAILURE,
            )

        try:
            if not Path(path).exists():
                logger.info("Ledger file %s does not exist", path)
                return LoadResult(
                    success=False,
                    message=ledger_file_not_found(path),
                    failure=LoadFailure.FILE_NOT_FOUND,
                )
            with open(path, "r", encoding="utf-8-sig", newline="") as f:
                decoded = decode_transactions(f)
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Loading %s failed: %s", path, e)
            return LoadResult(
                success=False,
                message=f"Error loading CSV: {e}",
                failure=LoadFailure.IO_FAILURE,
            )

        if decoded.data_rows == 0:
            return LoadResult(
                success=False,
                message=ledger_file_empty(),
                failure=LoadFailure.EMPTY_OR_HEADER_ONLY,
            )

        for skipped in decoded.skipped:
            logger.warning("%s row %d skipped: %s", path, skipped.row_num, skipped.reason)

        self._memory.clear()
        max_id = 0
        for transaction in decoded.transactions:
            if not transaction.has_valid_category:
                logger.warning(
                    "%s transaction %d has no readable %s category",
                    path,
                    transaction.id,
                    transaction.type.value.lower(),
                )
            self._memory.insert(transaction)
            max_id = max(max_id, transaction.id)
        self._memory.set_next_id(max_id + 1)

        loaded = len(decoded.transactions)
        skipped_count = len(decoded.skipped)
        logger.info("Loaded %d transactions from %s (%d skipped)", loaded, path, skipped_count)
        return LoadResult(
            success=True,
            message=load_summary(loaded, skipped_count),
            loaded_count=loaded,
            skipped_count=skipped_count,
            skipped_rows=tuple(decoded.skipped),
        )
