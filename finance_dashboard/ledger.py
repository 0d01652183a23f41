"""In-memory transaction ledger mirrored to a JSON file.

The ledger is read from disk once, when the store is created, and written
back wholesale after every mutation the caller asks to persist. Records are
kept newest first.
"""
import json
from pathlib import Path
from typing import Any, Dict, List, Union

from loguru import logger

Record = Dict[str, Any]


class LedgerStore:
    def __init__(self, data_file: Union[str, Path]):
        self.data_file = Path(data_file)
        self._transactions: List[Record] = self.load()

    def load(self) -> List[Record]:
        """Read the persisted ledger, falling back to an empty one."""
        try:
            with open(self.data_file, encoding="utf-8") as fh:
                data = json.load(fh)
        except (OSError, ValueError) as e:
            logger.error(f"Erro ao ler {self.data_file}: {e}")
            return []

        if not isinstance(data, list):
            logger.error(f"Erro ao ler {self.data_file}: expected a JSON array, got {type(data).__name__}")
            return []

        transactions = [t for t in data if isinstance(t, dict)]
        if len(transactions) != len(data):
            logger.error(f"Erro ao ler {self.data_file}: dropped {len(data) - len(transactions)} entries that are not JSON objects")
        return transactions

    def save(self, transactions: List[Record]) -> None:
        """Overwrite the backing file with the given ledger."""
        try:
            self.data_file.parent.mkdir(parents=True, exist_ok=True)
            with open(self.data_file, "w", encoding="utf-8") as fh:
                json.dump(transactions, fh, indent=2, ensure_ascii=False)
        except (OSError, TypeError, ValueError) as e:
            logger.error(f"Erro ao salvar {self.data_file}: {e}")
            raise

    def persist(self) -> None:
        self.save(self._transactions)

    def append(self, record: Record) -> None:
        """Insert a record at the front of the ledger (not persisted)."""
        self._transactions.insert(0, record)

    def clear(self) -> None:
        self._transactions = []

    def transactions(self) -> List[Record]:
        """Return the ledger, newest first."""
        return list(self._transactions)

    def __len__(self) -> int:
        return len(self._transactions)
