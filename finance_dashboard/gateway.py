import time
from typing import Any, Callable, Dict, Optional

from loguru import logger

from .ledger import LedgerStore


def current_timestamp_millis() -> int:
    return int(time.time() * 1000)


class TransactionGateway:
    """Creates and resets transactions on top of a ledger store.

    Ids come from the creation time in milliseconds. When two creations land
    in the same millisecond (or the clock goes backwards) the id is bumped so
    it stays strictly above the last one handed out.
    """

    def __init__(self, store: LedgerStore, clock: Callable[[], int] = current_timestamp_millis):
        self.store = store
        self.clock = clock
        self._last_id = max(
            (t["id"] for t in store.transactions()
             if isinstance(t.get("id"), int) and not isinstance(t.get("id"), bool)),
            default=0,
        )

    def _next_id(self) -> int:
        new_id = max(self.clock(), self._last_id + 1)
        self._last_id = new_id
        return new_id

    def create(self, payload: Optional[Dict[str, Any]] = None) -> int:
        """Store a new transaction at the top of the ledger and return its id."""
        new_id = self._next_id()
        record = {**(payload or {}), "id": new_id}
        self.store.append(record)
        self.store.persist()
        logger.info(f"Added transaction {new_id}: {record.get('descricao')} - {record.get('valor')}")
        return new_id

    def reset_all(self) -> None:
        """Drop every transaction and persist the empty ledger."""
        self.store.clear()
        self.store.persist()
        logger.info("All transactions were reset")
