"""In-memory account repository."""

from __future__ import annotations

import logging
from threading import Lock

from .domain.account import Account
from .errors import DuplicateAccountError, InvalidAccountError

logger = logging.getLogger(__name__)


class InMemoryAccountRepository:
    """Thread-safe dict-backed store keyed by ``account_id``."""

    def __init__(self) -> None:
        """Initialise empty storage and the lock guarding it."""
        self._accounts: dict[str, Account] = {}
        self._lock = Lock()

    def create(self, account: Account) -> None:
        """Store an enriched account, rejecting duplicates."""
        if not account.is_enriched:
            raise InvalidAccountError("account must be enriched before it is persisted")
        with self._lock:
            if account.account_id in self._accounts:
                raise DuplicateAccountError(f"account {account.account_id} already exists")
            self._accounts[account.account_id] = account
        logger.debug("stored account %s", account.account_id)

    def get(self, account_id: str) -> Account | None:
        """Return the stored account or ``None``."""
        with self._lock:
            return self._accounts.get(account_id)

    def list_accounts(self) -> list[Account]:
        """Return stored accounts in insertion order."""
        with self._lock:
            return list(self._accounts.values())

    def __len__(self) -> int:
        with self._lock:
            return len(self._accounts)
