"""A named account: a ledger kept in sync with its file and a running balance."""

from __future__ import annotations

import os
from pathlib import Path

from .ledger import Ledger
from .transaction import Transaction, TransactionType


def _signed(transaction: Transaction) -> float:
    if transaction.kind is TransactionType.CREDIT:
        return -transaction.amount
    if transaction.kind is TransactionType.DEBIT:
        return transaction.amount
    return 0.0


class Account:
    """An account whose changes are written straight to its ledger file.

    Without a `path` the account lives in memory only.
    """

    def __init__(
        self,
        path: str | os.PathLike | None = None,
        password: str = "",
        name: str = "",
    ) -> None:
        self.name = name
        self.password = password
        self.ledger = Ledger()
        self.balance = 0.0
        self.path: Path | None = None
        if path is not None:
            self.path = Path(str(os.fspath(path)).strip())
            self.ledger.load(self.path, password)
            self.calculate_balance()

    def add_transaction(self, transaction: Transaction) -> int:
        """Record a transaction, append it to the file and return the ledger size."""
        if self.path is not None:
            self.ledger.append(self.path, self.password, transaction)
        self.ledger.add(transaction)
        self.balance += _signed(transaction)
        return len(self.ledger)

    def _save(self) -> None:
        if self.path is not None:
            self.ledger.save(self.path, self.password)

    def remove_last_transaction(self) -> int:
        """Drop the newest transaction, rewrite the file and return the size."""
        self.ledger.remove_last()
        self._save()
        return len(self.ledger)

    def remove_transaction_at(self, index: int) -> int:
        """Drop the transaction at `index`, rewrite the file and return the size."""
        self.ledger.remove_at(index)
        self._save()
        return len(self.ledger)

    def remove_transaction(self, transaction: Transaction) -> int:
        """Drop every transaction equal to `transaction`, rewrite the file."""
        self.ledger.remove(transaction)
        self._save()
        return len(self.ledger)

    def calculate_balance(self) -> float:
        """Recompute the balance: debits add, credits subtract."""
        self.balance = sum((_signed(t) for t in self.ledger), 0.0)
        return self.balance