"""Ledger transactions and their one-line text form."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import IntEnum

_HEAD = re.compile(r"\s*(\S+)\s+(\S+)\s+(\S+)")


class TransactionType(IntEnum):
    """Whether a transaction takes money out of or puts money into an account."""

    NONE = 0
    CREDIT = 1
    DEBIT = 2


def format_amount(amount: float) -> str:
    """Format an amount as stored in ledger files: six significant digits."""
    return "%g" % amount


@dataclass
class Transaction:
    """A single ledger entry; `date` counts days since the Unix epoch."""

    date: int = 0
    amount: float = 0.0
    kind: TransactionType = TransactionType.NONE
    description: str = ""
    account: str = ""

    def __post_init__(self) -> None:
        self.kind = TransactionType(self.kind)

    def equal_except_account(self, other: Transaction) -> bool:
        """Compare every field except the referenced account."""
        return (
            self.amount == other.amount
            and self.date == other.date
            and self.kind == other.kind
            and self.description == other.description
        )

    def serialize(self) -> str:
        """Return the record line: amount, date, type, then description;account."""
        return (
            f"{format_amount(self.amount)} {self.date} {int(self.kind)} "
            f"{self.description};{self.account}\n"
        )

    @classmethod
    def parse(cls, text: str) -> Transaction:
        """Build a transaction from a line produced by :meth:`serialize`."""
        match = _HEAD.match(text)
        if match is None:
            raise ValueError(f"malformed transaction record: {text!r}")
        amount_text, date_text, kind_text = match.groups()
        try:
            amount = float(amount_text)
            date = int(date_text)
            kind = TransactionType(int(kind_text))
        except ValueError as exc:
            raise ValueError(f"malformed transaction record: {text!r}") from exc
        rest = text[match.end() + 1:]
        description, _, tail = rest.partition(";")
        account = tail.split("\n", 1)[0]
        return cls(date, amount, kind, description, account)


def by_date(transaction: Transaction) -> int:
    """Sort key ordering transactions by date."""
    return transaction.date


def by_amount(transaction: Transaction) -> float:
    """Sort key ordering transactions by amount."""
    return transaction.amount