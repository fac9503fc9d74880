"""Filtering an account's transactions into reports that can be refined."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from .transaction import Transaction, TransactionType


class Report:
    """Search results over a working set of transactions.

    Each query fills `results` and makes them the new working set, so later
    queries refine earlier ones. Passing `base` searches that report's
    working set instead.
    """

    def __init__(self, transactions: Iterable[Transaction] = ()) -> None:
        self.working: list[Transaction] = list(transactions)
        self.results: list[Transaction] = []

    def _refine(self, keep: Callable[[Transaction], bool], base: Report | None) -> int:
        source = base.working if base is not None else self.working
        self.results = [t for t in source if keep(t)]
        self.working = list(self.results)
        return len(self.results)

    def by_date(self, start: int, end: int | None = None, base: Report | None = None) -> int:
        """Keep transactions dated `start`, or from `start` to `end` inclusive."""
        last = start if end is None else end
        return self._refine(lambda t: start <= t.date <= last, base)

    def by_amount(
        self, low: float, high: float | None = None, base: Report | None = None
    ) -> int:
        """Keep transactions of amount `low`, or from `low` to `high` inclusive."""
        top = low if high is None else high
        return self._refine(lambda t: low <= t.amount <= top, base)

    def by_description(self, phrase: str, base: Report | None = None) -> int:
        """Keep transactions whose description contains `phrase`."""
        return self._refine(lambda t: phrase in t.description, base)

    def total(self) -> float:
        """Sum the results, subtracting credits and adding everything else."""
        return sum(
            -t.amount if t.kind is TransactionType.CREDIT else t.amount
            for t in self.results
        )