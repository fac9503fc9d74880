"""An ordered list of transactions stored in an encrypted, length-prefixed file."""

from __future__ import annotations

import os
import struct
from collections.abc import Iterable, Iterator
from pathlib import Path

from .crypto import xor_cipher
from .transaction import Transaction

_LENGTH = struct.Struct("<Q")


def _encode_record(transaction: Transaction, password: str | bytes) -> bytes:
    payload = xor_cipher(transaction.serialize().encode("utf-8"), password)
    return _LENGTH.pack(len(payload)) + payload


def _read_records(data: bytes, password: str | bytes) -> Iterator[Transaction]:
    offset = 0
    while offset < len(data):
        if offset + _LENGTH.size > len(data):
            raise ValueError("truncated record length in ledger file")
        (size,) = _LENGTH.unpack_from(data, offset)
        offset += _LENGTH.size
        if offset + size > len(data):
            raise ValueError("truncated record in ledger file")
        chunk = data[offset:offset + size]
        offset += size
        yield Transaction.parse(xor_cipher(chunk, password).decode("utf-8"))


class Ledger:
    """The transactions of one account, in insertion order."""

    def __init__(self, transactions: Iterable[Transaction] = ()) -> None:
        self.transactions: list[Transaction] = list(transactions)

    def load(self, path: str | os.PathLike, password: str | bytes) -> int:
        """Append the transactions stored in `path`; a missing file adds none."""
        try:
            data = Path(path).read_bytes()
        except FileNotFoundError:
            return 0
        loaded = list(_read_records(data, password))
        self.transactions.extend(loaded)
        return len(loaded)

    def save(self, path: str | os.PathLike, password: str | bytes) -> None:
        """Overwrite `path` with every transaction in the ledger."""
        Path(path).write_bytes(
            b"".join(_encode_record(t, password) for t in self.transactions)
        )

    def append(
        self, path: str | os.PathLike, password: str | bytes, transaction: Transaction
    ) -> None:
        """Add one record to the end of `path`, creating the file if needed."""
        if not password:
            raise ValueError("password must not be empty")
        with open(path, "ab") as stream:
            stream.write(_encode_record(transaction, password))

    def add(self, transaction: Transaction) -> int:
        """Add a transaction at the end and return the new size."""
        self.transactions.append(transaction)
        return len(self.transactions)

    def remove(self, transaction: Transaction) -> int:
        """Remove every transaction equal to `transaction`; return the new size."""
        self.transactions[:] = [t for t in self.transactions if t != transaction]
        return len(self.transactions)

    def remove_at(self, index: int) -> int:
        """Remove the transaction at `index`; return the new size."""
        del self.transactions[index]
        return len(self.transactions)

    def remove_last(self) -> int:
        """Remove the most recent transaction; return the new size."""
        if not self.transactions:
            raise IndexError("ledger is empty")
        self.transactions.pop()
        return len(self.transactions)

    def __len__(self) -> int:
        return len(self.transactions)

    def __iter__(self) -> Iterator[Transaction]:
        return iter(self.transactions)

    def __getitem__(self, index):
        return self.transactions[index]