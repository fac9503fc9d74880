"""A user's set of accounts, their directory file and double-entry bookkeeping."""

from __future__ import annotations

import os
import struct
from collections.abc import Iterable, Iterator
from dataclasses import replace
from pathlib import Path

from .account import Account
from .crypto import password_hash, xor_cipher
from .transaction import Transaction, TransactionType, by_amount, by_date

MAIN = "Main"
DEFAULT_ACCOUNTS = (
    "Main",
    "Checking",
    "Saving",
    "Expense",
    "Receivable",
    "Payable",
    "WorkDone",
    "Capital",
    "Taxes",
)

_HASH_SIZE = 64
_LENGTH = struct.Struct("<Q")


class InvalidPasswordError(Exception):
    """The password does not match the one stored for the user."""


def _user_dir(data_dir: str | os.PathLike, name: str) -> Path:
    return Path(data_dir) / name


def _main_file(data_dir: str | os.PathLike, name: str) -> Path:
    return _user_dir(data_dir, name) / f"{name}.dat"


def _field(text: str, password: str) -> bytes:
    payload = xor_cipher(text, password)
    return _LENGTH.pack(len(payload)) + payload


def _write_directory(
    target: Path, folder: Path, password: str, names: Iterable[str]
) -> None:
    parts = [password_hash(password).encode("ascii")]
    for account_name in names:
        parts.append(_field(str(folder / f"{account_name}.dat"), password))
        parts.append(_field(account_name, password))
    target.write_bytes(b"".join(parts))


def _read_fields(data: bytes, password: str) -> Iterator[str]:
    offset = 0
    while offset < len(data):
        if offset + _LENGTH.size > len(data):
            raise ValueError("truncated field length in account directory")
        (size,) = _LENGTH.unpack_from(data, offset)
        offset += _LENGTH.size
        if offset + size > len(data):
            raise ValueError("truncated field in account directory")
        yield xor_cipher(data[offset:offset + size], password).decode("utf-8")
        offset += size


class AccountManager:
    """Opens a user's accounts after checking the password against the stored hash."""

    def __init__(self, data_dir: str | os.PathLike, name: str, password: str) -> None:
        self.data_dir = Path(data_dir)
        self.name = name
        self.password = password
        self.accounts: dict[str, Account] = {}

        data = _main_file(self.data_dir, name).read_bytes()
        stored = data[:_HASH_SIZE]
        if stored != password_hash(password).encode("ascii"):
            raise InvalidPasswordError(f"invalid password for {name!r}")

        fields = _read_fields(data[_HASH_SIZE:], password)
        for file_name in fields:
            account_name = next(fields, None)
            if account_name is None:
                raise ValueError("account directory entry has no account name")
            self.accounts[account_name] = Account(file_name, password, account_name)

    @classmethod
    def create(
        cls, data_dir: str | os.PathLike, name: str, password: str
    ) -> AccountManager:
        """Create the user's directory and file with the default accounts."""
        folder = _user_dir(data_dir, name)
        folder.mkdir(parents=True, exist_ok=True)
        _write_directory(_main_file(data_dir, name), folder, password, DEFAULT_ACCOUNTS)
        return cls(data_dir, name, password)

    def update_main_file(self) -> None:
        """Rewrite the user's file so it lists every current account."""
        names = [MAIN] + [n for n in self.account_names() if n != MAIN]
        _write_directory(
            _main_file(self.data_dir, self.name),
            _user_dir(self.data_dir, self.name),
            self.password,
            names,
        )

    def add_account(self, name: str) -> bool:
        """Add an empty account; False if one with that name already exists."""
        if name in self.accounts:
            return False
        path = _user_dir(self.data_dir, self.name) / f"{name}.dat"
        self.accounts[name] = Account(path, self.password, name)
        return True

    def double_entry(
        self, debit_account: str, credit_account: str, transaction: Transaction
    ) -> bool:
        """Book `transaction` in Main and in both accounts, each side mirrored."""
        if credit_account not in self.accounts or debit_account not in self.accounts:
            raise KeyError("unknown account")
        is_credit = transaction.kind is TransactionType.CREDIT
        other_kind = TransactionType.DEBIT if is_credit else TransactionType.CREDIT
        other_name = debit_account if is_credit else credit_account

        main = self.get_account(MAIN)
        main.add_transaction(replace(transaction))
        main.add_transaction(replace(transaction, kind=other_kind, account=other_name))

        own = replace(transaction, account=other_name)
        mirror = replace(transaction, kind=other_kind, account=transaction.account)
        self.accounts[credit_account].add_transaction(own if is_credit else mirror)
        self.accounts[debit_account].add_transaction(mirror if is_credit else own)
        return True

    def remove_transaction(self, account_name: str, index: int) -> bool:
        """Remove a booked transaction from its account, its mirror and Main."""
        account = self.get_account(account_name)
        if index < 0 or index >= len(account.ledger):
            return False
        transaction = account.ledger[index]
        opposite = (
            TransactionType.DEBIT
            if transaction.kind is TransactionType.CREDIT
            else TransactionType.CREDIT
        )
        mirror = replace(transaction, kind=opposite, account=account_name)

        self.get_account(transaction.account).remove_transaction(mirror)
        account.remove_transaction(transaction)

        main = self.get_account(MAIN)
        main.remove_transaction(replace(mirror, account=transaction.account))
        main.remove_transaction(replace(transaction, account=account_name))

        self.get_account(transaction.account).calculate_balance()
        account.calculate_balance()
        main.calculate_balance()
        return True

    def sort_by_date(self, account_name: str) -> None:
        """Order an account's transactions by date, in memory only."""
        self.get_account(account_name).ledger.transactions.sort(key=by_date)

    def sort_by_amount(self, account_name: str) -> None:
        """Order an account's transactions by amount, in memory only."""
        self.get_account(account_name).ledger.transactions.sort(key=by_amount)

    def account_exists(self, name: str) -> bool:
        return name in self.accounts

    def get_account(self, name: str) -> Account:
        """Return the named account or raise KeyError."""
        try:
            return self.accounts[name]
        except KeyError:
            raise KeyError(f"unknown account {name!r}") from None

    def account_names(self) -> list[str]:
        """Account names in sorted order."""
        return sorted(self.accounts)

    def index_of_account(self, name: str) -> int:
        """Position of `name` among the sorted account names, or -1."""
        names = self.account_names()
        return names.index(name) if name in names else -1