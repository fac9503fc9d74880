import pytest

from doubleentry.crypto import password_hash
from doubleentry.manager import (
    DEFAULT_ACCOUNTS,
    AccountManager,
    InvalidPasswordError,
)
from doubleentry.transaction import Transaction, TransactionType

PASSWORD = "password"
USER = "alice"


@pytest.fixture
def manager(tmp_path):
    return AccountManager.create(tmp_path, USER, PASSWORD)


def _credit(amount=12.5, date=20000, description="supplies"):
    return Transaction(date, amount, TransactionType.CREDIT, description, "Checking")


def test_create_writes_hash_header(tmp_path, manager):
    data = (tmp_path / USER / f"{USER}.dat").read_bytes()
    assert data[:64] == password_hash(PASSWORD).encode("ascii")


def test_create_has_default_accounts(manager):
    assert manager.account_names() == sorted(DEFAULT_ACCOUNTS)


def test_wrong_password_rejected(tmp_path, manager):
    with pytest.raises(InvalidPasswordError):
        AccountManager(tmp_path, USER, "secret")


def test_add_account_and_persist(tmp_path, manager):
    assert manager.add_account("Savings2") is True
    assert manager.add_account("Savings2") is False
    manager.update_main_file()
    reopened = AccountManager(tmp_path, USER, PASSWORD)
    assert reopened.account_exists("Savings2")
    assert set(reopened.account_names()) == set(DEFAULT_ACCOUNTS) | {"Savings2"}


def test_double_entry_credit(manager):
    t = _credit()
    assert manager.double_entry("Expense", "Checking", t) is True
    checking = list(manager.get_account("Checking").ledger)
    expense = list(manager.get_account("Expense").ledger)
    main = list(manager.get_account("Main").ledger)
    assert checking == [Transaction(t.date, t.amount, TransactionType.CREDIT, t.description, "Expense")]
    assert expense == [Transaction(t.date, t.amount, TransactionType.DEBIT, t.description, "Checking")]
    assert main == [
        t,
        Transaction(t.date, t.amount, TransactionType.DEBIT, t.description, "Expense"),
    ]
    assert manager.get_account("Checking").balance == pytest.approx(-t.amount)
    assert manager.get_account("Expense").balance == pytest.approx(t.amount)
    assert manager.get_account("Main").balance == pytest.approx(0.0)


def test_double_entry_leaves_input_untouched(manager):
    t = _credit()
    manager.double_entry("Expense", "Checking", t)
    assert t == _credit()


def test_double_entry_unknown_account(manager):
    with pytest.raises(KeyError):
        manager.double_entry("Nowhere", "Checking", _credit())


def test_double_entry_persists(tmp_path, manager):
    manager.double_entry("Expense", "Checking", _credit())
    reopened = AccountManager(tmp_path, USER, PASSWORD)
    for name in ("Checking", "Expense", "Main"):
        assert list(reopened.get_account(name).ledger) == list(manager.get_account(name).ledger)
        assert reopened.get_account(name).balance == pytest.approx(manager.get_account(name).balance)


def test_remove_transaction_clears_all_three(tmp_path, manager):
    manager.double_entry("Expense", "Checking", _credit())
    assert manager.remove_transaction("Checking", 0) is True
    for name in ("Checking", "Expense", "Main"):
        assert len(manager.get_account(name).ledger) == 0
        assert manager.get_account(name).balance == 0.0
    reopened = AccountManager(tmp_path, USER, PASSWORD)
    assert len(reopened.get_account("Main").ledger) == 0


def test_remove_transaction_keeps_others(manager):
    manager.double_entry("Expense", "Checking", _credit(description="a"))
    manager.double_entry("Expense", "Checking", _credit(description="b"))
    manager.remove_transaction("Expense", 0)
    assert [t.description for t in manager.get_account("Checking").ledger] == ["b"]
    assert [t.description for t in manager.get_account("Main").ledger] == ["b", "b"]


def test_remove_transaction_bad_index(manager):
    assert manager.remove_transaction("Checking", 0) is False
    assert manager.remove_transaction("Checking", -1) is False


def test_sort_by_date_and_amount(manager):
    manager.double_entry("Expense", "Checking", _credit(amount=5.0, date=30))
    manager.double_entry("Expense", "Checking", _credit(amount=9.0, date=10))
    manager.double_entry("Expense", "Checking", _credit(amount=1.0, date=20))
    manager.sort_by_date("Checking")
    dates = [t.date for t in manager.get_account("Checking").ledger]
    assert dates == sorted(dates)
    manager.sort_by_amount("Checking")
    amounts = [t.amount for t in manager.get_account("Checking").ledger]
    assert amounts == sorted(amounts)


def test_index_of_account(manager):
    assert manager.index_of_account("Capital") == sorted(DEFAULT_ACCOUNTS).index("Capital")
    assert manager.index_of_account("Missing") == -1


def test_get_account_missing(manager):
    with pytest.raises(KeyError):
        manager.get_account("Missing")
    assert manager.account_exists("Main") is True
    assert manager.account_exists("Missing") is False