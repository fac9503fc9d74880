# doubleentry

A small double-entry bookkeeping library. Every transaction is recorded
twice, once against each of the two accounts it moves money between, and
recorded again in the `Main` account, which holds the full journal.

Each user has a directory `<data_dir>/<name>/`. The user file
`<name>.dat` in it starts with the SHA-256 hash of the password, followed by
the list of accounts. Each account keeps its transactions in its own `.dat`
file. These files are obscured with a repeating-key XOR of the password.

## Installing

```
pip install .
```

## Using the library

```python
from doubleentry.manager import AccountManager
from doubleentry.transaction import Transaction, TransactionType

password = "password"
manager = AccountManager.create("data", "alice", password)
sale = Transaction(date=20000, amount=125.0, kind=TransactionType.DEBIT,
                   description="Invoice 7", account="Checking")
manager.double_entry("Checking", "Receivable", sale)
print(manager.get_account("Checking").balance)
```

### Modules

- `doubleentry.transaction`
  - `Transaction` is a dataclass with these fields:
    - `date`, counted in days since the Unix epoch;
    - `amount`;
    - `kind`, a `TransactionType` (`NONE`, `CREDIT` or `DEBIT`);
    - `description`;
    - `account`.
  - `serialize()` and `Transaction.parse()` convert to and from the one-line
    record form.
  - `by_date` and `by_amount` are sort keys.
- `doubleentry.crypto`
  - `xor_cipher(data, key)` applies the repeating-key XOR. Applying it twice
    restores the input.
  - `password_hash(password)` returns the SHA-256 hex digest.
- `doubleentry.ledger`
  - `Ledger` is an ordered list of transactions.
  - `load`, `save` and `append` read and write the length-prefixed,
    encrypted file.
  - `add`, `remove`, `remove_at` and `remove_last` change the list in memory.
- `doubleentry.account`
  - `Account` is a named ledger with a running `balance`. Debits add to it and
    credits subtract from it.
  - `add_transaction` appends the transaction to the account file.
  - The remove methods rewrite the account file.
- `doubleentry.manager`
  - `AccountManager(data_dir, name, password)` opens a user's accounts. It
    raises `InvalidPasswordError` when the password does not match the stored
    hash.
  - `AccountManager.create` makes a new user with the default accounts: Main,
    Checking, Saving, Expense, Receivable, Payable, WorkDone, Capital and
    Taxes.
  - Other methods: `add_account`, `update_main_file`, `double_entry`,
    `remove_transaction`, `sort_by_date`, `sort_by_amount`, `account_names`
    and `index_of_account`.
  - `remove_transaction` removes a booked transaction from both accounts and
    from Main.
- `doubleentry.report`
  - `Report` filters transactions with `by_date`, `by_amount` and
    `by_description`.
  - Each query refines the previous one. Passing `base=` searches another
    report's working set instead.
  - `total()` gives the signed sum of the matches.
- `doubleentry.widgets`
  - Calendar helpers: `is_leap`, `days_in_month`, `start_day` (0 is Sunday),
    `month_grid` and `month_name`.
  - `Calculator` is a four-function calculator driven by `press(key)`.
    `display()` returns the text currently shown. After `Q`, the last answer
    is kept in `result`.

## What it does not do

The package has no interactive program and installs no command. There is no
sign-in screen, no menu and no on-screen account or report view. The
calendar and calculator exist only as data and state for a front end to
draw.

## Tests

```
pip install .[test]
pytest
```