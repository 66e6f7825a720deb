"""Account service: persistence of account records and index membership."""

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import List, Optional

from db.index import AccountIndex
from db.store import KeyValueStore
from errors import CorruptRecordError, NotFoundError, PersistenceError
from models.account import Account

# Order of the lines in a record file
_RECORD_FIELDS = ("name", "id", "type", "pin", "balance")


@dataclass
class ConsistencyReport:
    """Differences between the index and the stored record files."""

    orphan_records: List[str] = field(default_factory=list)  # file, no index line
    dangling_entries: List[str] = field(default_factory=list)  # index line, no file

    @property
    def consistent(self) -> bool:
        return not self.orphan_records and not self.dangling_entries


def serialize_account(account: Account) -> str:
    """Render an account as the text of its record file."""
    return "".join(f"{line}\n" for line in account.to_lines())


def parse_account(acc_num: str, text: str) -> Account:
    """Rebuild an account from the text of its record file.

    Args:
        acc_num: Account number the record was stored under.
        text: Record file contents.

    Returns:
        The reconstructed Account.

    Raises:
        CorruptRecordError: If a line is missing or the balance is not a
            finite number.
    """
    lines = text.splitlines()
    if len(lines) < len(_RECORD_FIELDS):
        missing = _RECORD_FIELDS[len(lines)]
        raise CorruptRecordError(
            f"Record for account {acc_num} is missing the {missing} line."
        )

    name, id_number, account_type, pin, raw_balance = lines[: len(_RECORD_FIELDS)]
    try:
        balance = Decimal(raw_balance.strip())
    except InvalidOperation:
        raise CorruptRecordError(
            f"Record for account {acc_num} has an unreadable balance: {raw_balance!r}"
        )
    if not balance.is_finite():
        raise CorruptRecordError(
            f"Record for account {acc_num} has an unreadable balance: {raw_balance!r}"
        )

    return Account(
        acc_num=acc_num,
        name=name,
        id=id_number,
        type=account_type,
        pin=pin,
        balance=balance,
    )


class AccountService:
    """Service for storing and loading accounts."""

    def __init__(self, store: KeyValueStore, index: AccountIndex):
        """Initialize the account service.

        Args:
            store: Key-value store holding one record per account.
            index: Index listing which accounts exist.
        """
        self.store = store
        self.index = index

    def exists(self, acc_num: str) -> bool:
        """Check whether an account is listed in the index."""
        return self.index.exists(acc_num)

    def save(self, account: Account) -> None:
        """Write an account record, replacing any previous content.

        Args:
            account: Account to persist.

        Raises:
            PersistenceError: If the record cannot be written.
        """
        try:
            self.store.put(account.acc_num, serialize_account(account))
        except OSError as e:
            raise PersistenceError(
                f"Failed to save account {account.acc_num}: {e}"
            ) from e

    def load(self, acc_num: str) -> Account:
        """Load an account by number.

        Args:
            acc_num: Account number to load.

        Returns:
            The stored Account.

        Raises:
            NotFoundError: If the account is not listed in the index.
            CorruptRecordError: If the record file is missing or malformed.
            PersistenceError: If the record file cannot be read.
        """
        if not self.index.exists(acc_num):
            raise NotFoundError(f"Account number {acc_num} is not registered.")

        try:
            text = self.store.get(acc_num)
        except OSError as e:
            raise PersistenceError(f"Failed to read account {acc_num}: {e}") from e
        if text is None:
            raise CorruptRecordError(
                f"Account {acc_num} is listed but its record file is missing."
            )

        return parse_account(acc_num, text)

    def find(self, acc_num: str) -> Optional[Account]:
        """Get a single account by number.

        Returns:
            Account object if listed, None otherwise.

        Raises:
            PersistenceError: If the account is listed but cannot be read.
        """
        try:
            return self.load(acc_num)
        except NotFoundError:
            return None

    def find_all(self) -> List[Account]:
        """Load every listed account, in index order.

        Raises:
            PersistenceError: If any listed account cannot be read.
        """
        return [self.load(acc_num) for acc_num in self.index.list()]

    def list_numbers(self) -> List[str]:
        """Return the listed account numbers, in index order."""
        return self.index.list()

    def count(self) -> int:
        """Return the number of listed accounts."""
        return self.index.count()

    def register(self, acc_num: str) -> None:
        """Add an account number to the index.

        Raises:
            PersistenceError: If the index cannot be written.
        """
        try:
            self.index.append(acc_num)
        except OSError as e:
            raise PersistenceError(f"Failed to write index file: {e}") from e

    def unregister(self, acc_num: str) -> bool:
        """Remove an account number from the index.

        Returns:
            True if an entry was removed.

        Raises:
            PersistenceError: If the index cannot be rewritten.
        """
        try:
            return self.index.remove(acc_num)
        except OSError as e:
            raise PersistenceError(f"Failed to rewrite index file: {e}") from e

    def remove_record(self, acc_num: str) -> bool:
        """Delete the record file of an account.

        Returns:
            True if a record was removed, False if there was none.

        Raises:
            PersistenceError: If the record exists but cannot be removed.
        """
        try:
            return self.store.delete(acc_num)
        except OSError as e:
            raise PersistenceError(f"Failed to delete account {acc_num}: {e}") from e

    def check_consistency(self) -> ConsistencyReport:
        """Compare the index against the stored records.

        Nothing is repaired; the report only lists the differences.

        Returns:
            ConsistencyReport with orphan record files and dangling index lines.
        """
        listed = set(self.index.list())
        stored = set(self.store.list())
        return ConsistencyReport(
            orphan_records=sorted(stored - listed),
            dangling_entries=sorted(listed - stored),
        )
