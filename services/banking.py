"""Money-moving operations: create, delete, deposit, withdraw and remit.

Each handler validates all of its inputs before reading any record, then
authenticates, mutates the loaded account in memory, persists it, updates the
index when existence changes and finally appends a transaction log entry.

Writes spanning more than one file are not atomic. Where a later write fails
after an earlier one succeeded the handler reports it (a warning on the
receipt, or a PersistenceError for transfers) and leaves the files as they
are.
"""

from decimal import Decimal, localcontext

from config import Config
from errors import (
    AuthenticationError,
    InsufficientFundsError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)
from logger import get_logger
from models.account import CURRENT, SAVINGS, Account
from models.receipt import Receipt
from services.account_numbers import AccountNumberGenerator
from services.accounts import AccountService
from services.transaction_log import TransactionLogService
from validation import (
    check_amount,
    is_digits,
    validate_account_number,
    validate_account_type,
    validate_id_number,
    validate_name,
    validate_pin,
    to_cents,
)

logger = get_logger()

# Transfer fee rates by (sender type, receiver type); other pairs are free
FEE_RATES = {
    (SAVINGS, CURRENT): Decimal("0.02"),
    (CURRENT, SAVINGS): Decimal("0.03"),
}


def compute_fee(sender_type: str, receiver_type: str, amount: Decimal) -> Decimal:
    """Compute the fee charged to the sender of a transfer.

    Args:
        sender_type: Account type of the sender.
        receiver_type: Account type of the receiver.
        amount: Transfer amount.

    Returns:
        The fee rounded half-up to cents; zero for same-type transfers.
    """
    rate = FEE_RATES.get((sender_type, receiver_type), Decimal(0))
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, amount.adjusted() + 6)
        return to_cents(amount * rate)


class BankingService:
    """Service implementing the account operations."""

    def __init__(
        self,
        config: Config,
        accounts: AccountService,
        generator: AccountNumberGenerator,
        transaction_log: TransactionLogService,
    ):
        """Initialize the banking service.

        Args:
            config: Application configuration (currency, deposit limit).
            accounts: Account record store.
            generator: Source of fresh account numbers.
            transaction_log: Audit trail for committed operations.
        """
        self.config = config
        self.accounts = accounts
        self.generator = generator
        self.transaction_log = transaction_log

    def _money(self, amount: Decimal) -> str:
        return f"{self.config.currency}{amount:.2f}"

    def _require_listed(self, acc_num: str) -> str:
        validate_account_number(acc_num)
        if not self.accounts.exists(acc_num):
            raise NotFoundError(f"Account number {acc_num} is not registered.")
        return acc_num

    def authenticate(self, acc_num: str, pin: str) -> Account:
        """Load an account and check its PIN.

        Args:
            acc_num: Account number as entered.
            pin: PIN as entered.

        Returns:
            The authenticated Account.

        Raises:
            ValidationError: If the account number or PIN is malformed.
            NotFoundError: If the account does not exist.
            AuthenticationError: If the PIN does not match.
        """
        self._require_listed(acc_num)
        validate_pin(pin)

        account = self.accounts.load(acc_num)
        if pin != account.pin:
            raise AuthenticationError("Authentication failed (PIN incorrect).")
        return account

    def create_account(
        self, name: str, id_number: str, account_type: str, pin: str
    ) -> Receipt:
        """Open a new account with a zero balance.

        Args:
            name: Holder's full name.
            id_number: 7-digit identification number.
            account_type: 'savings' or 'current', any case.
            pin: 4-digit PIN.

        Returns:
            Receipt carrying the new account number. If the index could not
            be updated the account is still reported as created, with a
            warning on the receipt.

        Raises:
            ValidationError: If any field is malformed.
            PersistenceError: If the record cannot be written.
        """
        validate_name(name)
        validate_id_number(id_number)
        account_type = validate_account_type(account_type)
        validate_pin(pin)

        account = Account(
            acc_num=self.generator.generate(),
            name=name,
            id=id_number,
            type=account_type,
            pin=pin,
            balance=Decimal("0.00"),
        )
        self.accounts.save(account)

        receipt = Receipt(
            operation="CREATE", acc_num=account.acc_num, balance=account.balance
        )
        try:
            self.accounts.register(account.acc_num)
        except PersistenceError as e:
            receipt.warnings.append(
                f"{e}. Account file is created but may not be listed in index."
            )

        self.transaction_log.append(
            f"CREATE account {account.acc_num} "
            f"(Name: {account.name}, Type: {account.type})"
        )
        for warning in receipt.warnings:
            logger.warning(warning)
        logger.debug(f"Created account {account.acc_num}")
        return receipt

    def check_id_suffix(self, account: Account, last4: str) -> None:
        """Check the last four digits of the holder's identification number.

        Raises:
            ValidationError: If last4 is not exactly 4 digits.
            AuthenticationError: If it does not match the stored ID.
        """
        if not is_digits(last4) or len(last4) != 4:
            raise ValidationError("Must enter exactly 4 digits.")
        if len(account.id) < 4 or account.id[-4:] != last4:
            raise AuthenticationError(
                "ID confirmation does not match last 4 digits of registered ID."
            )

    def delete_account(
        self, acc_num: str, id_last4: str, pin: str, pin_confirmation: str
    ) -> Receipt:
        """Close an account, removing its record file and index entry.

        The re-entered PIN is compared with the first entry, not with the
        stored PIN. Failing to remove the file or the index entry does not
        stop the other removal; both are reported as receipt warnings.

        Args:
            acc_num: Account to delete.
            id_last4: Last four digits of the holder's identification number.
            pin: Account PIN.
            pin_confirmation: PIN entered a second time.

        Returns:
            Receipt for the deleted account, balance as it was at deletion.

        Raises:
            ValidationError: If an input is malformed.
            NotFoundError: If the account does not exist.
            AuthenticationError: If the ID suffix or PIN checks fail.
        """
        self._require_listed(acc_num)
        account = self.accounts.load(acc_num)
        self.check_id_suffix(account, id_last4)

        validate_pin(pin)
        if pin != account.pin:
            raise AuthenticationError("PIN incorrect. Delete aborted.")
        validate_pin(pin_confirmation)
        if pin_confirmation != pin:
            raise AuthenticationError("PIN mismatch on confirmation. Delete aborted.")

        receipt = Receipt(operation="DELETE", acc_num=acc_num, balance=account.balance)
        try:
            if not self.accounts.remove_record(acc_num):
                receipt.warnings.append(
                    f"Record file for {acc_num} was already missing. "
                    "Removing index entry anyway."
                )
        except PersistenceError as e:
            receipt.warnings.append(f"{e}. Attempting to remove index entry anyway.")

        try:
            if not self.accounts.unregister(acc_num):
                receipt.warnings.append(
                    f"Account {acc_num} was not present in the index."
                )
        except PersistenceError as e:
            receipt.warnings.append(f"Failed to remove account from index: {e}")

        self.transaction_log.append(f"DELETE account {acc_num} (Name: {account.name})")
        for warning in receipt.warnings:
            logger.warning(warning)
        return receipt

    def deposit(self, acc_num: str, pin: str, amount: Decimal) -> Receipt:
        """Credit an account.

        Args:
            acc_num: Account to credit.
            pin: Account PIN.
            amount: Amount to deposit; must be positive and not above the
                configured deposit limit.

        Returns:
            Receipt with the new balance.

        Raises:
            ValidationError: If an input is malformed or the amount is out of
                bounds.
            NotFoundError: If the account does not exist.
            AuthenticationError: If the PIN does not match.
            PersistenceError: If the new balance cannot be saved.
        """
        account = self.authenticate(acc_num, pin)
        amount = check_amount(amount, self.config.deposit_limit)

        account.balance += amount
        self.accounts.save(account)

        self.transaction_log.append(
            f"DEPOSIT {self._money(amount)} to {acc_num} "
            f"(NewBal: {self._money(account.balance)})"
        )
        return Receipt(
            operation="DEPOSIT", acc_num=acc_num, balance=account.balance, amount=amount
        )

    def withdraw(self, acc_num: str, pin: str, amount: Decimal) -> Receipt:
        """Debit an account.

        Args:
            acc_num: Account to debit.
            pin: Account PIN.
            amount: Amount to withdraw; must be positive.

        Returns:
            Receipt with the new balance.

        Raises:
            ValidationError: If an input is malformed.
            NotFoundError: If the account does not exist.
            AuthenticationError: If the PIN does not match.
            InsufficientFundsError: If amount is more than the balance.
            PersistenceError: If the new balance cannot be saved.
        """
        account = self.authenticate(acc_num, pin)
        amount = check_amount(amount)

        if amount > account.balance:
            raise InsufficientFundsError(
                f"Insufficient funds. You have {self._money(account.balance)} available."
            )

        account.balance -= amount
        self.accounts.save(account)

        self.transaction_log.append(
            f"WITHDRAW {self._money(amount)} from {acc_num} "
            f"(NewBal: {self._money(account.balance)})"
        )
        return Receipt(
            operation="WITHDRAW", acc_num=acc_num, balance=account.balance, amount=amount
        )

    def verify_sender(self, sender_name: str, acc_num: str, pin: str) -> Account:
        """Authenticate the sender of a transfer.

        The claimed name must equal the stored name ignoring case.

        Raises:
            ValidationError: If the name is empty or an input is malformed.
            NotFoundError: If the account does not exist.
            AuthenticationError: If the PIN or name does not match.
        """
        if not sender_name:
            raise ValidationError("Name cannot be empty.")

        account = self.authenticate(acc_num, pin)
        if sender_name.lower() != account.name.lower():
            raise AuthenticationError(
                "Provided name does not match account name on file."
            )
        return account

    def resolve_receiver(self, sender_acc: str, receiver_acc: str) -> Account:
        """Load the receiving account of a transfer.

        Raises:
            ValidationError: If the number is malformed or equals the sender.
            NotFoundError: If the receiver does not exist.
        """
        try:
            validate_account_number(receiver_acc)
        except ValidationError:
            raise ValidationError("Invalid receiver account format.")
        if not self.accounts.exists(receiver_acc):
            raise NotFoundError(f"Receiver account {receiver_acc} not found.")
        if receiver_acc == sender_acc:
            raise ValidationError("Sender and receiver must be different accounts.")
        return self.accounts.load(receiver_acc)

    def remit(
        self,
        sender_name: str,
        sender_acc: str,
        pin: str,
        receiver_acc: str,
        amount: Decimal,
    ) -> Receipt:
        """Transfer money between two accounts.

        The sender pays the amount plus a fee that depends on the two account
        types; the receiver is credited the amount only. The fee is not
        credited to any account.

        The sender record is written first. If that fails nothing changed.
        If the receiver write then fails the sender stays debited with no
        rollback; the failure is logged and raised.

        Args:
            sender_name: Full name claimed by the sender.
            sender_acc: Sending account.
            pin: Sender's PIN.
            receiver_acc: Receiving account.
            amount: Amount to transfer; must be positive.

        Returns:
            Receipt with the sender's new balance, the fee and the receiver.

        Raises:
            ValidationError: If an input is malformed.
            NotFoundError: If either account does not exist.
            AuthenticationError: If the sender's PIN or name does not match.
            InsufficientFundsError: If amount plus fee is more than the
                sender's balance.
            PersistenceError: If either record cannot be saved.
        """
        sender = self.verify_sender(sender_name, sender_acc, pin)
        receiver = self.resolve_receiver(sender_acc, receiver_acc)
        amount = check_amount(amount)

        fee = compute_fee(sender.type, receiver.type, amount)
        if amount + fee > sender.balance:
            raise InsufficientFundsError(
                f"Insufficient funds. Transfer ({amount:.2f}) + fee ({fee:.2f}) "
                f"exceeds your balance {self._money(sender.balance)}."
            )

        sender.balance -= amount + fee
        receiver.balance += amount

        self.accounts.save(sender)
        try:
            self.accounts.save(receiver)
        except PersistenceError:
            self.transaction_log.append(
                f"REMIT FAILED {self._money(amount)} from {sender_acc} to "
                f"{receiver_acc}: sender debited (NewBal: "
                f"{self._money(sender.balance)}) but receiver credit not saved"
            )
            raise

        self.transaction_log.append(
            f"REMIT {self._money(amount)} from {sender_acc} to {receiver_acc} "
            f"(Fee: {self._money(fee)}) SenderNewBal: {self._money(sender.balance)}"
        )
        return Receipt(
            operation="REMIT",
            acc_num=sender_acc,
            balance=sender.balance,
            amount=amount,
            fee=fee,
            counterparty=receiver_acc,
            counterparty_balance=receiver.balance,
        )
