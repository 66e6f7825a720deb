"""Helper utilities for tests."""

from decimal import Decimal
from typing import Optional

from models.account import Account


def open_account(
    services,
    name: str = "Jane Doe",
    id_number: str = "1234567",
    account_type: str = "savings",
    pin: str = "1111",
    balance: Optional[str] = None,
) -> Account:
    """Create an account through the banking service.

    Args:
        services: Services container.
        name: Holder name.
        id_number: Identification number.
        account_type: 'savings' or 'current'.
        pin: Account PIN.
        balance: Optional starting balance written straight to the record.

    Returns:
        The stored Account.
    """
    receipt = services.banking.create_account(name, id_number, account_type, pin)
    account = services.accounts.load(receipt.acc_num)
    if balance is not None:
        account.balance = Decimal(balance)
        services.accounts.save(account)
    return account


def write_record(services, acc_num: str, text: str, listed: bool = True) -> None:
    """Write a raw record file and optionally list it in the index."""
    (services.config.data_dir / f"{acc_num}.txt").write_text(text)
    if listed:
        services.accounts.register(acc_num)
