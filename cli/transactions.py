#!/usr/bin/env python3

from cli.prompts import prompt_existing_account, prompt_until_valid
from logger import get_logger
from validation import validate_amount, validate_pin

logger = get_logger()


def _prompt_pin(label="Enter 4-digit PIN"):
    return prompt_until_valid(f"{label} (exactly 4 digits): ", validate_pin)


def cmd_deposit(services):
    """Deposit money into an account."""
    print("\nDeposit")
    print("=" * 80)
    currency = services.config.currency
    limit = services.config.deposit_limit

    acc_num = prompt_existing_account(services)
    pin = _prompt_pin()
    account = services.banking.authenticate(acc_num, pin)
    logger.info(f"Current balance: {currency}{account.balance:.2f}")

    amount = prompt_until_valid(
        f"Enter deposit amount (greater than {currency}0.00, "
        f"max {currency}{limit:,.2f}): {currency} ",
        lambda raw: validate_amount(raw, limit),
    )
    receipt = services.banking.deposit(acc_num, pin, amount)

    logger.info(f"✓ Deposited {currency}{receipt.amount:.2f} to account {acc_num}.")
    logger.info(f"  New balance: {currency}{receipt.balance:.2f}")


def cmd_withdraw(services):
    """Withdraw money from an account."""
    print("\nWithdraw")
    print("=" * 80)
    currency = services.config.currency

    acc_num = prompt_existing_account(services)
    pin = _prompt_pin()
    account = services.banking.authenticate(acc_num, pin)
    logger.info(f"Available balance: {currency}{account.balance:.2f}")

    amount = prompt_until_valid(
        f"Enter withdrawal amount (greater than {currency}0.00): {currency} ",
        validate_amount,
    )
    receipt = services.banking.withdraw(acc_num, pin, amount)

    logger.info(f"✓ Withdrawn {currency}{receipt.amount:.2f} from account {acc_num}.")
    logger.info(f"  New balance: {currency}{receipt.balance:.2f}")


def cmd_remit(services):
    """Transfer money from one account to another."""
    print("\nRemittance / Transfer")
    print("=" * 80)
    currency = services.config.currency

    sender_name = input("Sender full name (for verification): ")
    if not sender_name:
        logger.error("Name cannot be empty.")
        return

    sender_acc = prompt_existing_account(services)
    pin = _prompt_pin("Enter sender 4-digit PIN")
    services.banking.verify_sender(sender_name, sender_acc, pin)

    receiver_acc = input("Receiver account number: ")
    services.banking.resolve_receiver(sender_acc, receiver_acc)

    amount = prompt_until_valid(
        f"Enter transfer amount (greater than {currency}0.00): {currency} ",
        validate_amount,
    )
    receipt = services.banking.remit(sender_name, sender_acc, pin, receiver_acc, amount)

    logger.info(
        f"✓ Sent {currency}{receipt.amount:.2f} from {sender_acc} to {receiver_acc}."
    )
    if receipt.fee > 0:
        logger.info(f"  Fee applied: {currency}{receipt.fee:.2f}")
    logger.info(f"  Sender new balance: {currency}{receipt.balance:.2f}")
