#!/usr/bin/env python3

from errors import AuthenticationError, ValidationError
from cli.prompts import prompt_existing_account, prompt_until_valid
from logger import get_logger
from validation import (
    validate_account_type,
    validate_id_number,
    validate_name,
    validate_pin,
)

logger = get_logger()


def prompt_name():
    """Ask for the holder's name; returns None if left empty."""
    while True:
        name = input("Enter full name (must contain at least a first and last name): ")
        if not name:
            return None
        try:
            return validate_name(name)
        except ValidationError as e:
            logger.warning(f"{e} Please re-enter.")


def cmd_create(services):
    """Interactively create a new account."""
    print("\nCreate New Bank Account")
    print("=" * 80)

    name = prompt_name()
    if name is None:
        logger.error("Name cannot be empty. Creation cancelled.")
        return
    logger.info(f"Name '{name}' successfully validated. Continuing account setup...")

    id_number = prompt_until_valid(
        "Enter Identification Number (exactly 7 digits): ", validate_id_number
    )
    account_type = prompt_until_valid(
        "Account Type (savings/current): ", validate_account_type
    )
    pin = prompt_until_valid("Enter 4-digit PIN (exactly 4 digits): ", validate_pin)

    receipt = services.banking.create_account(name, id_number, account_type, pin)
    currency = services.config.currency

    logger.info("\n✓ Account created!")
    logger.info(f"  Account Number: {receipt.acc_num}")
    logger.info(f"  Initial Balance: {currency}{receipt.balance:.2f}")


def cmd_delete(services):
    """Interactively delete an account after identity and PIN checks."""
    print("\nDelete Bank Account")
    print("=" * 80)

    numbers = services.accounts.list_numbers()
    if not numbers:
        logger.info("No accounts registered.")
        return

    print("Registered accounts:")
    for acc_num in numbers:
        print(f" - {acc_num}")

    acc_num = prompt_existing_account(services)
    account = services.accounts.load(acc_num)

    last4 = input("Enter last 4 characters of ID to confirm: ")
    services.banking.check_id_suffix(account, last4)

    pin = prompt_until_valid(
        "Enter 4-digit PIN for this account (exactly 4 digits): ", validate_pin
    )
    services.banking.authenticate(acc_num, pin)

    pin_confirmation = prompt_until_valid(
        "Re-enter 4-digit PIN to confirm deletion (exactly 4 digits): ", validate_pin
    )
    if pin_confirmation != pin:
        raise AuthenticationError("PIN mismatch on confirmation. Delete aborted.")

    confirm = (
        input(
            f"ARE YOU SURE you want to delete account {acc_num}? "
            "THIS CANNOT BE UNDONE. (yes/no): "
        )
        .strip()
        .lower()
    )
    if confirm != "yes":
        logger.info("Delete cancelled by user.")
        return

    receipt = services.banking.delete_account(acc_num, last4, pin, pin_confirmation)
    if receipt.consistent:
        logger.info(f"✓ Account {acc_num} deleted and removed from records.")
    else:
        logger.info(f"Account {acc_num} deleted with warnings (see above).")
