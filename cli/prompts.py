"""Interactive prompt helpers shared by the menu commands."""

from errors import ValidationError
from logger import get_logger
from validation import validate_account_number

logger = get_logger()


def prompt_until_valid(message, validator):
    """Ask for input until the validator accepts it.

    Args:
        message: Prompt shown to the user.
        validator: Callable taking the raw text and returning the parsed
            value, raising ValidationError to ask again.

    Returns:
        Whatever the validator returned for the accepted input.
    """
    while True:
        raw = input(message)
        try:
            return validator(raw)
        except ValidationError as e:
            logger.error(f"{e} Try again.")


def existing_account_validator(services):
    """Build a validator accepting only well-formed, listed account numbers."""

    def validate(raw):
        acc_num = validate_account_number(raw)
        if not services.accounts.exists(acc_num):
            raise ValidationError(f"Account number {acc_num} is not registered.")
        return acc_num

    return validate


def prompt_existing_account(services):
    """Ask for an account number until one that exists is entered."""
    acc_num = prompt_until_valid(
        "Enter account number (7-9 digits): ", existing_account_validator(services)
    )
    logger.info(f"OK: Account {acc_num} found.")
    return acc_num
