"""Input validation for account fields and amounts.

Every validator takes the raw text as typed and either returns the normalized
value or raises ValidationError carrying a message fit to show the user. None
of them touch storage, so the interactive prompts can call them in a loop.
"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, localcontext
from typing import Optional

from errors import ValidationError
from models.account import ACCOUNT_TYPES

_DIGITS = frozenset("0123456789")
_LETTERS = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ")

NAME_MIN_LENGTH = 3
NAME_MAX_LENGTH = 99
ID_NUMBER_LENGTH = 7
PIN_LENGTH = 4
ACCOUNT_NUMBER_MIN_LENGTH = 7
ACCOUNT_NUMBER_MAX_LENGTH = 9

CENT = Decimal("0.01")


def to_cents(amount: Decimal) -> Decimal:
    """Round a finite amount half-up to cents, whatever its magnitude."""
    with localcontext() as ctx:
        # Room for every integer digit, a carry from rounding and two decimals
        ctx.prec = max(ctx.prec, amount.adjusted() + 4)
        return amount.quantize(CENT, rounding=ROUND_HALF_UP)


def is_digits(value: str) -> bool:
    """Return True if value is non-empty and made only of ASCII digits."""
    return bool(value) and all(ch in _DIGITS for ch in value)


def validate_name(value: str) -> str:
    """Validate a holder's full name.

    Args:
        value: Name as entered.

    Returns:
        The name, unchanged.

    Raises:
        ValidationError: If the name is empty, shorter than 3 or longer than
            99 characters, contains anything but letters and single spaces,
            starts or ends with a space, or has fewer than two words.
    """
    if not value:
        raise ValidationError("Name cannot be empty.")

    format_error = ValidationError(
        "Invalid name format. Name must be letters and spaces only, minimum 3 "
        "characters, and contain at least two words (e.g., 'John Smith')."
    )
    if len(value) < NAME_MIN_LENGTH or len(value) > NAME_MAX_LENGTH:
        raise format_error
    if value[0] == " " or value[-1] == " " or "  " in value:
        raise format_error
    if any(ch != " " and ch not in _LETTERS for ch in value):
        raise format_error
    if " " not in value:
        raise format_error

    return value


def _validate_fixed_digits(value: str, length: int, label: str) -> str:
    if not is_digits(value):
        raise ValidationError(f"{label} must contain only digits.")
    if len(value) != length:
        raise ValidationError(
            f"{label} must be exactly {length} digits long. "
            f"You entered {len(value)} digits."
        )
    return value


def validate_id_number(value: str) -> str:
    """Validate a 7-digit identification number."""
    return _validate_fixed_digits(value, ID_NUMBER_LENGTH, "ID")


def validate_pin(value: str) -> str:
    """Validate a 4-digit PIN."""
    return _validate_fixed_digits(value, PIN_LENGTH, "PIN")


def validate_account_number(value: str) -> str:
    """Validate the format of an account number (7 to 9 digits).

    Existence is not checked here; that needs the index.
    """
    if not is_digits(value):
        raise ValidationError("Account numbers must be digits only.")
    if not ACCOUNT_NUMBER_MIN_LENGTH <= len(value) <= ACCOUNT_NUMBER_MAX_LENGTH:
        raise ValidationError(
            f"Account number must be between {ACCOUNT_NUMBER_MIN_LENGTH} and "
            f"{ACCOUNT_NUMBER_MAX_LENGTH} digits (you entered {len(value)} digits)."
        )
    return value


def validate_account_type(value: str) -> str:
    """Normalize an account type to lowercase and check it is known."""
    account_type = value.lower()
    if account_type not in ACCOUNT_TYPES:
        raise ValidationError("Invalid account type. Enter 'savings' or 'current'.")
    return account_type


def check_amount(amount: Decimal, maximum: Optional[Decimal] = None) -> Decimal:
    """Check an already-parsed amount against the positive and maximum rules.

    Args:
        amount: Amount to check.
        maximum: Optional inclusive upper bound.

    Returns:
        The amount rounded to cents.

    Raises:
        ValidationError: If the amount is not finite, not greater than zero
            once rounded to cents, or above the maximum.
    """
    if not amount.is_finite():
        raise ValidationError("Invalid number.")
    amount = to_cents(amount)
    if maximum is not None and amount > maximum:
        raise ValidationError(
            f"Amount exceeds the allowed maximum of {maximum:.2f} per operation."
        )
    if amount <= 0:
        raise ValidationError("Amount must be greater than 0.00.")
    return amount


def validate_amount(value: str, maximum: Optional[Decimal] = None) -> Decimal:
    """Parse a typed monetary amount.

    Only digits and at most one decimal point are accepted; signs, exponents
    and separators are rejected.

    Args:
        value: Amount as entered, e.g. "10.50".
        maximum: Optional inclusive upper bound (used for deposits).

    Returns:
        The amount as a Decimal rounded to cents.

    Raises:
        ValidationError: If the text is not a plain positive number or breaks
            the bounds.
    """
    if value.startswith("-"):
        raise ValidationError("Negative amounts not allowed.")
    if (
        not value
        or value.count(".") > 1
        or any(ch != "." and ch not in _DIGITS for ch in value)
    ):
        raise ValidationError(
            f"Please enter a valid number (e.g., 10.50). You typed: {value}"
        )

    # A lone "." reads as zero and is rejected by the positive check
    if value == ".":
        amount = Decimal(0)
    else:
        try:
            amount = Decimal(value)
        except InvalidOperation:
            raise ValidationError("Invalid number.")

    return check_amount(amount, maximum)
