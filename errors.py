"""Exception hierarchy for flatbank."""


class BankError(Exception):
    """Base exception for all flatbank errors."""


class ValidationError(BankError):
    """Raised when user input is malformed."""


class AuthenticationError(BankError):
    """Raised when a PIN or identity check does not match the stored record."""


class NotFoundError(BankError):
    """Raised when an account is not listed in the index."""


class InsufficientFundsError(BankError):
    """Raised when a debit would take a balance below zero."""


class PersistenceError(BankError):
    """Raised when a record, index or log file cannot be read or written."""


class CorruptRecordError(PersistenceError):
    """Raised when an indexed account file is missing or cannot be parsed."""


class ConfigurationError(BankError):
    """Raised when configuration is invalid."""
