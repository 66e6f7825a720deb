"""Help requests filed from the support menu."""

from pathlib import Path

from errors import PersistenceError
from services.transaction_log import TIMESTAMP_FORMAT, TransactionLogService


class HelpRequestService:
    """Service for saving help requests locally."""

    def __init__(self, path: Path, transaction_log: TransactionLogService):
        """Initialize the help request service.

        Args:
            path: Path of the help request file.
            transaction_log: Log that records each submission.
        """
        self.path = path
        self.transaction_log = transaction_log

    def submit(self, contact: str, issue: str) -> str:
        """Save a help request.

        Args:
            contact: Email address or phone number to reply to.
            issue: Short description of the problem.

        Returns:
            The line written to the help request file.

        Raises:
            PersistenceError: If the request cannot be saved.
        """
        timestamp = self.transaction_log.clock().strftime(TIMESTAMP_FORMAT)
        line = f"[{timestamp}] {contact} | {issue}"
        try:
            with open(self.path, "a", encoding="utf-8") as f:
                f.write(f"{line}\n")
        except OSError as e:
            raise PersistenceError(f"Failed to save help request: {e}") from e

        self.transaction_log.append("Help request submitted")
        return line
