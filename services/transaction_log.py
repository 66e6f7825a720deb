"""Append-only audit trail of account operations."""

from datetime import datetime
from pathlib import Path
from typing import List

from logger import get_logger

logger = get_logger()

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_entry(entry: str, when: datetime) -> str:
    """Format a log line as ``[YYYY-MM-DD HH:MM:SS] entry``."""
    return f"[{when.strftime(TIMESTAMP_FORMAT)}] {entry}"


class TransactionLogService:
    """Service for the transaction log file."""

    def __init__(self, path: Path, clock=datetime.now):
        """Initialize the transaction log service.

        Args:
            path: Path of the log file.
            clock: Callable returning the current local time.
        """
        self.path = path
        self.clock = clock

    def append(self, entry: str) -> bool:
        """Append a timestamped entry.

        A write failure is reported as a warning and never raised: by the
        time an entry is logged the operation has already been committed.

        Args:
            entry: Event description, e.g. "DEPOSIT RM10.00 to 1234567 ...".

        Returns:
            True if the entry was written.
        """
        line = format_entry(entry, self.clock())
        try:
            with open(self.path, "a", encoding="utf-8") as f:
                f.write(f"{line}\n")
        except OSError as e:
            logger.warning(f"Could not write transaction log entry '{entry}': {e}")
            return False
        return True

    def entries(self) -> List[str]:
        """Return every logged line, oldest first."""
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                return [line.rstrip("\n") for line in f if line.strip()]
        except FileNotFoundError:
            return []
