"""Index of existing account numbers."""

import os
from pathlib import Path
from typing import List

from validation import is_digits


class AccountIndex:
    """Membership list of account numbers, one per line in a text file.

    An account exists exactly when its number is listed here. Line order
    carries no meaning.

    Args:
        path: Path of the index file.
    """

    def __init__(self, path: Path):
        self.path = path

    def _read_lines(self) -> List[str]:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                return [line.rstrip("\n") for line in f]
        except FileNotFoundError:
            return []

    def exists(self, acc_num: str) -> bool:
        """Check whether an account number is listed.

        Args:
            acc_num: Account number to look up. Anything that is not all
                digits is never listed.

        Returns:
            True if a line equal to acc_num is present.
        """
        if not is_digits(acc_num):
            return False
        return acc_num in self._read_lines()

    def append(self, acc_num: str) -> None:
        """Add an account number to the index.

        Duplicates are not checked for; numbers come from the generator,
        which only hands out unlisted ones.

        Raises:
            OSError: If the index file cannot be written.
        """
        with open(self.path, "a", encoding="utf-8") as f:
            f.write(f"{acc_num}\n")

    def remove(self, acc_num: str) -> bool:
        """Remove every line equal to acc_num.

        The remaining lines are written to a temporary file which then
        replaces the index, so readers never see a half-written index.
        Blank lines are dropped in the rewrite.

        Returns:
            True if at least one entry was removed, False if none matched or
            there is no index file.

        Raises:
            OSError: If the temporary file cannot be written or moved.
        """
        if not self.path.exists():
            return False

        removed = False
        kept = []
        for line in self._read_lines():
            if line == acc_num:
                removed = True
                continue
            if line:
                kept.append(line)

        tmp_path = self.path.with_suffix(".tmp")
        with open(tmp_path, "w", encoding="utf-8") as f:
            for line in kept:
                f.write(f"{line}\n")
        os.replace(tmp_path, self.path)

        return removed

    def list(self) -> List[str]:
        """Return the listed account numbers in file order, skipping blanks."""
        return [line for line in self._read_lines() if line.strip()]

    def count(self) -> int:
        """Return the number of non-blank lines in the index."""
        return len(self.list())
