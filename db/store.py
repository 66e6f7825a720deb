"""Key-value storage for account records."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional


class KeyValueStore(ABC):
    """Abstract interface for a store of text records keyed by account number.

    Operation handlers only depend on this interface, so the file-per-record
    backend can be replaced by an embedded database without touching them.
    """

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the stored text for key, or None if there is none."""
        pass

    @abstractmethod
    def put(self, key: str, value: str) -> None:
        """Store value under key, replacing any existing value."""
        pass

    @abstractmethod
    def delete(self, key: str) -> bool:
        """Remove key. Returns True if something was removed."""
        pass

    @abstractmethod
    def list(self) -> List[str]:
        """Return all stored keys, sorted."""
        pass


class FileRecordStore(KeyValueStore):
    """Stores each record as <key>.txt inside a directory.

    Writes are not atomic: a failure part way through ``put`` can leave a
    truncated file behind.

    Args:
        data_dir: Directory holding the record files.
    """

    suffix = ".txt"

    def __init__(self, data_dir: Path):
        self.data_dir = data_dir

    def _path_for(self, key: str) -> Path:
        # Keys become file names, so only plain digit strings are accepted
        if not key or not all(ch in "0123456789" for ch in key):
            raise ValueError(f"Invalid record key: {key!r}")
        return self.data_dir / f"{key}{self.suffix}"

    def get(self, key: str) -> Optional[str]:
        path = self._path_for(key)
        try:
            with open(path, "r", encoding="utf-8") as f:
                return f.read()
        except FileNotFoundError:
            return None

    def put(self, key: str, value: str) -> None:
        path = self._path_for(key)
        with open(path, "w", encoding="utf-8") as f:
            f.write(value)

    def delete(self, key: str) -> bool:
        path = self._path_for(key)
        try:
            path.unlink()
        except FileNotFoundError:
            return False
        return True

    def list(self) -> List[str]:
        if not self.data_dir.exists():
            return []
        return sorted(
            path.stem
            for path in self.data_dir.glob(f"*{self.suffix}")
            if path.is_file() and path.stem.isascii() and path.stem.isdigit()
        )
