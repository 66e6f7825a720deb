"""Storage manager for the data directory layout."""

from config import Config
from db.index import AccountIndex
from db.store import FileRecordStore


class StorageManager:
    """Manages the data directory and the files inside it.

    Args:
        config: Application configuration object.
    """

    def __init__(self, config: Config):
        """Initialize the storage manager.

        Args:
            config: Config object containing storage configuration.
        """
        self.config = config

    def ensure(self) -> None:
        """Create the data directory and the index, log and help files.

        Existing files are left untouched.
        """
        self.config.data_dir.mkdir(parents=True, exist_ok=True)
        for path in (
            self.config.index_path,
            self.config.transaction_log_path,
            self.config.help_requests_path,
        ):
            path.touch(exist_ok=True)

    def record_store(self) -> FileRecordStore:
        """Get a record store over the data directory.

        Returns:
            FileRecordStore: Store keeping one file per account.
        """
        return FileRecordStore(self.config.data_dir)

    def account_index(self) -> AccountIndex:
        """Get the account index.

        Returns:
            AccountIndex: Index backed by the configured index file.
        """
        return AccountIndex(self.config.index_path)
