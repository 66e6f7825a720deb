"""Base services container for dependency injection."""

from config import Config
from db.manager import StorageManager


class Services:
    """Container for all application services.

    This class provides a centralized way to access all services and makes
    it easy to inject test doubles.

    Args:
        config: Application configuration object.
        storage: Optional storage manager for testing.
        rng: Optional random source for account numbers.
    """

    def __init__(self, config: Config, storage=None, rng=None):
        """Initialize services with configuration.

        Args:
            config: Config object containing application configuration.
            storage: Optional storage manager for dependency injection (testing).
                     If None, creates StorageManager from config.
            rng: Optional random.Random instance. If None, one is created and
                 seeded once for the lifetime of the container.
        """
        self.config = config
        self.storage = storage or StorageManager(config)

        # Lazy import to avoid circular dependencies
        from services.accounts import AccountService
        from services.account_numbers import AccountNumberGenerator, make_rng
        from services.banking import BankingService
        from services.help_requests import HelpRequestService
        from services.transaction_log import TransactionLogService

        index = self.storage.account_index()
        self.rng = rng or make_rng()

        self.accounts = AccountService(self.storage.record_store(), index)
        self.account_numbers = AccountNumberGenerator(index, self.rng)
        self.transaction_log = TransactionLogService(config.transaction_log_path)
        self.help_requests = HelpRequestService(
            config.help_requests_path, self.transaction_log
        )
        self.banking = BankingService(
            config, self.accounts, self.account_numbers, self.transaction_log
        )
