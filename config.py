"""Configuration management for flatbank.

Reads configuration from ~/.config/flatbank.toml and creates default config if needed.
"""

from pathlib import Path
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
import tomllib
import tomli_w

from errors import ConfigurationError


@dataclass
class Config:
    """Application configuration."""

    base_dir: Path
    data_dir: Path
    log_level: str
    log_dir: Path
    bank_name: str = "Krish Enterprise Bank"
    currency: str = "RM"
    deposit_limit: Decimal = Decimal("50000.00")
    enable_reset: bool = False

    @property
    def index_path(self) -> Path:
        """Get the path of the account index file."""
        return self.data_dir / "index.txt"

    @property
    def transaction_log_path(self) -> Path:
        """Get the path of the append-only transaction log."""
        return self.data_dir / "transaction.log"

    @property
    def help_requests_path(self) -> Path:
        """Get the path of the help request file."""
        return self.data_dir / "help_requests.txt"

    @classmethod
    def default(cls) -> "Config":
        """Create a Config with default values."""
        home = Path.home()
        base_dir = home / "data" / "flatbank"
        return cls(
            base_dir=base_dir,
            data_dir=base_dir / "database",
            log_level="INFO",
            log_dir=base_dir / "logs",
        )


def get_config_path() -> Path:
    """Get the path to the config file."""
    return Path.home() / ".config" / "flatbank.toml"


def _parse_limit(value) -> Decimal:
    try:
        limit = Decimal(str(value))
    except InvalidOperation:
        raise ConfigurationError(f"Invalid bank.deposit_limit: {value!r}")
    if not limit.is_finite() or limit <= 0:
        raise ConfigurationError(f"Invalid bank.deposit_limit: {value!r}")
    return limit


def load_config() -> Config:
    """Load configuration from file, creating default if it doesn't exist.

    Returns:
        Config object with loaded or default values.

    Raises:
        ConfigurationError: If a configured value cannot be used.
    """
    config_path = get_config_path()

    # If config doesn't exist, create it with defaults
    if not config_path.exists():
        config = Config.default()
        _write_config(config)
        return config

    # Load existing config
    with open(config_path, "rb") as f:
        data = tomllib.load(f)

    # Parse with defaults for any missing values
    defaults = Config.default()
    base_dir = Path(data.get("base_dir", defaults.base_dir))

    storage_config = data.get("storage", {})
    data_dir = Path(storage_config.get("data_dir", base_dir / "database"))

    log_config = data.get("logging", {})
    log_level = log_config.get("level", defaults.log_level)
    log_dir = Path(log_config.get("log_dir", base_dir / "logs"))

    bank_config = data.get("bank", {})
    bank_name = bank_config.get("name", defaults.bank_name)
    currency = bank_config.get("currency", defaults.currency)
    deposit_limit = _parse_limit(
        bank_config.get("deposit_limit", defaults.deposit_limit)
    )

    return Config(
        base_dir=base_dir,
        data_dir=data_dir,
        log_level=log_level,
        log_dir=log_dir,
        bank_name=bank_name,
        currency=currency,
        deposit_limit=deposit_limit,
        enable_reset=data.get("enable_reset", defaults.enable_reset),
    )


def _write_config(config: Config) -> None:
    """Write config to the config file.

    Args:
        config: Config object to write.
    """
    config_path = get_config_path()

    # Ensure config directory exists
    config_path.parent.mkdir(parents=True, exist_ok=True)

    # Convert config to TOML structure
    data = {
        "base_dir": str(config.base_dir),
        "enable_reset": config.enable_reset,
        "storage": {
            "data_dir": str(config.data_dir),
        },
        "logging": {
            "level": config.log_level,
            "log_dir": str(config.log_dir),
        },
        "bank": {
            "name": config.bank_name,
            "currency": config.currency,
            # Kept as a string so the limit is read back as an exact Decimal
            "deposit_limit": f"{config.deposit_limit:.2f}",
        },
    }

    # Write TOML file
    with open(config_path, "wb") as f:
        tomli_w.dump(data, f)
