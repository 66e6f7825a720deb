#!/usr/bin/env python3
"""Reset script for flatbank.

This script will:
1. Delete the data directory (accounts, index, transaction log and help requests)
2. Recreate an empty data directory
"""

import shutil
import sys

from config import load_config
from db.manager import StorageManager


def reset():
    """Reset the application state."""
    print("flatbank Reset Script")
    print("=" * 50)

    config = load_config()

    # Check if reset is enabled
    if not config.enable_reset:
        print("\nReset is disabled in configuration (enable_reset=false).")
        print("To enable reset, set enable_reset=true in ~/.config/flatbank.toml")
        sys.exit(1)

    # Show what will be deleted
    print(f"\nData directory: {config.data_dir}")
    print(f"Index: {config.index_path}")
    print(f"Transaction log: {config.transaction_log_path}")
    print(f"Help requests: {config.help_requests_path}")

    response = input("\nThis will delete ALL accounts. Continue? (yes/no): ")
    if response.lower() != "yes":
        print("Reset cancelled.")
        sys.exit(0)

    if config.data_dir.exists():
        print(f"\nDeleting {config.data_dir}...")
        shutil.rmtree(config.data_dir)
        print("✓ Data directory deleted")
    else:
        print(f"\n✓ Data directory does not exist: {config.data_dir}")

    StorageManager(config).ensure()

    print("\n" + "=" * 50)
    print("Reset complete! Empty data directory has been recreated.")
    print(f"Data location: {config.data_dir}")


if __name__ == "__main__":
    reset()
