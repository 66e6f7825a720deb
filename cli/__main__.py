#!/usr/bin/env python3
"""
flatbank CLI - Interactive console for managing bank accounts.

Usage:
    python -m cli

The menu accepts a number or a keyword:
    1 create      Open a new account
    2 delete      Close an account
    3 deposit     Deposit money
    4 withdraw    Withdraw money
    5 remit       Transfer money between accounts (also: remittance)
    6 help        Help topics and support requests
    7 exit        Leave the program (also: quit)
"""

import sys
import argparse
from cli.menu import print_header, run_menu
from config import load_config
from services.base import Services
from logger import setup_logging


def main():
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="cli",
        description="flatbank - Flat-file bank account management",
        epilog=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.parse_args()

    try:
        config = load_config()
        setup_logging(config)

        # Create services container for dependency injection
        services = Services(config)
        services.storage.ensure()

        print_header(services)
        run_menu(services)
    except Exception as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
