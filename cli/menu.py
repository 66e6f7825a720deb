#!/usr/bin/env python3

from datetime import datetime
from typing import Optional

from cli.accounts import cmd_create, cmd_delete
from cli.support import cmd_help
from cli.transactions import cmd_deposit, cmd_remit, cmd_withdraw
from errors import BankError
from logger import get_logger

logger = get_logger()

EXIT = "exit"

# Menu entries in display order: (number, command, keywords, label)
MENU = [
    ("1", "create", ("create",), "Create"),
    ("2", "delete", ("delete",), "Delete"),
    ("3", "deposit", ("deposit",), "Deposit"),
    ("4", "withdraw", ("withdraw",), "Withdraw"),
    ("5", "remit", ("remit", "remittance"), "Remittance"),
    ("6", "help", ("help",), "Help"),
    ("7", EXIT, ("exit", "quit"), "Exit"),
]

COMMANDS = {
    "create": cmd_create,
    "delete": cmd_delete,
    "deposit": cmd_deposit,
    "withdraw": cmd_withdraw,
    "remit": cmd_remit,
    "help": cmd_help,
}


def resolve_choice(text: str) -> Optional[str]:
    """Map a menu number or keyword to a command name.

    Args:
        text: Raw menu input; keywords are matched case-insensitively.

    Returns:
        The command name, or None if the input matches nothing.
    """
    choice = text.strip().lower()
    for number, command, keywords, _ in MENU:
        if choice == number or choice in keywords:
            return command
    return None


def print_header(services):
    """Print the session banner and report index/file mismatches."""
    print("=" * 45)
    print(f"   Welcome to {services.config.bank_name}")
    print("   How may I help you today?")
    print("=" * 45)
    print(f"Session started: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
    print(f"Loaded accounts: {services.accounts.count()}")
    print("-" * 45)

    report = services.accounts.check_consistency()
    for acc_num in report.orphan_records:
        logger.warning(f"Record file for {acc_num} is not listed in the index.")
    for acc_num in report.dangling_entries:
        logger.warning(f"Account {acc_num} is listed in the index but has no record file.")


def print_menu():
    print("\nMENU: (type number or keyword)")
    for number, _, keywords, label in MENU:
        print(f"{number}) {label:<13} ({' / '.join(keywords)})")


def run_menu(services):
    """Run the interactive menu until the user exits.

    Errors from a command are reported and the menu is shown again. End of
    input ends the session like an explicit exit.
    """
    while True:
        print_menu()
        try:
            command = resolve_choice(input("Select option: "))
            if command == EXIT:
                break
            if command is None:
                logger.warning(
                    "Invalid option. Please enter a menu number or keyword "
                    "(e.g., 'create', 'deposit', 'remit', 'help', 'exit')."
                )
                continue
            COMMANDS[command](services)
        except BankError as e:
            logger.error(str(e))
        except (EOFError, KeyboardInterrupt):
            print()
            break

    print(f"Thank you for using {services.config.bank_name}. Goodbye!")
