#!/usr/bin/env python3

from logger import get_logger

logger = get_logger()

HELP_TOPICS = {
    "1": (
        "Create account: choose 'Create Account' from menu, then provide Name, "
        "7-digit ID, account type (savings/current), 4-digit PIN. Account number "
        "will be generated."
    ),
    "2": (
        "Deposit/Withdraw: choose deposit or withdraw, authenticate with account "
        "number and PIN. Deposit allowed > {currency}0 and <= {currency}{limit:,.2f} "
        "per operation."
    ),
    "3": (
        "Remittance: sender authenticates with PIN. Savings->Current: 2% fee. "
        "Current->Savings: 3% fee. Fee deducted from sender."
    ),
}


def cmd_help(services):
    """Show help topics or file a help request."""
    print("\nHelp & Support")
    print("=" * 80)
    print("What are you looking for?")
    print("1. How to create an account")
    print("2. How to deposit/withdraw")
    print("3. How remittance works and fees")
    print("4. Contact/Report an issue (send request)")
    choice = input("Enter choice or 'back' to return: ").strip()

    if choice in HELP_TOPICS:
        print(
            "\n"
            + HELP_TOPICS[choice].format(
                currency=services.config.currency,
                limit=services.config.deposit_limit,
            )
        )
    elif choice == "4":
        print("\nSend a help request. Enter your email or phone to be notified.")
        contact = input("Enter your email or phone: ")
        issue = input("Briefly describe the issue: ")
        services.help_requests.submit(contact, issue)
        logger.info(f"Request received. We'll notify you at {contact} (saved locally).")
    else:
        print("Returning to main menu.")
