from dataclasses import dataclass
from decimal import Decimal

SAVINGS = "savings"
CURRENT = "current"
ACCOUNT_TYPES = (SAVINGS, CURRENT)


@dataclass
class Account:
    acc_num: str  # 7-9 digits, no leading zero; primary key and file name
    name: str  # full name, e.g., "Jane Doe"
    id: str  # 7-digit identification number, not unique
    type: str  # 'savings' or 'current'
    pin: str  # 4 digits, stored in clear text
    balance: Decimal  # never negative, two decimal places

    def to_lines(self) -> list:
        """Convert account to the five stored lines of its record file."""
        return [
            self.name,
            self.id,
            self.type,
            self.pin,
            f"{self.balance:.2f}",
        ]
