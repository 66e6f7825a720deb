from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Optional


@dataclass
class Receipt:
    operation: str  # 'CREATE', 'DELETE', 'DEPOSIT', 'WITHDRAW' or 'REMIT'
    acc_num: str
    balance: Decimal  # balance of acc_num after the operation
    amount: Optional[Decimal] = None
    fee: Decimal = Decimal("0.00")
    counterparty: Optional[str] = None  # receiver account for REMIT
    counterparty_balance: Optional[Decimal] = None
    warnings: List[str] = field(default_factory=list)

    @property
    def consistent(self) -> bool:
        """Whether the operation finished without index/file warnings."""
        return not self.warnings
