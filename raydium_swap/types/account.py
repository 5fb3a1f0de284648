"""
Associated token account resolution result
"""

from dataclasses import dataclass
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from solders.instruction import Instruction


@dataclass(frozen=True)
class AccountInfo:
    """
    Owner's associated token account for one mint

    Attributes:
        address: Associated token account address (base58)
        balance: Raw token amount held (0 when the account does not exist yet)
        instruction: Create-account instruction, present only when the
                     account has to be created in the swap transaction
    """
    address: str
    balance: int = 0
    instruction: Optional["Instruction"] = None

    @property
    def needs_creation(self) -> bool:
        return self.instruction is not None
