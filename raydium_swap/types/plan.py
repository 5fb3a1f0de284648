"""
Swap plan produced by the planner and consumed by the submitter
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, TYPE_CHECKING

from .account import AccountInfo
from .pool import PoolRecord

if TYPE_CHECKING:
    from solders.instruction import Instruction


class SwapDirection(Enum):
    """Which side of the pool the input token sits on"""
    BASE_IN = "base_in"
    BASE_OUT = "base_out"


@dataclass
class SwapPlan:
    """
    Ordered instructions for exactly one swap transaction

    Attributes:
        instructions: Instructions in execution order
        token_in_account: Resolution of the input token account
        token_out_account: Resolution of the output token account
        pool: Pool the swap runs against
        direction: Swap instruction variant used
    """
    instructions: List["Instruction"] = field(default_factory=list)
    token_in_account: AccountInfo = None
    token_out_account: AccountInfo = None
    pool: PoolRecord = None
    direction: SwapDirection = SwapDirection.BASE_IN

    def __len__(self) -> int:
        return len(self.instructions)
