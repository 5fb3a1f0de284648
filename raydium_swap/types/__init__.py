"""
Type definitions for Raydium Swap
"""

from .common import TokenHandle, WRAPPED_SOL
from .account import AccountInfo
from .pool import PoolRecord
from .plan import SwapPlan, SwapDirection
from .result import TxResult, TxStatus
from .solana_tokens import (
    WRAPPED_SOL_MINT,
    SOLANA_TOKEN_MINTS,
    resolve_token_mint,
    get_token_symbol,
)

__all__ = [
    "TokenHandle",
    "WRAPPED_SOL",
    "AccountInfo",
    "PoolRecord",
    "SwapPlan",
    "SwapDirection",
    "TxResult",
    "TxStatus",
    # Token registry
    "WRAPPED_SOL_MINT",
    "SOLANA_TOKEN_MINTS",
    "resolve_token_mint",
    "get_token_symbol",
]
