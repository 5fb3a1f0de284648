"""
Raydium AMM v4 Protocol

Pool catalog lookup and instruction encoders for single-pool swaps.
"""

from .pool_catalog import PoolCatalog
from .constants import (
    AMM_V4_PROGRAM_ID,
    TOKEN_PROGRAM_ID,
    ASSOCIATED_TOKEN_PROGRAM_ID,
    SYSTEM_PROGRAM_ID,
    WRAPPED_SOL_MINT,
    LAMPORTS_PER_SOL,
)
from .instructions import (
    get_associated_token_address,
    build_create_ata_instruction,
    build_compute_budget_instructions,
    build_transfer_instruction,
    build_sync_native_instruction,
    build_close_account_instruction,
    build_swap_base_in_instruction,
    build_swap_base_out_instruction,
)

__all__ = [
    # Catalog
    "PoolCatalog",
    # Constants
    "AMM_V4_PROGRAM_ID",
    "TOKEN_PROGRAM_ID",
    "ASSOCIATED_TOKEN_PROGRAM_ID",
    "SYSTEM_PROGRAM_ID",
    "WRAPPED_SOL_MINT",
    "LAMPORTS_PER_SOL",
    # Instruction builders
    "get_associated_token_address",
    "build_create_ata_instruction",
    "build_compute_budget_instructions",
    "build_transfer_instruction",
    "build_sync_native_instruction",
    "build_close_account_instruction",
    "build_swap_base_in_instruction",
    "build_swap_base_out_instruction",
]
