"""
Raydium AMM v4 Constants
"""

from ...types.solana_tokens import WRAPPED_SOL_MINT

# Raydium liquidity pool v4 program (mainnet)
AMM_V4_PROGRAM_ID = "675kPX9MHTjS2zt1qfr1NYHuzeLXfQM9H24wFSUt1Mp8"

# Token Programs
TOKEN_PROGRAM_ID = "TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA"

# Associated Token Program
ASSOCIATED_TOKEN_PROGRAM_ID = "ATokenGPvbdGVxr1b2hvZbsiqW5xWH25efTNsLJA8knL"

# System Program
SYSTEM_PROGRAM_ID = "11111111111111111111111111111111"

LAMPORTS_PER_SOL = 1_000_000_000

# AMM v4 instruction tags (single byte, followed by two u64 amounts)
SWAP_BASE_IN = 9
SWAP_BASE_OUT = 11

# SPL token instruction tags
CLOSE_ACCOUNT = 9
SYNC_NATIVE = 17

# Associated token program: create_idempotent
CREATE_ATA_IDEMPOTENT = 1

# SPL token account layout: mint (32) | owner (32) | amount (u64)
TOKEN_ACCOUNT_AMOUNT_OFFSET = 64
