"""
Token Registry

Symbol to mint address mappings for the tokens most often swapped
against Raydium AMM pools.
"""

from typing import Dict, Optional


WRAPPED_SOL_MINT = "So11111111111111111111111111111111111111112"

# Keys are uppercase for case-insensitive lookup
SOLANA_TOKEN_MINTS: Dict[str, str] = {
    # SOL/WSOL
    "SOL": WRAPPED_SOL_MINT,
    "WSOL": WRAPPED_SOL_MINT,

    # Stablecoins
    "USDC": "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v",
    "USDT": "Es9vMFrzaCERmJfrF4H2FYD4KCoNkY11McCe8BenwNYB",

    # Popular tokens
    "RAY": "4k3Dyjzvzp8eMZWUXbBCjEvwSkkk59S5iCNLY3QrkX6R",
    "BONK": "DezXAZ8z7PnrnRJjz3wXBoRgixCa6xjnB7YaB1pPB263",
    "JUP": "JUPyiwrYJFskUPiHa7hkeR8VUtAeFoSYbKedZNsDvCN",
    "MSOL": "mSoLzYCxHdYgdzU16g5QSh3i5K3z3KZK7ytfqcJm7So",
    "WIF": "EKpQGSJtjMFqKZ9KQanSqYXRcF8fBopzLHYxdM65zcjm",
}


def resolve_token_mint(token: str) -> str:
    """
    Resolve token symbol or mint address to mint address

    Args:
        token: Token symbol (e.g., "SOL", "USDC") or mint address

    Returns:
        Mint address

    Note:
        Unknown symbols are returned as-is and fail later when parsed
        as a public key.
    """
    token = token.strip()

    # Mint addresses are 32-44 base58 chars
    if len(token) > 30:
        return token

    upper = token.upper()
    if upper in SOLANA_TOKEN_MINTS:
        return SOLANA_TOKEN_MINTS[upper]

    return token


# Reverse mapping: mint address -> symbol
MINT_TO_SYMBOL: Dict[str, str] = {
    mint: symbol for symbol, mint in SOLANA_TOKEN_MINTS.items()
    if symbol not in ("WSOL",)  # Skip aliases
}


def get_token_symbol(mint: str) -> Optional[str]:
    """Get token symbol for a known mint address"""
    return MINT_TO_SYMBOL.get(mint)
