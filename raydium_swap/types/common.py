"""
Common type definitions
"""

from dataclasses import dataclass

from .solana_tokens import WRAPPED_SOL_MINT, resolve_token_mint, get_token_symbol


@dataclass(frozen=True)
class TokenHandle:
    """
    Token taking part in a swap

    Attributes:
        mint: Token mint address (base58)
        symbol: Display symbol (optional, used in logs and errors)
    """
    mint: str
    symbol: str = ""

    def __str__(self) -> str:
        return self.symbol or self.mint

    def __repr__(self) -> str:
        return f"TokenHandle({self.symbol or '?'}, {self.mint[:8]}...)"

    @property
    def is_native(self) -> bool:
        """Check if this is native SOL (wrapped)"""
        return self.mint == WRAPPED_SOL_MINT

    @classmethod
    def resolve(cls, token: str) -> "TokenHandle":
        """
        Build a handle from a symbol ("SOL", "USDC") or a mint address
        """
        mint = resolve_token_mint(token)
        return cls(mint=mint, symbol=get_token_symbol(mint) or "")


WRAPPED_SOL = TokenHandle(mint=WRAPPED_SOL_MINT, symbol="SOL")
