"""
Raydium AMM v4 pool record
"""

from dataclasses import dataclass
from typing import Any, Dict

from solders.pubkey import Pubkey


# Field name -> key used in the Raydium liquidity JSON
_CATALOG_KEYS: Dict[str, str] = {
    "id": "id",
    "base_mint": "baseMint",
    "quote_mint": "quoteMint",
    "lp_mint": "lpMint",
    "base_decimals": "baseDecimals",
    "quote_decimals": "quoteDecimals",
    "lp_decimals": "lpDecimals",
    "version": "version",
    "program_id": "programId",
    "authority": "authority",
    "open_orders": "openOrders",
    "target_orders": "targetOrders",
    "base_vault": "baseVault",
    "quote_vault": "quoteVault",
    "withdraw_queue": "withdrawQueue",
    "lp_vault": "lpVault",
    "market_version": "marketVersion",
    "market_program_id": "marketProgramId",
    "market_id": "marketId",
    "market_authority": "marketAuthority",
    "market_base_vault": "marketBaseVault",
    "market_quote_vault": "marketQuoteVault",
    "market_bids": "marketBids",
    "market_asks": "marketAsks",
    "market_event_queue": "marketEventQueue",
}

_INT_FIELDS = frozenset({
    "base_decimals",
    "quote_decimals",
    "lp_decimals",
    "version",
    "market_version",
})


@dataclass(frozen=True)
class PoolRecord:
    """
    Catalog entry describing a Raydium AMM v4 pool and its OpenBook market

    All address fields are base58 strings, validated on load.
    """
    id: str
    base_mint: str
    quote_mint: str
    lp_mint: str
    base_decimals: int
    quote_decimals: int
    lp_decimals: int
    version: int
    program_id: str
    authority: str
    open_orders: str
    target_orders: str
    base_vault: str
    quote_vault: str
    withdraw_queue: str
    lp_vault: str
    market_version: int
    market_program_id: str
    market_id: str
    market_authority: str
    market_base_vault: str
    market_quote_vault: str
    market_bids: str
    market_asks: str
    market_event_queue: str

    def __repr__(self) -> str:
        return f"PoolRecord({self.id[:8]}..., {self.base_mint[:8]}.../{self.quote_mint[:8]}...)"

    def is_base(self, mint: str) -> bool:
        return self.base_mint == mint

    def pubkey(self, name: str) -> Pubkey:
        """Get an address field as a Pubkey"""
        return Pubkey.from_string(getattr(self, name))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PoolRecord":
        """
        Parse a camelCase catalog entry

        Raises:
            KeyError: a required key is missing
            ValueError: an address or integer field does not parse
        """
        values: Dict[str, Any] = {}
        for name, key in _CATALOG_KEYS.items():
            raw = data[key]
            if name in _INT_FIELDS:
                values[name] = int(raw)
            else:
                # Round-trip through Pubkey to reject malformed addresses
                values[name] = str(Pubkey.from_string(raw))
        return cls(**values)
