"""
Shared helpers and fixtures for unit tests.

Nothing here touches the network: the RPC client is replaced by
FakeRpc, and pool catalogs are written to pytest's tmp_path.
"""

import json
import sys
import threading
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from solders.keypair import Keypair
from solders.pubkey import Pubkey

from raydium_swap.errors import RpcError
from raydium_swap.infra.solana_signer import LocalSigner
from raydium_swap.protocols.raydium.constants import TOKEN_PROGRAM_ID, WRAPPED_SOL_MINT
from raydium_swap.protocols.raydium.instructions import get_associated_token_address

USDC_MINT = "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"
WSOL_MINT = WRAPPED_SOL_MINT
AMM_V4_OPENBOOK_MARKET_PROGRAM = "srmqPvymJeFKQ4zGQed1GFppgkRHL9kaELCbyksJtPX"


def ata(owner: str, mint: str) -> str:
    """Associated token address for owner/mint as base58"""
    return str(get_associated_token_address(Pubkey.from_string(owner), Pubkey.from_string(mint)))


def token_account_value(amount: int, owner_program: str = TOKEN_PROGRAM_ID) -> dict:
    """getAccountInfo value for an SPL token account (jsonParsed)"""
    return {
        "owner": owner_program,
        "lamports": 2039280,
        "executable": False,
        "rentEpoch": 0,
        "data": {
            "program": "spl-token",
            "parsed": {
                "type": "account",
                "info": {
                    "tokenAmount": {
                        "amount": str(amount),
                        "decimals": 6,
                    },
                },
            },
            "space": 165,
        },
    }


def make_pool_entry(base_mint: str, quote_mint: str, **overrides) -> dict:
    """Catalog entry in the Raydium liquidity JSON layout"""
    def addr() -> str:
        return str(Pubkey.new_unique())

    entry = {
        "id": addr(),
        "baseMint": base_mint,
        "quoteMint": quote_mint,
        "lpMint": addr(),
        "baseDecimals": 9,
        "quoteDecimals": 6,
        "lpDecimals": 9,
        "version": 4,
        "programId": "675kPX9MHTjS2zt1qfr1NYHuzeLXfQM9H24wFSUt1Mp8",
        "authority": "5Q544fKrFoe6tsEbD7S8EmxGTJYAKtTVhAW5Q5pge4j1",
        "openOrders": addr(),
        "targetOrders": addr(),
        "baseVault": addr(),
        "quoteVault": addr(),
        "withdrawQueue": addr(),
        "lpVault": addr(),
        "marketVersion": 4,
        "marketProgramId": AMM_V4_OPENBOOK_MARKET_PROGRAM,
        "marketId": addr(),
        "marketAuthority": addr(),
        "marketBaseVault": addr(),
        "marketQuoteVault": addr(),
        "marketBids": addr(),
        "marketAsks": addr(),
        "marketEventQueue": addr(),
    }
    entry.update(overrides)
    return entry


def write_catalog(path: Path, official=None, unofficial=None) -> str:
    """Write a liquidity JSON file and return its path"""
    path.write_text(json.dumps({
        "name": "Raydium Mainnet Liquidity Pools",
        "official": official or [],
        "unOfficial": unofficial or [],
    }))
    return str(path)


class FakeRpc:
    """
    In-memory stand-in for RpcClient

    accounts maps address -> getAccountInfo value; addresses in failing
    raise RpcError. Every call is recorded.
    """

    def __init__(self, accounts=None, failing=None):
        self.accounts = dict(accounts or {})
        self.failing = set(failing or ())
        self.calls = []
        self._lock = threading.Lock()

    def get_account_info(self, address, encoding="base64", commitment=None):
        with self._lock:
            self.calls.append(("getAccountInfo", address, encoding))
        if address in self.failing:
            raise RpcError("RPC error: node unavailable", endpoint="fake://rpc")
        return self.accounts.get(address)


@pytest.fixture
def keypair():
    return Keypair()


@pytest.fixture
def signer(keypair):
    return LocalSigner(keypair)


@pytest.fixture
def owner(signer):
    return signer.pubkey


@pytest.fixture
def sol_usdc_pool_entry():
    """SOL/USDC pool with SOL as base, like the mainnet AMM v4 pool"""
    return make_pool_entry(WSOL_MINT, USDC_MINT)


@pytest.fixture
def catalog_path(tmp_path, sol_usdc_pool_entry):
    return write_catalog(tmp_path / "pools.json", official=[sol_usdc_pool_entry])
