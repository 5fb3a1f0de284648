"""
SwapClient - Entry point for Raydium AMM v4 swaps

Wires the RPC client, signer, pool catalog, planner and transaction
builder together.
"""

from __future__ import annotations

import logging
from typing import Optional, Union, List, TYPE_CHECKING

if TYPE_CHECKING:
    from solders.keypair import Keypair

from .infra import RpcClient, RpcClientConfig, TxBuilder, TxBuilderConfig, create_signer, Signer
from .modules import SwapPlanner, SwapPlannerConfig
from .modules.swap import TokenLike
from .protocols.raydium import PoolCatalog
from .types import SwapPlan
from .config import config as global_config

logger = logging.getLogger(__name__)


class SwapClient:
    """
    Raydium AMM v4 swap client

    Usage:
        from solders.keypair import Keypair

        client = SwapClient(
            rpc_url="https://api.mainnet-beta.solana.com",
            keypair_path="~/.config/solana/id.json",
            catalog="pools.json",
        )

        # Spend 18.328898 USDC, accept any amount of SOL
        signature = client.swap("USDC", "SOL", 18_328_898, 0)

        # Or inspect the instructions first
        plan = client.plan("SOL", "USDC", 100_000_000, 0)
    """

    def __init__(
        self,
        rpc_url: Union[str, List[str], None] = None,
        keypair: Optional["Keypair"] = None,
        keypair_path: Optional[str] = None,
        catalog: Union[str, PoolCatalog, None] = None,
        rpc_config: Optional[RpcClientConfig] = None,
        tx_config: Optional[TxBuilderConfig] = None,
        planner_config: Optional[SwapPlannerConfig] = None,
    ):
        """
        Initialize SwapClient

        Args:
            rpc_url: RPC endpoint URL or list of URLs (defaults to SOLANA_RPC_URL)
            keypair: Optional Keypair for local signing
            keypair_path: Optional path to keypair file
            catalog: Pool catalog path/URL or PoolCatalog (defaults to RAYDIUM_POOL_CATALOG)
            rpc_config: Optional RPC configuration
            tx_config: Optional transaction configuration
            planner_config: Optional compute budget configuration
        """
        self._rpc = RpcClient(rpc_url or global_config.rpc.url, config=rpc_config)

        self._signer = create_signer(
            keypair=keypair,
            keypair_path=keypair_path,
        )

        self._catalog = catalog if isinstance(catalog, PoolCatalog) else PoolCatalog(catalog)
        self._planner = SwapPlanner(self._rpc, self._signer, self._catalog, config=planner_config)
        self._tx_builder = TxBuilder(self._rpc, self._signer, config=tx_config)

    @property
    def rpc(self) -> RpcClient:
        """Access to RPC client"""
        return self._rpc

    @property
    def signer(self) -> Signer:
        """Access to signer"""
        return self._signer

    @property
    def catalog(self) -> PoolCatalog:
        return self._catalog

    @property
    def tx_builder(self) -> TxBuilder:
        """Access to transaction builder"""
        return self._tx_builder

    @property
    def pubkey(self) -> str:
        """Owner's public key"""
        return self._signer.pubkey

    def plan(
        self,
        token_in: TokenLike,
        token_out: TokenLike,
        amount_in: int,
        min_amount_out: int,
    ) -> SwapPlan:
        """Build the swap instructions without sending anything"""
        return self._planner.plan(token_in, token_out, amount_in, min_amount_out)

    def swap(
        self,
        token_in: TokenLike,
        token_out: TokenLike,
        amount_in: int,
        min_amount_out: int,
    ) -> str:
        """
        Swap amount_in of token_in for at least min_amount_out of token_out

        Args:
            token_in: Token to spend (symbol, mint or TokenHandle)
            token_out: Token to receive (symbol, mint or TokenHandle)
            amount_in: Raw input amount
            min_amount_out: Raw minimum acceptable output

        Returns:
            Transaction signature
        """
        swap_plan = self.plan(token_in, token_out, amount_in, min_amount_out)
        signature = self._tx_builder.submit(swap_plan.instructions)
        logger.info(f"Swap submitted: {signature}")
        return signature

    def simulate(
        self,
        token_in: TokenLike,
        token_out: TokenLike,
        amount_in: int,
        min_amount_out: int,
    ) -> dict:
        """Plan a swap and run it through simulateTransaction"""
        swap_plan = self.plan(token_in, token_out, amount_in, min_amount_out)
        return self._tx_builder.simulate(swap_plan.instructions)

    def close(self):
        """Close client connections and release resources"""
        self._rpc.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def __repr__(self) -> str:
        return f"SwapClient(pubkey={self.pubkey[:8]}..., rpc={self._rpc.endpoint})"
