"""
Swap Module

Plans a single-pool Raydium AMM v4 swap:
- Resolves input and output token accounts (concurrently)
- Funds wrapped SOL inputs from the native balance
- Locates the pool and picks swap_base_in / swap_base_out
- Closes a wrapped SOL output account back to native SOL
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import List, Union

from solders.instruction import Instruction
from solders.pubkey import Pubkey

from .accounts import AccountResolver
from ..infra import RpcClient, Signer
from ..types import SwapPlan, SwapDirection, TokenHandle
from ..protocols.raydium import PoolCatalog
from ..protocols.raydium.instructions import (
    build_compute_budget_instructions,
    build_transfer_instruction,
    build_sync_native_instruction,
    build_close_account_instruction,
    build_swap_base_in_instruction,
    build_swap_base_out_instruction,
)
from ..errors import ConfigurationError, InsufficientBalance, PoolNotFound
from ..config import config as global_config

logger = logging.getLogger(__name__)

TokenLike = Union[TokenHandle, str]

# Amounts are encoded as u64 on the wire
U64_MAX = 2**64 - 1


@dataclass
class SwapPlannerConfig:
    """
    Swap planner runtime configuration

    Unset values fall back to the global config (raydium_swap.config.TxConfig).
    """
    compute_unit_price: int = None
    compute_units: int = None

    def __post_init__(self):
        """Apply defaults from global config for any unset values"""
        if self.compute_unit_price is None:
            self.compute_unit_price = global_config.tx.compute_unit_price
        if self.compute_units is None:
            self.compute_units = global_config.tx.compute_units


def _as_handle(token: TokenLike) -> TokenHandle:
    handle = token if isinstance(token, TokenHandle) else TokenHandle.resolve(token)
    try:
        Pubkey.from_string(handle.mint)
    except ValueError:
        raise ConfigurationError.invalid("token", f"unknown token or bad mint address: {handle.mint}")
    return handle


def _check_amount(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError.invalid(name, f"must be an integer amount, got {value!r}")
    if value < 0:
        raise ConfigurationError.invalid(name, f"must not be negative, got {value}")
    if value > U64_MAX:
        raise ConfigurationError.invalid(name, f"exceeds u64 range, got {value}")


class SwapPlanner:
    """
    Swap orchestration

    Produces the ordered instruction list for one swap transaction:

        compute unit price, compute unit limit
        [create input account] [create output account]
        [transfer + sync_native]          (wrapped SOL input short of amount_in)
        swap_base_in | swap_base_out
        [close output account]            (wrapped SOL output)

    Usage:
        planner = SwapPlanner(rpc, signer, PoolCatalog("pools.json"))
        plan = planner.plan("USDC", "SOL", 18_328_898, 0)
    """

    def __init__(
        self,
        rpc: RpcClient,
        signer: Signer,
        catalog: PoolCatalog,
        config: SwapPlannerConfig = None,
    ):
        """
        Args:
            rpc: RPC client used for account resolution
            signer: Owner of the swap; only its public key is used here
            catalog: Pool catalog
            config: Compute budget settings
        """
        self._rpc = rpc
        self._signer = signer
        self._catalog = catalog
        self._config = config or SwapPlannerConfig()
        self._resolver = AccountResolver(rpc)

    @property
    def owner(self) -> str:
        return self._signer.pubkey

    def plan(
        self,
        token_in: TokenLike,
        token_out: TokenLike,
        amount_in: int,
        min_amount_out: int,
    ) -> SwapPlan:
        """
        Build the instruction list for a swap

        Args:
            token_in: Token to spend (handle, symbol or mint)
            token_out: Token to receive (handle, symbol or mint)
            amount_in: Raw input amount
            min_amount_out: Raw minimum acceptable output

        Returns:
            SwapPlan ready for submission

        Raises:
            AccountResolutionError: account query failed
            InsufficientBalance: SPL input balance below amount_in
            PoolNotFound: no catalog pool trades the pair
            PoolCatalogError: catalog unreadable
            ConfigurationError: invalid arguments
        """
        token_in = _as_handle(token_in)
        token_out = _as_handle(token_out)
        _check_amount("amount_in", amount_in)
        _check_amount("min_amount_out", min_amount_out)
        if amount_in == 0:
            raise ConfigurationError.invalid("amount_in", "must be greater than zero")
        if token_in.mint == token_out.mint:
            raise ConfigurationError.invalid("token_out", f"same token as token_in ({token_in.mint})")

        owner = self.owner
        owner_pubkey = Pubkey.from_string(owner)

        with ThreadPoolExecutor(max_workers=2) as executor:
            in_future = executor.submit(self._resolver.resolve, token_in, owner)
            out_future = executor.submit(self._resolver.resolve, token_out, owner)
            in_account = in_future.result()
            out_account = out_future.result()

        instructions: List[Instruction] = build_compute_budget_instructions(
            self._config.compute_unit_price,
            self._config.compute_units,
        )

        if in_account.needs_creation:
            instructions.append(in_account.instruction)
        if out_account.needs_creation:
            instructions.append(out_account.instruction)

        in_address = Pubkey.from_string(in_account.address)
        out_address = Pubkey.from_string(out_account.address)

        if in_account.balance < amount_in:
            if not token_in.is_native:
                raise InsufficientBalance.token_balance(str(token_in), in_account.balance, amount_in)

            top_up = amount_in - in_account.balance
            logger.info(f"Wrapping {top_up} lamports into {in_account.address}")
            instructions.append(build_transfer_instruction(owner_pubkey, in_address, top_up))
            instructions.append(build_sync_native_instruction(in_address))

        pool = self._catalog.find_pool(token_in.mint, token_out.mint)
        if pool is None:
            raise PoolNotFound.for_pair(token_in.mint, token_out.mint)

        if pool.is_base(token_in.mint):
            direction = SwapDirection.BASE_IN
            swap_ix = build_swap_base_in_instruction(
                pool, in_address, out_address, owner_pubkey, amount_in, min_amount_out
            )
        else:
            direction = SwapDirection.BASE_OUT
            swap_ix = build_swap_base_out_instruction(
                pool, in_address, out_address, owner_pubkey, amount_in, min_amount_out
            )
        logger.info(
            f"Swapping {amount_in} {token_in} for at least {min_amount_out} {token_out} "
            f"via pool {pool.id} ({direction.value})"
        )
        instructions.append(swap_ix)

        if token_out.is_native:
            instructions.append(
                build_close_account_instruction(out_address, owner_pubkey, owner_pubkey)
            )

        return SwapPlan(
            instructions=instructions,
            token_in_account=in_account,
            token_out_account=out_account,
            pool=pool,
            direction=direction,
        )
