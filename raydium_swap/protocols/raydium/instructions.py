"""
Raydium AMM v4 Instruction Builders

Encoders for every instruction a single-pool swap transaction can carry:
- Compute budget directives
- Associated token account creation and closing
- Native SOL transfer and sync for wrapped SOL
- swap_base_in / swap_base_out against an AMM v4 pool
"""

import struct
from typing import List, Optional

from solders.compute_budget import set_compute_unit_limit, set_compute_unit_price
from solders.instruction import AccountMeta, Instruction
from solders.pubkey import Pubkey
from solders.system_program import TransferParams, transfer

from .constants import (
    AMM_V4_PROGRAM_ID,
    TOKEN_PROGRAM_ID,
    ASSOCIATED_TOKEN_PROGRAM_ID,
    SYSTEM_PROGRAM_ID,
    SWAP_BASE_IN,
    SWAP_BASE_OUT,
    CLOSE_ACCOUNT,
    SYNC_NATIVE,
    CREATE_ATA_IDEMPOTENT,
)
from ...types import PoolRecord


def get_associated_token_address(
    owner: Pubkey,
    mint: Pubkey,
    token_program: Optional[Pubkey] = None,
) -> Pubkey:
    """
    Get associated token account address.

    Args:
        owner: Wallet owner
        mint: Token mint
        token_program: Token program (defaults to Tokenkeg)

    Returns:
        ATA address
    """
    ata_program = Pubkey.from_string(ASSOCIATED_TOKEN_PROGRAM_ID)
    if token_program is None:
        token_program = Pubkey.from_string(TOKEN_PROGRAM_ID)

    seeds = [
        bytes(owner),
        bytes(token_program),
        bytes(mint),
    ]

    address, _ = Pubkey.find_program_address(seeds, ata_program)
    return address


def build_create_ata_instruction(
    payer: Pubkey,
    owner: Pubkey,
    mint: Pubkey,
    token_program: Optional[Pubkey] = None,
) -> Instruction:
    """
    Build create_associated_token_account_idempotent instruction.

    Creates the ATA if it doesn't exist, or does nothing if it does.

    Args:
        payer: Fee payer
        owner: Account owner
        mint: Token mint
        token_program: Token program (defaults to Tokenkeg)
    """
    ata_program = Pubkey.from_string(ASSOCIATED_TOKEN_PROGRAM_ID)
    system_program = Pubkey.from_string(SYSTEM_PROGRAM_ID)

    if token_program is None:
        token_program = Pubkey.from_string(TOKEN_PROGRAM_ID)

    ata_address = get_associated_token_address(owner, mint, token_program)

    accounts = [
        AccountMeta(payer, is_signer=True, is_writable=True),
        AccountMeta(ata_address, is_signer=False, is_writable=True),
        AccountMeta(owner, is_signer=False, is_writable=False),
        AccountMeta(mint, is_signer=False, is_writable=False),
        AccountMeta(system_program, is_signer=False, is_writable=False),
        AccountMeta(token_program, is_signer=False, is_writable=False),
    ]

    return Instruction(ata_program, bytes([CREATE_ATA_IDEMPOTENT]), accounts)


def build_compute_budget_instructions(
    unit_price: int,
    unit_limit: int,
) -> List[Instruction]:
    """
    Build compute budget directives: price first, then limit.

    Args:
        unit_price: Priority fee in micro-lamports per compute unit
        unit_limit: Compute unit cap for the transaction
    """
    return [
        set_compute_unit_price(unit_price),
        set_compute_unit_limit(unit_limit),
    ]


def build_transfer_instruction(
    source: Pubkey,
    destination: Pubkey,
    lamports: int,
) -> Instruction:
    """Build a native SOL transfer"""
    return transfer(
        TransferParams(
            from_pubkey=source,
            to_pubkey=destination,
            lamports=lamports,
        )
    )


def build_sync_native_instruction(
    account: Pubkey,
    token_program: Optional[Pubkey] = None,
) -> Instruction:
    """
    Build sync_native for a wrapped SOL account.

    Refreshes the token amount after lamports were transferred in.
    """
    if token_program is None:
        token_program = Pubkey.from_string(TOKEN_PROGRAM_ID)

    accounts = [
        AccountMeta(account, is_signer=False, is_writable=True),
    ]
    return Instruction(token_program, bytes([SYNC_NATIVE]), accounts)


def build_close_account_instruction(
    account: Pubkey,
    destination: Pubkey,
    owner: Pubkey,
    token_program: Optional[Pubkey] = None,
) -> Instruction:
    """
    Build close_account.

    Returns the account's lamports (for wrapped SOL, the whole balance)
    to destination.
    """
    if token_program is None:
        token_program = Pubkey.from_string(TOKEN_PROGRAM_ID)

    accounts = [
        AccountMeta(account, is_signer=False, is_writable=True),
        AccountMeta(destination, is_signer=False, is_writable=True),
        AccountMeta(owner, is_signer=True, is_writable=False),
    ]
    return Instruction(token_program, bytes([CLOSE_ACCOUNT]), accounts)


def _swap_accounts(
    pool: PoolRecord,
    user_source: Pubkey,
    user_destination: Pubkey,
    owner: Pubkey,
) -> List[AccountMeta]:
    """Account list shared by both swap variants"""
    return [
        AccountMeta(Pubkey.from_string(TOKEN_PROGRAM_ID), is_signer=False, is_writable=False),
        AccountMeta(pool.pubkey("id"), is_signer=False, is_writable=True),
        AccountMeta(pool.pubkey("authority"), is_signer=False, is_writable=False),
        AccountMeta(pool.pubkey("open_orders"), is_signer=False, is_writable=True),
        AccountMeta(pool.pubkey("target_orders"), is_signer=False, is_writable=True),
        AccountMeta(pool.pubkey("base_vault"), is_signer=False, is_writable=True),
        AccountMeta(pool.pubkey("quote_vault"), is_signer=False, is_writable=True),
        AccountMeta(pool.pubkey("market_program_id"), is_signer=False, is_writable=False),
        AccountMeta(pool.pubkey("market_id"), is_signer=False, is_writable=True),
        AccountMeta(pool.pubkey("market_bids"), is_signer=False, is_writable=True),
        AccountMeta(pool.pubkey("market_asks"), is_signer=False, is_writable=True),
        AccountMeta(pool.pubkey("market_event_queue"), is_signer=False, is_writable=True),
        AccountMeta(pool.pubkey("market_base_vault"), is_signer=False, is_writable=True),
        AccountMeta(pool.pubkey("market_quote_vault"), is_signer=False, is_writable=True),
        AccountMeta(pool.pubkey("market_authority"), is_signer=False, is_writable=False),
        AccountMeta(user_source, is_signer=False, is_writable=True),
        AccountMeta(user_destination, is_signer=False, is_writable=True),
        AccountMeta(owner, is_signer=True, is_writable=False),
    ]


def build_swap_base_in_instruction(
    pool: PoolRecord,
    user_source: Pubkey,
    user_destination: Pubkey,
    owner: Pubkey,
    amount_in: int,
    min_amount_out: int,
) -> Instruction:
    """
    Build swap_base_in: spend exactly amount_in, receive at least min_amount_out.

    Used when the input token is the pool's base mint.
    """
    data = struct.pack("<BQQ", SWAP_BASE_IN, amount_in, min_amount_out)
    return Instruction(
        Pubkey.from_string(AMM_V4_PROGRAM_ID),
        data,
        _swap_accounts(pool, user_source, user_destination, owner),
    )


def build_swap_base_out_instruction(
    pool: PoolRecord,
    user_source: Pubkey,
    user_destination: Pubkey,
    owner: Pubkey,
    max_amount_in: int,
    amount_out: int,
) -> Instruction:
    """
    Build swap_base_out: receive amount_out, spend at most max_amount_in.

    Used when the input token is the pool's quote mint.
    """
    data = struct.pack("<BQQ", SWAP_BASE_OUT, max_amount_in, amount_out)
    return Instruction(
        Pubkey.from_string(AMM_V4_PROGRAM_ID),
        data,
        _swap_accounts(pool, user_source, user_destination, owner),
    )
