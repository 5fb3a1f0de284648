"""
Test Types Module

Tests for raydium_swap.types package.
"""

import sys
from pathlib import Path

# Add parent to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from raydium_swap.types import (
    AccountInfo,
    SwapDirection,
    SwapPlan,
    TokenHandle,
    TxResult,
    TxStatus,
    WRAPPED_SOL,
    WRAPPED_SOL_MINT,
    get_token_symbol,
    resolve_token_mint,
)

USDC_MINT = "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"


def test_token_handle_resolve():
    """Test TokenHandle from symbols and mints"""
    print("Testing TokenHandle...")

    sol = TokenHandle.resolve("sol")
    assert sol.mint == WRAPPED_SOL_MINT
    assert sol.is_native
    assert sol == WRAPPED_SOL

    usdc = TokenHandle.resolve("USDC")
    assert usdc.mint == USDC_MINT
    assert usdc.symbol == "USDC"
    assert not usdc.is_native
    assert str(usdc) == "USDC"

    by_mint = TokenHandle.resolve(USDC_MINT)
    assert by_mint == usdc

    unknown = TokenHandle("7xKXtg2CW87d97TXJSDpbD5jBkheTqA83TZRuJosgAsU")
    assert str(unknown) == unknown.mint

    print("  TokenHandle: PASSED")


def test_token_registry():
    """Test symbol/mint lookups"""
    assert resolve_token_mint(" usdc ") == USDC_MINT
    assert resolve_token_mint("WSOL") == WRAPPED_SOL_MINT
    assert get_token_symbol(WRAPPED_SOL_MINT) == "SOL"
    assert get_token_symbol("unknown") is None


def test_account_info():
    """Test AccountInfo creation flag"""
    existing = AccountInfo(address="Ata1", balance=100)
    assert not existing.needs_creation

    missing = AccountInfo(address="Ata2", balance=0, instruction=object())
    assert missing.needs_creation
    assert missing.balance == 0


def test_swap_plan():
    """Test SwapPlan defaults and length"""
    plan = SwapPlan()
    assert len(plan) == 0
    assert plan.direction == SwapDirection.BASE_IN

    plan.instructions.extend(["a", "b"])
    assert len(plan) == 2
    assert len(SwapPlan()) == 0
    assert SwapDirection.BASE_OUT.value == "base_out"


def test_tx_result():
    """Test TxResult constructors"""
    print("Testing TxResult...")

    ok = TxResult.success("sig123")
    assert ok.is_success and not ok.is_failed
    assert ok.signature == "sig123"

    pending = TxResult.pending("sig456")
    assert pending.status == TxStatus.PENDING
    assert not pending.is_success

    failed = TxResult.failed("InstructionError", signature="sig789")
    assert failed.is_failed
    assert failed.error == "InstructionError"

    timeout = TxResult.timeout("sigabc")
    assert timeout.is_timeout
    assert "timeout" in timeout.error

    print("  TxResult: PASSED")


def test_single_wrapped_sol_constant():
    """Test the registry and the instruction constants share one mint"""
    from raydium_swap.protocols.raydium import constants

    assert constants.WRAPPED_SOL_MINT is WRAPPED_SOL_MINT
