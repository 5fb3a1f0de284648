"""
Test Errors Module

Tests for raydium_swap.errors package.
"""

import sys
from pathlib import Path

# Add parent to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from raydium_swap.errors import (
    ErrorCode,
    RaydiumSwapError,
    RpcError,
    AccountResolutionError,
    InsufficientBalance,
    PoolNotFound,
    TransactionError,
    SubmissionFailure,
    UnexpectedResponseShape,
    SignerError,
    ConfigurationError,
    PoolCatalogError,
)

USDC = "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"
WSOL = "So11111111111111111111111111111111111111112"


def test_error_code():
    """Test ErrorCode enum"""
    print("Testing ErrorCode...")

    assert ErrorCode.RPC_CONNECTION_FAILED.value == "1001"
    assert ErrorCode.ACCOUNT_RESOLUTION_FAILED.value == "1005"
    assert ErrorCode.TX_UNEXPECTED_RESPONSE.value == "2007"
    assert ErrorCode.POOL_NOT_FOUND.value == "4001"
    assert ErrorCode.CATALOG_INVALID.value == "9003"

    # Codes are unique
    values = [code.value for code in ErrorCode]
    assert len(values) == len(set(values))

    print("  ErrorCode: PASSED")


def test_base_error():
    """Test RaydiumSwapError base class"""
    print("Testing RaydiumSwapError...")

    error = RaydiumSwapError(
        message="Test error",
        code=ErrorCode.RPC_CONNECTION_FAILED,
        recoverable=True,
    )

    # __str__ returns "[code] message" format
    assert str(error) == "[1001] Test error"
    assert error.should_retry
    assert error.details == {}
    assert "RaydiumSwapError" in repr(error)

    print("  RaydiumSwapError: PASSED")


def test_rpc_error():
    """Test RpcError constructors"""
    print("Testing RpcError...")

    error1 = RpcError.connection_failed("https://rpc.example.com")
    assert error1.code == ErrorCode.RPC_CONNECTION_FAILED
    assert error1.recoverable
    assert error1.endpoint == "https://rpc.example.com"

    error2 = RpcError.timeout("https://rpc.example.com", 30.0)
    assert error2.code == ErrorCode.RPC_TIMEOUT
    assert "30.0s" in str(error2)

    error3 = RpcError.rate_limited("https://rpc.example.com")
    assert error3.code == ErrorCode.RPC_RATE_LIMITED

    cause = ValueError("Expecting value")
    error4 = RpcError.invalid_response("https://rpc.example.com", cause)
    assert error4.code == ErrorCode.RPC_INVALID_RESPONSE
    assert error4.original_error is cause

    print("  RpcError: PASSED")


def test_account_resolution_error():
    """Test AccountResolutionError carries mint and address"""
    cause = RpcError("node unavailable")
    error = AccountResolutionError.query_failed(USDC, "Ata111", cause)

    assert error.code == ErrorCode.ACCOUNT_RESOLUTION_FAILED
    assert not error.recoverable
    assert error.mint == USDC
    assert error.address == "Ata111"
    assert error.original_error is cause
    assert USDC in str(error)


def test_insufficient_balance():
    """Test InsufficientBalance message names the amounts"""
    print("Testing InsufficientBalance...")

    error = InsufficientBalance.token_balance("USDC", have=5, required=10)

    assert error.code == ErrorCode.TX_INSUFFICIENT_FUNDS
    assert error.have == 5
    assert error.required == 10
    assert "Have 5 Required 10" in str(error)
    assert error.details["token"] == "USDC"

    print("  InsufficientBalance: PASSED")


def test_pool_not_found():
    """Test PoolNotFound message names both tokens"""
    error = PoolNotFound.for_pair(USDC, WSOL)

    assert error.code == ErrorCode.POOL_NOT_FOUND
    assert error.token_in == USDC
    assert error.token_out == WSOL
    assert str(error) == f"[4001] No pool found for token_in {USDC} and token_out {WSOL}"


def test_transaction_errors():
    """Test TransactionError family"""
    print("Testing TransactionError...")

    sim = TransactionError.simulation_failed("custom program error: 0x1e", logs=["log1"])
    assert sim.code == ErrorCode.TX_SIMULATION_FAILED
    assert sim.logs == ["log1"]

    failed = TransactionError.confirmation_failed("sig123", "InstructionError")
    assert failed.code == ErrorCode.TX_CONFIRMATION_FAILED
    assert failed.signature == "sig123"

    timeout = TransactionError.confirmation_timeout("sig123", 60.0)
    assert timeout.code == ErrorCode.TX_CONFIRMATION_TIMEOUT
    assert "sig123" in str(timeout)

    cause = RpcError("connection reset")
    submission = SubmissionFailure.send_failed(cause)
    assert isinstance(submission, TransactionError)
    assert submission.code == ErrorCode.TX_SEND_FAILED
    assert submission.original_error is cause
    assert str(submission).startswith("[2002] Failed to send transaction")

    shape = UnexpectedResponseShape("Simulation")
    assert isinstance(shape, TransactionError)
    assert shape.shape == "Simulation"
    assert shape.details["shape"] == "Simulation"
    assert str(shape) == "[2007] Solana rpc client returned wrong response type. Received: Simulation"

    print("  TransactionError: PASSED")


def test_signer_and_config_errors():
    """Test SignerError and ConfigurationError constructors"""
    assert SignerError.not_configured().code == ErrorCode.SIGNER_NOT_CONFIGURED
    assert SignerError.failed("bad key").code == ErrorCode.SIGNER_FAILED

    assert ConfigurationError.missing("RPC endpoint").code == ErrorCode.CONFIG_MISSING
    invalid = ConfigurationError.invalid("amount_in", "must be greater than zero")
    assert invalid.code == ErrorCode.CONFIG_INVALID
    assert "amount_in" in str(invalid)


def test_pool_catalog_error():
    """Test PoolCatalogError is a ConfigurationError"""
    unreadable = PoolCatalogError.unreadable("pools.json", FileNotFoundError("pools.json"))
    assert isinstance(unreadable, ConfigurationError)
    assert unreadable.code == ErrorCode.CATALOG_INVALID
    assert unreadable.source == "pools.json"

    malformed = PoolCatalogError.malformed("pools.json", "'official' is missing or not a list")
    assert malformed.details["source"] == "pools.json"
    assert "official" in str(malformed)


def test_inheritance():
    """Test every error derives from RaydiumSwapError"""
    for cls in (
        RpcError,
        AccountResolutionError,
        InsufficientBalance,
        PoolNotFound,
        TransactionError,
        SubmissionFailure,
        UnexpectedResponseShape,
        SignerError,
        ConfigurationError,
        PoolCatalogError,
    ):
        assert issubclass(cls, RaydiumSwapError), cls.__name__
