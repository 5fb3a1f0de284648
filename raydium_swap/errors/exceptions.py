"""
Exception definitions for Raydium Swap
"""

from enum import Enum
from typing import Optional


class ErrorCode(Enum):
    """
    Unified error codes for swap operations

    1xxx - RPC / account query errors
    2xxx - Transaction errors
    4xxx - Pool errors
    6xxx - Signer errors
    9xxx - Configuration errors
    """
    # RPC errors (recoverable)
    RPC_CONNECTION_FAILED = "1001"
    RPC_TIMEOUT = "1002"
    RPC_RATE_LIMITED = "1003"
    RPC_INVALID_RESPONSE = "1004"
    ACCOUNT_RESOLUTION_FAILED = "1005"

    # Transaction errors
    TX_SIMULATION_FAILED = "2001"
    TX_SEND_FAILED = "2002"
    TX_CONFIRMATION_FAILED = "2003"
    TX_INSUFFICIENT_FUNDS = "2004"
    TX_INVALID_BLOCKHASH = "2005"
    TX_CONFIRMATION_TIMEOUT = "2006"
    TX_UNEXPECTED_RESPONSE = "2007"

    # Pool errors
    POOL_NOT_FOUND = "4001"

    # Signer errors
    SIGNER_NOT_CONFIGURED = "6001"
    SIGNER_FAILED = "6002"

    # Configuration errors
    CONFIG_INVALID = "9001"
    CONFIG_MISSING = "9002"
    CATALOG_INVALID = "9003"


class RaydiumSwapError(Exception):
    """
    Base exception for all swap errors

    Attributes:
        message: Human-readable error message
        code: Error code for programmatic handling
        recoverable: Whether the error might succeed on retry
        original_error: The underlying exception if any
        details: Additional error context
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode,
        recoverable: bool = False,
        original_error: Optional[Exception] = None,
        details: Optional[dict] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.recoverable = recoverable
        self.original_error = original_error
        self.details = details or {}

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.message}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code.value}, message={self.message!r})"

    @property
    def should_retry(self) -> bool:
        """Indicate if the whole operation may succeed when attempted again"""
        return self.recoverable


class RpcError(RaydiumSwapError):
    """
    RPC-related errors - typically recoverable

    Raised when:
    - Connection to RPC endpoint fails
    - Request times out
    - Rate limit is hit
    - The node answers with a JSON-RPC error
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.RPC_CONNECTION_FAILED,
        original_error: Optional[Exception] = None,
        endpoint: Optional[str] = None,
    ):
        super().__init__(
            message,
            code,
            recoverable=True,
            original_error=original_error,
            details={"endpoint": endpoint} if endpoint else None,
        )
        self.endpoint = endpoint

    @classmethod
    def connection_failed(cls, endpoint: str, error: Exception = None) -> "RpcError":
        return cls(
            f"Failed to connect to RPC endpoint: {endpoint}",
            ErrorCode.RPC_CONNECTION_FAILED,
            original_error=error,
            endpoint=endpoint,
        )

    @classmethod
    def timeout(cls, endpoint: str, timeout_seconds: float) -> "RpcError":
        return cls(
            f"RPC request timed out after {timeout_seconds}s",
            ErrorCode.RPC_TIMEOUT,
            endpoint=endpoint,
        )

    @classmethod
    def rate_limited(cls, endpoint: str) -> "RpcError":
        return cls(
            "RPC rate limit exceeded",
            ErrorCode.RPC_RATE_LIMITED,
            endpoint=endpoint,
        )

    @classmethod
    def invalid_response(cls, endpoint: str, error: Exception = None) -> "RpcError":
        return cls(
            f"Invalid RPC response from {endpoint}: {error}",
            ErrorCode.RPC_INVALID_RESPONSE,
            original_error=error,
            endpoint=endpoint,
        )


class AccountResolutionError(RaydiumSwapError):
    """
    Associated token account could not be resolved

    Raised when the account query fails for any reason other than
    the account being absent or owned by another program.
    """

    def __init__(
        self,
        message: str,
        mint: Optional[str] = None,
        address: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        super().__init__(
            message,
            ErrorCode.ACCOUNT_RESOLUTION_FAILED,
            recoverable=False,
            original_error=original_error,
            details={"mint": mint, "address": address},
        )
        self.mint = mint
        self.address = address

    @classmethod
    def query_failed(cls, mint: str, address: str, error: Exception) -> "AccountResolutionError":
        return cls(
            f"Error retrieving token account {address} for mint {mint}: {error}",
            mint=mint,
            address=address,
            original_error=error,
        )


class InsufficientBalance(RaydiumSwapError):
    """
    Input token balance too low - not recoverable without deposit

    Only raised for SPL inputs; wrapped SOL inputs are topped up instead.
    """

    def __init__(
        self,
        message: str,
        token: Optional[str] = None,
        have: int = 0,
        required: int = 0,
    ):
        super().__init__(
            message,
            ErrorCode.TX_INSUFFICIENT_FUNDS,
            recoverable=False,
            details={
                "token": token,
                "have": have,
                "required": required,
            },
        )
        self.token = token
        self.have = have
        self.required = required

    @classmethod
    def token_balance(cls, token: str, have: int, required: int) -> "InsufficientBalance":
        return cls(
            f"Insufficient token_in balance for {token}. Have {have} Required {required}",
            token=token,
            have=have,
            required=required,
        )


class PoolNotFound(RaydiumSwapError):
    """
    No catalog pool trades the requested pair - not recoverable
    """

    def __init__(
        self,
        message: str,
        token_in: Optional[str] = None,
        token_out: Optional[str] = None,
    ):
        super().__init__(
            message,
            ErrorCode.POOL_NOT_FOUND,
            recoverable=False,
            details={"token_in": token_in, "token_out": token_out},
        )
        self.token_in = token_in
        self.token_out = token_out

    @classmethod
    def for_pair(cls, token_in: str, token_out: str) -> "PoolNotFound":
        return cls(
            f"No pool found for token_in {token_in} and token_out {token_out}",
            token_in=token_in,
            token_out=token_out,
        )


class TransactionError(RaydiumSwapError):
    """
    Transaction execution errors

    Raised when:
    - Transaction simulation fails
    - Transaction send fails
    - Confirmation fails
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.TX_SEND_FAILED,
        signature: Optional[str] = None,
        logs: Optional[list] = None,
        recoverable: bool = False,
        original_error: Optional[Exception] = None,
    ):
        super().__init__(
            message,
            code,
            recoverable=recoverable,
            original_error=original_error,
            details={"signature": signature, "logs": logs},
        )
        self.signature = signature
        self.logs = logs or []

    @classmethod
    def simulation_failed(cls, error: str, logs: list = None) -> "TransactionError":
        return cls(
            f"Transaction simulation failed: {error}",
            ErrorCode.TX_SIMULATION_FAILED,
            logs=logs,
        )

    @classmethod
    def confirmation_failed(cls, signature: str, error: str) -> "TransactionError":
        return cls(
            f"Transaction confirmation failed: {error}",
            ErrorCode.TX_CONFIRMATION_FAILED,
            signature=signature,
        )

    @classmethod
    def confirmation_timeout(cls, signature: str, timeout_seconds: float) -> "TransactionError":
        # Status unknown: the caller must check the signature before trying again
        return cls(
            f"Transaction {signature} not confirmed after {timeout_seconds}s",
            ErrorCode.TX_CONFIRMATION_TIMEOUT,
            signature=signature,
        )


class SubmissionFailure(TransactionError):
    """
    Transport-level failure while submitting a signed transaction
    """

    def __init__(self, message: str, original_error: Optional[Exception] = None):
        super().__init__(
            message,
            ErrorCode.TX_SEND_FAILED,
            original_error=original_error,
        )

    @classmethod
    def send_failed(cls, error: Exception) -> "SubmissionFailure":
        return cls(f"Failed to send transaction: {error}", original_error=error)


class UnexpectedResponseShape(TransactionError):
    """
    The node answered sendTransaction with something other than a signature
    """

    def __init__(self, shape: str):
        super().__init__(
            f"Solana rpc client returned wrong response type. Received: {shape}",
            ErrorCode.TX_UNEXPECTED_RESPONSE,
        )
        self.shape = shape
        self.details["shape"] = shape


class SignerError(RaydiumSwapError):
    """
    Signing-related errors

    Raised when:
    - No signer configured
    - Signing operation fails
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.SIGNER_FAILED,
    ):
        super().__init__(message, code, recoverable=False)

    @classmethod
    def not_configured(cls) -> "SignerError":
        return cls(
            "No signer configured. Provide a keypair or set SOLANA_KEYPAIR_PATH.",
            ErrorCode.SIGNER_NOT_CONFIGURED,
        )

    @classmethod
    def failed(cls, reason: str) -> "SignerError":
        return cls(f"Signing failed: {reason}", ErrorCode.SIGNER_FAILED)


class ConfigurationError(RaydiumSwapError):
    """
    Configuration-related errors

    Raised when:
    - Required configuration is missing
    - Configuration or call arguments are invalid
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.CONFIG_INVALID,
        original_error: Optional[Exception] = None,
    ):
        super().__init__(message, code, recoverable=False, original_error=original_error)

    @classmethod
    def missing(cls, param: str) -> "ConfigurationError":
        return cls(f"Missing required configuration: {param}", ErrorCode.CONFIG_MISSING)

    @classmethod
    def invalid(cls, param: str, reason: str) -> "ConfigurationError":
        return cls(f"Invalid configuration '{param}': {reason}", ErrorCode.CONFIG_INVALID)


class PoolCatalogError(ConfigurationError):
    """
    Pool catalog cannot be read or parsed

    Distinct from PoolNotFound: a broken catalog is a setup problem,
    a missing pair is a valid negative answer.
    """

    def __init__(self, message: str, source: Optional[str] = None, original_error: Optional[Exception] = None):
        super().__init__(message, ErrorCode.CATALOG_INVALID, original_error=original_error)
        self.source = source
        self.details["source"] = source

    @classmethod
    def unreadable(cls, source: str, error: Exception) -> "PoolCatalogError":
        return cls(f"Cannot read pool catalog {source}: {error}", source=source, original_error=error)

    @classmethod
    def malformed(cls, source: str, reason: str) -> "PoolCatalogError":
        return cls(f"Malformed pool catalog {source}: {reason}", source=source)
