"""
Error definitions for Raydium Swap
"""

from .exceptions import (
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

__all__ = [
    "ErrorCode",
    "RaydiumSwapError",
    "RpcError",
    "AccountResolutionError",
    "InsufficientBalance",
    "PoolNotFound",
    "TransactionError",
    "SubmissionFailure",
    "UnexpectedResponseShape",
    "SignerError",
    "ConfigurationError",
    "PoolCatalogError",
]
