"""
Raydium Swap - single-pool swaps against Raydium AMM v4 on Solana

Provides:
- SwapClient: plan and submit a swap in one call
- SwapPlanner: ordered instruction list for one swap
- PoolCatalog: pool lookup in the Raydium liquidity JSON
- TxBuilder: transaction assembly and submission
"""

__version__ = "0.1.0"

from .client import SwapClient
from .modules import AccountResolver, SwapPlanner, SwapPlannerConfig
from .protocols.raydium import PoolCatalog
from .infra import TxBuilder, TxBuilderConfig, RpcClient, RpcClientConfig
from .types import (
    TokenHandle,
    AccountInfo,
    PoolRecord,
    SwapPlan,
    SwapDirection,
    TxResult,
    TxStatus,
)
from .errors import (
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
from .config import config, reload_config, setup_logging

__all__ = [
    "__version__",
    # Client
    "SwapClient",
    # Modules
    "AccountResolver",
    "SwapPlanner",
    "SwapPlannerConfig",
    "PoolCatalog",
    # Infra
    "TxBuilder",
    "TxBuilderConfig",
    "RpcClient",
    "RpcClientConfig",
    # Types
    "TokenHandle",
    "AccountInfo",
    "PoolRecord",
    "SwapPlan",
    "SwapDirection",
    "TxResult",
    "TxStatus",
    # Errors
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
    # Config
    "config",
    "reload_config",
    "setup_logging",
]
