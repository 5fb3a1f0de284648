"""
Infrastructure layer for Raydium Swap

Provides:
- RpcClient: HTTP RPC wrapper with retry logic
- Signer: Transaction signing abstraction (local keypair)
- TxBuilder: Transaction assembly and submission
"""

from .rpc import RpcClient, RpcClientConfig
from .solana_signer import (
    Signer,
    LocalSigner,
    create_signer,
)
from .tx_builder import TxBuilder, TxBuilderConfig, response_shape

__all__ = [
    "RpcClient",
    "RpcClientConfig",
    "Signer",
    "LocalSigner",
    "create_signer",
    "TxBuilder",
    "TxBuilderConfig",
    "response_shape",
]
