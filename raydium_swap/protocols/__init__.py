"""
Protocol integrations

- raydium: AMM v4 pool catalog and instruction encoders
"""

from .raydium import PoolCatalog

__all__ = [
    "PoolCatalog",
]
