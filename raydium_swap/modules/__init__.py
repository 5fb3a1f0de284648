"""
Functional modules for SwapClient

Provides:
- AccountResolver: Associated token account lookup
- SwapPlanner: Swap instruction sequencing
"""

from .accounts import AccountResolver
from .swap import SwapPlanner, SwapPlannerConfig

__all__ = [
    "AccountResolver",
    "SwapPlanner",
    "SwapPlannerConfig",
]
