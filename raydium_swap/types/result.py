"""
Result type definitions for transactions
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class TxStatus(Enum):
    """Transaction status"""
    SUCCESS = "success"
    FAILED = "failed"
    TIMEOUT = "timeout"
    PENDING = "pending"


@dataclass
class TxResult:
    """
    Transaction submission result

    Attributes:
        status: Transaction status
        signature: Transaction signature (base58)
        error: Error message if failed
    """
    status: TxStatus
    signature: Optional[str] = None
    error: Optional[str] = None

    @property
    def is_success(self) -> bool:
        return self.status == TxStatus.SUCCESS

    @property
    def is_failed(self) -> bool:
        return self.status == TxStatus.FAILED

    @property
    def is_timeout(self) -> bool:
        return self.status == TxStatus.TIMEOUT

    @classmethod
    def success(cls, signature: str) -> "TxResult":
        return cls(status=TxStatus.SUCCESS, signature=signature)

    @classmethod
    def pending(cls, signature: str) -> "TxResult":
        """Sent but not waited on"""
        return cls(status=TxStatus.PENDING, signature=signature)

    @classmethod
    def failed(cls, error: str, signature: str = None) -> "TxResult":
        return cls(status=TxStatus.FAILED, signature=signature, error=error)

    @classmethod
    def timeout(cls, signature: str = None) -> "TxResult":
        return cls(
            status=TxStatus.TIMEOUT,
            signature=signature,
            error="Transaction confirmation timeout",
        )

    def __str__(self) -> str:
        if self.is_success:
            sig_display = f"{self.signature[:16]}..." if self.signature else "no signature"
            return f"TxResult(SUCCESS, {sig_display})"
        return f"TxResult({self.status.value}, error={self.error})"
