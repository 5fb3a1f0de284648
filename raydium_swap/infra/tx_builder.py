"""
Transaction builder and sender

Provides utilities for:
- Compiling instruction lists into versioned transactions
- Signing and submitting them
- Interpreting the submission response and waiting for confirmation
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List, Optional

from solders.hash import Hash
from solders.instruction import Instruction
from solders.message import MessageV0
from solders.pubkey import Pubkey
from solders.signature import Signature
from solders.transaction import VersionedTransaction

from .rpc import RpcClient
from .solana_signer import Signer
from ..types import TxResult
from ..errors import (
    RpcError,
    TransactionError,
    SubmissionFailure,
    UnexpectedResponseShape,
)
from ..config import config as global_config

logger = logging.getLogger(__name__)

# Keys only present in a simulateTransaction result
_SIMULATION_KEYS = frozenset({"err", "logs", "unitsConsumed", "accounts", "returnData"})


@dataclass
class TxBuilderConfig:
    """
    Transaction builder runtime configuration

    Per-builder overrides; unset values fall back to the global
    config (raydium_swap.config.TxConfig).

    Usage:
        config = TxBuilderConfig(skip_preflight=True, wait_confirmation=False)
        builder = TxBuilder(rpc, signer, config=config)
    """
    skip_preflight: bool = None
    preflight_commitment: str = None
    wait_confirmation: bool = None
    confirmation_timeout: float = None

    def __post_init__(self):
        """Apply defaults from global config for any unset values"""
        if self.skip_preflight is None:
            self.skip_preflight = global_config.tx.skip_preflight
        if self.preflight_commitment is None:
            self.preflight_commitment = global_config.tx.preflight_commitment
        if self.wait_confirmation is None:
            self.wait_confirmation = global_config.tx.wait_confirmation
        if self.confirmation_timeout is None:
            self.confirmation_timeout = global_config.tx.confirmation_timeout


def response_shape(result: Any) -> str:
    """
    Name the shape of a sendTransaction result

    Returns "Signature" for the only accepted shape; anything else is
    named so the caller can report the protocol mismatch.
    """
    if isinstance(result, str):
        try:
            Signature.from_string(result)
        except ValueError:
            return "String"
        return "Signature"
    if isinstance(result, dict):
        value = result.get("value", result)
        if isinstance(value, dict) and _SIMULATION_KEYS & value.keys():
            return "Simulation"
        return "Transaction"
    if isinstance(result, (list, bytes, bytearray)):
        return "Transaction"
    if result is None:
        return "Empty"
    return type(result).__name__


class TxBuilder:
    """
    Transaction assembler and submitter

    Sends exactly once per call; retrying a failed swap means planning
    a fresh transaction.

    Usage:
        builder = TxBuilder(rpc, signer)
        signature = builder.submit(instructions)
    """

    def __init__(
        self,
        rpc: RpcClient,
        signer: Signer,
        config: Optional[TxBuilderConfig] = None,
    ):
        """
        Initialize transaction builder

        Args:
            rpc: RPC client
            signer: Transaction signer, also the fee payer
            config: Transaction configuration
        """
        self._rpc = rpc
        self._signer = signer
        self._config = config or TxBuilderConfig()

    @property
    def pubkey(self) -> str:
        """Signer's public key"""
        return self._signer.pubkey

    def build(
        self,
        instructions: List[Instruction],
        recent_blockhash: Optional[str] = None,
    ) -> bytes:
        """
        Build unsigned versioned transaction

        Instructions are compiled as given; compute budget directives are
        expected to be part of the list already.

        Args:
            instructions: Ordered instructions
            recent_blockhash: Optional blockhash (fetched if not provided)

        Returns:
            Unsigned transaction bytes
        """
        if recent_blockhash is None:
            try:
                blockhash_info = self._rpc.get_latest_blockhash()
            except RpcError as e:
                raise SubmissionFailure.send_failed(e)
            recent_blockhash = blockhash_info.get("blockhash")

        if not recent_blockhash:
            raise SubmissionFailure("Failed to get recent blockhash")

        message = MessageV0.try_compile(
            Pubkey.from_string(self.pubkey),
            instructions,
            [],  # Address lookup tables
            Hash.from_string(recent_blockhash),
        )

        # Placeholder signatures sized to the message header
        num_signers = message.header.num_required_signatures
        tx = VersionedTransaction.populate(message, [Signature.default()] * num_signers)
        return bytes(tx)

    def send(self, signed_tx: bytes) -> TxResult:
        """
        Send signed transaction once

        Returns:
            TxResult with status and signature

        Raises:
            SubmissionFailure: transport failure
            UnexpectedResponseShape: node answered with something other than a signature
        """
        try:
            result = self._rpc.send_transaction(
                signed_tx,
                skip_preflight=self._config.skip_preflight,
                preflight_commitment=self._config.preflight_commitment,
            )
        except RpcError as e:
            logger.error(f"Failed to send transaction: {e}")
            raise SubmissionFailure.send_failed(e)

        shape = response_shape(result)
        if shape != "Signature":
            raise UnexpectedResponseShape(shape)

        signature = result
        logger.info(f"Transaction sent: {signature}")

        if not self._config.wait_confirmation:
            return TxResult.pending(signature)

        confirmed = self._rpc.confirm_transaction(
            signature,
            timeout_seconds=self._config.confirmation_timeout,
        )
        if confirmed is True:
            return TxResult.success(signature)
        if confirmed is False:
            return TxResult.failed(
                "Transaction failed on-chain (check explorer for details)",
                signature=signature,
            )
        return TxResult.timeout(signature)

    def submit(self, instructions: List[Instruction]) -> str:
        """
        Build, sign and send transaction in one call

        Args:
            instructions: Ordered instructions

        Returns:
            Transaction signature (base58)

        Raises:
            SubmissionFailure, UnexpectedResponseShape, TransactionError
        """
        unsigned_tx = self.build(instructions)
        signed_tx, signature = self._signer.sign_transaction(unsigned_tx)
        logger.debug(f"Signed transaction {signature} with {len(instructions)} instructions")

        result = self.send(signed_tx)
        if result.is_failed:
            raise TransactionError.confirmation_failed(result.signature, result.error)
        if result.is_timeout:
            raise TransactionError.confirmation_timeout(
                result.signature, self._config.confirmation_timeout
            )
        return result.signature

    def simulate(self, instructions: List[Instruction]) -> dict:
        """
        Simulate an instruction list without signing

        Returns:
            Simulation value (err, logs, unitsConsumed)

        Raises:
            TransactionError: simulation reported an error
        """
        unsigned_tx = self.build(instructions)
        sim_result = self._rpc.simulate_transaction(unsigned_tx) or {}
        value = sim_result.get("value", {}) or {}
        if value.get("err"):
            raise TransactionError.simulation_failed(str(value["err"]), value.get("logs", []))
        return value
