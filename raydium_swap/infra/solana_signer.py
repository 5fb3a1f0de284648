"""
Transaction signing

The planner only needs the owner's public key and the submitter only
needs to sign a built transaction; both go through the Signer protocol.
"""

from __future__ import annotations

import json
import logging
import os
from typing import Optional, Protocol, Tuple, runtime_checkable

from solders.keypair import Keypair
from solders.message import to_bytes_versioned
from solders.signature import Signature
from solders.transaction import VersionedTransaction

from ..errors import SignerError, ConfigurationError
from ..config import config as global_config

logger = logging.getLogger(__name__)


@runtime_checkable
class Signer(Protocol):
    """Swap owner identity plus the ability to sign its transactions"""

    @property
    def pubkey(self) -> str:
        ...

    def sign_transaction(self, unsigned_tx: bytes) -> Tuple[bytes, str]:
        """Return (signed_tx_bytes, signature_base58)"""
        ...


class LocalSigner:
    """
    Signer backed by an in-memory Solana keypair

    Usage:
        signer = LocalSigner.from_file("~/.config/solana/id.json")
    """

    def __init__(self, keypair: Keypair):
        self._keypair = keypair

    @property
    def pubkey(self) -> str:
        return str(self._keypair.pubkey())

    def sign_transaction(self, unsigned_tx: bytes) -> Tuple[bytes, str]:
        """
        Fill this wallet's slot in a serialized v0 transaction

        Raises:
            SignerError: bytes do not parse, or this wallet is not a required signer
        """
        try:
            message = VersionedTransaction.from_bytes(unsigned_tx).message
        except ValueError as e:
            raise SignerError.failed(f"cannot parse transaction: {e}")

        required = list(message.account_keys[:message.header.num_required_signatures])
        try:
            slot = required.index(self._keypair.pubkey())
        except ValueError:
            raise SignerError.failed(
                f"Wallet {self.pubkey} is not a required signer "
                f"(expected one of {[str(k) for k in required]})"
            )

        signature = self._keypair.sign_message(to_bytes_versioned(message))
        signatures = [Signature.default()] * len(required)
        signatures[slot] = signature

        return bytes(VersionedTransaction.populate(message, signatures)), str(signature)

    @classmethod
    def from_bytes(cls, secret_key: bytes) -> "LocalSigner":
        """64-byte secret key (seed followed by public key)"""
        try:
            return cls(Keypair.from_bytes(secret_key))
        except (ValueError, TypeError) as e:
            raise ConfigurationError.invalid("keypair", str(e))

    @classmethod
    def from_file(cls, path: str) -> "LocalSigner":
        """
        Load a keypair file

        Accepts the Solana CLI JSON array format or the raw 64 bytes.
        """
        path = os.path.expanduser(path)
        try:
            with open(path, "rb") as f:
                content = f.read()
        except OSError as e:
            raise ConfigurationError.invalid("keypair_file", f"Cannot read keypair file {path}: {e}")

        try:
            data = json.loads(content.decode("utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError):
            data = None

        if isinstance(data, list):
            try:
                return cls.from_bytes(bytes(data))
            except (ValueError, TypeError) as e:
                raise ConfigurationError.invalid("keypair_file", f"Bad key bytes in {path}: {e}")
        if len(content) == 64:
            return cls.from_bytes(content)
        raise ConfigurationError.invalid("keypair_file", f"Cannot parse keypair file: {path}")


def create_signer(
    keypair: Optional[Keypair] = None,
    keypair_path: Optional[str] = None,
) -> Signer:
    """
    Pick the signer for a SwapClient

    An explicit keypair wins over keypair_path, which wins over
    SOLANA_KEYPAIR_PATH.

    Raises:
        SignerError: nothing configured
    """
    if keypair is not None:
        return LocalSigner(keypair)
    if keypair_path is not None:
        return LocalSigner.from_file(keypair_path)

    env_path = global_config.signer.keypair_path
    if env_path and os.path.isfile(os.path.expanduser(env_path)):
        logger.debug(f"Loading keypair from SOLANA_KEYPAIR_PATH={env_path}")
        return LocalSigner.from_file(env_path)

    raise SignerError.not_configured()
