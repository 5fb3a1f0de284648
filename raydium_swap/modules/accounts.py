"""
Account Resolver

Finds the owner's associated token account for a mint, reads its
balance and proposes a creation instruction when it does not exist.
"""

import base64
import logging
import struct
from typing import Any, Dict, Optional, Union

from solders.pubkey import Pubkey

from ..infra import RpcClient
from ..types import AccountInfo, TokenHandle
from ..errors import RpcError, AccountResolutionError
from ..protocols.raydium.constants import TOKEN_PROGRAM_ID, TOKEN_ACCOUNT_AMOUNT_OFFSET
from ..protocols.raydium.instructions import (
    get_associated_token_address,
    build_create_ata_instruction,
)

logger = logging.getLogger(__name__)


def _parse_token_amount(account: Dict[str, Any]) -> int:
    """
    Read the raw token amount from a getAccountInfo value

    Handles both jsonParsed and base64 encodings.
    """
    data = account.get("data")

    if isinstance(data, dict):
        info = data.get("parsed", {}).get("info", {})
        amount = info.get("tokenAmount", {}).get("amount")
        if amount is None:
            raise ValueError("parsed account has no tokenAmount")
        return int(amount)

    if isinstance(data, list) and data:
        raw = base64.b64decode(data[0])
        (amount,) = struct.unpack_from("<Q", raw, TOKEN_ACCOUNT_AMOUNT_OFFSET)
        return amount

    raise ValueError(f"unsupported account data: {type(data).__name__}")


class AccountResolver:
    """
    Associated token account resolution

    Read-only: never sends anything, only proposes a create instruction
    for the caller to include.

    Usage:
        resolver = AccountResolver(rpc)
        info = resolver.resolve(usdc, owner)
        if info.needs_creation:
            instructions.append(info.instruction)
    """

    def __init__(self, rpc: RpcClient):
        self._rpc = rpc

    def resolve(self, token: Union[TokenHandle, str], owner: str) -> AccountInfo:
        """
        Resolve owner's account for token

        Args:
            token: Token handle or mint address
            owner: Owner wallet address (base58)

        Returns:
            AccountInfo; instruction is set when the account must be created

        Raises:
            AccountResolutionError: query failed for any reason other than
                                    a missing or foreign-owned account
        """
        mint = token.mint if isinstance(token, TokenHandle) else token
        owner_pubkey = Pubkey.from_string(owner)
        mint_pubkey = Pubkey.from_string(mint)
        address = str(get_associated_token_address(owner_pubkey, mint_pubkey))

        try:
            account = self._rpc.get_account_info(address, encoding="jsonParsed")
        except RpcError as e:
            logger.error(f"Error retrieving token account {address} for mint {mint}: {e}")
            raise AccountResolutionError.query_failed(mint, address, e)

        reason = self._creation_reason(account)
        if reason:
            logger.info(f"Will create token account {address} for mint {mint} ({reason})")
            return AccountInfo(
                address=address,
                balance=0,
                instruction=build_create_ata_instruction(owner_pubkey, owner_pubkey, mint_pubkey),
            )

        try:
            balance = _parse_token_amount(account)
        except (ValueError, TypeError, struct.error) as e:
            logger.error(f"Cannot read balance of token account {address}: {e}")
            raise AccountResolutionError.query_failed(mint, address, e)

        logger.debug(f"Token account {address} holds {balance} of {mint}")
        return AccountInfo(address=address, balance=balance)

    @staticmethod
    def _creation_reason(account: Optional[Dict[str, Any]]) -> Optional[str]:
        """Why the account must be created, or None when it is usable"""
        if account is None:
            return "not found"
        if account.get("owner") != TOKEN_PROGRAM_ID:
            return f"invalid owner {account.get('owner')}"
        return None
