"""
Solana JSON-RPC transport

Covers the calls a swap needs: token account lookups, a recent
blockhash, send/simulate and signature status polling. Transport
failures are retried per endpoint, then the next endpoint is tried;
errors reported by the node itself are raised at once.
"""

from __future__ import annotations

import base64
import logging
import threading
import time
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Union

import httpx

from ..errors import ErrorCode, RpcError, ConfigurationError
from ..config import config as global_config

logger = logging.getLogger(__name__)


@dataclass
class RpcClientConfig:
    """
    Per-client RPC settings

    Unset values fall back to the global config (raydium_swap.config.RpcConfig).
    """
    timeout_seconds: float = None
    max_retries: int = None
    retry_delay_seconds: float = None
    commitment: str = None

    def __post_init__(self):
        defaults = global_config.rpc
        if self.timeout_seconds is None:
            self.timeout_seconds = defaults.timeout_seconds
        if self.max_retries is None:
            self.max_retries = defaults.max_retries
        if self.retry_delay_seconds is None:
            self.retry_delay_seconds = defaults.retry_delay_seconds
        if self.commitment is None:
            self.commitment = defaults.commitment


class RpcClient:
    """
    JSON-RPC client over httpx

    Endpoints are tried in the order given on every call and the client
    keeps no per-call state, so the account resolver threads can share
    one instance.

    Usage:
        rpc = RpcClient(["https://primary.example.com", "https://backup.example.com"])
        value = rpc.get_account_info(ata, encoding="jsonParsed")
    """

    def __init__(
        self,
        endpoint: Union[str, Sequence[str]],
        config: Optional[RpcClientConfig] = None,
    ):
        candidates = [endpoint] if isinstance(endpoint, str) else list(endpoint)
        self._endpoints = tuple(e for e in candidates if e)
        if not self._endpoints:
            raise ConfigurationError.missing("RPC endpoint")

        self._config = config or RpcClientConfig()
        self._client: Optional[httpx.Client] = None
        self._client_lock = threading.Lock()

    @property
    def endpoint(self) -> str:
        """Primary endpoint"""
        return self._endpoints[0]

    @property
    def commitment(self) -> str:
        return self._config.commitment

    def _http(self) -> httpx.Client:
        with self._client_lock:
            if self._client is None:
                self._client = httpx.Client(
                    timeout=self._config.timeout_seconds,
                    headers={"Content-Type": "application/json"},
                )
            return self._client

    def _post(self, endpoint: str, body: Dict[str, Any], timeout: float) -> Dict[str, Any]:
        """
        One HTTP round trip

        Raises:
            RpcError: transport failure, rate limit or a body that is not a JSON-RPC reply
        """
        try:
            response = self._http().post(endpoint, json=body, timeout=timeout)
            if response.status_code == 429:
                raise RpcError.rate_limited(endpoint)
            response.raise_for_status()
            payload = response.json()
        except httpx.TimeoutException:
            raise RpcError.timeout(endpoint, timeout)
        except httpx.HTTPStatusError as e:
            raise RpcError(
                f"HTTP error {e.response.status_code}",
                endpoint=endpoint,
                original_error=e,
            )
        except httpx.RequestError as e:
            raise RpcError.connection_failed(endpoint, e)
        except ValueError as e:
            raise RpcError.invalid_response(endpoint, e)

        if not isinstance(payload, dict):
            raise RpcError.invalid_response(endpoint, TypeError(f"reply is {type(payload).__name__}"))
        return payload

    @staticmethod
    def _node_error(endpoint: str, error: Any) -> RpcError:
        if not isinstance(error, dict):
            error = {"message": str(error)}
        rpc_error = RpcError(
            f"RPC error: {error.get('message', error)}",
            ErrorCode.RPC_INVALID_RESPONSE,
            endpoint=endpoint,
        )
        rpc_error.details["rpc_error_code"] = error.get("code")
        rpc_error.details["rpc_error_data"] = error.get("data")
        return rpc_error

    def call(self, method: str, params: List[Any], timeout: Optional[float] = None) -> Any:
        """
        Make a JSON-RPC call and return its "result"

        Raises:
            RpcError: the node reported an error, or every endpoint failed
        """
        body = {"jsonrpc": "2.0", "id": 1, "method": method, "params": params}
        timeout = timeout or self._config.timeout_seconds
        retries = max(1, self._config.max_retries)
        last_error: Optional[RpcError] = None

        for endpoint in self._endpoints:
            for attempt in range(1, retries + 1):
                try:
                    payload = self._post(endpoint, body, timeout)
                except RpcError as e:
                    last_error = e
                    logger.warning(f"{method} attempt {attempt}/{retries} on {endpoint}: {e}")
                    if attempt < retries:
                        time.sleep(self._config.retry_delay_seconds * attempt)
                    continue

                if "error" in payload:
                    raise self._node_error(endpoint, payload["error"])
                return payload.get("result")

            if len(self._endpoints) > 1:
                logger.info(f"Giving up on RPC endpoint {endpoint} for {method}")

        raise last_error or RpcError(f"All RPC endpoints failed for {method}")

    def get_account_info(self, address: str, encoding: str = "base64") -> Optional[Dict[str, Any]]:
        """Account value, or None when the account does not exist"""
        result = self.call(
            "getAccountInfo",
            [address, {"encoding": encoding, "commitment": self.commitment}],
        )
        return result.get("value") if result else None

    def get_latest_blockhash(self) -> Dict[str, Any]:
        """Dict with blockhash and lastValidBlockHeight"""
        result = self.call("getLatestBlockhash", [{"commitment": self.commitment}])
        return result.get("value", {}) if result else {}

    def send_transaction(
        self,
        transaction: bytes,
        skip_preflight: bool = False,
        preflight_commitment: Optional[str] = None,
    ) -> Any:
        """
        Submit a signed transaction

        The raw result is returned unchecked; the caller decides whether
        it is a signature.
        """
        return self.call("sendTransaction", [
            base64.b64encode(transaction).decode("ascii"),
            {
                "encoding": "base64",
                "skipPreflight": skip_preflight,
                "preflightCommitment": preflight_commitment or self.commitment,
            },
        ])

    def simulate_transaction(self, transaction: bytes) -> Dict[str, Any]:
        """Simulate without signature checks, against a fresh blockhash"""
        return self.call("simulateTransaction", [
            base64.b64encode(transaction).decode("ascii"),
            {
                "encoding": "base64",
                "commitment": self.commitment,
                "sigVerify": False,
                "replaceRecentBlockhash": True,
            },
        ])

    def _signature_status(self, signature: str) -> Optional[Dict[str, Any]]:
        try:
            result = self.call("getSignatureStatuses", [[signature]])
        except RpcError as e:
            logger.debug(f"Status lookup for {signature} failed: {e}")
            return None
        statuses = (result or {}).get("value") or [None]
        return statuses[0]

    def confirm_transaction(
        self,
        signature: str,
        timeout_seconds: float = 60.0,
        poll_interval: float = 1.0,
    ) -> Optional[bool]:
        """
        Poll until the signature is confirmed

        Returns:
            True when confirmed or finalized, False when it failed on-chain,
            None when the deadline passed first
        """
        deadline = time.monotonic() + timeout_seconds
        seen = None

        while time.monotonic() < deadline:
            status = self._signature_status(signature)
            if status:
                seen = status.get("confirmationStatus")
                if status.get("err"):
                    logger.warning(f"Transaction {signature} failed on-chain: {status['err']}")
                    return False
                if seen in ("confirmed", "finalized"):
                    return True
            time.sleep(poll_interval)

        logger.warning(f"Transaction {signature} not confirmed in {timeout_seconds}s (last status: {seen})")
        return None

    def close(self):
        with self._client_lock:
            if self._client is not None:
                self._client.close()
                self._client = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
