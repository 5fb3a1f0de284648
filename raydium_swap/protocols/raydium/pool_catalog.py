"""
Raydium AMM v4 pool catalog

Reads the Raydium liquidity JSON (https://api.raydium.io/v2/sdk/liquidity/mainnet.json
or a local copy) and locates the pool trading a given pair.

Catalog layout:
    {
        "official":   [{"id": ..., "baseMint": ..., "quoteMint": ..., ...}, ...],
        "unOfficial": [...]
    }
"""

import json
import logging
from typing import Any, Dict, List, Optional, Tuple

import httpx

from ...types import PoolRecord
from ...errors import PoolCatalogError
from ...config import config as global_config

logger = logging.getLogger(__name__)

OFFICIAL_KEY = "official"
UNOFFICIAL_KEY = "unOfficial"


class PoolCatalog:
    """
    Two-tier pool catalog (official, then unofficial)

    The source is re-read on every lookup; nothing is cached between calls.

    Usage:
        catalog = PoolCatalog("pools.json")
        pool = catalog.find_pool(usdc_mint, wsol_mint)
    """

    def __init__(self, source: Optional[str] = None, timeout: Optional[float] = None):
        """
        Args:
            source: Local file path or http(s) URL (defaults to RAYDIUM_POOL_CATALOG)
            timeout: HTTP timeout for URL sources
        """
        self._source = source or global_config.pools.catalog
        self._timeout = timeout if timeout is not None else global_config.pools.timeout

    @property
    def source(self) -> str:
        return self._source

    def _read(self) -> Any:
        """Read and decode the raw catalog document"""
        if self._source.startswith(("http://", "https://")):
            try:
                response = httpx.get(self._source, timeout=self._timeout)
                response.raise_for_status()
                return response.json()
            except httpx.HTTPError as e:
                raise PoolCatalogError.unreadable(self._source, e)
            except ValueError as e:
                raise PoolCatalogError.malformed(self._source, f"invalid JSON: {e}")

        try:
            with open(self._source, "r", encoding="utf-8") as f:
                return json.load(f)
        except OSError as e:
            raise PoolCatalogError.unreadable(self._source, e)
        except ValueError as e:
            raise PoolCatalogError.malformed(self._source, f"invalid JSON: {e}")

    def load(self) -> Tuple[List[Dict[str, Any]], List[Dict[str, Any]]]:
        """
        Read the catalog

        Returns:
            (official, unofficial) lists of raw catalog entries, in file order

        Raises:
            PoolCatalogError: source unreadable or not a liquidity catalog
        """
        document = self._read()
        if not isinstance(document, dict):
            raise PoolCatalogError.malformed(self._source, "top level is not an object")

        tiers = []
        for key in (OFFICIAL_KEY, UNOFFICIAL_KEY):
            entries = document.get(key)
            if not isinstance(entries, list):
                raise PoolCatalogError.malformed(self._source, f"'{key}' is missing or not a list")
            tiers.append(entries)

        official, unofficial = tiers
        logger.debug(
            f"Loaded pool catalog {self._source}: "
            f"{len(official)} official, {len(unofficial)} unofficial"
        )
        return official, unofficial

    def _parse(self, entry: Dict[str, Any]) -> PoolRecord:
        try:
            return PoolRecord.from_dict(entry)
        except KeyError as e:
            raise PoolCatalogError.malformed(self._source, f"pool entry missing {e}")
        except (TypeError, ValueError) as e:
            raise PoolCatalogError.malformed(self._source, f"bad pool entry {entry.get('id')}: {e}")

    def find_pool(self, token_a: str, token_b: str) -> Optional[PoolRecord]:
        """
        Find the pool trading token_a against token_b

        Entries are scanned official-then-unofficial for base == token_a and
        quote == token_b; only when none matches is a fresh scan run for the
        reverse orientation. The first match wins.

        Args:
            token_a: Mint address (normally the input token)
            token_b: Mint address (normally the output token)

        Returns:
            Matching PoolRecord or None

        Raises:
            PoolCatalogError: catalog unreadable or malformed
        """
        official, unofficial = self.load()
        entries = official + unofficial

        for base, quote in ((token_a, token_b), (token_b, token_a)):
            for entry in entries:
                if not isinstance(entry, dict):
                    raise PoolCatalogError.malformed(self._source, "pool entry is not an object")
                if entry.get("baseMint") == base and entry.get("quoteMint") == quote:
                    pool = self._parse(entry)
                    logger.info(f"fn: find_pool found pool {pool.id} for {base}/{quote}")
                    return pool

        logger.info(f"fn: find_pool no pool for {token_a} and {token_b}")
        return None
