"""
Configuration for Raydium Swap

Every setting can come from the environment or a .env file at the
project root; the dataclass defaults apply otherwise.

    SOLANA_RPC_URL, RPC_*          RpcConfig
    SOLANA_KEYPAIR_PATH            SignerConfig
    TX_*                           TxConfig
    RAYDIUM_POOL_CATALOG/_TIMEOUT  PoolConfig
    LOG_*                          LoggingConfig
"""

import os
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Callable, List, Optional, TypeVar

from dotenv import load_dotenv

T = TypeVar("T")

ENV_FILE = Path(__file__).parent.parent / ".env"


def _load_env_file():
    if ENV_FILE.exists():
        load_dotenv(ENV_FILE)


_load_env_file()


def _flag(raw: str) -> bool:
    return raw.strip().lower() in ("true", "1", "yes", "on")


def _env(key: str, default: T, cast: Callable[[str], T] = str) -> T:
    """Read key from the environment, falling back to default when unset or unparseable"""
    raw = os.getenv(key)
    if raw is None:
        return default
    try:
        return cast(raw)
    except ValueError:
        logging.getLogger(__name__).warning(
            f"Ignoring {key}={raw!r}: not a valid {cast.__name__}, using {default!r}"
        )
        return default


def _setting(key: str, default, cast=str):
    """dataclass field whose default is read from the environment at construction"""
    return field(default_factory=lambda: _env(key, default, cast))


@dataclass
class RpcConfig:
    url: str = _setting("SOLANA_RPC_URL", "")
    timeout_seconds: float = _setting("RPC_TIMEOUT_SECONDS", 30.0, float)
    max_retries: int = _setting("RPC_MAX_RETRIES", 3, int)
    retry_delay_seconds: float = _setting("RPC_RETRY_DELAY_SECONDS", 1.0, float)
    commitment: str = _setting("RPC_COMMITMENT", "confirmed")


@dataclass
class SignerConfig:
    keypair_path: str = _setting("SOLANA_KEYPAIR_PATH", "")


@dataclass
class TxConfig:
    """Compute budget and submission settings"""
    # micro-lamports per compute unit
    compute_unit_price: int = _setting("TX_COMPUTE_UNIT_PRICE", 25_000, int)
    # covers the swap plus both ATA creations and wrapping
    compute_units: int = _setting("TX_COMPUTE_UNITS", 600_000, int)
    skip_preflight: bool = _setting("TX_SKIP_PREFLIGHT", False, _flag)
    preflight_commitment: str = _setting("TX_PREFLIGHT_COMMITMENT", "confirmed")
    wait_confirmation: bool = _setting("TX_WAIT_CONFIRMATION", True, _flag)
    confirmation_timeout: float = _setting("TX_CONFIRMATION_TIMEOUT", 60.0, float)


@dataclass
class PoolConfig:
    """
    Pool catalog location

    catalog is a path to the Raydium liquidity JSON or an http(s) URL
    serving it, e.g. https://api.raydium.io/v2/sdk/liquidity/mainnet.json
    """
    catalog: str = _setting("RAYDIUM_POOL_CATALOG", "pools.json")
    timeout: float = _setting("RAYDIUM_CATALOG_TIMEOUT", 60.0, float)


def _default_log_file() -> str:
    stamp = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")
    return str(Path(__file__).parent / "log" / f"raydium_swap_{stamp}.log")


@dataclass
class LoggingConfig:
    """
    Log output settings

    An empty LOG_FILE disables the file handler. Files rotate at
    LOG_MAX_BYTES keeping LOG_BACKUP_COUNT old copies.
    """
    log_file: str = field(default_factory=lambda: _env("LOG_FILE", _default_log_file()))
    log_level: str = _setting("LOG_LEVEL", "INFO")
    log_format: str = _setting("LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    console_output: bool = _setting("LOG_CONSOLE", True, _flag)
    max_bytes: int = _setting("LOG_MAX_BYTES", 10 * 1024 * 1024, int)
    backup_count: int = _setting("LOG_BACKUP_COUNT", 5, int)

    @property
    def level(self) -> int:
        return getattr(logging, self.log_level.upper(), logging.INFO)


@dataclass
class Config:
    """
    All settings, grouped per component

    Usage:
        from raydium_swap.config import config
        config.pools.catalog
    """
    rpc: RpcConfig = field(default_factory=RpcConfig)
    signer: SignerConfig = field(default_factory=SignerConfig)
    tx: TxConfig = field(default_factory=TxConfig)
    pools: PoolConfig = field(default_factory=PoolConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


config = Config()


def reload_config() -> Config:
    """
    Re-read .env and the environment into a new global config

    Modules that did `from raydium_swap.config import config` keep the
    instance they imported; only code that looks up
    `raydium_swap.config.config` after the reload sees the new values.
    Per-component configs (RpcClientConfig, TxBuilderConfig,
    SwapPlannerConfig) also take explicit values for that reason.
    """
    global config
    _load_env_file()
    config = Config()
    return config


def setup_logging(
    log_config: Optional[LoggingConfig] = None,
    logger_name: str = "raydium_swap",
) -> logging.Logger:
    """
    Attach file and/or console handlers to logger_name

    Existing handlers on that logger are closed and replaced, so calling
    this again after a config change is safe.
    """
    log_config = log_config or config.logging

    logger = logging.getLogger(logger_name)
    logger.setLevel(log_config.level)
    for handler in logger.handlers[:]:
        handler.close()
        logger.removeHandler(handler)

    handlers: List[logging.Handler] = []
    if log_config.log_file:
        Path(log_config.log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(RotatingFileHandler(
            log_config.log_file,
            maxBytes=log_config.max_bytes,
            backupCount=log_config.backup_count,
            encoding="utf-8",
        ))
    if log_config.console_output:
        handlers.append(logging.StreamHandler())

    formatter = logging.Formatter(log_config.log_format)
    for handler in handlers:
        handler.setLevel(log_config.level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    if log_config.log_file:
        logger.info(f"Logging to {log_config.log_file} at {log_config.log_level}")
    return logger
