"""Environment-based configuration for multicall-deployer."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Mapping, Optional, TypeVar

from dotenv import load_dotenv
from loguru import logger

from .constants import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_NETWORK_NAME,
    DEFAULT_POLL_INTERVAL,
    DEFAULT_RECEIPT_TIMEOUT,
    DEFAULT_RPC_URL,
    DEFAULT_SIGNER_INDEX,
    ENV_ARTIFACTS_DIR,
    ENV_CHAIN_ID,
    ENV_LOG_LEVEL,
    ENV_NETWORK,
    ENV_POLL_INTERVAL,
    ENV_RECEIPT_TIMEOUT,
    ENV_RECORD_PATH,
    ENV_RPC_URL,
    ENV_SIGNER_INDEX,
)
from .exceptions import ConfigError
from .paths import resolve_artifacts_dir
from .types import NetworkHandle

T = TypeVar("T")


def _parse(environ: Mapping[str, str], key: str, convert: Callable[[str], T], default: T) -> T:
    raw = environ.get(key)
    if raw is None or raw.strip() == "":
        return default
    try:
        return convert(raw.strip())
    except ValueError as e:
        raise ConfigError(f"Invalid value for {key}: {raw!r}") from e


def _parse_chain_id(raw: str) -> int:
    return int(raw, 16) if raw.lower().startswith("0x") else int(raw)


@dataclass(frozen=True)
class DeployerConfig:
    """Settings for one deployment run."""

    network_name: str = DEFAULT_NETWORK_NAME
    rpc_url: str = DEFAULT_RPC_URL
    chain_id: Optional[int] = None
    artifacts_dir: Optional[Path] = None
    signer_index: int = DEFAULT_SIGNER_INDEX
    receipt_timeout: float = DEFAULT_RECEIPT_TIMEOUT
    poll_interval: float = DEFAULT_POLL_INTERVAL
    record_path: Optional[Path] = None
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "DeployerConfig":
        """
        Build a config from environment variables.

        When environ is None, a .env file in the working directory is loaded
        first (without overriding variables already set) and os.environ is read.

        Args:
            environ: Mapping to read instead of the process environment

        Returns:
            DeployerConfig

        Raises:
            ConfigError: If a numeric setting or the log level is invalid
        """
        if environ is None:
            load_dotenv()
            environ = os.environ

        signer_index = _parse(environ, ENV_SIGNER_INDEX, int, DEFAULT_SIGNER_INDEX)
        if signer_index < 0:
            raise ConfigError(f"{ENV_SIGNER_INDEX} must be non-negative, got {signer_index}")

        receipt_timeout = _parse(environ, ENV_RECEIPT_TIMEOUT, float, float(DEFAULT_RECEIPT_TIMEOUT))
        poll_interval = _parse(environ, ENV_POLL_INTERVAL, float, DEFAULT_POLL_INTERVAL)
        if receipt_timeout < 0 or poll_interval < 0:
            raise ConfigError(f"{ENV_RECEIPT_TIMEOUT} and {ENV_POLL_INTERVAL} must be non-negative")

        log_level = (environ.get(ENV_LOG_LEVEL) or DEFAULT_LOG_LEVEL).upper()
        try:
            logger.level(log_level)
        except ValueError as e:
            raise ConfigError(f"Invalid value for {ENV_LOG_LEVEL}: {log_level!r}") from e

        record_path = environ.get(ENV_RECORD_PATH)

        return cls(
            network_name=environ.get(ENV_NETWORK) or DEFAULT_NETWORK_NAME,
            rpc_url=environ.get(ENV_RPC_URL) or DEFAULT_RPC_URL,
            chain_id=_parse(environ, ENV_CHAIN_ID, _parse_chain_id, None),
            artifacts_dir=resolve_artifacts_dir(environ.get(ENV_ARTIFACTS_DIR) or None),
            signer_index=signer_index,
            receipt_timeout=receipt_timeout,
            poll_interval=poll_interval,
            record_path=Path(record_path) if record_path else None,
            log_level=log_level,
        )

    @property
    def network(self) -> NetworkHandle:
        return NetworkHandle(name=self.network_name, rpc_url=self.rpc_url, chain_id=self.chain_id)
