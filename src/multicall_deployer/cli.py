"""Command line entry point: deploy the support contracts to the configured node."""

import sys
from typing import Optional

from loguru import logger

from .artifacts import ArtifactStore
from .config import DeployerConfig
from .deployer import run_deployment
from .exceptions import ConfigError, DeployerError
from .log import configure_logging
from .paths import resolve_artifacts_dir
from .provider import JsonRpcProvider
from .records import save_deployment_record


def deploy_from_config(config: DeployerConfig, provider: Optional[JsonRpcProvider] = None) -> None:
    """
    Run a full deployment described by a config.

    Args:
        config: Deployment settings
        provider: Provider to use instead of one built from the config

    Raises:
        DeployerError: Any failure of the run
    """
    if provider is None:
        provider = JsonRpcProvider(
            config.network,
            receipt_timeout=config.receipt_timeout,
            poll_interval=config.poll_interval,
        )

    if config.chain_id is not None:
        node_chain_id = provider.chain_id()
        if node_chain_id != config.chain_id:
            raise ConfigError(
                f"Node at {config.rpc_url} reports chain id {node_chain_id}, "
                f"expected {config.chain_id}"
            )

    artifact_store = ArtifactStore.from_directory(resolve_artifacts_dir(config.artifacts_dir))
    deployed = run_deployment(provider, artifact_store, signer_index=config.signer_index)

    if config.record_path is not None:
        path = save_deployment_record(deployed, config.network, config.record_path)
        logger.info(f"Deployment record written to {path}")


def main() -> int:
    """Deploy and return the process exit code."""
    try:
        config = DeployerConfig.from_env()
    except ConfigError as e:
        configure_logging()
        logger.error(str(e))
        return 1

    configure_logging(config.log_level)

    try:
        deploy_from_config(config)
    except DeployerError as e:
        logger.error(f"Deployment aborted: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0
