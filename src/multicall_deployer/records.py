"""Deployment record file management for multicall-deployer."""

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Sequence, Union

from .exceptions import RecordNotFoundError
from .types import DeployedContract, NetworkHandle


def build_deployment_record(
    deployed: Sequence[DeployedContract], network: NetworkHandle
) -> Dict[str, Any]:
    """
    Build the JSON-serializable record of a deployment run.

    Args:
        deployed: Contracts in deployment order
        network: Network they were deployed to

    Returns:
        Dictionary with "network", "generated_at" and "contracts" keys
    """
    return {
        "network": {
            "name": network.name,
            "rpc_url": network.rpc_url,
            "chain_id": network.chain_id,
        },
        "generated_at": datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S UTC"),
        "contracts": {
            contract.name: {
                "address": contract.address,
                "transaction_hash": contract.transaction_hash,
                "block": contract.block,
                "deployer": contract.deployer,
            }
            for contract in deployed
        },
    }


def save_deployment_record(
    deployed: Sequence[DeployedContract],
    network: NetworkHandle,
    record_path: Union[Path, str],
) -> Path:
    """
    Write the deployment record to disk.

    Creates parent directories if they don't exist. An existing file is overwritten.

    Returns:
        Path the record was written to
    """
    record_path = Path(record_path)
    record_path.parent.mkdir(parents=True, exist_ok=True)
    with open(record_path, "w") as f:
        json.dump(build_deployment_record(deployed, network), f, indent=2)
    return record_path


def load_deployment_record(record_path: Union[Path, str]) -> Dict[str, Any]:
    """
    Load a deployment record written by save_deployment_record.

    Raises:
        RecordNotFoundError: If the file does not exist
    """
    record_path = Path(record_path)
    if not record_path.exists():
        raise RecordNotFoundError(f"Deployment record not found at {record_path}")

    with open(record_path) as f:
        return json.load(f)
