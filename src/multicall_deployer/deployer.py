"""Main API for multicall-deployer: the ordered support contract deployment."""

import sys
from typing import List, Optional, Protocol, Sequence, TextIO

from loguru import logger

from .constants import CONTRACT_LABELS, DEFAULT_SIGNER_INDEX, REQUIRED_CONTRACTS
from .exceptions import AccountFetchError, DeploymentError, ProviderError
from .types import ContractArtifact, DeployedContract, NetworkHandle


class Provider(Protocol):
    """What run_deployment needs from a network connection."""

    network: NetworkHandle

    def list_accounts(self) -> List[str]: ...

    def deploy(self, artifact: ContractArtifact, from_account: str) -> DeployedContract: ...


class ArtifactSource(Protocol):
    """What run_deployment needs from an artifact store."""

    def get(self, name: str) -> ContractArtifact: ...


def _fetch_signer(provider: Provider, signer_index: int) -> str:
    try:
        accounts = provider.list_accounts()
    except ProviderError as e:
        raise AccountFetchError(f"Error retrieving accounts: {e}") from e

    if len(accounts) <= signer_index:
        raise AccountFetchError(
            f"Signer index {signer_index} requires at least {signer_index + 1} accounts, "
            f"node returned {len(accounts)}"
        )
    return accounts[signer_index]


def _deploy_one(provider: Provider, artifact: ContractArtifact, signer: str) -> DeployedContract:
    if not artifact.is_deployable:
        raise DeploymentError(artifact.name, "artifact has no creation bytecode")

    try:
        deployed = provider.deploy(artifact, signer)
    except ProviderError as e:
        raise DeploymentError(artifact.name, str(e)) from e

    logger.info(f"Deployed {artifact.name} at {deployed.address}")
    return deployed


def run_deployment(
    provider: Provider,
    artifact_store: ArtifactSource,
    signer_index: int = DEFAULT_SIGNER_INDEX,
    contract_names: Sequence[str] = REQUIRED_CONTRACTS,
    out: Optional[TextIO] = None,
) -> List[DeployedContract]:
    """
    Deploy the support contracts one after another and report their addresses.

    Each deployment is confirmed before the next artifact is even resolved, so
    a failure part way leaves earlier contracts deployed (there is no rollback)
    and nothing later submitted.

    Args:
        provider: Network connection exposing list_accounts() and deploy()
        artifact_store: Artifact lookup exposing get(name)
        signer_index: Index into the node's account list of the deploying account
        contract_names: Contracts to deploy, in order
        out: Stream for the console report (defaults to stdout)

    Returns:
        One DeployedContract per name, in deployment order

    Raises:
        ValueError: If signer_index is negative
        AccountFetchError: If accounts cannot be fetched or signer_index is out of range
        ArtifactNotFoundError: If a named artifact is missing from the store
        DeploymentError: If a creation transaction fails
    """
    if signer_index < 0:
        raise ValueError(f"signer_index must be non-negative, got {signer_index}")

    if out is None:
        out = sys.stdout

    signer = _fetch_signer(provider, signer_index)

    print(f"Using network: {provider.network.name}", file=out)
    print(f"Deploying from: {signer}", file=out)
    print("", file=out)

    deployed: List[DeployedContract] = []
    for name in contract_names:
        artifact = artifact_store.get(name)
        contract = _deploy_one(provider, artifact, signer)
        deployed.append(contract)

        print(f"   {CONTRACT_LABELS.get(contract.name, contract.name + ' Address')}", file=out)
        print(f"     {contract.address}", file=out)

    print("", file=out)
    print("  Done!", file=out)
    print("", file=out)

    return deployed
