"""
multicall-deployer: deploy Multicall2 and BalanceChecker to a development network
"""

from importlib.metadata import PackageNotFoundError, version

from .abi import compress_abi, decompress_abi, load_abi
from .artifacts import ArtifactStore, parse_artifact
from .config import DeployerConfig
from .deployer import run_deployment
from .exceptions import (
    AbiDecodeError,
    AccountFetchError,
    ArtifactNotFoundError,
    ConfigError,
    DefectiveArtifactError,
    DeployerError,
    DeploymentError,
    ProviderError,
    RecordNotFoundError,
    RpcError,
    TransactionFailedError,
)
from .provider import JsonRpcProvider
from .records import load_deployment_record, save_deployment_record
from .types import ContractArtifact, DeployedContract, NetworkHandle

try:
    __version__ = version("multicall-deployer")
except PackageNotFoundError:
    __version__ = None

__all__ = [
    "run_deployment",
    "ArtifactStore",
    "parse_artifact",
    "JsonRpcProvider",
    "DeployerConfig",
    "compress_abi",
    "decompress_abi",
    "load_abi",
    "save_deployment_record",
    "load_deployment_record",
    "NetworkHandle",
    "ContractArtifact",
    "DeployedContract",
    "DeployerError",
    "AccountFetchError",
    "ArtifactNotFoundError",
    "DefectiveArtifactError",
    "DeploymentError",
    "ProviderError",
    "RpcError",
    "TransactionFailedError",
    "AbiDecodeError",
    "ConfigError",
    "RecordNotFoundError",
]
