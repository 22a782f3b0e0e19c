"""Custom exception classes for multicall-deployer."""

from typing import Optional


class DeployerError(Exception):
    """Base exception for all multicall-deployer errors."""

    pass


class AccountFetchError(DeployerError, RuntimeError):
    """Raised when the signer account list cannot be fetched or is too short."""

    pass


class ArtifactNotFoundError(DeployerError, LookupError):
    """Raised when a named contract artifact is not in the artifact store."""

    pass


class DefectiveArtifactError(DeployerError, ValueError):
    """Raised when an artifact file is missing its ABI or bytecode."""

    pass


class DeploymentError(DeployerError, RuntimeError):
    """Raised when a contract creation transaction does not produce a contract."""

    def __init__(self, contract_name: str, message: str):
        super().__init__(f"Failed to deploy {contract_name}: {message}")
        self.contract_name = contract_name


class ProviderError(DeployerError, RuntimeError):
    """Raised when the JSON-RPC endpoint fails or returns something unusable."""

    pass


class RpcError(ProviderError):
    """Raised when the JSON-RPC response carries an error member."""

    def __init__(self, method: str, code: Optional[int], message: str):
        super().__init__(f"RPC error from {method} ({code}): {message}")
        self.method = method
        self.code = code


class TransactionFailedError(ProviderError):
    """Raised when a submitted transaction reverts or is never mined."""

    def __init__(self, transaction_hash: str, message: str):
        super().__init__(f"Transaction {transaction_hash} failed: {message}")
        self.transaction_hash = transaction_hash


class AbiDecodeError(DeployerError, ValueError):
    """Raised when a compressed ABI string cannot be decoded."""

    pass


class ConfigError(DeployerError, ValueError):
    """Raised when an environment setting is malformed."""

    pass


class RecordNotFoundError(DeployerError, FileNotFoundError):
    """Raised when a deployment record file is not found."""

    pass
