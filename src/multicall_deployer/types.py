"""Data types and dataclasses for multicall-deployer."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple


@dataclass(frozen=True)
class NetworkHandle:
    """Target network for a deployment run."""

    name: str  # e.g., "localhost"
    rpc_url: str  # JSON-RPC endpoint
    chain_id: Optional[int] = None


@dataclass(frozen=True)
class ContractArtifact:
    """Precompiled contract: interface plus creation bytecode."""

    # Required fields
    name: str  # Contract name, e.g., "Multicall2"
    abi: List[Dict[str, Any]] = field(hash=False)
    bytecode: str  # 0x-prefixed creation bytecode

    # Optional fields (from the build tool)
    deployed_bytecode: Optional[str] = None
    source_name: Optional[str] = None  # e.g., "contracts/Multicall2.sol"
    source_path: Optional[Path] = None
    artifact_format: Optional[str] = None  # "hardhat" or "truffle"

    @property
    def is_deployable(self) -> bool:
        """True if the artifact carries creation bytecode (not an interface/abstract)."""
        code = self.bytecode[2:] if self.bytecode.startswith("0x") else self.bytecode
        return len(code) >= 2


@dataclass(frozen=True)
class DeployedContract:
    """Result of a confirmed contract creation transaction."""

    name: str
    address: str  # Checksummed address
    artifact: ContractArtifact
    deployer: str  # Signer address

    transaction_hash: Optional[str] = None
    block: Optional[int] = None

    def as_pair(self) -> Tuple[str, str]:
        return (self.name, self.address)
