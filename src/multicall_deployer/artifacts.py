"""Contract artifact parsing and lookup for multicall-deployer."""

import json
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Iterator, List, Mapping, Optional, Union

from loguru import logger

from .constants import (
    HARDHAT_BUILD_INFO_DIR,
    HARDHAT_DEBUG_SUFFIX,
    HARDHAT_FORMAT_PREFIX,
    SOLIDITY_SUFFIX,
)
from .exceptions import ArtifactNotFoundError, DefectiveArtifactError
from .types import ContractArtifact


class ArtifactFormat(Enum):
    """
    Artifact file format types.

    - HARDHAT: artifacts/contracts/<Name>.sol/<Name>.json, tagged with "_format"
    - TRUFFLE: build/contracts/<Name>.json, keyed by "contractName"
    """

    HARDHAT = "hardhat"
    TRUFFLE = "truffle"


def detect_artifact_format(data: Dict[str, Any]) -> Optional[ArtifactFormat]:
    """
    Detect which build tool produced a parsed artifact document.

    Args:
        data: Parsed JSON document

    Returns:
        ArtifactFormat.HARDHAT if "_format" starts with "hh-sol-artifact"
        ArtifactFormat.TRUFFLE if it has "contractName", "abi" and "bytecode"
        None for anything else (debug files, build-info, unrelated JSON)
    """
    if not isinstance(data, dict):
        return None

    if str(data.get("_format", "")).startswith(HARDHAT_FORMAT_PREFIX):
        return ArtifactFormat.HARDHAT

    if "contractName" in data and "abi" in data and "bytecode" in data:
        return ArtifactFormat.TRUFFLE

    return None


def normalize_contract_name(name: str) -> str:
    """
    Strip a trailing ".sol" so "Multicall2.sol" and "Multicall2" resolve alike.

    Args:
        name: Contract name, optionally with the source file suffix

    Returns:
        Bare contract name
    """
    if name.endswith(SOLIDITY_SUFFIX):
        return name[: -len(SOLIDITY_SUFFIX)]
    return name


def _artifact_from_data(
    data: Dict[str, Any], file_path: Path, artifact_format: Optional[ArtifactFormat]
) -> ContractArtifact:
    if "abi" not in data or "bytecode" not in data:
        raise DefectiveArtifactError(f"Missing abi or bytecode in artifact file: {file_path}")

    bytecode = data["bytecode"]
    deployed_bytecode = data.get("deployedBytecode")

    # Older toolchains nest bytecode as {"object": "..."}
    if isinstance(bytecode, dict):
        bytecode = bytecode.get("object", "")
    if isinstance(deployed_bytecode, dict):
        deployed_bytecode = deployed_bytecode.get("object")

    if not isinstance(bytecode, str):
        raise DefectiveArtifactError(
            f"Bytecode is not a hex string in artifact file: {file_path}"
        )

    if bytecode and not bytecode.startswith("0x"):
        bytecode = "0x" + bytecode

    return ContractArtifact(
        name=data.get("contractName") or file_path.stem,
        abi=data["abi"],
        bytecode=bytecode or "0x",
        deployed_bytecode=deployed_bytecode,
        source_name=data.get("sourceName") or data.get("sourcePath"),
        source_path=file_path,
        artifact_format=artifact_format.value if artifact_format else None,
    )


def parse_artifact(file_path: Union[Path, str]) -> ContractArtifact:
    """
    Parse a single contract artifact JSON file.

    Args:
        file_path: Path to a Hardhat or Truffle artifact file

    Returns:
        ContractArtifact named after "contractName" (or the file stem)

    Raises:
        DefectiveArtifactError: If the file has no abi or bytecode
    """
    file_path = Path(file_path)
    with open(file_path, encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise DefectiveArtifactError(f"Artifact file is not a JSON object: {file_path}")

    return _artifact_from_data(data, file_path, detect_artifact_format(data))


def _iter_candidate_files(artifacts_dir: Path) -> Iterator[Path]:
    for path in sorted(artifacts_dir.rglob("*.json")):
        if path.name.endswith(HARDHAT_DEBUG_SUFFIX):
            continue
        if HARDHAT_BUILD_INFO_DIR in path.relative_to(artifacts_dir).parts:
            continue
        yield path


class ArtifactStore:
    """Name -> ContractArtifact lookup handed to the deployment orchestrator."""

    def __init__(self, artifacts: Optional[Mapping[str, ContractArtifact]] = None):
        self._artifacts: Dict[str, ContractArtifact] = {}
        for name, artifact in (artifacts or {}).items():
            self._artifacts[normalize_contract_name(name)] = artifact

    @classmethod
    def from_directory(cls, artifacts_dir: Union[Path, str]) -> "ArtifactStore":
        """
        Load every contract artifact found under a build output directory.

        Works on Hardhat's artifacts/ tree (skipping *.dbg.json and build-info/)
        and on Truffle's build/contracts/ directory. JSON files that are not
        artifacts are ignored. When two files declare the same contract name,
        the first in sorted path order wins.

        Args:
            artifacts_dir: Root of the build output

        Returns:
            ArtifactStore with one entry per contract name

        Raises:
            ArtifactNotFoundError: If the directory does not exist
        """
        artifacts_dir = Path(artifacts_dir)
        if not artifacts_dir.is_dir():
            raise ArtifactNotFoundError(
                f"Artifacts directory not found at {artifacts_dir}. "
                "Compile the contracts first."
            )

        artifacts: Dict[str, ContractArtifact] = {}
        for path in _iter_candidate_files(artifacts_dir):
            try:
                with open(path, encoding="utf-8") as f:
                    data = json.load(f)
            except (json.JSONDecodeError, UnicodeDecodeError):
                logger.debug(f"Skipping unreadable JSON file {path}")
                continue

            artifact_format = detect_artifact_format(data)
            if artifact_format is None:
                continue

            try:
                artifact = _artifact_from_data(data, path, artifact_format)
            except DefectiveArtifactError as e:
                logger.warning(str(e))
                continue

            if artifact.name in artifacts:
                logger.warning(
                    f"Duplicate artifact for {artifact.name} at {path}, "
                    f"keeping {artifacts[artifact.name].source_path}"
                )
                continue
            artifacts[artifact.name] = artifact

        logger.debug(f"Loaded {len(artifacts)} artifacts from {artifacts_dir}")
        return cls(artifacts)

    def get(self, name: str) -> ContractArtifact:
        """
        Get the artifact for a contract.

        Args:
            name: Contract name, with or without ".sol"

        Returns:
            ContractArtifact

        Raises:
            ArtifactNotFoundError: If no artifact has that name
        """
        canonical_name = normalize_contract_name(name)
        if canonical_name not in self._artifacts:
            raise ArtifactNotFoundError(f"Artifact '{name}' not found in artifact store")
        return self._artifacts[canonical_name]

    def has_artifact(self, name: str) -> bool:
        return normalize_contract_name(name) in self._artifacts

    def names(self) -> List[str]:
        return sorted(self._artifacts.keys())

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.has_artifact(name)

    def __len__(self) -> int:
        return len(self._artifacts)
