"""Path management utilities for multicall-deployer."""

from pathlib import Path
from typing import Optional, Union


def get_default_artifacts_dir() -> Path:
    """
    Get default artifacts directory (Hardhat's compile output).

    Returns:
        Path to ./artifacts
    """
    return Path.cwd() / "artifacts"


def resolve_artifacts_dir(artifacts_root: Optional[Union[Path, str]] = None) -> Path:
    """
    Resolve the artifacts directory to an absolute path.

    Args:
        artifacts_root: Custom artifacts directory (defaults to ./artifacts)

    Returns:
        Absolute path to the artifacts directory
    """
    if artifacts_root is None:
        return get_default_artifacts_dir()
    return Path(artifacts_root).absolute()

