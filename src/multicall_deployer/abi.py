"""ABI compression and loading utilities.

Compressed ABIs are zlib-deflated compact JSON, base64 encoded, so they can be
embedded in config files and read back by pako (``inflate``) or Go's
``compress/zlib`` alike.
"""

import base64
import json
import zlib
from pathlib import Path
from typing import Any, Union

from .exceptions import AbiDecodeError


def compress_abi(abi: Any) -> str:
    """
    Compress a JSON-serializable ABI into a base64 string.

    Args:
        abi: ABI structure (usually a list of dicts)

    Returns:
        Base64-encoded zlib stream of the compact JSON
    """
    serialized = json.dumps(abi, separators=(",", ":"))
    return base64.b64encode(zlib.compress(serialized.encode("utf-8"))).decode("ascii")


def decompress_abi(data: str) -> Any:
    """
    Decompress an ABI produced by compress_abi.

    Args:
        data: Base64-encoded zlib stream

    Returns:
        Decoded ABI structure

    Raises:
        AbiDecodeError: If the input is not valid base64, zlib or JSON
    """
    try:
        raw = base64.b64decode(data, validate=True)
        return json.loads(zlib.decompress(raw).decode("utf-8"))
    except (ValueError, zlib.error) as e:
        raise AbiDecodeError(f"Invalid compressed ABI: {e}") from e


def load_abi(abi_file_path: Union[Path, str]) -> Any:
    """Load and parse an ABI JSON file."""
    with open(abi_file_path) as f:
        return json.load(f)
