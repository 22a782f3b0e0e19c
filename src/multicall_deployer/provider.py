"""JSON-RPC network provider for multicall-deployer."""

import itertools
import time
from typing import Any, Dict, List, Optional

import requests
from eth_utils import is_address, to_checksum_address
from loguru import logger

from .constants import DEFAULT_POLL_INTERVAL, DEFAULT_RECEIPT_TIMEOUT, DEFAULT_REQUEST_TIMEOUT
from .exceptions import ProviderError, RpcError, TransactionFailedError
from .types import ContractArtifact, DeployedContract, NetworkHandle


class JsonRpcProvider:
    """
    Minimal Ethereum JSON-RPC client for a development node.

    Transactions go through eth_sendTransaction, so the node signs them with
    its own unlocked accounts (Hardhat, Ganache, Anvil).
    """

    def __init__(
        self,
        network: NetworkHandle,
        timeout: float = DEFAULT_REQUEST_TIMEOUT,
        receipt_timeout: float = DEFAULT_RECEIPT_TIMEOUT,
        poll_interval: float = DEFAULT_POLL_INTERVAL,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the provider.

        Args:
            network: Target network (name and RPC URL)
            timeout: Per-request HTTP timeout in seconds
            receipt_timeout: How long to wait for a transaction to be mined
            poll_interval: Delay between receipt polls in seconds
            session: Optional requests session to reuse
        """
        self.network = network
        self.timeout = timeout
        self.receipt_timeout = receipt_timeout
        self.poll_interval = poll_interval
        self._session = session or requests.Session()
        self._ids = itertools.count(1)

    def _call(self, method: str, params: Optional[List[Any]] = None) -> Any:
        """
        Make a single JSON-RPC call.

        Args:
            method: RPC method name
            params: Positional parameters

        Returns:
            The "result" member of the response

        Raises:
            ProviderError: If the HTTP request fails or the body is not JSON-RPC
            RpcError: If the node returns an error member
        """
        payload = {
            "jsonrpc": "2.0",
            "method": method,
            "params": params or [],
            "id": next(self._ids),
        }

        try:
            response = self._session.post(self.network.rpc_url, json=payload, timeout=self.timeout)
        except requests.RequestException as e:
            raise ProviderError(f"Network error during {method} call: {e}") from e

        if response.status_code != 200:
            raise ProviderError(f"RPC request {method} failed with status {response.status_code}")

        try:
            result = response.json()
        except ValueError as e:
            raise ProviderError(f"Invalid JSON in {method} response") from e

        if not isinstance(result, dict):
            raise ProviderError(f"Malformed {method} response: {result!r}")

        if "error" in result:
            error = result["error"] or {}
            if isinstance(error, dict):
                raise RpcError(method, error.get("code"), error.get("message", ""))
            raise RpcError(method, None, str(error))

        if "result" not in result:
            raise ProviderError(f"Missing result in {method} response")

        return result["result"]

    def chain_id(self) -> int:
        """Get the chain id reported by the node."""
        result = self._call("eth_chainId")
        try:
            return int(result, 16)
        except (TypeError, ValueError) as e:
            raise ProviderError(f"eth_chainId returned {result!r}") from e

    def list_accounts(self) -> List[str]:
        """
        Get the node's unlocked accounts, in node order.

        Returns:
            List of checksummed addresses

        Raises:
            ProviderError: If the call fails or an entry is not an address
        """
        accounts = self._call("eth_accounts")
        if not isinstance(accounts, list):
            raise ProviderError(f"eth_accounts returned {accounts!r}, expected a list")

        checksummed = []
        for account in accounts:
            if not isinstance(account, str) or not is_address(account):
                raise ProviderError(f"eth_accounts returned invalid address {account!r}")
            checksummed.append(to_checksum_address(account))
        return checksummed

    def send_transaction(self, transaction: Dict[str, Any]) -> str:
        """Submit a transaction for the node to sign; returns the transaction hash."""
        return self._call("eth_sendTransaction", [transaction])

    def get_transaction_receipt(self, transaction_hash: str) -> Optional[Dict[str, Any]]:
        return self._call("eth_getTransactionReceipt", [transaction_hash])

    def wait_for_receipt(self, transaction_hash: str) -> Dict[str, Any]:
        """
        Poll until a transaction is mined.

        Args:
            transaction_hash: Hash returned by send_transaction

        Returns:
            Transaction receipt

        Raises:
            ProviderError: If the node answers with something other than a receipt
            TransactionFailedError: If no receipt appears within receipt_timeout
        """
        deadline = time.monotonic() + self.receipt_timeout
        while True:
            receipt = self.get_transaction_receipt(transaction_hash)
            if isinstance(receipt, dict):
                return receipt
            if receipt is not None:
                raise ProviderError(f"Malformed receipt for {transaction_hash}: {receipt!r}")
            if time.monotonic() >= deadline:
                raise TransactionFailedError(
                    transaction_hash, f"not mined within {self.receipt_timeout} seconds"
                )
            time.sleep(self.poll_interval)

    def deploy(
        self, artifact: ContractArtifact, from_account: str, gas: Optional[int] = None
    ) -> DeployedContract:
        """
        Deploy a contract and wait for it to be mined.

        Args:
            artifact: Contract to deploy (no constructor arguments)
            from_account: Unlocked account that signs the creation transaction
            gas: Optional gas limit; the node estimates when omitted

        Returns:
            DeployedContract with the new contract address

        Raises:
            ProviderError: If the node rejects the transaction or is unreachable
            TransactionFailedError: If the transaction reverts, times out or
                                    yields no contract address
        """
        transaction: Dict[str, Any] = {"from": from_account, "data": artifact.bytecode}
        if gas is not None:
            transaction["gas"] = hex(gas)

        transaction_hash = self.send_transaction(transaction)
        logger.debug(f"{artifact.name} creation transaction sent: {transaction_hash}")

        receipt = self.wait_for_receipt(transaction_hash)

        # Pre-Byzantium receipts have no status field
        status = receipt.get("status")
        block = receipt.get("blockNumber")
        try:
            status = int(status, 16) if status is not None else None
            block = int(block, 16) if block is not None else None
        except (TypeError, ValueError) as e:
            raise TransactionFailedError(transaction_hash, f"malformed receipt: {e}") from e

        if status is not None and status != 1:
            raise TransactionFailedError(transaction_hash, "reverted")

        address = receipt.get("contractAddress")
        if not isinstance(address, str) or not is_address(address):
            raise TransactionFailedError(
                transaction_hash, f"receipt has no valid contract address ({address!r})"
            )

        return DeployedContract(
            name=artifact.name,
            address=to_checksum_address(address),
            artifact=artifact,
            deployer=from_account,
            transaction_hash=transaction_hash,
            block=block,
        )
