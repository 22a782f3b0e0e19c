"""Shared pytest fixtures for multicall-deployer tests."""

import json
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional

import pytest
import responses

from multicall_deployer.artifacts import ArtifactStore
from multicall_deployer.exceptions import ProviderError
from multicall_deployer.types import ContractArtifact, DeployedContract, NetworkHandle

RPC_URL = "http://test-rpc.example.com"

# Hardhat node's first three default accounts
ACCOUNTS = [
    "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266",
    "0x70997970C51812dc3A010C7d01b50e0d17dc79C8",
    "0x3C44CdDdB6a900fa2b585dd299e03d12FA4293BC",
]

# Addresses handed out to successive contract creations
CONTRACT_ADDRESSES = [
    "0x5FbDB2315678afecb367f032d93F642f64180aa3",
    "0xe7f1725E7734CE288F8367e1Bb143E90bb3F0512",
    "0x9fE46736679d2D9a65F0992F2272dE9f3c7fa6e0",
]


class FakeProvider:
    """In-memory provider that records every deploy call."""

    def __init__(
        self,
        accounts: Optional[List[str]] = None,
        fail_on: Optional[str] = None,
        accounts_error: bool = False,
    ):
        self.network = NetworkHandle(name="hardhat", rpc_url=RPC_URL, chain_id=31337)
        self.accounts = list(ACCOUNTS) if accounts is None else accounts
        self.fail_on = fail_on
        self.accounts_error = accounts_error
        self.deploy_calls: List[tuple] = []

    def list_accounts(self) -> List[str]:
        if self.accounts_error:
            raise ProviderError("connection refused")
        return list(self.accounts)

    def deploy(self, artifact: ContractArtifact, from_account: str) -> DeployedContract:
        self.deploy_calls.append((artifact.name, from_account))
        if artifact.name == self.fail_on:
            raise ProviderError("execution reverted")
        return DeployedContract(
            name=artifact.name,
            address=CONTRACT_ADDRESSES[len(self.deploy_calls) - 1],
            artifact=artifact,
            deployer=from_account,
            transaction_hash="0x" + f"{len(self.deploy_calls):064x}",
            block=len(self.deploy_calls),
        )


class FakeNode:
    """Stateful JSON-RPC node answering through a responses callback."""

    def __init__(self, accounts: Optional[List[str]] = None, chain_id: int = 31337):
        self.accounts = [a.lower() for a in (ACCOUNTS if accounts is None else accounts)]
        self.chain_id = chain_id
        self.sent: List[Dict[str, Any]] = []
        self.receipts: Dict[str, Dict[str, Any]] = {}
        self.pending_polls = 0  # Null receipts returned before each real one
        self.revert = False
        self.receipt_overrides: Dict[str, Any] = {}
        self.methods: List[str] = []

    def _result(self, method: str, params: List[Any]) -> Any:
        if method == "eth_accounts":
            return self.accounts
        if method == "eth_chainId":
            return hex(self.chain_id)
        if method == "eth_sendTransaction":
            tx = params[0]
            self.sent.append(tx)
            index = len(self.sent)
            tx_hash = "0x" + f"{index:064x}"
            self.receipts[tx_hash] = {
                "transactionHash": tx_hash,
                "blockNumber": hex(index),
                "from": tx["from"].lower(),
                "contractAddress": CONTRACT_ADDRESSES[index - 1].lower(),
                "status": "0x0" if self.revert else "0x1",
                "_polls": self.pending_polls,
            }
            self.receipts[tx_hash].update(self.receipt_overrides)
            return tx_hash
        if method == "eth_getTransactionReceipt":
            receipt = self.receipts.get(params[0])
            if receipt is None:
                return None
            if receipt["_polls"] > 0:
                receipt["_polls"] -= 1
                return None
            return {k: v for k, v in receipt.items() if not k.startswith("_")}
        raise AssertionError(f"Unexpected RPC method {method}")

    def callback(self, request):
        body = json.loads(request.body)
        self.methods.append(body["method"])
        result = self._result(body["method"], body["params"])
        return (
            200,
            {},
            json.dumps({"jsonrpc": "2.0", "id": body["id"], "result": result}),
        )


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def hardhat_artifacts_dir(fixtures_dir: Path) -> Path:
    """Return the sample Hardhat artifacts tree."""
    return fixtures_dir / "hardhat"


@pytest.fixture
def truffle_artifacts_dir(fixtures_dir: Path) -> Path:
    """Return the sample Truffle build/contracts directory."""
    return fixtures_dir / "truffle"


@pytest.fixture
def artifact_store(hardhat_artifacts_dir: Path) -> ArtifactStore:
    """Artifact store holding Multicall2 and BalanceChecker."""
    return ArtifactStore.from_directory(hardhat_artifacts_dir)


@pytest.fixture
def fake_provider() -> FakeProvider:
    """Provider with three accounts that deploys everything successfully."""
    return FakeProvider()


@pytest.fixture
def network() -> NetworkHandle:
    return NetworkHandle(name="hardhat", rpc_url=RPC_URL, chain_id=31337)


@pytest.fixture
def fake_node() -> Iterator[FakeNode]:
    """Register a stateful fake JSON-RPC node at RPC_URL."""
    node = FakeNode()
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        rsps.add_callback(
            responses.POST,
            RPC_URL,
            callback=node.callback,
            content_type="application/json",
        )
        yield node


@pytest.fixture
def make_provider():
    """Factory for FakeProvider variants (short account lists, failures)."""
    return FakeProvider


@pytest.fixture
def accounts() -> List[str]:
    return list(ACCOUNTS)


@pytest.fixture
def contract_addresses() -> List[str]:
    return list(CONTRACT_ADDRESSES)


@pytest.fixture
def rpc_url() -> str:
    return RPC_URL
