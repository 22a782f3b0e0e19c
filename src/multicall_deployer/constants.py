"""Configuration constants for multicall-deployer."""

# Contracts deployed by a run, in deployment order
MULTICALL = "Multicall2"
BALANCE_CHECKER = "BalanceChecker"
REQUIRED_CONTRACTS = (MULTICALL, BALANCE_CHECKER)

# Console labels printed above each deployed address
CONTRACT_LABELS = {
    MULTICALL: "Multicall Address",
    BALANCE_CHECKER: "Balance Batcher Address",
}

# Account 0 is left to the test suite's owner role; support contracts come from account 1
DEFAULT_SIGNER_INDEX = 1

DEFAULT_NETWORK_NAME = "localhost"
DEFAULT_RPC_URL = "http://127.0.0.1:8545"  # Hardhat / Ganache node default

DEFAULT_REQUEST_TIMEOUT = 30
DEFAULT_RECEIPT_TIMEOUT = 120
DEFAULT_POLL_INTERVAL = 0.5

DEFAULT_LOG_LEVEL = "WARNING"

# Environment variables read by DeployerConfig.from_env
ENV_NETWORK = "DEPLOYER_NETWORK"
ENV_RPC_URL = "DEPLOYER_RPC_URL"
ENV_CHAIN_ID = "DEPLOYER_CHAIN_ID"
ENV_ARTIFACTS_DIR = "DEPLOYER_ARTIFACTS_DIR"
ENV_SIGNER_INDEX = "DEPLOYER_SIGNER_INDEX"
ENV_RECEIPT_TIMEOUT = "DEPLOYER_RECEIPT_TIMEOUT"
ENV_POLL_INTERVAL = "DEPLOYER_POLL_INTERVAL"
ENV_RECORD_PATH = "DEPLOYER_RECORD_PATH"
ENV_LOG_LEVEL = "DEPLOYER_LOG_LEVEL"

# Artifact file markers
HARDHAT_FORMAT_PREFIX = "hh-sol-artifact"
HARDHAT_DEBUG_SUFFIX = ".dbg.json"
HARDHAT_BUILD_INFO_DIR = "build-info"
SOLIDITY_SUFFIX = ".sol"
