"""Unit tests for custom exception classes."""

import pytest

from multicall_deployer.exceptions import (
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


class TestExceptionCatching:
    """Test that exceptions can be caught as their base types."""

    def test_catch_artifact_not_found_as_lookup_error(self):
        """Test that ArtifactNotFoundError can be caught as LookupError."""
        with pytest.raises(LookupError):
            raise ArtifactNotFoundError("test")

    def test_catch_account_fetch_error_as_runtime_error(self):
        """Test that AccountFetchError can be caught as RuntimeError."""
        with pytest.raises(RuntimeError):
            raise AccountFetchError("test")

    def test_catch_defective_artifact_as_value_error(self):
        """Test that DefectiveArtifactError can be caught as ValueError."""
        with pytest.raises(ValueError):
            raise DefectiveArtifactError("test")

    def test_catch_record_not_found_as_file_not_found_error(self):
        """Test that RecordNotFoundError can be caught as FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            raise RecordNotFoundError("test")

    def test_catch_rpc_and_transaction_errors_as_provider_error(self):
        """Test that RPC-level failures share the ProviderError base."""
        with pytest.raises(ProviderError):
            raise RpcError("eth_accounts", -32601, "method not found")
        with pytest.raises(ProviderError):
            raise TransactionFailedError("0xabc", "reverted")

    def test_catch_all_as_deployer_error(self):
        """Test that all custom exceptions can be caught as DeployerError."""
        exceptions = [
            AccountFetchError("test"),
            ArtifactNotFoundError("test"),
            DefectiveArtifactError("test"),
            DeploymentError("Multicall2", "test"),
            ProviderError("test"),
            RpcError("eth_call", 3, "test"),
            TransactionFailedError("0xabc", "test"),
            AbiDecodeError("test"),
            ConfigError("test"),
            RecordNotFoundError("test"),
        ]

        for exc in exceptions:
            with pytest.raises(DeployerError):
                raise exc


class TestExceptionAttributes:
    """Test the extra context carried by some exceptions."""

    def test_deployment_error_carries_contract_name(self):
        exc = DeploymentError("BalanceChecker", "execution reverted")

        assert exc.contract_name == "BalanceChecker"
        assert str(exc) == "Failed to deploy BalanceChecker: execution reverted"

    def test_rpc_error_carries_method_and_code(self):
        exc = RpcError("eth_sendTransaction", -32000, "sender account not recognized")

        assert exc.method == "eth_sendTransaction"
        assert exc.code == -32000
        assert "sender account not recognized" in str(exc)

    def test_transaction_failed_error_carries_hash(self):
        exc = TransactionFailedError("0xdeadbeef", "reverted")

        assert exc.transaction_hash == "0xdeadbeef"
        assert "0xdeadbeef" in str(exc)

    def test_plain_exceptions_accept_string_messages(self):
        """Test that message-only exceptions keep their message."""
        for exc_class in [AccountFetchError, ArtifactNotFoundError, ProviderError, ConfigError]:
            exc = exc_class("test message")
            assert str(exc) == "test message"
