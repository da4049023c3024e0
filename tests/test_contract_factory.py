"""
Contract Factory Tests
Deployment submission and receipt handling against a mocked node
"""

import pytest
from web3 import Web3
from web3.exceptions import TimeExhausted

from blockchain.artifacts import ContractArtifact
from blockchain.contract_factory import ContractFactory, PendingContract
from blockchain.exceptions import ContractDeploymentError, TransactionRevertedError

from conftest import CONTRACT_ADDRESS, TX_HASH, YIELD_MANAGER_ABI


class TestContractFactory:
    """Test deployment transaction submission"""

    def test_contract_class_built_from_artifact(self, w3, artifact, signer):
        ContractFactory(w3, artifact, signer)

        w3.eth.contract.assert_called_once_with(abi=artifact.abi, bytecode=artifact.bytecode)

    def test_deploy_sends_constructor_through_signer(self, w3, artifact, signer):
        factory = ContractFactory(w3, artifact, signer)

        pending = factory.deploy("")

        w3.eth.contract.return_value.constructor.assert_called_once_with("")
        signer.send_deployment.assert_called_once_with(
            w3.eth.contract.return_value.constructor.return_value
        )
        assert isinstance(pending, PendingContract)
        assert pending.tx_hash == TX_HASH
        assert pending.tx_hash_hex == '0x' + 'ab' * 32

    def test_deploy_passes_timeouts_to_pending(self, w3, artifact, signer):
        factory = ContractFactory(w3, artifact, signer, confirmation_timeout=42, poll_latency=0.5)

        pending = factory.deploy("")

        assert pending.confirmation_timeout == 42
        assert pending.poll_latency == 0.5

    def test_wrong_argument_count(self, w3, artifact, signer):
        factory = ContractFactory(w3, artifact, signer)

        with pytest.raises(ValueError, match="expects 1 argument"):
            factory.deploy()

        signer.send_deployment.assert_not_called()

    def test_abstract_contract_rejected(self, w3, signer):
        interface = ContractArtifact(
            contract_name="IYieldSource",
            source_name="contracts/interfaces/IYieldSource.sol",
            abi=[],
            bytecode="0x"
        )

        with pytest.raises(ContractDeploymentError, match="abstract"):
            ContractFactory(w3, interface, signer)

    def test_signer_error_propagates(self, w3, artifact, signer):
        signer.send_deployment.side_effect = ValueError("insufficient funds for gas * price + value")
        factory = ContractFactory(w3, artifact, signer)

        with pytest.raises(ValueError, match="insufficient funds"):
            factory.deploy("")


class TestPendingContract:
    """Test waiting for deployment confirmation"""

    def test_deployed_returns_checksummed_address(self, w3, artifact):
        pending = PendingContract(w3, artifact, TX_HASH, confirmation_timeout=10, poll_latency=0)

        deployed = pending.deployed()

        assert deployed.address == Web3.to_checksum_address(CONTRACT_ADDRESS)
        w3.eth.wait_for_transaction_receipt.assert_called_once_with(
            TX_HASH, timeout=10, poll_latency=0
        )

    def test_deployed_binds_contract_instance(self, w3, artifact):
        deployed = PendingContract(w3, artifact, TX_HASH).deployed()

        w3.eth.contract.assert_called_with(
            address=Web3.to_checksum_address(CONTRACT_ADDRESS),
            abi=YIELD_MANAGER_ABI
        )
        assert deployed.functions is w3.eth.contract.return_value.functions
        assert deployed.receipt['blockNumber'] == 1

    def test_deployed_waits_once(self, w3, artifact):
        pending = PendingContract(w3, artifact, TX_HASH)

        first = pending.deployed()
        second = pending.deployed()

        assert first is second
        assert w3.eth.wait_for_transaction_receipt.call_count == 1

    def test_reverted_transaction(self, w3, artifact):
        receipt = {'status': 0, 'contractAddress': None, 'blockNumber': 1, 'gasUsed': 30000}
        w3.eth.wait_for_transaction_receipt.return_value = receipt

        with pytest.raises(TransactionRevertedError) as exc_info:
            PendingContract(w3, artifact, TX_HASH).deployed()

        assert exc_info.value.tx_hash == '0x' + 'ab' * 32
        assert exc_info.value.receipt is receipt
        assert isinstance(exc_info.value, ContractDeploymentError)

    def test_receipt_without_contract_address(self, w3, artifact):
        w3.eth.wait_for_transaction_receipt.return_value = {
            'status': 1, 'contractAddress': None, 'blockNumber': 1, 'gasUsed': 21000
        }

        with pytest.raises(ContractDeploymentError, match="created no contract"):
            PendingContract(w3, artifact, TX_HASH).deployed()

    def test_timeout_propagates(self, w3, artifact):
        w3.eth.wait_for_transaction_receipt.side_effect = TimeExhausted("not in chain after 300 seconds")

        with pytest.raises(TimeExhausted):
            PendingContract(w3, artifact, TX_HASH).deployed()
