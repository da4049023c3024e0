"""
Contract Factory
Deploys a compiled artifact and tracks the deployment until it is mined
"""

from typing import Dict, Optional
from web3 import Web3
from loguru import logger

from .artifacts import ContractArtifact
from .exceptions import ContractDeploymentError, TransactionRevertedError


class DeployedContract:
    """Contract confirmed on chain"""

    def __init__(self, w3: Web3, address: str, abi, receipt: Dict):
        self.address = Web3.to_checksum_address(address)
        self.receipt = receipt
        self.contract = w3.eth.contract(address=self.address, abi=abi)

    @property
    def functions(self):
        return self.contract.functions

    def __repr__(self):
        return f"DeployedContract(address={self.address!r})"


class PendingContract:
    """
    Deployment transaction that has been sent but not yet confirmed
    """

    def __init__(
        self,
        w3: Web3,
        artifact: ContractArtifact,
        tx_hash,
        confirmation_timeout: float = 300,
        poll_latency: float = 0.1
    ):
        self.w3 = w3
        self.artifact = artifact
        self.tx_hash = tx_hash
        self.confirmation_timeout = confirmation_timeout
        self.poll_latency = poll_latency
        self._deployed: Optional[DeployedContract] = None

    @property
    def tx_hash_hex(self) -> str:
        return Web3.to_hex(self.tx_hash)

    def deployed(self) -> DeployedContract:
        """
        Block until the deployment transaction is mined

        Returns:
            DeployedContract

        Raises:
            TransactionRevertedError: constructor reverted (status 0)
            ContractDeploymentError: receipt carries no contract address
            web3.exceptions.TimeExhausted: not mined within the timeout
        """
        if self._deployed is not None:
            return self._deployed

        logger.info(f"Waiting for confirmation of {self.tx_hash_hex}...")

        receipt = self.w3.eth.wait_for_transaction_receipt(
            self.tx_hash,
            timeout=self.confirmation_timeout,
            poll_latency=self.poll_latency
        )

        if receipt['status'] != 1:
            raise TransactionRevertedError(self.tx_hash_hex, receipt)

        contract_address = receipt.get('contractAddress')
        if not contract_address:
            raise ContractDeploymentError(
                f"Transaction {self.tx_hash_hex} was mined but created no contract"
            )

        logger.success(f"{self.artifact.contract_name} mined in block {receipt.get('blockNumber')}")
        logger.debug(f"Gas used: {receipt.get('gasUsed')}")

        self._deployed = DeployedContract(self.w3, contract_address, self.artifact.abi, receipt)
        return self._deployed


class ContractFactory:
    """
    Produces deployment transactions for one compiled contract
    """

    def __init__(
        self,
        w3: Web3,
        artifact: ContractArtifact,
        signer,
        confirmation_timeout: float = 300,
        poll_latency: float = 0.1
    ):
        """
        Initialize Contract Factory

        Args:
            w3: Web3 instance
            artifact: Compiled contract
            signer: Signer that submits the constructor transaction
            confirmation_timeout: Seconds to wait for the receipt
            poll_latency: Seconds between receipt polls
        """
        if not artifact.is_deployable:
            raise ContractDeploymentError(
                f"You are trying to create a contract factory for the contract "
                f"{artifact.contract_name}, which is abstract and can't be deployed"
            )

        self.w3 = w3
        self.artifact = artifact
        self.signer = signer
        self.confirmation_timeout = confirmation_timeout
        self.poll_latency = poll_latency

        self.contract_class = w3.eth.contract(abi=artifact.abi, bytecode=artifact.bytecode)

    def deploy(self, *args) -> PendingContract:
        """
        Send the deployment transaction

        Args:
            *args: Constructor arguments

        Returns:
            PendingContract for the sent transaction
        """
        expected = len(self.artifact.constructor_inputs)
        if len(args) != expected:
            raise ValueError(
                f"{self.artifact.contract_name} constructor expects {expected} "
                f"argument(s), got {len(args)}"
            )

        logger.info(f"Sending {self.artifact.contract_name} deployment transaction...")

        tx_hash = self.signer.send_deployment(self.contract_class.constructor(*args))

        logger.info(f"Transaction sent: {Web3.to_hex(tx_hash)}")

        return PendingContract(
            self.w3,
            self.artifact,
            tx_hash,
            confirmation_timeout=self.confirmation_timeout,
            poll_latency=self.poll_latency
        )
