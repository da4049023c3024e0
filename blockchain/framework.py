"""
Contract Framework
Entry point for deployments: resolves artifacts into contract factories
bound to a connected network and signer
"""

from typing import Optional
from web3 import Web3
from loguru import logger

from utils.network_manager import NetworkManager
from .artifacts import ArtifactLoader
from .contract_factory import ContractFactory
from .signer import select_signer


class ContractFramework:
    """
    Hands out contract factories for compiled artifacts
    """

    def __init__(
        self,
        w3: Web3,
        signer,
        artifact_loader: ArtifactLoader,
        confirmation_timeout: float = 300,
        poll_latency: float = 0.1
    ):
        """
        Initialize Contract Framework

        Args:
            w3: Connected Web3 instance
            signer: Deployer signer
            artifact_loader: Artifact lookup
            confirmation_timeout: Seconds to wait for deployment receipts
            poll_latency: Seconds between receipt polls
        """
        self.w3 = w3
        self.signer = signer
        self.artifact_loader = artifact_loader
        self.confirmation_timeout = confirmation_timeout
        self.poll_latency = poll_latency

    @classmethod
    def from_environment(cls, network_manager: Optional[NetworkManager] = None):
        """
        Build framework from network config and environment

        Args:
            network_manager: Pre-built network manager (None = load from environment)

        Returns:
            ContractFramework
        """
        network_manager = network_manager or NetworkManager()
        w3 = network_manager.get_web3()

        signer = select_signer(
            w3,
            private_key=network_manager.private_key,
            account_index=network_manager.account_index,
            chain_id=network_manager.chain_id
        )

        return cls(
            w3,
            signer,
            ArtifactLoader(network_manager.artifacts_path),
            confirmation_timeout=network_manager.confirmation_timeout,
            poll_latency=network_manager.poll_latency
        )

    def get_contract_factory(self, name: str) -> ContractFactory:
        """
        Get factory for a compiled contract

        Args:
            name: Bare or fully qualified contract name

        Returns:
            ContractFactory
        """
        artifact = self.artifact_loader.load(name)

        logger.debug(f"Resolved {name} to {artifact.fully_qualified_name}")

        return ContractFactory(
            self.w3,
            artifact,
            self.signer,
            confirmation_timeout=self.confirmation_timeout,
            poll_latency=self.poll_latency
        )
