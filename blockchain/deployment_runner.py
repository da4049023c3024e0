"""
YieldManager Deployment Runner
Deploys the YieldManager contract and reports its address
"""

from dataclasses import dataclass
from typing import Optional
from loguru import logger

from utils.logger import setup_logging
from .exceptions import DeploymentFailure
from .framework import ContractFramework

CONTRACT_NAME = "YieldManager"
CONSTRUCTOR_ARGS = ("",)


@dataclass(frozen=True)
class DeploymentResult:
    """Outcome of a deployment run; address is set if and only if it succeeded"""

    contract_address: Optional[str]
    success: bool

    def __post_init__(self):
        if bool(self.contract_address) != self.success:
            raise ValueError(
                f"contract_address must be set if and only if success is true "
                f"(got address={self.contract_address!r}, success={self.success})"
            )


class DeploymentRunner:
    """
    One-shot deployment of a fixed contract with fixed constructor arguments
    """

    def __init__(self, framework, contract_name: str = CONTRACT_NAME):
        """
        Initialize Deployment Runner

        Args:
            framework: Object exposing get_contract_factory(name)
            contract_name: Contract to deploy
        """
        self.framework = framework
        self.contract_name = contract_name

    def run(self) -> DeploymentResult:
        """
        Deploy the contract and wait for confirmation

        Returns:
            Successful DeploymentResult

        Raises:
            DeploymentFailure: wrapping whatever went wrong underneath
        """
        logger.info(f"Deploying {self.contract_name}...")

        try:
            factory = self.framework.get_contract_factory(self.contract_name)
            pending = factory.deploy(*CONSTRUCTOR_ARGS)
            deployed = pending.deployed()
            address = deployed.address
        except Exception as e:
            raise DeploymentFailure(self.contract_name, e) from e

        print(f"{self.contract_name} deployed to: {address}")

        return DeploymentResult(contract_address=address, success=True)


def deploy_from_environment() -> DeploymentResult:
    """
    Connect using the environment's network config and deploy

    Returns:
        Successful DeploymentResult

    Raises:
        DeploymentFailure: also for config, connection and signer errors
    """
    try:
        framework = ContractFramework.from_environment()
    except Exception as e:
        raise DeploymentFailure(CONTRACT_NAME, e) from e

    return DeploymentRunner(framework).run()


def main() -> int:
    """
    Run the deployment as a script

    Returns:
        Process exit code (0 on success, 1 on any error)
    """
    setup_logging()

    try:
        deploy_from_environment()
    except DeploymentFailure as e:
        logger.opt(exception=e).error(f"Deployment failed: {e}")
        return 1

    return 0
