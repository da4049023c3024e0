"""
Deployment Exceptions
Errors raised while resolving, submitting and confirming contract deployments
"""

from typing import Optional


class ArtifactNotFoundError(Exception):
    """Raised when a contract name does not resolve to exactly one artifact"""


class ContractDeploymentError(Exception):
    """Raised when a contract cannot be deployed or its deployment did not produce a contract"""


class TransactionRevertedError(ContractDeploymentError):
    """Raised when the deployment transaction was mined with status 0"""

    def __init__(self, tx_hash: str, receipt=None):
        self.tx_hash = tx_hash
        self.receipt = receipt
        super().__init__(f"Deployment transaction {tx_hash} reverted")


class DeploymentFailure(Exception):
    """
    Single error kind reported by the deployment runner

    Wraps whatever the framework raised (RPC errors, reverts,
    gas failures, missing artifacts).
    """

    def __init__(self, contract_name: str, cause: Optional[BaseException] = None):
        self.contract_name = contract_name
        self.cause = cause
        message = f"Failed to deploy {contract_name}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)
