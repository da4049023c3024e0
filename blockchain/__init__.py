"""
Blockchain Deployment Package
Handles artifact lookup, contract factories, signing and the deployment runner
"""

from .artifacts import ArtifactLoader, ContractArtifact
from .contract_factory import ContractFactory, PendingContract, DeployedContract
from .deployment_runner import DeploymentRunner, DeploymentResult
from .exceptions import (
    ArtifactNotFoundError,
    ContractDeploymentError,
    DeploymentFailure,
    TransactionRevertedError,
)
from .framework import ContractFramework
from .signer import LocalAccountSigner, NodeAccountSigner

__all__ = [
    'ArtifactLoader',
    'ContractArtifact',
    'ContractFactory',
    'PendingContract',
    'DeployedContract',
    'DeploymentRunner',
    'DeploymentResult',
    'ArtifactNotFoundError',
    'ContractDeploymentError',
    'DeploymentFailure',
    'TransactionRevertedError',
    'ContractFramework',
    'LocalAccountSigner',
    'NodeAccountSigner'
]
