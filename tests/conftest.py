"""
Shared fixtures for deployment tests
"""

import json
import pytest
from unittest.mock import Mock
from loguru import logger

from blockchain.artifacts import ContractArtifact


DEPLOYER = '0xf39fd6e51aad88f6f4ce6ab8827279cfffb92266'
SECOND_ACCOUNT = '0x70997970c51812dc3a010c7d01b50e0d17dc79c8'
CONTRACT_ADDRESS = '0x5fbdb2315678afecb367f032d93f642f64180aa3'
TX_HASH = bytes.fromhex('ab' * 32)

YIELD_MANAGER_ABI = [
    {
        "inputs": [{"internalType": "string", "name": "_name", "type": "string"}],
        "stateMutability": "nonpayable",
        "type": "constructor"
    },
    {
        "inputs": [],
        "name": "owner",
        "outputs": [{"internalType": "address", "name": "", "type": "address"}],
        "stateMutability": "view",
        "type": "function"
    }
]

YIELD_MANAGER_BYTECODE = '0x608060405234801561001057600080fd5b50'


def write_artifact(artifacts_dir, source_name, contract_name, abi=None, bytecode=YIELD_MANAGER_BYTECODE):
    """Write a Hardhat-style artifact (plus its debug file) under artifacts_dir"""
    contract_dir = artifacts_dir / source_name
    contract_dir.mkdir(parents=True, exist_ok=True)

    artifact = {
        "_format": "hh-sol-artifact-1",
        "contractName": contract_name,
        "sourceName": source_name,
        "abi": YIELD_MANAGER_ABI if abi is None else abi,
        "bytecode": bytecode,
        "deployedBytecode": bytecode,
        "linkReferences": {},
        "deployedLinkReferences": {}
    }
    (contract_dir / f"{contract_name}.json").write_text(json.dumps(artifact))
    (contract_dir / f"{contract_name}.dbg.json").write_text(
        json.dumps({"_format": "hh-sol-dbg-1", "buildInfo": "../../build-info/abc.json"})
    )
    return contract_dir / f"{contract_name}.json"


@pytest.fixture
def artifacts_dir(tmp_path):
    """Artifacts directory holding a compiled YieldManager"""
    path = tmp_path / "artifacts"
    write_artifact(path, "contracts/YieldManager.sol", "YieldManager")
    (path / "build-info").mkdir()
    (path / "build-info" / "abc.json").write_text("{}")
    return path


@pytest.fixture
def artifact():
    """Compiled YieldManager"""
    return ContractArtifact(
        contract_name="YieldManager",
        source_name="contracts/YieldManager.sol",
        abi=YIELD_MANAGER_ABI,
        bytecode=YIELD_MANAGER_BYTECODE
    )


@pytest.fixture
def w3():
    """Mock Web3 instance with a mined, successful deployment"""
    w3 = Mock()
    w3.eth.accounts = [DEPLOYER, SECOND_ACCOUNT]
    w3.eth.wait_for_transaction_receipt.return_value = {
        'status': 1,
        'contractAddress': CONTRACT_ADDRESS,
        'blockNumber': 1,
        'gasUsed': 250000
    }
    return w3


@pytest.fixture
def signer():
    """Mock signer returning a fixed transaction hash"""
    signer = Mock()
    signer.address = DEPLOYER
    signer.send_deployment.return_value = TX_HASH
    return signer


@pytest.fixture
def quiet_logging(monkeypatch):
    """Keep script log output on stderr only and drop sinks afterwards"""
    monkeypatch.setenv('DEPLOY_LOG_FILE', '')
    yield
    logger.remove()
