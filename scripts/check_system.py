"""
System Check Script
Verifies configuration, node connection, deployer account and contract
artifact before running a deployment
"""

import sys
from loguru import logger

from blockchain.artifacts import ArtifactLoader
from blockchain.deployment_runner import CONTRACT_NAME
from blockchain.signer import select_signer
from utils.logger import setup_logging
from utils.network_manager import NetworkManager


def check_configuration():
    """Check if the network configuration loads"""
    logger.info("Checking network configuration...")

    network_manager = NetworkManager()
    logger.info(f"  Config: {network_manager.config_path}")
    logger.info(f"  RPC URL: {network_manager.rpc_url}")

    logger.success(f"✓ Network {network_manager.network_name!r} configured")
    return network_manager


def check_rpc_connection(network_manager: NetworkManager) -> bool:
    """Check the node is reachable"""
    logger.info("Checking RPC connection...")

    if not network_manager.is_healthy():
        logger.error(f"  ✗ {network_manager.network_name}: Connection failed")
        return False

    status = network_manager.get_network_status()
    logger.success(
        f"  ✓ {status['network']}: Connected "
        f"(Chain id: {status['chain_id']}, Block: {status['block_number']})"
    )
    return True


def check_deployer_account(network_manager: NetworkManager) -> bool:
    """Check the deployer account resolves and report its balance"""
    logger.info("Checking deployer account...")

    w3 = network_manager.get_web3()
    signer = select_signer(
        w3,
        private_key=network_manager.private_key,
        account_index=network_manager.account_index,
        chain_id=network_manager.chain_id
    )

    balance = w3.from_wei(w3.eth.get_balance(signer.address), 'ether')
    logger.info(f"  Deployer: {signer.address}")
    logger.info(f"  Balance: {balance:.4f} ETH")

    if balance <= 0:
        logger.warning("  ⚠ Deployer has no funds for gas")
        return False

    logger.success("  ✓ Deployer account ready")
    return True


def check_contract_artifact(network_manager: NetworkManager) -> bool:
    """Check the contract has been compiled and can be deployed"""
    logger.info("Checking contract artifact...")

    artifact = ArtifactLoader(network_manager.artifacts_path).load(CONTRACT_NAME)

    if not artifact.is_deployable:
        logger.error(f"  ✗ {artifact.fully_qualified_name} is abstract")
        return False

    logger.success(f"  ✓ {artifact.fully_qualified_name}")
    return True


def main():
    """Run all system checks"""
    setup_logging()

    logger.info("=" * 70)
    logger.info("Deployment System Check")
    logger.info("=" * 70)

    try:
        network_manager = check_configuration()
    except Exception as e:
        logger.error(f"Error in Network Configuration: {e}")
        return 1

    checks = [
        ("RPC Connection", check_rpc_connection),
        ("Deployer Account", check_deployer_account),
        ("Contract Artifact", check_contract_artifact)
    ]

    results = [("Network Configuration", True)]

    for name, check_func in checks:
        logger.info("")
        try:
            result = check_func(network_manager)
            results.append((name, result))
        except Exception as e:
            logger.error(f"Error in {name}: {e}")
            results.append((name, False))

    # Summary
    logger.info("")
    logger.info("=" * 70)
    logger.info("Summary")
    logger.info("=" * 70)

    passed = sum(1 for _, result in results if result)
    total = len(results)

    for name, result in results:
        status = "✓ PASS" if result else "✗ FAIL"
        logger.info(f"  {status}: {name}")

    logger.info("")
    logger.info(f"Total: {passed}/{total} checks passed")

    if passed == total:
        logger.success("✅ Ready to deploy!")
        logger.info("Deploy: python deploy.py")
        return 0
    else:
        logger.error("❌ Not ready - fix issues above")
        return 1


if __name__ == "__main__":
    sys.exit(main())
