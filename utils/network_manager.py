"""
Network Manager
Loads network configuration and opens the Web3 connection used for deployment
"""

import os
import json
from typing import Dict, Optional
from web3 import Web3
from loguru import logger
from dotenv import load_dotenv

load_dotenv()

DEFAULT_CONFIG_PATH = 'config/network_config.json'

DEPLOYMENT_DEFAULTS = {
    'confirmation_timeout': 300,
    'poll_latency': 0.1,
    'artifacts_path': 'artifacts'
}


class NetworkManager:
    """
    Network selection for deployments

    The active network comes from DEPLOY_NETWORK, falling back to
    `default_network` in the config file. Each network names either a
    literal `url` or a `url_env` variable, and optionally a
    `private_key_env` variable holding the deployer key.
    """

    def __init__(self, config_path: Optional[str] = None, network: Optional[str] = None):
        """
        Initialize Network Manager

        Args:
            config_path: Path to network config (None = DEPLOY_CONFIG_PATH or default)
            network: Network name (None = DEPLOY_NETWORK or config default)
        """
        self.config_path = config_path or os.getenv('DEPLOY_CONFIG_PATH', DEFAULT_CONFIG_PATH)

        with open(self.config_path, 'r') as f:
            self.config = json.load(f)

        self.network_name = network or os.getenv('DEPLOY_NETWORK') or self.config.get('default_network')

        networks = self.config.get('networks', {})
        if self.network_name not in networks:
            raise ValueError(
                f"Unknown network {self.network_name!r} "
                f"(configured: {', '.join(sorted(networks)) or 'none'})"
            )

        self.network = networks[self.network_name]
        self.deployment = {**DEPLOYMENT_DEFAULTS, **self.config.get('deployment', {})}

        self.w3 = None

        logger.info(f"Network Manager initialized - network: {self.network_name}")

    @property
    def rpc_url(self) -> str:
        """RPC URL of the active network"""
        if 'url' in self.network:
            return self.network['url']

        url_env = self.network.get('url_env')
        url = os.getenv(url_env) if url_env else None

        if not url:
            raise ValueError(f"{url_env or 'url'} must be set for network {self.network_name!r}")

        return url

    @property
    def private_key(self) -> Optional[str]:
        key_env = self.network.get('private_key_env')
        return os.getenv(key_env) if key_env else None

    @property
    def chain_id(self) -> Optional[int]:
        return self.network.get('chain_id')

    @property
    def account_index(self) -> int:
        return int(self.network.get('account_index', 0))

    @property
    def confirmation_timeout(self) -> float:
        return float(self.deployment['confirmation_timeout'])

    @property
    def poll_latency(self) -> float:
        return float(self.deployment['poll_latency'])

    @property
    def artifacts_path(self) -> str:
        return self.deployment['artifacts_path']

    def get_web3(self) -> Web3:
        """
        Get connected Web3 instance for the active network

        Returns:
            Web3 instance
        """
        if self.w3 is not None:
            return self.w3

        w3 = Web3(Web3.HTTPProvider(self.rpc_url))

        if not w3.is_connected():
            raise ConnectionError(f"Failed to connect to network {self.network_name!r}")

        logger.success(f"Connected to {self.network_name} (chain id {w3.eth.chain_id})")

        self.w3 = w3
        return w3

    def is_healthy(self) -> bool:
        """
        Check if the active network is reachable

        Returns:
            True if healthy
        """
        try:
            return self.get_web3().is_connected()
        except Exception:
            return False

    def get_network_status(self) -> Dict:
        """Get summary of the active network"""
        w3 = self.get_web3()
        return {
            'network': self.network_name,
            'chain_id': w3.eth.chain_id,
            'block_number': w3.eth.block_number
        }
