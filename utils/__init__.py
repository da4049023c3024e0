"""
Utilities Package
Network configuration and logging setup
"""

from .network_manager import NetworkManager
from .logger import setup_logging

__all__ = ['NetworkManager', 'setup_logging']
