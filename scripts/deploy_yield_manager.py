"""
Smart Contract Deployment Script
Deploys the YieldManager contract to the configured network
"""

import sys

from blockchain.deployment_runner import main


if __name__ == "__main__":
    sys.exit(main())
