"""
Contract Deployment Wrapper
Runs scripts/deploy_yield_manager.py
"""

import subprocess
import sys


def main() -> int:
    """Run the deployment script; stdout is left to its result line"""
    print("=" * 70, file=sys.stderr)
    print("YieldManager Contract Deployment", file=sys.stderr)
    print("=" * 70, file=sys.stderr)
    print(file=sys.stderr)

    result = subprocess.run(
        [sys.executable, "-m", "scripts.deploy_yield_manager"],
        cwd="."
    )

    return result.returncode


if __name__ == "__main__":
    sys.exit(main())
