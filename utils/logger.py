"""
Logging Setup
Configures loguru sinks for deployment scripts
"""

import os
import sys
from loguru import logger

DEFAULT_LOG_FILE = "data/logs/deploy.log"


def setup_logging(level: str = None, log_file: str = None):
    """
    Send logs to stderr and a rotating file

    stdout is left to the deployment result line.

    Args:
        level: Console log level (None = DEPLOY_LOG_LEVEL or INFO)
        log_file: Log file path (None = DEPLOY_LOG_FILE or default, "" disables)
    """
    level = (level or os.getenv('DEPLOY_LOG_LEVEL', 'INFO')).upper()

    # Errors always reach stderr
    if logger.level(level).no > logger.level("ERROR").no:
        level = "ERROR"

    if log_file is None:
        log_file = os.getenv('DEPLOY_LOG_FILE', DEFAULT_LOG_FILE)

    logger.remove()
    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
        level=level
    )

    if log_file:
        logger.add(
            log_file,
            rotation="1 day",
            retention="7 days",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function} - {message}",
            level="DEBUG"
        )
