# File: scripts/authenticate.py
"""
One-time Google Calendar authorization.
Opens the browser consent screen and saves token.json next to credentials.json.
"""

import sys
from pathlib import Path

# Add project root to Python path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from sceudl.core.config_manager import Config
from sceudl.auth.google_auth import create_initial_token
from sceudl.utils.logger import setup_logger

logger = setup_logger(__name__)


def main() -> int:
    """
    Run the OAuth flow.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    logger.info("=" * 60)
    logger.info("SCEUDL Google Calendar setup")
    logger.info("=" * 60)

    if not Config.validate():
        logger.warning("Configuration is incomplete; calendar sync needs credentials.json")

    if not create_initial_token():
        logger.error("Authorization failed")
        return 1

    logger.info("Calendar sync is ready")
    return 0


if __name__ == "__main__":
    sys.exit(main())
