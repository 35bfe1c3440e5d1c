"""Desktop notifications for archivelink"""

import logging
import subprocess

from .config import config

logger = logging.getLogger(__name__)


def notify(title: str, message: str, timeout: int | None = None):
    """Show desktop notification"""
    if not config.NOTIFICATIONS_ENABLED:
        return
    seconds = config.NOTIFY_TIMEOUT if timeout is None else timeout
    try:
        subprocess.run(
            ["notify-send", "-t", str(seconds * 1000), title, message],
            timeout=2,
            capture_output=True,
        )
    except (FileNotFoundError, subprocess.TimeoutExpired) as e:
        # Notifications are optional
        logger.debug("notify-send unavailable: %s", e)
