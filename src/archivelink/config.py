"""Configuration for archivelink"""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


def _env_timeout(name: str) -> float | None:
    value = os.getenv(name, "")
    try:
        return float(value) if value else None
    except ValueError:
        return None


class Config:
    """Environment-driven configuration"""

    # Paths
    CONFIG_DIR = Path.home() / ".config" / "archivelink"
    SETTINGS_PATH = Path(os.getenv("ARCHIVELINK_SETTINGS", str(CONFIG_DIR / "settings.json")))

    # Archiving binary
    MONOLITH_BIN = os.getenv("MONOLITH_BIN", "monolith")
    # Seconds; unset means wait for the process to exit
    ARCHIVE_TIMEOUT = _env_timeout("ARCHIVE_TIMEOUT")

    # Hotkey (daemon mode)
    HOTKEY_MODIFIER = os.getenv("HOTKEY_MODIFIER", "alt")
    HOTKEY_KEY = os.getenv("HOTKEY_KEY", "a")

    # Notifications
    NOTIFICATIONS_ENABLED = _env_bool("NOTIFICATIONS_ENABLED", "true")
    NOTIFY_TIMEOUT = int(os.getenv("NOTIFY_TIMEOUT", "2"))

    DEBUG = _env_bool("DEBUG", "false")

    @classmethod
    def create_dirs(cls):
        cls.SETTINGS_PATH.parent.mkdir(parents=True, exist_ok=True)


config = Config()
