"""Env configuration adapter producing a structured AppConfig."""

from __future__ import annotations

from ..config import config as env_config
from ..core.config_model import AppConfig


def load_app_config() -> AppConfig:
    return AppConfig(
        debug=env_config.DEBUG,
        notifications_enabled=env_config.NOTIFICATIONS_ENABLED,
        monolith_bin=env_config.MONOLITH_BIN,
        archive_timeout=env_config.ARCHIVE_TIMEOUT,
        settings_path=str(env_config.SETTINGS_PATH),
    )
