"""Core configuration model (structured view)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AppConfig:
    debug: bool
    notifications_enabled: bool
    monolith_bin: str
    archive_timeout: float | None
    settings_path: str
