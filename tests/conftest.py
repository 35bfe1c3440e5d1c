"""Pytest configuration and fixtures."""

import pytest

from archivelink.config import config


@pytest.fixture(autouse=True)
def no_desktop_notifications(monkeypatch):
    """Keep notify-send out of test runs."""
    monkeypatch.setattr(config, "NOTIFICATIONS_ENABLED", False)
