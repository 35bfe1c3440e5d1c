"""Persistent settings for archivelink.

A single record holding the flags passed to monolith and the folder archived
pages are written to. Loaded once at startup and saved whenever it changes.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path

from .exceptions import InvalidOutputPathError

logger = logging.getLogger(__name__)

DEFAULT_CLI_OPTS = ["--no-js", "--isolate"]


@dataclass
class ArchiveSettings:
    """Settings record.

    Attributes:
        cli_opts: Flags used when invoking monolith
        output_path: Folder where archived pages are saved
    """

    cli_opts: list[str] = field(default_factory=lambda: list(DEFAULT_CLI_OPTS))
    output_path: str = field(default_factory=lambda: str(Path.home()))

    @property
    def flags(self) -> str:
        """Flags as shown in the settings editor."""
        return " ".join(self.cli_opts)

    def to_dict(self) -> dict:
        return asdict(self)


_VALIDATORS = {
    "cli_opts": lambda value: isinstance(value, list) and all(isinstance(opt, str) for opt in value),
    "output_path": lambda value: isinstance(value, str) and value != "",
}


def load_settings(path: Path | str) -> ArchiveSettings:
    """Load settings from JSON, overlaying stored values on the defaults.

    A missing, unreadable or corrupt file yields the defaults.
    """
    settings = ArchiveSettings()
    path = Path(path)
    if not path.exists():
        return settings

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        logger.warning("Ignoring unreadable settings file %s: %s", path, e)
        return settings

    if not isinstance(data, dict):
        logger.warning("Ignoring settings file %s: expected a JSON object", path)
        return settings

    for key, valid in _VALIDATORS.items():
        if key not in data:
            continue
        if not valid(data[key]):
            logger.warning("Ignoring invalid %r in settings file %s: %r", key, path, data[key])
            continue
        setattr(settings, key, data[key])
    return settings


def save_settings(settings: ArchiveSettings, path: Path | str) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(settings.to_dict(), f, indent=2)
    logger.debug("Saved settings to %s", path)


class SettingsStore:
    """Settings bound to the file they are saved to."""

    def __init__(self, path: Path | str):
        self.path = Path(path)
        self.settings = load_settings(self.path)

    def save(self) -> None:
        save_settings(self.settings, self.path)

    def reload(self) -> None:
        """Re-read the file, updating the current record in place."""
        fresh = load_settings(self.path)
        for f in fields(ArchiveSettings):
            setattr(self.settings, f.name, getattr(fresh, f.name))

    def set_flags(self, value: str) -> None:
        """Replace the flags from their space-separated form and save."""
        self.settings.cli_opts = value.split(" ")
        self.save()

    def set_output_path(self, value: str) -> None:
        """Set the output folder; only existing directories are saved."""
        path = Path(value).expanduser() if value else None
        if path is None or not path.is_dir():
            raise InvalidOutputPathError("Invalid path will not be saved.")
        self.settings.output_path = str(path.resolve())
        self.save()
