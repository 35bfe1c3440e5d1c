"""Core ports (interfaces) for archivelink.

These protocols define the boundaries between the archive command and the
desktop/process adapters behind it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..archiver import ArchiveResult
    from ..settings import ArchiveSettings


@runtime_checkable
class SelectionSource(Protocol):
    """Where the user's selected text comes from."""

    def get_selection(self) -> str | None:
        """Return the selected text, or None when nothing is selected."""


@runtime_checkable
class Archiver(Protocol):
    """Saves a page for a URL."""

    def archive(self, url: str, settings: "ArchiveSettings") -> "ArchiveResult":
        """Archive url; the result reports success via its exit code."""


@runtime_checkable
class TextOutput(Protocol):
    """Replaces the selected range in the active document."""

    def output(self, text: str) -> None:
        """Emit text in place of the selection."""


@runtime_checkable
class UIFeedback(Protocol):
    """User-visible notifications."""

    def notify(self, title: str, message: str) -> None:
        """Display a notification."""
