"""Selection source adapters."""

from __future__ import annotations

from ..selection_handler import get_primary_selection


class PrimarySelectionAdapter:
    def get_selection(self) -> str | None:
        return get_primary_selection()


class StaticSelectionAdapter:
    """Selection handed over up front (stdin, command-line argument)."""

    def __init__(self, text: str | None):
        self._text = text

    def get_selection(self) -> str | None:
        return self._text
