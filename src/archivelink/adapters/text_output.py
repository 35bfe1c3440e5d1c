"""Text output adapters."""

from __future__ import annotations

from typing import Callable


class TypingOutputAdapter:
    def __init__(self, insert_fn: Callable[[str], bool]):
        self._insert_fn = insert_fn

    def output(self, text: str) -> None:
        if not self._insert_fn(text):
            raise RuntimeError("Could not insert archived link")


class BufferOutputAdapter:
    """Collects output for callers that write it themselves (e.g. stdout)."""

    def __init__(self):
        self.text: str | None = None

    def output(self, text: str) -> None:
        self.text = text
