"""Core orchestration for archivelink.

Keeps the read selection -> validate -> archive -> insert link pipeline in one
place, decoupled from xclip/monolith/xdotool via ports.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..exceptions import InvalidURLError
from ..links import parse_url, replacement_text
from .ports import Archiver, SelectionSource, TextOutput, UIFeedback
from .state_machine import SessionEvent, SessionStateMachine

if TYPE_CHECKING:
    from ..archiver import ArchiveResult
    from ..settings import ArchiveSettings

logger = logging.getLogger(__name__)

NOTICE_SUCCESS = "Link archived!"
NOTICE_FAILURE = "Archiving failed, check console."


class ArchiveController:
    """Runs the archive-link command once per invocation."""

    def __init__(
        self,
        selection: SelectionSource,
        archiver: Archiver,
        text_output: TextOutput,
        ui: UIFeedback,
        settings: ArchiveSettings,
    ):
        self._selection = selection
        self._archiver = archiver
        self._text_output = text_output
        self._ui = ui
        self._settings = settings
        self._state = SessionStateMachine()

    @property
    def state(self):
        return self._state.state

    def can_run(self, selection: str | None = None) -> bool:
        """Whether the command applies: the selection must be a URL."""
        if selection is None:
            selection = self._selection.get_selection()
        try:
            parse_url(selection)
        except InvalidURLError:
            return False
        return True

    def run(self, selection: str | None = None) -> tuple[bool, ArchiveResult | None]:
        """Archive the selected URL and replace the selection with a link.

        Args:
            selection: Text to use instead of reading the selection source.

        Returns:
            (success, result); result is None when nothing was archived.
        """
        if self._state.busy:
            logger.warning("Archive already in progress, ignoring request")
            return False, None

        if selection is None:
            selection = self._selection.get_selection()

        try:
            url = parse_url(selection)
        except InvalidURLError as e:
            logger.info("%s", e)
            self._ui.notify("⚠ No URL selected", "Select a URL to archive")
            return False, None

        self._state.transition(SessionEvent.START)
        result = self._archiver.archive(url, self._settings)

        if not result.success:
            self._ui.notify("❌ Archive", NOTICE_FAILURE)
            self._state.transition(SessionEvent.ERROR)
            self._state.transition(SessionEvent.RESET)
            return False, result

        self._state.transition(SessionEvent.ARCHIVE_DONE)
        try:
            self._text_output.output(replacement_text(result.url, result.anchor))
        except Exception:
            self._state.transition(SessionEvent.ERROR)
            self._state.transition(SessionEvent.RESET)
            raise
        self._state.transition(SessionEvent.INSERT_DONE)

        self._ui.notify("✓ Archive", NOTICE_SUCCESS)
        return True, result
