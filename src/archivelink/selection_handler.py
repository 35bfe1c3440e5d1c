"""Selection handler for archivelink - Read X11 PRIMARY selection

Provides access to the X11 PRIMARY selection (highlighted text) without
requiring Ctrl+C. Uses xclip for reliable cross-toolkit support.
"""

import logging
import subprocess

from .platform_utils import IS_LINUX

logger = logging.getLogger(__name__)


def _read_selection(selection: str) -> str | None:
    if not IS_LINUX:
        logger.debug("X11 selections only available on Linux")
        return None

    try:
        result = subprocess.run(
            ["xclip", "-selection", selection, "-o"],
            capture_output=True,
            text=True,
            timeout=2.0,
        )
    except FileNotFoundError:
        logger.warning("xclip not installed. Install with: sudo apt install xclip")
        return None
    except subprocess.TimeoutExpired:
        logger.debug("xclip timed out reading %s selection", selection)
        return None

    if result.returncode == 0 and result.stdout:
        return result.stdout.strip()
    return None


def get_primary_selection() -> str | None:
    """Get the currently selected text from X11 PRIMARY selection.

    On X11, highlighting text with the mouse copies it to the PRIMARY
    selection. This reads that selection without disturbing the clipboard.

    Returns:
        The selected text, or None if nothing is selected or on error.
    """
    return _read_selection("primary")


def has_selection() -> bool:
    selection = get_primary_selection()
    return selection is not None and len(selection) > 0


def get_clipboard() -> str | None:
    """Get text from the system clipboard (CLIPBOARD selection)."""
    return _read_selection("clipboard")
