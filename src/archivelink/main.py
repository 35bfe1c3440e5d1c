#!/usr/bin/env python3
"""archivelink daemon: select a URL, press Alt+A, get a link to its archive"""

import logging
import signal
import threading

from .adapters.selection import PrimarySelectionAdapter
from .adapters.text_output import TypingOutputAdapter
from .adapters.ui_feedback import UIFeedbackAdapter
from .archiver import MonolithArchiver
from .config import config
from .core.controller import ArchiveController
from .keyboard_handler import KeyboardHandler
from .logging_utils import setup_logging
from .platform_utils import IS_WINDOWS
from .settings import SettingsStore
from .ui_feedback import notify

logger = logging.getLogger(__name__)


class ArchiveLink:
    """Main application - archive the selected URL on hotkey"""

    def __init__(self, store: SettingsStore | None = None):
        config.create_dirs()
        self.store = store or SettingsStore(config.SETTINGS_PATH)
        self.keyboard = KeyboardHandler(self.on_hotkey)
        self.controller = ArchiveController(
            selection=PrimarySelectionAdapter(),
            archiver=MonolithArchiver(),
            text_output=TypingOutputAdapter(KeyboardHandler.insert_text),
            ui=UIFeedbackAdapter(),
            settings=self.store.settings,
        )
        self.archive_thread = None
        self._shutdown_event = threading.Event()

    def on_hotkey(self):
        """Start an archive run unless one is in flight"""
        if self.archive_thread and self.archive_thread.is_alive():
            print("Archive already running")
            return
        self.archive_thread = threading.Thread(target=self._archive_selection, daemon=True)
        self.archive_thread.start()

    def _archive_selection(self):
        try:
            # Pick up changes made with `archivelink settings` since the last run
            self.store.reload()
            print("⏳ Archiving...")
            success, result = self.controller.run()
            if success:
                print(f"✓ {result.url} -> {result.output_path}/{result.output_file}")
            elif result is not None:
                print(f"✗ monolith exited with code {result.returncode}")
        except Exception as e:
            logger.exception("Archive failed")
            notify("❌ Error", str(e)[:50])

    def run(self):
        """Run the application"""
        hotkey = f"{config.HOTKEY_MODIFIER}+{config.HOTKEY_KEY}"
        print("\n" + "=" * 50)
        print("🗄 archivelink")
        print("=" * 50)
        print(f"Hotkey: {hotkey}")
        print(f"Output folder: {self.store.settings.output_path}")
        print(f"Flags: {self.store.settings.flags}")
        print("\nSelect a URL and press the hotkey to archive it")
        print("Press Ctrl+C to quit")
        print("=" * 50 + "\n")

        self.keyboard.start()
        notify("archivelink ready", f"Press {hotkey}")

        try:
            self._shutdown_event.wait()
        except KeyboardInterrupt:
            pass

        self.shutdown()

    def shutdown(self):
        """Clean shutdown"""
        print("\nShutting down...")
        self._shutdown_event.set()
        self.keyboard.stop()
        if self.archive_thread and self.archive_thread.is_alive():
            self.archive_thread.join()
        print("✓ Done")

    def request_shutdown(self):
        """Request application shutdown (thread-safe)"""
        self._shutdown_event.set()


def main(debug: bool = False):
    setup_logging(logging.DEBUG if debug or config.DEBUG else logging.INFO)
    app = ArchiveLink()

    def signal_handler(sig, frame):
        app.request_shutdown()

    signal.signal(signal.SIGINT, signal_handler)
    if not IS_WINDOWS:
        signal.signal(signal.SIGTERM, signal_handler)

    app.run()


if __name__ == "__main__":
    main()
