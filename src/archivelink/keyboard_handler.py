"""Keyboard handler for archivelink"""

import logging
import subprocess

from pynput import keyboard
from pynput.keyboard import Key

from .config import config

logger = logging.getLogger(__name__)

_MODIFIERS = {
    "alt": (Key.alt, Key.alt_l, Key.alt_r),
    "ctrl": (Key.ctrl, Key.ctrl_l, Key.ctrl_r),
    "shift": (Key.shift, Key.shift_l, Key.shift_r),
    "super": (Key.cmd, Key.cmd_l, Key.cmd_r),
}


class KeyboardHandler:
    """Handle the archive hotkey and text insertion"""

    def __init__(self, on_hotkey_callback):
        self.on_hotkey = on_hotkey_callback
        self.listener = None
        self.pressed_keys = set()
        self.hotkey_active = False

    def start(self):
        """Start keyboard listener"""
        self.listener = keyboard.Listener(on_press=self._on_press, on_release=self._on_release)
        self.listener.start()

    def stop(self):
        """Stop keyboard listener"""
        if self.listener:
            self.listener.stop()

    def _on_press(self, key):
        if hasattr(key, "char") and key.char:
            self.pressed_keys.add(key.char.lower())
        else:
            self.pressed_keys.add(key)

        # Trigger once per press
        if self._is_hotkey_pressed() and not self.hotkey_active:
            self.hotkey_active = True
            if self.on_hotkey:
                self.on_hotkey()

    def _on_release(self, key):
        if hasattr(key, "char") and key.char:
            self.pressed_keys.discard(key.char.lower())
        else:
            self.pressed_keys.discard(key)

        if key in _modifier_keys():
            self.hotkey_active = False

    def _is_hotkey_pressed(self) -> bool:
        mod = config.HOTKEY_MODIFIER.lower().split("_")[0]
        modifier_keys = _MODIFIERS.get(mod, ())
        if modifier_keys and not any(k in self.pressed_keys for k in modifier_keys):
            return False
        return config.HOTKEY_KEY.lower() in self.pressed_keys

    @staticmethod
    def insert_text(text: str) -> bool:
        """Type text at the cursor using xdotool, replacing any selection"""
        if not text:
            return False
        try:
            result = subprocess.run(["xdotool", "type", "--", text], timeout=10)
        except (FileNotFoundError, subprocess.TimeoutExpired) as e:
            logger.error("Could not type text with xdotool: %s", e)
            return False
        return result.returncode == 0


def _modifier_keys() -> tuple:
    return tuple(k for keys in _MODIFIERS.values() for k in keys)
