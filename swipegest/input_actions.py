"""Actions that emulate input or run commands."""

from __future__ import annotations

import logging
import subprocess
from typing import List

from swipegest.action import Action, RepeatedAction
from swipegest.gesture import Gesture

__all__ = ["MouseClick", "RunCommand", "SendKeys"]

_log = logging.getLogger(__name__)


def _split_keys(text: str) -> List[str]:
    """Split a ``+``-separated key list, dropping a trailing empty item."""
    if not text:
        return []
    parts = text.split("+")
    if parts[-1] == "":
        parts.pop()
    return parts


class MouseClick(Action):
    """Emulate a mouse click when the gesture begins or ends."""

    def __init__(self, settings, window_system, window, config) -> None:
        super().__init__(settings, window_system, window, config)
        self.button = 1
        self.on_begin = True

    def run_on_system_windows(self) -> bool:
        return True

    def on_gesture_begin(self, gesture: Gesture) -> None:
        if "button" in self.settings:
            self.button = int(self.settings["button"])
        if "on" in self.settings:
            self.on_begin = self.settings["on"] == "begin"
        if self.on_begin:
            self.window_system.send_mouse_click(self.button)

    def on_gesture_update(self, gesture: Gesture) -> None:
        """Clicks happen only on begin or end."""

    def on_gesture_end(self, gesture: Gesture) -> None:
        if not self.on_begin:
            self.window_system.send_mouse_click(self.button)


class RunCommand(RepeatedAction):
    """Run a shell command, and another one when the gesture moves back."""

    def __init__(self, settings, window_system, window, config) -> None:
        super().__init__(settings, window_system, window, config)
        self.command = ""
        self.decrease_command = ""

    def run_on_system_windows(self) -> bool:
        return True

    def execute_prelude(self) -> None:
        if "command" in self.settings:
            self.command = self.settings["command"]
        if "decreaseCommand" in self.settings:
            self.decrease_command = self.settings["decreaseCommand"]

    def execute_action(self, gesture: Gesture) -> None:
        self._run_command(self.command)

    def execute_reverse(self, gesture: Gesture) -> None:
        self._run_command(self.decrease_command)

    @staticmethod
    def _run_command(command: str) -> bool:
        try:
            completed = subprocess.run(command, shell=True, check=False)
        except OSError as exc:
            _log.error("Error running command %r: %s", command, exc)
            return False
        return completed.returncode == 0


class SendKeys(RepeatedAction):
    """Emulate a keyboard shortcut on the window under the pointer."""

    def __init__(self, settings, window_system, window, config) -> None:
        super().__init__(settings, window_system, window, config)
        self.modifiers: List[str] = []
        self.keys: List[str] = []
        self.decrease_keys: List[str] = []

    def run_on_system_windows(self) -> bool:
        return True

    def execute_prelude(self) -> None:
        if "modifiers" in self.settings:
            self.modifiers = _split_keys(self.settings["modifiers"])
        if "keys" in self.settings:
            self.keys = _split_keys(self.settings["keys"])
        if "decreaseKeys" in self.settings:
            self.decrease_keys = _split_keys(self.settings["decreaseKeys"])

        # Only the active window receives shortcuts
        if not self.window_system.is_system_window(self.window):
            self.window_system.activate_window(self.window)

        self.window_system.send_keys(self.modifiers, True)

    def execute_postlude(self) -> None:
        self.window_system.send_keys(self.modifiers, False)

    def execute_action(self, gesture: Gesture) -> None:
        self.window_system.send_keys(self.keys, True)
        self.window_system.send_keys(self.keys, False)

    def execute_reverse(self, gesture: Gesture) -> None:
        self.window_system.send_keys(self.decrease_keys, True)
        self.window_system.send_keys(self.decrease_keys, False)