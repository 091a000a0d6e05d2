"""Dispatch gestures to the actions configured for them."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Optional

from swipegest.action import Action
from swipegest.action_factory import build_action
from swipegest.config import Config
from swipegest.gesture import Gesture, gesture_direction_to_str, gesture_type_to_str

__all__ = ["GestureControllerDelegate", "GestureController"]

_log = logging.getLogger(__name__)

_GLOBAL_APPLICATION = "All"


class GestureControllerDelegate(ABC):
    """Receiver of gesture events."""

    @abstractmethod
    def on_gesture_begin(self, gesture: Gesture) -> None:
        """A gesture started."""

    @abstractmethod
    def on_gesture_update(self, gesture: Gesture) -> None:
        """A gesture progressed."""

    @abstractmethod
    def on_gesture_end(self, gesture: Gesture) -> None:
        """A gesture finished."""


class GestureController(GestureControllerDelegate):
    """Run the configured action for each gesture received."""

    def __init__(self, config: Config, window_system: Any) -> None:
        self.config = config
        self.window_system = window_system
        self.action: Optional[Action] = None
        self.window: Any = None
        self.execute_action = False

    def on_gesture_begin(self, gesture: Gesture) -> None:
        _log.debug(
            "Gesture begin detected: fingers=%s type=%s direction=%s",
            gesture.fingers,
            gesture_type_to_str(gesture.type),
            gesture_direction_to_str(gesture.direction),
        )

        self.window = self.window_system.get_window_under_cursor()
        self.action = self._action_for_gesture(gesture, self.window)

        is_system_window = bool(self.window_system.is_system_window(self.window))
        self.execute_action = self.action is not None and (
            not is_system_window or self.action.run_on_system_windows()
        )

        if not self.execute_action:
            _log.debug(
                "Ignoring this gesture: no action is configured, the action is "
                "not supported or it was performed on a system window"
            )
            return

        _log.debug("Starting action")
        self.action.on_gesture_begin(gesture)

    def on_gesture_update(self, gesture: Gesture) -> None:
        if self.execute_action and self.action is not None:
            _log.debug("Gesture update detected (%s%%)", gesture.percentage)
            self.action.on_gesture_update(gesture)

    def on_gesture_end(self, gesture: Gesture) -> None:
        if self.execute_action and self.action is not None:
            _log.debug("Gesture end detected")
            self.action.on_gesture_end(gesture)
        self.action = None
        self.execute_action = False

    def _action_for_gesture(self, gesture: Gesture, window: Any) -> Optional[Action]:
        application = self.window_system.get_window_class_name(window)
        _log.debug("Gesture performed on app: %s", application)
        key = (gesture.type, gesture.fingers, gesture.direction)

        if not self.config.has_gesture_config(application, *key):
            application = _GLOBAL_APPLICATION
            if not self.config.has_gesture_config(application, *key):
                _log.debug("No action configured for this gesture")
                return None

        action_type, settings = self.config.get_gesture_config(application, *key)
        return build_action(action_type, settings, self.window_system, window, self.config)