"""Base classes shared by every action a gesture can trigger."""

from __future__ import annotations

import logging
import re
from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional

from swipegest.config import Config
from swipegest.gesture import Gesture

__all__ = ["Action", "AnimatedAction", "RepeatedAction", "read_threshold"]

_log = logging.getLogger(__name__)

_DEFAULT_THRESHOLD = 20
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_REPEAT_STEP = 10


def read_threshold(config: Config) -> int:
    """Read ``action_execute_threshold``, defaulting to 20, clamped to 0..100."""
    threshold = _DEFAULT_THRESHOLD
    try:
        raw = config.get_global_setting("action_execute_threshold")
        match = _LEADING_INT.match(raw)
        if match is None:
            raise ValueError(f"invalid number {raw!r}")
        threshold = int(match.group(1))
    except (KeyError, ValueError) as exc:
        _log.error("Bad action_execute_threshold value: %s", exc)
    return max(0, min(threshold, 100))


class Action(ABC):
    """Base class for all actions.

    ``window_system`` gives access to the desktop and ``window`` is the window
    the gesture was performed on.
    """

    def __init__(
        self,
        settings: Mapping[str, str],
        window_system: Any,
        window: Any,
        config: Config,
    ) -> None:
        self.settings = dict(settings)
        self.window_system = window_system
        self.window = window
        self.config = config
        self.threshold = read_threshold(config)

    @abstractmethod
    def run_on_system_windows(self) -> bool:
        """Whether the action may run on docks, panels, the desktop, etc."""

    @abstractmethod
    def on_gesture_begin(self, gesture: Gesture) -> None:
        """Called when the gesture starts."""

    @abstractmethod
    def on_gesture_update(self, gesture: Gesture) -> None:
        """Called while the gesture progresses."""

    @abstractmethod
    def on_gesture_end(self, gesture: Gesture) -> None:
        """Called when the gesture finishes."""


class AnimatedAction(Action):
    """Action that shows an animation and runs once the threshold is passed.

    Subclasses set ``self.animation`` in ``on_gesture_begin``.
    """

    def __init__(
        self,
        settings: Mapping[str, str],
        window_system: Any,
        window: Any,
        config: Config,
    ) -> None:
        super().__init__(settings, window_system, window, config)
        self.animation: Optional[Any] = None
        self.animate = True
        self.color: Optional[str] = None
        self.border_color: Optional[str] = None
        self.animation_delay = int(config.get_global_setting("animation_delay"))

        if "animate" in self.settings:
            self.animate = self.settings["animate"] == "true"

        if self.animate:
            color = config.get_global_setting("color") if config.has_global_setting("color") else ""
            border = (
                config.get_global_setting("borderColor")
                if config.has_global_setting("borderColor")
                else ""
            )
            color = self.settings.get("color", color)
            border = self.settings.get("borderColor", border)
            if color:
                self.color = color
            if border:
                self.border_color = border

    def on_gesture_update(self, gesture: Gesture) -> None:
        if self.animation is not None and gesture.elapsed_time > self.animation_delay:
            self.animation.on_update(gesture.percentage)

    def on_gesture_end(self, gesture: Gesture) -> None:
        if not self.animate or gesture.percentage >= self.threshold:
            self.execute_action(gesture)

    @abstractmethod
    def execute_action(self, gesture: Gesture) -> None:
        """Perform the action."""


class RepeatedAction(Action):
    """Action run once, on begin or on end, or repeatedly as the gesture moves."""

    def __init__(
        self,
        settings: Mapping[str, str],
        window_system: Any,
        window: Any,
        config: Config,
    ) -> None:
        super().__init__(settings, window_system, window, config)
        self.repeat = False
        self.repeat_percentage = 0
        self.on_begin = True

    def on_gesture_begin(self, gesture: Gesture) -> None:
        if "repeat" in self.settings:
            self.repeat = self.settings["repeat"] == "true"
        if "on" in self.settings:
            self.on_begin = self.settings["on"] == "begin"

        self.execute_prelude()

        if not self.repeat and self.on_begin:
            self.execute_action(gesture)

    def on_gesture_update(self, gesture: Gesture) -> None:
        if not self.repeat:
            return
        increased = gesture.percentage >= self.repeat_percentage + _REPEAT_STEP
        decreased = gesture.percentage <= self.repeat_percentage - _REPEAT_STEP

        if increased:
            self.execute_action(gesture)
            self.repeat_percentage += _REPEAT_STEP
        if decreased:
            self.execute_reverse(gesture)
            self.repeat_percentage -= _REPEAT_STEP

    def on_gesture_end(self, gesture: Gesture) -> None:
        if not self.repeat and not self.on_begin:
            if gesture.percentage >= self.threshold:
                self.execute_action(gesture)
        self.execute_postlude()

    def execute_prelude(self) -> None:
        """Run unconditionally when the gesture begins."""

    def execute_postlude(self) -> None:
        """Run unconditionally when the gesture ends."""

    @abstractmethod
    def execute_action(self, gesture: Gesture) -> None:
        """Perform the action."""

    @abstractmethod
    def execute_reverse(self, gesture: Gesture) -> None:
        """Perform the reverse action, when the gesture moves back."""