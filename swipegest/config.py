"""In-memory store of global settings and per-gesture action settings."""

from __future__ import annotations

from typing import Dict, Mapping, Tuple, Union

from swipegest.action_types import ActionType
from swipegest.gesture import GestureDirection, GestureType

__all__ = ["Config"]

_DEFAULT_GLOBAL_SETTINGS = {
    "animation_delay": "150",
    "action_execute_threshold": "20",
}

_Key = Tuple[str, int, str, int]


class Config:
    """Configuration store; loading from files is left to a loader."""

    def __init__(self) -> None:
        self._global_settings: Dict[str, str] = dict(_DEFAULT_GLOBAL_SETTINGS)
        self._gestures: Dict[_Key, Tuple[ActionType, Dict[str, str]]] = {}

    def clear(self) -> None:
        """Drop every setting and restore the default global settings."""
        self._global_settings = dict(_DEFAULT_GLOBAL_SETTINGS)
        self._gestures.clear()

    def save_global_setting(self, name: str, value: str) -> None:
        """Store a global setting, replacing any earlier value."""
        self._global_settings[name] = value

    def has_global_setting(self, name: str) -> bool:
        """Tell whether a global setting is set."""
        return name in self._global_settings

    def get_global_setting(self, name: str) -> str:
        """Return a global setting; raise ``KeyError`` if it is not set."""
        return self._global_settings[name]

    def save_gesture_config(
        self,
        application: str,
        gesture_type: GestureType,
        num_fingers: Union[str, int],
        gesture_direction: GestureDirection,
        action_type: ActionType,
        action_settings: Mapping[str, str],
    ) -> None:
        """Store the action configured for a gesture in an application."""
        key = self._key(application, gesture_type, num_fingers, gesture_direction)
        self._gestures[key] = (action_type, dict(action_settings))

    def has_gesture_config(
        self,
        application: str,
        gesture_type: GestureType,
        num_fingers: int,
        gesture_direction: GestureDirection,
    ) -> bool:
        """Tell whether an action is configured for the gesture."""
        key = self._key(application, gesture_type, num_fingers, gesture_direction)
        return key in self._gestures

    def get_gesture_config(
        self,
        application: str,
        gesture_type: GestureType,
        num_fingers: int,
        gesture_direction: GestureDirection,
    ) -> Tuple[ActionType, Dict[str, str]]:
        """Return the action type and a copy of its settings.

        Raises ``KeyError`` when nothing is configured for the gesture.
        """
        key = self._key(application, gesture_type, num_fingers, gesture_direction)
        action_type, settings = self._gestures[key]
        return action_type, dict(settings)

    @staticmethod
    def _key(
        application: str,
        gesture_type: GestureType,
        num_fingers: Union[str, int],
        gesture_direction: GestureDirection,
    ) -> _Key:
        return (
            application.lower(),
            int(gesture_type),
            str(num_fingers),
            int(gesture_direction),
        )