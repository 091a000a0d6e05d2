"""Action kinds and action directions named in the configuration."""

from __future__ import annotations

from enum import Enum

__all__ = [
    "ActionDirection",
    "ActionType",
    "action_direction_from_str",
    "action_type_to_str",
    "action_type_from_str",
]


class ActionDirection(Enum):
    """Direction setting of an action."""

    UNKNOWN = 0
    UP = 1
    DOWN = 2
    LEFT = 3
    RIGHT = 4
    PREVIOUS = 5
    NEXT = 6
    AUTO = 7


class ActionType(Enum):
    """Kind of action a gesture can trigger."""

    NOT_SUPPORTED = 0
    MAXIMIZE_RESTORE_WINDOW = 1
    FULLSCREEN_WINDOW = 2
    MINIMIZE_WINDOW = 3
    TILE_WINDOW = 4
    CLOSE_WINDOW = 5
    CHANGE_DESKTOP = 6
    SHOW_DESKTOP = 7
    SEND_KEYS = 8
    RUN_COMMAND = 9
    MOUSE_CLICK = 10


_DIRECTIONS_BY_NAME = {
    direction.name.lower(): direction
    for direction in ActionDirection
    if direction is not ActionDirection.UNKNOWN
}

_TYPES_BY_NAME = {
    action_type.name: action_type
    for action_type in ActionType
    if action_type is not ActionType.NOT_SUPPORTED
}


def action_direction_from_str(text: str) -> ActionDirection:
    """Parse a lower-case action direction; unknown text gives ``UNKNOWN``."""
    return _DIRECTIONS_BY_NAME.get(text, ActionDirection.UNKNOWN)


def action_type_to_str(action_type: ActionType) -> str:
    """Return the configuration name of an action type."""
    if isinstance(action_type, ActionType):
        return action_type.name
    return ActionType.NOT_SUPPORTED.name


def action_type_from_str(text: str) -> ActionType:
    """Parse an action type; unknown text gives ``NOT_SUPPORTED``."""
    return _TYPES_BY_NAME.get(text, ActionType.NOT_SUPPORTED)