"""Gesture description: type, direction, device and progress."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

__all__ = [
    "DeviceType",
    "GestureDirection",
    "GestureType",
    "Gesture",
    "gesture_direction_to_str",
    "gesture_direction_from_str",
    "gesture_type_to_str",
    "gesture_type_from_str",
]


class DeviceType(IntEnum):
    """Kind of device a gesture was performed on."""

    UNKNOWN = 0
    TOUCHPAD = 1
    TOUCHSCREEN = 2


class GestureDirection(IntEnum):
    """Direction of a gesture."""

    # A gesture may have an unknown direction until more information arrives
    UNKNOWN = 0
    # Swipe directions
    UP = 1
    DOWN = 2
    LEFT = 3
    RIGHT = 4
    # Pinch directions
    IN = 5
    OUT = 6


class GestureType(IntEnum):
    """Kind of gesture."""

    NOT_SUPPORTED = 0
    SWIPE = 1
    PINCH = 2
    TAP = 3


_DIRECTIONS_BY_NAME = {
    direction.name: direction
    for direction in GestureDirection
    if direction is not GestureDirection.UNKNOWN
}

_TYPES_BY_NAME = {
    "SWIPE": GestureType.SWIPE,
    # "DRAG" is accepted for compatibility with older configuration files
    "DRAG": GestureType.SWIPE,
    "PINCH": GestureType.PINCH,
    "TAP": GestureType.TAP,
}


def gesture_direction_to_str(direction: GestureDirection) -> str:
    """Return the configuration name of a gesture direction."""
    try:
        return GestureDirection(direction).name
    except ValueError:
        return "UNKNOWN"


def gesture_direction_from_str(text: str) -> GestureDirection:
    """Parse a gesture direction; unknown text gives ``UNKNOWN``."""
    return _DIRECTIONS_BY_NAME.get(text, GestureDirection.UNKNOWN)


def gesture_type_to_str(gesture_type: GestureType) -> str:
    """Return the configuration name of a gesture type."""
    try:
        return GestureType(gesture_type).name
    except ValueError:
        return "NOT_SUPPORTED"


def gesture_type_from_str(text: str) -> GestureType:
    """Parse a gesture type; unknown text gives ``NOT_SUPPORTED``."""
    return _TYPES_BY_NAME.get(text, GestureType.NOT_SUPPORTED)


@dataclass(frozen=True)
class Gesture:
    """A gesture as reported by the input backend.

    ``percentage`` runs from 0 to 100 and ``elapsed_time`` is in milliseconds
    since the gesture began.
    """

    type: GestureType
    direction: GestureDirection
    percentage: float
    fingers: int
    performed_on_device_type: DeviceType
    elapsed_time: int