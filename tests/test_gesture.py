import dataclasses

import pytest

from swipegest.gesture import (
    DeviceType,
    Gesture,
    GestureDirection,
    GestureType,
    gesture_direction_from_str,
    gesture_direction_to_str,
    gesture_type_from_str,
    gesture_type_to_str,
)


def test_enum_values_fixed_by_wire_format():
    assert DeviceType(0) is DeviceType.UNKNOWN
    assert DeviceType(1) is DeviceType.TOUCHPAD
    assert DeviceType(2) is DeviceType.TOUCHSCREEN
    assert gesture_type_from_str("SWIPE") == 1
    assert gesture_type_from_str("TAP") == 3
    assert gesture_direction_from_str("IN") == 5
    assert gesture_direction_from_str("OUT") == 6


@pytest.mark.parametrize("direction", list(GestureDirection))
def test_direction_round_trip(direction):
    assert gesture_direction_from_str(gesture_direction_to_str(direction)) is direction


@pytest.mark.parametrize("text", ["UP", "DOWN", "LEFT", "RIGHT", "IN", "OUT"])
def test_direction_names(text):
    assert gesture_direction_to_str(gesture_direction_from_str(text)) == text


@pytest.mark.parametrize("text", ["up", "", "SIDEWAYS"])
def test_direction_unknown_text(text):
    assert gesture_direction_from_str(text) is GestureDirection.UNKNOWN


def test_direction_to_str_unknown():
    assert gesture_direction_to_str(GestureDirection.UNKNOWN) == "UNKNOWN"


@pytest.mark.parametrize("gesture_type", list(GestureType))
def test_type_round_trip(gesture_type):
    assert gesture_type_from_str(gesture_type_to_str(gesture_type)) is gesture_type


def test_drag_is_swipe():
    assert gesture_type_from_str("DRAG") is GestureType.SWIPE
    assert gesture_type_to_str(gesture_type_from_str("DRAG")) == "SWIPE"


@pytest.mark.parametrize("text", ["swipe", "ROTATE", ""])
def test_type_unsupported_text(text):
    assert gesture_type_from_str(text) is GestureType.NOT_SUPPORTED


def test_type_to_str_not_supported():
    assert gesture_type_to_str(GestureType.NOT_SUPPORTED) == "NOT_SUPPORTED"


def test_gesture_fields():
    gesture = Gesture(
        GestureType.PINCH, GestureDirection.IN, 42.5, 4, DeviceType.TOUCHSCREEN, 300
    )
    assert gesture.type is GestureType.PINCH
    assert gesture.direction is GestureDirection.IN
    assert gesture.percentage == 42.5
    assert gesture.fingers == 4
    assert gesture.performed_on_device_type is DeviceType.TOUCHSCREEN
    assert gesture.elapsed_time == 300


def test_gesture_is_immutable():
    gesture = Gesture(
        GestureType.SWIPE, GestureDirection.UP, 10.0, 3, DeviceType.TOUCHPAD, 5
    )
    with pytest.raises(dataclasses.FrozenInstanceError):
        gesture.fingers = 2
    assert gesture.fingers == 3