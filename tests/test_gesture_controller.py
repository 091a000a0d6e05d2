import pytest

from swipegest.action_types import ActionType
from swipegest.animation import Rectangle
from swipegest.config import Config
from swipegest.gesture import DeviceType, Gesture, GestureDirection, GestureType
from swipegest.gesture_controller import GestureController, GestureControllerDelegate


class FakeWindowSystem:
    def __init__(self, class_name="Firefox", system_window=False):
        self.class_name = class_name
        self.system_window = system_window
        self.calls = []

    def get_window_under_cursor(self):
        return "win-1"

    def get_window_class_name(self, window):
        return self.class_name

    def is_system_window(self, window):
        return self.system_window

    def activate_window(self, window):
        self.calls.append(("activate", window))

    def send_keys(self, keys, press):
        self.calls.append(("keys", list(keys), press))

    def send_mouse_click(self, button):
        self.calls.append(("click", button))

    def create_surface(self):
        return None

    def get_desktop_workarea(self):
        return Rectangle(0, 0, 1920, 1080)

    def get_window_size(self, window):
        return Rectangle(100, 100, 800, 600)

    def minimize_window_icon_size(self, window):
        return Rectangle()

    def is_window_maximized(self, window):
        return False

    def maximize_or_restore_window(self, window):
        self.calls.append(("maximize", window))

    def close_window(self, window):
        self.calls.append(("close", window))


def make_gesture(percentage=50.0, fingers=3):
    return Gesture(
        GestureType.SWIPE, GestureDirection.UP, percentage, fingers, DeviceType.TOUCHPAD, 500
    )


def save(config, application, action_type, settings=None):
    config.save_gesture_config(
        application,
        GestureType.SWIPE,
        "3",
        GestureDirection.UP,
        action_type,
        settings or {},
    )


def test_delegate_is_abstract():
    with pytest.raises(TypeError):
        GestureControllerDelegate()


def test_global_action_runs():
    config = Config()
    save(config, "All", ActionType.MAXIMIZE_RESTORE_WINDOW)
    ws = FakeWindowSystem()
    controller = GestureController(config, ws)
    controller.on_gesture_begin(make_gesture(0))
    controller.on_gesture_update(make_gesture(50))
    controller.on_gesture_end(make_gesture(100))
    assert ws.calls == [("maximize", "win-1")]


def test_application_action_takes_precedence():
    config = Config()
    save(config, "All", ActionType.MAXIMIZE_RESTORE_WINDOW)
    save(config, "firefox", ActionType.CLOSE_WINDOW)
    ws = FakeWindowSystem(class_name="Firefox")
    controller = GestureController(config, ws)
    controller.on_gesture_begin(make_gesture(0))
    controller.on_gesture_end(make_gesture(100))
    assert ws.calls == [("close", "win-1")]


def test_no_configured_action_does_nothing():
    ws = FakeWindowSystem()
    controller = GestureController(Config(), ws)
    controller.on_gesture_begin(make_gesture(0))
    controller.on_gesture_update(make_gesture(50))
    controller.on_gesture_end(make_gesture(100))
    assert controller.execute_action is False
    assert ws.calls == []


def test_other_finger_count_is_not_matched():
    config = Config()
    save(config, "All", ActionType.CLOSE_WINDOW)
    ws = FakeWindowSystem()
    controller = GestureController(config, ws)
    controller.on_gesture_begin(make_gesture(0, fingers=4))
    controller.on_gesture_end(make_gesture(100, fingers=4))
    assert ws.calls == []


def test_window_action_skipped_on_system_window():
    config = Config()
    save(config, "All", ActionType.CLOSE_WINDOW)
    ws = FakeWindowSystem(system_window=True)
    controller = GestureController(config, ws)
    controller.on_gesture_begin(make_gesture(0))
    controller.on_gesture_end(make_gesture(100))
    assert ws.calls == []


def test_system_window_action_runs_on_system_window():
    config = Config()
    save(config, "All", ActionType.MOUSE_CLICK, {"button": "2"})
    ws = FakeWindowSystem(system_window=True)
    controller = GestureController(config, ws)
    controller.on_gesture_begin(make_gesture(0))
    controller.on_gesture_end(make_gesture(100))
    assert ws.calls == [("click", 2)]


def test_below_threshold_not_executed():
    config = Config()
    save(config, "All", ActionType.CLOSE_WINDOW)
    ws = FakeWindowSystem()
    controller = GestureController(config, ws)
    controller.on_gesture_begin(make_gesture(0))
    controller.on_gesture_end(make_gesture(5))
    assert ws.calls == []


def test_updates_are_forwarded_and_stop_after_end():
    config = Config()
    save(config, "All", ActionType.SEND_KEYS, {"keys": "a", "repeat": "true"})
    ws = FakeWindowSystem()
    controller = GestureController(config, ws)
    controller.on_gesture_begin(make_gesture(0))
    ws.calls.clear()
    controller.on_gesture_update(make_gesture(10))
    assert ws.calls == [("keys", ["a"], True), ("keys", ["a"], False)]
    controller.on_gesture_end(make_gesture(10))
    assert controller.action is None
    ws.calls.clear()
    controller.on_gesture_update(make_gesture(30))
    assert ws.calls == []