import pytest

from swipegest.action_factory import build_action
from swipegest.action_types import ActionType
from swipegest.config import Config
from swipegest.input_actions import MouseClick, RunCommand, SendKeys
from swipegest.window_actions import (
    ChangeDesktop,
    CloseWindow,
    FullscreenWindow,
    MaximizeRestoreWindow,
    MinimizeWindow,
    ShowDesktop,
    TileWindow,
)


@pytest.mark.parametrize(
    "action_type, expected",
    [
        (ActionType.MAXIMIZE_RESTORE_WINDOW, MaximizeRestoreWindow),
        (ActionType.FULLSCREEN_WINDOW, FullscreenWindow),
        (ActionType.MINIMIZE_WINDOW, MinimizeWindow),
        (ActionType.TILE_WINDOW, TileWindow),
        (ActionType.CLOSE_WINDOW, CloseWindow),
        (ActionType.CHANGE_DESKTOP, ChangeDesktop),
        (ActionType.SHOW_DESKTOP, ShowDesktop),
        (ActionType.SEND_KEYS, SendKeys),
        (ActionType.RUN_COMMAND, RunCommand),
        (ActionType.MOUSE_CLICK, MouseClick),
    ],
)
def test_builds_matching_class(action_type, expected):
    action = build_action(action_type, {"animate": "false"}, object(), "win", Config())
    assert type(action) is expected


def test_not_supported_gives_none():
    assert build_action(ActionType.NOT_SUPPORTED, {}, object(), "win", Config()) is None


def test_action_receives_settings_window_and_threshold():
    config = Config()
    config.save_global_setting("action_execute_threshold", "35")
    ws = object()
    settings = {"keys": "a"}
    action = build_action(ActionType.SEND_KEYS, settings, ws, "win", config)
    assert action.settings == settings
    assert action.window_system is ws
    assert action.window == "win"
    assert action.threshold == 35


def test_settings_are_copied():
    settings = {"keys": "a"}
    action = build_action(ActionType.SEND_KEYS, settings, object(), "win", Config())
    settings["keys"] = "b"
    assert action.settings == {"keys": "a"}